"""Event predicates for K8s objects.

Predicates decide whether an object event (create, update, delete or
generic) should trigger further processing. Objects are decoded manifests,
for example values returned by ``load_multi_yaml_or_json``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

from multidoc.k8s.utils import get_annotations, get_secret_data

logger = logging.getLogger(__name__)

Manifest = Mapping[str, Any]


@dataclass(frozen=True)
class CreateEvent:
    """An object was created."""
    object: Optional[Manifest]


@dataclass(frozen=True)
class UpdateEvent:
    """An object changed from object_old to object_new."""
    object_old: Optional[Manifest]
    object_new: Optional[Manifest]


@dataclass(frozen=True)
class DeleteEvent:
    """An object was deleted."""
    object: Optional[Manifest]


@dataclass(frozen=True)
class GenericEvent:
    """An event from an external source."""
    object: Optional[Manifest]


def values_change_in_map(
    keys: Iterable[str],
    old: Optional[Mapping[str, str]],
    new: Optional[Mapping[str, str]],
) -> bool:
    """Check whether any of keys has a different value in old and new.

    A missing map or key reads as the empty string.

    Example:
        >>> values_change_in_map(["a"], {"a": "1"}, {"a": "2"})
        True
        >>> values_change_in_map(["a"], {"b": "1"}, None)
        False
    """
    old = old or {}
    new = new or {}
    return any(old.get(key, "") != new.get(key, "") for key in keys)


class SecretDataChangedPredicate:
    """Pass Secret updates only when their data changed.

    Create, delete and generic events always pass.
    """

    def create(self, event: CreateEvent) -> bool:
        return True

    def delete(self, event: DeleteEvent) -> bool:
        return True

    def generic(self, event: GenericEvent) -> bool:
        return True

    def update(self, event: UpdateEvent) -> bool:
        if event.object_old is None or event.object_new is None:
            return False
        return get_secret_data(event.object_old) != get_secret_data(event.object_new)


class AnnotationChangedPredicate:
    """Pass events that change annotations.

    With no keys, every create, delete and generic event passes and an
    update passes when the annotations differ at all. With keys, only
    changes to those annotation keys count; a create is compared against
    no annotations, delete and generic events compare the object's
    annotations against none.

    Attributes:
        keys: Annotation keys to watch; empty means all annotations

    Example:
        >>> pred = AnnotationChangedPredicate(keys=["cpaas.io/displayName"])
        >>> pred.update(UpdateEvent(old_pod, new_pod))
    """

    def __init__(self, keys: Iterable[str] = ()):
        self.keys: Tuple[str, ...] = tuple(keys)

    def create(self, event: CreateEvent) -> bool:
        if not self.keys:
            return True
        return values_change_in_map(self.keys, None, get_annotations(event.object))

    def delete(self, event: DeleteEvent) -> bool:
        if not self.keys:
            return True
        return values_change_in_map(self.keys, get_annotations(event.object), None)

    def generic(self, event: GenericEvent) -> bool:
        if not self.keys:
            return True
        return values_change_in_map(self.keys, get_annotations(event.object), None)

    def update(self, event: UpdateEvent) -> bool:
        if event.object_old is None:
            logger.debug("Update event has no old object")
            return False
        if event.object_new is None:
            logger.debug("Update event has no new object")
            return False

        old = get_annotations(event.object_old)
        new = get_annotations(event.object_new)
        if not self.keys:
            return old != new
        return values_change_in_map(self.keys, old, new)
