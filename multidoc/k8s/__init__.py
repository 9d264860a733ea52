"""Kubernetes helpers for decoded manifests.

This module provides K8s-specific helpers on top of the multi-document
loaders:
- Change predicates: decide whether an object event is worth reconciling
- Well-known annotation keys
"""

from multidoc.k8s.predicates import (
    AnnotationChangedPredicate,
    CreateEvent,
    DeleteEvent,
    GenericEvent,
    SecretDataChangedPredicate,
    UpdateEvent,
    values_change_in_map,
)

__all__ = [
    "AnnotationChangedPredicate",
    "SecretDataChangedPredicate",
    "CreateEvent",
    "UpdateEvent",
    "DeleteEvent",
    "GenericEvent",
    "values_change_in_map",
]
