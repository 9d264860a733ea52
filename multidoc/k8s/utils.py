"""Shared accessors for decoded K8s manifests.

Manifests are plain mappings as produced by the loaders; missing, null or
malformed (non-mapping) sections read as empty.
"""

from typing import Any, Dict, Mapping, Optional


def _section(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def get_annotations(manifest: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Extract metadata.annotations from a manifest.

    Args:
        manifest: Kubernetes manifest dict (may be None)

    Returns:
        Annotations dict, empty if not set
    """
    metadata = _section(_section(manifest).get("metadata"))
    return dict(_section(metadata.get("annotations")))


def get_secret_data(manifest: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Extract the data section of a Secret manifest."""
    return dict(_section(_section(manifest).get("data")))
