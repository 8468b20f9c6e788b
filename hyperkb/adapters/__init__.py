"""
hyperkb Adapters

Adapters move atoms between an AtomSpace and documents.

Available adapters:
    - SnapshotAdapter: AtomSpace.export() snapshots as JSON or YAML (dump and load)
    - FactsAdapter: hand-written facts in a compact YAML/JSON notation

Usage:
    from hyperkb.adapters import FactsAdapter, SnapshotAdapter

    space = FactsAdapter().parse_to_space("animals.yaml")
    SnapshotAdapter().dump(space, "animals.snapshot.json")
"""

from .base import AdapterError, BaseAdapter, FileAdapter, DocumentAdapter
from .snapshot import SnapshotAdapter, SnapshotError
from .facts import FactsAdapter, FactsError

__all__ = [
    # Base classes
    "AdapterError",
    "BaseAdapter",
    "FileAdapter",
    "DocumentAdapter",

    # Formats
    "SnapshotAdapter",
    "SnapshotError",
    "FactsAdapter",
    "FactsError",
]

# Convenience mapping
ADAPTERS = {
    "snapshot": SnapshotAdapter,
    "export": SnapshotAdapter,
    "facts": FactsAdapter,
}


def get_adapter(name: str) -> type:
    """
    Get adapter class by name.

    Args:
        name: Adapter name ("snapshot", "export" or "facts")

    Returns:
        Adapter class

    Example:
        AdapterClass = get_adapter("facts")
        space = AdapterClass().parse_to_space("facts.yaml")
    """
    name_lower = name.lower()
    if name_lower not in ADAPTERS:
        raise AdapterError(f"Unknown adapter: {name}. Available: {list(ADAPTERS.keys())}")
    return ADAPTERS[name_lower]
