"""
Snapshot Adapter for hyperkb

Writes AtomSpace.export() to JSON or YAML and reads it back:

    {"nodes": [{"type": "ConceptNode", "name": "Cat", "id": "...",
                "tv": {"strength": 1.0, "confidence": 1.0}}],
     "links": [{"type": "InheritanceLink", "id": "...",
                "outgoing": ["<child id>", "<child id>"],
                "tv": {...}}]}

Loading rebuilds the ground graph. Atoms get fresh ids; id_map records
snapshot id -> new id for the most recent parse. Records flagged
"detached" are link children that were not stored in the exported space;
they are rebuilt as children but not inserted.

Usage:
    adapter = SnapshotAdapter()
    adapter.dump(space, "kb.yaml")
    restored = SnapshotAdapter().load("kb.yaml")
"""

from typing import Any, Dict, List, Optional, Union
from pathlib import Path
import json
import logging

import yaml

from .base import AdapterError, DocumentAdapter
from hyperkb.core import Atom, AtomSpace, Link, Node, TruthValue, ValidationError


_log = logging.getLogger(__name__)


class SnapshotError(AdapterError):
    """Raised when a snapshot is malformed or references unknown ids."""
    pass


class SnapshotAdapter(DocumentAdapter):
    """Adapter for exported AtomSpace snapshots."""

    FORMAT_NAME = "snapshot"

    def __init__(self, space: Optional[AtomSpace] = None):
        super().__init__(space)
        self.id_map: Dict[str, str] = {}
        self._built: Dict[str, Atom] = {}

    @staticmethod
    def _truth_value(record: Dict[str, Any]) -> Optional[TruthValue]:
        if "tv" not in record:
            return None
        return TruthValue.from_dict(record["tv"])

    def parse(self, source: Any) -> List[Atom]:
        """
        Rebuild atoms from a snapshot; links come after their children.

        Detached records are built as link children only and are not
        part of the returned list.
        """
        data = self.load_document(source)
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a mapping with 'nodes' and 'links'")
        node_records = data.get("nodes") or []
        link_records = data.get("links") or []
        if not isinstance(node_records, list) or not isinstance(link_records, list):
            raise SnapshotError("'nodes' and 'links' must be lists")

        by_id: Dict[str, Atom] = {}
        atoms: List[Atom] = []
        try:
            for record in node_records:
                node = Node(record["type"], record["name"], self._truth_value(record))
                by_id[record["id"]] = node
                if not record.get("detached"):
                    atoms.append(node)

            # links may be listed before the links they contain
            pending = list(link_records)
            while pending:
                waiting = []
                for record in pending:
                    children = [by_id.get(child_id) for child_id in record["outgoing"]]
                    if any(child is None for child in children):
                        waiting.append(record)
                        continue
                    link = Link(record["type"], children, self._truth_value(record))
                    by_id[record["id"]] = link
                    if not record.get("detached"):
                        atoms.append(link)
                if len(waiting) == len(pending):
                    missing = sorted({
                        child_id for record in waiting
                        for child_id in record["outgoing"] if child_id not in by_id
                    })
                    raise SnapshotError(f"Links reference unknown ids: {missing}")
                pending = waiting
        except (KeyError, TypeError) as e:
            raise SnapshotError(f"Malformed snapshot record: {e!r}") from e
        except SnapshotError:
            raise
        except ValidationError as e:
            raise SnapshotError(f"Invalid atom in snapshot: {e}") from e

        self._built = by_id
        self.id_map = {old: atom.id for old, atom in by_id.items()}
        return atoms

    def load(self, source: Any) -> AtomSpace:
        """Parse a snapshot into this adapter's space."""
        space = self.parse_to_space(source)
        # an atom equal to one already in the space was merged into it;
        # detached atoms keep their own id
        id_map = {}
        for old, atom in self._built.items():
            stored = space.find(atom)
            id_map[old] = stored.id if stored is not None else atom.id
        self.id_map = id_map
        return space

    def dumps(self, space: AtomSpace, fmt: str = "json") -> str:
        """Serialize a space's snapshot as "json" or "yaml"."""
        data = space.export()
        if fmt == "json":
            return json.dumps(data, indent=2)
        if fmt == "yaml":
            return yaml.safe_dump(data, sort_keys=False)
        raise SnapshotError(f"Unknown snapshot format: {fmt}")

    def dump(self, space: AtomSpace, path: Union[str, Path]) -> Path:
        """Write a snapshot; the suffix (.json, .yaml, .yml) picks the format."""
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in self.SUPPORTED_EXTENSIONS:
            raise SnapshotError(f"Unsupported snapshot file: {path.name}")
        fmt = "json" if suffix == ".json" else "yaml"
        path.write_text(self.dumps(space, fmt))
        _log.debug("Wrote %d atoms to %s", len(space), path)
        return path
