"""
Facts Adapter for hyperkb

Reads hand-written facts from YAML or JSON. The notation is compact:

    facts:
      - Cat                          # bare string -> ConceptNode
      - $x                           # leading "$"  -> VariableNode
      - [PredicateNode, eats]        # [type, name]
      - [ConceptNode, Fish, [0.9, 0.6]]
      - type: InheritanceLink
        tv: [0.9, 0.8]               # or {strength: 0.9, confidence: 0.8}
        outgoing: [Cat, Animal]

A document may also be the bare list of facts.

Usage:
    adapter = FactsAdapter(space)
    adapter.parse_to_space("facts.yaml")

    # build a template for the matcher
    template = adapter.build({"type": "InheritanceLink", "outgoing": ["$x", "Animal"]})
"""

from typing import Any, List, Optional
import logging

from .base import AdapterError, DocumentAdapter
from hyperkb.core import (
    Atom,
    AtomSpace,
    Link,
    Node,
    TruthValue,
    ValidationError,
    CONCEPT_NODE,
    VARIABLE_NODE,
)


_log = logging.getLogger(__name__)


class FactsError(AdapterError):
    """Raised when a fact entry cannot be read."""
    pass


class FactsAdapter(DocumentAdapter):
    """Adapter for compact fact files."""

    FORMAT_NAME = "facts"

    def __init__(self, space: Optional[AtomSpace] = None):
        super().__init__(space)

    def parse(self, source: Any) -> List[Atom]:
        """Build every top-level fact, in document order."""
        data = self.load_document(source)
        if isinstance(data, dict):
            data = data.get("facts")
        if not isinstance(data, list):
            raise FactsError("Expected a list of facts or a mapping with a 'facts' list")
        atoms = [self.build(entry) for entry in data]
        _log.debug("Read %d facts", len(atoms))
        return atoms

    def parse_to_space(self, source: Any) -> AtomSpace:
        """
        Insert every fact, then add whatever nested children are missing.

        Declared facts go in first, so a node keeps its declared truth
        value wherever it is also referenced in the document.
        """
        atoms = self.parse(source)
        for atom in atoms:
            self.space.insert(atom)
        for atom in atoms:
            if isinstance(atom, Link):
                self._insert_children(atom)
        return self.space

    def _insert_children(self, link: Link) -> None:
        # nested children are references: added only when missing, never revised
        stack = list(link.outgoing)
        while stack:
            child = stack.pop()
            if isinstance(child, Link):
                stack.extend(child.outgoing)
            if not self.space.contains(child):
                self.space.insert(child)

    def build(self, entry: Any) -> Atom:
        """Turn one entry of the notation into an atom."""
        try:
            if isinstance(entry, str):
                if entry.startswith("$"):
                    return Node(VARIABLE_NODE, entry)
                return Node(CONCEPT_NODE, entry)

            if isinstance(entry, list):
                if len(entry) not in (2, 3):
                    raise FactsError(f"Node entry needs [type, name] or [type, name, tv]: {entry!r}")
                tv = self._truth_value(entry[2]) if len(entry) == 3 else None
                return Node(entry[0], str(entry[1]), tv)

            if isinstance(entry, dict):
                tv = self._truth_value(entry["tv"]) if "tv" in entry else None
                if "outgoing" in entry:
                    outgoing = entry["outgoing"]
                    if not isinstance(outgoing, list):
                        raise FactsError(f"outgoing must be a list: {entry!r}")
                    children = [self.build(child) for child in outgoing]
                    return Link(entry["type"], children, tv)
                if "name" in entry:
                    return Node(entry.get("type", CONCEPT_NODE), str(entry["name"]), tv)
                raise FactsError(f"Entry needs 'name' or 'outgoing': {entry!r}")
        except KeyError as e:
            raise FactsError(f"Missing key {e} in {entry!r}") from e
        except FactsError:
            raise
        except ValidationError as e:
            raise FactsError(f"Invalid fact {entry!r}: {e}") from e

        raise FactsError(f"Cannot read fact: {entry!r}")

    @staticmethod
    def _truth_value(raw: Any) -> TruthValue:
        if isinstance(raw, dict):
            return TruthValue.from_dict(raw)
        if isinstance(raw, (list, tuple)) and len(raw) == 2:
            return TruthValue(raw[0], raw[1])
        raise FactsError(f"Truth value must be [strength, confidence] or a mapping: {raw!r}")
