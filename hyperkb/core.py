"""
hyperkb: a Hypergraph Knowledge Base

Facts are atoms. A Node names something. A Link relates an ordered
sequence of other atoms, and since a Link is itself an atom, links can
point at links: the graph is a hypergraph.

Every atom carries a TruthValue (strength, confidence). Inserting a fact
that is already known does not duplicate it; the two pieces of evidence
are pooled into the stored atom by revision.

This module provides the primitives:
- TruthValue: probabilistic belief with a revision operator
- AtomType / TypeRegistry: the open set of type tags
- Atom, Node, Link: the elements of the hypergraph
- AtomSpace: the store and its synchronized indexes
- AuditLog: hash chain over every mutation of a space

Queries by structure live in hyperkb.matcher.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Any, Tuple, Iterable, Iterator, Union
import hashlib
import json
import logging
import time
import uuid


_log = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when an argument violates an atom or truth value invariant."""
    pass


class ChildIndexError(ValidationError, IndexError):
    """Raised when a Link child index falls outside [0, arity)."""
    pass


# =============================================================================
# TRUTH VALUE: Strength of belief and weight of evidence
# =============================================================================

TV_TOLERANCE = 1e-3


@dataclass(frozen=True, slots=True, eq=False)
class TruthValue:
    """
    A (strength, confidence) pair, both in [0, 1].

    - strength: how true the fact is believed to be
    - confidence: how much evidence backs that belief

    Equality is approximate (TV_TOLERANCE per component), so truth
    values are not hashable.
    """

    strength: float = 1.0
    confidence: float = 1.0

    def __post_init__(self):
        for label, value in (("strength", self.strength), ("confidence", self.confidence)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"{label} must be a number, got {value!r}")
            # NaN fails this comparison too
            if not (0.0 <= value <= 1.0):
                raise ValidationError(f"{label} must be in [0, 1], got {value}")

    def revise(self, other: "TruthValue") -> "TruthValue":
        """
        Pool the evidence of two truth values.

        Strength is the confidence-weighted mean of both strengths.
        Confidence is the sum of both, saturating at 1.0.
        Two values without any evidence revise to total ignorance (0.5, 0.0).
        """
        if not isinstance(other, TruthValue):
            raise ValidationError(f"Cannot revise with {type(other).__name__}")
        total = self.confidence + other.confidence
        if total == 0:
            return TruthValue(0.5, 0.0)
        strength = (self.strength * self.confidence + other.strength * other.confidence) / total
        return TruthValue(min(1.0, max(0.0, strength)), min(1.0, total))

    def to_dict(self) -> Dict[str, float]:
        return {"strength": self.strength, "confidence": self.confidence}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TruthValue":
        """Build from {"strength": s, "confidence": c}; missing keys default to 1.0."""
        if not isinstance(data, dict):
            raise ValidationError(f"Truth value must be a mapping, got {type(data).__name__}")
        return cls(data.get("strength", 1.0), data.get("confidence", 1.0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TruthValue):
            return NotImplemented
        return (abs(self.strength - other.strength) <= TV_TOLERANCE and
                abs(self.confidence - other.confidence) <= TV_TOLERANCE)

    __hash__ = None

    def __str__(self) -> str:
        return f"<{self.strength:.3f}, {self.confidence:.3f}>"


DEFAULT_TV = TruthValue(1.0, 1.0)


def revision(a: TruthValue, b: TruthValue) -> TruthValue:
    """Combine two truth values. Commutative."""
    return a.revise(b)


# =============================================================================
# ATOM TYPES: An open set of tags (seeded small, grown by registration)
# =============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class AtomType:
    """
    A type tag. Types form a tree rooted at "Atom"; every concrete
    type descends from either "Node" or "Link".

    Two types are the same type iff their names match.
    """

    name: str
    parent: Optional["AtomType"] = None

    def is_a(self, other: Union["AtomType", str]) -> bool:
        """True if this type is `other` or one of its descendants."""
        target = other.name if isinstance(other, AtomType) else other
        current: Optional[AtomType] = self
        while current is not None:
            if current.name == target:
                return True
            current = current.parent
        return False

    @property
    def is_node(self) -> bool:
        return self.is_a("Node")

    @property
    def is_link(self) -> bool:
        return self.is_a("Link")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"AtomType({self.name})"

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AtomType):
            return self.name == other.name
        return False


class TypeRegistry:
    """
    Name -> AtomType table.

    The seed set covers the common relations. New types are added with
    register(); the store and the matcher only ever look at names and
    ancestry, so they pick up new types without any change.
    """

    SEED: Tuple[Tuple[str, str], ...] = (
        ("Node", "Atom"),
        ("Link", "Atom"),
        ("ConceptNode", "Node"),
        ("PredicateNode", "Node"),
        ("VariableNode", "Node"),     # reserved: free variable in templates
        ("InheritanceLink", "Link"),
        ("SimilarityLink", "Link"),
        ("EvaluationLink", "Link"),
        ("ListLink", "Link"),
        ("AndLink", "Link"),          # conjunction
        ("OrLink", "Link"),           # disjunction
    )

    def __init__(self):
        self._types: Dict[str, AtomType] = {"Atom": AtomType("Atom")}
        for name, parent in self.SEED:
            self.register(name, parent)

    def register(self, name: str, parent: Union[AtomType, str]) -> AtomType:
        """
        Register a new type under `parent`.

        Registering an existing name with the same parent returns the
        existing type; a different parent is a conflict.
        """
        if not isinstance(name, str) or not name:
            raise ValidationError(f"Type name must be a non-empty string, got {name!r}")
        parent_type = self.resolve(parent)
        existing = self._types.get(name)
        if existing is not None:
            if existing.parent != parent_type:
                raise ValidationError(
                    f"Type {name} already registered under {existing.parent}, not {parent_type}"
                )
            return existing
        atom_type = AtomType(name, parent_type)
        self._types[name] = atom_type
        _log.debug("Registered atom type %s < %s", name, parent_type.name)
        return atom_type

    def get(self, name: str) -> Optional[AtomType]:
        return self._types.get(name)

    def resolve(self, type_or_name: Union[AtomType, str]) -> AtomType:
        """Turn a name (or a type) into the registered AtomType."""
        if isinstance(type_or_name, AtomType):
            type_or_name = type_or_name.name
        if not isinstance(type_or_name, str):
            raise ValidationError(f"Expected a type or type name, got {type_or_name!r}")
        atom_type = self._types.get(type_or_name)
        if atom_type is None:
            raise ValidationError(f"Unknown atom type: {type_or_name}")
        return atom_type

    def subtypes_of(self, atom_type: Union[AtomType, str]) -> List[AtomType]:
        """All registered types descending from `atom_type`, itself included."""
        root = self.resolve(atom_type)
        return [t for t in self._types.values() if t.is_a(root)]

    def __contains__(self, item: object) -> bool:
        name = item.name if isinstance(item, AtomType) else item
        return name in self._types

    def __iter__(self) -> Iterator[AtomType]:
        return iter(list(self._types.values()))

    def __len__(self) -> int:
        return len(self._types)


TYPES = TypeRegistry()

ATOM = TYPES.resolve("Atom")
NODE = TYPES.resolve("Node")
LINK = TYPES.resolve("Link")
CONCEPT_NODE = TYPES.resolve("ConceptNode")
PREDICATE_NODE = TYPES.resolve("PredicateNode")
VARIABLE_NODE = TYPES.resolve("VariableNode")
INHERITANCE_LINK = TYPES.resolve("InheritanceLink")
SIMILARITY_LINK = TYPES.resolve("SimilarityLink")
EVALUATION_LINK = TYPES.resolve("EvaluationLink")
LIST_LINK = TYPES.resolve("ListLink")
AND_LINK = TYPES.resolve("AndLink")
OR_LINK = TYPES.resolve("OrLink")


def register_type(name: str, parent: Union[AtomType, str]) -> AtomType:
    """Add a type to the default registry."""
    return TYPES.register(name, parent)


# =============================================================================
# ATOMS: Nodes and Links
# =============================================================================

class Atom(ABC):
    """
    A unit of stored knowledge.

    Stores:
    - id: fresh identifier assigned at construction, never reused
    - type: an AtomType
    - tv: the TruthValue (defaults to (1.0, 1.0))
    - metadata: open string-keyed notes

    Identity for deduplication is structural (see Node and Link), never the id.
    """

    is_node = False
    is_link = False

    def __init__(
        self,
        atom_type: Union[AtomType, str],
        tv: Optional[TruthValue] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self._type = TYPES.resolve(atom_type) if isinstance(atom_type, str) else atom_type
        if not isinstance(self._type, AtomType):
            raise ValidationError(f"Expected an atom type, got {atom_type!r}")
        self._id = uuid.uuid4().hex
        self._tv = DEFAULT_TV
        if tv is not None:
            self.tv = tv
        self.metadata: Dict[str, Any] = dict(metadata) if metadata else {}

    @property
    def id(self) -> str:
        return self._id

    @property
    def type(self) -> AtomType:
        return self._type

    @property
    def tv(self) -> TruthValue:
        return self._tv

    @tv.setter
    def tv(self, value: TruthValue) -> None:
        if not isinstance(value, TruthValue):
            raise ValidationError(f"Expected a TruthValue, got {type(value).__name__}")
        self._tv = value

    def get_truth_value(self) -> TruthValue:
        return self._tv

    def set_truth_value(self, value: TruthValue) -> None:
        self.tv = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def set_metadata(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise ValidationError(f"Metadata keys must be strings, got {key!r}")
        self.metadata[key] = value

    @property
    def is_variable(self) -> bool:
        return False

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        ...

    @abstractmethod
    def __hash__(self) -> int:
        ...


class Node(Atom):
    """A named leaf. Two nodes are equal iff type and name match."""

    is_node = True

    def __init__(
        self,
        atom_type: Union[AtomType, str],
        name: str,
        tv: Optional[TruthValue] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        super().__init__(atom_type, tv, metadata)
        if not self._type.is_node:
            raise ValidationError(f"{self._type.name} is not a Node type")
        if not isinstance(name, str):
            raise ValidationError(f"Node name must be a string, got {name!r}")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_variable(self) -> bool:
        return self._type.is_a("VariableNode")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Node):
            return self._type == other._type and self._name == other._name
        return False

    def __hash__(self) -> int:
        return hash((self._type.name, self._name))

    def __str__(self) -> str:
        return f'({self._type.name} "{self._name}")'

    def __repr__(self) -> str:
        return f"Node({self._type.name}, {self._name!r})"


class Link(Atom):
    """
    An ordered relation over child atoms (the outgoing set).

    Two links are equal iff their types match and their children are
    pairwise equal, in order. (Inheritance A B) and (Inheritance B A)
    are different atoms.
    """

    is_link = True

    def __init__(
        self,
        atom_type: Union[AtomType, str],
        outgoing: Iterable[Atom],
        tv: Optional[TruthValue] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        super().__init__(atom_type, tv, metadata)
        if not self._type.is_link:
            raise ValidationError(f"{self._type.name} is not a Link type")
        if outgoing is None:
            raise ValidationError("Link requires an outgoing set")
        try:
            children = tuple(outgoing)
        except TypeError:
            raise ValidationError(f"Outgoing set must be iterable, got {outgoing!r}") from None
        if not children:
            raise ValidationError(f"{self._type.name} needs at least one child")
        for child in children:
            if not isinstance(child, Atom):
                raise ValidationError(f"Link children must be atoms, got {child!r}")
        self._outgoing: Tuple[Atom, ...] = children
        # outgoing is immutable, so the structural hash is fixed
        self._hash = hash((self._type.name, children))

    @property
    def outgoing(self) -> Tuple[Atom, ...]:
        return self._outgoing

    @property
    def arity(self) -> int:
        return len(self._outgoing)

    def child(self, index: int) -> Atom:
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValidationError(f"Child index must be an int, got {index!r}")
        if not (0 <= index < len(self._outgoing)):
            raise ChildIndexError(f"Child index {index} out of range for arity {self.arity}")
        return self._outgoing[index]

    def __getitem__(self, index: int) -> Atom:
        return self.child(index)

    def __len__(self) -> int:
        return len(self._outgoing)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._outgoing)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Link):
            return False
        # iterative: nesting depth is unbounded
        pending: List[Tuple[Atom, Atom]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if isinstance(left, Link):
                if not (isinstance(right, Link) and
                        left._hash == right._hash and
                        left._type == right._type and
                        len(left._outgoing) == len(right._outgoing)):
                    return False
                pending.extend(zip(left._outgoing, right._outgoing))
            elif left != right:
                return False
        return True

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        children = " ".join(str(child) for child in self._outgoing)
        return f"({self._type.name} {children})"

    def __repr__(self) -> str:
        return f"Link({self._type.name}, arity={self.arity})"


# =============================================================================
# AUDIT LOG: Hash chain over every mutation
# =============================================================================

@dataclass
class AuditEntry:
    """One mutation of an AtomSpace."""
    index: int
    timestamp: float
    action: str
    args: Tuple[Any, ...]
    prev_hash: str
    hash: str

    def payload(self) -> Dict[str, Any]:
        """The hashed fields (everything but the hash itself)."""
        return {
            "index": self.index,
            "timestamp": self.timestamp,
            "action": self.action,
            "args": list(self.args),
            "prev_hash": self.prev_hash
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.payload()
        data["hash"] = self.hash
        return data


class AuditLog:
    """
    Append-only record of what happened to a space.

    Each entry hashes its own fields together with the previous entry's
    hash, so editing any past entry breaks verify().
    """

    GENESIS_HASH = "0" * 64

    def __init__(self):
        self._entries: List[AuditEntry] = []

    @staticmethod
    def _digest(payload: Dict[str, Any]) -> str:
        encoded = json.dumps(payload, sort_keys=True, default=str).encode("utf-8")
        return hashlib.sha256(encoded).hexdigest()

    def append(self, action: str, *args: Any) -> AuditEntry:
        """Record an action and its arguments."""
        entry = AuditEntry(
            index=len(self._entries),
            timestamp=time.time(),
            action=action,
            args=args,
            prev_hash=self._entries[-1].hash if self._entries else self.GENESIS_HASH,
            hash=""
        )
        entry.hash = self._digest(entry.payload())
        self._entries.append(entry)
        return entry

    def verify(self) -> bool:
        """Check linkage and recompute every hash."""
        expected_prev = self.GENESIS_HASH
        for entry in self._entries:
            if entry.prev_hash != expected_prev:
                return False
            if self._digest(entry.payload()) != entry.hash:
                return False
            expected_prev = entry.hash
        return True

    def actions(self) -> List[str]:
        return [entry.action for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AuditEntry]:
        return iter(self._entries)

    def last(self, n: int = 5) -> List[AuditEntry]:
        return self._entries[-n:]


# =============================================================================
# ATOMSPACE: The hypergraph store
# =============================================================================

def _type_name(atom_type: Union[AtomType, str, None]) -> Optional[str]:
    if isinstance(atom_type, AtomType):
        return atom_type.name
    if isinstance(atom_type, str):
        return atom_type
    return None


class AtomSpace:
    """
    Owns a set of atoms and keeps its indexes in step:

    - by id: id -> atom, in insertion order
    - by type: type name -> {id: atom}, in insertion order
    - by name: node name -> {type name: node}
    - by incidence: atom -> {link id: link} for every stored link holding it
    - links: link -> stored link, for duplicate detection

    Inserting an atom equal to a stored one returns the stored atom with
    its truth value revised; the new instance is dropped.

    Queries never raise for missing data: they return None, False or [].
    Single-threaded: nothing here is locked.
    """

    def __init__(self, audit: bool = True):
        self._by_id: Dict[str, Atom] = {}
        self._by_type: Dict[str, Dict[str, Atom]] = {}
        self._by_name: Dict[str, Dict[str, Node]] = {}
        self._incidence: Dict[Atom, Dict[str, Link]] = {}
        self._links: Dict[Link, Link] = {}
        self._audit: Optional[AuditLog] = AuditLog() if audit else None

    @property
    def audit(self) -> Optional[AuditLog]:
        """The mutation log, or None when auditing is off."""
        return self._audit

    def _record(self, action: str, *args: Any) -> None:
        if self._audit is not None:
            self._audit.append(action, *args)

    # -------------------------------------------------------------------------
    # MUTATION
    # -------------------------------------------------------------------------

    def insert(self, atom: Atom) -> Atom:
        """
        Add an atom, or merge it into the equal atom already stored.

        Returns the atom that lives in the space afterwards. A Link's
        children are not inserted along with it.
        """
        if atom is None:
            raise ValidationError("Cannot insert None")
        if not isinstance(atom, Atom):
            raise ValidationError(f"Expected an Atom, got {type(atom).__name__}")

        existing = self.find(atom)
        if existing is not None:
            if existing is not atom:
                existing.tv = existing.tv.revise(atom.tv)
                self._record("MERGE", existing.id, atom.id)
                _log.debug("Merged %s into %s, tv now %s", atom.id, existing.id, existing.tv)
            return existing

        self._register(atom)
        self._record("INSERT", atom.id, atom.type.name)
        _log.debug("Inserted %r as %s", atom, atom.id)
        return atom

    def _register(self, atom: Atom) -> None:
        self._by_id[atom.id] = atom
        self._by_type.setdefault(atom.type.name, {})[atom.id] = atom
        if isinstance(atom, Node):
            self._by_name.setdefault(atom.name, {})[atom.type.name] = atom
        else:
            self._links[atom] = atom
            for child in atom.outgoing:
                self._incidence.setdefault(child, {})[atom.id] = atom

    def remove(self, atom: Atom) -> bool:
        """
        Take an atom (or the stored atom equal to it) out of every index.

        Links pointing at the removed atom stay in the space, and so does
        the incidence bucket that lists them.
        """
        if not isinstance(atom, Atom):
            return False
        stored = self.find(atom)
        if stored is None:
            return False

        del self._by_id[stored.id]
        bucket = self._by_type[stored.type.name]
        del bucket[stored.id]
        if not bucket:
            del self._by_type[stored.type.name]

        if isinstance(stored, Node):
            named = self._by_name[stored.name]
            del named[stored.type.name]
            if not named:
                del self._by_name[stored.name]
        else:
            del self._links[stored]
            for child in stored.outgoing:
                holders = self._incidence.get(child)
                if holders is None:
                    continue
                holders.pop(stored.id, None)
                if not holders:
                    del self._incidence[child]

        self._record("REMOVE", stored.id, stored.type.name)
        _log.debug("Removed %r (%s)", stored, stored.id)
        return True

    def clear(self) -> None:
        """Drop every atom."""
        count = len(self._by_id)
        self._by_id = {}
        self._by_type = {}
        self._by_name = {}
        self._incidence = {}
        self._links = {}
        self._record("CLEAR", count)
        _log.debug("Cleared %d atoms", count)

    # -------------------------------------------------------------------------
    # LOOKUP
    # -------------------------------------------------------------------------

    def find(self, atom: Atom) -> Optional[Atom]:
        """The stored atom equal to `atom`, if any."""
        if isinstance(atom, Node):
            return self.lookup_node(atom.type, atom.name)
        if isinstance(atom, Link):
            return self._links.get(atom)
        return None

    def lookup_by_id(self, atom_id: str) -> Optional[Atom]:
        if not isinstance(atom_id, str):
            return None
        return self._by_id.get(atom_id)

    def lookup_node(self, atom_type: Union[AtomType, str], name: str) -> Optional[Node]:
        type_name = _type_name(atom_type)
        if type_name is None or not isinstance(name, str):
            return None
        return self._by_name.get(name, {}).get(type_name)

    def nodes_named(self, name: str) -> List[Node]:
        """Every stored node called `name`, whatever its type."""
        if not isinstance(name, str):
            return []
        return list(self._by_name.get(name, {}).values())

    def atoms_of_type(self, atom_type: Union[AtomType, str], subtypes: bool = False) -> List[Atom]:
        """
        Atoms of a type, in insertion order.

        With subtypes=True, atoms of every descendant type are included
        (e.g. "Node" returns all nodes).
        """
        type_name = _type_name(atom_type)
        if type_name is None:
            return []
        if subtypes:
            return [a for a in self._by_id.values() if a.type.is_a(type_name)]
        return list(self._by_type.get(type_name, {}).values())

    def incidence_of(self, atom: Atom) -> List[Link]:
        """Stored links having `atom` (or an equal atom) as a child."""
        if not isinstance(atom, Atom):
            return []
        return list(self._incidence.get(atom, {}).values())

    def contains(self, atom: Atom) -> bool:
        return self.find(atom) is not None

    def size(self) -> int:
        return len(self._by_id)

    def nodes(self) -> List[Node]:
        return [a for a in self._by_id.values() if a.is_node]

    def links(self) -> List[Link]:
        return [a for a in self._by_id.values() if a.is_link]

    def __contains__(self, atom: object) -> bool:
        return isinstance(atom, Atom) and self.contains(atom)

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Atom]:
        return iter(list(self._by_id.values()))

    # -------------------------------------------------------------------------
    # STATISTICS AND EXPORT
    # -------------------------------------------------------------------------

    def statistics(self) -> Dict[str, Any]:
        """Counts: total, nodes, links, and per type."""
        nodes = sum(1 for atom in self._by_id.values() if atom.is_node)
        return {
            "total": len(self._by_id),
            "nodes": nodes,
            "links": len(self._by_id) - nodes,
            "by_type": {name: len(bucket) for name, bucket in self._by_type.items()},
        }

    def export(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Snapshot of the ground graph.

        Links reference their children by id. Variable nodes are
        exported as ordinary nodes.

        A link child with no stored equal (never inserted, or removed
        since) is written too, flagged "detached": true, so every id in
        an outgoing list has a record.
        """
        nodes: List[Dict[str, Any]] = []
        links: List[Dict[str, Any]] = []
        detached: List[Atom] = []
        seen: set = set()

        def reference(child: Atom) -> str:
            stored = self.find(child)
            if stored is not None:
                return stored.id
            if child.id not in seen:
                seen.add(child.id)
                detached.append(child)
            return child.id

        def record(atom: Atom) -> Dict[str, Any]:
            if isinstance(atom, Node):
                return {
                    "type": atom.type.name,
                    "name": atom.name,
                    "id": atom.id,
                    "tv": atom.tv.to_dict(),
                }
            return {
                "type": atom.type.name,
                "id": atom.id,
                "outgoing": [reference(child) for child in atom.outgoing],
                "tv": atom.tv.to_dict(),
            }

        for atom in self._by_id.values():
            (nodes if isinstance(atom, Node) else links).append(record(atom))

        # record() on a detached link may queue more detached children
        index = 0
        while index < len(detached):
            atom = detached[index]
            index += 1
            entry = record(atom)
            entry["detached"] = True
            (nodes if isinstance(atom, Node) else links).append(entry)
        return {"nodes": nodes, "links": links}

    def __repr__(self) -> str:
        stats = self.statistics()
        return f"AtomSpace(nodes={stats['nodes']}, links={stats['links']})"


# =============================================================================
# CONVENIENCE: Quick creation helpers
# =============================================================================

def create_space(audit: bool = True) -> AtomSpace:
    """Create an empty atom space."""
    return AtomSpace(audit=audit)


def _tv(strength: float, confidence: float) -> TruthValue:
    return TruthValue(strength, confidence)


def concept(name: str, strength: float = 1.0, confidence: float = 1.0) -> Node:
    return Node(CONCEPT_NODE, name, _tv(strength, confidence))


def predicate(name: str, strength: float = 1.0, confidence: float = 1.0) -> Node:
    return Node(PREDICATE_NODE, name, _tv(strength, confidence))


def variable(name: str) -> Node:
    """A template placeholder, conventionally named "$x"."""
    return Node(VARIABLE_NODE, name)


def inheritance(child: Atom, parent: Atom, strength: float = 1.0, confidence: float = 1.0) -> Link:
    """child is a kind of parent."""
    return Link(INHERITANCE_LINK, [child, parent], _tv(strength, confidence))


def similarity(a: Atom, b: Atom, strength: float = 1.0, confidence: float = 1.0) -> Link:
    return Link(SIMILARITY_LINK, [a, b], _tv(strength, confidence))


def evaluation(pred: Atom, *arguments: Atom, strength: float = 1.0, confidence: float = 1.0) -> Link:
    """(Evaluation pred (List arg1 arg2 ...))"""
    return Link(EVALUATION_LINK, [pred, Link(LIST_LINK, arguments)], _tv(strength, confidence))


def conjunction(*atoms: Atom) -> Link:
    return Link(AND_LINK, atoms)


def disjunction(*atoms: Atom) -> Link:
    return Link(OR_LINK, atoms)
