"""
hyperkb: a Hypergraph Knowledge Base

Typed facts with probabilistic truth values, stored in an indexed
AtomSpace and queried by structural pattern:

    space = AtomSpace()
    cat, animal = space.insert(concept("Cat")), space.insert(concept("Animal"))
    space.insert(inheritance(cat, animal, 0.9, 0.8))

    PatternMatcher(space).match(inheritance(variable("$x"), animal))
    # [{"$x": Node(ConceptNode, 'Cat')}]

Duplicate facts are never stored twice: their truth values are revised
into the existing atom.
"""

__version__ = "0.1.0"

from .core import (
    # Errors
    ValidationError,
    ChildIndexError,

    # Truth values
    TruthValue,
    DEFAULT_TV,
    TV_TOLERANCE,
    revision,

    # Types
    AtomType,
    TypeRegistry,
    TYPES,
    register_type,
    ATOM,
    NODE,
    LINK,
    CONCEPT_NODE,
    PREDICATE_NODE,
    VARIABLE_NODE,
    INHERITANCE_LINK,
    SIMILARITY_LINK,
    EVALUATION_LINK,
    LIST_LINK,
    AND_LINK,
    OR_LINK,

    # Atoms
    Atom,
    Node,
    Link,

    # The space
    AtomSpace,
    AuditLog,
    AuditEntry,

    # Helpers
    create_space,
    concept,
    predicate,
    variable,
    inheritance,
    similarity,
    evaluation,
    conjunction,
    disjunction,
)

from .matcher import (
    Binding,
    PatternMatcher,
    QueryBuilder,
    collect_variables,
    tv_at_least,
)

from .config import (
    ConfigError,
    Settings,
    load_settings,
)

# Import adapters subpackage
from . import adapters

__all__ = [
    # Version
    "__version__",

    # Errors
    "ValidationError",
    "ChildIndexError",
    "ConfigError",

    # Truth values
    "TruthValue",
    "DEFAULT_TV",
    "TV_TOLERANCE",
    "revision",

    # Types
    "AtomType",
    "TypeRegistry",
    "TYPES",
    "register_type",
    "ATOM",
    "NODE",
    "LINK",
    "CONCEPT_NODE",
    "PREDICATE_NODE",
    "VARIABLE_NODE",
    "INHERITANCE_LINK",
    "SIMILARITY_LINK",
    "EVALUATION_LINK",
    "LIST_LINK",
    "AND_LINK",
    "OR_LINK",

    # Atoms
    "Atom",
    "Node",
    "Link",

    # The space
    "AtomSpace",
    "AuditLog",
    "AuditEntry",

    # Queries
    "Binding",
    "PatternMatcher",
    "QueryBuilder",
    "collect_variables",
    "tv_at_least",

    # Settings
    "Settings",
    "load_settings",

    # Helpers
    "create_space",
    "concept",
    "predicate",
    "variable",
    "inheritance",
    "similarity",
    "evaluation",
    "conjunction",
    "disjunction",

    # Adapters
    "adapters",
]
