"""
Pattern matching over an AtomSpace.

A template is an ordinary atom in which VariableNodes stand for unknowns:

    (InheritanceLink (VariableNode "$x") (ConceptNode "Animal"))

Matching finds every assignment of stored atoms to the variables under
which the template is grounded in the space. The result is a list of
bindings, one dict per grounding, mapping variable name -> atom.

Candidates are the stored links of the template's type and arity, tried
in insertion order. Each candidate is unified position by position and
abandoned at the first mismatch. The walk uses an explicit stack with a
depth cap and a step budget, so no template can recurse without bound.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple
import logging

from .core import Atom, AtomSpace, Link, Node, ValidationError


_log = logging.getLogger(__name__)

Binding = Dict[str, Atom]
Predicate = Callable[[Binding], bool]

DEFAULT_MAX_DEPTH = 256
DEFAULT_MAX_STEPS = 1_000_000


def collect_variables(template: Atom) -> List[str]:
    """Variable names in a template, in order of first appearance."""
    names: List[str] = []
    seen: Set[int] = set()
    stack: List[Atom] = [template]
    while stack:
        atom = stack.pop()
        if id(atom) in seen:
            continue
        seen.add(id(atom))
        if atom.is_variable:
            if atom.name not in names:
                names.append(atom.name)
        elif isinstance(atom, Link):
            stack.extend(reversed(atom.outgoing))
    return names


class _Budget:
    """Counts unification steps for one match call."""

    def __init__(self, steps: int):
        self.remaining = steps
        self.exhausted = False

    def spend(self) -> bool:
        if self.remaining <= 0:
            self.exhausted = True
            return False
        self.remaining -= 1
        return True


class PatternMatcher:
    """
    Finds the groundings of a template in an AtomSpace.

    Literal nodes in a template are treated as fixed context: a literal
    position is satisfied when a node of that type and name is stored.
    With strict_literals=True the atom found at that position must also
    equal the literal.
    """

    def __init__(
        self,
        space: AtomSpace,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_steps: int = DEFAULT_MAX_STEPS,
        strict_literals: bool = False
    ):
        if not isinstance(space, AtomSpace):
            raise ValidationError(f"Expected an AtomSpace, got {type(space).__name__}")
        if max_depth < 1 or max_steps < 1:
            raise ValidationError("max_depth and max_steps must be positive")
        self.space = space
        self.max_depth = max_depth
        self.max_steps = max_steps
        self.strict_literals = strict_literals

    def match(self, template: Atom) -> List[Binding]:
        """All bindings grounding `template`, in candidate insertion order."""
        return list(self.iter_matches(template))

    def exists(self, template: Atom) -> bool:
        for _ in self.iter_matches(template):
            return True
        return False

    def iter_matches(self, template: Atom) -> Iterator[Binding]:
        if not isinstance(template, Atom):
            return
        variables = collect_variables(template)

        if not variables:
            if self.space.find(template) is not None:
                yield {}
            return

        budget = _Budget(self.max_steps)
        for candidate in self._candidates(template):
            binding = self._unify(template, candidate, budget)
            if budget.exhausted:
                _log.warning(
                    "Match of %s stopped after %d steps; results are incomplete",
                    template, self.max_steps
                )
                return
            if binding is not None and all(name in binding for name in variables):
                yield binding

    def _candidates(self, template: Atom) -> List[Atom]:
        if template.is_variable:
            return list(self.space)
        if isinstance(template, Link):
            return [
                link for link in self.space.atoms_of_type(template.type)
                if link.arity == template.arity
            ]
        return []

    def _literal_holds(self, literal: Node, atom: Atom) -> bool:
        if self.space.lookup_node(literal.type, literal.name) is None:
            return False
        if self.strict_literals:
            return atom == literal
        return True

    def _unify(self, template: Atom, candidate: Atom, budget: _Budget) -> Optional[Binding]:
        """
        Unify one template against one concrete atom.

        Children are visited left to right. Returns the binding, or None
        at the first position that does not fit.
        """
        binding: Binding = {}
        stack: List[Tuple[Atom, Atom, int]] = [(template, candidate, 0)]
        while stack:
            if not budget.spend():
                return None
            pattern, atom, depth = stack.pop()
            if depth > self.max_depth:
                _log.warning("Template deeper than max_depth=%d, candidate skipped", self.max_depth)
                return None

            if pattern.is_variable:
                bound = binding.get(pattern.name)
                if bound is None:
                    stored = self.space.find(atom)
                    binding[pattern.name] = stored if stored is not None else atom
                elif bound != atom:
                    return None
            elif isinstance(pattern, Node):
                if not self._literal_holds(pattern, atom):
                    return None
            else:
                if (not isinstance(atom, Link) or atom.type != pattern.type
                        or atom.arity != pattern.arity):
                    return None
                pairs = list(zip(pattern.outgoing, atom.outgoing))
                stack.extend((p, a, depth + 1) for p, a in reversed(pairs))
        return binding


# =============================================================================
# QUERY BUILDER: match, then filter
# =============================================================================

class QueryBuilder:
    """
    A pattern plus post-filters over its bindings.

        results = (QueryBuilder(space)
                   .match(inheritance(variable("$x"), concept("Animal")))
                   .where(lambda b: b["$x"].tv.strength > 0.5)
                   .execute())
    """

    def __init__(self, space: AtomSpace, matcher: Optional[PatternMatcher] = None):
        if matcher is None:
            matcher = PatternMatcher(space)
        elif matcher.space is not space:
            raise ValidationError("matcher is bound to a different space")
        self._matcher = matcher
        self._template: Optional[Atom] = None
        self._filters: List[Predicate] = []
        self._limit: Optional[int] = None

    def match(self, template: Atom) -> "QueryBuilder":
        if not isinstance(template, Atom):
            raise ValidationError(f"Template must be an Atom, got {type(template).__name__}")
        self._template = template
        return self

    def where(self, predicate: Predicate) -> "QueryBuilder":
        """Keep only bindings for which `predicate` holds. Filters stack."""
        if not callable(predicate):
            raise ValidationError("where() needs a callable")
        self._filters.append(predicate)
        return self

    def limit(self, n: int) -> "QueryBuilder":
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValidationError(f"limit must be a non-negative int, got {n!r}")
        self._limit = n
        return self

    def _filtered(self) -> Iterator[Binding]:
        if self._template is None:
            return
        for binding in self._matcher.iter_matches(self._template):
            if all(check(binding) for check in self._filters):
                yield binding

    def execute(self) -> List[Binding]:
        results: List[Binding] = []
        if self._limit == 0:
            return results
        for binding in self._filtered():
            results.append(binding)
            if self._limit is not None and len(results) >= self._limit:
                break
        return results

    def first(self) -> Optional[Binding]:
        if self._limit == 0:
            return None
        return next(self._filtered(), None)

    def count(self) -> int:
        return len(self.execute())


def tv_at_least(name: str, strength: float = 0.0, confidence: float = 0.0) -> Predicate:
    """Filter: the atom bound to `name` has at least this strength and confidence."""
    def check(binding: Binding) -> bool:
        atom = binding.get(name)
        return (atom is not None and atom.tv.strength >= strength
                and atom.tv.confidence >= confidence)
    return check
