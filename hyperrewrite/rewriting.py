"""Rewriting rules (LHS pattern to RHS pattern) and the results of applying them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .hypergraph import INVALID_VERTEX, EdgeId, VertexId
from .patterns import PatternHypergraph, VariableAssignment


@dataclass
class RewritingRule:
    """When ``lhs`` matches, it is replaced by ``rhs`` under the same variable bindings.

    Variables that occur only in ``rhs`` stand for fresh vertices.
    """

    lhs: PatternHypergraph
    rhs: PatternHypergraph

    def get_all_variables(self) -> set[VertexId]:
        return set(self.lhs.variable_vertices()) | set(self.rhs.variable_vertices())

    def is_well_formed(self) -> bool:
        return True


@dataclass
class RewritingResult:
    applied: bool = False
    removed_edges: list[EdgeId] = field(default_factory=list)
    added_edges: list[EdgeId] = field(default_factory=list)
    variable_assignment: VariableAssignment = field(default_factory=VariableAssignment)
    anchor_vertex: VertexId = INVALID_VERTEX

    def was_applied(self) -> bool:
        return self.applied

    def num_changes(self) -> int:
        return len(self.removed_edges) + len(self.added_edges)


def rule_to_string(rule: RewritingRule) -> str:
    """Render a rule as ``{{x1,x2}} -> {{x1,x2},{x2,x3}}``; variables carry an ``x``."""
    return f"{rule.lhs} -> {rule.rhs}"


def result_to_string(result: RewritingResult) -> str:
    if not result.applied:
        return "RewritingResult(applied=false)"
    anchor = "none" if result.anchor_vertex == INVALID_VERTEX else str(result.anchor_vertex)
    bindings = ", ".join(
        f"x{var}->{vertex}"
        for var, vertex in sorted(result.variable_assignment.variable_to_concrete.items())
    )
    return (
        f"RewritingResult(applied=true, removed={list(result.removed_edges)}, "
        f"added={list(result.added_edges)}, anchor={anchor}, bindings=[{bindings}])"
    )