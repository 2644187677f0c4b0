from hyperrewrite.hypergraph import INVALID_VERTEX
from hyperrewrite.patterns import PatternEdge, PatternHypergraph, PatternVertex, VariableAssignment
from hyperrewrite.rewriting import RewritingResult, RewritingRule, result_to_string, rule_to_string

V = PatternVertex.variable
C = PatternVertex.concrete


def _growth_rule():
    lhs = PatternHypergraph([PatternEdge([V(1), V(2)])])
    rhs = PatternHypergraph([PatternEdge([V(1), V(2)]), PatternEdge([V(2), V(3)])])
    return RewritingRule(lhs, rhs)


def test_all_variables_is_union():
    rule = _growth_rule()
    assert rule.get_all_variables() == set(rule.lhs.variable_vertices()) | set(
        rule.rhs.variable_vertices()
    )
    assert 3 in rule.get_all_variables()
    assert 3 not in rule.lhs.variable_vertices()


def test_concrete_vertices_are_not_variables():
    rule = RewritingRule(
        PatternHypergraph([PatternEdge([C(1), V(2)])]),
        PatternHypergraph([PatternEdge([V(2), C(1)])]),
    )
    assert rule.get_all_variables() == {2}


def test_rules_are_well_formed():
    assert _growth_rule().is_well_formed() is True


def test_default_result():
    result = RewritingResult()
    assert result.was_applied() is False
    assert result.num_changes() == 0
    assert result.anchor_vertex == INVALID_VERTEX
    assert result.variable_assignment.variable_to_concrete == {}


def test_num_changes_counts_both_sides():
    result = RewritingResult(applied=True, removed_edges=[0, 1], added_edges=[2, 3, 4])
    assert result.was_applied()
    assert result.num_changes() == len(result.removed_edges) + len(result.added_edges)


def test_rule_to_string():
    assert rule_to_string(_growth_rule()) == "{{x1,x2}} -> {{x1,x2},{x2,x3}}"
    mixed = RewritingRule(
        PatternHypergraph([PatternEdge([C(7), V(2)])]), PatternHypergraph()
    )
    assert rule_to_string(mixed) == "{{7,x2}} -> {}"


def test_result_to_string():
    assert result_to_string(RewritingResult()) == "RewritingResult(applied=false)"
    result = RewritingResult(
        applied=True,
        removed_edges=[4],
        added_edges=[9, 10],
        variable_assignment=VariableAssignment({1: 5}),
        anchor_vertex=5,
    )
    text = result_to_string(result)
    assert "removed=[4]" in text
    assert "added=[9, 10]" in text
    assert "anchor=5" in text
    assert "x1->5" in text
    unanchored = result_to_string(RewritingResult(applied=True))
    assert "anchor=none" in unanchored