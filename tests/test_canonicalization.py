from itertools import permutations

from hyperrewrite.canonicalization import (
    CanonicalForm,
    Canonicalizer,
    wolfram_canonical_hypergraph,
)
from hyperrewrite.hypergraph import Hypergraph


def _relabel(edges, labels):
    mapping = dict(zip(sorted({v for e in edges for v in e}), labels))
    return [[mapping[v] for v in e] for e in edges]


def test_to_string_format():
    form = CanonicalForm(edges=[[0, 1]], vertex_count=2)
    assert form.to_string() == "CanonicalForm(vertices=2, edges=[[0,1]])"
    assert str(form) == form.to_string()


def test_empty_inputs():
    canon = Canonicalizer()
    assert canon.canonicalize(Hypergraph()).canonical_form.vertex_count == 0
    result = canon.canonicalize_edges([])
    assert result.canonical_form.edges == []
    assert result.vertex_mapping.canonical_to_original == []


def test_single_edge():
    result = Canonicalizer().canonicalize_edges([[5, 7]])
    assert result.canonical_form.edges == [[0, 1]]
    assert result.vertex_mapping.canonical_to_original == [5, 7]


def test_isomorphic_graphs_share_canonical_form():
    edges = [[1, 2], [2, 3], [3, 1], [1, 2, 4]]
    canon = Canonicalizer()
    reference = canon.canonicalize_edges(edges).canonical_form
    for labels in permutations([10, 20, 30, 40]):
        assert canon.canonicalize_edges(_relabel(edges, labels)).canonical_form == reference


def test_non_isomorphic_graphs_differ():
    canon = Canonicalizer()
    chain = canon.canonicalize_edges([[1, 2], [2, 3]]).canonical_form
    converge = canon.canonicalize_edges([[1, 2], [3, 2]]).canonical_form
    assert chain.vertex_count == converge.vertex_count
    assert chain.edges != converge.edges


def test_mapping_reproduces_canonical_edges():
    edges = [[4, 9], [9, 2, 4], [2, 2]]
    result = Canonicalizer().canonicalize_edges(edges)
    forward = result.vertex_mapping.original_to_canonical
    assert sorted([forward[v] for v in e] for e in edges) == result.canonical_form.edges


def test_mapping_directions_are_inverse():
    edges = [[3, 1], [1, 8], [8, 3, 5]]
    mapping = Canonicalizer().canonicalize_edges(edges).vertex_mapping
    for index, original in enumerate(mapping.canonical_to_original):
        assert mapping.original_to_canonical[original] == index
    assert set(mapping.canonical_to_original) == {1, 3, 5, 8}


def test_canonical_edges_sorted_and_labels_dense():
    result = Canonicalizer().canonicalize_edges([[7, 6], [6, 5], [5, 7, 6]])
    form = result.canonical_form
    assert form.edges == sorted(form.edges)
    assert {v for e in form.edges for v in e} == set(range(form.vertex_count))


def test_canonical_form_is_minimal_over_relabelings():
    edges = [[1, 2], [2, 3], [2, 4]]
    best, _ = wolfram_canonical_hypergraph(edges)
    for labels in permutations(range(4)):
        assert best <= sorted(_relabel(edges, labels))


def test_hypergraph_and_edge_list_agree():
    graph = Hypergraph()
    graph.add_edge([1, 2, 3])
    graph.add_edge([3, 4])
    canon = Canonicalizer()
    from_graph = canon.canonicalize(graph)
    from_edges = canon.canonicalize_edges([[1, 2, 3], [3, 4]])
    assert from_graph.canonical_form == from_edges.canonical_form
    assert from_graph.vertex_mapping == from_edges.vertex_mapping


def test_canonicalization_is_idempotent():
    canon = Canonicalizer()
    first = canon.canonicalize_edges([[9, 3], [3, 9], [9, 9, 1]]).canonical_form
    second = canon.canonicalize_edges(first.edges).canonical_form
    assert second == first