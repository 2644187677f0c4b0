# hyperrewrite

Directed hypergraphs with ordered hyperedges, and tools to work with them. The
package has no dependencies beyond the Python standard library (Python 3.10 or
later).

## Modules

- `hyperrewrite.hypergraph` — `Vertex`, `Hyperedge` and `Hypergraph`.
  A `Hypergraph` adds edges with `add_edge` (vertices are created as they are
  used), removes them with `remove_edge` or `remove_edges_matching`, looks up
  edges with `get_edge` and `edges_containing`, collects the edges reachable
  within a number of hops with `edges_within_radius`, and makes a copy with
  vertices renumbered from zero with `clone`. Two hypergraphs compare equal when
  they hold the same edge vertex sequences, whatever their edge ids.
- `hyperrewrite.canonicalization` — `Canonicalizer` and
  `wolfram_canonical_hypergraph`. Every relabelling of the vertices is tried and
  the lexicographically smallest sorted edge list is kept, so edge lists that
  differ only in vertex names get the same `CanonicalForm`. The
  `VertexMapping` in the result records which original vertex each canonical
  label stands for. The search is exhaustive, so it suits small hypergraphs.
- `hyperrewrite.patterns` — `PatternVertex` (concrete or variable),
  `PatternEdge`, `PatternHypergraph`, `VariableAssignment` and `PatternMatcher`.
  `find_matches_around` matches a pattern among the edges near an anchor vertex,
  `find_all_matches` tries every vertex and keeps one match per distinct edge
  sequence, and `matches_at` checks a given assignment. Edges match position by
  position. `EdgeSignature` and `EdgeSignatureIndex` summarise edges by arity and
  vertex labels to filter candidate edges.
- `hyperrewrite.rewriting` — `RewritingRule` (a left-hand and a right-hand
  pattern), `RewritingResult`, and `rule_to_string` / `result_to_string` for
  display.
- `hyperrewrite.deque` — `Deque`, a bounded double-ended queue that is safe to
  share between threads. Its capacity is raised to at least 4 and rounded up to
  a power of two, and it holds at most `capacity - 1` items. `try_push_*` returns
  False when full and `try_pop_*` returns None when empty; `push_*` and `pop_*`
  wait until they can succeed.
- `hyperrewrite.pool` — `ThreadLocalPool`, a pool of reusable objects kept
  separately for each thread; `acquire` builds a new object with the factory
  given to the pool when the calling thread's pool is empty.

## Installation

```
pip install .
```

## Example

```python
from hyperrewrite.hypergraph import Hypergraph
from hyperrewrite.patterns import PatternEdge, PatternHypergraph, PatternMatcher, PatternVertex

target = Hypergraph()
target.add_edge([1, 2])
target.add_edge([2, 3])
target.add_edge([3, 1])
target.add_edge([4, 5])

pattern = PatternHypergraph()
pattern.add_edge(PatternEdge([PatternVertex.variable(100), PatternVertex.variable(101)]))
pattern.add_edge(PatternEdge([PatternVertex.variable(101), PatternVertex.variable(102)]))

for match in PatternMatcher().find_matches_around(target, pattern, 2, 2):
    print(match.matched_edges, match.assignment.variable_to_concrete)
```

Canonical forms ignore how vertices are labelled:

```python
from hyperrewrite.canonicalization import Canonicalizer

canon = Canonicalizer()
a = canon.canonicalize_edges([[5, 7], [7, 9]]).canonical_form
b = canon.canonicalize_edges([[1, 2], [2, 3]]).canonical_form
assert a == b
print(a.to_string())  # CanonicalForm(vertices=3, edges=[[0,1], [1,2]])
```

A rewriting rule pairs two patterns; variables that appear only on the
right-hand side stand for fresh vertices:

```python
from hyperrewrite.rewriting import RewritingRule, rule_to_string

lhs = PatternHypergraph()
lhs.add_edge(PatternEdge([PatternVertex.variable(1), PatternVertex.variable(2)]))
rhs = PatternHypergraph()
rhs.add_edge(PatternEdge([PatternVertex.variable(1), PatternVertex.variable(2)]))
rhs.add_edge(PatternEdge([PatternVertex.variable(2), PatternVertex.variable(3)]))

rule = RewritingRule(lhs, rhs)
print(rule_to_string(rule))           # {{x1,x2}} -> {{x1,x2},{x2,x3}}
print(sorted(rule.get_all_variables()))  # [1, 2, 3]
```

## What the package does not do

- It does not apply rewriting rules. `RewritingRule` and `RewritingResult`
  describe a rule and the outcome of an application, but nothing here replaces
  matched edges in a hypergraph, evolves a hypergraph over several steps, or
  builds a multiway graph of states, events, causal or branchial edges.
- It has no scheduler for running matching work in parallel and no
  command-line program; it is a library only.

## Running the tests

```
pip install .[test]
pytest
```