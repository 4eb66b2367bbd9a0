# vf2

An implementation of the VF2 algorithm. It enumerates

- graph isomorphisms,
- subgraph isomorphisms, and
- induced subgraph isomorphisms

from a query graph to a data graph. Graphs can be directed or undirected.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Graphs

Build the query and data graphs with `vf2.graph.LabeledGraph`, or with your
own subclass of the abstract class `vf2.graph.Graph`, which asks for
`is_directed`, `node_count`, `node_label`, `neighbors`, `contains_edge` and
`edge_label`. Nodes are identified by integer indices starting at 0. Edge
directions are given with `vf2.graph.Direction.OUTGOING` and
`Direction.INCOMING`; undirected graphs ignore the direction.

`LabeledGraph` offers:

- `LabeledGraph(directed=True)` — an empty graph;
- `LabeledGraph.from_edges(edges, directed=True)` — a graph built from
  `(source, target)` pairs, with nodes created up to the largest index seen
  and every node and edge label set to `None`;
- `add_node(label=None)` — adds a node and returns its index;
- `add_edge(source, target, label=None)` — adds an edge; adding an edge that
  already exists replaces its label.

Asking for a node that does not exist raises `IndexError`; asking
`edge_label` for an edge that does not exist raises `KeyError`.

## Searching

Pick the function for the problem you want to solve:

| Problem                       | Function                                                 |
|-------------------------------|----------------------------------------------------------|
| Graph isomorphisms            | `vf2.builder.isomorphisms(query, data)`                  |
| Subgraph isomorphisms         | `vf2.builder.subgraph_isomorphisms(query, data)`         |
| Induced subgraph isomorphisms | `vf2.builder.induced_subgraph_isomorphisms(query, data)` |

Each returns a `Vf2Builder`. Then ask the builder for results:

| Desired output           | Call                                     |
|--------------------------|------------------------------------------|
| First isomorphism        | `builder.first()`                        |
| List of isomorphisms     | `builder.vec()`                          |
| Iterator of isomorphisms | `builder.iter()` or `iter(builder)`      |

An isomorphism is a list in which the value at position `i` is the data node
that query node `i` maps to. Results come in a fixed search order. `first()`
returns `None` when there is no match.

Collecting every isomorphism into a list can take a lot of memory; iterate
instead to inspect matches as they are found. The iterator is a
`vf2.iter.IsomorphismIter`. Its `next_ref()` returns the current mapping
without copying it (the list is reused by the search, so copy it if you keep
it), and `None` when the search is complete; `into_next()` returns a copy of
the next mapping, or `None`.

### Example

```python
from vf2.builder import subgraph_isomorphisms
from vf2.graph import LabeledGraph

query = LabeledGraph.from_edges([(0, 1)], directed=True)
data = LabeledGraph.from_edges([(0, 1), (1, 2)], directed=True)

print(subgraph_isomorphisms(query, data).vec())
# [[0, 1], [1, 2]]
```

### Labels and equality

Node and edge labels are ignored unless you configure equality on the
builder. Each of these returns a new builder and leaves the old one as it was:

- `default_eq()` compares node and edge labels with `==`;
- `node_eq(func)` sets a function `func(query_label, data_label) -> bool` for nodes;
- `edge_eq(func)` does the same for edges.

```python
from vf2.builder import induced_subgraph_isomorphisms
from vf2.graph import LabeledGraph

query = LabeledGraph(directed=True)
query.add_node("black")
query.add_node("white")
query.add_edge(0, 1, "thin")

data = LabeledGraph(directed=True)
data.add_node("white")
data.add_node("black")
data.add_node("white")
data.add_edge(0, 1, "thin")
data.add_edge(1, 2, "thin")

matches = (
    induced_subgraph_isomorphisms(query, data)
    .node_eq(lambda left, right: left == right)
    .edge_eq(lambda left, right: left == right)
    .vec()
)
print(matches)
# [[1, 2]]
```

### Errors

Starting a search raises `ValueError` for:

- an empty query graph;
- a query graph with more nodes than the data graph;
- for `isomorphisms`, graphs of different sizes.

## Limits

This is a library only: it has no command-line tool and does not read or
write graph files. The search prunes candidates by checking the edges to
nodes that are already mapped; it does no look-ahead on the sizes of the
terminal sets, so large graphs can be slow to search.

## Running the tests

```
pip install .[test]
pytest
```