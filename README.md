# edstructs

Classic data structures and graph algorithms in plain Python. It needs no
third-party packages.

## What is inside

- `edstructs.avltree.AVLTree` is a self-balancing binary search tree with a
  cursor. The cursor methods are `search`, `current`, `current_level`,
  `insert` and `remove`. The tree also supports `len()`, `in` and iteration
  in ascending order. `fold` writes it in a bracketed text form and
  `AVLTree.unfold` reads integer trees back. `unfold` raises
  `TreeFormatError` when the text is malformed or describes a tree that is
  not a balanced search tree.
- `edstructs.avl_node.AVLNode` is the node type behind the tree. Each node
  keeps its own height and can report its balance factor.
- `edstructs.graph.Graph` is a directed or undirected graph. Each vertex keeps
  a list of its incident edges. The graph has a vertex cursor and an edge
  cursor (`goto_vertex`, `goto_edge`, `goto_edge_between`, `goto_edge_ref`,
  `find_vertex` and others), and you edit it with `add_vertex`, `add_edge`,
  `remove_vertex` and `remove_edge`. `Graph.unfold` loads a graph from text
  and raises `GraphFormatError` on bad input. `fold` writes the graph out
  again, always in `DIRECTED` form.
- `edstructs.elements.Vertex` and `edstructs.elements.Edge` are the elements
  of a graph. Each carries an item and a `visited` flag.
- `edstructs.items.City` is a named place with a latitude and a longitude.
  `edstructs.items.distance` gives the great-circle distance between two
  cities in kilometres. `edstructs.items.key_of` returns the key of a vertex
  item.
- `edstructs.disjointsets.DisjointSets` is union-find with path compression
  and union by rank. `find` returns `None` for an element that is in no set.
- `edstructs.traversals` provides `depth_first_scan`, `breadth_first_scan`
  and `topological_sorting`.
- `edstructs.mst` provides `prim_algorithm` and `kruskal_algorithm`, which
  compute minimum spanning trees. Each returns a `SpanningTree` holding the
  total `weight` and the list of `edges`. Both raise `DisconnectedGraphError`
  when the graph is not connected.

## Installing

```
pip install .
```

## AVL tree

```python
from edstructs.avltree import AVLTree

tree = AVLTree()
for key in (1, 2, 3, 4, 5):
    tree.insert(key)

print(tree.fold())      # [ 2 [ 1 [] [] ] [ 4 [ 3 [] [] ] [ 5 [] [] ] ] ]
print(3 in tree)        # True

tree.search(4)
tree.remove()
print(list(tree))       # [1, 2, 3, 5]

same = AVLTree.unfold("[ 2 [ 1 [] [] ] [ 3 [] [] ] ]")
print(same.height())    # 1
```

## Graphs and spanning trees

The text form of a graph is a sequence of whitespace-separated tokens:

1. `DIRECTED` or `UNDIRECTED`.
2. The number of vertices, followed by one item per vertex.
3. The number of edges, followed by one `<u-key> <v-key> <weight>` triple per
   edge.

By default each item is a single token. To read larger items, pass a
`parse_item` function. It receives the token iterator and returns one item;
for example, `City.parse` reads a name, a latitude and a longitude.

```python
from edstructs.graph import Graph
from edstructs.mst import kruskal_algorithm, prim_algorithm

text = """UNDIRECTED
3
a b c
3
a b 1.0
b c 2.0
a c 5.0
"""
g = Graph.unfold(text)

total, edges = kruskal_algorithm(g)
print(total)            # 3.0

g.find_vertex("a")      # Prim starts from the current vertex
total, edges = prim_algorithm(g)
print(total)            # 3.0
```

## Traversals

```python
from edstructs.traversals import breadth_first_scan, depth_first_scan

visits = []
depth_first_scan(g, lambda v, u: visits.append((v.key(), u.key())))
```

The callback receives each vertex together with the vertex it was reached
from. A vertex that starts a new scan is passed as its own predecessor.

If you pass `start`, only that vertex's connected component is scanned.
Without it, every vertex is covered, in insertion order.

`topological_sorting(graph)` returns the vertices of a directed acyclic graph
in topological order. It raises `ValueError` when the graph is undirected or
has a cycle.

## What it does not do

This is a library only. It has no command-line program, so there is nothing
to run on a file of graph or tree commands. Build and query the structures
from your own Python code.

## Running the tests

```
pip install .[test]
pytest
```