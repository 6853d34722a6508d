"""Classic data structures and graph algorithms: AVL trees, disjoint sets, graphs, traversals and spanning trees."""

__version__ = "1.1.0"

__all__ = [
    "avl_node",
    "avltree",
    "items",
    "elements",
    "graph",
    "disjointsets",
    "traversals",
    "mst",
]