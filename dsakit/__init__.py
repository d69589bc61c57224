"""Classic data structures and algorithms: searching, arrays, stacks, expressions, graphs, BST and AVL trees."""

__version__ = "0.1.0"