# dsakit

A small library of textbook data structures and algorithms, written in plain
Python with no third-party dependencies.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Contents

| Module | What it holds |
| --- | --- |
| `dsakit.searching` | `linear_search`, `binary_search` |
| `dsakit.arrays` | `FixedArray` (bounded array with `insert`/`delete`, raising `CapacityError`), `mean`, `matrix_add`, `matrix_multiply`, `transpose`, `count_zeros`, `is_sparse` |
| `dsakit.stacks` | `ArrayStack` (bounded), `LinkedStack` (unbounded), `StackOverflowError`, `StackUnderflowError` |
| `dsakit.expressions` | `infix_to_postfix`, `precedence`, `is_operator`, `parentheses_match`, `brackets_pair`, `brackets_match` |
| `dsakit.graphs` | `bfs`, `dfs` over an adjacency matrix |
| `dsakit.trees` | `TreeNode`, `in_order`, `pre_order`, `post_order`, `is_bst`, `search`, `iterative_search`, `insert`, `in_order_predecessor`, `delete`, `DuplicateKeyError` |
| `dsakit.avl` | `AVLNode`, `insert`, `left_rotate`, `right_rotate`, `height`, `balance_factor`, `pre_order`, `in_order` |

## Examples

Searching:

```python
from dsakit.searching import binary_search, linear_search

binary_search([2, 5, 7, 11, 14, 23, 29, 35, 41], 41)  # 8
linear_search([23, 47, 73], 99)                      # -1
```

Bounded array:

```python
from dsakit.arrays import FixedArray, CapacityError

array = FixedArray(6, [2, 7, 18, 27, 88])
array.insert(3, 45)   # [2, 7, 18, 45, 27, 88]
array.delete(0)       # returns 2
```

Inserting into a full `FixedArray` raises `CapacityError`; an index out of
range raises `IndexError`.

Matrices are lists of rows:

```python
from dsakit.arrays import matrix_multiply, transpose, is_sparse

matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])  # [[19, 22], [43, 50]]
transpose([[1, 2], [3, 4]])                          # [[1, 3], [2, 4]]
is_sparse([[0, 0], [0, 1]])                          # True
```

Stacks:

```python
from dsakit.stacks import ArrayStack, LinkedStack, StackOverflowError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
stack.peek(1)      # 2, the top is position 1
try:
    stack.push(3)
except StackOverflowError:
    print("stack is full")

linked = LinkedStack()
linked.push("a")
linked.pop()       # "a"
```

Popping, `top()` or `bottom()` on an empty stack raises `StackUnderflowError`.

Infix to postfix and bracket checking:

```python
from dsakit.expressions import infix_to_postfix, brackets_match, parentheses_match

infix_to_postfix("p-q-r/a")             # "pq-ra/-"
brackets_match("[4-6]((8){(9-8)})")     # True
parentheses_match("((8(*--$$9)))")      # True
```

`infix_to_postfix` treats every character other than `+ - * /` as an operand.
`parentheses_match` allows nesting up to ten levels and `brackets_match` up to
one hundred; deeper nesting raises `StackOverflowError`.

Graph traversal over an adjacency matrix (an edge is an entry equal to 1):

```python
from dsakit.graphs import bfs, dfs

graph = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 1, 0, 0, 0, 0],
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]
print(bfs(graph, 0))
print(dfs(graph, 0))
```

Binary search trees:

```python
from dsakit import trees

root = None
for key in (9, 4, 11, 2, 7, 15, 5, 8, 14):
    root = trees.insert(root, key)
trees.in_order(root)             # [2, 4, 5, 7, 8, 9, 11, 14, 15]
trees.search(root, 14).data      # 14
root = trees.delete(root, 8)
trees.is_bst(root)               # True
```

Inserting a key that is already present raises `DuplicateKeyError`.

AVL tree:

```python
from dsakit import avl

root = None
for key in (1, 2, 4, 5, 6, 3):
    root = avl.insert(root, key)
print(avl.pre_order(root))
print(avl.in_order(root))        # [1, 2, 3, 4, 5, 6]
```

`avl.insert` ignores keys that are already present.

## What is not included

dsakit has no sorting routines, no queue or deque types and no linked-list
classes. It is a library only: it installs no command-line program.