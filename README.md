# bintree

A small linked binary tree. Each `Node` in `bintree.node` holds an integer
value and links to its parent, its left child and its right child. Nodes can
be inserted above existing children, detached, walked in three orders, and
measured in several ways.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`insert_left(value)` and `insert_right(value)` create a child, link it in and
return it. If the node already has a child on that side, the new node goes in
between: the old child becomes the new node's child on the same side, and its
parent link is updated.

`Node(value, parent)` makes a node that records `parent` as its parent without
linking it into the parent's children; `parent` defaults to `None`. The
insertion methods do both.

`detach()` removes a subtree from its parent, clears its parent link and
returns the node.

## Walking

`preorder()`, `inorder()` and `postorder()` are generators that yield the
stored values in that order. They walk without recursion, so deep trees do not
hit the recursion limit.

```python
list(root.preorder())   # [98, 12, 54, 402, 128]
list(root.inorder())    # [12, 54, 98, 128, 402]
list(root.postorder())  # [54, 12, 128, 402, 98]
```

## Measuring

| Method         | Result                                                                 |
|----------------|------------------------------------------------------------------------|
| `is_leaf()`    | `True` if the node has no children                                     |
| `is_root()`    | `True` if the node has no parent                                       |
| `height()`     | edges on the longest path down to a leaf (0 for a single node)         |
| `depth()`      | edges on the path up to the root (0 for a root)                        |
| `size()`       | number of nodes in the subtree                                         |
| `leaves()`     | number of leaves in the subtree                                        |
| `nodes()`      | number of nodes in the subtree with at least one child                 |
| `balance()`    | levels of the left subtree minus levels of the right, where an empty side counts 0 and a one-node side counts 1 |
| `is_full()`    | `True` if every node in the subtree has zero or two children           |
| `is_perfect()` | `True` if every inner node has two children and all leaves lie at the same depth |
| `sibling()`    | the other child of this node's parent, or `None`                       |
| `uncle()`      | the sibling of this node's parent, or `None`                           |

For the tree built above:

```python
root.height()      # 2
root.size()        # 5
root.leaves()      # 2
root.nodes()       # 3
root.balance()     # 0
root.is_full()     # False
left.sibling()     # Node(402)
```

## What it does not do

The package has no level-order walk, no way to print or draw a tree, and no
command-line tool. It keeps no ordering of values: it is a plain linked tree,
not a search tree.