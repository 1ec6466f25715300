# nbtree

A small non-binary tree stored as a table of nodes. Each node records its
value together with the positions of its first son, its next brother and its
parent. The package offers pre-, in-, post- and level-order traversals,
search, node and leaf counts, level and depth queries, and an interactive
text menu for exploring a built-in sample tree.

## Installing

```
pip install .
```

## The interactive menu

```
nbtree
```

The same menu can be started with `python -m nbtree.cli`. `nbtree --help`
shows the usage line; the command takes no other options.

The menu works on a built-in ten-node tree (`A` at the root, with children
`B` and `C`, and so on down to `J`) and offers:

1. PreOrder traversal
2. InOrder traversal
3. PostOrder traversal
4. LevelOrder traversal
5. Print the node table
6. Search for a node
7. Count the leaves
8. Find the level of a node
9. Depth of the tree
10. Compare two nodes and show the larger one
11. Exit

Choices are read one line at a time; anything that is not a number from 1 to
11 brings the menu back. For the node questions, the first character of the
line is taken as the node value. The screen is cleared between steps only
when output goes to a terminal. The menu ends on choice 11 or when input
runs out. Its messages are in Indonesian.

## Using the library

```python
from nbtree.tree import create_tree, larger

tree = create_tree()

tree.preorder()       # ['A', 'B', 'D', 'E', 'I', 'J', 'C', 'F', 'G', 'H']
tree.level_order()    # ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'I', 'J']
tree.inorder()
tree.postorder()
tree.search("E")      # True
"E" in tree           # True
tree.count_nodes()    # 10
tree.count_leaves()
tree.level("I")
tree.depth()
print(tree.describe())

larger("C", "H")      # 'H'
```

`level` and `depth` count the first-son steps taken by a pre-order walk
that climbs back up through parents: `level` counts them up to the node
asked for (the root is level 0) and raises `ValueError` if the value is not
in the tree; `depth` counts them over the whole walk. An empty tree gives
empty traversals and a depth of 0.

### Building your own tree

A tree can be built from your own node table with `NonBinaryTree(nodes)`,
using `Node(info, first_son, next_brother, parent)` entries. The first entry
is the root at position 1, the next is position 2, and so on; a link value
of 0 means "no node". A table holds at most 20 nodes, and a table that is
longer or that links to a position it does not have raises `ValueError`.
A tree whose root value is the empty string counts as empty.

```python
from nbtree.tree import Node, NonBinaryTree

tree = NonBinaryTree([Node("R", 2), Node("S", 0, 3, 1), Node("T", 0, 0, 1)])
tree.preorder()       # ['R', 'S', 'T']
```

### Driving the menu from code

`nbtree.cli.run_menu(tree, input_stream, output)` runs the menu on any tree,
reading choices from one text stream and writing to another.

## What it does not do

The tree is fixed once built: there are no operations to add, remove or
change nodes, and trees are not saved to or loaded from files.

## Running the tests

```
pip install ".[test]"
pytest
```