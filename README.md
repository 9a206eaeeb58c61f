# structkit

Small, dependency-free implementations of classic data structures and graph
algorithms. Each one is a library class and also a small command that reads
its input from standard input.

## Installation

```
pip install structkit
```

For running the tests:

```
pip install "structkit[test]"
pytest
```

## What is inside

| Module | Class / function | What it does |
| --- | --- | --- |
| `structkit.avl_tree` | `AVLTree` | Self-balancing binary search tree of integers; duplicates are ignored |
| `structkit.binary_search_tree` | `BinarySearchTree` | Plain (unbalanced) binary search tree with `search` |
| `structkit.linked_list` | `LinkedList` | Singly linked list with `append`, `prepend`, `delete_last` |
| `structkit.doubly_linked_list` | `DoublyLinkedList` | Doubly linked list, iterable forwards and with `reversed()` |
| `structkit.stack` | `Stack` | LIFO stack with `push`, `pop`, `is_empty` |
| `structkit.linked_queue` | `Queue` | FIFO queue with `enqueue`, `dequeue`, `is_empty` |
| `structkit.max_heap` | `MaxHeap`, `heap_sort` | Binary max-heap with `insert` / `extract_max`, and heap sort built on it |
| `structkit.directed_graph` | `DirectedGraph` | Adjacency-list digraph with `reversed()` and Kosaraju's strongly connected components |
| `structkit.undirected_graph` | `UndirectedGraph` | Adjacency-list graph with connected components |
| `structkit.weighted_graph` | `WeightedGraph`, `INF` | Weighted undirected graph with Dijkstra's shortest distances |

All containers support `len()` and iteration. The trees also support `in`,
and `inorder()` returns their values in ascending order; `AVLTree` adds
`height()` and `root_value()`.

`pop`, `dequeue`, `extract_max`, `delete_last` and `root_value` raise
`IndexError` when the structure is empty. Graph nodes are numbered
`0 .. size-1`; an out-of-range node raises `IndexError`, a negative size or a
negative edge weight raises `ValueError`. `add_edge` and the trees' `insert`
return `False` when the edge or value was already present.

## Library use

```python
from structkit.avl_tree import AVLTree
from structkit.max_heap import MaxHeap, heap_sort
from structkit.directed_graph import DirectedGraph
from structkit.weighted_graph import WeightedGraph

tree = AVLTree([3, 1, 2, 5, 4])
print(list(tree))          # [1, 2, 3, 4, 5]
print(4 in tree, len(tree), tree.height())

heap = MaxHeap([6, 4, 3, 2, 4, 3])
print(heap.extract_max())  # 6
print(heap_sort([6, 4, 3, 2, 4, 3]))  # [2, 3, 3, 4, 4, 6]

graph = DirectedGraph(5)
for source, target in [(0, 1), (1, 2), (2, 0), (3, 4)]:
    graph.add_edge(source, target)
print(graph.strongly_connected_components())

roads = WeightedGraph(4)
roads.add_edge(0, 1, 4)
roads.add_edge(1, 3, 2)
roads.add_edge(0, 3, 10)
print(roads.dijkstra(3))   # [6, 2, 1000000000, 0]; unreachable nodes get INF
```

Linked lists, stacks, queues, the heap and the directed and undirected graphs
offer `format()`, which renders their contents as text, for example
`1 --> 2 --> NULL` for a `LinkedList` and `1 <--> 2 <--> NULL` for a
`DoublyLinkedList`. Graph neighbours are listed most recently added first.

## Commands

Each command reads whitespace-separated integers from standard input (first a
count, then the values or edges), prints a prompt before each number it reads,
and then prints the result:

| Command | Reads | Prints |
| --- | --- | --- |
| `structkit-avl` | numbers | the AVL tree in order |
| `structkit-bst` | numbers | the binary search tree in order |
| `structkit-list` | numbers | the list after prepending 5 and dropping the last node |
| `structkit-dlist` | numbers | the doubly linked list |
| `structkit-stack` | numbers | the stack from top to bottom |
| `structkit-queue` | numbers | the queue from front to back |
| `structkit-heapsort` | nothing | the array `6 4 3 2 4 3` sorted with heap sort |
| `structkit-scc` | node count, edge count, edges as `source target` | one strongly connected component per line |
| `structkit-components` | node count, edge count, edges as `a b` | the connected components, numbered |
| `structkit-dijkstra` | node count, edge count, edges as `a b weight` | shortest distances from node 3 |

For example:

```
echo "3 2 1 3" | structkit-avl
```

When the input runs out, is not an integer, or names a node that does not
exist, the command reports the problem on standard error and exits with
status 1. `structkit-dijkstra` always starts from node 3, so the graph needs
at least four nodes.

## Limits

The structures are in-memory only; nothing is saved to disk. The trees have no
deletion, and the weighted graph offers single-source distances only, without
the paths themselves.