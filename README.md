# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies beyond the standard library.

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `dsakit.numbers`      | `digit_count`, `armstrong_sum`, `is_armstrong`, `factorial`, `ncr`, `ackermann`, `fibonacci`, `gcd`, `odd_even_sums`, and `statistics`, which returns a `Statistics` record (`total`, `mean`, `variance`, `stddev`) |
| `dsakit.hanoi`        | `hanoi_moves` returns a list of `Move` records for the Towers of Hanoi |
| `dsakit.arrays`       | `bubble_sort`, `principal_diagonal_sum`, `off_diagonal_sum`, and list resizing helpers `extend`, `shrink`, `remove_and_shrink`, `insert_at` |
| `dsakit.stack`        | `Stack`, bounded by a capacity or unbounded when the capacity is `None`, raising `StackOverflow` and `StackUnderflow` |
| `dsakit.queues`       | `LinearQueue`, `CircularQueue` and `Deque`, raising `QueueFull` and `QueueEmpty` |
| `dsakit.priority`     | a bounded `PriorityQueue` of `Item` entries, lowest priority number first |
| `dsakit.trees`        | binary tree `Node` with `insert`, `search`, `find_min`, `delete`, the generators `preorder`, `inorder`, `postorder`, and `copy_tree`, `trees_equal`, `merge_trees` |
| `dsakit.expressions`  | `precedence`, `infix_to_postfix`, `evaluate_postfix`, `evaluate_expression_tree`, raising `ExpressionError` |
| `dsakit.graphs`       | `dfs` and `bfs` over an adjacency matrix, returning a `Traversal` with `all_reached()` |
| `dsakit.hashing`      | `EmployeeTable`, a linear-probing hash table of `Employee` records, raising `TableFull` |

## Examples

Number routines:

```python
from dsakit.numbers import factorial, gcd, is_armstrong, ncr, statistics

gcd(12, 18)          # 6
factorial(5)         # 120
ncr(5, 2)            # 10
is_armstrong(153)    # True
statistics([2, 4, 4, 4, 5, 5, 7, 9]).stddev   # 2.0
```

Expressions use single-character operands; postfix evaluation uses integer
arithmetic with single-digit operands:

```python
from dsakit.expressions import evaluate_postfix, infix_to_postfix

infix_to_postfix("a+b*c")            # "abc*+"
evaluate_postfix("82-34*22^/+")      # 9
```

A stack with a fixed capacity:

```python
from dsakit.stack import Stack

stack = Stack(20)
stack.push(1)
stack.push(2)
stack.items()        # [2, 1], top first
stack.pop()          # 2
```

Queues default to a capacity of five. A `LinearQueue` does not reuse slots
until it has been emptied completely; a `CircularQueue` does:

```python
from dsakit.queues import CircularQueue

queue = CircularQueue(3)
queue.enqueue("a")
queue.enqueue("b")
queue.dequeue()      # "a"
```

A priority queue serves the lowest priority number first, and equal
priorities in arrival order:

```python
from dsakit.priority import PriorityQueue

pq = PriorityQueue()
pq.insert("low", 5)
pq.insert("high", 1)
pq.remove()          # "high"
```

A binary search tree (larger values go right, equal and smaller go left):

```python
from dsakit.trees import delete, inorder, insert, search

root = None
for value in (50, 30, 70, 20, 40):
    root = insert(root, value)

list(inorder(root))  # [20, 30, 40, 50, 70]
root = delete(root, 30)
search(root, 30)     # None
```

Graph traversal over a 0-based adjacency matrix:

```python
from dsakit.graphs import bfs

matrix = [
    [0, 1, 1],
    [1, 0, 0],
    [1, 0, 0],
]
result = bfs(matrix, 0)
result.order           # (0, 1, 2)
result.all_reached()   # True
```

An employee table keyed by `employee_id % size`, with an optional log file to
which each inserted record is appended:

```python
from dsakit.hashing import EmployeeTable

table = EmployeeTable(size=100)
table.insert(105, "Asha", 40000)   # 5
table.insert(205, "Ravi", 45000)   # 6, after probing past slot 5
table.slot_for(205)                # 6
```

Towers of Hanoi:

```python
from dsakit.hanoi import hanoi_moves

for move in hanoi_moves(3, "A", "B", "C"):
    print(move)      # "Move disk 1 from A to B", ...
```

## Errors

Operations that cannot proceed raise an exception instead of returning a
sentinel: a full stack raises `StackOverflow`, an empty one `StackUnderflow`;
full and empty queues raise `QueueFull` and `QueueEmpty`; a full employee table
raises `TableFull`; malformed expressions raise `ExpressionError` (a subclass
of `ValueError`). Out-of-range arguments raise `ValueError` or `IndexError`.

## What it does not do

dsakit is a library only. It has no command-line programs or interactive
menus: every structure and routine is used by calling it from Python code.
`EmployeeTable` keeps its records in memory; the log file it can write to is
only appended to and never read back.

## Running the tests

The tests use pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```