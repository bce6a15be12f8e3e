# algokit

A small collection of classic algorithms and data structures with no
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sliceutils` | `find_max`, `remove_duplicates`, `reverse_slice`, `filter_even` |
| `algokit.reverse` | `reverse_string` and a command-line entry point |
| `algokit.lis` | `lis_length_dp`, `lis_length`, `longest_increasing_subsequence` |
| `algokit.graphs` | `breadth_first_search`, `dijkstra`, `bellman_ford`, `UNREACHABLE`, `NO_PREDECESSOR` |
| `algokit.containers` | `Pair`, `Stack`, `Queue`, `Set`, `EmptyCollectionError` and helpers `union`, `intersection`, `difference`, `filter_items`, `map_items`, `reduce_items`, `contains`, `find_index`, `remove_duplicates` |
| `algokit.circuit_breaker` | `CircuitBreaker`, `Config`, `Metrics`, `State`, `CircuitBreakerOpenError`, `TooManyRequestsError` |

## Examples

List helpers and string reversal:

```python
from algokit.sliceutils import find_max, remove_duplicates, filter_even
from algokit.reverse import reverse_string

find_max([3, 1, 4, 1, 5, 9, 2, 6])      # 9
find_max([])                            # 0
remove_duplicates([3, 1, 4, 1, 5])      # [3, 1, 4, 5]
filter_even([1, 2, 3, 4, 5, 6])         # [2, 4, 6]
reverse_string("Go is fun!")            # "!nuf si oG"
```

Longest strictly increasing subsequence:

```python
from algokit.lis import lis_length, lis_length_dp, longest_increasing_subsequence

nums = [10, 9, 2, 5, 3, 7, 101, 18]
lis_length(nums)                        # 4, O(n log n)
lis_length_dp(nums)                     # 4, O(n^2)
longest_increasing_subsequence(nums)    # [2, 5, 7, 101]
```

Shortest paths on adjacency lists. Entry `u` of a graph lists the vertices
that `u` has edges to; weights form a parallel list of the same shape.
Unreachable vertices get the distance `UNREACHABLE` (1 000 000 000) and the
predecessor `-1`. A source outside the graph, or weights that do not match the
graph's shape, raise `ValueError`; `dijkstra` also rejects negative weights.

```python
from algokit.graphs import breadth_first_search, dijkstra, bellman_ford

graph = [[1, 2], [0, 3, 4], [0, 5], [1], [1], [2]]
breadth_first_search(graph, 0)
# ([0, 1, 1, 2, 2, 2], [-1, 0, 0, 1, 1, 2])

graph = [[1, 2], [3], [3], []]
weights = [[4, 1], [1], [5], []]
dijkstra(graph, weights, 0)
# ([0, 4, 1, 5], [-1, 0, 0, 1])

graph = [[1], [2], [3], []]
weights = [[-5], [10], [-3], []]
bellman_ford(graph, weights, 0)
# ([0, -5, 5, 2], [True, True, True, True], [-1, 0, 1, 2])
```

`bellman_ford` marks a vertex `False` in its second list when it cannot be
reached or when a negative cycle lies on the way to it.

Generic containers:

```python
from algokit.containers import Pair, Stack, Queue, Set, union, reduce_items

Pair("hello", 42).swap()                # Pair(first=42, second='hello')

stack = Stack()
stack.push(1)
stack.push(2)
stack.pop()                             # 2
len(stack)                              # 1

queue = Queue()
queue.enqueue("first")
queue.enqueue("second")
queue.dequeue()                         # "first"

both = union(Set([1, 2, 3]), Set([3, 4, 5]))
len(both)                               # 5
4 in both                               # True

reduce_items([1, 2, 3, 4, 5], 0, lambda acc, n: acc + n)   # 15
```

`pop`, `peek`, `dequeue` and `front` on an empty container raise
`EmptyCollectionError`, a subclass of `IndexError`.

A circuit breaker around an unreliable call:

```python
from algokit.circuit_breaker import CircuitBreaker, Config

breaker = CircuitBreaker(
    Config(
        max_requests=3,
        timeout=10.0,
        ready_to_trip=lambda m: m.consecutive_failures >= 3,
        on_state_change=lambda name, old, new: print(f"{name}: {old} -> {new}"),
    )
)
result = breaker.call(lambda: "success")   # "success"
breaker.state                              # State.CLOSED
breaker.metrics                            # Metrics(requests=1, successes=1, ...)
```

`Config` fields left at zero or `None` take their defaults: `max_requests=1`,
`interval=60.0` and `timeout=30.0` seconds, and a trip rule of five
consecutive failures. An exception raised by the operation counts as a failure
and is raised again to the caller. When the breaker is open, `call` raises
`CircuitBreakerOpenError` without running the operation until `timeout`
seconds have passed; it then goes half-open, where calls beyond `max_requests`
raise `TooManyRequestsError`. A success while half-open closes the breaker, a
failure opens it again. Passing a set `threading.Event` as `cancel` makes
`call` raise `concurrent.futures.CancelledError` before doing anything.

## Command line

`algokit-reverse` reads one line from standard input and prints it reversed;
with empty input it prints nothing:

```
echo "hello" | algokit-reverse
```

The same command is available as `python -m algokit.reverse`.