# algoworks

A collection of classic algorithms and data structures, each in its own
module and each with a small command that shows it at work. The package
uses only the standard library.

| Module | What it does |
| --- | --- |
| `algoworks.boggle` | `Trie` of upper-case words and a `Boggle` solver that finds every trie word traceable through adjacent grid cells |
| `algoworks.brute_force` | `find_first`: naive search for the first occurrence of a pattern |
| `algoworks.zsearch` | `z_array`, `find_all` and `search_lines`: Z-algorithm pattern search, line by line |
| `algoworks.circular_queue` | `CircularQueue`: a fixed-capacity queue that drops its oldest item when full |
| `algoworks.maze` | `MazeGraph`: depth-first backtracking to find a route through an undirected graph |
| `algoworks.dijkstra` | `Graph` and `ShortestPathTree`: Dijkstra's shortest paths with path reconstruction and a summary table |
| `algoworks.stable_marriage` | `gale_shapley`, `prefers` and `format_report`: Gale–Shapley stable matching, recorded round by round |
| `algoworks.jobs` | `Job`, `parse_jobs`, `load_jobs` and `JobSystem`: per-class priority queues run on per-class processor slots in simulated ticks |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

```
algoworks-boggle
algoworks-brute-force [FILE] [PATTERN]
algoworks-zsearch [FILE]
algoworks-circular-queue
algoworks-maze [START] [END]
algoworks-dijkstra [--source N] [--interactive]
algoworks-stable-marriage
algoworks-jobs [FILE] [--seed N]
```

- `algoworks-boggle` solves a built-in 4×4 grid against a small word list and
  prints `Found: WORD` for each word.
- `algoworks-brute-force` reads a text file (default `KJB.txt`) and prints the
  index of the first occurrence of the pattern (default `revolters`).
- `algoworks-zsearch` prompts for a pattern, then prints every line of the file
  (default `KingJamesBibleProjGutenberg.txt`) that holds it, with the offsets.
- `algoworks-circular-queue` fills a queue of capacity 7 past its capacity,
  dequeues twice, and prints the queue after each step.
- `algoworks-maze` finds a route through a sample maze, by default from node 0
  to node 27, or reports that there is none.
- `algoworks-dijkstra` prints a table of distances and paths from the source
  vertex (default 0) on a sample 9-vertex graph. With `--interactive` it
  instead prompts for start and end nodes until `-1` is entered; paths shown are
  always those from the `--source` vertex.
- `algoworks-stable-marriage` matches four queens with four kings and prints
  every round and the final engagements.
- `algoworks-jobs` loads jobs from a file (default `jobs.txt`; a header line,
  then `id class priority` per line), runs the scheduler in the background in
  0.1-second ticks, and prompts for more jobs until `Q` is entered. It then
  prints every completed job. `--seed` fixes the random runtimes (15–25 s).

## Using the library

```python
from algoworks.boggle import Boggle, Match, Trie

trie = Trie(["CAT", "DOG"])
trie.search("CA")      # Match.PREFIX
trie.search("CAT")     # Match.WORD
"DOG" in trie          # True
Boggle(["CAT", "DOG"], trie).find_words()
```

```python
from algoworks.zsearch import find_all, z_array

z_array("aabxaab")
find_all("abcabc", "abc")   # [0, 3]
```

```python
from algoworks.circular_queue import CircularQueue

queue = CircularQueue(2)
for value in (1, 2, 3):
    queue.enqueue(value)
list(queue)         # [2, 3]
queue.dequeue()     # 2; IndexError when empty
```

```python
from algoworks.dijkstra import Graph

graph = Graph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
tree = graph.shortest_paths(0)
tree.path(2)        # [0, 1, 2]; None if unreachable
print(tree.format_table())
```

Unreachable vertices carry the distance `algoworks.dijkstra.UNREACHABLE`.

```python
from algoworks.stable_marriage import gale_shapley

result = gale_shapley([[0, 1], [0, 1]], [[1, 0], [0, 1]])
result.engagements  # acceptor index -> proposer index
result.rounds       # one Round per round of proposals
```

```python
import random
from algoworks.jobs import Job, JobSystem

system = JobSystem({"A": 1}, rng=random.Random(1))
system.add_job(Job("J001", "A", priority=5, runtime=1.0))
system.new_job("A", 3)
done = system.drain()   # runs ticks until nothing is waiting or running
```

## Limits

- No text files are bundled: the search commands need a file to be given or
  present in the working directory.
- The job scheduler runs on a simulated clock inside one process; it does not
  execute real work or keep anything between runs.