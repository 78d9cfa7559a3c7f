# aockit

A small toolkit for solving Advent of Code puzzles. It includes:

- puzzle input handling that downloads each file once and then caches it locally,
- a collection that runs and times both parts of each day,
- grid, breadth-first search and Dijkstra helpers for the usual map puzzles,
- solutions for days 1 to 5 of the 2025 event.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the solutions

To run every registered day in order:

```
aockit
```

For each day the command prints both answers and the time each part took. After the last day it prints the total time.

To run a single day:

```
aockit --day 3
```

A day that has no solution raises a `KeyError` ("Day N was not yet created").

Puzzle input is fetched from the Advent of Code site on first use. The request needs your session cookie. You can supply it through the `AOC_SESSION` environment variable or the `--aoc-session` option:

```
AOC_SESSION=placeholder aockit --day 1
aockit --aoc-session placeholder --day 1
```

If no session is available, a download raises `aockit.fetcher.FetchError`.

Downloaded data is stored in an `aoc_data` directory:

- puzzle input goes to `aoc_data/<year>/<day>/input`,
- puzzle descriptions go to `text.md` in the same folder, converted to Markdown.

The program looks for an existing `aoc_data` directory in the current directory and then in each parent directory. If it finds none, it creates one in the current directory. Once a file is cached, the site is not contacted again for it.

## Using the library

### Writing a solution

A solution subclasses `aockit.solution.PuzzleSolution` and implements `part1` and `part2`. Each method receives a `aockit.puzzle.Puzzle`, which has the raw text in `input` and its lines from `lines()`. A method may return any of the following:

- an `Answer`,
- a string,
- an int or a float,
- `None`, which reads as "No answer",
- an exception, whose message becomes the error.

`aockit.answer.to_answer` turns these values into an `Answer`.

```python
from aockit.puzzle import Puzzle
from aockit.solutions.day01 import Day

puzzle = Puzzle("L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n")
print(Day().part1(puzzle))  # 3
```

`Answer.display()` returns the value, or the error message when there is no value. `Answer.unwrap()` returns the value and raises `AnswerError` when there is none.

The `aoc_puzzle` decorator records the day and, optionally, the year of a solution class:

```python
from aockit.solution import PuzzleSolution, aoc_puzzle, set_year

@aoc_puzzle(day=6, year=2025)
class Day(PuzzleSolution):
    ...
```

If no day is given, the decorator reads it from the digits at the end of the class name, for example `class MySolution06`. Days must be between 1 and 25. If no year is given, the one set with `set_year` is used. When the day or year cannot be worked out, `AocConfigError` is raised.

`puzzle_description(solution_cls)` returns the cached Markdown description of a solution's puzzle, or a message saying why it could not be fetched.

### Running a collection

The 2025 solutions are available as a `SolutionCollection`:

```python
from aockit.solutions.registry import get_collection

collection = get_collection()
print(collection.get_days())               # [1, 2, 3, 4, 5]
answer, seconds = collection.run_day_part1(1)
part1, part2 = collection.prepare_bench(1) # load input once, call repeatedly
```

Other classes can be added with `collection.register(SolutionClass)`. The helpers in `aockit.collection` do the following:

- `timed` returns a result together with the elapsed seconds,
- `print_timed` prints the elapsed time before returning the result,
- `format_duration` formats a duration with two decimals and a unit: `s`, `ms`, `µs` or `ns`.

### Grids and path finding

```python
from aockit.tools.grid import parse_grid

grid = parse_grid("S.#\n..#\n..E")
result = (
    grid.apply_path_finder()
    .with_start("S")
    .with_end("E")
    .with_obstacles("#")
    .bfs()
    .run()
)
print(result.path)  # [(0, 0), (1, 0), (1, 1), (1, 2), (2, 2)] or another shortest path
print(grid.printer().with_legend())
```

A `Grid` stores cells by `(x, y)`. The shape does not have to be rectangular. Iteration runs by row, then by column, in ascending order. `parse_digit_grid` builds a grid of integers from lines of digits. Grids also provide:

- `transpose`,
- `to_diagonal`, which rotates the grid by 45 degrees,
- `fill_empty`,
- `retain`,
- `row`, `column`, `x_range` and `y_range`,
- `cardinal_neighbors` and `all_neighbors`.

`grid.printer()` returns a `GridPrinter` with these options:

- `with_legend`,
- `with_cell_width`,
- `with_cell_fill`,
- `with_cell_override_fn`.

`BfsBuilder` and `DijkstraBuilder` in `aockit.tools` can also be used on their own, with an explicit set of obstacles:

- If no bounds are given, the search stays inside the smallest rectangle that holds the start, the end and every obstacle.
- `BfsBuilder.use_dfs()` makes the search go depth first instead.
- `BfsBuilder.run()` returns `None` when the end cannot be reached.
- `DijkstraBuilder.with_cost_func` takes a function of a `CostInput` (`origin`, `next`, `cost`). The function returns the total cost after the step.
- `DijkstraResult.path()` returns `None` when the end was not reached.

## Limitations

- Only days 1 to 5 of 2025 have solutions.
- There is no command to submit answers.
- There is no command to run benchmarks. `prepare_bench` only returns the callables to time.