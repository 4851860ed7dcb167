# adventsolver

Solvers for a selection of Advent of Code puzzles. Each puzzle day is a module
of plain functions and small classes. They parse puzzle input text and compute
the answers. The package depends only on the standard library.

## Modules

| Module | Puzzle |
| --- | --- |
| `adventsolver.y2022_day15` | Beacon Exclusion Zone |
| `adventsolver.y2022_day16` | Proboscidea Volcanium (valve parsing and graph simplification) |
| `adventsolver.y2022_day17` | Pyroclastic Flow (rocks falling into a tower) |
| `adventsolver.y2022_day17_shapes` | Rock shapes and bitmaps for the tower |
| `adventsolver.y2022_day18` | Boiling Boulders |
| `adventsolver.y2022_day20` | Grove Positioning System (list mixing) |
| `adventsolver.y2022_day21` | Monkey Math |
| `adventsolver.y2023_day01` | Trebuchet?! |
| `adventsolver.y2023_day02` | Cube Conundrum |
| `adventsolver.y2023_day03` | Gear Ratios |
| `adventsolver.y2023_day04` | Scratchcards |
| `adventsolver.y2023_day05` | If You Give A Seed A Fertilizer |
| `adventsolver.y2023_day06` | Wait For It |
| `adventsolver.y2023_day07` | Camel Cards |
| `adventsolver.y2023_day08` | Haunted Wasteland |
| `adventsolver.y2023_day09` | Mirage Maintenance |

## Input text

Most parsers split their input on `"\n"` and read every line. Some of them reject
an empty line, so remove the trailing newline of a puzzle file before you pass
the text in:

```python
with open("input.txt") as fh:
    text = fh.read().rstrip("\n")
```

Malformed input raises `ValueError`.

## Examples

```python
from adventsolver.y2023_day01 import parse_calibration_values

print(parse_calibration_values(text))
```

```python
from adventsolver.y2022_day15 import parse_network

network = parse_network(text, False)
print(len(network.invalid_beacon_locations(2000000)))

tight = parse_network(text, True)
print(tight.possible_beacon_locations())
```

```python
from adventsolver.y2022_day17 import Room, parse_jet_directions

room = Room(7, parse_jet_directions(text))
for _ in range(2022):
    room.drop_shape()
print(room.tower_height())
```

```python
from adventsolver.y2022_day21 import ROOT_MONKEY_NAME, create_tree, yell_root

print(yell_root(text))

tree = create_tree("humn", text)
tree.evaluate(ROOT_MONKEY_NAME)
print(tree.solve(ROOT_MONKEY_NAME, 0))
```

```python
from adventsolver.y2023_day05 import lowest_location, parse_almanac
from adventsolver.y2023_day07 import total_winnings

print(lowest_location(parse_almanac(text, True)))
print(total_winnings(text, jokers=True))
```

```python
from adventsolver.y2023_day09 import calculate_next_number_forward, parse_line

print(sum(calculate_next_number_forward(parse_line(line)) for line in text.splitlines()))
```

## What the package does not do

- There is no command-line program. You read the input files yourself and call
  the functions.
- `y2022_day16` parses valves and removes the ones that release no pressure.
  It does not work out the most pressure that can be released.
- `y2022_day17` drops rocks one at a time. It has no cycle detection, so very
  large rock counts are not practical.
- `y2022_day20` mixes the list once with the plain values. It has no decryption
  key and no repeated rounds.
- `y2023_day08` gives step counts through `Network.walk` and
  `Network.ghost_walk`. It does not combine the per-start step counts into one
  answer.

## Testing

Install the test extra and run the suite:

```
pip install -e .[test]
pytest
```