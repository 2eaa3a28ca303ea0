# bunnyhq

These are solvers for the fourteen Easter Bunny Headquarters puzzles. The
series starts with the walk from the drop point to the HQ. It goes on through
the bathroom keypad, the decoy rooms and the hashed doors. It ends with the
radioisotope floors, the monorail and the cubicle maze.

Each puzzle is a module in the `bunnyhq` package. Each module has a command
that prints its answers.

## Installing

```
pip install .
```

To install and run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

| Command                | Module                   | Input                                  |
|------------------------|--------------------------|----------------------------------------|
| `bunnyhq-taxicab`      | `bunnyhq.taxicab`        | directions file                        |
| `bunnyhq-keypad`       | `bunnyhq.keypad`         | keypad move file                       |
| `bunnyhq-triangles`    | `bunnyhq.triangles`      | side-length file                       |
| `bunnyhq-rooms`        | `bunnyhq.rooms`          | room list file                         |
| `bunnyhq-doorhash`     | `bunnyhq.doorhash`       | door id (default `ffykfhsq`)           |
| `bunnyhq-signals`      | `bunnyhq.signals`        | recorded signal file                   |
| `bunnyhq-ipv7`         | `bunnyhq.ipv7`           | address list file                      |
| `bunnyhq-screen`       | `bunnyhq.screen`         | screen instruction file                |
| `bunnyhq-decompress`   | `bunnyhq.decompress`     | compressed data file                   |
| `bunnyhq-balance-bots` | `bunnyhq.balance_bots`   | bot instruction file                   |
| `bunnyhq-rtg`          | `bunnyhq.rtg`            | floor layout file                      |
| `bunnyhq-assembunny`   | `bunnyhq.assembunny`     | assembunny program file                |
| `bunnyhq-cubicles`     | `bunnyhq.cubicles`       | favourite number (default `1358`)      |
| `bunnyhq-onetimepad`   | `bunnyhq.onetimepad`     | salt (default `zpqevtbw`)              |

Commands that read a file take its path as an optional argument. The default
path is `data/input.txt`, relative to the current directory.

Some commands take extra options:

- `bunnyhq-cubicles` accepts `--target X Y` (default `31 39`) and
  `--steps N` (default `50`).
- `bunnyhq-onetimepad` accepts `--keys N` (default `64`). It prints the index
  of the last key found.

Run any command with `--help` to see its arguments:

```
bunnyhq-taxicab --help
bunnyhq-cubicles --help
```

## Using the library

You can also call the modules directly:

```python
from bunnyhq.taxicab import parse_directions, find_shortest_path
from bunnyhq.triangles import is_valid_triangle
from bunnyhq.cubicles import Maze

steps = parse_directions("R5, L5, R5, R3")
print(find_shortest_path(steps, False))        # 12

print(is_valid_triangle((5, 10, 25)))          # False

maze = Maze(10)
print(maze.shortest_route_to_point((7, 4)))    # 11
```

Other entry points include:

- `bunnyhq.keypad.KeyPad`
- `bunnyhq.rooms.Room`
- `bunnyhq.doorhash.decipher_password`
- `bunnyhq.signals.find_freq_msg`
- `bunnyhq.ipv7.count_valid_addrs`
- `bunnyhq.screen.Screen`
- `bunnyhq.decompress.rec_decomp_len`
- `bunnyhq.balance_bots.Factory`
- `bunnyhq.rtg.find_min_move_to_top`
- `bunnyhq.assembunny.Computer`
- `bunnyhq.onetimepad.KeyGen`

## What it does not do

The package does not ship any puzzle input. You have to supply the input files
yourself.

For the one-time pad, only the basic key search is provided. There is no
stretched-hash variant of it.

Everything runs on the Python 3.10+ standard library. No third-party libraries
are needed.