# toybox

A collection of small programs in one package: two arcade games, a
night-watch survival game, four physics simulations drawn with pygame,
a line-matching search tool and a fixed-size thread pool.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command-line tools

### toybox-grep

Prints every line of a file that contains a query string.

```
toybox-grep QUERY FILENAME
```

The search is case sensitive. Set the `CASE_INSENSITIVE` environment
variable (to any value) to match regardless of case:

```
CASE_INSENSITIVE=1 toybox-grep query poem.txt
```

A missing argument or an unreadable file is reported on standard error
and the command exits with status 1.

## Simulations

Each opens a window; close it to quit.

| Command                  | What it shows                                          |
|--------------------------|--------------------------------------------------------|
| `toybox-orbits`          | Four planets orbiting a sun, with their trajectories   |
| `toybox-pendulum`        | A single swinging pendulum                             |
| `toybox-double-pendulum` | A chaotic double pendulum that traces its path         |
| `toybox-springs`         | A chain of randomly placed springs                     |

`toybox-springs` takes `--springs N` (default 10) for the length of the
chain and `--seed N` to make the random placement repeatable.

## Games

### toybox-pong

Press Return to serve. `W` and `S` move the left paddle; the right paddle
is played by the computer. The first side to score two points ends the
round. The score is drawn with the font given by `--font` (default
`../assets/ASMAN.TTF`).

### toybox-breakout

Press Return to launch the ball, `A` and `D` to move the paddle. Bricks
in the top row take three hits, the next two rows two hits and the
bottom rows one. The round ends when every brick is gone or the ball
reaches the bottom edge.

### toybox-fnaf

Press Return to begin a night. Click the green buttons in the office to
switch the lights of rooms on and off and see where the animatronics
are; pressing one of the red buttons drives back whatever is waiting at
the corners beside the office. The night ends when an animatronic has
waited at a corner long enough, or at 6 AM. The clock and night number
are drawn with the font given by `--font` (default `assets/font.TTF`).

## Using the library

The pieces behind the commands can be used directly:

```python
from toybox.vector import Vector
from toybox.grep import search, search_case_insensitive
from toybox.threadpool import ThreadPool

search("duct", "safe, fast, productive.\nPick three.")
# ['safe, fast, productive.']

with ThreadPool(4) as pool:
    pool.execute(lambda: print("working"))

Vector(3.0, 4.0).magnitude()
# 5.0
```

Leaving the `with` block lets queued jobs finish, then stops and joins
every worker; `ThreadPool.execute` raises `RuntimeError` after
`shutdown()`.

## What the package does not do

There is no web server. `toybox.threadpool.ThreadPool` runs any
callables you give it, but nothing in the package listens on a port or
answers HTTP requests.