# labsuite

A small collection of command-line tools and a library class:

- **wordfreq**: counts the words in a text file and writes a frequency table.
- **CircularBuffer**: a fixed-capacity ring buffer that overwrites old items.
- **life**: Conway's Game of Life with configurable birth and survival rules,
  read from and written to Life 1.06 (`.life`) files.
- **sound**: a WAV processor that applies mute, mix and volume steps, second
  by second, as listed in a config file.
- **csvparser**: reads rows of a CSV file into typed tuples.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Word frequencies

```
labsuite-wordfreq input.txt report.csv
```

A word is a run of ASCII letters and digits. Every other character ends the
current word and counts it, so two separators in a row count an empty word.
Line breaks are not separators: a word can run on into the next line, and a
word at the very end of the file, with no separator after it, is not counted.

The report starts with the line `Word;Frequency;Percent`. Each following line
gives a word, how many times it was counted and its share of all counted
words, rarest words first (words with the same count in reverse alphabetical
order). The first percentage is written in short general form, the others with
six decimal places.

From Python:

```python
from labsuite.wordfreq import count_words, ranked_words, format_report

with open("input.txt", encoding="utf-8") as fh:
    counts, total = count_words(fh)
print(ranked_words(counts))
print(format_report(counts, total))
```

## Circular buffer

```python
from labsuite.circular_buffer import CircularBuffer

buf = CircularBuffer(3)
buf.push_back("a")
buf.push_back("b")
buf.push_back("c")
buf.push_back("d")      # full: the oldest item is overwritten
print(buf.front(), buf.back(), len(buf))   # b d 3
print(buf[-1])                             # negative indexes count from the end
```

`CircularBuffer(capacity, fill)` with a `fill` value starts full of that value;
without one it starts empty. Plain indexing wraps around and does not check
bounds; `at()` does, and raises `IndexError`. `front()`, `back()`,
`pop_front()` and `pop_back()` raise `IndexError` on an empty buffer.
`set_capacity()`, `resize()` and `rotate()` raise `ValueError` on bad
arguments; `insert()` raises `IndexError` for a position outside the capacity,
and `erase(first, last)` raises `IndexError` for bounds out of range and
`ValueError` when `first > last`. Other members: `is_empty()`, `is_full()`,
`reserve()`, `capacity()`, `linearize()`, `is_linearized()`, `copy()`,
`swap()` and `clear()`. Buffers compare equal when capacity, size and contents
match.

## Game of Life

```
labsuite-life                      # plays base.life interactively
labsuite-life glider.life          # plays the given file interactively
labsuite-life glider.life -i 10 -o result.life   # 10 generations, then save
```

Interactive commands, read from standard input:

- `tick <n>` or `t <n>`: compute `n` generations (1 by default), printing
  the field after each
- `dump <file>`: save the universe (`output.life` if no name is given)
- `help`: list the commands
- `exit`: quit

Live cells are printed as `0` and dead ones as `#`, with a line of dashes
after each field.

A `.life` file looks like this:

```
#Life 1.06
#N Glider
#R B3/S23
#SIZE H10/W10
1 0
2 1
0 2
1 2
2 2
```

Each cell line gives the column and row of a live cell. Coordinates at or past
the width or height are ignored; negative ones wrap round. The field wraps at
its edges. A file whose first line lacks `#Life` is rejected; if the second
line has no `#N`, the universe is called `Standard name`.

From Python:

```python
from labsuite.life.lifefile import read_universe, format_universe
from labsuite.life.view import render

universe = read_universe("glider.life")
universe.step()
print(render(universe.field))
print(format_universe(universe))
```

`labsuite.life.game.Game` runs the commands against a universe, and
`run_offline(universe, iterations, path)` does the batch mode.

## Sound processor

```
labsuite-sound [-h] -c config.txt output.wav input1.wav [input2.wav ...]
```

`-h` prints the list of config commands. The first input is the one that is
processed; the other inputs can be mixed into it and are numbered from 0 in
the order given. The config file holds one command per line, and lines
starting with `#` are ignored:

```
# silence seconds 0 to 2
mute 0 2
# mix in input 1 from second 3
mix 1 3
# double the volume from second 5 to 8
vol 5 8 2
```

Every command is applied, in file order, to each second of audio that falls in
its range (both ends included for `mute` and `vol`). `mix` averages in the next
second of the other input, for as long as that input lasts. The `vol`
coefficient is read as a whole number, and results are clipped to the 16-bit
range. Lines with an unknown command are skipped with a warning.

### Limitations

Samples are treated as 16-bit mono. The number of samples in a second is taken
from the sample rate of the last input, and the output header is copied
unchanged from the first input. Audio is not resampled and WAV headers are not
otherwise checked.

## Typed CSV

```
labsuite-csv data.csv
```

Each row is split on `;` or `,` and read as an integer, a string and two more
integers, then printed as a tuple such as `(1, name, 2, 3)`. Reading stops at
the first empty line. Numbers are read from the start of a field; a string
value is the first word of its field. A value that does not convert stops the
run with an error naming its column and line.

From Python:

```python
from labsuite.csvparser import CSVParser

with open("data.csv", encoding="utf-8") as fh:
    for row in CSVParser(fh, (int, str, float), skip_lines=1):
        print(row)
```

Column types may be `int`, `float` or `str`. `labsuite.csvtuples` holds the
field conversion (`convert_value`, `create_tuple`) and `format_tuple`.