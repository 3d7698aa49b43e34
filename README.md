# kata

Three small, self-contained tools:

- `kata.pig`: plays the dice game Pig between players who each hold at a
  fixed turn total, and reports how often each one wins.
- `kata.wordcount`: counts lines, words and bytes in files or standard input.
- `kata.numfilter`: picks even, odd, prime and other numbers out of a list,
  or filters any items by combining predicates.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Pig

Each player rolls a six-sided die until their turn total reaches their hold
value, then banks it. Rolling a 1 ends the turn and loses the turn total. The
first player to reach 100 wins; player one always starts. Every pairing plays
10 games.

Each argument is either a single hold value from 1 to 100 or a range such as
`1-100`:

```
kata-pig 20 10        # hold at 20 against hold at 10
kata-pig 21 1-100     # hold at 21 against every other hold value from 1 to 100
kata-pig 1-100 1-100  # every strategy against every other, summarised per strategy
```

Output of a fixed-against-fixed game looks like:

```
Holding at 20 wins: 6/10 (60.0%) vs Holding at 10 wins: 4/10 (40.0%)
```

A fixed value against a range prints one such line per opponent, skipping the
opponent whose hold value equals the fixed one. Two ranges print one
`Result: Wins, losses staying at k = ...` summary per player-one hold value.
A range followed by a single value prints nothing.

Invalid arguments, or a count other than two, are reported on standard
output and the command still exits with status 0.

From Python, pass any zero-argument callable as the die, which makes games
reproducible:

```python
from kata.pig import play_fixed_vs_fixed, format_result, roll_dice

one, two = play_fixed_vs_fixed(20, 10, roll_dice)
print(format_result(one, two))
```

`parse_arg` turns an argument into a `ParsedArg` (with `is_range`, `value`
and `hold_range`), raising `PigError` for anything that is not a number or
range within 1 to 100. `play_strategies(args, roll)` returns the output lines
instead of printing them.

## Word count

```
kata-wc notes.txt              # lines, words and bytes
kata-wc -l -w a.txt b.txt      # lines and words only, plus a total line
cat notes.txt | kata-wc -c     # read standard input
```

The flags are `-l` (lines), `-w` (words) and `-c` (bytes); with none of them
all three are shown. Each count is printed right-aligned in an
eight-character column, followed by the file name. Words are runs of bytes
separated by space, tab, newline, carriage return or vertical tab.

Files that do not exist, cannot be opened or are directories are reported on
standard error and the remaining files are still counted; files are counted
concurrently and printed in the order given. An unknown flag is reported on
standard error with exit status 1.

From Python:

```python
from kata.wordcount import process_files, calculate_total

results = process_files(["a.txt", "b.txt"])
total = calculate_total(results)
print(total.lines, total.words, total.chars)
```

`run(args, stdin, stdout, stderr)` takes the streams to use, so it can be
driven without touching the process's own standard streams.

## Number filters

```python
from kata.numfilter import (
    filter_prime_numbers,
    filter_items_on_any_predicates,
    is_odd,
    is_greater_than_ten,
)

filter_prime_numbers([1, 2, 3, 4, 5, 37])          # [2, 3, 5, 37]
filter_items_on_any_predicates([1, 2, 12], [is_odd, is_greater_than_ten])  # [1, 12]
```

`filter_items_on_all_predicates` keeps the items for which every predicate
holds; `filter_items_on_any_predicates` keeps those for which at least one
does. Both keep the original order.

## What is not included

The number filters are a library only; there is no command for them.