# katas

A collection of small, self-contained exercises written as a plain Python
library. Every module can be imported and used on its own.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `katas.assembly_line` | `production_rate_per_hour`, `working_items_per_minute` (speed 0 to 255, otherwise `ValueError`) |
| `katas.squares` | `square_of_sum`, `sum_of_squares`, `difference` |
| `katas.gigasecond` | `after`: the `datetime` one billion seconds later; `GIGASECOND` |
| `katas.health` | `User`: a dataclass with `name`, `age` and `weight` |
| `katas.greeting` | `hello` |
| `katas.high_scores` | `HighScores` with `scores`, `latest`, `personal_best`, `personal_top_three` |
| `katas.leap` | `is_leap_year` |
| `katas.lasagna` | `expected_minutes_in_oven`, `remaining_minutes_in_oven`, `preparation_time_in_minutes`, `elapsed_time_in_minutes` |
| `katas.brackets` | `brackets_are_balanced` for `()`, `[]` and `{}` |
| `katas.primes` | `is_prime`, `nth` (zero-based), and the endless `PrimeNumbers` iterator |
| `katas.raindrops` | `raindrops` |
| `katas.reverse` | `reverse` by code point, `reverse_graphemes` by grapheme cluster |
| `katas.logs` | `LogLevel`, `log`, `info`, `warn`, `error` |
| `katas.fibonacci` | `create_empty`, `create_buffer`, `fibonacci` |
| `katas.sublist` | `Comparison`, `sublist` |
| `katas.multiples` | `sum_of_multiples` (factors of zero are ignored) |
| `katas.cards` | `Card` (`parse`, `from_rank`), `RankingCategory`, `rank_from_str`, `string_from_rank` |
| `katas.poker` | `Hand` (`parse`, `category`, `ranking`), `winning_hands` |

## Examples

```python
from katas.primes import nth, PrimeNumbers
from itertools import islice

nth(0)                               # 2
nth(10_000)                          # 104743
list(islice(PrimeNumbers(), 5))      # [2, 3, 5, 7, 11]
```

```python
from katas.poker import Hand, winning_hands

winning_hands(["4S 5S 7H 8D JC", "2S 4C 7S 9H 10H"])
# ['4S 5S 7H 8D JC']

Hand.parse("4S 5H 4C 8D 4H").category()   # RankingCategory.TRIPS
```

`winning_hands` gives back the very strings it was passed, in their original
order; ties return every winning hand. A hand must hold exactly five cards,
and an empty list of hands raises `ValueError`. An ace may start a low
straight (A-2-3-4-5).

```python
from katas.sublist import sublist, Comparison

sublist([1, 2, 3], [0, 1, 2, 3, 4]) is Comparison.SUBLIST   # True
```

```python
from katas.reverse import reverse, reverse_graphemes

reverse("stressed")            # 'desserts'
reverse_graphemes("Noe\u0308l")  # 'le\u0308oN'
```

```python
from katas.logs import LogLevel, log, warn

log(LogLevel.INFO, "started")  # '[INFO]: started'
warn("disk low")               # '[WARNING]: disk low'
```

## What this package does not do

It is a library only: there is no command-line program, and nothing is read
from or written to files.