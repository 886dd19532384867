# adtkit

A small collection of classic abstract data types with plain, predictable
behaviour. It has no dependencies beyond the standard library.

## Contents

- `adtkit.counter`
  - `Counter(start=0)`: counts upward from `start` and `reset()` returns it
    to `start`. Numbers step by one; a single character steps to the next
    code point. The current value is the `count` property.
  - `IntCounter(value=0)`: an integer counter whose `reset()` always returns
    it to `0`. A non-integer value raises `TypeError`.
  - `CharCounter(value="A")`: a character counter whose `reset()` always
    returns it to `"A"`. Anything but a single character raises `ValueError`.
- `adtkit.arraylist`: `ArrayList`, an ordered list indexed from `0` to
  `len - 1`. It has `append`, `insert(item, position)` (positions `0` to
  `len`), `remove(position)`, `clear`, `is_empty`, `copy`, indexing and
  assignment by position, iteration, `+` to concatenate into a new list, and
  `==`. Negative or out-of-range positions raise `IndexError`; non-integer
  positions raise `TypeError`. `str()` gives `[ 1, 2, 3 ]`, or `[  ]` when
  empty.
- `adtkit.linkedlist`: `LinkedList`, the same interface stored as singly
  linked nodes (`insert(item, index)`, `remove(index)`). An empty list prints
  as `[ ]`.
- `adtkit.sortedlist`: `SortedList`, an `ArrayList` that keeps its items in
  descending order. `append(item)` and `insert(item, position=None)` both put
  the item in its sorted place; any given position is ignored. An item equal
  to ones already present goes after them.
- `adtkit.fifo_queue`: `Queue`, first in, first out, with `push`, `pop`
  (removes and returns the front item), `peek`, `is_empty`, `copy` and
  `len()`. `pop` or `peek` on an empty queue raises `QueueEmptyError`, a
  subclass of `IndexError`.
- `adtkit.stack`: `Stack`, last in, first out, with `push`, `pop` (removes
  and returns the top item), `top`, `is_empty`, `copy` and `len()`. `pop` or
  `top` on an empty stack raises `StackEmptyError`, a subclass of
  `IndexError`.
- `adtkit.date`: `Month`, an `IntEnum` from `JAN = 1` to `DEC = 12`, and
  `Date(month=Month.JAN, day=1, year=2025)`. The constructor replaces any
  invalid part with its default and logs a warning through the `logging`
  module. After that, assigning an invalid `month`, `day` or `year`, or
  calling `set_date(month, day, year)` with parts that do not form a date,
  raises `ValueError` and leaves the date unchanged. Years run from 1 to
  9999, and February has 29 days in leap years (`is_leap_year()`). `str()`
  gives `mm/dd/yyyy` with leading zeros.
- `adtkit.complexnum`: `Complex(real=0.0, imag=0.0)` with `real` and `imag`
  properties. It supports `+`, `-` and `*` with another `Complex` or with an
  `int` or `float` on the right, and `/` with the same. Division by zero
  raises `ZeroDivisionError`. It also has `**` with an integer exponent
  (negative exponents use the reciprocal, and zero to a negative power raises
  `ZeroDivisionError`), `~` and `conjugate()`, unary `-`, `abs()` and `==`.
  `Complex.parse(text)` reads `a`, `a+bi`, `a-bi`, `a+i`, `a-i`, `bi`, `i`,
  `+i` or `-i` and raises `ValueError` on anything else. `str()` writes the
  same forms, for example `4+2i`, `3.1-i`, `-i` or `0`.

## Installation

```
pip install .
```

## Examples

```python
from adtkit.arraylist import ArrayList
from adtkit.stack import Stack
from adtkit.date import Date, Month
from adtkit.complexnum import Complex

items = ArrayList([1, 2, 3])
items.insert(4, 1)
print(items)                   # [ 1, 4, 2, 3 ]

stack = Stack()
for n in (3, 7, 1):
    stack.push(n)
print(stack.pop())             # 1

day = Date(Month.MAR, 10, 2026)
print(day)                     # 03/10/2026

print(Complex(4, 2) ** 3)      # 16+88i
print(Complex.parse("5+5i"))   # 5+5i
```

## What it does not do

This is a library only. It installs no command, and nothing in it reads from
standard input. To build a `Complex` from typed text, pass the string to
`Complex.parse`.

## Running the tests

```
pip install .[test]
pytest
```