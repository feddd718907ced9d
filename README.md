# seqwrap

TCP sequence numbers are 32-bit values. They start at an arbitrary initial
sequence number (ISN) and wrap around when they pass 2**32. `seqwrap` converts
between these relative 32-bit values and zero-indexed 64-bit absolute sequence
numbers. It has no dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Usage

Everything is in the module `seqwrap.wrapping`:

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# Absolute sequence number -> 32-bit relative value
seqno = wrap(3, isn)
print(seqno)            # 1

# 32-bit relative value -> absolute sequence number nearest a checkpoint
print(unwrap(seqno, isn, 0))   # 3

# Arithmetic on wrapping integers
a = WrappingInt32(5)
print(a + 10)           # 15
print(10 + a)           # 15
print(a - 10)           # 4294967291 (steps back, wrapping)
print(WrappingInt32(1) - WrappingInt32(2**32 - 1))   # 2 (signed offset)
```

### `WrappingInt32(raw_value)`

- An immutable value that holds one 32-bit unsigned integer in `raw_value`.
  Two instances compare equal when their raw values are equal, and instances
  can be hashed.
- Raises `TypeError` if `raw_value` is not an `int`. Raises `ValueError` if it
  is outside `0 .. 2**32 - 1`.
- `a + n` and `n + a` move the point forward by the integer `n`, modulo 2**32.
- `a - n` moves the point back by the integer `n`, modulo 2**32.
- `a - b`, where `b` is another `WrappingInt32`, gives the signed 32-bit offset
  from `b` to `a`. The result lies in `-2**31 .. 2**31 - 1`.
- `str(a)` is the raw value in decimal.

### `wrap(n, isn)`

Turns the 64-bit absolute sequence number `n` into a `WrappingInt32` relative
to `isn`. Raises `ValueError` if `n` is not in `0 .. 2**64 - 1`.

### `unwrap(n, isn, checkpoint)`

Returns the 64-bit absolute sequence number that wraps to `n` (relative to
`isn`) and lies closest to `checkpoint`, a recent absolute sequence number.
When two candidates are equally close, the higher one is returned. Raises
`ValueError` if `checkpoint` is not in `0 .. 2**64 - 1`.

## What this package does not do

`seqwrap` only does sequence-number arithmetic. It has no TCP sender,
receiver or connection state machine, and it does not open sockets or parse
packets. It provides no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```