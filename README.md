# seqwrap

TCP sequence numbers are 32 bits wide. They start at an arbitrary initial
sequence number (ISN) and wrap around after 2**32. `seqwrap` converts between
these 32-bit relative sequence numbers and zero-based 64-bit absolute stream
indices.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# absolute index -> 32-bit sequence number
seqno = wrap(5, isn)
print(seqno)                 # 3

# 32-bit sequence number -> the absolute index closest to a checkpoint
print(unwrap(seqno, isn, 0)) # 5
```

Everything lives in the module `seqwrap.wrapping`.

### `WrappingInt32`

An immutable value holding a raw 32-bit unsigned integer, available as
`raw_value`. Instances compare equal when their raw values are equal and can be
used as dictionary keys. Constructing one with a value that is not an `int`
raises `TypeError`; a value outside `0 .. 2**32 - 1` raises `ValueError`.

Arithmetic wraps modulo 2**32:

- `a + n` steps `n` positions forward, and `a - n` steps `n` positions back,
  where `n` is an `int`; the result is a `WrappingInt32`.
- `a - b`, where both are `WrappingInt32`, gives the signed 32-bit offset from
  `b` to `a` as an `int`. The result is negative when moving backwards is the
  shorter way, or when both ways are the same length (an offset of 2**31 comes
  out as `-2**31`).
- `str(a)` gives the raw value in decimal.

### `wrap(n, isn)`

Turns the absolute, zero-based sequence number `n` into a `WrappingInt32`
relative to `isn`. `n` must be an `int` in `0 .. 2**64 - 1`; otherwise
`TypeError` or `ValueError` is raised.

### `unwrap(n, isn, checkpoint)`

Returns the 64-bit absolute sequence number that wraps to `n` (relative to
`isn`) and lies closest to `checkpoint`. When two candidates are equally close,
the larger one is returned, as long as it still fits in 64 bits. A recent
absolute index is a good choice of checkpoint, for example the last index that
was reassembled. `checkpoint` must be an `int` in `0 .. 2**64 - 1`; otherwise
`TypeError` or `ValueError` is raised.

## What this package does not do

`seqwrap` only does sequence-number arithmetic. It does not reassemble byte
streams, build or parse segments, or implement any part of a TCP sender,
receiver or connection.

## Running the tests

```
pip install seqwrap[test]
pytest
```