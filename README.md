# ftkit

A small library of everyday helpers with C-library-style behaviour:
character classes, lenient number parsing, byte-buffer operations,
NUL-terminated string routines, a singly linked list, writing to file
descriptors and buffered line reading.

## Modules

- `ftkit.ctype`: `is_space`, `is_digit`, `is_upper`, `is_lower`,
  `is_alpha`, `is_alnum` (letters, digits and `_`), `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each accepts a one-character string or an integer
  code; the case converters return the same kind they were given.
- `ftkit.numbers`: `atol` (leading signed decimal, wrapped to 64 bits),
  `atoi` (the same, wrapped to 32 bits), `atod` (fraction and exponent
  allowed), `atof` (like `atod`, rounded to single precision), `pow_fast`,
  `itoa`, `digit_count`, `abs_int` (32-bit, the most negative value maps to
  itself), `max_int`, `min_int`. The parsers skip leading white space, stop
  at the first character they cannot use, and return 0 for `None`.
- `ftkit.memory`: `memset`, `bzero`, `memcpy`, `memccpy`, `memmove`,
  `memchr`, `memcmp`, `calloc`. Destinations are `bytearray` objects;
  `memmove(buf, dst, src, length)` works on offsets inside one buffer.
  Negative or oversized lengths raise `ValueError`.
- `ftkit.strings`: `strlen`, `strnlen`, `strchr`, `strrchr`, `strnstr`,
  `strcmp`, `strncmp`, `strlcpy`, `strlcat`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`. Strings end at their first NUL character.
  Search functions return an index or `None`; `strlcpy` and `strlcat`
  return the new destination string together with the length they tried
  to create.
- `ftkit.linked_list`: `LinkedList`, with `push_front`, `push_back`,
  `last`, `len()`, iteration, `iterate`, `map`, `pop_front` and `clear`.
  `pop_front` and `clear` take an optional callback that receives each
  removed item; `last` and `pop_front` raise `IndexError` on an empty list.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` write to a
  file descriptor. Strings are written up to their first NUL and encoded as
  UTF-8; `None` writes nothing.
- `ftkit.line_reader`: `LineReader(fd, buffer_size=255)` and the
  per-descriptor `get_next_line(fd)` / `forget(fd)`. Lines end at a newline
  or a NUL byte, which is not returned. `read_line()` and `get_next_line()`
  return `(line, ended)`: `ended` is `False` at end of input, where the
  remaining text (possibly empty) is returned and buffered state dropped.
  Iterating a `LineReader` yields every line, including a non-empty final
  line without a terminator. `get_next_line` accepts descriptors 0 to 1023.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strchr
from ftkit.ctype import is_space

atoi("  -42abc")               # -42
itoa(-2147483648)              # "-2147483648"
split("  a b  c ", is_space)   # ["a", "b", "c"]
strchr("hello", "l")           # 2
```

```python
import os
from ftkit.line_reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line)
os.close(fd)
```

```python
from ftkit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30]
```

## Scope

This is a library only: it has no command-line tool and opens no files
itself; the output and line-reading helpers work on descriptors the caller
already holds.

## Running the tests

```
pip install .[test]
pytest
```