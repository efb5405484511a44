# libft

A small collection of low-level helpers: ASCII character classification,
byte-buffer manipulation, bounded string operations, integer/text
conversion, file-descriptor output and a singly linked list. They keep the
semantics of the classic C routines, including their edge cases, while
taking and returning ordinary Python values and raising exceptions for bad
arguments.

It is a library only; it has no command-line interface.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `libft.ctype`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each accepts an integer character code or a one-character
string and recognises ASCII only. The predicates return a `bool`; the case
converters return the same kind of value they were given (`to_upper("a")`
is `"A"`, `to_upper(97)` is `65`). A longer string raises `ValueError`,
any other type `TypeError`.

### `libft.memory`

Operations on `bytearray` (or writable `memoryview`) buffers:

- `memset(buf, c, n)` sets the first `n` bytes to `c & 0xFF` and returns `buf`.
- `bzero(buf, n)` zeroes the first `n` bytes.
- `memcpy(dst, src, n)` copies the first `n` bytes of `src` over `dst` and returns `dst`.
- `memmove(buf, dst_offset, src_offset, n)` moves `n` bytes within one buffer; overlapping regions are handled.
- `memchr(data, c, n)` returns the index of the first matching byte in the first `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal byte pair, or `0`.
- `calloc(count, size)` returns a zero-filled `bytearray`; it raises `OverflowError` when the total exceeds a 64-bit size.

Counts that are negative or larger than a buffer raise `ValueError`.

### `libft.strings`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`.
An embedded NUL character ends a string. Searches return an index or
`None`; searching for NUL with `strchr`/`strrchr` finds the end of the
string. `strlcpy(src, size)` and `strlcat(dst, src, size)` return a
`Truncated(text, length)` named tuple holding the resulting text and the
length the full result would have had.

### `libft.convert`

- `atoi(text)` skips leading whitespace, accepts one sign and reads digits
  up to the first non-digit. A value beyond the 64-bit range gives `-1`
  when positive and `0` when negative; otherwise the result wraps to a
  signed 32-bit integer.
- `itoa(n)` returns the decimal text of an integer.

### `libft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write to a raw file
descriptor. A negative descriptor is ignored and nothing is written;
`putstr_fd(None, fd)` writes nothing. `putchar_fd` writes an integer as a
single byte (`c & 0xFF`) and a string character encoded as UTF-8.

### `libft.textops`

- `strdup(s)` copies `s` up to its first NUL.
- `substr(s, start, length)` returns at most `length` characters from `start`; a start past the end gives `""`.
- `strjoin(s1, s2)` concatenates.
- `strtrim(s, charset)` strips characters in `charset` from both ends.
- `split(s, sep)` splits on a single character, dropping empty pieces.
- `strmapi(s, func)` builds a string from `func(index, char)`; `func` must return one character.
- `striteri(chars, func)` applies `func(index, char)` to a mutable sequence of characters in place, stopping at the first NUL; a `None` return leaves the character unchanged.

### `libft.linkedlist`

- `Node(content, next=None)` is one list element.
- `LinkedList(head=None)` offers `add_front(node)`, `add_back(node)`,
  `last()`, `clear(delete)`, `iterate(func)`, `len()` and iteration over
  the contents of its nodes. Passing `None` as a node or callback does
  nothing.
- `delete_one(node, delete)` hands a node's content to `delete` and
  detaches the node.

## Examples

```python
from libft.convert import atoi, itoa
from libft.textops import split, strtrim
from libft.linkedlist import LinkedList, Node

atoi("  -42abc")               # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"

items = LinkedList()
items.add_back(Node("a"))
items.add_front(Node("b"))
list(items)                    # ["b", "a"]
len(items)                     # 2
items.last().content           # "a"
```

The `output` functions write straight to a descriptor:

```python
from libft.output import putnbr_fd, putendl_fd

putnbr_fd(-123, 1)
putendl_fd("", 1)
```