# findmyflags

A small capture-the-flag puzzle for the terminal. The program asks for a
series of flags, one per line. Enter each one correctly to move on to the
next. A wrong answer ends the game at once. A hidden eighth flag unlocks only
if one of the earlier answers is given in a special way.

## Installation

```
pip install .
```

## Playing

```
findmyflags
```

You are asked `Input Flag 1:`, `Input Flag 2:`, and so on up to flag 7. Each
answer is read as one line of at most 99 characters, cut at the first newline
or carriage return. After a wrong answer the program prints
`Incorrect flag :(` and exits with status 1. If you get through every flag it
prints `Congrats! You made it to the end!` and exits with status 0.

`findmyflags --help` shows a short usage message; the command takes no other
options.

## Using the pieces as a library

The flag checks can be called on their own. Each one returns `None` when the
value is right and raises `findmyflags.flags.IncorrectFlag` when it is wrong:

```python
from findmyflags.flags import IncorrectFlag, check_flag_1

try:
    check_flag_1("guess")
except IncorrectFlag:
    print("not quite")
```

The checks are `check_flag_1` to `check_flag_7` and `check_secret_flag`.
`read_input(stream)` reads one answer line from a text stream the way the
prompt does, and `main(argv=None)` runs the whole game on standard input and
output, returning the exit status.

The package also includes the small helpers the puzzle uses:

- `findmyflags.codec.encode(data)` turns bytes into padded base64 text and
  raises `ValueError` for empty input.
- `findmyflags.codec.decode(encoded)` turns base64 text (or bytes) back into
  bytes. It is lenient: the URL-safe symbols `-` and `_` (and `.` and `,`) are
  accepted, and unknown symbols count as zero. It raises `ValueError` when the
  input is empty or its length is not a multiple of four.
- `findmyflags.digest.MD5` is an incremental MD5 hasher with `update`,
  `digest` and `hexdigest`; it can be given initial data when created.
- `findmyflags.digest.md5_string(text)` hashes a string up to its first NUL
  character, and `md5_file(file)` hashes what is left to read from a binary
  file object. Both return the 16-byte digest.
- `findmyflags.digest.rotate_left(x, n)` rotates a 32-bit word left.

## Running the tests

```
pip install .[test]
pytest
```