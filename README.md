# riyalex

Tools for the Riya programming language: a lexer, a token dump command,
and the small core library and allocation arena that the language's
programs rely on.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The `riyac` command

`riyac` reads a Riya source file. With `--test-lex` it runs the lexer
over the file and prints `Debugging scanner...` followed by one line per
token, ending with `EOF`:

```
riyac program.ry --test-lex
```

Identifiers and literals are shown with their text, for example
`ID(main)`, `INT(42)`, `STR(hello)`, `CHAR(a)` and `FL(1.5)`; keywords and
symbols are printed as written (`func`, `:=`, `->`). A file that cannot be
read scans as empty.

The command also accepts `-o NAME`, `-E`, `--ast1`, `--ast`, `--dot`,
`--llvm` and `--emit-llvm`. An unknown option, `-o` with no name after
it, or no arguments at all end the run with status 1 and a message on
standard error.

## What it does not do

This package stops at lexical analysis. It has no parser, no syntax tree,
no code generation, and it does not assemble or link programs. Running
`riyac` without `--test-lex` prints
`Error: only lexical analysis (--test-lex) is available.` and exits
with status 1.

## Using the lexer

```python
import io

from riyalex.lexer import Lexer, debug_scanner
from riyalex.tokens import Token

lexer = Lexer("func main -> i32 is return 0; end")
kind = lexer.get_next()
assert kind is Token.FUNC

kinds = list(Lexer("var x : i32 := 5;"))

out = io.StringIO()
debug_scanner(Lexer("x := 1;"), out)
```

- `Lexer(source)` scans a string; `Lexer.from_file(path)` scans a file.
- `get_next()` returns the next `Token`; after an identifier or literal
  the lexer's `value`, `i_value` and `f_value` attributes hold its text
  and numeric value, and `line_number` counts lines seen so far.
- `unget(kind)` pushes a token back; pushed tokens come back last in,
  first out.
- Iterating a `Lexer` yields tokens up to, but not including, `EOF`.
- `describe(kind)` gives the printable form of a token, and
  `get_raw_buffer()` returns the raw text consumed since the last call.
- `debug_scanner(lexer, stream)` writes the whole token dump to a stream
  (standard output by default).

`riyalex.tokens` defines the `Token` enumeration, each member with a
`spelling`, and `keyword_token(word)` and `symbol_token(char)`, which map
a word or a single character to its token or return `None`.

## Core library

`riyalex.corelib` holds the behaviour of the language's built-in
routines:

- `format_print(fmt, *args)` returns the line `print` writes, and
  `print_values(fmt, *args, stream=...)` writes it. Each format letter
  takes one argument: `s` string, `d` integer, `b` boolean, `c`
  character, `x` hexadecimal; other letters are skipped and a newline
  ends the line. Too few arguments raise `ValueError`.
- `format_int(value)`, `format_hex(value)` (upper case) and
  `format_double(num, precision=6)` (digits truncated, not rounded)
  render single numbers.
- `stringcmp(first, second)` returns 1 for equal strings and 0
  otherwise; `strcat_char(text, char)` and `strcat_str(first, second)`
  join strings. Strings end at their first NUL character.

## Runtime

`riyalex.runtime.Arena` hands out zeroed buffers through `alloc`,
`alloc_i8`, `alloc_i16`, `alloc_i32` and `alloc_i64`, records every one,
and releases them all on `destroy()` or on leaving a `with` block;
allocating afterwards raises `RuntimeError`, and a negative size raises
`ValueError`. `run_main(entry, argv)` calls `entry(argv, len(argv), arena)`
inside a fresh arena and returns its exit code.