# msh

The parsing core of a small interactive shell, as a Python library.

It covers:

- **Tokenizing** a command line into words, pipes and redirections
  (`|`, `<`, `>`, `<<`, `>>`), with single- and double-quoted text kept
  together in one word (`msh.lexer`: `tokenize`, `Lexer`, `Token`,
  `TokenType`, `is_delimiter`, `is_redirect`, `skip_spaces`).
- **Parsing** the tokens into a syntax tree of pipes, arguments and
  redirections (`msh.parser`: `parse`, `Parser`, `ParseError`;
  `msh.syntax_tree`: `Node`, `NodeType`). Arguments are expanded while
  they are parsed; redirection targets are kept as written.
- **Expanding** `$NAME` and `$?` in an argument and removing its quotes,
  with single quotes suppressing expansion
  (`msh.expansion.expand_argument`). An unset variable expands to
  nothing; a `$` not followed by a name is kept.
- **printf-style formatting** with the `c s p d i u x X %` conversions,
  the `# 0 - + space` flags, a width and a precision (including `.*`)
  (`msh.formatting`: `format_string`, `convert`, `parse_spec`,
  `FormatSpec`, `Flag`, `FormatError`, `printf`, `dprintf`).
- A few **string helpers** (`msh.strings`: `is_number`, `split`, `trim`,
  `find_within`, `compare`, `compare_n`, `substring`). `compare` and
  `compare_n` return the difference of the first differing characters
  rather than just -1, 0 or 1.

## Installation

```
pip install .
```

## Example

```python
from msh.parser import parse
from msh.expansion import expand_argument
from msh.formatting import format_string
from msh.strings import is_number

env = {"USER": "alice"}

tree = parse("echo hello $USER | cat > out.txt", 0, env)
for node in tree.walk():
    print(node.type, node.value)

print(expand_argument("'$USER' is \"$USER\", last status $?", 1, env))

print(format_string("%-5s|%05d|%#x", "ab", 42, 255))

print(is_number("-010"), is_number("--0"))
```

In the tree, a command node's `left` leads to its next argument and its
`right` to its first redirection; a redirection's `left` holds its target
and its `right` the next redirection; a pipe's `left` is the command before
it and its `right` the rest of the pipeline. `Node.walk()` yields a node
before its left subtree and its left subtree before its right.

A line that ends early or has a misplaced operator makes `parse` raise
`ParseError` with the shell's message, for example
``syntax error near unexpected token `|'`` or `unexpected end of input`
(an empty line raises the latter).

`format_string` raises `FormatError` for an unknown conversion or a missing
or unsuitable argument. `printf` and `dprintf` write the formatted text to
standard output or to a given file descriptor and return the number of
bytes written.

## What it does not do

This package parses command lines; it does not run them. There is no
interactive prompt or command to start, no execution of commands or
pipelines, no opening of redirection files or reading of here-documents,
no built-in commands (`cd`, `echo`, `export` and the like), no signal
handling and no environment store: variables for expansion are passed in
as a plain mapping.

## Tests

```
pip install .[test]
pytest
```