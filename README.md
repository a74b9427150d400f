# minilisp

The front end of a compiler for a small subset of Common Lisp. It reads a
Lisp source file line by line and breaks each line into tokens: parentheses,
symbols, keywords, strings, numbers, arithmetic functions, reader macros and
comments.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minilisp program.lisp
```

Every token found is printed with its kind and its text. For the line
`(format t "hello")` the output is:

```
Token: (          | Lexeme: (
Token: Symbol     | Lexeme: format
Token: Symbol     | Lexeme: t
Token: String     | Lexeme: hello
Token: )          | Lexeme: )
```

Without exactly one file argument the command prints a usage message and
exits with status 1. A file that cannot be opened is reported and also gives
status 1. Lines longer than 4096 characters are cut short, and the rest of
such a line is skipped.

## Library

```python
from minilisp.lexer import Lexer, TokenType, tokenize, describe_token

for token in Lexer("(+ 1 2)"):
    print(token.type, token.lexeme)

tokens = tokenize("(defun square (x) (* x x))")   # list of Token
for token in tokens:
    print(describe_token(token))
```

`Lexer.next()` hands back one token at a time and gives a token of type
`TokenType.END` once the input runs out; `Lexer.peek()` returns the character
after the current one. Iterating over a `Lexer` gives every token before the
end, and `tokenize` collects them into a list. A `Token` has a `type` and a
`lexeme`. `token_to_str` names a token type, `describe_token` formats a token
as the command prints it, and `is_symbol_char` tells whether a character may
appear inside a symbol.

Other modules:

- `minilisp.hashmap`: `U32HashMap`, a table from string keys to unsigned
  32-bit values that uses FNV-1a hashing (`hash_fnv1a_32`) and linear
  probing, and doubles its capacity once it is 70% full. It supports
  `insert`, `delete`, `resize`, `map[key]`, `key in map` and `len(map)`;
  missing keys raise `KeyError`.
- `minilisp.lines`: `get_line`, `iter_lines` and `for_each_line` read a text
  stream one line at a time with a limit on line length; greedy mode hands on
  the rest of a long line as further lines instead of throwing it away.
- `minilisp.syntax_tree`: `AtomNode` and `ListNode`, created from tokens with
  `node_create` (an opening parenthesis gives an empty `ListNode`, any other
  token an `AtomNode`); `ListNode.append` adds a child.

## What it does not do

The package stops at tokens. There is no parser that assembles the token
stream into a syntax tree, no evaluation, and no code generation; the command
only lists the tokens of each line.