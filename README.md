# crocsh

crocsh is a small shell for POSIX systems, in the spirit of tcsh. When
standard input is a terminal, it shows a prompt and offers line editing,
history browsing and Tab completion. When standard input is a pipe or a file,
it runs the lines it reads, one after another.

## Installation

```
pip install .
```

## Usage

To start an interactive session:

```
crocsh
```

To run commands from standard input:

```
crocsh < script.txt
```

The same entry point is available as `python -m crocsh.session`.

The prompt shows the current directory, followed by the git branch when
there is one. The arrow is green when the last command succeeded and red
when it failed. In an interactive session, type `exit` or press Ctrl-D or
Ctrl-C to leave. When commands come from a stream, the shell stops at the
end of its input and exits with the status of the last command.

## Features

- Commands separated by `;`, which is ignored inside double quotes.
- `a && b` and `a || b`, pipes `a | b`, and the redirections `<`, `>` and
  `>>`. A pipe has the status of its first command.
- Environment builtins. `env` prints the environment. `setenv` with no
  arguments prints it as well. `setenv NAME [VALUE]` sets a variable and
  `unsetenv NAME...` removes variables.
- `cd DIR`. `cd` or `cd ~` goes to `$HOME` and `cd -` goes to `$OLDPWD`.
  `PWD` and `OLDPWD` are kept up to date.
- `$NAME` words are replaced by their values from the environment. An
  undefined name is an error.
- Local variables, set with `set NAME=value`, `set NAME = value` or
  `set NAME`, and listed with `set` alone. They are kept in
  `local_environement.txt` in the current directory, and that file is emptied
  when the shell starts. A command that contains `$NAME` for a local variable
  is replaced, as a whole, by that variable's value.
- Aliases. `alias` lists them, `alias NAME` shows one, `alias NAME WORDS...`
  defines one and `unalias NAME...` removes them. They are kept in `.alias` in
  the current directory. Any word of a command that names an alias is replaced
  by the alias's value.
- History, kept in `.history` in the current directory. `history` lists it,
  `history -c` clears it and `history -d N` lists it from position N on.
  `!N` runs event N again.
- Back-quote command substitution, as in `` echo `date` ``.
- Globbing with `*`, `?` and `[...]`. An argument that matches nothing is
  passed on as written.
- `crocus -n NUMBER [-s PATTERN]` draws NUMBER in large digits. Each digit is
  drawn with a character picked from PATTERN, or with `0` when there is no
  pattern.
- A command line that ends inside an unclosed double quote is continued on
  the next lines, at a `> ` prompt, until the quotes balance.

These features work in interactive sessions only:

- Lines are recorded in the history file.
- The Up and Down arrows browse the history.
- Tab completes `$NAME` variables, command names from `PATH`, and file names.
- `( ... )` runs the part in parentheses in a fresh copy of the shell.
- `repeat COUNT WORDS...` runs a command COUNT times. Its words are joined
  without spaces, so it suits commands made of a single word.

## What it does not do

crocsh has no job control (no `fg`, `bg` or `&`). It has no here-documents:
`<<` reads from a file, just like `<`. It has no single-quote quoting, and no
control structures such as `if`, `while` or `foreach`. A line of the form
`exit` ends only an interactive session.

## Running the tests

```
pip install .[test]
pytest
```