# pipex

`pipex` runs programs connected by pipes, the way a shell runs
`< infile cmd1 | cmd2 > outfile`, without starting a shell.

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

Two commands, reading from `infile` and writing to `outfile`. The output
file is created if needed and truncated:

```
pipex infile "grep foo" "wc -l" outfile
```

This corresponds to `< infile grep foo | wc -l > outfile`.

Three or more commands are chained in order:

```
pipex infile "cat" "sort" "uniq -c" "sort -rn" outfile
```

Here-document mode needs a limiter and at least two commands:

```
pipex here_doc EOF "grep error" "wc -l" outfile
```

Lines are read from standard input, each after a `> ` prompt written to
standard output, until a line that is exactly the limiter (or end of input).
Those lines are fed to the first command, and the output of the last command
is **appended** to `outfile`. This corresponds to
`cmd1 << EOF | cmd2 >> outfile`.

Any other number of arguments prints the usage text and exits with status 1.

### How commands are run

- Each command argument is split on spaces into words; empty words are
  dropped. There is no quoting, globbing, variable expansion or redirection
  inside a command.
- The program is looked up by joining each directory of `PATH` with the
  first word and taking the first executable match. A program name is always
  looked up this way, so paths such as `/bin/ls` or `./script` are not run
  directly.
- A command that cannot be found prints `<name>: command not found` on
  standard output.

### Errors and exit status

- The exit status is that of the last command.
- A command that cannot be found gives status 127.
- If the input or output file cannot be opened, the error is written to
  standard error and the command that needed it fails with status 1; the
  other commands still run.
- A command argument with no words stops everything with
  `pipex: command not found` on standard error: status 127 in the
  two-command form, 1 otherwise.
- A missing `PATH` stops everything with `pipex: PATH not found`, status 1.
- In here-document mode, an output file that cannot be opened stops
  everything with status 1.
- A last command killed by a signal gives status 0 in the two-command form
  and 1 otherwise.

## Library use

```python
from pipex.pipeline import run_two, run_multiple, run_here_doc, read_heredoc

status = run_two("in.txt", "grep foo", "wc -l", "out.txt")
status = run_multiple("in.txt", ["cat", "sort", "uniq"], "out.txt", env={"PATH": "/usr/bin:/bin"})
status = run_here_doc("EOF", ["cat", "wc -l"], "out.txt", stdin=some_stream)
```

`env` defaults to the current environment. Fatal problems raise
`pipex.pipeline.PipexError`, whose `status` attribute holds the exit status.
`run_multiple` and `run_here_doc` raise `ValueError` when given no commands.
`read_heredoc(stream, limiter, prompt_stream=None)` returns the bytes read
before the limiter line.

`pipex.cli.main(argv=None)` is the command-line entry point; it returns the
exit status.

### Helper modules

- `pipex.paths`: `get_path_from_env`, `parse_paths` (PATH directories, each
  ending in `/`; raises `LookupError` if PATH is unset), `find_cmd_path`, and
  `parse_command`, which raises `CommandNotFoundError` for a command with no
  words.
- `pipex.lines.LineReader(stream, buffer_size=42)`: reads lines from a file
  descriptor or a text or binary stream; `readline()` returns `None` at end
  of input, and the reader is iterable.
- `pipex.fmt`: `sprintf(fmt, *args)` and `printf(fmt, *args, file=None)`
  supporting `%c %s %p %d %i %u %x %X %%`, with 32-bit integer wrapping and
  `(null)` for a `None` string.
- `pipex.textutil`: string helpers with C-library behaviour — `split`,
  `atoi`, `itoa`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strcmp`,
  `strchr`, `strrchr`, `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `toupper`, `tolower`. Search functions return an index or
  `None`.

## What it does not do

`pipex` is not an interactive shell: it has no prompt loop, job control,
built-in commands, quoting, or redirections other than the input file (or
here-document) and the output file given on the command line.