# pipex

`pipex` runs two commands connected by a pipe. The first command reads
from an input file and the second command writes to an output file. It
does the same job as this shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

It takes exactly four arguments. Any other number prints
`Error with the number of arguments` to standard error and exits with
status 1.

- The output file is created if it is missing and emptied if it already
  exists.
- Commands are split on spaces. There is no quoting, no globbing and no
  variable expansion.
- Each command is looked up in the directories of the `PATH` variable. If
  it is not found there, it is run by its name from the current directory.
- If one stage cannot start (a missing input file, an output file that
  cannot be opened, a command that cannot be run, no `PATH` in the
  environment), a message goes to standard error and the other stage
  still runs.
- After the pipeline has run, the command exits with status 0, whatever
  the two commands returned. It exits with status 1 only when the
  arguments are wrong or the pipe cannot be created.

Example:

```
pipex input.txt "grep foo" "wc -l" count.txt
```

## Library use

`pipex.runner` holds the pipeline:

```python
from pipex.runner import run_pipeline

status = run_pipeline("input.txt", "grep foo", "wc -l", "count.txt")
```

- `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` runs the two
  commands and returns the exit status of the second one. `env` may be a
  mapping, a sequence of `NAME=value` strings, or `None` for the current
  environment. When the second stage cannot start, the exit code of its
  error is returned instead.
- `exec_cmd(command, env, stdin, stdout)` starts one command with the given
  standard input and output and returns the `subprocess.Popen` object. An
  empty command raises `PipexError`; a command that cannot be executed
  raises `PipexError` with an `execve:` message.
- `main(argv=None)` is the command-line entry point and returns the exit
  status.

`pipex.paths` resolves commands:

- `get_paths(env)` returns the directories of `PATH` from a mapping or a
  sequence of `NAME=value` strings, dropping empty entries. It raises
  `PipexError` when there is no `PATH`.
- `get_cmd_path(command, paths)` returns the first executable
  `directory/name` for the first word of `command`, the bare name when none
  is found, or `None` for a command with no words.

`pipex.errors` defines `PipexError`, which carries a `message` and an
`exit_code` (1 by default), and `report_error(error, stream=None)`, which
writes the message to standard error (or `stream`) and returns the exit
code.

## Helper modules

- `pipex.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), `to_upper`, `to_lower`, `atoi` (leading integer
  with 32-bit wrap-around) and `itoa` (32-bit integers only).
- `pipex.memory`: operations on byte buffers: `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove` and `memset`. Spans past the end of a
  buffer raise `ValueError`.
- `pipex.strings`: `split`, `strchr`, `strrchr`, `strdup`, `striteri`,
  `strmapi`, `strjoin`, `strlen`, `strncmp`, `strnstr`, `strtrim`,
  `substr`, and the bounded byte-buffer copies `strlcpy` and `strlcat`.
- `pipex.linked`: a singly linked list of `Node` objects, with `lst_new`,
  `lst_add_front`, `lst_add_back`, `lst_size`, `lst_last`, `lst_delone`,
  `lst_clear`, `lst_iter` and `lst_map`. Functions that can change the
  first node return the new head.

## What it does not do

- Only two commands are supported; there is no chaining of more stages and
  no here-document input.
- There are no helpers for writing characters, strings or numbers straight
  to a file descriptor.