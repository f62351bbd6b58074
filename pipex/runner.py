"""Running two commands joined by a pipe between an input and an output file."""

import os
import subprocess
import sys
from collections.abc import Mapping

from pipex.errors import PipexError, report_error
from pipex.paths import get_cmd_path, get_paths
from pipex.strings import split


def _environment(env):
    """Turn env (None, a mapping or NAME=value strings) into a dict."""
    if env is None:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result = {}
    for entry in env:
        key, sep, value = entry.partition("=")
        if sep:
            result.setdefault(key, value)
    return result


def _spawn(path, args, env, stdin, stdout):
    # A name without a slash is run from the current directory, not searched for.
    executable = path if "/" in path else os.path.join(".", path)
    return subprocess.Popen(
        args, executable=executable, stdin=stdin, stdout=stdout, env=env
    )


def _start_stage(command, env, stdin, stdout):
    path = get_cmd_path(command, get_paths(env))
    if path is None:
        raise PipexError("pipex: Command not found")
    try:
        return _spawn(path, split(command, " "), env, stdin, stdout)
    except OSError as exc:
        raise PipexError("Execve Error") from exc


def exec_cmd(command, env, stdin, stdout):
    """Start command with the given standard input and output; return the process.

    The program is looked up on the PATH of env and receives env as its
    environment.
    """
    if not command:
        raise PipexError("Error: Empty command")
    args = split(command, " ")
    if not args:
        raise PipexError("Error: Invalid command")
    environment = _environment(env)
    path = get_cmd_path(args[0], get_paths(environment))
    if path is None:
        raise PipexError(f"Error: {args[0]}: command not found", 127)
    try:
        return _spawn(path, args, environment, stdin, stdout)
    except OSError as exc:
        raise PipexError(f"execve: {exc.strerror}") from exc


def run_pipeline(infile, cmd1, cmd2, outfile, env=None):
    """Run ``cmd1 < infile | cmd2 > outfile`` and return the second command's status.

    A stage that cannot start has its error reported on standard error; the
    other stage still runs. The output file is created or truncated. When
    the second stage cannot start, its error's exit code is returned.
    """
    environment = _environment(env)
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError("Error creating pipe") from exc

    first = None
    try:
        try:
            in_fd = os.open(infile, os.O_RDONLY)
        except OSError as exc:
            raise PipexError("Infile Error") from exc
        try:
            first = _start_stage(cmd1, environment, in_fd, write_fd)
        finally:
            os.close(in_fd)
    except PipexError as error:
        report_error(error)
    finally:
        os.close(write_fd)

    second = None
    status = 0
    try:
        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        except OSError as exc:
            raise PipexError("Outfile error") from exc
        try:
            second = _start_stage(cmd2, environment, read_fd, out_fd)
        finally:
            os.close(out_fd)
    except PipexError as error:
        status = report_error(error)
    finally:
        os.close(read_fd)

    if second is not None:
        status = second.wait()
    if first is not None:
        first.wait()
    return status


def main(argv=None):
    """Command entry point: infile cmd1 cmd2 outfile."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        return report_error(PipexError("Error with the number of arguments"))
    try:
        run_pipeline(*args, os.environ)
    except PipexError as error:
        return report_error(error)
    return 0