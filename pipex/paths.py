"""Finding the search path in an environment and resolving commands on it."""

import os
from collections.abc import Mapping

from pipex.errors import PipexError
from pipex.strings import split


def get_paths(env):
    """Return the directories listed in the PATH variable of env.

    env is either a mapping of names to values or a sequence of
    ``NAME=value`` strings, in which case the first PATH entry wins.
    Empty directory entries are dropped.
    """
    if isinstance(env, Mapping):
        full_path = env.get("PATH")
    else:
        full_path = next(
            (entry[len("PATH="):] for entry in env if entry.startswith("PATH=")),
            None,
        )
    if full_path is None:
        raise PipexError("Error PATH variable not found in env")
    return split(full_path, ":")


def get_cmd_path(command, paths):
    """Resolve the program named by the first word of command.

    Each directory in paths is tried in order and the first executable
    candidate is returned. When none is found the bare program name is
    returned; a command with no words yields None.
    """
    words = split(command, " ")
    if not words:
        return None
    name = words[0]
    for directory in paths:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return name