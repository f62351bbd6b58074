"""The error type raised by the pipeline and how it is reported."""

import sys


class PipexError(Exception):
    """A failure that ends one stage of the pipeline or the whole program."""

    def __init__(self, message, exit_code=1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


def report_error(error, stream=None):
    """Write the error's message and a newline to stream; return its exit code.

    The stream defaults to standard error.
    """
    target = sys.stderr if stream is None else stream
    target.write(f"{error.message}\n")
    target.flush()
    return error.exit_code