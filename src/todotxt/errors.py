"""
Exceptions raised by the todo.txt parser.

Only a malformed priority token fails a line. Everything else the parser
does not recognise ends up in the task description.
"""


class TodoTxtError(Exception):
    """Base class for all todotxt errors."""


class InvalidPriority(TodoTxtError, ValueError):
    """A priority letter outside A-Z, or not exactly one character."""


class DocumentParseError(TodoTxtError):
    """A line in a multi-line document failed to parse."""

    def __init__(self, line_index: int, error: Exception):
        self.line_index = line_index
        self.error = error
        super().__init__(f"error at line {line_index}: {error}")
