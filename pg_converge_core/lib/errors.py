"""
Exception types raised by the library.
"""

from typing import List


class ParseError(Exception):
    """
    A syntax error found while parsing one input.

    Attributes:
        input_name: Display name of the input (usually a file name)
        line: 1-based line the error was reported on
        message: Human readable description
    """

    def __init__(self, input_name: str, line: int, message: str):
        super().__init__(message)
        self.input_name = input_name
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"{self.input_name}:{self.line}: {self.message}"

    def to_dict(self) -> dict:
        return {"file": self.input_name, "line": self.line, "message": self.message}


class DiffError(Exception):
    """
    Raised by ``process`` when either side failed to parse.

    ``str()`` gives the short summary; ``detail()`` lists every message.
    """

    def __init__(
        self,
        source_name: str,
        source_errors: List[ParseError],
        desired_name: str,
        desired_errors: List[ParseError],
    ):
        self.source_name = source_name
        self.source_errors = list(source_errors)
        self.desired_name = desired_name
        self.desired_errors = list(desired_errors)
        super().__init__(self.summary())

    def summary(self) -> str:
        parts = []
        if self.source_errors:
            parts.append(f"source has {len(self.source_errors)} errors")
        if self.desired_errors:
            parts.append(f"desired has {len(self.desired_errors)} errors")
        return "; ".join(parts)

    def detail(self) -> str:
        lines = []
        for name, errors in ((self.source_name, self.source_errors),
                             (self.desired_name, self.desired_errors)):
            if not errors:
                continue
            lines.append(f"{name} has {len(errors)} errors")
            lines.extend(f"  {error}" for error in errors)
        return "\n".join(lines)

    @property
    def errors(self) -> List[ParseError]:
        return self.source_errors + self.desired_errors

    def __str__(self) -> str:
        return self.summary()


class PatchValidationError(Exception):
    """The generated patch was rejected by the PostgreSQL parser."""

    def __init__(self, message: str, cursor_position: int = 0):
        super().__init__(message)
        self.message = message
        self.cursor_position = cursor_position


__all__ = [
    "ParseError",
    "DiffError",
    "PatchValidationError",
]
