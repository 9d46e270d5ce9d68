"""
rangezip error module
"""

from typing import List, Tuple, Optional, NoReturn


# Type alias for stack trace
Stack = List[Tuple[str, str]]


class RangeZipError(Exception):
    """rangezip specific exception with trace support"""

    def __init__(self, msg: str, stack_trace: Optional[Stack] = None):
        self.msg = msg
        self.stack_trace = stack_trace or []
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if not self.stack_trace:
            return self.msg

        trace_str = ""
        for identifier, position in self.stack_trace:
            trace_str += f"\n{identifier} at {position}"

        return f"{self.msg}{trace_str}"


class RangeSyntaxError(RangeZipError):
    """Raised when a range expression cannot be parsed."""

    def __init__(self, msg: str, text: str, line: int = 0, column: int = 0):
        self.text = text
        self.line = line
        self.column = column
        super().__init__(msg, [(repr(text), f"line {line}, column {column}")])


class RunLengthError(RangeZipError, ValueError):
    """Raised when a derived run exceeds the configured maximum length."""

    def __init__(self, start: int, end: int, limit: int):
        self.start = start
        self.end = end
        self.limit = limit
        super().__init__(
            f"Run from {start} to {end} has {abs(end - start)} values, "
            f"exceeding max_run_length={limit}"
        )


def fail(msg: str) -> NoReturn:
    """Raise a rangezip exception with a message"""
    raise RangeZipError(msg, [])

