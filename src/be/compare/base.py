"""Base data structures for the comparison engines."""

from dataclasses import dataclass


@dataclass
class ComparisonResult:
    """Outcome of comparing an actual value against one or more wants.

    Attributes:
        matched: Whether any want matched.
        want: Rendered expectation(s), set on mismatch.
        got: Rendered actual value, set on mismatch.
        message: Fixed diagnostic that replaces the ``want ..., got ...``
            form (e.g. "unexpected error: oops").
    """

    matched: bool
    want: str = ""
    got: str = ""
    message: str = ""

    def describe(self) -> str:
        if self.message:
            return self.message
        return f"want {self.want}, got {self.got}"
