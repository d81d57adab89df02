"""
Layout error types.

Every error the engine raises derives from LayoutError, which is a ValueError
so callers that only care about "bad input" can catch one thing.
"""


class LayoutError(ValueError):
    """Base class for everything the layout engine refuses to compute."""


class DegenerateGeometry(LayoutError):
    """A plane, unit or usable viewport dimension is zero, negative or not finite."""


class UnknownPattern(LayoutError):
    """A pattern name outside the supported set."""

    def __init__(self, value, available: list[str]):
        self.value = value
        self.available = available
        super().__init__(
            f"Unknown pattern: {value!r}. Available: {available}"
        )


class LayoutTooLarge(LayoutError):
    """The request would generate more candidate rectangles than allowed."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Layout would generate {count} rectangles (limit {limit})"
        )
