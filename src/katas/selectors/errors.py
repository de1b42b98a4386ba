"""Selector error types."""


class SelectorError(ValueError):
    """Base error for all selector construction problems."""


class OrderingViolation(SelectorError):
    """Raised when selector parts are appended out of canonical order."""

    def __init__(self) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class DuplicateSingleton(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector"
        )


class InvalidCombinator(SelectorError):
    """Raised in strict mode when a combinator is not ' ', '>', '+' or '~'."""

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__(f"Invalid combinator: {combinator!r}")


class SelectorSyntaxError(SelectorError):
    """Raised when selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message)
