"""Exception types raised by the filter engine."""


class FilterEngineError(Exception):
    """Base class for filter engine errors."""

    pass


class SheetStateError(FilterEngineError):
    """Raised when a filter sheet operation is not valid in its current state."""

    pass


class InvalidSectionError(FilterEngineError):
    """Raised in strict mode when a section does not match the filter value."""

    pass


class FilterStoreError(FilterEngineError):
    """Raised when a filter store cannot read or write a snapshot."""

    pass
