class GregdateError(Exception):
    """Base error."""

class UninitializedDateError(GregdateError):
    """Raised when a Date was not produced by the factory (zero value)."""

class InvalidDateError(GregdateError):
    """Raised when month or day is outside its calendar range."""

class ArithmeticOverflowError(GregdateError):
    """Raised when an arithmetic result leaves the supported year range."""
