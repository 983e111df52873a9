"""Exception types raised by the HRIS core."""


class HRISError(Exception):
    """Base class for HRIS errors."""


class InvalidArgumentError(HRISError, ValueError):
    """Raised when a caller passes a value the system does not recognise."""


class InvalidEmployeeParamsError(InvalidArgumentError):
    """Raised when type-specific employee parameters don't fit the employee type."""
