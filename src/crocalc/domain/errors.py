"""Domain errors raised by the calculation engine."""


class CalculatorError(Exception):
    """Base class for calculation failures."""

    error_code = "CALCULATOR_ERROR"


class InvalidProfileError(CalculatorError, ValueError):
    """Raised for staffing profiles with negative counts or more dentists than team members."""

    error_code = "INVALID_PROFILE"


class NoInstituteAvailableError(CalculatorError):
    """Raised when the institute catalog is empty."""

    error_code = "NO_INSTITUTE_AVAILABLE"
