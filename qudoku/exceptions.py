class QudokuError(Exception):
    """Base exception class."""


class ConfigurationError(QudokuError):
    """Raise for configuration errors."""


class DuplicateEvaluationInputError(QudokuError, ZeroDivisionError):
    """Raised when interpolation would divide by zero.

    This happens when the evaluations of a Lagrange-form polynomial reuse
    the same input, which is a precondition violation by the caller.
    """


class PointNotOnCurveError(QudokuError, ValueError):
    """Raised when coordinates or bytes do not describe a curve point."""


class PointLiftError(QudokuError, ValueError):
    """Raised when an x-coordinate cannot be lifted to a point of the requested parity."""
