"""
Core exception types for fixdec.core.

These are dependency-free and may be imported by all core modules.

Two error kinds are recoverable input errors and share `FixedPointError`:
- NumeralSyntaxError: malformed numeral text.
- MagnitudeRangeError: the unsigned 64-bit magnitude would overflow (or the
  float bridge received a negative / non-finite value).

Precondition violations by the caller (bad precision, operands outside the
uint64 domain) raise AmountDomainError. Division by zero raises the builtin
ZeroDivisionError.
"""

__all__ = [
    "FixedPointError",
    "NumeralSyntaxError",
    "MagnitudeRangeError",
    "AmountDomainError",
    "InvariantViolation",
]


class FixedPointError(ValueError):
    """Base class for recoverable errors caused by untrusted input."""
    pass


class NumeralSyntaxError(FixedPointError):
    """Raised when numeral text is malformed.

    Attributes
    ----------
    text : str | None
        The offending input, for context.
    """

    def __init__(self, message, *, text=None):
        super().__init__(message)
        self.text = text


class MagnitudeRangeError(FixedPointError):
    """Raised when a magnitude does not fit the unsigned 64-bit domain.

    Attributes
    ----------
    text : str | None
        The offending input (text or repr of a float), for context.
    """

    def __init__(self, message, *, text=None):
        super().__init__(message)
        self.text = text


class AmountDomainError(ValueError):
    """Raised when inputs violate the uint64 domain or basic preconditions."""
    pass


class InvariantViolation(ArithmeticError):
    """Raised when wide arithmetic would break core invariants (quotient overflow)."""
    pass
