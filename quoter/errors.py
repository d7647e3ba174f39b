"""Quoter error classes.

These errors map to the 1DEX program error codes where one exists.
"""


class OneIntroError(Exception):
    """Base error for 1DEX pool operations."""

    pass


class ValidationError(OneIntroError):
    """Caller-supplied request is invalid."""

    pass


class TooSmallTokenInAmountError(ValidationError):
    """Requested trade amount must be positive."""

    pass


class TooSmallTokenOutAmountError(ValidationError):
    """Computed output amount is zero."""

    pass


class UnknownMintError(ValidationError):
    """Input mint is neither of the pool's two tradable legs."""

    pass


class CalculationFailure(OneIntroError):
    """Calculation: general failure.

    Overflow, non-representable narrowing, zero weights, non-finite floats
    or a fee ratio >= 100%.
    """

    pass


class StateNotFound(OneIntroError):
    """Pool state account missing from the update batch."""

    pass


class PoolDecodeError(OneIntroError):
    """Pool account bytes could not be decoded."""

    pass


class UnsupportedPoolError(OneIntroError):
    """No adapter is registered for the account's owning program."""

    pass
