"""Custom exceptions for liq-fees."""


class FeeError(Exception):
    """Base class for fee accounting errors."""


class UnauthorizedError(FeeError, PermissionError):
    """Raised when a non-administrator attempts an administrative action."""


class InvalidShareError(FeeError, ValueError):
    """Raised when a maker proportion lies outside [0, 1000]."""


class InvalidFeeError(FeeError, ValueError):
    """Raised when a fee or notional amount is negative."""


class NotInitializedError(FeeError, RuntimeError):
    """Raised when the maker share configuration is used before it exists."""


class AlreadyInitializedError(NotInitializedError):
    """Raised when the maker share configuration is created a second time."""


class UnknownFeeTierError(FeeError, ValueError):
    """Raised when a fee tier selector is not part of the registry."""


class SnapshotFormatError(FeeError):
    """Raised when a configuration snapshot file is invalid or corrupted."""
