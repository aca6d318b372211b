"""Custom exceptions for the maker RPC SDK."""


class MakerRpcError(Exception):
    """Base exception for maker RPC operations."""


class ConfigurationError(MakerRpcError):
    """Raised when a required environment value is missing or malformed."""


class AddressMismatchError(ConfigurationError):
    """Raised when the private key does not derive the configured maker address."""


class GasEstimationError(MakerRpcError):
    """Raised when gas estimation fails or the call would revert."""


class TransactionReceiptError(MakerRpcError):
    """Raised when a mined transaction reports a failed status."""
