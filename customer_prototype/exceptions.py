"""Custom exception hierarchy for customer-prototype."""


class PrototypeError(Exception):
    """Base exception for all customer-prototype errors."""


class PrototypeNotFoundError(PrototypeError):
    """Raised when a named prototype is not registered."""


class DuplicatePrototypeError(PrototypeError):
    """Raised when a prototype name or customer ID is already registered."""


class InvalidPrototypeStateError(PrototypeError):
    """Raised when a record is in an invalid state to be duplicated."""


class ConfigurationError(PrototypeError):
    """Raised when configuration is invalid or missing."""


class SinkError(PrototypeError):
    """Raised when a sink operation fails."""
