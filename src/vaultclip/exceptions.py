"""Custom exceptions for vaultclip."""


class VaultClipError(Exception):
    """Base exception for vaultclip."""


class ConfigError(VaultClipError):
    """Raised when configuration is missing or invalid."""


class ValidationError(VaultClipError):
    """Raised when the submitted URL is rejected."""


class FetchError(VaultClipError):
    """Raised when fetching the page fails."""


class LLMError(VaultClipError):
    """Raised when the summarization API call fails."""


class PersistenceError(VaultClipError):
    """Raised when the clipping cannot be written to the vault."""
