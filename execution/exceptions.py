"""Exception hierarchy for the execution package."""


class ExecutionError(Exception):
    """Base exception for all execution package errors."""

    pass


class ConfigurationError(ExecutionError):
    """Raised when model or logger configuration is invalid.

    This covers malformed model config rules, model identifiers that no
    registered rule resolves, and loggers missing required methods. These
    are not recoverable by retrying; the caller must fix its configuration.
    """

    pass


class ProviderError(ExecutionError):
    """Base exception for provider errors."""

    def __init__(self, message: str, provider: str, recoverable: bool = True):
        """Initialize the error.

        Args:
            message: Error message.
            provider: Name of the provider that raised the error.
            recoverable: Whether this error is recoverable (e.g., rate limit)
                or permanent (e.g., invalid API key).
        """
        super().__init__(f"[{provider}] {message}")
        self.provider = provider
        self.recoverable = recoverable
