"""Errors raised while resolving configuration and acquiring tokens.

Transport-level failures raised by ``azure-identity`` / ``azure-core``
(``azure.core.exceptions.*``) are not wrapped; they reach the caller as-is.
"""


class AuthError(Exception):
    """Base class for errors raised by :mod:`intuneauth.auth`."""


class MissingConfigurationError(AuthError, ValueError):
    """A required configuration key is absent, empty or whitespace-only."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing required configuration: {key}")


class InvalidArgumentError(AuthError, ValueError):
    """A call-time argument is empty or malformed."""

    def __init__(self, argument: str, reason: str = "must not be empty") -> None:
        self.argument = argument
        super().__init__(f"{argument} {reason}")


class AuthenticationFailureError(AuthError):
    """The authority answered but produced no usable token."""


class InvalidConfigurationError(AuthError, ValueError):
    """A configuration key is present but its value is malformed."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Invalid configuration {key}: {reason}")
