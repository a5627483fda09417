"""Exceptions raised while resolving the bearer credential.

These only occur while building a client configuration, never during a call.
"""

from faceit_client.errors.exceptions import FaceitError


class CredentialError(FaceitError):
    """Base exception for credential resolution errors."""


class CredentialNotFoundError(CredentialError):
    """A required credential could not be found in any source.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A credential file could not be read."""
