"""Credential handling for the FACEIT client.

Example:
    ```python
    from faceit_client.auth import CredentialResolver

    api_key = CredentialResolver().resolve_api_key(required=True)
    ```
"""

from faceit_client.auth.credentials import API_KEY_ENV_VAR, API_KEY_FILE_ENV_VAR, CredentialResolver
from faceit_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "API_KEY_ENV_VAR",
    "API_KEY_FILE_ENV_VAR",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
