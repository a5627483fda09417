"""Bearer credential resolution.

The FACEIT Data API accepts an API key or an OAuth2 access token in the same
``Authorization: Bearer`` slot, so the client only ever deals with one opaque
string. This module finds that string.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. ``FACEIT_API_KEY`` environment variable (``.env`` is loaded into the environment)
3. File named by ``FACEIT_API_KEY_FILE``
4. Nothing: the client runs unauthenticated

Example:
    ```python
    from faceit_client.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve_api_key()
    ```

Credential values are never logged, only where they came from.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from faceit_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "FACEIT_API_KEY"
API_KEY_FILE_ENV_VAR = "FACEIT_API_KEY_FILE"


class CredentialResolver:
    """Resolve settings and the bearer credential from several sources.

    Example:
        ```python
        resolver = CredentialResolver(dotenv_path="/app/.env")

        api_key = resolver.resolve_api_key(required=True)
        base_url = resolver.resolve(env_var_name="FACEIT_BASE_URL", default="https://open.faceit.com")
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            # Existing environment variables are never overridden
            load_dotenv(dotenv_path=self._dotenv_path, override=False)
            self._dotenv_loaded = True
            logger.debug("Loaded .env file for credential resolution")

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a value: explicit, then environment, then default.

        Args:
            value: Explicit value; wins over everything else.
            env_var_name: Environment variable to check.
            default: Value used when nothing else is set.
            required: Raise instead of returning None.
            secret: Mask the value in log messages.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: required and not found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved value from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may contain ``~`` and ``$VAR`` references. Surrounding
        whitespace in the file is stripped.

        Args:
            file_path: Path to the file.
            env_var_name: Environment variable holding the path, used when
                file_path is None.
            required: Raise instead of returning None.

        Raises:
            CredentialFileError: required and the file is missing or unreadable.
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, secret=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content or None

    def resolve_api_key(self, value: str | None = None, *, required: bool = False) -> str | None:
        """Resolve the FACEIT bearer credential (API key or OAuth2 access token).

        Args:
            value: Explicit credential.
            required: Raise when no source provides one.

        Returns:
            The credential, or None for unauthenticated use.

        Raises:
            CredentialNotFoundError: required and no source provided one.
        """
        api_key = self.resolve(value=value, env_var_name=API_KEY_ENV_VAR)
        if api_key is None:
            api_key = self.resolve_from_file(env_var_name=API_KEY_FILE_ENV_VAR)

        if api_key is None and required:
            raise CredentialNotFoundError(
                f"FACEIT API key not found (checked {API_KEY_ENV_VAR} and {API_KEY_FILE_ENV_VAR})",
                env_var_name=API_KEY_ENV_VAR,
            )
        if api_key is None:
            logger.debug("No FACEIT API key configured; requests will be unauthenticated")
        return api_key
