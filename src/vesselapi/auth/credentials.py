"""Credential and setting resolution for the Vessel API client.

Settings are looked up in priority order:
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Default value

The API key can additionally be read from a file whose path is given by
``VESSELAPI_API_KEY_FILE``, which suits secrets mounted by container
orchestrators.

Example:
    ```python
    from vesselapi.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve_api_key()
    base_url = resolver.resolve(env_var_name="VESSELAPI_BASE_URL", default=DEFAULT_BASE_URL)
    ```

Security Considerations:
    - Credentials are never logged (masked with ***)
    - Only source information is logged (env var name, file path)
    - File-based credentials have whitespace stripped
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from vesselapi.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "VESSELAPI_API_KEY"
API_KEY_FILE_ENV_VAR = "VESSELAPI_API_KEY_FILE"


class CredentialResolver:
    """Resolve settings from explicit values, the environment and defaults.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories for one.
        load_dotenv: Whether to load the .env file at all. Variables already
            set in the environment are never overridden.

    Example:
        ```python
        # Skip .env loading entirely (tests, containers)
        resolver = CredentialResolver(load_dotenv=False)
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once, thread-safely."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Mark as attempted either way, a broken .env is not retried
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a setting from multiple sources.

        Args:
            value: Explicitly provided value (highest priority)
            env_var_name: Environment variable name to check
            default: Default value if not found elsewhere
            required: Raise CredentialNotFoundError when nothing is found
            mask_in_logs: Mask the resolved value in log messages

        Returns:
            Resolved value, or None if not found and not required

        Raises:
            CredentialNotFoundError: If required=True and nothing was found
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and os.environ.get(env_var_name):
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved {env_var_name or 'setting'} from {source}: {shown}")

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

        The path may come directly or from ``env_var_name``; ``~`` and
        ``$VAR`` are expanded. The file contents are stripped of surrounding
        whitespace.

        Args:
            file_path: Path to the file containing the credential
            env_var_name: Environment variable holding the path
            required: Raise CredentialFileError when the file cannot be read

        Returns:
            File contents, or None if unavailable and not required

        Raises:
            CredentialFileError: If required=True and the file cannot be read
        """
        path_to_use = str(file_path) if file_path is not None else None
        if path_to_use is None and env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

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

    def resolve_api_key(self, value: str | None = None) -> str:
        """Resolve the Vessel API key.

        Checks the explicit value, then ``VESSELAPI_API_KEY``, then the file
        named by ``VESSELAPI_API_KEY_FILE``.

        Raises:
            CredentialNotFoundError: If no non-empty key is found
        """
        api_key = self.resolve(value=value or None, env_var_name=API_KEY_ENV_VAR)
        if api_key is None:
            api_key = self.resolve_from_file(env_var_name=API_KEY_FILE_ENV_VAR)
        if not api_key:
            raise CredentialNotFoundError(
                f"API key must not be empty (checked env var: {API_KEY_ENV_VAR})",
                env_var_name=API_KEY_ENV_VAR,
            )
        return api_key
