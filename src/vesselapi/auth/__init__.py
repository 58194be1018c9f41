"""Credential resolution for the Vessel API client.

Example:
    ```python
    from vesselapi.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve_api_key()
    ```
"""

from vesselapi.auth.credentials import API_KEY_ENV_VAR, API_KEY_FILE_ENV_VAR, CredentialResolver
from vesselapi.auth.exceptions import (
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
