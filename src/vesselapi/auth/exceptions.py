"""Exceptions for resolving the Vessel API credential.

Example:
    ```python
    from vesselapi.auth.exceptions import CredentialNotFoundError

    try:
        client = VesselClient()
    except CredentialNotFoundError as e:
        print(f"Set {e.env_var_name} to your API key")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a required credential file cannot be read."""

    pass
