"""Tests for multi-source credential resolution.

This module tests the CredentialResolver class which resolves the API key
and client settings from explicit values, the environment, .env files,
credential files and defaults.
"""

import pytest

from vesselapi.auth import CredentialResolver
from vesselapi.auth.credentials import API_KEY_ENV_VAR, API_KEY_FILE_ENV_VAR
from vesselapi.auth.exceptions import CredentialFileError, CredentialNotFoundError


class TestCredentialResolverInit:
    """Test CredentialResolver initialization."""

    def test_init_skip_dotenv(self):
        """Test initialization with dotenv loading disabled."""
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_init_with_custom_dotenv_path(self, tmp_path, monkeypatch):
        """Test values from an explicit .env file reach the environment."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("VESSELAPI_BASE_URL=https://dotenv.example/v1\n")
        # Register the variable so monkeypatch removes whatever dotenv sets
        monkeypatch.setenv("VESSELAPI_BASE_URL", "placeholder")
        monkeypatch.delenv("VESSELAPI_BASE_URL")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver._dotenv_loaded
        assert resolver.resolve(env_var_name="VESSELAPI_BASE_URL") == "https://dotenv.example/v1"

    def test_dotenv_does_not_override_environment(self, tmp_path, monkeypatch):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("VESSELAPI_BASE_URL=https://dotenv.example/v1\n")
        monkeypatch.setenv("VESSELAPI_BASE_URL", "https://env.example/v1")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver.resolve(env_var_name="VESSELAPI_BASE_URL") == "https://env.example/v1"

    def test_missing_dotenv_file_is_ignored(self, tmp_path):
        resolver = CredentialResolver(dotenv_path=str(tmp_path / "missing.env"))

        assert resolver._dotenv_loaded


class TestCredentialResolverResolve:
    """Test basic setting resolution."""

    def test_resolve_from_explicit_value(self, monkeypatch):
        """Test the explicit value has the highest priority."""
        monkeypatch.setenv("VESSELAPI_USER_AGENT", "env-agent")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-agent", env_var_name="VESSELAPI_USER_AGENT", default="default")

        assert result == "explicit-agent"

    def test_resolve_from_environment_variable(self, monkeypatch):
        monkeypatch.setenv("VESSELAPI_USER_AGENT", "env-agent")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(env_var_name="VESSELAPI_USER_AGENT", default="default")

        assert result == "env-agent"

    def test_empty_environment_variable_treated_as_unset(self, monkeypatch):
        monkeypatch.setenv("VESSELAPI_USER_AGENT", "")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(env_var_name="VESSELAPI_USER_AGENT", default="default")

        assert result == "default"

    def test_resolve_with_default_value(self):
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(env_var_name="VESSELAPI_UNSET", default="fallback")

        assert result == "fallback"

    def test_resolve_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="VESSELAPI_UNSET") is None

    def test_resolve_required_raises_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="VESSELAPI_UNSET", required=True)

        assert exc_info.value.env_var_name == "VESSELAPI_UNSET"
        assert "VESSELAPI_UNSET" in str(exc_info.value)

    def test_resolved_value_masked_in_logs(self, monkeypatch, caplog):
        monkeypatch.setenv(API_KEY_ENV_VAR, "super-secret")
        resolver = CredentialResolver(load_dotenv=False)

        with caplog.at_level("DEBUG", logger="vesselapi.auth.credentials"):
            resolver.resolve(env_var_name=API_KEY_ENV_VAR)

        assert "super-secret" not in caplog.text
        assert "***" in caplog.text


class TestCredentialResolverFile:
    """Test reading credentials from files."""

    def test_resolve_from_file_path(self, tmp_path):
        key_file = tmp_path / "api_key"
        key_file.write_text("  file-key\n")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=key_file) == "file-key"

    def test_resolve_from_file_env_var(self, tmp_path, monkeypatch):
        key_file = tmp_path / "api_key"
        key_file.write_text("file-key")
        monkeypatch.setenv(API_KEY_FILE_ENV_VAR, str(key_file))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name=API_KEY_FILE_ENV_VAR) == "file-key"

    def test_missing_file_returns_none(self, tmp_path):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=tmp_path / "missing") is None

    def test_missing_file_required_raises(self, tmp_path):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialFileError, match="not found"):
            resolver.resolve_from_file(file_path=tmp_path / "missing", required=True)

    def test_no_path_required_raises(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialFileError, match=API_KEY_FILE_ENV_VAR):
            resolver.resolve_from_file(env_var_name=API_KEY_FILE_ENV_VAR, required=True)

    def test_empty_file_returns_none(self, tmp_path):
        key_file = tmp_path / "api_key"
        key_file.write_text("   \n")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=key_file) is None


class TestResolveApiKey:
    """Test API key resolution order."""

    def test_explicit_key(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key("explicit-key") == "explicit-key"

    def test_environment_key(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key() == "env-key"

    def test_empty_explicit_key_falls_back_to_environment(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key("") == "env-key"

    def test_file_key(self, tmp_path, monkeypatch):
        key_file = tmp_path / "api_key"
        key_file.write_text("file-key\n")
        monkeypatch.setenv(API_KEY_FILE_ENV_VAR, str(key_file))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key() == "file-key"

    def test_environment_wins_over_file(self, tmp_path, monkeypatch):
        key_file = tmp_path / "api_key"
        key_file.write_text("file-key\n")
        monkeypatch.setenv(API_KEY_FILE_ENV_VAR, str(key_file))
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key() == "env-key"

    def test_missing_key_raises(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve_api_key()

        assert exc_info.value.env_var_name == API_KEY_ENV_VAR
