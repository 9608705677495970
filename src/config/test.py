"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_max_spec_length,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("MCP_PORT", raising=False)
        result = get_environment(EnvVar.MCP_PORT)
        assert result == 3000

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("MCP_PORT", "9999")
        result = get_environment(EnvVar.MCP_PORT, override=5000)
        assert result == 5000

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("MCP_PORT", "12345")
        result = get_environment(EnvVar.MCP_PORT)
        assert result == 12345
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("MCP_HOST", "127.0.0.1")
        result = get_environment(EnvVar.MCP_HOST)
        assert result == "127.0.0.1"
        assert isinstance(result, str)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("SPEC2APP_MAX_SPEC_LENGTH", "lots")
        result = get_environment(EnvVar.SPEC2APP_MAX_SPEC_LENGTH)
        assert result == 20000


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.MCP_PORT)
        assert isinstance(info, EnvConfig)
        assert info.name == "MCP_PORT"
        assert info.default == 3000
        assert info.var_type is int
        assert info.category == "service"

    @pytest.mark.unit
    def test_all_variables_have_descriptions(self):
        """Every variable documents itself."""
        for var in EnvVar:
            assert get_environment_info(var).description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        service_vars = list_environment_variables("service")
        assert EnvVar.MCP_PORT in service_vars
        assert EnvVar.MCP_HOST in service_vars
        assert EnvVar.SPEC2APP_LOG_LEVEL not in service_vars

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown categories yield no variables."""
        assert list_environment_variables("nope") == []


class TestConvenienceFunctions:
    """Tests for the convenience accessors."""

    @pytest.mark.unit
    def test_log_level_is_upper_cased(self, monkeypatch):
        """Log level names are normalized to upper case."""
        monkeypatch.setenv("SPEC2APP_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_log_level_default(self, monkeypatch):
        """Log level defaults to INFO."""
        monkeypatch.delenv("SPEC2APP_LOG_LEVEL", raising=False)
        assert get_log_level() == "INFO"

    @pytest.mark.unit
    def test_max_spec_length_override(self, monkeypatch):
        """Override beats environment for the spec length limit."""
        monkeypatch.setenv("SPEC2APP_MAX_SPEC_LENGTH", "100")
        assert get_max_spec_length() == 100
        assert get_max_spec_length(override=50) == 50
