"""Tests for the environment variable utility."""

import pytest

from scanbench.utils.env import (
    EnvVarNotSetError,
    EnvVarTypeError,
    env_is_set,
    get_env,
    require_env,
)


def test_get_env_basic(monkeypatch):
    """Test getting set variables and missing variables with defaults."""
    monkeypatch.setenv("SCANBENCH_TEST_VAR", "test_value")
    monkeypatch.delenv("SCANBENCH_MISSING_VAR", raising=False)

    assert get_env("SCANBENCH_TEST_VAR") == "test_value"
    assert get_env("SCANBENCH_MISSING_VAR", default="default") == "default"
    assert get_env("SCANBENCH_MISSING_VAR") is None


def test_get_env_coercion(monkeypatch):
    """Test type coercion for common types."""
    monkeypatch.setenv("SCANBENCH_BOOL_TRUE", "true")
    monkeypatch.setenv("SCANBENCH_BOOL_FALSE", "off")
    monkeypatch.setenv("SCANBENCH_INT", "123")
    monkeypatch.setenv("SCANBENCH_FLOAT", "1.23")
    monkeypatch.setenv("SCANBENCH_LIST", "Email, IP ")

    assert get_env("SCANBENCH_BOOL_TRUE", as_type=bool) is True
    assert get_env("SCANBENCH_BOOL_FALSE", as_type=bool) is False
    assert get_env("SCANBENCH_INT", as_type=int) == 123
    assert get_env("SCANBENCH_FLOAT", as_type=float) == 1.23
    assert get_env("SCANBENCH_LIST", as_type=list) == ["Email", "IP"]

    monkeypatch.setenv("SCANBENCH_INVALID_INT", "fifty")
    with pytest.raises(EnvVarTypeError):
        get_env("SCANBENCH_INVALID_INT", as_type=int)


def test_require_env(monkeypatch):
    """Test getting required variables."""
    monkeypatch.setenv("SCANBENCH_REQUIRED", "exists")
    monkeypatch.delenv("SCANBENCH_NON_EXISTENT", raising=False)

    assert require_env("SCANBENCH_REQUIRED") == "exists"
    with pytest.raises(EnvVarNotSetError):
        require_env("SCANBENCH_NON_EXISTENT")


def test_env_is_set(monkeypatch):
    """Test empty and missing variables."""
    monkeypatch.setenv("SCANBENCH_EMPTY", "")
    monkeypatch.setenv("SCANBENCH_FULL", "1")

    assert env_is_set("SCANBENCH_FULL")
    assert not env_is_set("SCANBENCH_EMPTY")
