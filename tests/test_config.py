"""Tests for suite configuration loading."""

import json

import pytest

from scanbench.config import ConfigError, load_config
from scanbench.utils.env import EnvVarTypeError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SCANBENCH_* variables from the caller's shell out of the tests."""
    for name in ("SCANBENCH_ITERATIONS", "SCANBENCH_ENGINE", "SCANBENCH_FIXTURE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test the configuration without file, environment or overrides."""
    config = load_config()

    assert config.iterations == 50
    assert config.engine == "re"
    assert config.fixture is None
    assert config.benchmarks is None


def test_load_yaml(tmp_path):
    """Test loading a YAML configuration file."""
    path = tmp_path / "bench.yaml"
    path.write_text(
        "iterations: 7\n"
        "engine: regex\n"
        "benchmarks:\n"
        "  - name: Digits\n"
        "    pattern: '\\d+'\n"
        "    fallback: '[0-9]+'\n"
    )

    config = load_config(path)

    assert config.iterations == 7
    assert config.engine == "regex"
    assert config.benchmarks[0].name == "Digits"
    assert config.benchmarks[0].pattern == "\\d+"
    assert config.benchmarks[0].fallback == "[0-9]+"


def test_load_json(tmp_path):
    """Test loading a JSON configuration file."""
    path = tmp_path / "bench.json"
    path.write_text(json.dumps({"iterations": 3, "fixture": "corpus.txt"}))

    config = load_config(path)

    assert config.iterations == 3
    assert config.fixture.name == "corpus.txt"


def test_environment_and_override_precedence(tmp_path, monkeypatch):
    """Test that environment beats the file and overrides beat both."""
    path = tmp_path / "bench.yaml"
    path.write_text("iterations: 7\nengine: regex\n")
    monkeypatch.setenv("SCANBENCH_ITERATIONS", "9")
    monkeypatch.setenv("SCANBENCH_ENGINE", "re")

    config = load_config(path, overrides={"iterations": 11, "engine": None})

    assert config.iterations == 11
    assert config.engine == "re"

    assert load_config(path, use_env=False).engine == "regex"


def test_invalid_environment_value(monkeypatch):
    """Test that a non-integer SCANBENCH_ITERATIONS raises."""
    monkeypatch.setenv("SCANBENCH_ITERATIONS", "many")

    with pytest.raises(EnvVarTypeError):
        load_config()


def test_invalid_iterations(tmp_path):
    """Test that zero iterations is rejected."""
    path = tmp_path / "bench.yaml"
    path.write_text("iterations: 0\n")

    with pytest.raises(ConfigError, match="iterations"):
        load_config(path)


def test_empty_benchmark_list_rejected(tmp_path):
    """Test that an explicit empty benchmark list is a configuration error."""
    path = tmp_path / "bench.yaml"
    path.write_text("benchmarks: []\n")

    with pytest.raises(ConfigError, match="benchmarks"):
        load_config(path)


def test_invalid_files(tmp_path):
    """Test unreadable, unparsable and non-mapping files."""
    with pytest.raises(ConfigError, match="cannot read"):
        load_config(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ConfigError, match="cannot parse"):
        load_config(broken)

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(listing)
