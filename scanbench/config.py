"""Suite configuration loading.

Configuration comes from, in increasing precedence: model defaults, a
YAML or JSON file, SCANBENCH_* environment variables, and explicit
overrides (the command line).

Example file:
    iterations: 20
    engine: regex
    fixture: corpus.txt
    benchmarks:
      - name: Email
        pattern: '[\\w\\.+-]+@[\\w\\.-]+\\.[\\w\\.-]+'
      - name: Digits
        pattern: '(?-u:\\d)+'
        fallback: '\\d+'
"""

import json
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import ValidationError

from scanbench.models.bench_models import SuiteConfig
from scanbench.utils.env import get_env


class ConfigError(Exception):
    """Raised when a configuration file is missing or invalid."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid configuration {self.path}: {reason}")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Parse a YAML or JSON file into a dictionary."""
    try:
        content = path.read_text()
    except OSError as e:
        raise ConfigError(path, f"cannot read file ({e})") from e

    try:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(path, f"cannot parse file ({e})") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")
    return data


def env_overrides() -> dict[str, Any]:
    """Collect configuration values set through SCANBENCH_* variables."""
    overrides: dict[str, Any] = {}

    iterations = get_env("SCANBENCH_ITERATIONS", as_type=int, log=True)
    if iterations is not None:
        overrides["iterations"] = iterations

    engine = get_env("SCANBENCH_ENGINE", log=True)
    if engine:
        overrides["engine"] = engine

    fixture = get_env("SCANBENCH_FIXTURE", log=True)
    if fixture:
        overrides["fixture"] = fixture

    return overrides


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    use_env: bool = True,
) -> SuiteConfig:
    """Build a SuiteConfig from a file, the environment and overrides.

    Args:
        path: Optional YAML (.yaml/.yml) or JSON configuration file.
        overrides: Values that take precedence over everything else;
            None values are ignored.
        use_env: Whether SCANBENCH_* variables are applied.

    Returns:
        Validated SuiteConfig.

    Raises:
        ConfigError: If the file cannot be read or parsed, or the merged
            values fail validation.
        EnvVarTypeError: If SCANBENCH_ITERATIONS is not an integer.
    """
    data: dict[str, Any] = {}
    if path is not None:
        data.update(_read_config_file(Path(path)))
    if use_env:
        data.update(env_overrides())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SuiteConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(path or "<arguments>", str(e)) from e
