"""
Calculator configuration loading.

Loads constructor defaults from YAML with environment variable expansion.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

DEFAULT_NAME = "Basic Calculator"

_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off"}

_ENV_VAR = re.compile(r"\$\{([^}]+)\}|\$([A-Z_][A-Z0-9_]*)")


@dataclass
class CalculatorConfig:
    """Defaults used to build a Calculator."""

    name: str = DEFAULT_NAME
    scientific: bool = False


def _env_lookup(match: re.Match) -> str:
    return os.environ.get(match.group(1) or match.group(2), "")


def expand_env_vars(value: Any) -> Any:
    """Substitute ${VAR} and $VAR in strings, walking nested dicts and lists.

    Unset variables expand to an empty string.
    """
    if isinstance(value, str):
        return _ENV_VAR.sub(_env_lookup, value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def parse_bool(value: Any) -> bool:
    """
    Interpret a YAML or environment value as a boolean.

    Raises:
        ValueError: If the value is not a recognised boolean spelling
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _default_config_path() -> Path:
    # lib/config.py -> project root is ../..
    project_root = Path(__file__).parent.parent
    return project_root / "config" / "calculator.yaml"


def _config_from_env() -> CalculatorConfig:
    scientific = os.environ.get("CALCULATOR_SCIENTIFIC")
    return CalculatorConfig(
        name=os.environ.get("CALCULATOR_NAME", DEFAULT_NAME),
        scientific=parse_bool(scientific) if scientific is not None else False,
    )


def load_calculator_config(path: str | Path | None = None) -> CalculatorConfig:
    """
    Load calculator defaults.

    Looks for config in this order:
    1. Explicitly provided path
    2. CALCULATOR_CONFIG environment variable
    3. config/calculator.yaml relative to project root
    4. CALCULATOR_NAME / CALCULATOR_SCIENTIFIC environment variables

    Args:
        path: Optional path to YAML configuration file

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If an explicitly requested file is missing
        ValueError: If the configuration is invalid
        yaml.YAMLError: If YAML is malformed
    """
    load_dotenv()

    explicit = path is not None or "CALCULATOR_CONFIG" in os.environ
    if path is None:
        path = os.environ.get("CALCULATOR_CONFIG") or _default_config_path()
    path = Path(path)

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Configuration file not found: {path}")
        return _config_from_env()

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "calculator" not in data:
        raise ValueError("Configuration file missing 'calculator' section")

    section = expand_env_vars(data["calculator"] or {})
    if not isinstance(section, dict):
        raise ValueError("'calculator' section must be a mapping")

    # A key with no value (`name:`) loads as None and counts as missing
    name = section.get("name")
    scientific = section.get("scientific")
    return CalculatorConfig(
        name=DEFAULT_NAME if name is None else str(name),
        scientific=False if scientific is None else parse_bool(scientific),
    )
