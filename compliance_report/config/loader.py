from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_APPROVED_CODES,
    DEFAULT_HIGH_RISK_KEYWORDS,
    ClassificationConfig,
)

"""Config loader.

Responsibilities:
- Load YAML config (default: config/report.yml)
- Validate against the bundled JSON schema (config_schema.json)
- Apply defaults for keys that are not present
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/report.yml")
CONFIG_ENV_VAR = "COMPLIANCE_REPORT_CONFIG"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: Any) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the config
            data fails validation (unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ClassificationConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    return ClassificationConfig.from_iterables(
        high_risk_keywords=data.get("high_risk_keywords", DEFAULT_HIGH_RISK_KEYWORDS),
        approved_codes=data.get("approved_codes", DEFAULT_APPROVED_CODES),
    )


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the config file for this run.

    優先順位: --config 引数 > 環境変数 COMPLIANCE_REPORT_CONFIG > config/report.yml (存在時のみ)
    Returns None when no file applies (built-in defaults are used).
    """
    if explicit is not None:
        return explicit
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None
