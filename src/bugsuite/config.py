from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

try:
    import yaml
except Exception:  # pragma: no cover
    yaml = cast(Any, None)

from .models import TimeRange

DEFAULT_SOURCE_FILE = 'bugs.txt'
DEFAULT_TIME_RANGE = TimeRange.PAST_WEEK


class ConfigError(RuntimeError):
    pass


@dataclass
class SuiteConfig:
    version: int
    source_file: Path
    default_time_range: TimeRange
    # Logging configuration
    logging_json_enabled: bool
    logging_level: str


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {}) or {}
    if not isinstance(value, dict):
        raise ConfigError(f'Config section {name!r} must be a mapping')
    return cast(dict[str, Any], value)


def load_config(path: str | Path) -> SuiteConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f'Configuration file not found: {p}')
    if yaml is None:
        raise ConfigError('PyYAML not installed; pip install PyYAML')
    try:
        raw_any = yaml.safe_load(p.read_text(encoding='utf-8')) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f'Invalid YAML in {p}: {exc}') from exc
    if not isinstance(raw_any, dict):
        raise ConfigError(f'Configuration in {p} must be a mapping')
    raw = cast(dict[str, Any], raw_any)
    src = _section(raw, 'source')
    query = _section(raw, 'query')
    logging_config = _section(raw, 'logging')

    range_name = query.get('default_time_range')
    try:
        default_range = (
            TimeRange.from_name(str(range_name)) if range_name else DEFAULT_TIME_RANGE
        )
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    try:
        version = int(raw.get('version', 1))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f'Config version must be an integer: {raw.get("version")!r}') from exc
    source_name = src.get('file', DEFAULT_SOURCE_FILE)
    if not isinstance(source_name, str) or not source_name.strip():
        raise ConfigError(f'source.file must be a non-empty string: {source_name!r}')

    return SuiteConfig(
        version=version,
        source_file=p.parent / source_name,
        default_time_range=default_range,
        logging_json_enabled=bool(logging_config.get('json_enabled', False)),
        logging_level=str(logging_config.get('level', 'INFO')),
    )


__all__ = ["ConfigError", "SuiteConfig", "load_config"]
