"""Configuration and recorded-events loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .runtime_settings import (
    CheckMode,
    CheckSettings,
    CheckTarget,
    Configuration,
    RecordedEventsConfig,
)

_LOGGER = logging.getLogger(__name__)

_EnumT = TypeVar("_EnumT", bound=Enum)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the check configuration file."""
    path = Path(config_path)
    parsed = _read_yaml_document(path, label="Configuration file")
    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    check = _parse_check_section(parsed.get("check"))
    recorded_events = _parse_recorded_events_section(
        parsed.get("recorded_events"),
        path.parent,
        discriminant_field=check.discriminant_field,
    )
    _LOGGER.debug("loaded configuration %s", path)
    return Configuration(path=path, recorded_events=recorded_events, check=check)


def load_recorded_events(
    events_path: Path | str,
    *,
    discriminant_field: str = "type",
) -> tuple[Mapping[str, object], ...]:
    """Load recorded actions from a YAML/JSON file holding a list of mappings."""
    path = Path(events_path)
    parsed = _read_yaml_document(path, label="Recorded events file")
    return _validate_recorded_events(parsed, discriminant_field=discriminant_field)


def resolve_recorded_events(configuration: Configuration) -> tuple[Mapping[str, object], ...]:
    """Return the recorded actions referenced by the configuration."""
    source = configuration.recorded_events
    if source is None:
        raise ConfigurationError("Configuration section 'recorded_events' is required.")
    if source.inline is not None:
        return source.inline
    if source.source_path is None:  # pragma: no cover - guarded by the parser
        raise ConfigurationError("Recorded events require either inline or path.")
    return load_recorded_events(
        source.source_path,
        discriminant_field=configuration.check.discriminant_field,
    )


def _read_yaml_document(path: Path, *, label: str) -> Any:
    if not path.exists():
        raise ConfigurationError(f"{label} not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Failed to decode {label.lower()}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {label.lower()}: {exc}") from exc


def _parse_check_section(value: Any) -> CheckSettings:
    section = _require_mapping(value, "check")
    target = _parse_enum(section.get("target", "actions"), CheckTarget, "check.target")
    mode = _parse_enum(section.get("mode", "exact"), CheckMode, "check.mode")
    negate = _require_bool(section.get("negate", False), "check.negate")
    discriminant_field = _require_non_empty_string(
        section.get("discriminant_field", "type"), "check.discriminant_field"
    )
    if "expected" not in section:
        raise ConfigurationError("check.expected is required.")
    expected = _normalize_expected(section.get("expected"))
    if target == CheckTarget.ACTIONS:
        for index, item in enumerate(expected):
            if not isinstance(item, Mapping):
                raise ConfigurationError(f"check.expected[{index}] must be a mapping.")
    return CheckSettings(
        target=target,
        mode=mode,
        negate=negate,
        discriminant_field=discriminant_field,
        expected=expected,
    )


def _parse_recorded_events_section(
    value: Any,
    base_path: Path,
    *,
    discriminant_field: str,
) -> RecordedEventsConfig | None:
    if value is None:
        return None
    if isinstance(value, str):
        return RecordedEventsConfig(source_path=_resolve_path(base_path, value), inline=None)
    section = _require_mapping(value, "recorded_events")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline is not None and path_value:
        raise ConfigurationError("recorded_events must not set both inline and path.")
    if inline is not None:
        return RecordedEventsConfig(
            source_path=None,
            inline=_validate_recorded_events(inline, discriminant_field=discriminant_field),
        )
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("recorded_events.path must be a string.")
        return RecordedEventsConfig(
            source_path=_resolve_path(base_path, path_value),
            inline=None,
        )
    raise ConfigurationError("recorded_events requires either inline or path.")


def _validate_recorded_events(
    value: Any,
    *,
    discriminant_field: str,
) -> tuple[Mapping[str, object], ...]:
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, str | bytes):
        raise ConfigurationError("Recorded events must be a list of actions.")
    actions: list[Mapping[str, object]] = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise ConfigurationError(f"Recorded event {index} must be a mapping.")
        if discriminant_field not in item:
            raise ConfigurationError(
                f"Recorded event {index} is missing the '{discriminant_field}' field."
            )
        actions.append(dict(item))
    return tuple(actions)


def _normalize_expected(value: Any) -> tuple[object, ...]:
    if value is None:
        return ()
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return tuple(value)
    return (value,)


def _parse_enum(value: Any, enum_cls: type[_EnumT], field_name: str) -> _EnumT:
    text = _require_non_empty_string(value, field_name).lower()
    try:
        return enum_cls(text)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
