"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    ConfigurationError,
    load_configuration,
    load_recorded_events,
    resolve_recorded_events,
)
from .runtime_settings import (
    CheckMode,
    CheckSettings,
    CheckTarget,
    Configuration,
    RecordedEventsConfig,
)

__all__ = [
    "CheckMode",
    "CheckSettings",
    "CheckTarget",
    "Configuration",
    "RecordedEventsConfig",
    "ConfigurationError",
    "load_configuration",
    "load_recorded_events",
    "resolve_recorded_events",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
