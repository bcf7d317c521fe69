"""Check execution use-case service."""

from __future__ import annotations

import logging

from action_sequence_checker.configuration import (
    CheckMode,
    CheckSettings,
    CheckTarget,
    ConfigurationError,
    load_configuration,
    load_recorded_events,
    resolve_recorded_events,
)
from action_sequence_checker.dispatch_assertions import (
    DispatchAssertionError,
    assert_dispatched_actions,
    assert_dispatched_types,
    describe_expectations,
)

from .check_contracts import CheckOutcome, CheckRequest, RecordedEventLog

_LOGGER = logging.getLogger(__name__)


class CheckExecutionError(Exception):
    """Raised when a check use case cannot be completed."""


def execute_check(request: CheckRequest) -> CheckOutcome:
    """Load the configuration and recorded events, then run one assertion."""
    try:
        configuration = load_configuration(request.config_path)
        settings = configuration.check
        if request.events_path:
            events = load_recorded_events(
                request.events_path,
                discriminant_field=settings.discriminant_field,
            )
        else:
            events = resolve_recorded_events(configuration)
    except (ConfigurationError, OSError) as exc:
        raise CheckExecutionError(str(exc)) from exc

    _LOGGER.info(
        "checking %d recorded events against %s (%s, %s%s)",
        len(events),
        describe_expectations(settings.expected),
        settings.target.value,
        settings.mode.value,
        ", negated" if settings.negate else "",
    )
    subject = RecordedEventLog(events=events)
    try:
        _run_assertion(subject, settings)
    except DispatchAssertionError as exc:
        return CheckOutcome(
            passed=False,
            report=str(exc),
            settings=settings,
            event_count=len(events),
        )
    return CheckOutcome(
        passed=True,
        report=f"{describe_expectations(settings.expected)} satisfied by {len(events)} events",
        settings=settings,
        event_count=len(events),
    )


def _run_assertion(subject: RecordedEventLog, settings: CheckSettings) -> None:
    contains = settings.mode == CheckMode.CONTAINS
    if settings.target == CheckTarget.TYPES:
        assert_dispatched_types(
            subject,
            list(settings.expected),
            negate=settings.negate,
            contains=contains,
            discriminant_field=settings.discriminant_field,
        )
        return
    assert_dispatched_actions(
        subject,
        list(settings.expected),
        negate=settings.negate,
        contains=contains,
    )
