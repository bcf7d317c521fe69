"""Assertions over sequences of recorded actions."""

import logging

from .action_matching import Pattern, Predicate, PredicateFailure, assert_deep_equal
from .dispatch_assertions import (
    DispatchAssertionError,
    NotRecordableError,
    assert_dispatched_actions,
    assert_dispatched_types,
    expect,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DispatchAssertionError",
    "NotRecordableError",
    "Pattern",
    "Predicate",
    "PredicateFailure",
    "assert_deep_equal",
    "assert_dispatched_actions",
    "assert_dispatched_types",
    "expect",
]
