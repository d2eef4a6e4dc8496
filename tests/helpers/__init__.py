"""Test helper utilities for the searchscope test suite."""

from tests.helpers.cli_assertions import (
    assert_command_failed,
    assert_command_success,
    assert_output_contains,
)
from tests.helpers.fakes import FakeConfigProvider, FakeEnvironment, FakeWorkspaceProvider

__all__ = [
    "assert_command_success",
    "assert_command_failed",
    "assert_output_contains",
    "FakeConfigProvider",
    "FakeEnvironment",
    "FakeWorkspaceProvider",
]
