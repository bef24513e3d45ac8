"""
Pytest fixtures for accesslist tests.

Provides common fixtures used across all test modules.
"""

from __future__ import annotations

import pytest

from accesslist import AccessControlList, create_access_control_list


class RecordingCallback:
    """Verbose callback that keeps every message it receives."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def verbose() -> RecordingCallback:
    """Create a verbose callback that records messages."""
    return RecordingCallback()


@pytest.fixture
def acl(verbose: RecordingCallback) -> AccessControlList:
    """Create an empty access control list with a recording callback."""
    return create_access_control_list({"verbose": verbose})


@pytest.fixture
def admin_acl(acl: AccessControlList) -> AccessControlList:
    """Create an access control list with a default 'Admin' resource."""
    acl.add_resource("Admin")
    return acl
