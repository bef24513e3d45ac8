"""
Core type definitions for accesslist.

This module defines the data structures held by the access control list:
registered resources with their per-action grant collections, and the
result object returned by authorization checks.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

WILDCARD = "*"
"""Reserved name for the global resource and for the per-resource action."""

DEFAULT_ACTIONS: tuple[str, ...] = ("create", "read", "update", "delete", WILDCARD)
"""Actions a resource gets when it is registered without an action list."""

Subject = Hashable


class GrantMatch(Enum):
    """Which resolution step authorized a query."""

    EXACT = "exact"
    """The subject holds the requested action on the requested resource."""

    RESOURCE_WILDCARD = "resource_wildcard"
    """The subject holds ``*`` on the requested resource."""

    GLOBAL_WILDCARD = "global_wildcard"
    """The subject holds ``*`` on the global ``*`` resource."""


@dataclass
class Resource:
    """
    A named resource and the subjects granted each of its actions.

    Grant collections are lists kept free of duplicates, so insertion
    order is preserved and a subject appears at most once per action.

    Attributes:
        name: Resource identifier, matched by exact equality.
        actions: Mapping of action name to granted subjects.
        description: Optional free-text description.

    Example:
        >>> resource = Resource.build("Admin", description="Admin console")
        >>> sorted(resource.actions)
        ['*', 'create', 'delete', 'read', 'update']
    """
    name: Any
    actions: dict[str, list[Subject]] = field(default_factory=dict)
    description: str | None = None

    @classmethod
    def build(
        cls,
        name: Any,
        actions: Iterable[str] | None = None,
        description: str | None = None,
    ) -> Resource:
        """Create a resource with an empty grant collection per action."""
        action_names = DEFAULT_ACTIONS if actions is None else actions
        return cls(
            name=name,
            actions={action: [] for action in action_names},
            description=description,
        )

    def has_action(self, action: str) -> bool:
        """Check if the resource defines an action."""
        try:
            return action in self.actions
        except TypeError:
            return False

    def subjects(self, action: str) -> list[Subject]:
        """Get a copy of the subjects granted an action, empty if undefined."""
        return list(self.actions.get(action, ()))

    def is_granted(self, subject: Subject, action: str) -> bool:
        return subject in self.actions.get(action, ())

    def grant_count(self) -> int:
        """Total number of (subject, action) grants on this resource."""
        return sum(len(subjects) for subjects in self.actions.values())

    def clear(self) -> None:
        """Empty every grant collection, keeping action names."""
        for subjects in self.actions.values():
            subjects.clear()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {
            "name": self.name,
            "actions": {
                action: list(subjects) for action, subjects in self.actions.items()
            },
        }
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class AuthorizationResult:
    """
    Result of an authorization check.

    Attributes:
        allowed: Whether the subject may perform the action.
        reason: Human-readable explanation of the decision.
        match: The resolution step that authorized the query, or None
            when the query was denied.
        metadata: Additional information about the decision.

    Example:
        >>> result = acl.check("jim", "Admin", "read")
        >>> if result:
        ...     print(result.match)
    """
    allowed: bool
    reason: str | None = None
    match: GrantMatch | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def allow(cls, match: GrantMatch, reason: str | None = None,
              metadata: dict[str, Any] | None = None) -> AuthorizationResult:
        """Create an allowed result."""
        return cls(
            allowed=True,
            reason=reason,
            match=match,
            metadata=metadata or {},
        )

    @classmethod
    def deny(cls, reason: str,
             metadata: dict[str, Any] | None = None) -> AuthorizationResult:
        """Create a denied result."""
        return cls(
            allowed=False,
            reason=reason,
            metadata=metadata or {},
        )

    def __bool__(self) -> bool:
        return self.allowed

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "allowed": self.allowed,
            "reason": self.reason,
            "match": self.match.value if self.match else None,
            "metadata": self.metadata,
        }
