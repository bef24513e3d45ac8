"""
Custom exceptions for accesslist.

This module defines the exception hierarchy raised by the access control
list. Mutating operations raise synchronously on invalid input; queries
never raise (see ``AccessControlList.allowed``).
"""

from __future__ import annotations

from typing import Any


class AccessListError(Exception):
    """
    Base exception for all accesslist errors.

    Attributes:
        message: Human-readable error description.
        details: Additional context about the error.

    Example:
        >>> try:
        ...     acl.grant("jim", "Admin", "read")
        ... except AccessListError as e:
        ...     logger.error(f"ACL error: {e}")
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{context}]"

    def to_dict(self) -> dict[str, Any]:
        """Describe the error as plain data, e.g. for a host's audit log."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            **self.details,
        }


class UnknownResource(AccessListError):
    """
    Raised when a grant or revoke names a resource that was never registered.

    The global wildcard resource ``*`` is always known and never triggers
    this error.

    Attributes:
        resource: The resource name that could not be found.
        known_resources: Registered resource names (for debugging).

    Example:
        >>> raise UnknownResource("unknown-resource")
    """

    def __init__(
        self,
        resource: Any,
        known_resources: list[Any] | None = None,
    ) -> None:
        self.resource = resource
        self.known_resources = known_resources or []

        details = {
            "resource": resource,
            "known_resources": self.known_resources,
        }
        super().__init__(f"Unknown resource: {resource}", details)

    def __str__(self) -> str:
        return self.message


class UnknownAction(AccessListError):
    """
    Raised when a grant or revoke names an action the resource does not define.

    Attributes:
        action: The action name that could not be found.
        resource: The resource that was searched.
        available_actions: Actions defined on that resource.
    """

    def __init__(
        self,
        action: str,
        resource: Any = None,
        available_actions: list[str] | None = None,
    ) -> None:
        self.action = action
        self.resource = resource
        self.available_actions = available_actions or []

        details = {
            "action": action,
            "resource": resource,
            "available_actions": self.available_actions,
        }
        super().__init__(f"Unknown action: {action}", details)

    def __str__(self) -> str:
        return self.message


class AccessDenied(AccessListError):
    """
    Raised by ``AccessControlList.require`` when a subject lacks a grant.

    Attributes:
        subject: The subject that attempted the action.
        resource: The resource the action was attempted on.
        action: The action that was attempted.
        reason: Explanation of why access was denied.

    Example:
        >>> raise AccessDenied(
        ...     subject="jim",
        ...     resource="Admin",
        ...     action="delete",
        ...     reason="No matching grant",
        ... )
    """

    def __init__(
        self,
        subject: Any,
        resource: Any,
        action: str,
        reason: str | None = None,
    ) -> None:
        self.subject = subject
        self.resource = resource
        self.action = action
        self.reason = reason or "Access denied"

        message = (
            f"Access denied: subject '{subject}' cannot perform "
            f"'{action}' on resource '{resource}'. Reason: {self.reason}"
        )
        details = {
            "subject": subject,
            "resource": resource,
            "action": action,
            "reason": self.reason,
        }
        super().__init__(message, details)


class ConfigurationError(AccessListError):
    """
    Raised when the access control list is constructed with bad configuration.

    Attributes:
        config_key: The configuration key that has an issue.
        expected: What was expected for this configuration.
        received: What was actually provided.

    Example:
        >>> raise ConfigurationError(
        ...     config_key="verbose",
        ...     expected="a callable",
        ...     received="yes",
        ... )
    """

    def __init__(
        self,
        config_key: str,
        expected: str | None = None,
        received: Any = None,
    ) -> None:
        self.config_key = config_key
        self.expected = expected
        self.received = received

        message = f"Invalid access list option '{config_key}'"
        problem = []
        if expected:
            problem.append(f"expected {expected}")
        if received is not None:
            problem.append(f"received {received!r}")
        if problem:
            message += f" ({', '.join(problem)})"

        super().__init__(message, {"option": config_key})

    def __str__(self) -> str:
        return self.message
