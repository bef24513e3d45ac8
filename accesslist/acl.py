"""
In-memory access control list.

This module provides the AccessControlList, which records which subjects
may perform which actions on which named resources and answers
point-in-time authorization queries.

Two names are reserved:

- The resource ``*`` is always registered and always defines the action
  ``*``. A subject granted ``*`` on ``*`` may do anything, anywhere.
- The action ``*`` on a specific resource means "any action on this
  resource". It never applies to other resources.

The list is single-writer. Hosts sharing one instance between threads must
serialize calls to add_resource, grant, revoke and clear_grants themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from accesslist.config import AccessListConfig
from accesslist.exceptions import AccessDenied, UnknownAction, UnknownResource
from accesslist.types import (
    WILDCARD,
    AuthorizationResult,
    GrantMatch,
    Resource,
    Subject,
)

logger = logging.getLogger(__name__)


class AccessControlList:
    """
    Access control list of resources, actions and granted subjects.

    Authorization is resolved in order, stopping at the first match:

    1. The subject holds the requested action on the requested resource.
    2. The subject holds ``*`` on the requested resource.
    3. The subject holds ``*`` on the global ``*`` resource.

    Anything else is denied, including queries against resources that
    were never registered.

    Example:
        >>> acl = AccessControlList()
        >>> acl.add_resource("Admin")
        >>> acl.grant("jim", "Admin", "read")
        >>> acl.allowed("jim", "Admin", "read")
        True
        >>> acl.allowed("jim", "Admin", "update")
        False
    """

    def __init__(self, config: AccessListConfig | Mapping[str, Any] | None = None) -> None:
        """
        Initialize the access control list.

        Args:
            config: An AccessListConfig, a plain mapping of options, or None.

        Raises:
            ConfigurationError: If the configuration is malformed.
        """
        self.config = AccessListConfig.coerce(config)
        self._resources: dict[Any, Resource] = {
            WILDCARD: Resource.build(WILDCARD, actions=[WILDCARD]),
        }

    @property
    def acl(self) -> Mapping[Any, Resource]:
        """Read-only view of the registered resources, keyed by name."""
        return MappingProxyType(self._resources)

    @property
    def resources(self) -> list[Any]:
        """Names of all known resources, including ``*``."""
        return list(self._resources)

    def __contains__(self, name: object) -> bool:
        return self.has_resource(name)

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources.values())

    def has_resource(self, name: object) -> bool:
        """Check if a resource name is known."""
        try:
            return name in self._resources
        except TypeError:
            return False

    def get_resource(self, name: Any) -> Resource:
        """
        Get a registered resource.

        Raises:
            UnknownResource: If the name is not registered.
        """
        if not self.has_resource(name):
            raise UnknownResource(name, known_resources=self.resources)
        return self._resources[name]

    def add_resource(
        self,
        name: Any,
        actions: Iterable[str] | None = None,
        description: str | None = None,
    ) -> None:
        """
        Register a resource.

        Without ``actions`` the resource gets create, read, update, delete
        and ``*``. A supplied action list replaces that default set.

        Registering a name that already exists redefines it: every grant
        it held is discarded. The ``*`` resource always keeps its ``*``
        action.

        Args:
            name: The resource name.
            actions: Optional action names replacing the default set. A
                single string is taken as one action name.
            description: Optional free-text description.
        """
        if isinstance(actions, str):
            actions = [actions]
        if actions is not None:
            actions = list(actions)
            if name == WILDCARD and WILDCARD not in actions:
                actions.append(WILDCARD)

        previous = self._resources.get(name)
        resource = Resource.build(name, actions=actions, description=description)
        self._resources[name] = resource

        if previous is not None:
            discarded = previous.grant_count()
            self._notify(
                f"Redefined resource '{name}' with actions {list(resource.actions)}"
                f" ({discarded} grant(s) discarded)"
            )
        else:
            self._notify(
                f"Added resource '{name}' with actions {list(resource.actions)}"
            )

    def clear_grants(self) -> None:
        """Revoke every grant, keeping resources, actions and descriptions."""
        for resource in self._resources.values():
            resource.clear()
        self._notify("Cleared all grants")

    def grant(self, subject: Subject, resource: Any, action: str) -> None:
        """
        Grant a subject an action on a resource.

        Granting the same triple twice has no further effect. The verbose
        callback runs after the grant is stored, so an exception it raises
        reaches the caller with the grant already in place.

        Raises:
            UnknownResource: If the resource is not registered.
            UnknownAction: If the resource does not define the action.
        """
        subjects = self._grant_collection(resource, action)
        if subject in subjects:
            logger.debug(f"'{subject}' already holds '{action}' on '{resource}'")
            return
        subjects.append(subject)
        self._notify(f"Granted '{action}' on '{resource}' to '{subject}'")

    def revoke(self, subject: Subject, resource: Any, action: str) -> None:
        """
        Revoke an action on a resource from a subject.

        Revoking a grant the subject never held is not an error. As with
        grant, the verbose callback runs after the change is applied.

        Raises:
            UnknownResource: If the resource is not registered.
            UnknownAction: If the resource does not define the action.
        """
        subjects = self._grant_collection(resource, action)
        if subject not in subjects:
            logger.debug(f"'{subject}' does not hold '{action}' on '{resource}'")
            return
        subjects.remove(subject)
        self._notify(f"Revoked '{action}' on '{resource}' from '{subject}'")

    def allowed(self, subject: Subject, resource: Any, action: str) -> bool:
        """Check whether a subject may perform an action on a resource."""
        return self.check(subject, resource, action).allowed

    def check(self, subject: Subject, resource: Any, action: str) -> AuthorizationResult:
        """
        Resolve an authorization query.

        Never raises and never mutates state.

        Args:
            subject: The subject requesting access.
            resource: The resource being accessed.
            action: The action being attempted.

        Returns:
            AuthorizationResult recording which step matched, if any.
        """
        try:
            result = self._resolve(subject, resource, action)
        except TypeError as e:
            # Unhashable names can never have been registered or granted.
            result = AuthorizationResult.deny(f"Unresolvable query: {e}")

        logger.debug(
            f"Check: subject={subject}, resource={resource}, action={action} "
            f"-> allowed={result.allowed}"
        )
        return result

    def require(self, subject: Subject, resource: Any, action: str) -> None:
        """
        Raise unless a subject may perform an action on a resource.

        Raises:
            AccessDenied: If no grant authorizes the query.
        """
        result = self.check(subject, resource, action)
        if not result.allowed:
            raise AccessDenied(subject, resource, action, reason=result.reason)

    def explain(self, subject: Subject, resource: Any, action: str) -> dict[str, Any]:
        """
        Explain an authorization decision.

        Returns:
            Dictionary describing the decision and the resource it was
            resolved against.
        """
        result = self.check(subject, resource, action)

        explanation: dict[str, Any] = {
            "decision": "ALLOW" if result.allowed else "DENY",
            "reason": result.reason,
            "match": result.match.value if result.match else None,
            "granted_on": result.metadata.get("granted_on"),
            "request": {
                "subject": subject,
                "resource": resource,
                "action": action,
            },
            "resource_registered": self.has_resource(resource),
        }

        if self.has_resource(resource):
            entry = self._resources[resource]
            explanation["available_actions"] = list(entry.actions)
            explanation["action_defined"] = entry.has_action(action)

        return explanation

    def grants_for(self, subject: Subject) -> dict[Any, list[str]]:
        """
        List every explicit grant held by a subject.

        Returns:
            Mapping of resource name to the actions granted on it.
            Resources where the subject holds nothing are omitted.
        """
        grants: dict[Any, list[str]] = {}
        for name, resource in self._resources.items():
            actions = [
                action
                for action, subjects in resource.actions.items()
                if subject in subjects
            ]
            if actions:
                grants[name] = actions
        return grants

    def to_dict(self) -> dict[Any, dict[str, Any]]:
        """Snapshot every resource as plain data, keyed by name."""
        return {name: resource.to_dict() for name, resource in self._resources.items()}

    def _resolve(self, subject: Subject, resource: Any, action: str) -> AuthorizationResult:
        entry = self._resources.get(resource)
        request = {"subject": subject, "resource": resource, "action": action}
        if entry is not None:
            if entry.is_granted(subject, action):
                return AuthorizationResult.allow(
                    GrantMatch.EXACT,
                    reason=f"'{subject}' holds '{action}' on '{resource}'",
                    metadata={**request, "granted_on": resource},
                )
            if entry.is_granted(subject, WILDCARD):
                return AuthorizationResult.allow(
                    GrantMatch.RESOURCE_WILDCARD,
                    reason=f"'{subject}' holds '{WILDCARD}' on '{resource}'",
                    metadata={**request, "granted_on": resource},
                )

        if self._resources[WILDCARD].is_granted(subject, WILDCARD):
            return AuthorizationResult.allow(
                GrantMatch.GLOBAL_WILDCARD,
                reason=f"'{subject}' holds '{WILDCARD}' on '{WILDCARD}'",
                metadata={**request, "granted_on": WILDCARD},
            )

        if entry is None:
            return AuthorizationResult.deny(
                f"Resource '{resource}' is not registered", metadata=request
            )
        return AuthorizationResult.deny(
            f"No grant for '{subject}' to '{action}' on '{resource}'",
            metadata=request,
        )

    def _grant_collection(self, resource: Any, action: str) -> list[Subject]:
        """Validate a (resource, action) pair and return its grant list."""
        if not self.has_resource(resource):
            raise UnknownResource(resource, known_resources=self.resources)

        entry = self._resources[resource]
        if not entry.has_action(action):
            raise UnknownAction(
                action,
                resource=resource,
                available_actions=list(entry.actions),
            )
        return entry.actions[action]

    def _notify(self, message: str) -> None:
        logger.debug(message)
        self.config.verbose(message)


def create_access_control_list(
    config: AccessListConfig | Mapping[str, Any] | None = None,
) -> AccessControlList:
    """
    Create an AccessControlList.

    Args:
        config: Options, e.g. ``{"verbose": callback}``. See AccessListConfig.

    Returns:
        A new, independent AccessControlList.

    Example:
        >>> acl = create_access_control_list({"verbose": print})
        >>> acl.add_resource("Admin")
        Added resource 'Admin' with actions ['create', 'read', 'update', 'delete', '*']
    """
    return AccessControlList(config)
