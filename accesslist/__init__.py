"""
accesslist: an embeddable in-memory access control list.

Records which subjects may perform which actions on which named resources
and answers point-in-time authorization queries.

Basic Usage:
    >>> from accesslist import create_access_control_list
    >>>
    >>> acl = create_access_control_list()
    >>> acl.add_resource("Admin", description="Administration console")
    >>> acl.add_resource("Reports", actions=["view", "export"])
    >>>
    >>> acl.grant("jim", "Admin", "read")
    >>> acl.allowed("jim", "Admin", "read")
    True
    >>> acl.allowed("jim", "Admin", "update")
    False
    >>>
    >>> # Everything, everywhere
    >>> acl.grant("root", "*", "*")
    >>> acl.allowed("root", "anything", "at-all")
    True
"""

__version__ = "0.1.0"

from accesslist.acl import AccessControlList, create_access_control_list
from accesslist.config import AccessListConfig
from accesslist.exceptions import (
    AccessDenied,
    AccessListError,
    ConfigurationError,
    UnknownAction,
    UnknownResource,
)
from accesslist.types import (
    DEFAULT_ACTIONS,
    WILDCARD,
    AuthorizationResult,
    GrantMatch,
    Resource,
)

__all__ = [
    # Version
    "__version__",
    # Main class
    "AccessControlList",
    "create_access_control_list",
    "AccessListConfig",
    # Types
    "Resource",
    "AuthorizationResult",
    "GrantMatch",
    "WILDCARD",
    "DEFAULT_ACTIONS",
    # Exceptions
    "AccessListError",
    "UnknownResource",
    "UnknownAction",
    "AccessDenied",
    "ConfigurationError",
]
