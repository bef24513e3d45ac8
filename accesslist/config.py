"""
Configuration for the access control list.

The only recognized option is ``verbose``: a diagnostic callback that
receives a one-line message whenever the list is mutated. Its return
value is ignored and leaving it unset has no effect on behavior.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from accesslist.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VerboseCallback = Callable[[str], Any]


def _noop(message: str) -> None:
    return None


@dataclass(frozen=True)
class AccessListConfig:
    """
    Configuration for an AccessControlList.

    Attributes:
        verbose: Callback invoked with a diagnostic message on each
            mutating operation. Defaults to a no-op.

    Example:
        >>> config = AccessListConfig(verbose=print)
        >>> acl = create_access_control_list(config)
    """
    verbose: VerboseCallback = _noop

    def __post_init__(self) -> None:
        if not callable(self.verbose):
            raise ConfigurationError(
                config_key="verbose",
                expected="a callable accepting a message string",
                received=self.verbose,
            )

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> AccessListConfig:
        """
        Build a configuration from a plain mapping.

        Unrecognized keys are ignored. A ``verbose`` value of None is
        treated the same as leaving it out.
        """
        unknown = sorted(str(key) for key in options if key != "verbose")
        if unknown:
            logger.debug(f"Ignoring unrecognized config options: {unknown}")

        verbose = options.get("verbose")
        if verbose is None:
            return cls()
        return cls(verbose=verbose)

    @classmethod
    def coerce(
        cls,
        config: AccessListConfig | Mapping[str, Any] | None,
    ) -> AccessListConfig:
        """Accept None, a mapping, or an existing config."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            return cls.from_dict(config)
        raise ConfigurationError(
            config_key="config",
            expected="an AccessListConfig, a mapping, or None",
            received=type(config).__name__,
        )
