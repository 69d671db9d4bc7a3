"""Link generation configuration entity."""

from dataclasses import dataclass
from datetime import timedelta

from linkbuilder.core.entities.directive import Directive, Policy, Scope


@dataclass
class LinkConfig:
    """Link generation configuration.

    Holds the application-wide defaults. ``default_policy`` and
    ``caching_enabled`` become the GLOBAL directive when the
    configuration is installed through an adapter.
    """

    enabled: bool = True
    default_policy: Policy = Policy.ON_DEMAND
    caching_enabled: bool = False

    # None stores cached link sets without automatic expiry
    default_ttl: timedelta | None = None
    key_prefix: str | None = None

    def __post_init__(self) -> None:
        """Validate TTL."""
        if self.default_ttl is not None and self.default_ttl <= timedelta(0):
            raise ValueError("default_ttl must be positive when set")

    def global_directive(self) -> Directive:
        """Return the GLOBAL directive described by this configuration."""
        return Directive(
            policy=self.default_policy,
            caching_enabled=self.caching_enabled,
            scope=Scope.GLOBAL,
        )
