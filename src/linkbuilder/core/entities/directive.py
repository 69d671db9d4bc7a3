"""Link policy and directive entities.

A directive says whether links are generated for a response and whether
the generated links may be cached. Directives are declared at three
levels of specificity; the most specific one present governs.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Policy(Enum):
    """Rule governing whether links are computed for a response.

    ALWAYS: Links are computed unconditionally.
    ON_DEMAND: Links are computed only when the client asks for them
        through the Accept header.
    NEVER: Links are never computed.
    """

    ALWAYS = "ALWAYS"
    ON_DEMAND = "ON_DEMAND"
    NEVER = "NEVER"


class Scope(IntEnum):
    """Granularity at which a directive is declared.

    Higher values are more specific: HANDLER beats GROUP beats GLOBAL.
    """

    GLOBAL = 0
    GROUP = 1
    HANDLER = 2


@dataclass(frozen=True)
class Directive:
    """Link generation directive attached to a handler or handler group.

    Attributes:
        policy: When links are computed.
        caching_enabled: Whether generated links go through the link cache.
        scope: Specificity level the directive was declared at.
    """

    policy: Policy = Policy.ON_DEMAND
    caching_enabled: bool = False
    scope: Scope = Scope.GLOBAL

    def is_more_specific_than(self, other: "Directive") -> bool:
        """Check if this directive strictly overrides another."""
        return self.scope > other.scope
