"""Directive scope resolution.

Directives can be declared globally, per handler group and per handler.
The DirectiveTable records them at startup and the ScopeResolver picks
the single directive that governs a response.
"""

from collections.abc import Iterable

from linkbuilder.core.entities.directive import Directive, Scope
from linkbuilder.core.exceptions import ConfigurationError, DuplicateDirectiveError


class ScopeResolver:
    """Selects the governing directive from an active set.

    The most specific scope wins: HANDLER over GROUP over GLOBAL.
    """

    def resolve(self, directives: Iterable[Directive]) -> Directive | None:
        """Pick the most specific directive.

        Args:
            directives: The directives active for a response.

        Returns:
            The governing directive, or None when none is active
            (link generation does not run).

        Raises:
            DuplicateDirectiveError: If two directives share the
                winning scope.
        """
        winner: Directive | None = None
        for directive in directives:
            if winner is None or directive.scope > winner.scope:
                winner = directive
            elif directive.scope == winner.scope:
                raise DuplicateDirectiveError(
                    f"More than one {directive.scope.name} directive is active"
                )
        return winner

    def is_shadowed(
        self,
        directive: Directive,
        directives: Iterable[Directive],
    ) -> bool:
        """Check if a more specific directive overrides ``directive``."""
        return any(other.is_more_specific_than(directive) for other in directives)


class DirectiveTable:
    """Startup-time registry of directives keyed by target.

    Each target (the application, a group, or a handler within a group)
    holds at most one directive. The table is read-only once frozen.
    """

    def __init__(self) -> None:
        self._global: Directive | None = None
        self._groups: dict[str, Directive] = {}
        self._handlers: dict[tuple[str | None, str], Directive] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further registrations."""
        self._frozen = True

    def set_global(self, directive: Directive) -> None:
        self._check(directive, Scope.GLOBAL)
        if self._global is not None:
            raise DuplicateDirectiveError("A global directive is already declared")
        self._global = directive

    def set_group(self, group: str, directive: Directive) -> None:
        self._check(directive, Scope.GROUP)
        if group in self._groups:
            raise DuplicateDirectiveError(
                f"Group {group!r} already has a directive"
            )
        self._groups[group] = directive

    def set_handler(
        self,
        group: str | None,
        handler: str,
        directive: Directive,
    ) -> None:
        self._check(directive, Scope.HANDLER)
        target = (group, handler)
        if target in self._handlers:
            raise DuplicateDirectiveError(
                f"Handler {handler!r} in group {group!r} already has a directive"
            )
        self._handlers[target] = directive

    def active_for(self, group: str | None, handler: str | None) -> list[Directive]:
        """Return the directives in effect for a handler.

        Args:
            group: The handler group name, if any.
            handler: The handler name, if any.

        Returns:
            The active directives, least specific first.
        """
        active: list[Directive] = []
        if self._global is not None:
            active.append(self._global)
        if group is not None and group in self._groups:
            active.append(self._groups[group])
        if handler is not None and (group, handler) in self._handlers:
            active.append(self._handlers[(group, handler)])
        return active

    def _check(self, directive: Directive, scope: Scope) -> None:
        if self._frozen:
            raise ConfigurationError("Directives cannot be declared after startup")
        if directive.scope != scope:
            raise ConfigurationError(
                f"Expected a {scope.name} directive, got {directive.scope.name}"
            )
