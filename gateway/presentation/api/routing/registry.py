"""Route registry - single source of truth for the routing table.

The registry is built once during startup composition from every Routable
handler group and never mutated afterwards, so concurrent requests read it
without locking. Registering the same method and path shape twice is a
construction-time error.

Usage:
    registry = RouteRegistry.from_routables(AppHandler(...), OrgHandler(...))
    dispatcher = Dispatcher(registry=registry, logger=get_logger())
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from gateway.presentation.api.routing.metadata import AuthLevel, Route, RouteMetadata


@runtime_checkable
class Routable(Protocol):
    """Handler group exposing its routes.

    Each resource handler (apps, orgs, spaces, ...) implements this protocol;
    the two collections must be disjoint.
    """

    def authenticated_routes(self) -> Sequence[Route]:
        """Routes that require an Identity."""
        ...

    def unauthenticated_routes(self) -> Sequence[Route]:
        """Routes served without an Identity."""
        ...


class DuplicateRouteError(ValueError):
    """Raised when a method+path pair is registered more than once."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"Route already registered: {method} {path}")
        self.method = method
        self.path = path


@dataclass(frozen=True, slots=True)
class RouteRegistry:
    """Immutable, ordered collection of registered routes.

    Attributes:
        entries: Registered routes in registration order (first match wins).
    """

    entries: tuple[RouteMetadata, ...]

    def __post_init__(self) -> None:
        seen: set[tuple[str, str]] = set()
        for entry in self.entries:
            if entry.key in seen:
                raise DuplicateRouteError(entry.route.method.value, entry.route.path)
            seen.add(entry.key)

    @classmethod
    def from_routables(cls, *routables: Routable) -> "RouteRegistry":
        """Build the registry from handler groups.

        Args:
            *routables: Handler groups, loaded in order.

        Returns:
            RouteRegistry with every route classified by its collection.

        Raises:
            DuplicateRouteError: If a method+path pair appears twice.
        """
        entries: list[RouteMetadata] = []
        for routable in routables:
            entries.extend(
                RouteMetadata(route=route, auth_level=AuthLevel.AUTHENTICATED)
                for route in routable.authenticated_routes()
            )
            entries.extend(
                RouteMetadata(route=route, auth_level=AuthLevel.UNAUTHENTICATED)
                for route in routable.unauthenticated_routes()
            )
        return cls(entries=tuple(entries))

    def authenticated(self) -> tuple[RouteMetadata, ...]:
        return tuple(e for e in self.entries if e.requires_identity)

    def unauthenticated(self) -> tuple[RouteMetadata, ...]:
        return tuple(e for e in self.entries if not e.requires_identity)

    def __iter__(self) -> Iterator[RouteMetadata]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
