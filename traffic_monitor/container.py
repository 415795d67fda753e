"""Dependency injection container.

Wires the routing provider, the resolver and the host bindings from an
explicit AppConfig. Nothing is read from the environment until a
container is created.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Registry of lazily built traffic-monitor components.

    Bindings are keyed by type (a port Protocol or a concrete service).
    Shared bindings build once and are cached; the others build on
    every lookup.

    Usage:
        container = Container.create_default()
        resolver = container.resolve(RouteDelayResolver)

        # swap the provider for a fake
        container.register(RoutingProviderPort, lambda: FakeProvider())

    Attributes:
        config: Configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _builders: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _built: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _shared: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        key: type[Any],
        builder: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``key`` to a zero-argument builder.

        Rebinding replaces the builder and forgets any instance already
        built for ``key``, so a fake provider registered after
        create_default() takes effect on the next resolve.
        """
        with self._lock:
            self._builders[key] = builder
            self._built.pop(key, None)
            if singleton:
                self._shared.add(key)
            else:
                self._shared.discard(key)

    def resolve(self, key: type[Any]) -> Any:
        """Return the component bound to ``key``, building it if needed.

        Builder errors propagate unchanged; a GoogleRoutesAdapter with no
        API key raises ConfigurationError here.

        Raises:
            KeyError: If nothing is bound to ``key``.
        """
        with self._lock:
            builder = self._builders.get(key)
            if builder is None:
                raise KeyError(f"Type not registered: {key}")
            if key not in self._shared:
                return builder()
            if key not in self._built:
                self._built[key] = builder()
            return self._built[key]

    def is_registered(self, key: type[Any]) -> bool:
        return key in self._builders

    def clear_singletons(self) -> None:
        """Forget built instances; bindings stay."""
        with self._lock:
            self._built.clear()

    def clear_all(self) -> None:
        with self._lock:
            self._builders.clear()
            self._built.clear()
            self._shared.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings.

        The routing adapter is built lazily, so a missing API key only
        surfaces (as ConfigurationError) when something resolves it.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.host import TrafficTool, TrafficWorkflow, build_traffic_workflow
        from .adapters.routing import GoogleRoutesAdapter
        from .ports.routing import RoutingProviderPort
        from .services import RouteDelayResolver

        config = config or get_config()
        container = cls(config=config)

        container.register(
            RoutingProviderPort,
            lambda: GoogleRoutesAdapter(config=config.routes),
        )
        container.register(
            RouteDelayResolver,
            lambda: RouteDelayResolver(
                provider=container.resolve(RoutingProviderPort)
            ),
        )
        container.register(
            TrafficTool,
            lambda: TrafficTool(resolver=container.resolve(RouteDelayResolver)),
        )
        container.register(
            TrafficWorkflow,
            lambda: build_traffic_workflow(container.resolve(RouteDelayResolver)),
        )

        return container


_default: Optional[Container] = None
_default_lock = threading.Lock()


def get_container() -> Container:
    """Process-wide container built from get_config() on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Container.create_default()
        return _default


def reset_container() -> None:
    """Drop the process-wide container so the next call rebuilds it."""
    global _default
    with _default_lock:
        if _default is not None:
            _default.clear_all()
        _default = None
