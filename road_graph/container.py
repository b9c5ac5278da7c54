"""Wiring for the road map application.

Ports are bound to factories. A binding is either shared, built once on
first resolution and reused, or transient, built on every resolution.
The registry is guarded by a re-entrant lock so that a factory may
resolve its own dependencies; the graph it hands out is not thread-safe.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass(slots=True)
class _Binding:
    factory: Callable[[], Any]
    shared: bool = True
    instance: Any = None
    built: bool = False

    def get(self) -> Any:
        if not self.shared:
            return self.factory()
        if not self.built:
            self.instance = self.factory()
            self.built = True
        return self.instance

    def forget(self) -> None:
        self.instance = None
        self.built = False


@dataclass
class Container:
    """Registry of port bindings for the road map application.

    Usage:
        container = Container.create_default()
        service = container.resolve(RoadMapService)

        container = Container()
        container.register(RouteSolverPort, FakeSolver, singleton=False)

    Attributes:
        config: Configuration used by the default bindings
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, dropping any earlier binding.

        An instance built by the earlier binding is never handed out again.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory=factory, shared=singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            return binding.get()

    def is_registered(self, port_type: type[Any]) -> bool:
        with self._lock:
            return port_type in self._bindings

    def clear_singletons(self) -> None:
        """Forget shared instances; the next resolution builds new ones."""
        with self._lock:
            for binding in self._bindings.values():
                binding.forget()

    def clear_all(self) -> None:
        with self._lock:
            self._bindings.clear()

    @classmethod
    def create_default(
        cls, config: Optional[AppConfig] = None, preload: bool = False
    ) -> Container:
        """Create a container with the default bindings.

        RoadGraphPort is bound to one RoadGraph shared by the RoadMapService.
        With ``preload`` the graph is filled from the configured road file
        when first resolved, otherwise it starts empty.

        Raises:
            GraphLoadError: On first resolution of the graph, if ``preload``
                is set and the road file cannot be read.
        """
        from .adapters.graph import CSVRoadRepository, DijkstraRouteSolver
        from .graph import RoadGraph
        from .ports.graph import GraphRepositoryPort, RoadGraphPort, RouteSolverPort
        from .services import RoadMapService

        config = config or get_config()
        container = cls(config=config)

        def create_graph() -> RoadGraph:
            graph = RoadGraph()
            if preload:
                container.resolve(GraphRepositoryPort).populate(graph)
            return graph

        def create_road_map_service() -> RoadMapService:
            return RoadMapService(
                graph=container.resolve(RoadGraphPort),
                route_solver=container.resolve(RouteSolverPort),
                repository=container.resolve(GraphRepositoryPort),
                distance_unit=config.routing.distance_unit,
            )

        container.register(RoadGraphPort, create_graph)
        container.register(GraphRepositoryPort, lambda: CSVRoadRepository(config.graph))
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(RoadMapService, create_road_map_service)
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Process-wide container with the default, empty-graph bindings."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    global _default_container
    with _container_lock:
        _default_container = None
