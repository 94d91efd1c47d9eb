"""Nestbox application container.

Mutable during registration (``load_module``), finalized once by
``init()``. Modules contribute a load function, an optional route
registrar and optional shared actions; the container merges them and runs
the registrars in load order when it initializes.
"""

import logging
from typing import Any

from nestbox._internal.invoke import invoke
from nestbox._internal.types import RouteFn
from nestbox.config import ContainerConfig
from nestbox.errors import (
    ArgumentError,
    ConfigurationError,
    LifecycleError,
    StateError,
)
from nestbox.modules import ModuleSpec, describe_module

logger = logging.getLogger("nestbox.container")


class Container:
    """The application container.

    Usage::

        container = Container({"settings": settings})
        container.load_module(users)
        container.load_module(billing)
        container.init()

    Thread safety:
        None. A single owner loads every module and then calls ``init()``;
        the container holds no locks.
    """

    __slots__ = (
        "_initialized",
        # True while init() or ainit() is running registrars
        "_initializing",
        # id(module) -> module; holding the object keeps its id from being reused
        "_loaded",
        "_route_fns",
        "actions",
        "config",
        "context",
    )

    def __init__(
        self,
        context: Any = None,
        *,
        config: ContainerConfig | None = None,
    ) -> None:
        if context is None:
            msg = "Context is required when creating a new app"
            raise ConfigurationError(msg)
        self.context: Any = context
        self.config: ContainerConfig = config or ContainerConfig()
        self.actions: dict[str, Any] = {}
        self._route_fns: list[RouteFn] = []
        self._loaded: dict[int, object] = {}
        self._initialized: bool = False
        self._initializing: bool = False

    # -- Registration --

    def load_module(self, module: object = None) -> None:
        """Load *module* into the container.

        Registers its route function and actions, then calls
        ``module.load(context)``. Anything ``load`` raises propagates
        unchanged; its return value is ignored.

        Raises:
            LifecycleError: The container is initialized or initializing.
            ArgumentError: No module was given.
            StateError: This module object was loaded before.
            ContractError: The module does not have the required shape.
        """
        self._check_not_initialized()
        if module is None:
            msg = "Should provide a module to load"
            raise ArgumentError(msg)
        if self.is_loaded(module):
            msg = "This module is already loaded"
            raise StateError(msg)

        desc = describe_module(module)

        if desc.routes is not None:
            self._route_fns.append(desc.routes)
        self._merge_actions(desc)

        desc.load(self.context)

        self._loaded[id(module)] = module
        logger.debug(
            "[%s] loaded module %s (routes=%s, actions=%s)",
            self.config.name,
            desc.name,
            desc.routes is not None,
            list(desc.actions),
        )

    def _merge_actions(self, desc: ModuleSpec) -> None:
        for key, handler in desc.actions.items():
            if self.config.warn_on_action_override and key in self.actions:
                logger.warning(
                    "[%s] module %s overrides action %r",
                    self.config.name,
                    desc.name,
                    key,
                )
            self.actions[key] = handler

    # -- Initialization --

    def init(self) -> None:
        """Run every route registrar in load order, then mark initialized.

        Registrars are called with no arguments and their return values are
        ignored. If one raises, the exception propagates and the container
        stays uninitialized.

        Raises:
            LifecycleError: ``init()`` already completed or is running.
        """
        self._check_not_initialized()
        self._initializing = True
        try:
            for route_fn in self._route_fns:
                logger.debug("[%s] registering routes via %r", self.config.name, route_fn)
                route_fn()
            self._mark_initialized()
        finally:
            self._initializing = False

    async def ainit(self) -> None:
        """Async variant of ``init()`` for ``async def`` registrars.

        Each registrar is awaited (when it returns an awaitable) before the
        next one runs. While it is suspended, further ``init()``, ``ainit()``
        and ``load_module()`` calls raise ``LifecycleError``.

        Usage::

            async def routes():
                await router.load_manifest()

            container.load_module(Module(load, routes=routes))
            await container.ainit()
        """
        self._check_not_initialized()
        self._initializing = True
        try:
            for route_fn in self._route_fns:
                logger.debug("[%s] registering routes via %r", self.config.name, route_fn)
                await invoke(route_fn)
            self._mark_initialized()
        finally:
            self._initializing = False

    def _check_not_initialized(self) -> None:
        if self._initialized:
            msg = "App is already initialized"
            raise LifecycleError(msg)
        if self._initializing:
            msg = "App initialization is already in progress"
            raise LifecycleError(msg)

    def _mark_initialized(self) -> None:
        self._initialized = True
        logger.info(
            "[%s] initialized with %d module(s), %d route registrar(s), %d action(s)",
            self.config.name,
            len(self._loaded),
            len(self._route_fns),
            len(self.actions),
        )

    # -- Queries --

    @property
    def initialized(self) -> bool:
        """True once ``init()`` or ``ainit()`` has completed."""
        return self._initialized

    @property
    def modules(self) -> tuple[object, ...]:
        """Loaded module objects, in load order."""
        return tuple(self._loaded.values())

    def is_loaded(self, module: object) -> bool:
        """Whether this exact module object has been loaded."""
        return self._loaded.get(id(module)) is module

    def __repr__(self) -> str:
        return (
            f"<Container modules={len(self._loaded)} "
            f"actions={len(self.actions)} initialized={self._initialized}>"
        )
