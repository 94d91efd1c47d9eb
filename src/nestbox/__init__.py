"""Nestbox: a two-phase application container.

Modules register route functions and shared actions; the container runs
the route functions once, in load order, when it initializes.

Basic usage::

    from nestbox import Container, Module

    container = Container({"settings": settings})

    container.load_module(
        Module(
            load=lambda context: context.setdefault("users", UserStore()),
            routes=register_user_routes,
            actions={"user.get": get_user},
        )
    )

    container.init()
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "Container",
    "ContainerConfig",
    "ContractError",
    "LifecycleError",
    "Module",
    "ModuleSpec",
    "NestboxError",
    "StateError",
    "configure_logging",
    "describe_module",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Container": "nestbox.container",
    "ContainerConfig": "nestbox.config",
    "configure_logging": "nestbox.config",
    "Module": "nestbox.modules",
    "ModuleSpec": "nestbox.modules",
    "describe_module": "nestbox.modules",
    "NestboxError": "nestbox.errors",
    "ConfigurationError": "nestbox.errors",
    "LifecycleError": "nestbox.errors",
    "ArgumentError": "nestbox.errors",
    "StateError": "nestbox.errors",
    "ContractError": "nestbox.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nestbox`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
