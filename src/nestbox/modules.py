"""Module shape: the record a module contributes to a container.

A module has one required field and two optional ones:

- ``load``: called once with the container's context.
- ``routes``: zero-argument registrar, called during ``init()``.
- ``actions``: mapping of action name to handler, merged into the
  container's shared actions.

Modules can be given as a ``Module`` record, as a plain mapping, or as any
object exposing those names as attributes (a Python module, a class
instance). ``describe_module`` reads whichever form it gets and checks the
shape before the container touches any of its state.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from nestbox._internal.types import ActionMap, LoadFn, RouteFn
from nestbox.errors import ContractError

_EMPTY_ACTIONS: ActionMap = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Module:
    """A module declared as a record.

    Usage::

        def load(context):
            context["db"] = connect()

        users = Module(load, routes=register_user_routes, actions={"user.get": get_user})
        container.load_module(users)
    """

    load: LoadFn
    routes: RouteFn | None = None
    actions: ActionMap | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class ModuleSpec:
    """Validated, normalised view of a module."""

    name: str
    load: LoadFn
    routes: RouteFn | None
    actions: ActionMap


def _field(obj: object, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _display_name(obj: object) -> str:
    name = _field(obj, "name")
    if isinstance(name, str) and name:
        return name
    module_name = getattr(obj, "__name__", None)
    if isinstance(module_name, str):
        return module_name
    return type(obj).__name__


def describe_module(obj: object) -> ModuleSpec:
    """Read and validate the fields of *obj*.

    Raises:
        ContractError: ``load`` is missing or not callable, ``routes`` is
            present but not callable, or ``actions`` is present but not a
            mapping.
    """
    load = _field(obj, "load")
    if not callable(load):
        msg = "A module must contain a .load() function"
        raise ContractError(msg)

    routes = _field(obj, "routes")
    if routes is not None and not callable(routes):
        msg = "Module's routes field should be a function"
        raise ContractError(msg)

    actions = _field(obj, "actions")
    if actions is None:
        actions = _EMPTY_ACTIONS
    elif not isinstance(actions, Mapping):
        msg = "Module's actions field should be a mapping"
        raise ContractError(msg)

    return ModuleSpec(
        name=_display_name(obj),
        load=load,
        routes=routes,
        actions=actions,
    )
