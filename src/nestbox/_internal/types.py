"""Shared type aliases used across nestbox modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Module load function: receives the container's context
LoadFn: TypeAlias = Callable[[Any], Any]

# Route registrar: called once with no arguments during init
RouteFn: TypeAlias = Callable[[], Any]

# Action name -> handler (handlers are opaque to the container)
ActionMap: TypeAlias = Mapping[str, Any]
