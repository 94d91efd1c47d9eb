"""Invoke helper: call sync or async registrars uniformly.

Route registrars can be ``def`` or ``async def``. ``Container.ainit()``
calls them through this helper so the sync/async check lives in exactly
one place.
"""

import inspect

from nestbox._internal.types import RouteFn


async def invoke(route_fn: RouteFn) -> None:
    """Call *route_fn* with no arguments, awaiting its result if awaitable.

    The result itself is discarded.
    """
    result = route_fn()
    if inspect.isawaitable(result):
        await result
