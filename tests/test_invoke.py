"""Tests for nestbox._internal.invoke: sync/async call helper."""

import pytest

from nestbox._internal.invoke import invoke


@pytest.mark.anyio
async def test_sync_callable() -> None:
    called: list[str] = []
    await invoke(lambda: called.append("sync"))
    assert called == ["sync"]


@pytest.mark.anyio
async def test_async_callable_is_awaited() -> None:
    called: list[str] = []

    async def routes() -> None:
        called.append("async")

    await invoke(routes)
    assert called == ["async"]


@pytest.mark.anyio
async def test_result_is_discarded() -> None:
    async def routes() -> str:
        return "ignored"

    assert await invoke(routes) is None
