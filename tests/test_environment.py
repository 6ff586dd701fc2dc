import asyncio

import pytest

from universe_i18n.environment import EnvironmentVariable


def test_get_outside_scope_returns_none():
    var = EnvironmentVariable("outside")
    assert var.get() is None


def test_nested_scopes_shadow_and_restore():
    var = EnvironmentVariable("nested")
    seen = []

    def outer():
        inner_value = var.with_value("B", var.get)
        seen.append(inner_value)
        seen.append(var.get())

    var.with_value("A", outer)
    assert seen == ["B", "A"]
    assert var.get() is None


def test_value_restored_when_callable_raises():
    var = EnvironmentVariable("raises")

    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        var.with_value("A", boom)
    assert var.get() is None


@pytest.mark.asyncio
async def test_value_survives_suspension():
    var = EnvironmentVariable("suspend")

    async def read_after_sleep():
        await asyncio.sleep(0.01)
        return var.get()

    assert await var.with_value("conn-1", read_after_sleep) == "conn-1"
    assert var.get() is None


@pytest.mark.asyncio
async def test_spawned_tasks_inherit_value():
    var = EnvironmentVariable("spawn")

    async def read_later():
        await asyncio.sleep(0)
        return var.get()

    async def spawn():
        return await asyncio.create_task(read_later())

    assert await var.with_value("conn-2", spawn) == "conn-2"


@pytest.mark.asyncio
async def test_concurrent_trees_do_not_leak():
    var = EnvironmentVariable("concurrent")

    async def observe():
        seen = []
        for _ in range(5):
            seen.append(var.get())
            await asyncio.sleep(0)
        return seen

    first, second = await asyncio.gather(
        var.with_value("A", observe),
        var.with_value("B", observe),
    )
    assert first == ["A"] * 5
    assert second == ["B"] * 5
    assert var.get() is None


@pytest.mark.asyncio
async def test_async_nested_scopes():
    var = EnvironmentVariable("async-nested")

    async def inner():
        await asyncio.sleep(0)
        return var.get()

    async def outer():
        inner_value = await var.with_value("B", inner)
        return inner_value, var.get()

    assert await var.with_value("A", outer) == ("B", "A")


@pytest.mark.asyncio
async def test_value_bound_when_plain_callable_returns_coroutine():
    var = EnvironmentVariable("lambda")

    async def read():
        await asyncio.sleep(0)
        return var.get()

    assert await var.with_value("A", lambda: read()) == "A"
    assert var.get() is None
