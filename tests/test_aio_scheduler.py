import asyncio

import pytest

from settle.timing.aio_scheduler import AsyncioScheduler
from settle.utils.debounce import debounce


def test_burst_coalesces_on_running_loop():
    calls = []

    async def main():
        f = debounce(calls.append, 50)
        f(1)
        await asyncio.sleep(0.01)
        f(2)
        await asyncio.sleep(0.01)
        f(3)
        await asyncio.sleep(0.15)

    asyncio.run(main())
    assert calls == [3]


def test_spaced_calls_each_run():
    calls = []

    async def main():
        f = debounce(calls.append, 20)
        f("a")
        await asyncio.sleep(0.1)
        f("b")
        await asyncio.sleep(0.1)

    asyncio.run(main())
    assert calls == ["a", "b"]


def test_explicit_loop():
    loop = asyncio.new_event_loop()
    try:
        calls = []
        f = debounce(calls.append, 10, AsyncioScheduler(loop))
        f(1)
        f(2)
        loop.run_until_complete(asyncio.sleep(0.08))
        assert calls == [2]
    finally:
        loop.close()


def test_target_error_goes_to_loop_exception_handler():
    errors = []

    def boom():
        raise ValueError("late")

    async def main():
        asyncio.get_running_loop().set_exception_handler(lambda loop, ctx: errors.append(ctx["exception"]))
        f = debounce(boom, 10)
        f()
        await asyncio.sleep(0.08)

    asyncio.run(main())
    assert len(errors) == 1
    assert isinstance(errors[0], ValueError)


def test_no_running_loop_is_a_host_error():
    f = debounce(lambda: None, 10)
    with pytest.raises(RuntimeError):
        f()
