import asyncio

import pytest

from places_gateway.concurrency import cancel_on_disconnect
from places_gateway.exceptions import ClientDisconnectedError


class FakeRequest:
    """Replays ASGI messages, then blocks like a connected client."""

    def __init__(self, messages=()):
        self._messages = list(messages)
        self.url = type("URL", (), {"path": "/api/test"})()

    async def receive(self):
        if self._messages:
            return self._messages.pop(0)
        await asyncio.Event().wait()


@pytest.mark.asyncio
async def test_returns_result_while_connected():
    async def work():
        return 42

    request = FakeRequest([{"type": "http.request", "body": b"", "more_body": False}])

    assert await cancel_on_disconnect(request, work()) == 42


@pytest.mark.asyncio
async def test_propagates_errors():
    async def work():
        raise ValueError("upstream broke")

    with pytest.raises(ValueError, match="upstream broke"):
        await cancel_on_disconnect(FakeRequest(), work())


@pytest.mark.asyncio
async def test_disconnect_cancels_upstream_call():
    cancelled = asyncio.Event()

    async def slow_upstream():
        try:
            await asyncio.sleep(60)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    request = FakeRequest([{"type": "http.disconnect"}])

    with pytest.raises(ClientDisconnectedError) as exc_info:
        await cancel_on_disconnect(request, slow_upstream())

    assert cancelled.is_set()
    assert exc_info.value.status_code == 499


@pytest.mark.asyncio
async def test_outer_cancellation_reaches_upstream_call():
    cancelled = asyncio.Event()

    async def slow_upstream():
        try:
            await asyncio.sleep(60)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    task = asyncio.ensure_future(cancel_on_disconnect(FakeRequest(), slow_upstream()))
    # let the gateway task and the upstream call both start
    for _ in range(3):
        await asyncio.sleep(0)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert cancelled.is_set()
