import asyncio
import contextlib
import logging
from collections.abc import Awaitable
from typing import TypeVar

from starlette.requests import Request

from .exceptions import ClientDisconnectedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _wait_for_disconnect(request: Request) -> None:
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


async def cancel_on_disconnect(request: Request, awaitable: Awaitable[T]) -> T:
    """Await ``awaitable`` unless the inbound client disconnects first.

    The request body must already be consumed: the watcher reads from the
    ASGI receive channel until it sees ``http.disconnect``.

    Raises:
        ClientDisconnectedError: If the client closed the connection, in which
            case the pending upstream call is cancelled.
    """
    work = asyncio.ensure_future(awaitable)
    watcher = asyncio.ensure_future(_wait_for_disconnect(request))
    try:
        await asyncio.wait({work, watcher}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        await _cancel(work)
        await _cancel(watcher)
        raise

    if work.done():
        await _cancel(watcher)
        return work.result()

    await _cancel(work)
    logger.info(f"Client disconnected from {request.url.path}, upstream call cancelled")
    raise ClientDisconnectedError()


async def _cancel(task: asyncio.Future) -> None:
    if task.done():
        return
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task
