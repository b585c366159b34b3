"""Push game snapshots to connected websocket clients."""

import asyncio
import logging
from contextlib import suppress
from typing import Optional

from backend.game_runner import GameRunner

logger = logging.getLogger("backend.broadcast")


def _handle_task_exception(task: asyncio.Task) -> None:
    """Log exceptions from the broadcast task."""
    if task.cancelled():
        logger.debug("Task %s was cancelled", task.get_name())
        return
    exc = task.exception()
    if exc is not None:
        logger.error(
            "Unhandled exception in task %s: %s",
            task.get_name(),
            exc,
            exc_info=(type(exc), exc, exc.__traceback__),
        )


async def broadcast_updates(runner: GameRunner) -> None:
    """Send each new snapshot to every client, once per frame.

    A snapshot is sent only when it changed since the last send, so an idle
    or finished game produces no traffic.
    """
    frame_interval = 1 / runner.engine.config.frame_rate
    last_sent: Optional[tuple] = None
    logger.info("broadcast_updates: Task started")

    try:
        while True:
            clients = runner.connected_clients
            if clients:
                state = await runner.get_state_async()
                key = (state.phase, state.frame, state.score)
                if key != last_sent:
                    last_sent = key
                    payload = runner.serialize_state(state)
                    disconnected = set()
                    for client in list(clients):
                        try:
                            await client.send_bytes(payload)
                        except Exception as e:
                            logger.warning(
                                "broadcast_updates: Error sending to client, marking for removal: %s", e
                            )
                            disconnected.add(client)
                    for client in disconnected:
                        runner.remove_client(client)

            await asyncio.sleep(frame_interval)
    except asyncio.CancelledError:
        logger.info("broadcast_updates: Task cancelled")
        raise
    finally:
        logger.info("broadcast_updates: Task ended")


def start_broadcast(runner: GameRunner) -> asyncio.Task:
    """Start the broadcast task on the running event loop."""
    task = asyncio.create_task(broadcast_updates(runner), name="broadcast")
    task.add_done_callback(_handle_task_exception)
    return task


async def stop_broadcast(task: Optional[asyncio.Task]) -> None:
    """Cancel the broadcast task and wait for it to finish."""
    if task is None:
        return
    task.cancel()
    with suppress(asyncio.CancelledError):
        await task
