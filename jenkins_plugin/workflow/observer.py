"""
Concurrent observation of a running build.

Two loops share one deadline: the status poller refreshes the build state
until it is terminal, the log streamer follows the console until Jenkins
reports no more text. Only the status poller writes the build state; the
log streamer uses the handle's identity alone.
"""

import asyncio
import codecs
import sys
from typing import Callable

from jenkins_plugin.core.exceptions import PluginTimeoutError
from jenkins_plugin.core.logging import get_logger
from jenkins_plugin.models.build import BuildHandle, BuildState
from jenkins_plugin.models.deadline import Deadline
from jenkins_plugin.services.jenkins import JenkinsClient

logger = get_logger(__name__)

# Depth passed to the build api/json endpoint
POLL_DEPTH = 1


def write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


async def poll_build_status(
    client: JenkinsClient,
    handle: BuildHandle,
    deadline: Deadline,
    poll_interval: float,
) -> BuildState:
    """
    Poll the build until it reaches a terminal result.

    Every iteration sleeps the full interval before polling, so a timeout
    may be noticed up to one interval late. Poll errors are not retried.

    Raises:
        PluginTimeoutError: If the deadline expires first
        BuildPollError: If a poll fails
    """
    while not handle.state.is_terminal:
        if deadline.expired:
            logger.error("Plugin timeout occurred while polling build status")
            raise PluginTimeoutError(f"Timed out waiting for build #{handle.number} to finish")

        await asyncio.sleep(poll_interval)
        state = await client.poll_status(handle, depth=POLL_DEPTH)
        logger.debug(f"Build #{handle.number} building={state.building} result={state.result}")

    return handle.state


async def stream_build_logs(
    client: JenkinsClient,
    handle: BuildHandle,
    deadline: Deadline,
    sink: Callable[[str], None] = write_stdout,
) -> int:
    """
    Stream console output until Jenkins reports there is no more text.

    Returns:
        Final console offset

    Raises:
        PluginTimeoutError: If the deadline expires first
        ConsoleFetchError: If a fetch fails
    """
    offset = 0
    has_more = True
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    while has_more:
        if deadline.expired:
            logger.error("Plugin timeout occurred while streaming build logs")
            raise PluginTimeoutError(f"Timed out streaming logs of build #{handle.number}")

        chunk = await client.fetch_console(handle, offset)
        text = decoder.decode(chunk.content)
        if text:
            sink(text)
        offset = chunk.next_offset
        has_more = chunk.has_more

    tail = decoder.decode(b"", final=True)
    if tail:
        sink(tail)
    return offset


async def observe_build(
    client: JenkinsClient,
    handle: BuildHandle,
    *,
    timeout: float,
    poll_interval: float,
    sink: Callable[[str], None] = write_stdout,
) -> BuildState:
    """
    Run the status poller and log streamer side by side.

    The deadline starts when this is called. The build state is returned
    only after both loops have finished; if either fails, the other is
    cancelled and the error propagates.

    Args:
        client: Connected Jenkins client
        handle: Build to observe
        timeout: Seconds until observation is abandoned
        poll_interval: Seconds between status polls
        sink: Receives console output in order
    """
    deadline = Deadline(timeout)
    tasks = [
        asyncio.create_task(
            poll_build_status(client, handle, deadline, poll_interval),
            name="status-poller",
        ),
        asyncio.create_task(
            stream_build_logs(client, handle, deadline, sink),
            name="log-streamer",
        ),
    ]

    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    return handle.state
