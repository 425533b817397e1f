"""
Plugin entry point: trigger the job, follow it, report the result.
"""

import asyncio
from typing import Callable

from pydantic import ValidationError

from jenkins_plugin.core.config import Settings
from jenkins_plugin.core.exceptions import PluginError, PluginTimeoutError
from jenkins_plugin.core.logging import get_logger, setup_logging
from jenkins_plugin.services.jenkins import JenkinsClient
from jenkins_plugin.services.params import build_trigger_request
from jenkins_plugin.workflow.launcher import connect_with_retry, launch_build
from jenkins_plugin.workflow.observer import observe_build, write_stdout
from jenkins_plugin.workflow.reporter import EXIT_FAILURE, EXIT_OK, exit_code_for, report_result

logger = get_logger(__name__)


def create_client(settings: Settings) -> JenkinsClient:
    """Create a Jenkins client from plugin settings."""
    return JenkinsClient(
        settings.url,
        settings.username,
        settings.password,
        timeout=settings.request_timeout,
        verify_ssl=settings.verify_ssl,
        queue_poll_interval=settings.queue_poll_interval,
    )


async def run(
    settings: Settings,
    *,
    client: JenkinsClient | None = None,
    sink: Callable[[str], None] = write_stdout,
) -> int:
    """
    Trigger the configured job and block until it finishes.

    Returns:
        Process exit code

    Raises:
        PluginError: On any fatal condition
    """
    request = build_trigger_request(settings)

    logger.info("Step 1: Creating jenkins client")
    async with client or create_client(settings) as jenkins:
        version = await connect_with_retry(jenkins)
        logger.info(f"Jenkins client successfully created (Jenkins {version})")

        logger.info(f"Step 2: Triggering jenkins job: {request.job_name}")
        handle = await launch_build(jenkins, request)
        if handle is None:
            logger.info("Exiting as job is already running")
            return EXIT_OK

        state = await observe_build(
            jenkins,
            handle,
            timeout=settings.timeout_seconds,
            poll_interval=settings.poll_interval_seconds,
            sink=sink,
        )

    status = report_result(state)
    return exit_code_for(status, settings.fail_on_unsuccessful)


def main() -> int:
    """Load settings from the environment and run the plugin."""
    try:
        settings = Settings()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Error in parsing input variables of jenkins plugin: {e}")
        return EXIT_FAILURE

    setup_logging(settings.log_level)

    try:
        return asyncio.run(run(settings))
    except PluginTimeoutError as e:
        logger.error(f"Plugin timeout occurred: {e}")
        return EXIT_FAILURE
    except PluginError as e:
        logger.error(f"Jenkins plugin failed: {e}")
        return EXIT_FAILURE
