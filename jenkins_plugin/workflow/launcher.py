"""
Connect to Jenkins and start the requested build.
"""

from jenkins_plugin.core.exceptions import JenkinsConnectionError
from jenkins_plugin.core.logging import get_logger
from jenkins_plugin.models.build import BuildHandle
from jenkins_plugin.models.trigger import TriggerRequest
from jenkins_plugin.services.jenkins import JenkinsClient

logger = get_logger(__name__)


async def connect_with_retry(client: JenkinsClient) -> str:
    """
    Connect to Jenkins, retrying exactly once.

    Returns:
        Jenkins server version

    Raises:
        JenkinsConnectionError: If the retry fails as well
    """
    try:
        return await client.connect()
    except JenkinsConnectionError as e:
        logger.warning(f"Initial connection attempt failed ({e}) - retrying connection")

    try:
        return await client.connect()
    except JenkinsConnectionError as e:
        logger.error(
            "Error in creating jenkins client, please make sure jenkins server "
            "is running and credentials are valid"
        )
        raise JenkinsConnectionError("Jenkins client creation failed") from e


async def launch_build(client: JenkinsClient, request: TriggerRequest) -> BuildHandle | None:
    """
    Trigger the job and resolve its queue item into a build.

    Returns:
        Handle of the started build, or None if the job was already
        running and nothing was queued

    Raises:
        TriggerError: If the job could not be triggered
        QueueResolutionError: If the queued build could not be identified
    """
    logger.info(f"Triggering jenkins job: {request.job_name}")
    queue_id = await client.trigger(request.job_name, request.parameters)
    if queue_id == 0:
        return None

    logger.info(f"Job queued with id {queue_id}, waiting for build to start")
    handle = await client.resolve_build(request.job_name, queue_id)
    logger.info(f"Job build no - {handle.number}")
    return handle
