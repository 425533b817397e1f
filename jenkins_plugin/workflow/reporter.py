"""
Final build result reporting.
"""

from jenkins_plugin.core.logging import get_logger
from jenkins_plugin.models.build import BuildState, BuildStatus

logger = get_logger(__name__)

UNKNOWN_STATUS = "Unknown"

EXIT_OK = 0
EXIT_FAILURE = 1


def final_status(state: BuildState) -> str:
    """Final build status, or "Unknown" when Jenkins never reported one."""
    return state.result or UNKNOWN_STATUS


def report_result(state: BuildState) -> str:
    """Log the final status of the observed build and return it."""
    status = final_status(state)
    logger.info("Job execution completed")
    logger.info(f"Jenkins job build final status - {status}")
    return status


def exit_code_for(status: str, fail_on_unsuccessful: bool = False) -> int:
    """Map a final status to the process exit code."""
    if fail_on_unsuccessful and status != BuildStatus.SUCCESS:
        return EXIT_FAILURE
    return EXIT_OK
