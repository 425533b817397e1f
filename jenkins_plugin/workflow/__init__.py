# Workflow - launch, observe and report a single build
from .launcher import connect_with_retry, launch_build
from .observer import observe_build, poll_build_status, stream_build_logs
from .reporter import exit_code_for, final_status, report_result

__all__ = [
    "connect_with_retry",
    "launch_build",
    "observe_build",
    "poll_build_status",
    "stream_build_logs",
    "exit_code_for",
    "final_status",
    "report_result",
]
