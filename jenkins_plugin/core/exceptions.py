"""
Custom plugin exceptions.
"""


class PluginError(Exception):
    """Base exception for plugin errors. Every subclass is fatal to the run."""
    pass


class PluginTimeoutError(PluginError):
    """The plugin deadline elapsed before the build was fully observed."""
    pass


class JenkinsAPIError(PluginError):
    """Jenkins API call failed."""
    pass


class JenkinsConnectionError(JenkinsAPIError):
    """Could not establish a connection to the Jenkins server."""
    pass


class TriggerError(JenkinsAPIError):
    """Jenkins refused or failed to queue the job."""
    pass


class QueueResolutionError(JenkinsAPIError):
    """Queue item could not be resolved into a build."""
    pass


class BuildPollError(JenkinsAPIError):
    """Build status could not be refreshed."""
    pass


class ConsoleFetchError(JenkinsAPIError):
    """Console output could not be fetched."""
    pass
