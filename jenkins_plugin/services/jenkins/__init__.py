# Jenkins services - remote job server API
from .client import JenkinsClient

__all__ = ["JenkinsClient"]
