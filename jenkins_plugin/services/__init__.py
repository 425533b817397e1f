# Services - Jenkins API integration and parameter resolution
from .jenkins import JenkinsClient
from .params import build_trigger_request, resolve_trigger_parameters

__all__ = ["JenkinsClient", "build_trigger_request", "resolve_trigger_parameters"]
