"""
Response schemas for the Jenkins JSON API.
"""

from pydantic import BaseModel, ConfigDict, Field


class _JenkinsModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class JobProperty(_JenkinsModel):
    parameter_definitions: list[dict] = Field(default_factory=list, alias="parameterDefinitions")


class JobInfo(_JenkinsModel):
    """Subset of /job/<name>/api/json."""

    in_queue: bool = Field(default=False, alias="inQueue")
    buildable: bool = True
    properties: list[JobProperty] = Field(default_factory=list, alias="property")

    @property
    def is_parameterized(self) -> bool:
        return any(prop.parameter_definitions for prop in self.properties)


class QueueExecutable(_JenkinsModel):
    number: int


class QueueItem(_JenkinsModel):
    """Subset of /queue/item/<id>/api/json."""

    cancelled: bool = False
    why: str | None = None
    executable: QueueExecutable | None = None


class BuildInfo(_JenkinsModel):
    """Subset of /job/<name>/<number>/api/json."""

    number: int
    result: str | None = None
    building: bool = False
    duration: int = 0
    url: str | None = None


class Crumb(_JenkinsModel):
    crumb: str
    crumb_request_field: str = Field(alias="crumbRequestField")
