"""
Jenkins API client for triggering and following a single job build.
"""

from __future__ import annotations

import asyncio
from typing import Any
from urllib.parse import quote, urlparse

import httpx
from pydantic import ValidationError

from jenkins_plugin.core.exceptions import (
    BuildPollError,
    ConsoleFetchError,
    JenkinsAPIError,
    JenkinsConnectionError,
    QueueResolutionError,
    TriggerError,
)
from jenkins_plugin.core.logging import get_logger
from jenkins_plugin.models.build import BuildHandle, BuildState, ConsoleChunk
from .schemas import BuildInfo, Crumb, JobInfo, QueueItem

logger = get_logger(__name__)


def job_path(job_name: str) -> str:
    """Build the URL path of a job; "folder/name" maps to /job/folder/job/name."""
    parts = [quote(part, safe="") for part in job_name.strip("/").split("/") if part]
    return "".join(f"/job/{part}" for part in parts)


def build_path(handle: BuildHandle) -> str:
    return f"{job_path(handle.job_name)}/{handle.number}"


def queue_id_from_location(location: str) -> int:
    """Extract the queue item id from a ".../queue/item/<id>/" Location header."""
    segments = [s for s in urlparse(location).path.split("/") if s]
    if not segments:
        raise ValueError(f"empty location {location!r}")
    return int(segments[-1])


class JenkinsClient:
    """Async client for the Jenkins remote access API.

    Holds a single HTTP session so the CSRF crumb and its session cookie
    stay paired across requests. Use as an async context manager.
    """

    def __init__(
        self,
        base_url: str,
        username: str = "",
        password: str = "",
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        queue_poll_interval: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = (username, password) if username else None
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._queue_poll_interval = queue_poll_interval
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._crumb: dict[str, str] | None = None

    async def __aenter__(self) -> JenkinsClient:
        self._session()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _session(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                auth=self._auth,
                timeout=self._timeout,
                verify=self._verify_ssl,
                transport=self._transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        error_cls: type[JenkinsAPIError],
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self._session().request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Jenkins API error %s on %s %s", exc.response.status_code, method, path)
            raise error_cls(f"Jenkins API error {exc.response.status_code} on {path}") from exc
        except httpx.RequestError as exc:
            logger.error("Jenkins request %s %s failed: %s", method, path, exc)
            raise error_cls(f"Jenkins request to {path} failed: {exc}") from exc
        return response

    async def _get_json(
        self,
        path: str,
        error_cls: type[JenkinsAPIError],
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        response = await self._request("GET", path, error_cls, params=params)
        try:
            data = response.json()
        except ValueError as exc:
            raise error_cls(f"Jenkins returned invalid JSON for {path}") from exc
        if not isinstance(data, dict):
            raise error_cls(f"Jenkins returned unexpected payload for {path}")
        return data

    async def _crumb_headers(self) -> dict[str, str]:
        """Fetch the CSRF crumb once; servers without CSRF protection get no header."""
        if self._crumb is not None:
            return self._crumb

        self._crumb = {}
        try:
            response = await self._session().get("/crumbIssuer/api/json")
        except httpx.RequestError as exc:
            logger.debug(f"Crumb request failed: {exc}")
            return self._crumb

        if response.status_code == 200:
            try:
                crumb = Crumb.model_validate(response.json())
            except (ValueError, ValidationError):
                logger.debug("Crumb issuer returned an unexpected payload")
            else:
                self._crumb = {crumb.crumb_request_field: crumb.crumb}
        return self._crumb

    async def connect(self) -> str:
        """
        Verify the server is reachable and is a Jenkins instance.

        Returns:
            Jenkins version reported by the server

        Raises:
            JenkinsConnectionError: If the server can't be reached or
                doesn't identify as Jenkins
        """
        response = await self._request("GET", "/api/json", JenkinsConnectionError)
        version = response.headers.get("X-Jenkins")
        if not version:
            raise JenkinsConnectionError("Jenkins version not found in response headers")
        return version

    async def get_job(self, job_name: str) -> JobInfo:
        data = await self._get_json(f"{job_path(job_name)}/api/json", TriggerError)
        try:
            return JobInfo.model_validate(data)
        except ValidationError as exc:
            raise TriggerError(f"Unexpected job payload for {job_name}") from exc

    async def trigger(self, job_name: str, params: dict[str, str]) -> int:
        """
        Queue a build of the job.

        Args:
            job_name: Job name, folders separated by "/"
            params: Build parameters

        Returns:
            Queue item id, or 0 if the job is already waiting in the queue

        Raises:
            TriggerError: If the job can't be queued
        """
        job = await self.get_job(job_name)
        if not job.buildable:
            raise TriggerError(f"Job {job_name} is disabled")
        if job.in_queue:
            logger.warning(f"{job_name} is already running")
            return 0

        endpoint = "/buildWithParameters" if params or job.is_parameterized else "/build"
        headers = await self._crumb_headers()
        response = await self._request(
            "POST",
            f"{job_path(job_name)}{endpoint}",
            TriggerError,
            data=params,
            headers=headers,
        )

        if response.status_code not in (200, 201):
            raise TriggerError(f"Could not invoke job {job_name}: HTTP {response.status_code}")

        location = response.headers.get("Location")
        if not location:
            raise TriggerError("No Location header in trigger response")

        try:
            return queue_id_from_location(location)
        except ValueError as exc:
            raise TriggerError(f"Could not parse queue id from {location}") from exc

    async def get_queue_item(self, queue_id: int) -> QueueItem:
        data = await self._get_json(f"/queue/item/{queue_id}/api/json", QueueResolutionError)
        try:
            return QueueItem.model_validate(data)
        except ValidationError as exc:
            raise QueueResolutionError(f"Unexpected queue item payload for {queue_id}") from exc

    async def resolve_build(self, job_name: str, queue_id: int) -> BuildHandle:
        """
        Wait for a queue item to start and return the resulting build.

        Raises:
            QueueResolutionError: If the item is cancelled or the build
                can't be read
        """
        while True:
            item = await self.get_queue_item(queue_id)
            if item.cancelled:
                raise QueueResolutionError(f"Queue item {queue_id} was cancelled")
            if item.executable is not None:
                break
            logger.debug(f"Queue item {queue_id} waiting: {item.why}")
            await asyncio.sleep(self._queue_poll_interval)

        handle = BuildHandle(job_name=job_name, number=item.executable.number, queue_id=queue_id)
        try:
            await self.poll_status(handle)
        except BuildPollError as exc:
            raise QueueResolutionError(f"Could not read build #{handle.number} of {job_name}") from exc
        return handle

    async def poll_status(self, handle: BuildHandle, depth: int = 1) -> BuildState:
        """
        Refresh the build state in place.

        Raises:
            BuildPollError: If the build can't be read
        """
        data = await self._get_json(f"{build_path(handle)}/api/json", BuildPollError, params={"depth": depth})
        try:
            info = BuildInfo.model_validate(data)
        except ValidationError as exc:
            raise BuildPollError(f"Unexpected build payload for #{handle.number}") from exc

        state = handle.state
        state.number = info.number
        state.result = info.result or None
        state.building = info.building
        state.duration_ms = info.duration
        state.url = info.url
        return state

    async def fetch_console(self, handle: BuildHandle, start: int) -> ConsoleChunk:
        """
        Fetch console output appended since the given offset.

        Raises:
            ConsoleFetchError: If the log can't be read
        """
        response = await self._request(
            "GET",
            f"{build_path(handle)}/logText/progressiveText",
            ConsoleFetchError,
            params={"start": start},
        )
        try:
            next_offset = int(response.headers.get("X-Text-Size", start))
        except ValueError as exc:
            raise ConsoleFetchError("Invalid X-Text-Size header") from exc

        return ConsoleChunk(
            content=response.content,
            next_offset=next_offset,
            has_more=response.headers.get("X-More-Data", "").lower() == "true",
        )
