"""
Trigger parameter resolution.
"""

import json

from jenkins_plugin.core.config import Settings
from jenkins_plugin.core.logging import get_logger
from jenkins_plugin.models.trigger import GitMaterial, TriggerRequest

logger = get_logger(__name__)


def parse_trigger_params(raw: str | None) -> dict[str, str]:
    """
    Decode the JSON object of trigger parameters.

    Malformed JSON or a non-object degrades to an empty mapping, and
    entries whose value is not a string are dropped; a bad parameter
    string never aborts the run.
    """
    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Ignoring malformed trigger params: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring trigger params: expected a JSON object")
        return {}

    skipped = [k for k, v in data.items() if not isinstance(v, str)]
    if skipped:
        logger.warning(f"Ignoring non-string trigger params: {', '.join(skipped)}")
    return {k: v for k, v in data.items() if isinstance(v, str)}


def resolve_trigger_parameters(raw_params: str | None, raw_git_material: str | None) -> dict[str, str]:
    """
    Resolve trigger parameters against the git material request.

    Keys and values are stripped of surrounding whitespace. A value equal to
    one of the GIT_MATERIAL_* tokens is replaced with the matching field of
    the first git material.

    Args:
        raw_params: JSON object of parameter name to value
        raw_git_material: Delimited git material request string

    Returns:
        Parameter name to resolved value
    """
    params = parse_trigger_params(raw_params)

    material = GitMaterial.parse(raw_git_material)
    placeholders = material.placeholders() if material else {}
    if raw_git_material and material is None:
        logger.info("Git material request is not in repo,path,branch,commit form; skipping substitution")

    resolved: dict[str, str] = {}
    for key, value in params.items():
        key = key.strip()
        value = value.strip()
        resolved[key] = placeholders.get(value, value)

    return resolved


def build_trigger_request(settings: Settings) -> TriggerRequest:
    """Create the trigger request for the configured job."""
    return TriggerRequest(
        job_name=settings.job_name,
        parameters=resolve_trigger_parameters(
            settings.job_trigger_params,
            settings.git_material_request,
        ),
    )
