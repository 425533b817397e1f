"""
Data models for the trigger request and git material placeholders.
"""

from dataclasses import dataclass, field

# Placeholder tokens a user may put in trigger parameter values
GIT_MATERIAL_REPO = "GIT_MATERIAL_REPO"
GIT_MATERIAL_CHECKOUT_PATH = "GIT_MATERIAL_CHECKOUT_PATH"
GIT_MATERIAL_BRANCH = "GIT_MATERIAL_BRANCH"
GIT_MATERIAL_COMMIT_HASH = "GIT_MATERIAL_COMMIT_HASH"

REPO_DELIMITER = "|"
FIELD_DELIMITER = ","


@dataclass(frozen=True)
class GitMaterial:
    """Source checkout details of a single git repository."""

    repo: str
    checkout_path: str
    branch: str
    commit_hash: str

    @classmethod
    def parse(cls, raw: str | None) -> "GitMaterial | None":
        """
        Parse a git material request string.

        The string has the form
        "<repo1>,<checkoutPath1>,<branch1>,<commit1>|<repo2>,...". Only the
        first repository is honored.

        Returns:
            GitMaterial, or None if the first entry does not have exactly
            four fields
        """
        first_repo = (raw or "").split(REPO_DELIMITER)[0]
        fields = first_repo.split(FIELD_DELIMITER)
        if len(fields) != 4:
            return None
        return cls(*fields)

    def placeholders(self) -> dict[str, str]:
        """Map each placeholder token to its value for this material."""
        return {
            GIT_MATERIAL_REPO: self.repo,
            GIT_MATERIAL_CHECKOUT_PATH: self.checkout_path,
            GIT_MATERIAL_BRANCH: self.branch,
            GIT_MATERIAL_COMMIT_HASH: self.commit_hash,
        }


@dataclass(frozen=True)
class TriggerRequest:
    """Job to trigger along with its resolved parameters."""

    job_name: str
    parameters: dict[str, str] = field(default_factory=dict)
