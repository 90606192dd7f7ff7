"""Engineer entity: a team member who may be given maintenance tasks."""

from pydantic import Field, field_validator

from ...shared.base import Entity

VIEWER_ROLE = "Viewer"
MANAGER_ROLES = frozenset({"Admin", "Access All", "Manager"})


class Engineer(Entity):
    """
    Team member record.

    Skills are free-text tags (e.g. "HVAC", "Gas Safe Boiler Maintenance");
    matching against required skills is fuzzy, so tags are kept as entered.
    """

    engineer_ref: str | None = None
    name: str = Field(min_length=1, max_length=120)
    email: str | None = None
    role: str = Field(min_length=1)
    skills: list[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def drop_blank_skills(cls, v):
        """A blank tag would substring-match every skill, so discard it."""
        if v is None:
            return []
        return [s.strip() for s in v if s and s.strip()]

    def is_valid(self) -> bool:
        return bool(self.name) and bool(self.role)

    @property
    def is_eligible(self) -> bool:
        """Viewers can never be assigned work."""
        return self.role != VIEWER_ROLE

    @property
    def is_manager(self) -> bool:
        return self.role in MANAGER_ROLES
