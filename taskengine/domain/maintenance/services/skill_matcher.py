"""
SkillMatcher Domain Service

Fuzzy matching of engineer skill tags against the skills an asset type needs.
"""

from ..entities.engineer import Engineer
from ..entities.task import Task

# Searched in order; the first keyword hit on the asset type wins
REQUIRED_SKILLS: tuple[tuple[tuple[str, ...], frozenset[str]], ...] = (
    (("pump", "pressure"), frozenset({"HVAC", "Mechanical", "Plumbing"})),
    (("boiler",), frozenset({"HVAC", "Mechanical", "Boiler Maintenance"})),
    (("generator",), frozenset({"Electrical", "Generator Maintenance"})),
    (("fire",), frozenset({"Fire Safety", "Electrical"})),
    (("water",), frozenset({"Plumbing", "Water Treatment"})),
    (("gas",), frozenset({"HVAC", "Boiler Maintenance", "Gas Safety"})),
)
DEFAULT_REQUIRED_SKILLS = frozenset({"Mechanical"})

NO_INFORMATION_SCORE = 0.5
NO_REQUIREMENTS_SCORE = 0.7


class SkillMatcher:
    """Domain service for matching engineers to tasks based on skills."""

    @staticmethod
    def required_skills(asset_type: str | None) -> frozenset[str]:
        """
        Skills needed to service an asset type.

        Args:
            asset_type: Free-text asset type; None is treated as empty

        Returns:
            Required skill names, Mechanical when nothing matches
        """
        lowered = (asset_type or "").lower()
        for keywords, skills in REQUIRED_SKILLS:
            if any(keyword in lowered for keyword in keywords):
                return skills
        return DEFAULT_REQUIRED_SKILLS

    @staticmethod
    def skill_matches(required: str, engineer_skill: str) -> bool:
        """Case-insensitive containment in either direction."""
        a, b = required.lower(), engineer_skill.lower()
        return a in b or b in a

    @staticmethod
    def score_match(task: Task, engineer: Engineer) -> float:
        """
        Fraction of the task's required skills the engineer covers.

        Returns:
            0.5 when the task has no asset or the engineer lists no skills,
            0.7 when nothing is required, otherwise matched / required
        """
        if task.asset is None or not engineer.skills:
            return NO_INFORMATION_SCORE

        required = SkillMatcher.required_skills(task.asset.asset_type)
        if not required:
            return NO_REQUIREMENTS_SCORE

        matched = sum(
            1
            for skill in required
            if any(SkillMatcher.skill_matches(skill, own) for own in engineer.skills)
        )
        return matched / len(required)
