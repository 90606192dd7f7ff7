"""
AssignmentScorer Domain Service

Combines skill match, spare capacity and task priority into a single score
and picks the best candidate for a task.
"""

from collections.abc import Sequence

from ...shared.base import ValueObject
from ..entities.engineer import Engineer
from ..entities.task import Task
from .skill_matcher import SkillMatcher
from .workload_tracker import DEFAULT_CAPACITY_CEILING

SKILL_WEIGHT = 0.6
WORKLOAD_WEIGHT = 0.3
PRIORITY_WEIGHT = 0.1
DEFAULT_MIN_SCORE = 0.4


class ScoreBreakdown(ValueObject):
    """Components of a candidate's score for one task."""

    skill_score: float
    workload_score: float
    priority_score: float
    total: float
    is_assignable: bool


class AssignmentScorer:
    """
    Scores engineers for tasks.

    total = 0.6 * skill + 0.3 * (1 - load / ceiling) + 0.1 * (weight * 0.1)
    where weight is 3/2/1 for High/Medium/Low. A candidate is assignable only
    when the total is strictly above the minimum score.
    """

    def __init__(
        self,
        capacity_ceiling: int = DEFAULT_CAPACITY_CEILING,
        min_score: float = DEFAULT_MIN_SCORE,
        skill_matcher: SkillMatcher | None = None,
    ):
        self.capacity_ceiling = capacity_ceiling
        self.min_score = min_score
        self.skill_matcher = skill_matcher or SkillMatcher()

    def score(self, task: Task, engineer: Engineer, current_load: int) -> ScoreBreakdown:
        skill = self.skill_matcher.score_match(task, engineer)
        workload = 1 - current_load / self.capacity_ceiling
        priority = task.priority.weight * 0.1
        total = (
            SKILL_WEIGHT * skill + WORKLOAD_WEIGHT * workload + PRIORITY_WEIGHT * priority
        )
        return ScoreBreakdown(
            skill_score=skill,
            workload_score=workload,
            priority_score=priority,
            total=total,
            is_assignable=total > self.min_score,
        )

    def select_best(
        self, task: Task, candidates: Sequence[tuple[Engineer, int]]
    ) -> tuple[Engineer, ScoreBreakdown] | None:
        """
        Pick the highest scoring candidate.

        Args:
            task: Task being assigned
            candidates: (engineer, current load) pairs in their stable order

        Returns:
            The best engineer and its score, or None when there are no
            candidates. Ties go to the earliest candidate. The caller checks
            ``is_assignable``.
        """
        if not candidates:
            return None
        scored = [(engineer, self.score(task, engineer, load)) for engineer, load in candidates]
        return max(scored, key=lambda pair: pair[1].total)
