from .assignment_scorer import AssignmentScorer, ScoreBreakdown
from .availability_calculator import AvailabilityCalculator
from .daily_optimizer import (
    AssignmentDecision,
    AssignmentFailure,
    AssignmentRunSummary,
    DailyAssignmentOptimizer,
    EngineerAssignmentSummary,
    RunOutcome,
)
from .parts_fulfillment import PartsFulfillmentService
from .skill_matcher import REQUIRED_SKILLS, SkillMatcher
from .task_lifecycle import StatusChangeResult, TaskLifecycleService
from .workload_tracker import WorkloadTracker

__all__ = [
    "AssignmentDecision",
    "AssignmentFailure",
    "AssignmentRunSummary",
    "AssignmentScorer",
    "AvailabilityCalculator",
    "DailyAssignmentOptimizer",
    "EngineerAssignmentSummary",
    "PartsFulfillmentService",
    "REQUIRED_SKILLS",
    "RunOutcome",
    "ScoreBreakdown",
    "SkillMatcher",
    "StatusChangeResult",
    "TaskLifecycleService",
    "WorkloadTracker",
]
