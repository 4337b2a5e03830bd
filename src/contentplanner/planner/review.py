"""Advisory checks for content rules the prompt asks for but the schema cannot express.

Findings are informational: a plan that passed schema validation is never
rejected or altered here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .model import Plan, Platform, Topic, TopicAngle
from .platforms import platform_profile

MIN_TOPICS = 4


@dataclass(frozen=True)
class PlanReview:
    findings: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.findings


def review_plan(plan: Plan, platform: Platform | str) -> PlanReview:
    profile = platform_profile(platform)
    findings: list[str] = []

    if len(plan.topics) < MIN_TOPICS:
        findings.append(f"expected at least {MIN_TOPICS} topics, got {len(plan.topics)}")

    angles = {topic.angle.strip().lower() for topic in plan.topics}
    missing = [angle.value for angle in TopicAngle if angle.value not in angles]
    if missing:
        findings.append(f"angles not covered: {', '.join(missing)}")

    for index, topic in enumerate(plan.topics):
        findings.extend(
            f"topics.{index} ({topic.title}): {issue}"
            for issue in _topic_issues(topic, profile.min_seconds, profile.max_seconds)
        )

    return PlanReview(findings=findings)


def _topic_issues(topic: Topic, min_seconds: int, max_seconds: int) -> list[str]:
    issues: list[str] = []
    if not topic.script.body:
        issues.append("script body is empty")
    if not topic.shots:
        issues.append("no shots")
        return issues

    orders = [shot.order for shot in topic.shots]
    if orders != list(range(1, len(orders) + 1)):
        issues.append(f"shot order is not 1..{len(orders)}: {orders}")

    total = sum(shot.approximate_seconds for shot in topic.shots)
    if not min_seconds <= total <= max_seconds:
        issues.append(f"total duration {total:g}s outside {min_seconds}-{max_seconds}s")
    return issues
