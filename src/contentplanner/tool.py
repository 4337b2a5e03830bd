from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from contentplanner.config import PlannerSettings
from contentplanner.planner.engine import PlanEngine
from contentplanner.planner.llm import ChatCompletionLLM, LLMClient
from contentplanner.planner.model import Plan, parse_idea_input
from contentplanner.planner.review import review_plan

logger = logging.getLogger(__name__)

TOOL_NAME = "planContent"
TOOL_DESCRIPTION = (
    "为给定平台(抖音/B站/小红书/YouTube Shorts/快手)和创作想法, 生成一个高质量的内容工作流计划: "
    "项目卡片+平台指南+多条选题+每条的脚本与分镜。实现方式是通过精心设计的提示词调用大模型完成拆解, "
    "工具本身只做结构约束与结果校验, 以充分发挥大模型的理解与创造能力。"
)


def render_plan_text(plan: Plan) -> str:
    return json.dumps(plan.to_payload(), ensure_ascii=False, indent=2)


@dataclass(frozen=True)
class ToolResult:
    plan: Plan
    text: str


class PlanContentTool:
    """Validates a brief, asks the model for a plan and returns it with a text rendering."""

    name = TOOL_NAME
    description = TOOL_DESCRIPTION

    def __init__(self, llm: LLMClient) -> None:
        self.engine = PlanEngine(llm)

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> "PlanContentTool":
        return cls(ChatCompletionLLM(settings))

    def run(self, args: Mapping[str, Any]) -> ToolResult:
        idea = parse_idea_input(args)
        logger.info("Planning content for platform=%s", idea.platform.value)

        plan = self.engine.generate(idea)

        review = review_plan(plan, idea.platform)
        for finding in review.findings:
            logger.warning("Plan review: %s", finding)
        logger.info("Plan ready: %d topics", len(plan.topics))

        return ToolResult(plan=plan, text=render_plan_text(plan))
