from __future__ import annotations

import json
import logging
from typing import Any

from contentplanner.errors import MalformedOutputError, SchemaValidationError

from .llm import LLMClient
from .model import IdeaInput, Plan, validate_plan
from .prompts import build_plan_prompt

logger = logging.getLogger(__name__)


class PlanEngine:
    """Calls the model once and accepts its answer only if it is a valid plan."""

    def __init__(self, llm: LLMClient) -> None:
        self.llm = llm

    def generate(self, idea: IdeaInput) -> Plan:
        return self.request_plan(build_plan_prompt(idea))

    def request_plan(self, prompt: str) -> Plan:
        raw = self.llm.complete(prompt)
        logger.debug("LLM raw response: %s", raw)
        payload = _parse_content(raw)
        try:
            return validate_plan(payload)
        except SchemaValidationError as exc:
            logger.error("Invalid plan payload at %s: %s", exc.path, exc)
            raise


def _parse_content(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Model content is not valid JSON: %s", exc)
        raise MalformedOutputError(f"模型返回内容不是合法 JSON: {exc}", content=raw) from exc
