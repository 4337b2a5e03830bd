from __future__ import annotations

import abc
import logging
from typing import Any, Optional

import requests

from contentplanner.config import PlannerSettings
from contentplanner.errors import EmptyResponseError, RequestTimeoutError, TransportError

from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class LLMClient(abc.ABC):
    """Abstract interface for the completion endpoint used by the planner."""

    @abc.abstractmethod
    def complete(self, prompt: str, **kwargs: Any) -> str:
        raise NotImplementedError


class ChatCompletionLLM(LLMClient):
    """Single-shot client for an OpenAI-compatible ``/chat/completions`` endpoint.

    Issues exactly one POST per call: no retries and no streaming. ``session`` may
    be any object with a ``requests``-style ``post`` method; by default the
    module-level :func:`requests.post` is used so concurrent calls share nothing.
    """

    def __init__(
        self,
        settings: PlannerSettings,
        session: Any = None,
        system_prompt: str | None = None,
    ) -> None:
        self.settings = settings
        self.session = session or requests
        self.system_prompt = system_prompt or SYSTEM_PROMPT

    @property
    def url(self) -> str:
        return f"{self.settings.base_url.rstrip('/')}/chat/completions"

    def complete(self, prompt: str, **kwargs: Any) -> str:
        api_key = self.settings.require_api_key()
        payload: dict[str, Any] = {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.settings.temperature,
        }
        payload.update(kwargs)
        timeout = self.settings.request_timeout

        logger.info("Requesting content plan from %s (model=%s)", self.url, payload["model"])
        try:
            response = self.session.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
                timeout=timeout,
            )
        except requests.Timeout as exc:
            raise RequestTimeoutError(
                f"调用模型超时 (>{timeout}s)", timeout=timeout
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(f"调用模型失败: {exc}") from exc

        if not 200 <= response.status_code < 300:
            body = response.text
            raise TransportError(
                f"调用模型失败 ({response.status_code}): {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError(
                "调用模型失败: 响应不是 JSON",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        content = _first_message_content(data)
        if not content:
            raise EmptyResponseError("模型返回内容为空")
        return content


def _first_message_content(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None
