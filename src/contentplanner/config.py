from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from contentplanner.errors import ConfigurationError
from contentplanner.ssm import ParameterStore

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"

# settings field -> environment variable
_ENV_VARS = {
    "api_key": "OPENAI_API_KEY",
    "model": "OPENAI_MODEL",
    "base_url": "OPENAI_BASE_URL",
    "temperature": "OPENAI_TEMPERATURE",
    "request_timeout": "OPENAI_REQUEST_TIMEOUT",
    "api_key_parameter": "OPENAI_API_KEY_PARAMETER",
}


class PlannerSettings(BaseModel):
    """Call-independent configuration injected into the model client."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(default=None, repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    temperature: float = 0.7
    request_timeout: Optional[float] = 120.0
    api_key_parameter: Optional[str] = None

    @field_validator("request_timeout")
    @classmethod
    def _zero_means_unbounded(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            return None
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PlannerSettings":
        env = os.environ if environ is None else environ
        payload: dict[str, Any] = {}
        for field, var in _ENV_VARS.items():
            value = (env.get(var) or "").strip()
            if value:
                payload[field] = value
        return cls._validate(payload, source="environment")

    @classmethod
    def from_file(cls, path: Path, environ: Mapping[str, str] | None = None) -> "PlannerSettings":
        """Load settings from JSON/YAML, layered over the environment values."""
        text = path.read_text(encoding="utf-8")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            import yaml

            try:
                payload = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Config file {path} is neither JSON nor YAML: {exc}") from exc
        if not isinstance(payload, Mapping):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        base = cls.from_env(environ).model_dump()
        base.update(payload)
        return cls._validate(base, source=str(path))

    @classmethod
    def _validate(cls, payload: Mapping[str, Any], source: str) -> "PlannerSettings":
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            setting = ".".join(str(part) for part in error["loc"])
            raise ConfigurationError(
                f"Invalid setting '{setting}' from {source}: {error['msg']}", setting=setting
            ) from exc

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                f"{_ENV_VARS['api_key']} 未配置, 无法调用模型生成内容工作流计划",
                setting=_ENV_VARS["api_key"],
            )
        return self.api_key


def load_settings(
    config_path: Path | None = None, store: ParameterStore | None = None
) -> PlannerSettings:
    """Build settings for an entry point.

    When no credential is configured but ``api_key_parameter`` is (from the
    environment or the config file), the key is read from SSM.
    """
    settings = PlannerSettings.from_file(config_path) if config_path else PlannerSettings.from_env()
    if not settings.api_key and settings.api_key_parameter:
        store = store or ParameterStore()
        settings = settings.model_copy(update={"api_key": store.get(settings.api_key_parameter)})
        logger.info("Loaded %s from SSM parameter %s", _ENV_VARS["api_key"], settings.api_key_parameter)
    logger.debug("Loaded settings: model=%s base_url=%s", settings.model, settings.base_url)
    return settings
