from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from contentplanner.errors import SchemaValidationError, ValidationError


class Platform(str, Enum):
    DOUYIN = "douyin"
    BILIBILI = "bilibili"
    XIAOHONGSHU = "xiaohongshu"
    YOUTUBE_SHORTS = "youtubeShorts"
    KUAISHOU = "kuaishou"


DEFAULT_PLATFORM = Platform.DOUYIN


class ShotType(str, Enum):
    SCREEN = "screen"
    TALKING = "talking"
    BROLL = "broll"
    TEXT = "text"


class TopicAngle(str, Enum):
    """Canonical topic angles requested from the model (not enforced by the schema)."""

    EFFICIENCY = "efficiency"
    EXPERIMENT = "experiment"
    STORY = "story"
    TUTORIAL = "tutorial"


class IdeaInput(BaseModel):
    """Creative brief accepted from the caller."""

    model_config = ConfigDict(frozen=True)

    platform: Platform = DEFAULT_PLATFORM
    idea: str = Field(min_length=5, description="Core idea of the project")
    goal: str = Field(min_length=3, description="What the content should achieve")
    audience: str = Field(min_length=2, description="Who the content is for")
    style: Optional[str] = Field(default=None, description="Preferred tone or style")


class _WireModel(BaseModel):
    # Field names are snake_case in Python and camelCase on the wire.
    model_config = ConfigDict(frozen=True, alias_generator=to_camel)


class ProjectCard(_WireModel):
    name: StrictStr
    audience: StrictStr
    pain: StrictStr
    visible_result: StrictStr
    ai_role: StrictStr


class PlatformGuide(_WireModel):
    name: StrictStr
    duration: StrictStr
    ratio: StrictStr
    style_tips: List[StrictStr]
    must_have: List[StrictStr]


class Hook(_WireModel):
    text: StrictStr
    focus: StrictStr


class StepPoint(_WireModel):
    text: StrictStr
    emphasis: StrictStr


class Outro(_WireModel):
    text: StrictStr
    call_to_action: StrictStr


class Script(_WireModel):
    hook: Hook
    body: List[StepPoint]
    outro: Outro


class Shot(_WireModel):
    order: StrictInt
    type: ShotType
    description: StrictStr
    approximate_seconds: Union[StrictInt, StrictFloat]


class Topic(_WireModel):
    title: StrictStr
    angle: StrictStr
    script: Script
    shots: List[Shot]


class Plan(_WireModel):
    """Content plan returned to the caller: project card, platform guide and topics."""

    project: ProjectCard
    platform_guide: PlatformGuide
    topics: List[Topic]

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def parse_idea_input(args: Mapping[str, Any]) -> IdeaInput:
    """Validate raw tool arguments into an :class:`IdeaInput`.

    ``None`` values are treated as absent so that a missing platform falls back
    to the default and a missing style stays unset.
    """
    payload = {key: value for key, value in args.items() if value is not None}
    try:
        return IdeaInput.model_validate(payload)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = format_error_path(error["loc"])
        raise ValidationError(f"Invalid {field}: {error['msg']}", field=field) from exc


def validate_plan(payload: Any) -> Plan:
    """Strictly validate a parsed model response; the whole document or nothing."""
    try:
        return Plan.model_validate(payload)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        path = format_error_path(error["loc"])
        raise SchemaValidationError(
            f"Plan does not match schema at {path}: {error['msg']}", path=path
        ) from exc


def format_error_path(loc: Sequence[Any]) -> str:
    """Render a pydantic error location as a dotted path, e.g. ``topics.0.shots``."""
    parts: list[str] = []
    for item in loc:
        # union members append their type tag (``int``/``float``) to the location
        if isinstance(item, str) and item in {"int", "float", "str"} and parts:
            break
        parts.append(str(item))
    return ".".join(parts) or "(root)"
