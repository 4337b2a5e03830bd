from __future__ import annotations

import json
from typing import Any


def _shots(durations: list[int]) -> list[dict[str, Any]]:
    kinds = ["talking", "screen", "broll", "text"]
    return [
        {
            "order": index + 1,
            "type": kinds[index % len(kinds)],
            "description": f"镜头 {index + 1}",
            "approximateSeconds": seconds,
        }
        for index, seconds in enumerate(durations)
    ]


def _topic(title: str, angle: str) -> dict[str, Any]:
    return {
        "title": title,
        "angle": angle,
        "script": {
            "hook": {"text": "一行命令, 剪完一整期视频", "focus": "结果前置"},
            "body": [
                {"text": "以前剪一期要三个小时", "emphasis": "强调时间对比"},
                {"text": "现在脚本自动切掉停顿和口误", "emphasis": "录屏展示"},
            ],
            "outro": {"text": "想要脚本的评论区见", "callToAction": "评论+关注"},
        },
        "shots": _shots([20, 120, 60]),
    }


PLAN_PAYLOAD: dict[str, Any] = {
    "project": {
        "name": "AI 自动剪辑脚本",
        "audience": "独立开发者",
        "pain": "剪视频太耗时间",
        "visibleResult": "剪辑前后时长对比",
        "aiRole": "自动识别停顿和废话并剪掉",
    },
    "platformGuide": {
        "name": "B站",
        "duration": "3-10分钟",
        "ratio": "16:9",
        "styleTips": ["结构清晰", "讲踩坑故事", "结尾小结"],
        "mustHave": ["项目名", "前后对比"],
    },
    "topics": [
        _topic("三小时变十分钟", "efficiency"),
        _topic("我用它剪了一个月", "experiment"),
        _topic("一个周末写出来的脚本", "story"),
        _topic("三步装好自动剪辑", "tutorial"),
    ],
}


class StubLLM:
    """Records prompts and replays a canned completion."""

    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content if content is not None else json.dumps(PLAN_PAYLOAD, ensure_ascii=False)
        self.error = error
        self.prompts: list[str] = []

    def complete(self, prompt: str, **kwargs: Any) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.content


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload, ensure_ascii=False)

    def json(self) -> Any:
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class RecordingSession:
    """Stands in for ``requests``: records every POST and returns a fixed response."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def completion(content: Any) -> FakeResponse:
    return FakeResponse(200, {"choices": [{"message": {"role": "assistant", "content": content}}]})
