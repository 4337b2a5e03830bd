from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .model import Platform


@dataclass(frozen=True)
class PlatformProfile:
    label: str
    hint: str
    min_seconds: int
    max_seconds: int


PLATFORM_PROFILES: Dict[Platform, PlatformProfile] = {
    Platform.DOUYIN: PlatformProfile(
        label="抖音",
        hint="平台: 抖音。核心要求: 30-90秒竖屏, 前3秒给出强结果或强对比, 大字幕+快节奏, 强调效率提升、爽点和具体结果数字。",
        min_seconds=30,
        max_seconds=90,
    ),
    Platform.BILIBILI: PlatformProfile(
        label="B站",
        hint="平台: B站。核心要求: 3-10分钟为主, 可以适度讲原理和踩坑故事, 需要有清晰结构和小结, 标题和封面突出项目名和结果。",
        min_seconds=180,
        max_seconds=600,
    ),
    Platform.XIAOHONGSHU: PlatformProfile(
        label="小红书",
        hint="平台: 小红书。核心要求: 30-120秒竖屏短视频或图文, 标题偏「经验分享/避坑指南」, 强调步骤清单和可收藏性, 兼顾情绪表达。",
        min_seconds=30,
        max_seconds=120,
    ),
    Platform.YOUTUBE_SHORTS: PlatformProfile(
        label="YouTube Shorts",
        hint="平台: YouTube Shorts。核心要求: 15-60秒极短竖屏, 1秒内给出视觉冲击或强信息, 结构极简, 只讲一个记忆点, 可以考虑中英文。",
        min_seconds=15,
        max_seconds=60,
    ),
    Platform.KUAISHOU: PlatformProfile(
        label="快手",
        hint="平台: 快手。核心要求: 30-90秒竖屏, 语言口语化接地气, 多用真实场景录屏+人像, 强故事感, 少堆术语。",
        min_seconds=30,
        max_seconds=90,
    ),
}

FALLBACK_PLATFORM = Platform.KUAISHOU


def platform_profile(platform: Platform | str) -> PlatformProfile:
    """Return the profile for ``platform``; unknown tags get the kuaishou profile."""
    return PLATFORM_PROFILES.get(platform, PLATFORM_PROFILES[FALLBACK_PLATFORM])


def platform_hint(platform: Platform | str) -> str:
    return platform_profile(platform).hint
