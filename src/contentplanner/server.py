"""MCP stdio server exposing the ``planContent`` tool."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from contentplanner.cli import LOG_LEVELS
from contentplanner.config import load_settings
from contentplanner.errors import PlannerError
from contentplanner.planner.model import Plan, Platform
from contentplanner.tool import PlanContentTool

logger = logging.getLogger(__name__)

SERVER_NAME = "idea-to-content-mcp"
SERVER_VERSION = "1.0.0"


async def plan_content(tool: PlanContentTool, args: dict[str, Any]) -> CallToolResult:
    """Run one tool call off the event loop.

    The result carries the plan's text rendering and the plan itself as
    structured content. Classified failures become a :class:`ToolError` whose
    message is the error's JSON form, so callers keep the ``code``.
    """
    try:
        result = await asyncio.to_thread(tool.run, args)
    except PlannerError as exc:
        logger.error("%s failed [%s]: %s", tool.name, exc.code, exc)
        raise ToolError(json.dumps(exc.to_dict(), ensure_ascii=False)) from exc
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        structuredContent=result.plan.to_payload(),
    )


def build_server(tool: PlanContentTool) -> FastMCP:
    server = FastMCP(SERVER_NAME)
    server._mcp_server.version = SERVER_VERSION

    @server.tool(name=tool.name, description=tool.description)
    async def plan_content_tool(
        idea: Annotated[str, Field(description="核心创作想法")],
        goal: Annotated[str, Field(description="内容目标")],
        audience: Annotated[str, Field(description="目标人群")],
        platform: Annotated[Optional[Platform], Field(description="目标平台, 默认 douyin")] = None,
        style: Annotated[Optional[str], Field(description="风格偏好")] = None,
    ) -> Annotated[CallToolResult, Plan]:
        args = {
            "platform": platform,
            "idea": idea,
            "goal": goal,
            "audience": audience,
            "style": style,
        }
        return await plan_content(tool, args)

    return server


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Serve the planContent tool over MCP stdio.")
    parser.add_argument("--config", type=Path, help="Optional settings file (JSON/YAML)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    # stdout carries the MCP framing
    logging.basicConfig(level=args.log_level, stream=sys.stderr)
    try:
        settings = load_settings(args.config)
    except PlannerError as exc:
        parser.exit(1, f"{exc.code}: {exc}\n")
    server = build_server(PlanContentTool.from_settings(settings))
    server.run()


if __name__ == "__main__":
    main()
