from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_settings
from .errors import PlannerError
from .planner.model import Platform, parse_idea_input
from .planner.prompts import build_plan_prompt
from .tool import PlanContentTool

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a creative idea into a platform-aware content plan (topics, scripts, shot lists)."
    )
    parser.add_argument("idea", help="Core idea of the project")
    parser.add_argument("--goal", required=True, help="What the content should achieve")
    parser.add_argument("--audience", required=True, help="Who the content is for")
    parser.add_argument(
        "--platform",
        choices=[platform.value for platform in Platform],
        help="Target platform (default: douyin)",
    )
    parser.add_argument("--style", help="Preferred tone or style")
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional path to a settings JSON/YAML file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the plan JSON to this file instead of stdout",
    )
    parser.add_argument(
        "--print-prompt",
        action="store_true",
        help="Print the model instruction and exit without calling the model",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, stream=sys.stderr)

    brief = {
        "platform": args.platform,
        "idea": args.idea,
        "goal": args.goal,
        "audience": args.audience,
        "style": args.style,
    }
    try:
        if args.print_prompt:
            print(build_plan_prompt(parse_idea_input(brief)))
            return 0
        tool = PlanContentTool.from_settings(load_settings(args.config))
        result = tool.run(brief)
    except PlannerError as exc:
        print(f"{exc.code}: {exc}", file=sys.stderr)
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(result.text + "\n", encoding="utf-8")
        print(f"Wrote content plan to {args.output}")
    else:
        print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
