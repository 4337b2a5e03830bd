from __future__ import annotations

import json

import pytest

from contentplanner import cli
from contentplanner.tool import PlanContentTool
from stubs import StubLLM

ARGS = ["一个AI自动剪辑脚本", "--goal", "吸引独立开发者关注", "--audience", "独立开发者"]


@pytest.fixture
def stub_llm(monkeypatch, plan_payload):
    llm = StubLLM(json.dumps(plan_payload, ensure_ascii=False))
    monkeypatch.setattr(PlanContentTool, "from_settings", classmethod(lambda cls, settings: cls(llm)))
    return llm


def test_print_prompt_does_not_call_model(capsys, stub_llm):
    code = cli.main([*ARGS, "--platform", "kuaishou", "--print-prompt"])

    assert code == 0
    assert "平台: 快手" in capsys.readouterr().out
    assert stub_llm.prompts == []


def test_plan_is_printed_as_json(capsys, stub_llm, plan_payload):
    code = cli.main([*ARGS, "--platform", "bilibili"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == plan_payload
    assert len(stub_llm.prompts) == 1


def test_plan_is_written_to_output_file(tmp_path, stub_llm, plan_payload):
    target = tmp_path / "plans" / "plan.json"

    code = cli.main([*ARGS, "--output", str(target)])

    assert code == 0
    assert json.loads(target.read_text(encoding="utf-8")) == plan_payload


def test_classified_error_exits_with_code_one(capsys, stub_llm):
    code = cli.main(["短", "--goal", "吸引独立开发者关注", "--audience", "独立开发者"])

    assert code == 1
    assert "VALIDATION_ERROR" in capsys.readouterr().err
    assert stub_llm.prompts == []


def test_missing_credential_exits_with_code_one(capsys):
    code = cli.main(ARGS)

    assert code == 1
    assert "CONFIGURATION_ERROR" in capsys.readouterr().err


def test_unknown_platform_is_an_argument_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([*ARGS, "--platform", "weibo"])
    assert excinfo.value.code == 2


def test_broken_config_file_exits_with_code_one(tmp_path, capsys, stub_llm):
    path = tmp_path / "planner.yaml"
    path.write_text("model: [gpt-4.1\n", encoding="utf-8")

    code = cli.main([*ARGS, "--config", str(path)])

    assert code == 1
    assert "CONFIGURATION_ERROR" in capsys.readouterr().err


def test_log_level_is_case_insensitive(capsys, stub_llm):
    assert cli.main([*ARGS, "--log-level", "debug", "--print-prompt"]) == 0


def test_unknown_log_level_is_an_argument_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([*ARGS, "--log-level", "LOUD"])
    assert excinfo.value.code == 2
