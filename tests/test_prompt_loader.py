"""Tests for PromptLoader."""

import pytest

from obstetric_tools.decision_support import CRITERIA_GROUPS
from obstetric_tools.reasoning.prompt_loader import PromptLoader


@pytest.fixture
def prompts_dir(tmp_path):
    (tmp_path / "general").mkdir()
    (tmp_path / "general" / "greet.txt").write_text("Hello {name}, items: {items}", encoding="utf-8")
    return tmp_path


def test_load_substitutes_variables(prompts_dir):
    loader = PromptLoader(prompts_dir)

    result = loader.load("general/greet.txt", {"name": "Dr. A", "items": ["x"]})

    assert result.startswith("Hello Dr. A, items: [")
    assert '"x"' in result


def test_load_without_variables_returns_raw(prompts_dir):
    assert PromptLoader(prompts_dir).load("general/greet.txt") == "Hello {name}, items: {items}"


def test_prompt_variables(prompts_dir):
    assert PromptLoader(prompts_dir).get_prompt_variables("general/greet.txt") == ["name", "items"]


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        PromptLoader(tmp_path / "missing")


def test_missing_prompt_raises(prompts_dir):
    with pytest.raises(FileNotFoundError):
        PromptLoader(prompts_dir).load("general/nope.txt")


def test_path_traversal_blocked(prompts_dir):
    with pytest.raises(ValueError):
        PromptLoader(prompts_dir).load("../outside.txt")


def test_bundled_case_summary_prompt_variables():
    variables = PromptLoader().get_prompt_variables("ectopic/case_summary.txt")

    assert variables == [group.value for group in CRITERIA_GROUPS]
