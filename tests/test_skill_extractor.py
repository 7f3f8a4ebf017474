from __future__ import annotations

import json

import pytest

from career_platform.services.skill_extractor import (
    DEFAULT_SKILL_DICTIONARY,
    SkillDictionary,
    extract_skills,
    load_skill_dictionary,
)


def test_extract_skills_in_dictionary_order() -> None:
    text = "Built dashboards with React (hooks) and Node.js/Express.js; deployed on AWS. Strong teamwork."
    found = extract_skills(DEFAULT_SKILL_DICTIONARY, text)
    assert found == ["react", "node.js", "express.js", "aws", "teamwork"]


def test_extract_skills_blank_text() -> None:
    assert extract_skills(DEFAULT_SKILL_DICTIONARY, "") == []
    assert extract_skills(DEFAULT_SKILL_DICTIONARY, "   ") == []


def test_custom_dictionary_is_used() -> None:
    dictionary = SkillDictionary(version="test", terms=("kotlin", "swift"))
    assert extract_skills(dictionary, "Kotlin and Python") == ["kotlin"]


def test_load_skill_dictionary_default() -> None:
    assert load_skill_dictionary(None) is DEFAULT_SKILL_DICTIONARY


def test_load_skill_dictionary_from_json(tmp_path) -> None:
    path = tmp_path / "skills.json"
    path.write_text(json.dumps({"version": "2024-06", "skills": ["Rust", " go ", "rust", ""]}), encoding="utf-8")
    dictionary = load_skill_dictionary(path)
    assert dictionary.version == "2024-06"
    assert dictionary.terms == ("rust", "go")


def test_load_skill_dictionary_plain_list(tmp_path) -> None:
    path = tmp_path / "extra_skills.json"
    path.write_text(json.dumps(["Terraform"]), encoding="utf-8")
    dictionary = load_skill_dictionary(path)
    assert dictionary.version == "extra_skills"
    assert dictionary.terms == ("terraform",)


def test_load_skill_dictionary_missing_file(tmp_path) -> None:
    with pytest.raises(RuntimeError):
        load_skill_dictionary(tmp_path / "missing.json")
