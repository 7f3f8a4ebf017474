from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[/(),]")


@dataclass(frozen=True)
class SkillDictionary:
    version: str
    terms: tuple[str, ...]


DEFAULT_SKILL_TERMS: tuple[str, ...] = (
    # Languages
    "javascript",
    "python",
    "java",
    "c#",
    "c++",
    "php",
    "sql",
    "html",
    "css",
    "typescript",
    # Frameworks & libraries
    "react",
    "node.js",
    "express.js",
    "angular",
    "vue.js",
    "django",
    "flask",
    "spring",
    ".net",
    "laravel",
    "jest",
    "tailwind css",
    "bootstrap",
    "jquery",
    "d3.js",
    "chart.js",
    # Databases
    "mysql",
    "mongodb",
    "firebase",
    "postgresql",
    "ms sql",
    # Tools & platforms
    "git",
    "github",
    "docker",
    "figma",
    "vs code",
    "heroku",
    "aws",
    "azure",
    "google cloud",
    # Soft skills & methods
    "agile",
    "scrum",
    "teamwork",
    "communication",
    "problem-solving",
    "creative thinking",
    "time management",
    "leadership",
    "data analysis",
    "machine learning",
)

DEFAULT_SKILL_DICTIONARY = SkillDictionary(version="builtin-1", terms=DEFAULT_SKILL_TERMS)


def _clean_terms(raw_terms: list) -> tuple[str, ...]:
    terms: list[str] = []
    seen: set[str] = set()
    for item in raw_terms:
        term = str(item or "").strip().lower()
        if term and term not in seen:
            seen.add(term)
            terms.append(term)
    return tuple(terms)


def load_skill_dictionary(path: str | Path | None = None) -> SkillDictionary:
    """Load the CV keyword dictionary.

    Without a path the built-in dictionary is returned. A JSON file may hold
    either a plain list of terms or ``{"version": "...", "skills": [...]}``.
    """

    if not path:
        return DEFAULT_SKILL_DICTIONARY

    dictionary_path = Path(path)
    if not dictionary_path.exists():
        raise RuntimeError(f"Skill dictionary not found: {dictionary_path}")

    raw = json.loads(dictionary_path.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        version, raw_terms = dictionary_path.stem, raw
    elif isinstance(raw, dict):
        version = str(raw.get("version") or dictionary_path.stem)
        raw_terms = raw.get("skills") or []
    else:
        raise RuntimeError(f"Skill dictionary has unsupported shape: {dictionary_path}")

    terms = _clean_terms(list(raw_terms))
    if not terms:
        raise RuntimeError(f"Skill dictionary is empty: {dictionary_path}")

    logger.info("skill_dictionary.load version=%s terms=%d", version, len(terms))
    return SkillDictionary(version=version, terms=terms)


def extract_skills(dictionary: SkillDictionary, text: str) -> list[str]:
    if not text or not text.strip():
        return []
    cleaned = _SEPARATOR_RE.sub(" ", text.lower())
    return [term for term in dictionary.terms if term in cleaned]
