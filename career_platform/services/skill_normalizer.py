# skill_normalizer.py
from __future__ import annotations

from typing import Iterable


SkillSet = frozenset[str]


def normalize_skill_name(value: str) -> str:
    return value.strip().lower()


def skill_tokens(raw: str | None) -> list[str]:
    """Split a comma-separated skill string into normalized tokens.

    Tokens keep their declared order; repeats collapse to the first occurrence.
    Empty or missing input yields an empty list.
    """
    if not raw:
        return []
    tokens: list[str] = []
    seen: set[str] = set()
    for part in raw.split(","):
        token = normalize_skill_name(part)
        if token and token not in seen:
            seen.add(token)
            tokens.append(token)
    return tokens


def normalize_skills(raw: str | None) -> SkillSet:
    return frozenset(skill_tokens(raw))


def join_skills(tokens: Iterable[str]) -> str:
    return ", ".join(tokens)
