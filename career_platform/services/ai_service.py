# ai_service.py
from __future__ import annotations

from typing import Protocol


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


def build_roadmap_prompt(target_role: str, timeframe: str, current_skills: str | None) -> str:
    return f"""
Your goal is to create a detailed, personalized career roadmap.

**User Details:**
- **Current Skills:** {current_skills or "None listed"}
- **Target Role:** {target_role}
- **Timeframe:** {timeframe}

**Instructions:**
1. **MUST** create a plan divided into phases (e.g., Month 1, Phase 2).
2. **MUST** use clear, formatted markdown (use bold, lists, and headers).
3. For each phase, include **Specific Topics/Technologies**, **Simple Project Ideas**, and a **Go/No-Go Checkpoint**.
4. Include a suggested time point (e.g., "End of Month 3") for the user to **Start Applying for Internships/Jobs**.
5. The tone should be encouraging and professional.
""".strip()


def build_summary_prompt(skills: str | None, experience: str | None) -> str:
    return f"""
Write a concise professional summary (3-4 sentences, first person) for a CV.

**Skills:** {skills or "None listed"}
**Experience notes:** {experience or "None provided"}

Return only the summary text, without headings or quotes.
""".strip()


def build_chat_prompt(query: str, *, track: str | None = None, skills: list[str] | None = None) -> str:
    context = []
    if track:
        context.append(f"Career track: {track}")
    if skills:
        context.append(f"Known skills: {', '.join(skills)}")
    context_block = "\n".join(context) if context else "No profile details available."
    return f"""
You are CareerBot, a friendly career assistant for students and early-career developers.
Answer briefly and practically. If the question is unrelated to careers, learning or jobs,
politely steer back to those topics.

User context:
{context_block}

Question: {query}
""".strip()


def generate_roadmap(llm: TextGenerator, target_role: str, timeframe: str, current_skills: str | None) -> str:
    return llm.generate(build_roadmap_prompt(target_role, timeframe, current_skills))


def generate_summary(llm: TextGenerator, skills: str | None, experience: str | None) -> str:
    return llm.generate(build_summary_prompt(skills, experience)).strip()


def answer_chat(llm: TextGenerator, query: str, *, track: str | None = None, skills: list[str] | None = None) -> str:
    return llm.generate(build_chat_prompt(query, track=track, skills=skills))
