from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Literal

from data_designer_prompt_intent.core import DEVELOPER_LIBRARY, AnalysisResult, PatternLibrary, analyze_prompt
from data_designer_prompt_intent.templates import CompileRequest, compile_prompt


class Enhancement(str, Enum):
    """Optional instructions appended after the compiled template."""

    STRUCTURE = "structure"
    CONTEXT = "context"
    EXAMPLES = "examples"
    STEP_BY_STEP = "step_by_step"
    PROFESSIONAL_TONE = "professional_tone"


_ENHANCEMENT_TEXT = {
    Enhancement.STRUCTURE: "\n\nOrganize the response with clear headings and sections.",
    Enhancement.CONTEXT: "\nEnsure the output is accurate and relevant.",
    Enhancement.EXAMPLES: "\nInclude 2-3 concrete examples to illustrate.",
    Enhancement.STEP_BY_STEP: "\nPlease think step-by-step.",
    Enhancement.PROFESSIONAL_TONE: "\nUse formal, professional language.",
}

_STRUCTURE_RE = re.compile(r"\*\*|##|[-*]\s|:")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NUMBER_RE = re.compile(r"\d", re.ASCII)
_QUOTED_RE = re.compile(r'"[^"]+"')
_ROLE_TASK_RE = re.compile(r"role|task|context|format", re.IGNORECASE | re.ASCII)

Specificity = Literal["Low", "Medium", "High"]


@dataclass(frozen=True)
class OptimizedPrompt:
    prompt: str
    analysis: AnalysisResult
    improvements: tuple[str, ...]


@dataclass(frozen=True)
class PromptStats:
    word_diff: int
    clarity: int
    specificity: Specificity


def _quick_fields(text: str) -> dict[str, str]:
    return {
        "task": text,
        "role": "AI Assistant",
        "context": "Standard context",
        "format": "Markdown",
        "language": "Code",
        "topic": text,
        "audience": "Reader",
        "tone": "Professional",
        "length": "Short",
    }


def optimize_prompt(
    text: str | None,
    enhancements: Iterable[Enhancement | str] = (),
    library: PatternLibrary | None = None,
) -> OptimizedPrompt | None:
    """Rewrite a raw request into the template for its detected intent.

    Scores against ``DEVELOPER_LIBRARY`` unless another library is given, so
    debugging, testing and similar requests get their dedicated templates.
    Enhancement instructions are appended in declaration order of
    ``Enhancement``, whatever order they are passed in.
    """
    text = (text or "").strip()
    if not text:
        return None
    analysis = analyze_prompt(text, library=library or DEVELOPER_LIBRARY)
    prompt = compile_prompt(CompileRequest(intent=analysis.intent, fields=_quick_fields(text)))

    requested = {Enhancement(e) for e in enhancements}
    for enhancement in Enhancement:
        if enhancement in requested:
            prompt += _ENHANCEMENT_TEXT[enhancement]

    return OptimizedPrompt(
        prompt=prompt,
        analysis=analysis,
        improvements=(f"Optimized for detected intent: {analysis.intent.upper()}",),
    )


def prompt_stats(input_text: str, output_text: str) -> PromptStats:
    """Compare a raw request to its optimized form."""
    input_words = len(input_text.split())
    output_words = len(output_text.split())

    sentences = [s for s in _SENTENCE_SPLIT_RE.split(output_text) if s.strip()]
    avg_sentence_length = output_words / max(len(sentences), 1)
    clarity = 70
    if avg_sentence_length < 25:
        clarity += 15
    if _STRUCTURE_RE.search(output_text):
        clarity += 15
    clarity = min(100, clarity)

    hits = sum(
        1 for pat in (_NUMBER_RE, _QUOTED_RE, _ROLE_TASK_RE) if pat.search(output_text)
    )
    specificity: Specificity = "High" if hits >= 2 else ("Low" if hits == 0 else "Medium")

    return PromptStats(word_diff=output_words - input_words, clarity=clarity, specificity=specificity)
