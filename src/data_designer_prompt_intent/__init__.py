# SPDX-License-Identifier: Apache-2.0
"""Prompt intent plugin for NeMo Data Designer.

Adds a ``prompt-intent`` column type that classifies free-text requests as
code, image, writing, analysis or general prompts with weighted keyword
patterns, scores their quality (0-100) and suggests improvements, plus a
``prompt-template`` column type that renders the matching prompt template.
No LLM calls, no API dependencies.

Usage::

    from data_designer_prompt_intent import PromptIntentColumnConfig

    builder.add_column(PromptIntentColumnConfig(
        name="intent_check",
        target_columns=["request"],
        min_quality=60,
    ))
"""

from data_designer_prompt_intent.config import PromptIntentColumnConfig, PromptTemplateColumnConfig
from data_designer_prompt_intent.core import (
    DEFAULT_LIBRARY,
    DEVELOPER_LIBRARY,
    AnalysisResult,
    QualityParameters,
    analyze_prompt,
    suggest_improvements,
)
from data_designer_prompt_intent.optimizer import Enhancement, optimize_prompt, prompt_stats
from data_designer_prompt_intent.templates import TEMPLATES, CompileRequest, compile_prompt

__all__ = [
    "PromptIntentColumnConfig",
    "PromptTemplateColumnConfig",
    "analyze_prompt",
    "suggest_improvements",
    "compile_prompt",
    "optimize_prompt",
    "prompt_stats",
    "AnalysisResult",
    "CompileRequest",
    "Enhancement",
    "QualityParameters",
    "DEFAULT_LIBRARY",
    "DEVELOPER_LIBRARY",
    "TEMPLATES",
]
