from __future__ import annotations

import logging
from typing import Mapping

import pandas as pd
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_prompt_intent.config import PromptIntentColumnConfig, PromptTemplateColumnConfig
from data_designer_prompt_intent.core import GENERAL_INTENT, PATTERN_SETS, analyze_prompt
from data_designer_prompt_intent.templates import CompileRequest, compile_prompt

logger = logging.getLogger(__name__)


def _is_missing(value: object) -> bool:
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def _cell_intent(value: object) -> str:
    # A prompt-intent column stores a dict per row; read its "intent" key.
    if isinstance(value, Mapping):
        value = value.get("intent")
    return GENERAL_INTENT if _is_missing(value) else str(value)


def analyze_rows(data: pd.DataFrame, config: PromptIntentColumnConfig) -> list[dict]:
    """Analyze each row's joined target columns into a ``prompt-intent`` cell."""
    library = PATTERN_SETS[config.pattern_set]
    results = []
    for _, row in data[config.target_columns].iterrows():
        text = " ".join(str(v) for v in row.values if not _is_missing(v))
        analysis = analyze_prompt(text, library=library)
        if analysis is None:
            output: dict = {"is_valid": False, "intent": None, "quality": None}
            if config.include_scores:
                output["scores"] = {}
            if config.include_suggestions:
                output["suggestions"] = []
            results.append(output)
            continue
        output = {
            "is_valid": analysis.quality >= config.min_quality,
            "intent": analysis.intent,
            "quality": analysis.quality,
        }
        if config.include_scores:
            output["scores"] = dict(analysis.scores)
        if config.include_suggestions:
            output["suggestions"] = list(analysis.suggestions)
        results.append(output)
    return results


def render_rows(data: pd.DataFrame, config: PromptTemplateColumnConfig) -> list[str]:
    """Render one prompt per row. Missing field values render as ``[key]``."""
    rendered = []
    for _, row in data.iterrows():
        intent = config.intent if config.intent is not None else _cell_intent(row[config.intent_column])
        fields = {}
        for placeholder, column in config.field_columns.items():
            value = row[column]
            fields[placeholder] = None if _is_missing(value) else str(value)
        rendered.append(compile_prompt(CompileRequest(intent=intent, fields=fields)))
    return rendered


class PromptIntentColumnGenerator(ColumnGeneratorFullColumn[PromptIntentColumnConfig]):
    """Column generator that classifies prompt intent and scores prompt quality."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f9ed Analyzing column {self.config.name!r} for prompt intent")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   pattern set: {self.config.pattern_set}")
        logger.info(f"   min_quality: {self.config.min_quality}")

        results = analyze_rows(data, self.config)

        data = data.copy()
        data[self.config.name] = results
        return data


class PromptTemplateColumnGenerator(ColumnGeneratorFullColumn[PromptTemplateColumnConfig]):
    """Column generator that renders a prompt template from row values."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4dd Rendering prompt templates into column {self.config.name!r}")
        logger.info(f"   intent: {self.config.intent or 'from column ' + repr(self.config.intent_column)}")
        logger.info(f"   fields: {self.config.field_columns}")

        rendered = render_rows(data, self.config)

        data = data.copy()
        data[self.config.name] = rendered
        return data
