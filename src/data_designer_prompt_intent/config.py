from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from data_designer.config.column_configs import SingleColumnConfig


class PromptIntentColumnConfig(SingleColumnConfig):
    """Classify prompt text columns by intent and score how well specified they are.

    Matches each row's text against weighted keyword patterns and produces the
    detected intent, a 0-100 quality score, and ordered improvement suggestions.

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        min_quality: Minimum quality score (0-100) for ``is_valid=True``. Defaults to 50,
            the score of a short request with no bonuses or penalties.
        pattern_set: ``"default"`` for the code/image/writing/analysis categories, or
            ``"developer"`` to add reasoning, debug, feature, testing, review, refactor
            and api intents.
        include_scores: Include the raw per-category scores in output.
        include_suggestions: Include improvement suggestions in output.
    """

    target_columns: list[str]
    min_quality: int = Field(default=50, ge=0, le=100, description="Minimum quality score for is_valid=True")
    pattern_set: Literal["default", "developer"] = Field(default="default", description="Intent category table")
    include_scores: bool = Field(default=False, description="Include per-category scores in output")
    include_suggestions: bool = Field(default=True, description="Include improvement suggestions in output")
    column_type: Literal["prompt-intent"] = "prompt-intent"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f9ed"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []


class PromptTemplateColumnConfig(SingleColumnConfig):
    """Render a prompt template per row from column values.

    Attributes:
        intent: Fixed template name for every row. Unknown names use the general template.
        intent_column: Column holding the template name per row, e.g. the ``intent``
            produced by a ``prompt-intent`` column. Mutually exclusive with ``intent``.
        field_columns: Maps placeholder names (case-insensitive) to source columns.
    """

    intent: str | None = Field(default=None, description="Template name applied to every row")
    intent_column: str | None = Field(default=None, description="Column holding the template name per row")
    field_columns: dict[str, str] = Field(default_factory=dict, description="Placeholder name -> source column")
    column_type: Literal["prompt-template"] = "prompt-template"

    @model_validator(mode="after")
    def _one_intent_source(self) -> PromptTemplateColumnConfig:
        if (self.intent is None) == (self.intent_column is None):
            raise ValueError("Set exactly one of 'intent' or 'intent_column'")
        return self

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4dd"

    @property
    def required_columns(self) -> list[str]:
        columns = list(self.field_columns.values())
        if self.intent_column is not None and self.intent_column not in columns:
            columns.append(self.intent_column)
        return columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
