import pytest
from pydantic import ValidationError

from data_designer_prompt_intent.config import PromptIntentColumnConfig, PromptTemplateColumnConfig


class TestPromptIntentColumnConfig:
    def test_defaults(self):
        config = PromptIntentColumnConfig(name="intent_check", target_columns=["request"])
        assert config.min_quality == 50
        assert config.pattern_set == "default"
        assert config.column_type == "prompt-intent"
        assert config.required_columns == ["request"]
        assert config.side_effect_columns == []

    def test_min_quality_bounds(self):
        with pytest.raises(ValidationError):
            PromptIntentColumnConfig(name="intent_check", target_columns=["request"], min_quality=101)

    def test_unknown_pattern_set_rejected(self):
        with pytest.raises(ValidationError):
            PromptIntentColumnConfig(name="intent_check", target_columns=["request"], pattern_set="legal")


class TestPromptTemplateColumnConfig:
    def test_intent_column_is_required(self):
        config = PromptTemplateColumnConfig(
            name="rendered",
            intent_column="detected_intent",
            field_columns={"task": "request"},
        )
        assert config.column_type == "prompt-template"
        assert config.required_columns == ["request", "detected_intent"]

    def test_fixed_intent(self):
        config = PromptTemplateColumnConfig(name="rendered", intent="image", field_columns={"subject": "subject"})
        assert config.required_columns == ["subject"]

    def test_requires_exactly_one_intent_source(self):
        with pytest.raises(ValidationError):
            PromptTemplateColumnConfig(name="rendered", field_columns={"task": "request"})
        with pytest.raises(ValidationError):
            PromptTemplateColumnConfig(name="rendered", intent="code", intent_column="detected_intent")
