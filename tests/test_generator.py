import pandas as pd

from data_designer_prompt_intent.config import PromptIntentColumnConfig, PromptTemplateColumnConfig
from data_designer_prompt_intent.generator import analyze_rows, render_rows


class TestAnalyzeRows:
    def test_row_output(self):
        data = pd.DataFrame({"request": ["draw a logo image in cartoon style 16:9"]})
        config = PromptIntentColumnConfig(name="intent_check", target_columns=["request"], include_scores=True)
        [cell] = analyze_rows(data, config)
        assert cell["intent"] == "image"
        assert cell["quality"] == 65
        assert cell["is_valid"] is True
        assert cell["scores"]["image"] == 8.0
        assert cell["suggestions"] == []

    def test_missing_values_are_skipped(self):
        data = pd.DataFrame({"request": [float("nan")]})
        config = PromptIntentColumnConfig(name="intent_check", target_columns=["request"])
        [cell] = analyze_rows(data, config)
        assert cell == {"is_valid": False, "intent": None, "quality": None, "suggestions": []}


class TestRenderRows:
    def test_reads_intent_from_prompt_intent_column(self):
        data = pd.DataFrame({"request": ["draw a logo image in cartoon style 16:9", "hi"]})
        intent_config = PromptIntentColumnConfig(name="intent_check", target_columns=["request"])
        data["intent_check"] = analyze_rows(data, intent_config)
        template_config = PromptTemplateColumnConfig(
            name="rendered",
            intent_column="intent_check",
            field_columns={"subject": "request", "task": "request"},
        )
        rendered = render_rows(data, template_config)
        assert rendered[0].startswith("/imagine prompt: draw a logo image in cartoon style 16:9, {{STYLE}}")
        assert rendered[1].startswith("**Role:** {{ROLE}}\n**Task:** hi")

    def test_missing_intent_uses_general(self):
        data = pd.DataFrame({"intent": [None, float("nan")], "task": ["a", "b"]})
        config = PromptTemplateColumnConfig(name="rendered", intent_column="intent", field_columns={"task": "task"})
        for prompt in render_rows(data, config):
            assert prompt.startswith("**Role:** {{ROLE}}")

    def test_nan_field_renders_bracketed_key(self):
        data = pd.DataFrame({"subject": ["a cat"], "style": [float("nan")]})
        config = PromptTemplateColumnConfig(
            name="rendered",
            intent="image",
            field_columns={"subject": "subject", "style": "style"},
        )
        assert render_rows(data, config) == [
            "/imagine prompt: a cat, [style], {{LIGHTING}}, {{COLOR_PALETTE}}, "
            "{{COMPOSITION}} --ar {{ASPECT_RATIO}} --v {{VERSION}}"
        ]
