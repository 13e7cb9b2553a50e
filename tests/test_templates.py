from data_designer_prompt_intent.core import DEFAULT_LIBRARY, DEVELOPER_LIBRARY
from data_designer_prompt_intent.templates import TEMPLATES, CompileRequest, compile_prompt, get_template


class TestCompilePrompt:
    def test_image_template_with_fallback(self):
        rendered = compile_prompt(CompileRequest(
            intent="image",
            fields={"subject": "a cat", "style": "", "aspect_ratio": "16:9"},
        ))
        assert rendered == (
            "/imagine prompt: a cat, [style], {{LIGHTING}}, {{COLOR_PALETTE}}, "
            "{{COMPOSITION}} --ar 16:9 --v {{VERSION}}"
        )

    def test_unknown_intent_uses_general(self):
        rendered = compile_prompt(CompileRequest(intent="legal", fields={"role": "Lawyer", "task": "Draft a lease"}))
        assert rendered == (
            "**Role:** Lawyer\n"
            "**Task:** Draft a lease\n"
            "**Context:** {{CONTEXT}}\n"
            "**Format:** {{FORMAT}}"
        )

    def test_accepts_plain_mapping(self):
        rendered = compile_prompt({"intent": "general", "fields": {"Task": "Summarize"}})
        assert "**Task:** Summarize" in rendered

    def test_missing_intent_in_mapping_uses_general(self):
        rendered = compile_prompt({"fields": {"role": "Editor"}})
        assert rendered.startswith("**Role:** Editor")

    def test_none_value_renders_bracketed_key(self):
        rendered = compile_prompt(CompileRequest(intent="general", fields={"context": None}))
        assert "**Context:** [context]" in rendered

    def test_replaces_first_occurrence_only(self):
        rendered = compile_prompt(CompileRequest(intent="general", fields={"task": "{{ROLE}}", "role": "Critic"}))
        assert rendered.splitlines()[:2] == ["**Role:** Critic", "**Task:** {{ROLE}}"]

    def test_values_inserted_verbatim(self):
        value = r"use $1 and \1 and <b>"
        rendered = compile_prompt(CompileRequest(intent="general", fields={"task": value}))
        assert f"**Task:** {value}" in rendered

    def test_value_line_endings_preserved(self):
        rendered = compile_prompt(CompileRequest(intent="general", fields={"task": "line1\r\nline2"}))
        assert "**Task:** line1\r\nline2\n**Context:**" in rendered

    def test_blank_lines_removed(self):
        rendered = compile_prompt(CompileRequest(intent="code", fields={"language": "Go", "task": "Write a CLI"}))
        assert rendered.startswith("Act as a Senior Go Developer.\nTask: Write a CLI\nRequirements:")
        assert all(line.strip() for line in rendered.splitlines())
        assert rendered == rendered.strip()

    def test_compile_is_idempotent(self):
        request = CompileRequest(intent="writing", fields={"topic": "tides", "tone": "calm"})
        assert compile_prompt(request) == compile_prompt(request)

    def test_no_fields_leaves_placeholders(self):
        rendered = compile_prompt(CompileRequest(intent="cot"))
        assert "Role: {{ROLE}}" in rendered
        assert "Task: {{TASK}}" in rendered


class TestTemplateLibrary:
    def test_image_placeholders(self):
        assert TEMPLATES["image"].placeholders == (
            "SUBJECT", "STYLE", "LIGHTING", "COLOR_PALETTE", "COMPOSITION", "ASPECT_RATIO", "VERSION",
        )

    def test_every_intent_has_a_template(self):
        for library in (DEFAULT_LIBRARY, DEVELOPER_LIBRARY):
            for name in library.names:
                assert library.resolve(name) in TEMPLATES
        assert "general" in TEMPLATES
        assert "cot" in TEMPLATES

    def test_get_template_falls_back(self):
        assert get_template("nope") is TEMPLATES["general"]
        assert get_template("image").name == "Midjourney/DALL-E Expert"
