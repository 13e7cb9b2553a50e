from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from data_designer_prompt_intent.core import GENERAL_INTENT

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Z0-9_]+)\}\}")
_BLANK_LINE_RE = re.compile(r"^\s*[\r\n]", re.MULTILINE)


@dataclass(frozen=True)
class Template:
    name: str
    structure: str

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in order of first appearance."""
        seen: dict[str, None] = {}
        for m in _PLACEHOLDER_RE.finditer(self.structure):
            seen.setdefault(m.group(1), None)
        return tuple(seen)


@dataclass(frozen=True)
class CompileRequest:
    intent: str
    fields: Mapping[str, str | None] = field(default_factory=dict)


TEMPLATES: Mapping[str, Template] = MappingProxyType({
    "general": Template(
        name="Standard Structured",
        structure="""
**Role:** {{ROLE}}
**Task:** {{TASK}}
**Context:** {{CONTEXT}}
**Format:** {{FORMAT}}
""",
    ),
    "code": Template(
        name="Senior Developer (Expert)",
        structure="""
Act as a Senior {{LANGUAGE}} Developer.
Task: {{TASK}}

Requirements:
- Use modern syntax and best practices.
- Include robust error handling.
- Add comments explaining complex logic.
- Optimize for performance and scalability.

Output format: {{FORMAT}} (e.g., Code block only, or Code + Explanation)
""",
    ),
    "writing": Template(
        name="Professional Writer",
        structure="""
Act as a professional {{TYPE}} writer.
Topic: {{TOPIC}}
Audience: {{AUDIENCE}}
Tone: {{TONE}}

Structure:
1. Engaging Hook
2. Key Points / Arguments
3. Clear Conclusion with Call to Action

Constraints:
- Use active voice.
- Avoid jargon unless necessary.
- Target word count: {{LENGTH}}.
""",
    ),
    "analysis": Template(
        name="Data Analyst",
        structure="""
Act as a Data Analyst.
Task: Analyze the provided {{DATA_TYPE}}.
Goal: Identify key trends, anomalies, and actionable insights.

Output format:
- Executive Summary
- Key Findings (Bullet points)
- Recommendations
- Format: {{FORMAT}} (Table/Text)
""",
    ),
    "image": Template(
        name="Midjourney/DALL-E Expert",
        structure="""
/imagine prompt: {{SUBJECT}}, {{STYLE}}, {{LIGHTING}}, {{COLOR_PALETTE}}, {{COMPOSITION}} --ar {{ASPECT_RATIO}} --v {{VERSION}}
""",
    ),
    "cot": Template(
        name="Chain of Thought (Reasoning)",
        structure="""
Role: {{ROLE}}
Task: {{TASK}}

Instructions:
Let's think step by step.
1. Break down the problem into smaller components.
2. Analyze each component.
3. Synthesize the findings into a final answer.

Constraints:
- Show your reasoning clearly.
- Verify assumptions.
""",
    ),
    "debug": Template(
        name="Bug Detective",
        structure="""
Act as a Senior Debugging Specialist.

**Error/Issue:** {{TASK}}
**Language/Framework:** {{LANGUAGE}}
**Context:** {{CONTEXT}}

Debugging Approach:
1. Analyze the error message and stack trace
2. Identify potential root causes
3. Suggest diagnostic steps (logging, breakpoints, etc.)
4. Provide the fix with detailed explanation
5. Recommend prevention strategies

Output format: {{FORMAT}}

Constraints:
- Explain *why* the bug occurs, not just how to fix it
- Include before/after code snippets
- Mention edge cases that could cause similar issues
""",
    ),
    "feature": Template(
        name="Feature Architect",
        structure="""
Act as a Senior Software Architect.

**Feature Request:** {{TASK}}
**Tech Stack:** {{LANGUAGE}}
**Existing Context:** {{CONTEXT}}

Implementation Plan:
1. Requirements breakdown
2. Architecture/design decisions
3. Step-by-step implementation guide
4. Integration points with existing code
5. Error handling considerations
6. Testing strategy

Output format: {{FORMAT}}

Constraints:
- Follow existing code patterns and conventions
- Consider scalability and maintainability
- Include type annotations if applicable
- Add docstring comments
""",
    ),
    "testing": Template(
        name="Test Engineer",
        structure="""
Act as a Senior Test Engineer.

**Code/Function to Test:** {{TASK}}
**Testing Framework:** {{LANGUAGE}}
**Test Type:** {{CONTEXT}}

Generate comprehensive tests including:
1. Happy path / expected behavior
2. Edge cases and boundary conditions
3. Error handling scenarios
4. Mock/stub setup if needed
5. Assertions with clear descriptions

Output format: {{FORMAT}}

Constraints:
- Use AAA pattern (Arrange, Act, Assert)
- Each test should test ONE behavior
- Include descriptive test names (should_X_when_Y)
- Add setup/teardown if needed
""",
    ),
    "review": Template(
        name="Code Reviewer",
        structure="""
Act as a Senior Code Reviewer performing a thorough review.

**Code to Review:**
{{TASK}}

**Language/Framework:** {{LANGUAGE}}
**Focus Areas:** {{CONTEXT}}

Review for:
1. **Correctness**: Logic errors, off-by-one, null checks
2. **Security**: Injection, XSS, authentication issues
3. **Performance**: N+1 queries, memory leaks, inefficient loops
4. **Readability**: Naming, complexity, documentation
5. **Best Practices**: SOLID principles, DRY, design patterns

Output format: {{FORMAT}}

For each issue found: [Severity: Critical/Major/Minor] + Location + Suggestion
""",
    ),
    "refactor": Template(
        name="Refactoring Expert",
        structure="""
Act as a Senior Developer specializing in code refactoring.

**Code to Refactor:**
{{TASK}}

**Language:** {{LANGUAGE}}
**Goals:** {{CONTEXT}}

Refactoring Approach:
1. Identify code smells (duplication, long methods, etc.)
2. Propose refactoring techniques to apply
3. Show step-by-step transformation
4. Ensure behavior is preserved
5. Suggest test coverage improvements

Output format: {{FORMAT}}

Constraints:
- Make incremental, safe changes
- Preserve existing functionality (no regressions)
- Explain the "why" behind each change
- Follow language idioms and conventions
""",
    ),
    "api": Template(
        name="API Designer",
        structure="""
Act as a Senior API Architect.

**API Requirement:** {{TASK}}
**Framework/Style:** {{LANGUAGE}}
**Context:** {{CONTEXT}}

Design deliverables:
1. Endpoint structure (routes, HTTP methods)
2. Request/response schemas (with examples)
3. Authentication/authorization approach
4. Error response format
5. Pagination/filtering strategy
6. Example requests with curl/fetch

Output format: {{FORMAT}}

Constraints:
- Follow RESTful conventions (or GraphQL best practices)
- Include proper HTTP status codes
- Document edge cases and error scenarios
- Consider rate limiting and versioning
""",
    ),
})


def get_template(intent: str) -> Template:
    """Return the template for ``intent``, or the general one if there is none."""
    template = TEMPLATES.get(intent)
    if template is None:
        logger.debug(f"No template for intent {intent!r}, using {GENERAL_INTENT!r}")
        return TEMPLATES[GENERAL_INTENT]
    return template


def _drop_blank_lines(text: str) -> str:
    return _BLANK_LINE_RE.sub("", text).strip()


def compile_prompt(request: CompileRequest | Mapping[str, object]) -> str:
    """Render a template from an intent and a mapping of field values.

    Args:
        request: A ``CompileRequest`` or a mapping with ``intent`` and
            ``fields`` keys. Field keys are matched case-insensitively against
            ``{{NAME}}`` placeholders.

    Returns:
        The rendered prompt. Each field fills the first occurrence of its
        placeholder; empty values render as ``[key]``. Placeholders without a
        field are left as-is, and blank lines are removed.
    """
    if not isinstance(request, CompileRequest):
        request = CompileRequest(intent=str(request.get("intent") or ""), fields=request.get("fields") or {})

    compiled = get_template(request.intent).structure
    for key, value in request.fields.items():
        placeholder = "{{" + key.upper() + "}}"
        compiled = compiled.replace(placeholder, value or f"[{key}]", 1)
    return _drop_blank_lines(compiled)
