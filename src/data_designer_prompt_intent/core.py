# Prompt intent analyzer: keyword-weighted intent detection, quality heuristic,
# and an ordered checklist of improvement suggestions.
#
# Matching is surface-level on purpose. Every category is a word-boundary
# alternation over a fixed vocabulary; thresholds are tuned against these
# exact keyword sets.

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

GENERAL_INTENT = "general"

# ---------------------------------------------------------------------------
# Quality parameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class QualityParameters:
    """Base score, bonuses, and penalties used by the quality heuristic."""

    base_score: int = 50
    short_words_threshold: int = 5
    long_words_threshold: int = 15
    length_bonus: int = 10
    quoted_bonus: int = 5
    digit_bonus: int = 5
    weak_word_penalty: int = 5
    short_text_chars: int = 10
    score_min: int = 0
    score_max: int = 100


DEFAULT_PARAMETERS = QualityParameters()


# ---------------------------------------------------------------------------
# Pattern library
# ---------------------------------------------------------------------------


def _keyword_re(words: list[str]) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class Pattern:
    name: str
    regex: re.Pattern[str]
    weight: float

    def count(self, text: str) -> int:
        return sum(1 for _ in self.regex.finditer(text))

    def score(self, text: str) -> float:
        return self.count(text) * self.weight


@dataclass(frozen=True)
class PatternLibrary:
    """Ordered intent categories plus the weak-word penalty rule.

    Declaration order is the tie-break order: when two categories score the
    same, the one declared first wins. ``aliases`` renames a winning category
    to the intent (and template) it maps onto.
    """

    categories: tuple[Pattern, ...]
    weak_words: Pattern
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        names = [p.name for p in self.categories]
        if not names:
            raise ValueError("pattern library needs at least one category")
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate category names in pattern library: {names}")
        if GENERAL_INTENT in names:
            raise ValueError(f"{GENERAL_INTENT!r} is the fallback intent, not a category")
        if self.weak_words.weight >= 0:
            raise ValueError(f"weak-word weight must be negative, got {self.weak_words.weight}")

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.categories)

    def resolve(self, category: str) -> str:
        return self.aliases.get(category, category)


_CODE_WORDS = [
    "function", "class", "def", "var", "const", "let", "=>", "database", "react",
    "css", "html", "python", "javascript", "java", "sql", "query", "json", "xml",
    "repo", "component", "module",
]
_IMAGE_WORDS = [
    "image", "photo", "picture", "draw", "generate", "style", "ratio", "aspect",
    "4k", "hd", "render", "art", "illustration", "logo", "icon",
]
_WRITING_WORDS = [
    "essay", "blog", "post", "article", "email", "letter", "text", "story",
    "chapter", "plot", "character", "narrative", "tone", "voice", "introduction",
    "conclusion",
]
_ANALYSIS_WORDS = [
    "analyze", "summarize", "extract", "data", "trend", "pattern", "insight",
    "report", "chart", "table", "excel", "csv", "metrics",
]
_WEAK_WORDS = [
    "stuff", "things", "good", "make", "do", "give", "something", "kinda",
    "sorta", "whatever",
]

# Developer-oriented categories carry higher weights so they beat the
# generic ``code`` bucket on specific requests.
_REASONING_WORDS = [
    "step by step", "explain why", "how does", "reason", "think through", "logic",
    "prove", "derive", "calculate", "solve", "work out", "breakdown", "break down",
]
_DEBUG_WORDS = [
    "debug", "bug", "error", "fix", "issue", "crash", "fail", "broken",
    "not working", "exception", "stack trace", "undefined is not", "null",
    "TypeError", "ReferenceError",
]
_FEATURE_WORDS = [
    "add feature", "implement", "new feature", "functionality", "develop",
    "integrate", "build a", "create a",
]
_TESTING_WORDS = [
    "test", "spec", "unit test", "integration test", "e2e", "mock", "stub",
    "assert", "coverage", "jest", "mocha", "pytest", "vitest", "testing",
]
_REVIEW_WORDS = [
    "review", "code review", "check this", "audit", "inspect", "evaluate",
    "feedback", "critique", "look at this code",
]
_REFACTOR_WORDS = [
    "refactor", "clean up", "simplify", "optimize", "restructure", "improve code",
    "technical debt", "code smell", "rewrite",
]
_API_WORDS = [
    "api design", "endpoint", "route", "rest api", "graphql", "request",
    "response", "http", "fetch", "axios", "crud",
]

_CODE = Pattern("code", _keyword_re(_CODE_WORDS), 2.0)
_IMAGE = Pattern("image", _keyword_re(_IMAGE_WORDS), 2.0)
_WRITING = Pattern("writing", _keyword_re(_WRITING_WORDS), 1.5)
_ANALYSIS = Pattern("analysis", _keyword_re(_ANALYSIS_WORDS), 1.5)
_WEAK = Pattern("weakWords", _keyword_re(_WEAK_WORDS), -1.0)

DEFAULT_LIBRARY = PatternLibrary(
    categories=(_CODE, _IMAGE, _WRITING, _ANALYSIS),
    weak_words=_WEAK,
)

DEVELOPER_LIBRARY = PatternLibrary(
    categories=(
        _CODE,
        _IMAGE,
        _WRITING,
        _ANALYSIS,
        Pattern("reasoning", _keyword_re(_REASONING_WORDS), 2.0),
        Pattern("debug", _keyword_re(_DEBUG_WORDS), 2.5),
        Pattern("feature", _keyword_re(_FEATURE_WORDS), 2.0),
        Pattern("testing", _keyword_re(_TESTING_WORDS), 2.5),
        Pattern("review", _keyword_re(_REVIEW_WORDS), 2.0),
        Pattern("refactor", _keyword_re(_REFACTOR_WORDS), 2.0),
        Pattern("api", _keyword_re(_API_WORDS), 2.0),
    ),
    weak_words=_WEAK,
    aliases=MappingProxyType({"reasoning": "cot"}),
)

PATTERN_SETS: Mapping[str, PatternLibrary] = MappingProxyType(
    {"default": DEFAULT_LIBRARY, "developer": DEVELOPER_LIBRARY}
)

_QUOTED_RE = re.compile(r'"[^"]+"')
_DIGIT_RE = re.compile(r"\d", re.ASCII)

# ---------------------------------------------------------------------------
# Suggestion rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Check:
    """Append ``hint`` unless ``satisfied_by`` matches the text."""

    satisfied_by: re.Pattern[str]
    hint: str

    def apply(self, text: str) -> str | None:
        return None if self.satisfied_by.search(text) else self.hint


_MORE_DETAIL_HINT = "Add more detail to your request."
_GENERIC_FORMAT_HINT = "Try adding specific details about the format you want."
_GENERAL_CHECK = _Check(_keyword_re(["please", "help", "need", "want"]), "Consider adding constraints or requirements.")
_REASONING_CHECKS = (
    _Check(_keyword_re(["problem", "question", "solve", "calculate"]), "Clearly state the problem to be solved."),
    _Check(_keyword_re(["show", "explain", "verify"]), "Ask the AI to show its work or verify assumptions."),
)

_SUGGESTION_RULES: Mapping[str, tuple[_Check, ...]] = MappingProxyType({
    "code": (
        _Check(_keyword_re(["python", "js", "javascript", "html", "css", "sql", "react", "node"]),
               "Specify the programming language/framework."),
        _Check(_keyword_re(["error", "bug", "fix", "create", "build"]),
               "Clarify if you want to create new code or fix existing code."),
    ),
    "image": (
        _Check(_keyword_re(["style", "realistic", "cartoon", "oil", "sketch"]), "Mention a specific art style."),
        _Check(_keyword_re(["ratio", "ar", "16:9", "square"]), "Define the aspect ratio."),
    ),
    "writing": (
        _Check(_keyword_re(["audience", "reader", "for"]), "Specify your target audience."),
        _Check(_keyword_re(["length", "words", "short", "long", "paragraphs"]), "Define the desired length."),
        _Check(_keyword_re(["tone", "formal", "casual", "friendly"]), "Mention the tone you want."),
    ),
    "analysis": (
        _Check(_keyword_re(["data", "csv", "table", "numbers", "dataset"]),
               "Describe the data format you're analyzing."),
        _Check(_keyword_re(["trend", "pattern", "insight", "compare", "find"]),
               "Specify what insights you're looking for."),
    ),
    "cot": _REASONING_CHECKS,
    "reasoning": _REASONING_CHECKS,
    "debug": (
        _Check(_keyword_re(["error", "message", "stack", "trace", "log"]), "Include the error message or stack trace."),
        _Check(_keyword_re(["python", "js", "javascript", "react", "node", "java", "typescript"]),
               "Mention the programming language or framework."),
    ),
    "feature": (
        _Check(_keyword_re(["existing", "current", "codebase", "project"]), "Describe the existing codebase context."),
        _Check(_keyword_re(["requirement", "should", "must", "need"]), "List specific requirements for the feature."),
    ),
    "testing": (
        _Check(_keyword_re(["jest", "mocha", "pytest", "vitest", "cypress"]), "Specify the testing framework to use."),
        _Check(_keyword_re(["unit", "integration", "e2e", "end-to-end"]), "Clarify the type of tests needed."),
    ),
    "review": (
        _Check(_keyword_re(["security", "performance", "readability"]),
               "Specify focus areas (security, performance, readability)."),
    ),
    "refactor": (
        _Check(_keyword_re(["goal", "improve", "simplify", "readable"]), "Describe the refactoring goals."),
    ),
    "api": (
        _Check(_keyword_re(["rest", "graphql", "grpc"]), "Specify the API style (REST, GraphQL, etc.)."),
        _Check(_keyword_re(["auth", "authentication", "authorization"]), "Mention authentication requirements."),
    ),
})

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnalysisResult:
    intent: str
    scores: Mapping[str, float]
    quality: int
    suggestions: tuple[str, ...]

    def to_payload(self) -> dict[str, object]:
        return {
            "intent": self.intent,
            "scores": dict(self.scores),
            "quality": self.quality,
            "suggestions": list(self.suggestions),
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _word_count(text: str) -> int:
    return len(text.split())


def _dominant_category(scores: Mapping[str, float], order: tuple[str, ...]) -> str | None:
    best, best_score = None, 0.0
    for name in order:
        if scores[name] > best_score:
            best, best_score = name, scores[name]
    return best


def _quality(text: str, weak_words: Pattern, hp: QualityParameters) -> int:
    score = hp.base_score
    wc = _word_count(text)
    if wc > hp.short_words_threshold:
        score += hp.length_bonus
    if wc > hp.long_words_threshold:
        score += hp.length_bonus
    if _QUOTED_RE.search(text):
        score += hp.quoted_bonus
    if _DIGIT_RE.search(text):
        score += hp.digit_bonus
    score -= weak_words.count(text) * hp.weak_word_penalty
    return max(hp.score_min, min(hp.score_max, score))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def suggest_improvements(intent: str, text: str, parameters: QualityParameters | None = None) -> list[str]:
    """Return improvement hints for ``text`` given its detected ``intent``.

    The list is an ordered checklist. The length hint is always evaluated
    first, so for ``general`` requests it suppresses the generic format hint.
    """
    hp = parameters or DEFAULT_PARAMETERS
    suggestions: list[str] = []

    if len(text) < hp.short_text_chars:
        suggestions.append(_MORE_DETAIL_HINT)

    for check in _SUGGESTION_RULES.get(intent, ()):
        hint = check.apply(text)
        if hint:
            suggestions.append(hint)

    if intent == GENERAL_INTENT:
        if not suggestions:
            suggestions.append(_GENERIC_FORMAT_HINT)
        hint = _GENERAL_CHECK.apply(text)
        if hint:
            suggestions.append(hint)

    return suggestions


def analyze_prompt(
    text: str | None,
    parameters: QualityParameters | None = None,
    library: PatternLibrary | None = None,
) -> AnalysisResult | None:
    """Detect the intent of a prompt and score how well specified it is.

    Args:
        text: The raw request. Empty or ``None`` yields ``None``.
        parameters: Optional quality tuning. Uses the stock values if omitted.
        library: Category table to score against. Defaults to the four
            general-purpose categories; ``DEVELOPER_LIBRARY`` adds the
            software-engineering intents.

    Returns:
        AnalysisResult with the intent, per-category scores, the 0-100
        quality score, and ordered suggestions.
    """
    if not text:
        return None
    hp = parameters or DEFAULT_PARAMETERS
    lib = library or DEFAULT_LIBRARY

    scores = {p.name: p.score(text) for p in lib.categories}
    winner = _dominant_category(scores, lib.names)
    intent = lib.resolve(winner) if winner else GENERAL_INTENT

    return AnalysisResult(
        intent=intent,
        scores=MappingProxyType(scores),
        quality=_quality(text, lib.weak_words, hp),
        suggestions=tuple(suggest_improvements(intent, text, hp)),
    )
