"""
Query intent analysis.

Classifies a free-text question into a QueryIntent used to bias retrieval:
whether the user wants example code or a quickstart, which role, language and
framework the question is about, and its content keywords.

Every signal comes from an ordered rule table evaluated top to bottom, so the
tables can be tested directly. The module does no I/O.

Dependencies: re (stdlib), docs_rag.models
System role: Intent detection for intent-filtered search
"""

import re

from docs_rag.models.intent import QueryIntent, Role

# (rule name, pattern) - any hit sets wants_examples
EXAMPLE_RULES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("explicit_request", re.compile(r"\b(show|give|provide|find|get|see)\s+(me\s+)?(an?\s+)?example")),
    ("example_of", re.compile(r"\bexample\s+(code|implementation|of)")),
    ("code_example", re.compile(r"\bcode\s+(example|sample|snippet)")),
    ("sample_code", re.compile(r"\bsample\s+(code|implementation)")),
    ("how_to_build", re.compile(r"\bhow\s+to\s+(implement|build|create|make|use|set\s*up)")),
    ("how_do_i_build", re.compile(r"\bhow\s+(do|can)\s+i\s+(implement|build|create|make|use)")),
    ("quickstart", re.compile(r"\bquick\s*start")),
    ("getting_started", re.compile(r"\bget(ting)?\s+started")),
    ("tutorial", re.compile(r"\btutorial")),
    ("walkthrough", re.compile(r"\bwalkthrough")),
    ("working_code", re.compile(r"\bworking\s+(code|example)")),
    ("code_that_works", re.compile(r"\bcode\s+that\s+works")),
    ("bare_example", re.compile(r"\bexamples?\b")),
)

# (rule name, pattern) - any hit sets wants_quickstart
QUICKSTART_RULES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("quickstart", re.compile(r"\bquick\s*start")),
    ("getting_started", re.compile(r"\bget(ting)?\s+started")),
    ("tutorial", re.compile(r"\btutorial")),
    ("walkthrough", re.compile(r"\bwalkthrough")),
    ("how_do_i_start", re.compile(r"\bhow\s+(do|can|should)\s+i\s+(start|begin)")),
    ("start_monetizing", re.compile(r"\bstart\s+monetiz")),
)

# First matching row wins: client signals, then server signals, then facilitator
ROLE_RULES: tuple[tuple[re.Pattern[str], Role], ...] = (
    (
        re.compile(r"\b(client|buyer|consumer|payer|making?\s+payments?|pay(ing)?)\b"),
        Role.CLIENT,
    ),
    (
        re.compile(
            r"\b(server|seller|provider|merchant|accept(ing)?\s+payments?|receiv(e|ing)\s+payments?)\b"
        ),
        Role.SERVER,
    ),
    (re.compile(r"\bfacilitator"), Role.FACILITATOR),
)

LANGUAGE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\b(typescript|ts|javascript|js|node(\.?js)?)\b"), "typescript"),
    (re.compile(r"\b(go|golang)\b"), "go"),
    (re.compile(r"\bpython\b"), "python"),
    (re.compile(r"\bjava\b"), "java"),
)

FRAMEWORK_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bfetch(\s+api)?\b"), "fetch"),
    (re.compile(r"\baxios\b"), "axios"),
    (re.compile(r"\bexpress(\.?js)?\b"), "express"),
    (re.compile(r"\bhono\b"), "hono"),
    (re.compile(r"\bnext(\.?js)\b|\bnextjs\b"), "nextjs"),
)

STOP_WORDS = frozenset({
    "a", "an", "the", "in", "on", "at", "to", "for", "of", "with",
    "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    "show", "give", "provide", "find", "get", "see",
    "me", "my", "i", "you", "your",
    "how", "what", "when", "where", "why", "which",
    "can", "could", "would", "should",
})

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def matches_any(rules: tuple[tuple[str, re.Pattern[str]], ...], text: str) -> bool:
    return any(pattern.search(text) for _, pattern in rules)


def first_match(rules, text: str):
    """Return the result of the first (pattern, result) row whose pattern matches."""
    for pattern, result in rules:
        if pattern.search(text):
            return result
    return None


def extract_keywords(lowered: str) -> list[str]:
    """Whitespace tokens stripped of punctuation, minus short tokens and stop words."""
    tokens = (_NON_ALNUM.sub("", word) for word in lowered.split())
    return [token for token in tokens if len(token) > 2 and token not in STOP_WORDS]


def analyze_query(query: str) -> QueryIntent:
    """
    Analyze a user query to determine retrieval intent.

    Args:
        query: Raw user question

    Returns:
        QueryIntent: Deterministic interpretation of the query
    """
    lowered = query.lower()
    return QueryIntent(
        wants_examples=matches_any(EXAMPLE_RULES, lowered),
        wants_quickstart=matches_any(QUICKSTART_RULES, lowered),
        role=first_match(ROLE_RULES, lowered),
        language=first_match(LANGUAGE_RULES, lowered),
        framework=first_match(FRAMEWORK_RULES, lowered),
        keywords=extract_keywords(lowered),
    )
