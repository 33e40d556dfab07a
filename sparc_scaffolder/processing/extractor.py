# sparc_scaffolder/processing/extractor.py
"""Keyword-table entity extraction.

Pure substring containment on the lower-cased input: a keyword contributes
iff it appears verbatim. Output follows table order and uses each table's
canonical casing ("node.js" in the text yields "Node.js").
"""

from dataclasses import dataclass, field

from sparc_scaffolder.processing.types import ExtractedEntities


# =============================================================================
# KEYWORD TABLES
# =============================================================================

# keyword -> canonical output
FEATURE_KEYWORDS = {
    "blog application": "blog application",
    "user authentication": "user authentication",
    "todo app": "todo app",
}

TECHNOLOGY_KEYWORDS = {
    "node.js": "Node.js",
    "postgresql": "PostgreSQL",
    "redis": "Redis",
    "docker": "Docker",
    "react": "React",
}

REQUIREMENT_KEYWORDS = {
    "user registration": "user registration",
    "product catalog": "product catalog",
    "payment processing": "payment processing",
    "shopping cart": "shopping cart",
    "order management": "order management",
    "admin dashboard": "admin dashboard",
    "email notifications": "email notifications",
    "mobile responsive": "mobile responsive",
    "seo optimization": "seo optimization",
    "analytics integration": "analytics integration",
}

CONSTRAINT_KEYWORDS = {
    "< 10ms latency": "< 10ms latency",
    "multi-factor authentication": "Multi-factor authentication",
}


@dataclass(frozen=True)
class KeywordTables:
    """The four lookup tables. Keys must be lower-case."""

    features: dict = field(default_factory=lambda: dict(FEATURE_KEYWORDS))
    technologies: dict = field(default_factory=lambda: dict(TECHNOLOGY_KEYWORDS))
    requirements: dict = field(default_factory=lambda: dict(REQUIREMENT_KEYWORDS))
    constraints: dict = field(default_factory=lambda: dict(CONSTRAINT_KEYWORDS))


DEFAULT_TABLES = KeywordTables()


def _scan(lower_text: str, table: dict) -> list[str]:
    return [canonical for keyword, canonical in table.items() if keyword in lower_text]


def extract_entities(text: str, tables: KeywordTables = DEFAULT_TABLES) -> ExtractedEntities:
    """Scan text against the keyword tables."""
    lower_text = text.lower()
    return ExtractedEntities(
        features=_scan(lower_text, tables.features),
        technologies=_scan(lower_text, tables.technologies),
        requirements=_scan(lower_text, tables.requirements),
        constraints=_scan(lower_text, tables.constraints),
    )
