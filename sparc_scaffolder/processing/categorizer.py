# sparc_scaffolder/processing/categorizer.py
"""Map a description to a coarse (type, complexity) category."""

from sparc_scaffolder.processing.types import CategoryComplexity, ProjectCategory, ProjectType

E_COMMERCE_KEYWORDS = ("e-commerce", "shopping", "payment")
MICROSERVICES_KEYWORDS = ("microservices", "financial trading")
UTILITY_KEYWORD = "todo"
UTILITY_MAX_LENGTH = 50

DEFAULT_CATEGORY = ProjectCategory(ProjectType.WEB_APPLICATION, CategoryComplexity.MEDIUM)


def categorize_project(text: str) -> ProjectCategory:
    """Evaluate the category rules in order; the first match wins."""
    lower_text = text.lower()

    if any(kw in lower_text for kw in E_COMMERCE_KEYWORDS):
        return ProjectCategory(ProjectType.E_COMMERCE, CategoryComplexity.HIGH)

    if any(kw in lower_text for kw in MICROSERVICES_KEYWORDS):
        return ProjectCategory(ProjectType.MICROSERVICES, CategoryComplexity.ENTERPRISE)

    if UTILITY_KEYWORD in lower_text and len(lower_text) < UTILITY_MAX_LENGTH:
        return ProjectCategory(ProjectType.UTILITY, CategoryComplexity.LOW)

    return DEFAULT_CATEGORY
