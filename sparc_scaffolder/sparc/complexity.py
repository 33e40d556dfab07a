# sparc_scaffolder/sparc/complexity.py
"""Document complexity, derived from feature/requirement/constraint counts.

Independent of the categorizer's complexity: this one drives SPARC file
metadata and the architecture diagram branch.
"""

from enum import Enum

from sparc_scaffolder.processing.types import StructuredSpec

LOW_MAX_FEATURES = 2
MEDIUM_MAX_FEATURES = 5
COMPLEX_REQUIREMENT_COUNT = 3
COMPLEX_CONSTRAINT_COUNT = 1


class DocumentComplexity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def has_complex_features(spec: StructuredSpec) -> bool:
    return (
        len(spec.requirements) > COMPLEX_REQUIREMENT_COUNT
        or len(spec.constraints) > COMPLEX_CONSTRAINT_COUNT
    )


def determine_complexity(spec: StructuredSpec) -> DocumentComplexity:
    feature_count = len(spec.features)
    complex_features = has_complex_features(spec)

    if feature_count <= LOW_MAX_FEATURES and not complex_features:
        return DocumentComplexity.LOW
    if feature_count <= MEDIUM_MAX_FEATURES and not complex_features:
        return DocumentComplexity.MEDIUM
    return DocumentComplexity.HIGH
