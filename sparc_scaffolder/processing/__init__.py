"""Input processing: sanitize, validate, extract, categorize, build the structured spec."""

from sparc_scaffolder.processing.sanitizer import sanitize
from sparc_scaffolder.processing.validator import validate_input
from sparc_scaffolder.processing.extractor import KeywordTables, extract_entities
from sparc_scaffolder.processing.categorizer import categorize_project
from sparc_scaffolder.processing.spec_builder import InputProcessor, generate_structured_spec
from sparc_scaffolder.processing.types import (
    CategoryComplexity,
    ExtractedEntities,
    FeatureRequest,
    ProcessedInput,
    ProjectCategory,
    ProjectType,
    RequestMetadata,
    StructuredSpec,
    ValidationResult,
)

__all__ = [
    "sanitize",
    "validate_input",
    "KeywordTables",
    "extract_entities",
    "categorize_project",
    "InputProcessor",
    "generate_structured_spec",
    "CategoryComplexity",
    "ExtractedEntities",
    "FeatureRequest",
    "ProcessedInput",
    "ProjectCategory",
    "ProjectType",
    "RequestMetadata",
    "StructuredSpec",
    "ValidationResult",
]
