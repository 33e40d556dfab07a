# sparc_scaffolder/processing/spec_builder.py
"""Assemble a StructuredSpec from extracted entities and the project category."""

import logging
from dataclasses import replace
from typing import Optional

from sparc_scaffolder.config import ScaffolderConfig
from sparc_scaffolder.orchestrator.errors import SpecGenerationError
from sparc_scaffolder.processing.categorizer import categorize_project
from sparc_scaffolder.processing.extractor import DEFAULT_TABLES, KeywordTables, extract_entities
from sparc_scaffolder.processing.types import (
    CategoryComplexity,
    EstimatedTimeline,
    ExtractedEntities,
    FeatureRequest,
    ProcessedInput,
    ProjectCategory,
    StructuredSpec,
    TechnologySuggestions,
)
from sparc_scaffolder.processing.validator import validate_input

logger = logging.getLogger(__name__)

# Evaluated in order, first hit names the project
PROJECT_NAMES = (
    ("blog", "Blog Application"),
    ("e-commerce", "E-commerce Platform"),
    ("todo", "Todo Application"),
    ("trading", "Trading Platform"),
)
DEFAULT_PROJECT_NAME = "Web Application"

BASE_TECHNOLOGIES = ("React", "Node.js")
SCALE_TECHNOLOGIES = ("PostgreSQL", "Redis")

TIMELINE_PHASES = ("Planning", "Development", "Testing", "Deployment")
TIMELINE_WEEKS = {
    CategoryComplexity.LOW: 2,
    CategoryComplexity.MEDIUM: 8,
    CategoryComplexity.HIGH: 16,
    CategoryComplexity.ENTERPRISE: 24,
}

DESCRIPTION_PREFIX = "A comprehensive application featuring "
NO_FEATURES_DESCRIPTION = "core web application functionality"


def extract_project_name(text: str) -> str:
    lower_text = text.lower()
    for keyword, name in PROJECT_NAMES:
        if keyword in lower_text:
            return name
    return DEFAULT_PROJECT_NAME


def generate_description(entities: ExtractedEntities) -> str:
    if not entities.features:
        return DESCRIPTION_PREFIX + NO_FEATURES_DESCRIPTION
    return DESCRIPTION_PREFIX + ", ".join(entities.features)


def suggest_technologies(category: ProjectCategory, entities: ExtractedEntities) -> list[str]:
    """Base stack, scale stack for high/enterprise, then mentioned technologies; deduplicated."""
    suggested = list(BASE_TECHNOLOGIES)
    if category.complexity in (CategoryComplexity.HIGH, CategoryComplexity.ENTERPRISE):
        suggested.extend(SCALE_TECHNOLOGIES)
    suggested.extend(entities.technologies)
    return list(dict.fromkeys(suggested))


def generate_acceptance_criteria(entities: ExtractedEntities) -> list[str]:
    return [f"User should be able to use {feature} successfully" for feature in entities.features]


def estimate_timeline(category: ProjectCategory) -> EstimatedTimeline:
    return EstimatedTimeline(
        phases=TIMELINE_PHASES,
        total_weeks=TIMELINE_WEEKS[category.complexity],
    )


def generate_structured_spec(text: str, tables: KeywordTables = DEFAULT_TABLES) -> StructuredSpec:
    """Build the structured spec for a description.

    Raises:
        SpecGenerationError: on any internal failure; the original exception
            is kept as __cause__.
    """
    try:
        entities = extract_entities(text, tables)
        category = categorize_project(text)

        return StructuredSpec(
            project_name=extract_project_name(text),
            description=generate_description(entities),
            features=tuple(entities.features),
            technologies=TechnologySuggestions(
                suggested=tuple(suggest_technologies(category, entities)),
                alternatives=(),
            ),
            requirements=tuple(entities.requirements),
            constraints=tuple(entities.constraints),
            acceptance_criteria=tuple(generate_acceptance_criteria(entities)),
            estimated_timeline=estimate_timeline(category),
        )
    except Exception as e:
        logger.error(f"Structured spec generation failed: {type(e).__name__}: {e}")
        raise SpecGenerationError() from e


class InputProcessor:
    """Validates a feature request and turns it into an annotated StructuredSpec."""

    def __init__(
        self,
        config: Optional[ScaffolderConfig] = None,
        tables: KeywordTables = DEFAULT_TABLES,
    ):
        self.config = config or ScaffolderConfig()
        self.tables = tables

    def validate(self, text: str):
        return validate_input(
            text,
            min_length=self.config.min_input_length,
            max_length=self.config.max_input_length,
        )

    def build_spec(self, text: str) -> StructuredSpec:
        return generate_structured_spec(text, self.tables)

    def process(self, request: FeatureRequest) -> ProcessedInput:
        """Validate and build. Invalid input is reported, never raised."""
        validation = self.validate(request.description)
        if not validation.is_valid:
            return ProcessedInput(is_valid=False, errors=validation.errors)

        try:
            spec = self.build_spec(request.description)
        except SpecGenerationError as e:
            return ProcessedInput(is_valid=False, errors=[f"Processing failed: {e}"])

        return ProcessedInput(
            is_valid=True,
            spec=replace(spec, request_metadata=request.metadata()),
        )
