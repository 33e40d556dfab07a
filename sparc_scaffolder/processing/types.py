# sparc_scaffolder/processing/types.py
"""Data types produced by input processing."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ProjectType(Enum):
    """Coarse project categories."""

    WEB_APPLICATION = "web-application"
    E_COMMERCE = "e-commerce"
    MICROSERVICES = "microservices"
    UTILITY = "utility"


class CategoryComplexity(Enum):
    """Complexity assigned by the categorizer (drives timeline and stack)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    ENTERPRISE = "enterprise"


@dataclass
class ValidationResult:
    """Outcome of validating a raw description."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    sanitized_input: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "sanitized_input": self.sanitized_input,
        }


@dataclass
class ExtractedEntities:
    """Keyword-table matches found in a description."""

    features: list[str] = field(default_factory=list)
    technologies: list[str] = field(default_factory=list)
    requirements: list[str] = field(default_factory=list)
    constraints: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "features": list(self.features),
            "technologies": list(self.technologies),
            "requirements": list(self.requirements),
            "constraints": list(self.constraints),
        }


@dataclass(frozen=True)
class ProjectCategory:
    """Project type plus category complexity."""

    type: ProjectType
    complexity: CategoryComplexity

    def to_dict(self) -> dict:
        return {"type": self.type.value, "complexity": self.complexity.value}


@dataclass(frozen=True)
class TechnologySuggestions:
    suggested: tuple[str, ...] = ()
    alternatives: tuple[str, ...] = ()


@dataclass(frozen=True)
class EstimatedTimeline:
    phases: tuple[str, ...] = ()
    total_weeks: int = 0


@dataclass(frozen=True)
class RequestMetadata:
    """Options from a full feature request, carried alongside the StructuredSpec."""

    complexity: str = "medium"
    framework: str = "react"
    include_tests: bool = True
    include_docs: bool = True
    ai_provider: str = "openai"

    def to_dict(self) -> dict:
        return {
            "complexity": self.complexity,
            "framework": self.framework,
            "include_tests": self.include_tests,
            "include_docs": self.include_docs,
            "ai_provider": self.ai_provider,
        }


@dataclass(frozen=True)
class StructuredSpec:
    """The canonical mid-pipeline artifact. Immutable once built."""

    project_name: str
    description: str
    features: tuple[str, ...] = ()
    technologies: TechnologySuggestions = field(default_factory=TechnologySuggestions)
    requirements: tuple[str, ...] = ()
    constraints: tuple[str, ...] = ()
    acceptance_criteria: tuple[str, ...] = ()
    estimated_timeline: EstimatedTimeline = field(default_factory=EstimatedTimeline)
    request_metadata: Optional[RequestMetadata] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {
            "project_name": self.project_name,
            "description": self.description,
            "features": list(self.features),
            "technologies": {
                "suggested": list(self.technologies.suggested),
                "alternatives": list(self.technologies.alternatives),
            },
            "requirements": list(self.requirements),
            "constraints": list(self.constraints),
            "acceptance_criteria": list(self.acceptance_criteria),
            "estimated_timeline": {
                "phases": list(self.estimated_timeline.phases),
                "total_weeks": self.estimated_timeline.total_weeks,
            },
        }
        if self.request_metadata is not None:
            data["request_metadata"] = self.request_metadata.to_dict()
        return data


@dataclass
class FeatureRequest:
    """A full generation request as handed over by the HTTP/CLI layers."""

    description: str
    complexity: str = "medium"
    framework: str = "react"
    include_tests: bool = True
    include_docs: bool = True
    ai_provider: str = "openai"

    def metadata(self) -> RequestMetadata:
        return RequestMetadata(
            complexity=self.complexity,
            framework=self.framework,
            include_tests=self.include_tests,
            include_docs=self.include_docs,
            ai_provider=self.ai_provider,
        )


@dataclass
class ProcessedInput:
    """Result of InputProcessor.process: a spec, or the reasons there is none."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    spec: Optional[StructuredSpec] = None
