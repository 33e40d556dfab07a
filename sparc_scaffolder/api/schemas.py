"""Request/response schemas for the HTTP API

JSON on the wire is camelCase (generationTime, includeTests, aiProvider);
the Python side keeps snake_case field names.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sparc_scaffolder.processing.types import FeatureRequest
from sparc_scaffolder.sparc.types import SparcOutput


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FeatureRequestModel(CamelModel):
    """Schema for POST /api/generate

    description is optional here so that a blank or missing description
    gets its own error message instead of a generic schema error.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "description": "Create a blog application with user authentication",
                "complexity": "medium",
                "framework": "react",
                "includeTests": True,
                "includeDocs": True,
                "aiProvider": "openai",
            }
        },
    )

    description: Optional[str] = Field(default=None, description="Natural-language feature description")
    complexity: Literal["simple", "medium", "complex"] = "medium"
    framework: Literal["react", "vue", "angular", "svelte", "vanilla"] = "react"
    include_tests: bool = True
    include_docs: bool = True
    ai_provider: Literal["openai", "anthropic", "google"] = "openai"

    def to_feature_request(self) -> FeatureRequest:
        return FeatureRequest(
            description=self.description or "",
            complexity=self.complexity,
            framework=self.framework,
            include_tests=self.include_tests,
            include_docs=self.include_docs,
            ai_provider=self.ai_provider,
        )


class GeneratedFileModel(CamelModel):
    name: str
    content: str
    type: str


class SparcOutputResponse(CamelModel):
    """Schema for a successful generation"""

    files: list[GeneratedFileModel]
    specification: str
    architecture: str
    generation_time: int
    timestamp: str

    @classmethod
    def from_output(cls, output: SparcOutput) -> "SparcOutputResponse":
        return cls.model_validate(output.to_dict())


class ErrorResponse(CamelModel):
    error: str
    message: Optional[str] = None
    details: Optional[list] = None
    generation_time: Optional[int] = None


class ProviderInfo(CamelModel):
    id: str
    name: str
    available: bool


class ProvidersResponse(CamelModel):
    providers: list[ProviderInfo]


class HealthResponse(CamelModel):
    status: str
    timestamp: str
    version: str
