"""MCP tool implementations for SPARC generation."""

from typing import Optional

from sparc_scaffolder.agents.content_service import list_providers
from sparc_scaffolder.config import ScaffolderConfig
from sparc_scaffolder.orchestrator.errors import InvalidPhaseError
from sparc_scaffolder.orchestrator.orchestrator import GenerationOrchestrator
from sparc_scaffolder.processing.categorizer import categorize_project
from sparc_scaffolder.processing.extractor import extract_entities
from sparc_scaffolder.processing.spec_builder import generate_structured_spec
from sparc_scaffolder.processing.types import FeatureRequest
from sparc_scaffolder.processing.validator import validate_input
from sparc_scaffolder.sparc.complexity import determine_complexity
from sparc_scaffolder.sparc.phases import PHASE_ORDER
from sparc_scaffolder.sparc.synthesizer import generate_phase


def validate_description(description: str) -> dict:
    """
    Validate a feature description.

    Returns is_valid, the ordered error list and the sanitized text.
    """
    return validate_input(description).to_dict()


def analyze_description(description: str) -> dict:
    """
    Extract entities, category and the structured spec for a description.
    """
    validation = validate_input(description)
    if not validation.is_valid:
        return {"success": False, "errors": validation.errors}

    spec = generate_structured_spec(description)
    return {
        "success": True,
        "entities": extract_entities(description).to_dict(),
        "category": categorize_project(description).to_dict(),
        "document_complexity": determine_complexity(spec).value,
        "spec": spec.to_dict(),
    }


def generate_sparc_phase(phase: str, description: str) -> dict:
    """
    Generate a single SPARC phase document.

    Args:
        phase: One of specification, pseudocode, architecture, refinement, completion
        description: The feature description
    """
    validation = validate_input(description)
    if not validation.is_valid:
        return {"success": False, "errors": validation.errors}

    try:
        sparc_file = generate_phase(phase, generate_structured_spec(description))
    except InvalidPhaseError as e:
        return {
            "success": False,
            "error": str(e),
            "valid_phases": [p.value for p in PHASE_ORDER],
        }

    return {"success": True, **sparc_file.to_dict()}


async def generate_sparc(
    description: str,
    framework: str = "react",
    include_tests: bool = True,
    include_docs: bool = True,
    complexity: str = "medium",
    ai_provider: str = "openai",
    config: Optional[ScaffolderConfig] = None,
) -> dict:
    """
    Generate the full bundle: five SPARC documents plus scaffold files.

    Args:
        description: The feature description
        framework: react, vue, angular, svelte or vanilla
        include_tests: Emit test scaffolding
        include_docs: Emit README.md and CONTRIBUTING.md
    """
    orchestrator = GenerationOrchestrator(config or ScaffolderConfig.from_env())
    result = await orchestrator.generate(FeatureRequest(
        description=description,
        complexity=complexity,
        framework=framework,
        include_tests=include_tests,
        include_docs=include_docs,
        ai_provider=ai_provider,
    ))

    if result.errors:
        return {"success": False, "errors": result.errors}
    if not result.success:
        return {"success": False, "error": result.error}

    return {"success": True, **result.output.to_dict()}


def list_providers_tool(config: Optional[ScaffolderConfig] = None) -> dict:
    """List content providers and whether their credentials are configured."""
    return {"providers": list_providers(config or ScaffolderConfig.from_env())}
