# sparc_scaffolder/sparc/synthesizer.py
"""Phase Synthesizer - renders one markdown document per SPARC phase.

Each phase has a dedicated builder keyed by SparcPhase. Builders only read
the StructuredSpec; boilerplate sections are fixed text.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Callable

from sparc_scaffolder.orchestrator.errors import SparcGenerationError
from sparc_scaffolder.processing.types import StructuredSpec
from sparc_scaffolder.sparc.complexity import DocumentComplexity, determine_complexity
from sparc_scaffolder.sparc.phases import PHASE_ORDER, SparcPhase
from sparc_scaffolder.sparc.types import SparcFile

logger = logging.getLogger(__name__)


FRONTEND_FRAMEWORKS = ("React", "Vue", "Angular")
BACKEND_RUNTIMES = ("Node.js", "Express")
DATABASES = ("PostgreSQL", "MySQL", "MongoDB")

TECHNOLOGY_DESCRIPTIONS = {
    "React": "Frontend user interface framework",
    "Node.js": "Backend JavaScript runtime",
    "PostgreSQL": "Relational database management system",
    "Redis": "In-memory data structure store for caching",
    "Docker": "Containerization platform",
    "Express": "Web application framework for Node.js",
}
DEFAULT_TECHNOLOGY_DESCRIPTION = "Technology component"

MICROSERVICE_REQUIREMENT_COUNT = 3


# =============================================================================
# HELPERS
# =============================================================================

def _strip_whitespace(text: str) -> str:
    return re.sub(r"\s+", "", text)


def _heading(phase: SparcPhase, spec: StructuredSpec) -> str:
    return f"# Phase {phase.number}: {phase.title} - {spec.project_name}"


def _bullets(items) -> list[str]:
    return [f"- {item}" for item in items]


def _first_of(candidates: tuple, available, default: str) -> str:
    for tech in available:
        if tech in candidates:
            return tech
    return default


def describe_technology(tech: str) -> str:
    return TECHNOLOGY_DESCRIPTIONS.get(tech, DEFAULT_TECHNOLOGY_DESCRIPTION)


def uses_microservices(spec: StructuredSpec) -> bool:
    """Architecture branches to microservices for complex specs."""
    return (
        determine_complexity(spec) == DocumentComplexity.HIGH
        or len(spec.requirements) > MICROSERVICE_REQUIREMENT_COUNT
    )


# =============================================================================
# PHASE BUILDERS
# =============================================================================

def build_specification(spec: StructuredSpec) -> str:
    lines = [_heading(SparcPhase.SPECIFICATION, spec), ""]

    lines.append("## Project Overview")
    lines.append(spec.description)
    lines.append("")

    lines.append("## Technology Stack")
    lines.extend(_bullets(spec.technologies.suggested))
    lines.append("")

    lines.append("## Core Functional Requirements")
    for index, feature in enumerate(spec.features, 1):
        lines.append(f"### FR{index}: {feature}")
        lines.append(f"- Implementation of {feature}")
        lines.append("- User interface components")
        lines.append("- Backend service integration")
        lines.append("")
    if not spec.features:
        lines.append("")

    lines.append("## Non-Functional Requirements")
    lines.extend(_bullets(spec.requirements))
    lines.append("")

    lines.append("## Technical Constraints")
    lines.extend(_bullets(spec.constraints))
    lines.append("")

    lines.append("## Acceptance Criteria")
    for index, criteria in enumerate(spec.acceptance_criteria, 1):
        lines.append(f"{index}. {criteria}")
    lines.append("")

    lines.append("## Success Metrics")
    lines.append("- User satisfaction rating > 4.0/5.0")
    lines.append("- System uptime > 99.9%")
    lines.append("- Response time < 200ms for critical operations")
    lines.append("- Security compliance with industry standards")
    lines.append("")

    return "\n".join(lines)


def build_pseudocode(spec: StructuredSpec) -> str:
    lines = [_heading(SparcPhase.PSEUDOCODE, spec), ""]

    lines.append("## Core Algorithm Design")
    lines.append("")
    for feature in spec.features:
        lines.append(f"### {feature} Flow")
        lines.append("```")
        lines.append(f"FUNCTION handle{_strip_whitespace(feature)}():")
        lines.append("  BEGIN")
        lines.append("    VALIDATE user input")
        lines.append("    AUTHENTICATE user session")
        lines.append("    PROCESS business logic")
        lines.append("    UPDATE data store")
        lines.append("    RETURN success response")
        lines.append("  END")
        lines.append("```")
        lines.append("")

    lines.append("## Data Structures")
    lines.append("```")
    lines.append("STRUCTURE User:")
    lines.append("  id: INTEGER")
    lines.append("  username: STRING")
    lines.append("  email: STRING")
    lines.append("  createdAt: TIMESTAMP")
    lines.append("")
    lines.append(f"STRUCTURE {_strip_whitespace(spec.project_name)}Data:")
    lines.append("  id: INTEGER")
    lines.append("  userId: INTEGER (FK)")
    lines.append("  content: JSON")
    lines.append("  updatedAt: TIMESTAMP")
    lines.append("```")
    lines.append("")

    lines.append("## Error Handling")
    lines.append("```")
    lines.append("FUNCTION handleError(error):")
    lines.append("  LOG error details")
    lines.append('  IF error.type == "VALIDATION":')
    lines.append("    RETURN user-friendly message")
    lines.append('  ELSE IF error.type == "AUTH":')
    lines.append("    REDIRECT to login")
    lines.append("  ELSE:")
    lines.append("    RETURN generic error message")
    lines.append("```")
    lines.append("")

    return "\n".join(lines)


def build_architecture_diagram(spec: StructuredSpec) -> list[str]:
    """Diagram-as-text: frontend, gateway, services, then optional cache and database."""
    suggested = spec.technologies.suggested

    lines = ["```"]
    lines.append(f"Frontend ({_first_of(FRONTEND_FRAMEWORKS, suggested, 'React')})")
    lines.append("    ↓")
    lines.append("API Gateway")
    lines.append("    ↓")

    if uses_microservices(spec):
        lines.append("Microservices Architecture")
        lines.append("    ├── Auth Service")
        lines.append("    ├── Core Service")
        lines.append("    └── Notification Service")
    else:
        lines.append(f"Backend Service ({_first_of(BACKEND_RUNTIMES, suggested, 'Node.js')})")

    if "Redis" in suggested:
        lines.append("    ↓")
        lines.append("Cache Layer (Redis)")

    if any(tech in DATABASES for tech in suggested):
        lines.append("    ↓")
        lines.append(f"Database ({_first_of(DATABASES, suggested, 'PostgreSQL')})")

    lines.append("```")
    return lines


def build_architecture(spec: StructuredSpec) -> str:
    lines = [_heading(SparcPhase.ARCHITECTURE, spec), ""]

    lines.append("## System Architecture")
    lines.extend(build_architecture_diagram(spec))
    lines.append("")

    lines.append("## Component Structure")
    for tech in spec.technologies.suggested:
        lines.append(f"- {tech}: {describe_technology(tech)}")
    lines.append("")

    lines.append("## Security Architecture")
    lines.append("- Authentication: JWT tokens with refresh mechanism")
    lines.append("- Authorization: Role-based access control (RBAC)")
    lines.append("- Data encryption: AES-256 for sensitive data")
    lines.append("- API security: Rate limiting, input validation, CORS")
    lines.append("")

    lines.append("## Scalability Considerations")
    lines.append("- Horizontal scaling capability")
    lines.append("- Database connection pooling")
    lines.append("- Caching strategy for frequently accessed data")
    lines.append("- Load balancing across service instances")
    lines.append("")

    return "\n".join(lines)


def build_refinement(spec: StructuredSpec) -> str:
    lines = [_heading(SparcPhase.REFINEMENT, spec), ""]

    lines.append("## Test-Driven Development Plan")
    lines.append("1. Write unit tests for core business logic")
    lines.append("2. Create integration tests for API endpoints")
    lines.append("3. Develop end-to-end tests for user workflows")
    lines.append("4. Implement components to pass tests")
    lines.append("5. Refactor for performance and maintainability")
    lines.append("")

    lines.append("## Testing Strategy")
    lines.append("### Unit Tests (Target: 90% coverage)")
    for feature in spec.features:
        lines.append(f"- {feature} service tests")
        lines.append(f"- {feature} validation tests")
        lines.append(f"- {feature} error handling tests")
    lines.append("")

    lines.append("### Integration Tests")
    for feature in spec.features:
        lines.append(f"- {feature} API endpoint tests")
        lines.append(f"- {feature} database interaction tests")
    lines.append("")

    lines.append("### End-to-End Tests")
    for feature in spec.features:
        lines.append(f"- {feature} user workflow tests")
    lines.append("")

    lines.append("## Performance Optimization")
    lines.append("- Database query optimization")
    lines.append("- Implement caching for frequently accessed data")
    lines.append("- API response compression")
    lines.append("- Frontend bundle optimization")
    lines.append("- Image and asset optimization")
    lines.append("")

    lines.append("## Code Quality Standards")
    lines.append("- ESLint configuration for consistent code style")
    lines.append("- Prettier for automatic code formatting")
    lines.append("- TypeScript for type safety")
    lines.append("- Code review process requirements")
    lines.append("- Pre-commit hooks for quality checks")
    lines.append("")

    lines.append("## Monitoring and Logging")
    lines.append("- Application performance monitoring (APM)")
    lines.append("- Error tracking and alerting")
    lines.append("- User activity analytics")
    lines.append("- System health metrics")
    lines.append("- Audit trail for critical operations")
    lines.append("")

    return "\n".join(lines)


def build_completion(spec: StructuredSpec) -> str:
    lines = [_heading(SparcPhase.COMPLETION, spec), ""]

    lines.append("## Deployment Strategy")
    lines.append("### Environment Setup")
    lines.append("- Development: Local development with hot reload")
    lines.append("- Staging: Production-like environment for testing")
    lines.append("- Production: High-availability deployment")
    lines.append("")
    lines.append("### CI/CD Pipeline")
    lines.append("1. Code commit triggers automated tests")
    lines.append("2. Build and package application")
    lines.append("3. Deploy to staging environment")
    lines.append("4. Run integration and E2E tests")
    lines.append("5. Deploy to production with blue-green strategy")
    lines.append("")
    lines.append("### Infrastructure")
    lines.append("- Containerization with Docker")
    lines.append("- Orchestration with Kubernetes (if complex) or Docker Compose")
    lines.append("- Cloud deployment (AWS/Azure/GCP)")
    lines.append("- Database backup and recovery procedures")
    lines.append("")

    lines.append("## Documentation")
    lines.append("### Technical Documentation")
    lines.append("- API documentation with OpenAPI/Swagger")
    lines.append("- Database schema documentation")
    lines.append("- Architecture decision records (ADRs)")
    lines.append("- Deployment and operations guide")
    lines.append("")
    lines.append("### User Documentation")
    lines.append(f"- User guide for {spec.project_name.lower()}")
    lines.append("- FAQ and troubleshooting guide")
    lines.append("- Feature tutorials and walkthroughs")
    lines.append("- Getting started guide")
    lines.append("")

    lines.append("## Maintenance and Support")
    lines.append("### Monitoring")
    lines.append("- Application performance metrics")
    lines.append("- Error rate monitoring")
    lines.append("- User engagement analytics")
    lines.append("- System resource utilization")
    lines.append("")
    lines.append("### Updates and Maintenance")
    lines.append("- Regular security updates")
    lines.append("- Feature enhancement roadmap")
    lines.append("- Bug fix prioritization process")
    lines.append("- User feedback integration")
    lines.append("")

    lines.append("## Success Criteria Validation")
    for index, criteria in enumerate(spec.acceptance_criteria, 1):
        lines.append(f"{index}. ✅ {criteria}")
    lines.append("")

    lines.append("## Project Handover")
    lines.append("- Code repository access and permissions")
    lines.append("- Documentation and knowledge transfer")
    lines.append("- Support contact information")
    lines.append("- Maintenance schedule and procedures")
    lines.append("")

    return "\n".join(lines)


PHASE_BUILDERS: dict[SparcPhase, Callable[[StructuredSpec], str]] = {
    SparcPhase.SPECIFICATION: build_specification,
    SparcPhase.PSEUDOCODE: build_pseudocode,
    SparcPhase.ARCHITECTURE: build_architecture,
    SparcPhase.REFINEMENT: build_refinement,
    SparcPhase.COMPLETION: build_completion,
}

_missing_builders = set(SparcPhase) - set(PHASE_BUILDERS)
if _missing_builders:
    raise RuntimeError(f"No builder for phases: {sorted(p.value for p in _missing_builders)}")


# =============================================================================
# SYNTHESIZER
# =============================================================================

class PhaseSynthesizer:
    """Renders SPARC documents from a StructuredSpec."""

    def __init__(self, builders: dict = None):
        self.builders = dict(builders or PHASE_BUILDERS)

    def generate_phase(self, phase, spec: StructuredSpec) -> SparcFile:
        """Render one phase.

        Args:
            phase: SparcPhase or its string value

        Raises:
            InvalidPhaseError: if phase names no SPARC phase
        """
        phase = SparcPhase.from_string(phase)
        content = self.builders[phase](spec)

        return SparcFile(
            phase=phase,
            content=content,
            metadata={
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "project_name": spec.project_name,
                "complexity": determine_complexity(spec).value,
                "phase": phase.value,
                "technologies": list(spec.technologies.suggested),
            },
        )

    def generate_all_phases(self, spec: StructuredSpec) -> list[SparcFile]:
        """Render all five phases in order; all or nothing.

        Raises:
            SparcGenerationError: if any phase fails, chained to the cause
        """
        try:
            return [self.generate_phase(phase, spec) for phase in PHASE_ORDER]
        except Exception as e:
            logger.error(f"SPARC synthesis failed: {type(e).__name__}: {e}")
            raise SparcGenerationError() from e


_default_synthesizer = PhaseSynthesizer()


def generate_phase(phase, spec: StructuredSpec) -> SparcFile:
    return _default_synthesizer.generate_phase(phase, spec)


def generate_all_phases(spec: StructuredSpec) -> list[SparcFile]:
    return _default_synthesizer.generate_all_phases(spec)
