# sparc_scaffolder/sparc/phases.py
"""The five SPARC phases, in their fixed order."""

from enum import Enum

from sparc_scaffolder.orchestrator.errors import InvalidPhaseError


class SparcPhase(Enum):
    """SPARC phases. Declaration order is document order."""

    SPECIFICATION = "specification"
    PSEUDOCODE = "pseudocode"
    ARCHITECTURE = "architecture"
    REFINEMENT = "refinement"
    COMPLETION = "completion"

    @classmethod
    def from_string(cls, value) -> "SparcPhase":
        """Convert a string (or phase) to SparcPhase.

        Raises:
            InvalidPhaseError: if the value names no phase.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.lower().strip()
            for member in cls:
                if member.value == normalized:
                    return member
        raise InvalidPhaseError(phase=str(value))

    @property
    def number(self) -> int:
        """1-based position in the fixed order."""
        return PHASE_ORDER.index(self) + 1

    @property
    def title(self) -> str:
        return self.value.capitalize()


PHASE_ORDER = tuple(SparcPhase)
