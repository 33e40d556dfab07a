# sparc_scaffolder/sparc/types.py
"""Output records for SPARC documents and generated bundles."""

from dataclasses import dataclass, field

from sparc_scaffolder.sparc.phases import SparcPhase


@dataclass
class SparcFile:
    """One synthesized SPARC document."""

    phase: SparcPhase
    content: str
    metadata: dict = field(default_factory=dict)

    @property
    def file_name(self) -> str:
        return f"{self.phase.value}.md"

    def to_dict(self) -> dict:
        return {
            "phase": self.phase.value,
            "content": self.content,
            "metadata": dict(self.metadata),
        }


@dataclass
class GeneratedFile:
    """A named text file in the returned bundle."""

    name: str
    content: str
    type: str

    def to_dict(self) -> dict:
        return {"name": self.name, "content": self.content, "type": self.type}


@dataclass
class SparcOutput:
    """The bundle returned across the system boundary.

    generation_time is in milliseconds; timestamp is ISO-8601 UTC.
    """

    files: list[GeneratedFile] = field(default_factory=list)
    specification: str = ""
    architecture: str = ""
    generation_time: int = 0
    timestamp: str = ""

    def to_dict(self) -> dict:
        return {
            "files": [f.to_dict() for f in self.files],
            "specification": self.specification,
            "architecture": self.architecture,
            "generation_time": self.generation_time,
            "timestamp": self.timestamp,
        }
