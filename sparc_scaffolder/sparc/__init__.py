"""SPARC document synthesis and scaffold emission."""

from sparc_scaffolder.sparc.phases import PHASE_ORDER, SparcPhase
from sparc_scaffolder.sparc.complexity import DocumentComplexity, determine_complexity
from sparc_scaffolder.sparc.synthesizer import PhaseSynthesizer, generate_all_phases, generate_phase
from sparc_scaffolder.sparc.scaffold import Framework, ScaffoldEmitter
from sparc_scaffolder.sparc.generator import SparcGenerator
from sparc_scaffolder.sparc.types import GeneratedFile, SparcFile, SparcOutput

__all__ = [
    "PHASE_ORDER",
    "SparcPhase",
    "DocumentComplexity",
    "determine_complexity",
    "PhaseSynthesizer",
    "generate_all_phases",
    "generate_phase",
    "Framework",
    "ScaffoldEmitter",
    "SparcGenerator",
    "GeneratedFile",
    "SparcFile",
    "SparcOutput",
]
