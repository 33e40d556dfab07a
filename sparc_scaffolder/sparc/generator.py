# sparc_scaffolder/sparc/generator.py
"""SPARC bundle generation - documents plus scaffold files."""

import logging
from typing import Optional

from sparc_scaffolder.processing.types import StructuredSpec
from sparc_scaffolder.sparc.phases import SparcPhase
from sparc_scaffolder.sparc.scaffold import Framework, ScaffoldEmitter
from sparc_scaffolder.sparc.synthesizer import PhaseSynthesizer
from sparc_scaffolder.sparc.types import GeneratedFile, SparcFile, SparcOutput

logger = logging.getLogger(__name__)

DEFAULT_FRAMEWORK = Framework.REACT


class SparcGenerator:
    """
    Builds the SparcOutput bundle for a StructuredSpec.

    Flow:
    1. Synthesize the five SPARC documents (all or nothing)
    2. Add them as {phase}.md documentation files
    3. Emit framework, test and doc scaffolding per the request metadata

    generation_time and timestamp are left for the caller to stamp.
    """

    def __init__(
        self,
        synthesizer: Optional[PhaseSynthesizer] = None,
        emitter: Optional[ScaffoldEmitter] = None,
    ):
        self.synthesizer = synthesizer or PhaseSynthesizer()
        self.emitter = emitter or ScaffoldEmitter()

    def generate(self, spec: StructuredSpec) -> SparcOutput:
        sparc_files = self.synthesizer.generate_all_phases(spec)
        return self.assemble(sparc_files, spec)

    def assemble(self, sparc_files: list[SparcFile], spec: StructuredSpec) -> SparcOutput:
        """Combine already-synthesized documents with scaffold files."""
        output = SparcOutput()

        for sparc_file in sparc_files:
            if sparc_file.phase == SparcPhase.SPECIFICATION:
                output.specification = sparc_file.content
            elif sparc_file.phase == SparcPhase.ARCHITECTURE:
                output.architecture = sparc_file.content
            output.files.append(
                GeneratedFile(sparc_file.file_name, sparc_file.content, "documentation")
            )

        metadata = spec.request_metadata
        framework = metadata.framework if metadata else DEFAULT_FRAMEWORK

        scaffold = self.emitter.emit(framework, spec)
        output.files.extend(scaffold)

        logger.info(
            f"Assembled {len(output.files)} files for {spec.project_name} "
            f"({len(sparc_files)} SPARC documents, {len(scaffold)} scaffold files)"
        )
        return output
