# sparc_scaffolder/orchestrator/orchestrator.py
"""Generation Orchestrator - coordinates a request through the SPARC pipeline."""

import logging
import time
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from sparc_scaffolder.agents.content_service import ContentService
from sparc_scaffolder.agents.prompts import load_prompt
from sparc_scaffolder.config import ScaffolderConfig
from sparc_scaffolder.orchestrator.errors import ConfigurationError, ScaffolderError
from sparc_scaffolder.orchestrator.logging import PipelineLogger
from sparc_scaffolder.processing.spec_builder import InputProcessor
from sparc_scaffolder.processing.types import FeatureRequest, StructuredSpec
from sparc_scaffolder.sparc.generator import SparcGenerator
from sparc_scaffolder.sparc.types import SparcFile, SparcOutput

logger = logging.getLogger(__name__)

ELABORATION_HEADING = "## AI Elaboration"


@dataclass
class GenerationResult:
    """Outcome of one generation request.

    errors holds validation problems with the input. error is set when the
    pipeline itself failed; internal marks failures outside ScaffolderError.
    """

    success: bool
    output: Optional[SparcOutput] = None
    errors: list[str] = field(default_factory=list)
    error: Optional[str] = None
    internal: bool = False
    generation_time: int = 0
    request_id: str = ""


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


class GenerationOrchestrator:
    """
    Runs a FeatureRequest through the pipeline.

    Flow:
    1. Validate the description and build the structured spec
    2. Synthesize the five SPARC documents
    3. Optionally append provider elaboration to each document
    4. Assemble documents and scaffold files into a SparcOutput
    5. Stamp generation time and timestamp
    """

    def __init__(
        self,
        config: Optional[ScaffolderConfig] = None,
        processor: Optional[InputProcessor] = None,
        generator: Optional[SparcGenerator] = None,
        content_service: Optional[ContentService] = None,
    ):
        self.config = config or ScaffolderConfig()
        self.processor = processor or InputProcessor(self.config)
        self.generator = generator or SparcGenerator()
        self.content_service = content_service
        self.logger = PipelineLogger()

    async def generate(self, request: FeatureRequest) -> GenerationResult:
        request_id = str(uuid.uuid4())
        start = time.monotonic()
        self.logger.generation_started(request_id, request.framework, len(request.description or ""))

        processed = self.processor.process(request)
        if not processed.is_valid:
            self.logger.validation_failed(request_id, processed.errors)
            return GenerationResult(
                success=False,
                errors=processed.errors,
                generation_time=_elapsed_ms(start),
                request_id=request_id,
            )

        try:
            output = await self._run(request_id, processed.spec)
        except ScaffolderError as e:
            self.logger.error(request_id, type(e).__name__, str(e))
            return GenerationResult(
                success=False,
                error=str(e),
                generation_time=_elapsed_ms(start),
                request_id=request_id,
            )
        except Exception as e:
            logger.exception(f"Unexpected failure for request {request_id}")
            self.logger.error(request_id, type(e).__name__, str(e))
            return GenerationResult(
                success=False,
                error=str(e),
                internal=True,
                generation_time=_elapsed_ms(start),
                request_id=request_id,
            )

        output.generation_time = _elapsed_ms(start)
        output.timestamp = datetime.now(timezone.utc).isoformat()
        self.logger.generation_complete(request_id, len(output.files), output.generation_time)

        return GenerationResult(
            success=True,
            output=output,
            generation_time=output.generation_time,
            request_id=request_id,
        )

    async def _run(self, request_id: str, spec: StructuredSpec) -> SparcOutput:
        sparc_files = self.generator.synthesizer.generate_all_phases(spec)
        for sparc_file in sparc_files:
            self.logger.phase_generated(
                request_id, sparc_file.phase.value, sparc_file.metadata.get("complexity", "")
            )

        if self.config.enable_elaboration:
            sparc_files = await self._elaborate(request_id, spec, sparc_files)

        return self.generator.assemble(sparc_files, spec)

    def _get_content_service(self) -> ContentService:
        if self.content_service is None:
            self.content_service = ContentService(self.config)
        return self.content_service

    async def _elaborate(
        self, request_id: str, spec: StructuredSpec, sparc_files: list[SparcFile]
    ) -> list[SparcFile]:
        """Append provider notes to each document. Failures leave the document as is."""
        try:
            service = self._get_content_service()
        except ConfigurationError as e:
            for sparc_file in sparc_files:
                self.logger.elaboration_skipped(request_id, sparc_file.phase.value, str(e))
            return sparc_files

        provider_id = spec.request_metadata.ai_provider if spec.request_metadata else "openai"
        template = load_prompt("phase_elaboration")

        elaborated = []
        for sparc_file in sparc_files:
            prompt = template.format(
                phase=sparc_file.phase.value,
                project_name=spec.project_name,
                description=spec.description,
                features=", ".join(spec.features) or "none",
                technologies=", ".join(spec.technologies.suggested),
                document=sparc_file.content,
            )
            result = await service.generate_content(prompt, provider_id)
            if not result.success:
                self.logger.elaboration_skipped(request_id, sparc_file.phase.value, result.error or "")
                elaborated.append(sparc_file)
                continue

            content = f"{sparc_file.content.rstrip()}\n\n{ELABORATION_HEADING}\n\n{result.content}\n"
            elaborated.append(replace(sparc_file, content=content))

        return elaborated
