"""SPARC Scaffolder CLI."""

import asyncio
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

console = Console()

FRAMEWORKS = ["react", "vue", "angular", "svelte", "vanilla"]
COMPLEXITIES = ["simple", "medium", "complex"]
PROVIDERS = ["openai", "anthropic", "google"]


def _read_text(text: str) -> str:
    """Use the file contents when TEXT names an existing file."""
    path = Path(text)
    try:
        if not path.is_file():
            return text
        return path.read_text(encoding="utf-8")
    except OSError:
        return text


@click.group()
def main():
    """SPARC Scaffolder - SPARC documentation and scaffolding from feature descriptions."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"sparc-scaffolder v{__version__}")


@main.command()
@click.argument("text")
def validate(text: str):
    """Validate a feature description."""
    from .config import ScaffolderConfig
    from .processing.spec_builder import InputProcessor

    result = InputProcessor(ScaffolderConfig.from_env()).validate(_read_text(text))

    if result.is_valid:
        console.print("[green]Valid[/green]")
        return

    console.print("[red]Invalid input[/red]")
    for error in result.errors:
        console.print(f"  - {error}", markup=False)
    sys.exit(1)


@main.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def analyze(text: str, as_json: bool):
    """Show extracted entities, category and structured spec."""
    from .processing.categorizer import categorize_project
    from .processing.extractor import extract_entities
    from .processing.spec_builder import generate_structured_spec
    from .processing.validator import validate_input

    description = _read_text(text)
    validation = validate_input(description)
    if not validation.is_valid:
        console.print(f"[red]Invalid input: {'; '.join(validation.errors)}[/red]")
        sys.exit(1)

    entities = extract_entities(description)
    category = categorize_project(description)
    spec = generate_structured_spec(description)

    if as_json:
        click.echo(json.dumps({
            "entities": entities.to_dict(),
            "category": category.to_dict(),
            "spec": spec.to_dict(),
        }, indent=2))
        return

    console.print(f"\n[bold]{spec.project_name}[/bold]")
    console.print(f"  {spec.description}", markup=False)
    console.print(f"  Category: {category.type.value} ({category.complexity.value})")
    console.print(f"  Timeline: {spec.estimated_timeline.total_weeks} weeks")
    console.print()

    table = Table()
    table.add_column("Kind", style="dim")
    table.add_column("Values")
    table.add_row("Features", ", ".join(entities.features) or "-")
    table.add_row("Technologies", ", ".join(spec.technologies.suggested))
    table.add_row("Requirements", ", ".join(entities.requirements) or "-")
    table.add_row("Constraints", ", ".join(entities.constraints) or "-")
    console.print(table)


@main.command()
@click.argument("name")
@click.argument("text")
def phase(name: str, text: str):
    """Print one SPARC phase document."""
    from .orchestrator.errors import InvalidPhaseError
    from .processing.spec_builder import generate_structured_spec
    from .processing.validator import validate_input
    from .sparc.phases import PHASE_ORDER
    from .sparc.synthesizer import generate_phase

    description = _read_text(text)
    validation = validate_input(description)
    if not validation.is_valid:
        console.print(f"[red]Invalid input: {'; '.join(validation.errors)}[/red]")
        sys.exit(1)

    try:
        sparc_file = generate_phase(name, generate_structured_spec(description))
    except InvalidPhaseError:
        valid = ", ".join(p.value for p in PHASE_ORDER)
        console.print(f"[red]Invalid phase name: {name}[/red] (expected one of {valid})")
        sys.exit(1)

    click.echo(sparc_file.content)


@main.command()
@click.argument("text")
@click.option("--framework", "-f", type=click.Choice(FRAMEWORKS), default="react", help="Scaffold framework")
@click.option("--complexity", "-c", type=click.Choice(COMPLEXITIES), default="medium", help="Requested complexity")
@click.option("--provider", "-p", type=click.Choice(PROVIDERS), default="openai", help="Content provider for elaboration")
@click.option("--no-tests", is_flag=True, help="Skip test scaffolding")
@click.option("--no-docs", is_flag=True, help="Skip README/CONTRIBUTING")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False), help="Write generated files here")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def generate(text, framework, complexity, provider, no_tests, no_docs, output_dir, as_json):
    """Generate SPARC documents and scaffold files."""
    from .config import ScaffolderConfig
    from .orchestrator.orchestrator import GenerationOrchestrator
    from .processing.types import FeatureRequest

    request = FeatureRequest(
        description=_read_text(text),
        complexity=complexity,
        framework=framework,
        include_tests=not no_tests,
        include_docs=not no_docs,
        ai_provider=provider,
    )
    orchestrator = GenerationOrchestrator(ScaffolderConfig.from_env())
    result = asyncio.run(orchestrator.generate(request))

    if result.errors:
        console.print("[red]Invalid input[/red]")
        for error in result.errors:
            console.print(f"  - {error}", markup=False)
        sys.exit(1)

    if not result.success:
        console.print(f"[red]Generation failed: {result.error}[/red]")
        sys.exit(1)

    output = result.output

    if output_dir:
        root = Path(output_dir)
        for generated in output.files:
            target = root / generated.name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(generated.content, encoding="utf-8")

    if as_json:
        click.echo(json.dumps(output.to_dict(), indent=2))
        return

    table = Table(title=f"Generated {len(output.files)} files in {output.generation_time}ms")
    table.add_column("File")
    table.add_column("Type", style="dim")
    table.add_column("Size", justify="right")

    for generated in output.files:
        table.add_row(generated.name, generated.type, str(len(generated.content)))

    console.print(table)
    if output_dir:
        console.print(f"[green]Wrote files to {output_dir}[/green]")


@main.command()
def providers():
    """List content providers and credential status."""
    from .agents.content_service import list_providers
    from .config import ScaffolderConfig

    table = Table()
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Available")

    for provider in list_providers(ScaffolderConfig.from_env()):
        available = "[green]yes[/green]" if provider["available"] else "[red]no[/red]"
        table.add_row(provider["id"], provider["name"], available)

    console.print(table)


@main.command()
@click.option("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port (default: PORT or 3000)")
def serve(host, port):
    """Run the HTTP API."""
    import uvicorn

    from .api.app import create_app
    from .config import ScaffolderConfig

    config = ScaffolderConfig.from_env()
    host = host or config.host
    port = port or config.port

    console.print(f"[blue]Serving SPARC Scaffolder API on {host}:{port} ({config.environment})[/blue]")
    uvicorn.run(create_app(config), host=host, port=port)


if __name__ == "__main__":
    main()
