#!/usr/bin/env python3
"""
MCP Server wrapper for SPARC Scaffolder tools.

Exposes description validation, analysis and SPARC bundle generation
over MCP.
"""
from mcp.server.fastmcp import FastMCP

from sparc_scaffolder.mcp_server import (
    analyze_description,
    generate_sparc as generate_sparc_bundle,
    generate_sparc_phase,
    list_providers_tool,
    validate_description,
)

# Create MCP server
mcp = FastMCP("sparc-scaffolder")


@mcp.tool()
def validate(description: str) -> dict:
    """Validate a feature description. Returns is_valid and errors."""
    return validate_description(description)


@mcp.tool()
def analyze(description: str) -> dict:
    """Extract features, technologies, requirements, constraints and the structured spec."""
    return analyze_description(description)


@mcp.tool()
async def generate(
    description: str,
    framework: str = "react",
    include_tests: bool = True,
    include_docs: bool = True,
) -> dict:
    """Generate the five SPARC documents plus scaffold files for a description."""
    return await generate_sparc_bundle(
        description,
        framework=framework,
        include_tests=include_tests,
        include_docs=include_docs,
    )


@mcp.tool()
def phase(phase: str, description: str) -> dict:
    """Generate one SPARC phase document (specification, pseudocode, architecture, refinement, completion)."""
    return generate_sparc_phase(phase, description)


@mcp.tool()
def providers() -> dict:
    """List content providers and credential status."""
    return list_providers_tool()


if __name__ == "__main__":
    mcp.run()
