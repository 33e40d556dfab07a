# tests/test_mcp_server.py
"""Tests for MCP tool functions."""

import asyncio

from conftest import BLOG_DESCRIPTION


def test_validate_description_tool():
    from sparc_scaffolder.mcp_server import validate_description

    result = validate_description("tiny")

    assert result["is_valid"] is False
    assert result["errors"] == ["Input must be at least 10 characters"]


def test_analyze_description_tool():
    from sparc_scaffolder.mcp_server import analyze_description

    result = analyze_description(BLOG_DESCRIPTION)

    assert result["success"] is True
    assert result["spec"]["project_name"] == "Blog Application"
    assert result["document_complexity"] == "low"
    assert result["category"]["type"] == "web-application"


def test_analyze_description_rejects_invalid():
    from sparc_scaffolder.mcp_server import analyze_description

    assert analyze_description("") == {"success": False, "errors": ["Input is required"]}


def test_generate_sparc_phase_tool():
    from sparc_scaffolder.mcp_server import generate_sparc_phase

    result = generate_sparc_phase("completion", BLOG_DESCRIPTION)

    assert result["success"] is True
    assert result["phase"] == "completion"
    assert result["content"].startswith("# Phase 5: Completion - Blog Application")
    assert result["metadata"]["complexity"] == "low"


def test_generate_sparc_phase_invalid_name():
    from sparc_scaffolder.mcp_server import generate_sparc_phase

    result = generate_sparc_phase("design", BLOG_DESCRIPTION)

    assert result["success"] is False
    assert result["error"] == "Invalid phase name"
    assert result["valid_phases"][0] == "specification"


def test_generate_sparc_tool():
    from sparc_scaffolder.config import ScaffolderConfig
    from sparc_scaffolder.mcp_server import generate_sparc

    result = asyncio.run(generate_sparc(
        BLOG_DESCRIPTION, framework="vanilla", include_docs=False, config=ScaffolderConfig(),
    ))

    assert result["success"] is True
    assert [f["name"] for f in result["files"]][5] == "index.html"
    assert result["generation_time"] >= 0


def test_generate_sparc_tool_reports_errors():
    from sparc_scaffolder.config import ScaffolderConfig
    from sparc_scaffolder.mcp_server import generate_sparc

    result = asyncio.run(generate_sparc("tiny", config=ScaffolderConfig()))
    assert result == {"success": False, "errors": ["Input must be at least 10 characters"]}

    result = asyncio.run(generate_sparc(BLOG_DESCRIPTION, framework="ember", config=ScaffolderConfig()))
    assert result == {"success": False, "error": "Unsupported framework: ember"}


def test_list_providers_tool():
    from sparc_scaffolder.config import ScaffolderConfig
    from sparc_scaffolder.mcp_server import list_providers_tool

    result = list_providers_tool(ScaffolderConfig(openai_api_key="sk-test"))
    assert [p["id"] for p in result["providers"]] == ["openai", "anthropic", "google"]
    assert result["providers"][0]["available"] is True


def test_mcp_server_registers_tools():
    import sparc_mcp_server

    tools = asyncio.run(sparc_mcp_server.mcp.list_tools())
    assert {tool.name for tool in tools} == {"validate", "analyze", "generate", "phase", "providers"}
