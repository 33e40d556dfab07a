# tests/test_synthesizer.py
"""Tests for SPARC phase synthesis."""

import pytest


@pytest.mark.parametrize("name,number,title", [
    ("specification", 1, "Specification"),
    ("pseudocode", 2, "Pseudocode"),
    ("architecture", 3, "Architecture"),
    ("refinement", 4, "Refinement"),
    ("completion", 5, "Completion"),
])
def test_generate_phase_heading(blog_spec, name, number, title):
    from sparc_scaffolder.sparc.synthesizer import generate_phase

    sparc_file = generate_phase(name, blog_spec)

    assert sparc_file.content.startswith(f"# Phase {number}: {title} - Blog Application")
    assert sparc_file.file_name == f"{name}.md"


def test_generate_phase_rejects_unknown_name(blog_spec):
    from sparc_scaffolder.orchestrator.errors import InvalidPhaseError
    from sparc_scaffolder.sparc.synthesizer import generate_phase

    with pytest.raises(InvalidPhaseError, match="Invalid phase name"):
        generate_phase("deployment", blog_spec)


def test_generate_all_phases_order_and_metadata(blog_spec):
    from sparc_scaffolder.sparc.phases import PHASE_ORDER
    from sparc_scaffolder.sparc.synthesizer import generate_all_phases

    files = generate_all_phases(blog_spec)

    assert len(files) == 5
    assert [f.phase for f in files] == list(PHASE_ORDER)
    for index, sparc_file in enumerate(files, 1):
        assert sparc_file.content
        assert sparc_file.content.startswith(f"# Phase {index}:")
        assert sparc_file.metadata["project_name"] == "Blog Application"
        assert sparc_file.metadata["phase"] == sparc_file.phase.value
        assert sparc_file.metadata["complexity"] == "low"
        assert sparc_file.metadata["technologies"] == ["React", "Node.js"]
        assert sparc_file.metadata["generated_at"]


def test_metadata_complexity_is_recomputed(ecommerce_spec):
    from sparc_scaffolder.sparc.synthesizer import generate_phase

    assert generate_phase("specification", ecommerce_spec).metadata["complexity"] == "high"


def test_specification_sections(blog_spec):
    from sparc_scaffolder.sparc.synthesizer import build_specification

    content = build_specification(blog_spec)

    assert "### FR1: blog application" in content
    assert "### FR2: user authentication" in content
    assert "1. User should be able to use blog application successfully" in content
    assert "- React" in content
    assert "## Success Metrics" in content


def test_pseudocode_function_names(blog_spec):
    from sparc_scaffolder.sparc.synthesizer import build_pseudocode

    content = build_pseudocode(blog_spec)

    assert "FUNCTION handleblogapplication():" in content
    assert "FUNCTION handleuserauthentication():" in content
    assert "STRUCTURE BlogApplicationData:" in content


def test_architecture_single_backend_for_simple_spec(blog_spec):
    from sparc_scaffolder.sparc.synthesizer import build_architecture

    content = build_architecture(blog_spec)

    assert "Frontend (React)" in content
    assert "Backend Service (Node.js)" in content
    assert "Microservices Architecture" not in content
    assert "Cache Layer" not in content
    assert "Database (" not in content


def test_architecture_microservices_cache_and_database(ecommerce_spec):
    from sparc_scaffolder.sparc.synthesizer import build_architecture

    content = build_architecture(ecommerce_spec)

    assert "Microservices Architecture" in content
    assert "Backend Service" not in content
    assert "Cache Layer (Redis)" in content
    assert "Database (PostgreSQL)" in content


def test_architecture_lists_every_suggested_technology(ecommerce_spec, blog_spec):
    from sparc_scaffolder.sparc.synthesizer import generate_phase

    for spec in (ecommerce_spec, blog_spec):
        content = generate_phase("architecture", spec).content
        components = content.split("## Component Structure", 1)[1].split("## Security", 1)[0]
        for tech in spec.technologies.suggested:
            assert f"- {tech}: " in components


def test_unknown_technology_gets_default_description():
    from sparc_scaffolder.sparc.synthesizer import describe_technology

    assert describe_technology("Docker") == "Containerization platform"
    assert describe_technology("Elixir") == "Technology component"


def test_refinement_per_feature_tests(blog_spec):
    from sparc_scaffolder.sparc.synthesizer import build_refinement

    content = build_refinement(blog_spec)

    assert "- user authentication service tests" in content
    assert "- blog application API endpoint tests" in content
    assert "- blog application user workflow tests" in content


def test_completion_checklist(blog_spec):
    from sparc_scaffolder.sparc.synthesizer import build_completion

    content = build_completion(blog_spec)

    assert "1. ✅ User should be able to use blog application successfully" in content
    assert "2. ✅ User should be able to use user authentication successfully" in content
    assert "- User guide for blog application" in content


def test_generate_all_phases_wraps_failures(blog_spec):
    from sparc_scaffolder.orchestrator.errors import SparcGenerationError
    from sparc_scaffolder.sparc.synthesizer import PHASE_BUILDERS, PhaseSynthesizer
    from sparc_scaffolder.sparc.phases import SparcPhase

    def broken(spec):
        raise ValueError("template exploded")

    builders = dict(PHASE_BUILDERS)
    builders[SparcPhase.REFINEMENT] = broken
    synthesizer = PhaseSynthesizer(builders)

    with pytest.raises(SparcGenerationError, match="Failed to generate SPARC documentation") as exc_info:
        synthesizer.generate_all_phases(blog_spec)

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_every_phase_has_a_builder():
    from sparc_scaffolder.sparc.phases import SparcPhase
    from sparc_scaffolder.sparc.synthesizer import PHASE_BUILDERS

    assert set(PHASE_BUILDERS) == set(SparcPhase)
