# File: tests/test_compiler.py

"""
Prompt compilation: Markdown for consumption, JSON as a faithful snapshot.
"""

import json
from datetime import datetime, timezone

from prompt_studio.compiler import (
    build_json_export,
    compile_json,
    compile_markdown,
    export_filename,
    write_export,
)
from prompt_studio.domain.entities import Project, Section


def _section(name, order, description="", **fields):
    return Section(id=f"s-{order}-{name}", project_id="p-1", name=name,
                   order=order, description=description, **fields)


def _project(sections, global_prompt="", name="Acme Launch"):
    return Project(id="p-1", name=name, global_prompt=global_prompt, sections=list(sections))


def test_compiles_global_prompt_and_single_section():
    project = _project(
        [_section("Hero", 0, "Big headline and CTA")],
        global_prompt="Use a dark theme",
    )

    assert compile_markdown(project) == (
        "# Global Instructions\n\nUse a dark theme\n\n---\n\n"
        "# Landing Page Sections\n\n## 1. Hero\n\nBig headline and CTA"
    )


def test_empty_project_compiles_to_empty_string():
    assert compile_markdown(_project([_section("Hero", 0)])) == ""


def test_blank_global_prompt_is_skipped():
    project = _project([_section("Hero", 0, "Headline")], global_prompt="   \n ")

    assert compile_markdown(project) == "# Landing Page Sections\n\n## 1. Hero\n\nHeadline"


def test_global_prompt_only():
    project = _project([], global_prompt="  Keep it minimal  ")

    assert compile_markdown(project) == "# Global Instructions\n\nKeep it minimal\n\n---"


def test_sections_sorted_by_order_and_numbered_after_filtering():
    project = _project([
        _section("Footer", 3, "Links"),
        _section("Hero", 0, "Headline"),
        _section("Features", 1, "   "),
        _section("Pricing", 2, "Three tiers"),
    ])

    text = compile_markdown(project)

    assert "Features" not in text
    assert text.index("## 1. Hero") < text.index("## 2. Pricing") < text.index("## 3. Footer")
    assert text.count("---") == 2


def test_optional_subsections():
    project = _project([
        _section(
            "Hero", 0, "  Headline  ",
            image_url="https://cdn.example.com/hero.png",
            image_description="Team photo",
            style_notes="Dark gradient",
            animation_notes="Fade in on load",
        ),
        _section("CTA", 1, "Sign up", image_description="Arrow illustration"),
    ])

    assert compile_markdown(project) == (
        "# Landing Page Sections\n\n"
        "## 1. Hero\n\nHeadline\n\n"
        "### Image\n- URL: https://cdn.example.com/hero.png\n- Description: Team photo\n\n"
        "### Style\nDark gradient\n\n"
        "### Animations\nFade in on load\n\n"
        "---\n\n"
        "## 2. CTA\n\nSign up\n\n"
        "### Image\n- Description: Arrow illustration"
    )


def test_compilation_is_deterministic():
    project = _project([_section("Hero", 0, "Headline"), _section("CTA", 1, "Go")], "Dark")

    assert compile_markdown(project) == compile_markdown(project.copy())


def test_json_export_keeps_empty_sections_in_order():
    project = _project([
        _section("Pricing", 2, "Tiers", style_notes="Cards"),
        _section("Hero", 0, ""),
        _section("Features", 1, "   "),
    ], global_prompt="Dark")
    exported_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    data = build_json_export(project, exported_at)

    assert data["name"] == "Acme Launch"
    assert data["status"] == "draft"
    assert data["globalPrompt"] == "Dark"
    assert data["exportedAt"] == "2024-05-01T12:00:00+00:00"
    assert [s["name"] for s in data["sections"]] == ["Hero", "Features", "Pricing"]
    assert data["sections"][2] == {
        "name": "Pricing",
        "type": "custom",
        "description": "Tiers",
        "imageUrl": None,
        "imageDescription": None,
        "styleNotes": "Cards",
        "animationNotes": None,
    }
    assert "Hero" not in compile_markdown(project)


def test_json_round_trip_preserves_section_content_and_order():
    project = _project([
        _section("Hero", 0, "Headline", image_url="https://x.test/a.png"),
        _section("Features", 1, "Grid", animation_notes="Stagger"),
        _section("Footer", 2, ""),
    ])

    restored = json.loads(compile_json(project))["sections"]

    assert restored == build_json_export(project)["sections"]
    assert [s["name"] for s in restored] == ["Hero", "Features", "Footer"]
    assert restored[0]["imageUrl"] == "https://x.test/a.png"
    assert restored[1]["animationNotes"] == "Stagger"


def test_export_filename():
    project = _project([], name="My  Great Page")

    assert export_filename(project, "markdown") == "my-great-page-prompt.md"
    assert export_filename(project, "json") == "my-great-page-prompt.json"


def test_write_export_writes_markdown_verbatim(tmp_path):
    project = _project([_section("Hero", 0, "Headline")], global_prompt="Dark")

    path = write_export(project, tmp_path, "markdown")

    assert path.name == "acme-launch-prompt.md"
    assert path.read_text(encoding="utf-8") == compile_markdown(project)
