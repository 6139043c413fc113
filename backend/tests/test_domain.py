# File: tests/test_domain.py

import pytest

from prompt_studio.domain.entities import Project, Section
from prompt_studio.domain.invariants.exceptions import InvariantViolation
from prompt_studio.domain.invariants.project import assert_project
from prompt_studio.domain.invariants.section import assert_section_fields
from prompt_studio.domain.lifecycle.project import assert_project_transition
from prompt_studio.domain.templates import (
    SECTION_TYPES,
    copy_name,
    default_sections,
    section_from_template,
)


def test_default_sections_are_fresh_copies():
    first = default_sections()
    first[0]["name"] = "Changed"

    assert default_sections()[0]["name"] == "Hero"
    assert [s["order"] for s in default_sections()] == [0, 1, 2, 3, 4, 5]


def test_every_type_has_a_template():
    for section_type in SECTION_TYPES:
        template = section_from_template(section_type)
        assert template["type"] == section_type
        assert template["description"]

    assert section_from_template("custom")["name"] == "Custom Section"
    with pytest.raises(KeyError):
        section_from_template("carousel")


def test_copy_name():
    assert copy_name("Hero") == "Hero (Copy)"
    assert copy_name("Hero (Copy)") == "Hero (Copy) (Copy)"


def test_status_transitions():
    assert_project_transition(from_status="draft", to_status="ready")
    assert_project_transition(from_status="ready", to_status="draft")

    with pytest.raises(InvariantViolation):
        assert_project_transition(from_status="draft", to_status="archived")


def test_section_field_checks():
    assert_section_fields({"description": "anything"})

    with pytest.raises(InvariantViolation):
        assert_section_fields({"order": True})
    with pytest.raises(InvariantViolation):
        assert_section_fields({"type": "banner"})


def test_assert_project_requires_dense_orders():
    project = Project(id="p", name="Acme")
    project.sections = [
        Section(id="a", project_id="p", name="Hero", type="hero", order=0),
        Section(id="b", project_id="p", name="CTA", type="cta", order=2),
    ]

    with pytest.raises(InvariantViolation):
        assert_project(project)

    project.sections[1].order = 1
    assert_project(project)


def test_wire_round_trip_sorts_sections():
    data = {
        "id": "p",
        "name": "Acme",
        "sections": [
            {"id": "b", "project_id": "p", "name": "CTA", "order": 1},
            {"id": "a", "project_id": "p", "name": "Hero", "order": 0},
        ],
        "updated_at": "2024-03-01T10:00:00Z",
    }

    project = Project.from_wire(data)

    assert [s.id for s in project.sections] == ["a", "b"]
    assert project.sections[0].type == "custom"
    assert project.to_wire()["updated_at"] == "2024-03-01T10:00:00+00:00"
    assert project.copy().sections[0] is not project.sections[0]
