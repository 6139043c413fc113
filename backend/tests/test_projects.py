# File: tests/test_projects.py

"""
Server-side project operations against an in-memory SQLite database.
"""

import importlib

import pytest

from prompt_studio.application import projects as project_ops
from prompt_studio.application import sections as section_ops
from prompt_studio.domain.invariants.exceptions import InvariantViolation
from prompt_studio.exceptions import AuthError, FetchError, UpdateError
from prompt_studio.extensions import db
from prompt_studio.models.audit_log import AuditLog
from prompt_studio.models.project import Project
from prompt_studio.models.section import Section

# The package re-exports each use-case function under its module name
create_project_module = importlib.import_module("prompt_studio.application.projects.create_project")
duplicate_project_module = importlib.import_module("prompt_studio.application.projects.duplicate_project")


def test_create_project_has_six_default_sections(user_id):
    project = project_ops.create_project(user_id=user_id, name="Acme")

    assert project["name"] == "Acme"
    assert project["status"] == "draft"
    assert project["global_prompt"] == ""
    assert project["user_id"] == user_id
    assert [s["name"] for s in project["sections"]] == [
        "Hero", "Features", "Testimonials", "Pricing", "CTA", "Footer",
    ]
    assert [s["type"] for s in project["sections"]] == [
        "hero", "features", "testimonials", "pricing", "cta", "footer",
    ]
    assert [s["order"] for s in project["sections"]] == [0, 1, 2, 3, 4, 5]
    assert all(s["description"] == "" for s in project["sections"])


def test_create_project_requires_identity(app):
    with pytest.raises(AuthError):
        project_ops.create_project(user_id=None, name="Acme")

    assert Project.query.count() == 0


def test_create_project_rejects_blank_name(user_id):
    with pytest.raises(InvariantViolation):
        project_ops.create_project(user_id=user_id, name="   ")


def test_create_project_survives_default_section_failure(user_id, monkeypatch):
    # A section without a name violates NOT NULL on insert
    monkeypatch.setattr(
        create_project_module,
        "default_sections",
        lambda: [{"name": None, "type": "hero", "description": "", "order": 0}],
    )

    project = project_ops.create_project(user_id=user_id, name="Acme")

    assert project["sections"] == []
    assert Project.query.filter_by(id=project["id"]).count() == 1
    assert Section.query.count() == 0


def test_list_projects_most_recent_first(user_id, other_user_id):
    first = project_ops.create_project(user_id=user_id, name="First")
    second = project_ops.create_project(user_id=user_id, name="Second")
    project_ops.create_project(user_id=other_user_id, name="Not mine")

    project_ops.update_project(user_id=user_id, project_id=first["id"], data={"global_prompt": "x"})

    listed = project_ops.list_projects(user_id=user_id)

    assert [p["id"] for p in listed] == [first["id"], second["id"]]
    assert all(len(p["sections"]) == 6 for p in listed)


def test_list_projects_unauthenticated_is_fetch_error(app):
    with pytest.raises(FetchError):
        project_ops.list_projects(user_id=None)


def test_get_project_missing_returns_none(user_id, other_user_id):
    theirs = project_ops.create_project(user_id=other_user_id, name="Theirs")

    assert project_ops.get_project(user_id=user_id, project_id="nope") is None
    assert project_ops.get_project(user_id=user_id, project_id=theirs["id"]) is None


def test_update_project_fields(user_id):
    project = project_ops.create_project(user_id=user_id, name="Acme")

    updated = project_ops.update_project(
        user_id=user_id,
        project_id=project["id"],
        data={"name": "Acme 2", "status": "ready", "global_prompt": "Dark", "user_id": "hijack"},
    )

    assert updated["name"] == "Acme 2"
    assert updated["status"] == "ready"
    assert updated["global_prompt"] == "Dark"
    assert updated["user_id"] == user_id


def test_update_project_accepts_unchanged_payload(user_id):
    project = project_ops.create_project(user_id=user_id, name="Acme")

    updated = project_ops.update_project(
        user_id=user_id,
        project_id=project["id"],
        data={"name": "Acme", "status": "draft", "global_prompt": ""},
    )

    assert updated["name"] == "Acme"


def test_update_missing_project_is_update_error(user_id):
    with pytest.raises(UpdateError) as exc:
        project_ops.update_project(user_id=user_id, project_id="missing", data={"name": "x"})

    assert exc.value.status_code == 404


def test_update_project_rejects_unknown_status(user_id):
    project = project_ops.create_project(user_id=user_id, name="Acme")

    with pytest.raises(InvariantViolation):
        project_ops.update_project(user_id=user_id, project_id=project["id"], data={"status": "published"})


def test_delete_project_cascades_to_sections(user_id):
    keep = project_ops.create_project(user_id=user_id, name="Keep")
    doomed = project_ops.create_project(user_id=user_id, name="Doomed")

    project_ops.delete_project(user_id=user_id, project_id=doomed["id"])

    assert project_ops.get_project(user_id=user_id, project_id=doomed["id"]) is None
    assert Section.query.filter_by(project_id=doomed["id"]).count() == 0
    assert Section.query.filter_by(project_id=keep["id"]).count() == 6


def test_delete_project_with_sections_loaded_in_session(user_id):
    project = project_ops.create_project(user_id=user_id, name="Loaded")
    row = db.session.get(Project, project["id"])
    assert len(row.sections) == 6

    project_ops.delete_project(user_id=user_id, project_id=project["id"])

    assert db.session.get(Project, project["id"]) is None
    assert Section.query.filter_by(project_id=project["id"]).count() == 0
    assert [log.action for log in AuditLog.project_history(project["id"])][-1] == "project.delete"


def test_delete_requires_identity(user_id):
    project = project_ops.create_project(user_id=user_id, name="Acme")

    with pytest.raises(AuthError):
        project_ops.delete_project(user_id=None, project_id=project["id"])


def test_duplicate_project_copies_everything_but_identity(user_id):
    original = project_ops.create_project(user_id=user_id, name="X")
    project_ops.update_project(
        user_id=user_id,
        project_id=original["id"],
        data={"status": "ready", "global_prompt": "Use a dark theme"},
    )
    hero = original["sections"][0]
    section_ops.update_section(
        user_id=user_id,
        section_id=hero["id"],
        data={"description": "Big headline", "style_notes": "Bold", "image_url": "https://x.test/h.png"},
    )

    copy = project_ops.duplicate_project(user_id=user_id, project_id=original["id"])
    source = project_ops.get_project(user_id=user_id, project_id=original["id"])

    assert copy["id"] != original["id"]
    assert copy["name"] == "X (Copy)"
    assert copy["status"] == "ready"
    assert copy["global_prompt"] == "Use a dark theme"

    content = ("name", "type", "description", "image_url", "image_description",
               "style_notes", "animation_notes", "order")
    assert [{k: s[k] for k in content} for s in copy["sections"]] == \
        [{k: s[k] for k in content} for s in source["sections"]]
    assert not {s["id"] for s in copy["sections"]} & {s["id"] for s in source["sections"]}
    assert all(s["project_id"] == copy["id"] for s in copy["sections"])


def test_duplicate_project_survives_section_copy_failure(user_id, monkeypatch):
    original = project_ops.create_project(user_id=user_id, name="X")
    monkeypatch.setattr(duplicate_project_module, "COPIED_SECTION_FIELDS", ("type", "order"))

    copy = project_ops.duplicate_project(user_id=user_id, project_id=original["id"])

    assert copy["name"] == "X (Copy)"
    assert copy["sections"] == []


def test_duplicate_missing_project(user_id):
    with pytest.raises(UpdateError):
        project_ops.duplicate_project(user_id=user_id, project_id="missing")


def test_mutations_are_audited(user_id):
    project = project_ops.create_project(user_id=user_id, name="Acme")
    project_ops.update_project(user_id=user_id, project_id=project["id"], data={"name": "Acme 2"})

    actions = [log.action for log in AuditLog.query.order_by(AuditLog.created_at).all()]

    assert actions == ["project.create", "project.update"]


def test_project_history_includes_section_changes(user_id):
    project = project_ops.create_project(user_id=user_id, name="Acme")
    hero = project["sections"][0]
    section_ops.update_section(user_id=user_id, section_id=hero["id"], data={"description": "Hi"})
    section_ops.delete_section(user_id=user_id, section_id=hero["id"])

    history = AuditLog.project_history(project["id"])

    assert [entry.action for entry in history] == ["project.create", "section.update", "section.delete"]
    assert history[1].to_dict()["entity_id"] == hero["id"]
    assert history[1].payload == {"fields": ["description"]}
