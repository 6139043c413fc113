from prompt_studio.domain.lifecycle.project import assert_project_status
from .section import assert_section_fields, assert_section_order
from .exceptions import InvariantViolation

def assert_project_name(name):
    if not isinstance(name, str) or not name.strip():
        raise InvariantViolation("Project name is required")

def assert_project_fields(data):
    if "name" in data:
        assert_project_name(data["name"])
    if "status" in data:
        assert_project_status(data["status"])
    if "global_prompt" in data and not isinstance(data["global_prompt"], str):
        raise InvariantViolation("Global prompt must be text")

def assert_project(project):
    assert_project_name(project.name)
    assert_project_status(project.status)
    assert_section_order(project.sections)

    for section in project.sections:
        assert_section_fields({"name": section.name, "type": section.type})
