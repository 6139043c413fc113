"""
Markdown compilation of a project into a single prompt string.

The output is a pure function of the project: sections are sorted by
order, sections without a description are left out, and the assembled
text is trimmed.
"""
from typing import List

from prompt_studio.domain.entities import Project, Section

RULE = "---\n\n"


def _has_text(value) -> bool:
    return bool(value and value.strip())


def compilable_sections(project: Project) -> List[Section]:
    return [
        section
        for section in project.sorted_sections()
        if _has_text(section.description)
    ]


def _compile_section(position: int, section: Section) -> str:
    parts = [
        f"## {position}. {section.name}\n\n",
        f"{section.description.strip()}\n\n",
    ]

    if section.image_url or section.image_description:
        parts.append("### Image\n")
        if section.image_url:
            parts.append(f"- URL: {section.image_url}\n")
        if section.image_description:
            parts.append(f"- Description: {section.image_description}\n")
        parts.append("\n")

    if section.style_notes:
        parts.append(f"### Style\n{section.style_notes}\n\n")

    if section.animation_notes:
        parts.append(f"### Animations\n{section.animation_notes}\n\n")

    return "".join(parts)


def compile_markdown(project: Project) -> str:
    sections = compilable_sections(project)
    parts = []

    if _has_text(project.global_prompt):
        parts.append(f"# Global Instructions\n\n{project.global_prompt.strip()}\n\n")
        parts.append(RULE)

    if sections:
        parts.append("# Landing Page Sections\n\n")

        for index, section in enumerate(sections):
            parts.append(_compile_section(index + 1, section))
            if index < len(sections) - 1:
                parts.append(RULE)

    return "".join(parts).strip()
