from prompt_studio.utils.order import dense_orders
from prompt_studio.utils.timestamps import iso
from .section import normalize_section

def normalize_project(project, sections=None, include_sections=True):
    """
    Normalizes a Project row into the wire shape.

    Section orders are re-densified on the way out, so a gap left by a
    delete (or a collision left by a concurrent insert) never reaches a
    reader.
    """
    data = {
        "id": project.id,
        "user_id": project.user_id,
        "name": project.name,
        "status": project.status,
        "global_prompt": project.global_prompt or "",
        "created_at": iso(project.created_at),
        "updated_at": iso(project.updated_at),
    }

    if include_sections:
        rows = project.sections if sections is None else sections
        ranked = sorted(rows, key=lambda s: (s.order, iso(s.created_at) or ""))
        data["sections"] = [
            normalize_section(section, order=position)
            for section, position in dense_orders(ranked)
        ]

    return data
