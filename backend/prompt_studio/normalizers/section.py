from prompt_studio.utils.timestamps import iso

def normalize_section(section, order=None):
    return {
        "id": section.id,
        "project_id": section.project_id,
        "name": section.name,
        "type": section.type,
        "description": section.description or "",
        "image_url": section.image_url,
        "image_description": section.image_description,
        "style_notes": section.style_notes,
        "animation_notes": section.animation_notes,
        "order": section.order if order is None else order,
        "created_at": iso(section.created_at),
        "updated_at": iso(section.updated_at),
    }
