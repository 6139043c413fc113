"""
Static reference data: section types, project statuses, the default section
set every new project starts with, and the per-type templates used to
pre-fill a section when the user picks a type.
"""
from typing import Dict, List, Set

SECTION_TYPES: Set[str] = {
    "hero",
    "features",
    "testimonials",
    "pricing",
    "cta",
    "footer",
    "custom",
}

PROJECT_STATUSES: Set[str] = {"draft", "ready"}

DEFAULT_SECTIONS: List[Dict[str, str]] = [
    {"name": "Hero", "type": "hero", "description": ""},
    {"name": "Features", "type": "features", "description": ""},
    {"name": "Testimonials", "type": "testimonials", "description": ""},
    {"name": "Pricing", "type": "pricing", "description": ""},
    {"name": "CTA", "type": "cta", "description": ""},
    {"name": "Footer", "type": "footer", "description": ""},
]

SECTION_TEMPLATES: Dict[str, Dict[str, str]] = {
    "hero": {
        "name": "Hero",
        "description": "Main landing section with headline, subheadline, and primary CTA",
    },
    "features": {
        "name": "Features",
        "description": "Showcase key product features with icons and descriptions",
    },
    "testimonials": {
        "name": "Testimonials",
        "description": "Social proof section with customer quotes and avatars",
    },
    "pricing": {
        "name": "Pricing",
        "description": "Pricing tiers and plans comparison",
    },
    "cta": {
        "name": "CTA",
        "description": "Call-to-action section for conversion",
    },
    "footer": {
        "name": "Footer",
        "description": "Links, copyright, and additional information",
    },
    "custom": {
        "name": "Custom Section",
        "description": "Define your own section type",
    },
}

COPY_SUFFIX = " (Copy)"


def default_sections() -> List[Dict]:
    """Fresh copies of the default section set with orders 0..5."""
    return [
        {**section, "order": index}
        for index, section in enumerate(DEFAULT_SECTIONS)
    ]


def section_from_template(section_type: str) -> Dict[str, str]:
    if section_type not in SECTION_TEMPLATES:
        raise KeyError(f"Unknown section type: {section_type}")
    template = SECTION_TEMPLATES[section_type]
    return {
        "name": template["name"],
        "type": section_type,
        "description": template["description"],
    }


def copy_name(name: str) -> str:
    return f"{name}{COPY_SUFFIX}"
