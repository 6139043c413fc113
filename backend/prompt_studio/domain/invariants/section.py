from prompt_studio.domain.templates import SECTION_TYPES
from .exceptions import InvariantViolation

def assert_section_type(section_type):
    if section_type not in SECTION_TYPES:
        raise InvariantViolation(f"Invalid section type: {section_type}")

def assert_section_name(name):
    if not isinstance(name, str) or not name.strip():
        raise InvariantViolation("Section name is required")

def assert_section_order(sections):
    orders = [section.order for section in sections]
    if not orders:
        return

    expected = list(range(len(orders)))
    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Section orders are not consecutive starting from 0: {orders}"
        )

def assert_section_fields(data):
    """Validates whichever section fields are present in an update payload."""
    if "name" in data:
        assert_section_name(data["name"])
    if "type" in data:
        assert_section_type(data["type"])
    if "order" in data:
        order = data["order"]
        if isinstance(order, bool) or not isinstance(order, int) or order < 0:
            raise InvariantViolation(f"Section order must be a non-negative integer: {order!r}")
