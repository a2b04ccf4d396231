from .exceptions import InvariantViolation

def assert_layout(sections):
    """Section ids must be unique and non-empty within one page."""
    seen = set()

    for section in sections:
        if not section.id:
            raise InvariantViolation("Section id must not be empty.")

        if section.id in seen:
            raise InvariantViolation(
                f"Duplicate section id in layout: {section.id}"
            )
        seen.add(section.id)
