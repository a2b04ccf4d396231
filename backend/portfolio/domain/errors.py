# portfolio/domain/errors.py
from __future__ import annotations

from typing import Any, Dict, List


class ValidationFailed(Exception):
    """
    Raised when a write payload is malformed.

    `details` is a list of {"field", "message"} dicts, one per problem.
    """

    def __init__(self, details: List[Dict[str, Any]]):
        super().__init__("Validation failed")
        self.details = details


class EntityNotFound(LookupError):
    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class ConfigLoadError(RuntimeError):
    """A store read failed while assembling the site configuration."""


class LayoutSaveError(RuntimeError):
    """Persisting a page layout failed. Local editor state is untouched."""


class SectionNotFound(LookupError):
    def __init__(self, section_id: str):
        super().__init__(f"Section '{section_id}' not in layout")
        self.section_id = section_id
