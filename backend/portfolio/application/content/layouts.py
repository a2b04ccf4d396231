from typing import Iterable

from portfolio.content.aggregator import request_cache
from portfolio.content.editor import LayoutEditor, apply_operation
from portfolio.content.layouts import LayoutStore
from portfolio.domain.errors import ConfigLoadError
from portfolio.normalizers.section import normalize_sections


def save_layout(*, page_name: str, sections: Iterable[dict]):
    """Overwrite a page's layout with the client's list as sent."""
    normalized = normalize_sections(sections)
    LayoutStore().save(page_name, normalized)
    _forget_cached_reads()
    return normalized


def edit_layout(*, page_name: str, operations) -> LayoutEditor:
    """
    Apply a batch of page-builder operations to a freshly loaded
    editor, then save once.

    A failed load is not saved over: the stored layout may hold
    sections the editor never saw.
    """
    editor = LayoutEditor(page_name)
    state = editor.load()
    if state.error:
        raise ConfigLoadError(state.error)

    for operation in operations:
        apply_operation(editor, operation)

    editor.save()
    _forget_cached_reads()
    return editor


def _forget_cached_reads():
    cache = request_cache()
    if cache is not None:
        cache.clear()
