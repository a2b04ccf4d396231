"""
Layout editor: a working copy of one page's section list.

States:
- loading: nothing to edit yet
- ready:   sections + selection, optionally with a load error

Every operation replaces the immutable EditorState and returns it.
Nothing reaches the store until save().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from uuid import uuid4

from portfolio.content.layouts import LayoutStore
from portfolio.content.registry import default_props
from portfolio.content.section import Section
from portfolio.domain.errors import ConfigLoadError, SectionNotFound
from portfolio.domain.lifecycle.editor import LOADING, READY, assert_editor_transition
from portfolio.utils.order import reindex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorState:
    status: str = LOADING
    sections: Tuple[Section, ...] = ()
    selection: Optional[str] = None
    error: Optional[str] = None
    dirty: bool = False


def new_section_id() -> str:
    return f"section-{uuid4().hex[:12]}"


class LayoutEditor:
    """
    State machine over one page's section list.

    `store` needs `load(page_name) -> list[Section]` and
    `save(page_name, sections)`; it defaults to the database-backed
    LayoutStore.
    """

    def __init__(
        self,
        page_name: str,
        store=None,
        id_factory: Callable[[], str] = new_section_id,
    ):
        self.page_name = page_name
        self.store = store if store is not None else LayoutStore()
        self.id_factory = id_factory
        self.state = EditorState()

    @property
    def sections(self) -> Tuple[Section, ...]:
        return self.state.sections

    def _transition(self, **changes: Any) -> EditorState:
        to_status = changes.get("status", self.state.status)
        assert_editor_transition(from_status=self.state.status, to_status=to_status)
        self.state = replace(self.state, **changes)
        return self.state

    def _require_ready(self) -> None:
        if self.state.status != READY:
            raise RuntimeError("Layout editor is not ready; call load() first")

    def _index_of(self, section_id: str) -> int:
        for index, section in enumerate(self.state.sections):
            if section.id == section_id:
                return index
        raise SectionNotFound(section_id)

    def _replace_at(self, index: int, section: Section) -> EditorState:
        sections = list(self.state.sections)
        sections[index] = section
        return self._transition(sections=tuple(sections), dirty=True)

    def _unique_id(self) -> str:
        taken = {s.id for s in self.state.sections}
        section_id = self.id_factory()
        while section_id in taken:
            section_id = self.id_factory()
        return section_id

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------

    def load(self, page_name: Optional[str] = None) -> EditorState:
        """
        Fetch the stored list, optionally rebinding to another page.
        A failed read still lands in `ready` with an empty list and
        `error` set.
        """
        if page_name is not None:
            self.page_name = page_name

        if self.state.status == READY:
            self._transition(status=LOADING)

        try:
            stored = self.store.load(self.page_name)
        except ConfigLoadError as exc:
            logger.error(f"Failed to load layout '{self.page_name}': {exc}")
            return self._transition(
                status=READY,
                sections=(),
                selection=None,
                error=str(exc),
                dirty=False,
            )

        ordered = sorted(stored, key=lambda s: s.order)
        return self._transition(
            status=READY,
            sections=tuple(ordered),
            selection=None,
            error=None,
            dirty=False,
        )

    def save(self) -> EditorState:
        """
        Persist the list verbatim. On failure the store's exception
        propagates and the in-memory state is left as it was.
        """
        self._require_ready()
        self.store.save(self.page_name, list(self.state.sections))
        return self._transition(dirty=False)

    # -------------------------------------------------
    # Edits
    # -------------------------------------------------

    def add_section(self, section_type: str = "hero") -> EditorState:
        self._require_ready()
        section = Section(
            id=self._unique_id(),
            type=section_type,
            order=len(self.state.sections),
            visible=True,
            props=default_props(section_type),
        )
        return self._transition(
            sections=self.state.sections + (section,),
            selection=section.id,
            dirty=True,
        )

    def select_section(self, section_id: Optional[str]) -> EditorState:
        self._require_ready()
        if section_id is not None:
            self._index_of(section_id)
        return self._transition(selection=section_id)

    def update_section_props(self, section_id: str, partial: Mapping[str, Any]) -> EditorState:
        """Shallow merge: top-level keys in `partial` replace stored ones."""
        self._require_ready()
        index = self._index_of(section_id)
        section = self.state.sections[index]
        merged: Dict[str, Any] = {**section.props, **partial}
        return self._replace_at(index, section.with_changes(props=merged))

    def update_section_type(self, section_id: str, section_type: str) -> EditorState:
        self._require_ready()
        index = self._index_of(section_id)
        section = self.state.sections[index]
        return self._replace_at(index, section.with_changes(type=section_type))

    def toggle_visible(self, section_id: str) -> EditorState:
        self._require_ready()
        index = self._index_of(section_id)
        section = self.state.sections[index]
        return self._replace_at(index, section.with_changes(visible=not section.visible))

    def reorder(self, section_id: str, new_index: int) -> EditorState:
        """Move a section, then re-index the whole list from zero."""
        self._require_ready()
        index = self._index_of(section_id)
        sections = list(self.state.sections)
        moved = sections.pop(index)
        new_index = max(0, min(new_index, len(sections)))
        sections.insert(new_index, moved)
        return self._transition(sections=tuple(reindex(sections)), dirty=True)

    def delete_section(self, section_id: str) -> EditorState:
        self._require_ready()
        index = self._index_of(section_id)
        sections = list(self.state.sections)
        del sections[index]

        selection = self.state.selection
        if selection == section_id:
            selection = None

        return self._transition(
            sections=tuple(reindex(sections)),
            selection=selection,
            dirty=True,
        )


def apply_operation(editor: LayoutEditor, operation) -> EditorState:
    """Dispatch one validated page-builder operation onto the editor."""
    op = operation.op

    if op == "add":
        return editor.add_section(operation.type)
    if op == "select":
        return editor.select_section(operation.id)
    if op == "update_props":
        return editor.update_section_props(operation.id, operation.props)
    if op == "update_type":
        return editor.update_section_type(operation.id, operation.type)
    if op == "toggle_visible":
        return editor.toggle_visible(operation.id)
    if op == "reorder":
        return editor.reorder(operation.id, operation.index)
    if op == "delete":
        return editor.delete_section(operation.id)

    raise ValueError(f"Unsupported layout operation: {op}")
