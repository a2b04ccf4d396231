# portfolio/content/layouts.py
from __future__ import annotations

import logging
from typing import Iterable, List

from sqlalchemy.exc import SQLAlchemyError

from portfolio.content.section import Section
from portfolio.domain.errors import ConfigLoadError, LayoutSaveError
from portfolio.domain.invariants.layout import assert_layout
from portfolio.extensions import db
from portfolio.models.page_layout import PageLayout
from portfolio.normalizers.section import normalize_sections, serialize_sections
from portfolio.utils.audit import log_action
from portfolio.utils.transaction import transactional

logger = logging.getLogger(__name__)


class LayoutStore:
    """
    Read/write path for page layouts.

    Reads normalize both stored shapes; writes always store the
    {visible, props} shape and overwrite the whole list.
    """

    def load(self, page_name: str) -> List[Section]:
        try:
            layout = PageLayout.query.filter_by(page_name=page_name).first()
        except SQLAlchemyError as exc:
            logger.exception(f"Failed to load layout '{page_name}'")
            raise ConfigLoadError(f"Failed to load layout '{page_name}'") from exc

        if layout is None:
            return []
        return normalize_sections(layout.sections)

    def save(self, page_name: str, sections: Iterable[Section]) -> PageLayout:
        """
        Upsert the page's section list verbatim.

        Raises InvariantViolation for duplicate ids (nothing written) and
        LayoutSaveError when the store rejects the write.
        """
        sections = list(sections)
        assert_layout(sections)
        payload = serialize_sections(sections)

        try:
            with transactional():
                layout = PageLayout.query.filter_by(page_name=page_name).first()
                created = layout is None
                if created:
                    layout = PageLayout()
                    layout.page_name = page_name

                layout.sections = payload
                db.session.add(layout)
                db.session.flush()  # ensures layout.id exists

                log_action(
                    action="layout.create" if created else "layout.update",
                    entity_type="page_layout",
                    entity_id=layout.id,
                    payload={"page": page_name, "sections_count": len(payload)},
                )
        except SQLAlchemyError as exc:
            logger.exception(f"Failed to save layout '{page_name}'")
            raise LayoutSaveError(f"Failed to save layout '{page_name}'") from exc

        return layout
