"""
Upserts for single-row content: the profile, the about section and
keyed site settings.
"""

from typing import Any, Dict

from portfolio.extensions import db
from portfolio.models.about_section import AboutSection
from portfolio.models.profile import Profile
from portfolio.models.site_config import SiteConfig
from portfolio.utils.audit import log_action
from portfolio.utils.snapshot import snapshot_entity
from portfolio.utils.transaction import transactional


def _upsert_single(model, entity_type: str, data: Dict[str, Any]):
    entity = model.query.first()
    created = entity is None
    if created:
        entity = model()

    with transactional():
        for field, value in data.items():
            setattr(entity, field, value)

        db.session.add(entity)
        db.session.flush()

        log_action(
            action=f"{entity_type}.{'create' if created else 'update'}",
            entity_type=entity_type,
            entity_id=entity.id,
            payload=snapshot_entity(entity),
        )

    return entity


def upsert_profile(data: Dict[str, Any]) -> Profile:
    return _upsert_single(Profile, "profile", data)


def upsert_about(data: Dict[str, Any]) -> AboutSection:
    return _upsert_single(AboutSection, "about", data)


def upsert_setting(key: str, value: Any) -> SiteConfig:
    """Create or replace one site setting (meta, theme, layout, ...)."""
    setting = SiteConfig.query.filter_by(key=key).first()
    created = setting is None
    if created:
        setting = SiteConfig()
        setting.key = key

    with transactional():
        setting.value = value
        db.session.add(setting)
        db.session.flush()

        log_action(
            action="setting.create" if created else "setting.update",
            entity_type="site_config",
            entity_id=setting.id,
            payload={"key": key, "value": value},
        )

    return setting
