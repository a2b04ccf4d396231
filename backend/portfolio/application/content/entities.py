from typing import Any, Dict, Type

from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import Conflict

from portfolio.domain.errors import EntityNotFound
from portfolio.extensions import db
from portfolio.utils.audit import log_action
from portfolio.utils.order import next_order
from portfolio.utils.snapshot import snapshot_entity
from portfolio.utils.transaction import transactional


def get_entity(model: Type[Any], entity_id: str, label: str):
    entity = db.session.get(model, entity_id)
    if entity is None:
        raise EntityNotFound(label)
    return entity


def list_entities(model: Type[Any]):
    """Every row, visible or not, in manual sort order."""
    return model.query.order_by(model.order.asc(), model.created_at.asc()).all()


def create_entity(
    *,
    model: Type[Any],
    entity_type: str,
    data: Dict[str, Any],
):
    """
    Insert a new orderable content row at the end of the list.

    A unique key collision (e.g. project slug) surfaces as 409.
    """
    entity = model()
    for field, value in data.items():
        setattr(entity, field, value)

    if "order" not in data:
        entity.order = next_order(model)

    try:
        with transactional():
            db.session.add(entity)
            db.session.flush()  # ensures entity.id exists

            log_action(
                action=f"{entity_type}.create",
                entity_type=entity_type,
                entity_id=entity.id,
                payload=snapshot_entity(entity),
            )
    except IntegrityError as exc:
        raise Conflict(f"A {entity_type} with this key already exists") from exc

    return entity


def update_entity(
    *,
    model: Type[Any],
    entity_type: str,
    label: str,
    entity_id: str,
    data: Dict[str, Any],
):
    """
    Apply the fields the client sent.

    Unchanged values are skipped; an update that changes nothing still
    succeeds but writes no audit entry.
    """
    entity = get_entity(model, entity_id, label)

    changed_fields: list[str] = []

    try:
        with transactional():
            for field, value in data.items():
                if getattr(entity, field) != value:
                    setattr(entity, field, value)
                    changed_fields.append(field)

            if changed_fields:
                db.session.flush()
                log_action(
                    action=f"{entity_type}.update",
                    entity_type=entity_type,
                    entity_id=entity.id,
                    payload=snapshot_entity(entity),
                )
    except IntegrityError as exc:
        raise Conflict(f"A {entity_type} with this key already exists") from exc

    return entity


def delete_entity(
    *,
    model: Type[Any],
    entity_type: str,
    label: str,
    entity_id: str,
) -> None:
    entity = get_entity(model, entity_id, label)

    with transactional():
        db.session.delete(entity)

        log_action(
            action=f"{entity_type}.delete",
            entity_type=entity_type,
            entity_id=entity_id,
            payload={},
        )
