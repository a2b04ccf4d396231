from flask import g, current_app
from portfolio.extensions import db
from portfolio.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """
    Append an audit entry to the current session.

    The caller commits; the entry shares the mutation's transaction.
    """
    identity = getattr(g, "current_user", None)
    if identity is None:
        return  # Skip logging outside an authenticated request

    log = AuditLog()
    log.actor_id = identity.user_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = str(entity_id) if entity_id is not None else "*"
    log.payload = payload or {}

    db.session.add(log)
    current_app.logger.info(f"{identity.user_id} {action} {entity_type}:{log.entity_id}")
