from typing import Any, Dict, Optional

from flask import current_app

from portfolio.domain.errors import EntityNotFound
from portfolio.extensions import db
from portfolio.models.contact_message import ContactMessage
from portfolio.utils.audit import log_action
from portfolio.utils.transaction import transactional

MESSAGE_FILTERS = {
    "unread": {"read": False, "archived": False},
    "read": {"read": True, "archived": False},
    "archived": {"archived": True},
}


def list_messages(filter_name: Optional[str] = None):
    """
    Newest first. Without a known filter, archived messages are hidden.
    """
    criteria = MESSAGE_FILTERS.get(filter_name or "", {"archived": False})
    return (
        ContactMessage.query
        .filter_by(**criteria)
        .order_by(ContactMessage.created_at.desc())
        .all()
    )


def get_message(message_id: str) -> ContactMessage:
    message = db.session.get(ContactMessage, message_id)
    if message is None:
        raise EntityNotFound("Message")
    return message


def submit_message(data: Dict[str, Any]) -> ContactMessage:
    """Store a contact form submission. Public, so not audited."""
    message = ContactMessage()
    message.name = data["name"]
    message.email = data["email"]
    message.subject = data.get("subject") or ""
    message.message = data["message"]

    with transactional():
        db.session.add(message)

    current_app.logger.info(f"Contact message received from {message.email}")
    return message


def update_message(message_id: str, data: Dict[str, Any]) -> ContactMessage:
    message = get_message(message_id)

    with transactional():
        for field in ("read", "archived"):
            if data.get(field) is not None:
                setattr(message, field, data[field])

        log_action(
            action="message.update",
            entity_type="contact_message",
            entity_id=message.id,
            payload={k: v for k, v in data.items() if v is not None},
        )

    return message


def delete_message(message_id: str) -> None:
    message = get_message(message_id)

    with transactional():
        db.session.delete(message)

        log_action(
            action="message.delete",
            entity_type="contact_message",
            entity_id=message_id,
            payload={},
        )
