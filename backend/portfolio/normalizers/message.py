def normalize_message(message):
    return {
        "id": message.id,
        "name": message.name,
        "email": message.email,
        "subject": message.subject,
        "message": message.message,
        "read": message.read,
        "archived": message.archived,
        "created_at": message.created_at.isoformat() if message.created_at else None,
    }
