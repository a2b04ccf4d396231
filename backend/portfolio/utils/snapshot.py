from datetime import date, datetime

# Row timestamps are left out; the audit entry carries its own.
SKIPPED_COLUMNS = {"created_at", "updated_at"}


def _json_value(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def snapshot_entity(entity):
    """Column values of a row as stored, JSON-safe, for the audit trail."""
    return {
        column.key: _json_value(getattr(entity, column.key))
        for column in entity.__table__.columns
        if column.key not in SKIPPED_COLUMNS
    }
