from portfolio.extensions import db

def next_order(model, order_field="order"):
    """
    Next manual sort position for a new record: zero for an empty
    table, otherwise current max + 1.
    """
    column = getattr(model, order_field)
    max_order = db.session.query(db.func.max(column)).scalar()
    return 0 if max_order is None else max_order + 1


def reindex(items):
    """
    Re-assign contiguous, zero-based order values to match list position.
    Works on immutable items exposing `with_changes`.
    """
    return [item.with_changes(order=index) for index, item in enumerate(items)]
