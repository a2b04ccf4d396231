from dataclasses import dataclass
from functools import wraps
from typing import Optional
from flask import g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request

ROLE_RANK = {
    "VIEWER": 1,
    "EDITOR": 2,
    "ADMIN": 3,
}


@dataclass(frozen=True)
class Identity:
    user_id: str
    role: str


def has_role(role: Optional[str], minimum: str) -> bool:
    return ROLE_RANK.get(role or "", 0) >= ROLE_RANK[minimum]


def current_identity() -> Optional[Identity]:
    """
    Access gate contract: None when there is no active session,
    otherwise the caller's user id and role.

    Malformed or expired tokens raise and are answered by the JWT manager.
    """
    if verify_jwt_in_request(optional=True) is None:
        return None

    user_id = get_jwt_identity()
    if not user_id:
        return None

    return Identity(user_id=user_id, role=get_jwt().get("role", ""))


def roles_required(minimum_role):
    """
    Require an active session whose role ranks at least `minimum_role`.

    Runs before the view touches the store: 401 without a session,
    403 when the role is too low.
    """
    if minimum_role not in ROLE_RANK:
        raise ValueError(f"Unknown role: {minimum_role}")

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            identity = current_identity()

            if identity is None:
                return jsonify({"error": "Unauthorized"}), 401

            if not has_role(identity.role, minimum_role):
                return jsonify({"error": "Insufficient permissions"}), 403

            g.current_user = identity
            return fn(*args, **kwargs)
        return wrapper
    return decorator
