from __future__ import annotations

import pytest
from flask_jwt_extended import create_access_token

from portfolio import create_app
from portfolio.extensions import db
from portfolio.models.user import User


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(role: str) -> User:
    user = User()
    user.email = f"{role.lower()}@example.com"
    user.name = role.title()
    user.role = role
    user.set_password("secret-password")
    db.session.add(user)
    db.session.commit()
    return user


def _auth_header(user: User) -> dict[str, str]:
    token = create_access_token(identity=user.id, additional_claims={"role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(app) -> User:
    return _make_user("ADMIN")


@pytest.fixture
def admin_headers(admin_user) -> dict[str, str]:
    return _auth_header(admin_user)


@pytest.fixture
def editor_headers(app) -> dict[str, str]:
    return _auth_header(_make_user("EDITOR"))


@pytest.fixture
def viewer_headers(app) -> dict[str, str]:
    return _auth_header(_make_user("VIEWER"))
