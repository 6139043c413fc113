# File: tests/conftest.py

import pytest
from flask_jwt_extended import create_access_token

from prompt_studio import create_app
from prompt_studio.extensions import db
from prompt_studio.models.user import User


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


def _make_user(email):
    user = User()
    user.email = email
    user.set_password("correct horse battery staple")
    db.session.add(user)
    db.session.commit()
    return user.id


@pytest.fixture
def user_id(app):
    return _make_user("owner@example.com")


@pytest.fixture
def other_user_id(app):
    return _make_user("someone-else@example.com")


@pytest.fixture
def auth_headers(app, user_id):
    token = create_access_token(identity=user_id)
    return {"Authorization": f"Bearer {token}"}
