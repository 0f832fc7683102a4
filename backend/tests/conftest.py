# backend/tests/conftest.py
import os
import sys

import pytest
from flask_jwt_extended import create_access_token

# Add backend directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from brand_cms import create_app
from brand_cms.domain.access import Actor, Role
from brand_cms.extensions import db


@pytest.fixture
def app():
    """Application bound to a fresh in-memory database."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    def make(role=Role.SUPER_ADMIN, identity="user-1"):
        token = create_access_token(identity=identity, additional_claims={"role": role})
        return {"Authorization": f"Bearer {token}"}
    return make


@pytest.fixture
def super_admin():
    return Actor(id="user-1", role=Role.SUPER_ADMIN)


@pytest.fixture
def admin():
    return Actor(id="user-2", role=Role.ADMIN)


@pytest.fixture
def sub_admin():
    return Actor(id="user-3", role=Role.SUB_ADMIN)
