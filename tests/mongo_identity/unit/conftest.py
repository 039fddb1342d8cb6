"""Fixtures for unit tests: stores bound to in-memory collections."""

import pytest

from mongo_identity import MongoRoleStore, MongoUserStore
from tests.shared.fixtures.factories import AppRole, AppUser
from tests.shared.fixtures.mongo import InMemoryCollection


@pytest.fixture
def users():
    return InMemoryCollection("AppUser")


@pytest.fixture
def roles():
    return InMemoryCollection("AppRole")


@pytest.fixture
def role_store(roles):
    return MongoRoleStore(roles, role_type=AppRole)


@pytest.fixture
def user_store(users, roles):
    return MongoUserStore(users, roles, user_type=AppUser, role_type=AppRole)
