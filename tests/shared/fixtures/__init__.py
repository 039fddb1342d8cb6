"""Shared pytest fixtures for all test suites."""

from tests.shared.fixtures.database import mongo_connection, mongo_container
from tests.shared.fixtures.factories import AppRole, AppUser, TestIdentityFactory
from tests.shared.fixtures.mongo import (
    InMemoryCollection,
    InMemoryMongoClient,
)

__all__ = [
    "AppRole",
    "AppUser",
    "InMemoryCollection",
    "InMemoryMongoClient",
    "TestIdentityFactory",
    "mongo_connection",
    "mongo_container",
]
