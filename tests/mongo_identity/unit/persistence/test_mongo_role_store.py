"""Unit tests for MongoRoleStore against an in-memory collection."""

import pytest
from pymongo.errors import AutoReconnect

from mongo_identity import (
    CancellationToken,
    Claim,
    ErrorCode,
    IdentityResult,
    InvalidArgumentError,
    OperationCancelledError,
    PersistenceError,
    StoreDisposedError,
)
from mongo_identity.infrastructure.persistence.mongo import MongoRoleStoreAsGuid
from tests.shared.fixtures.factories import AppRole, TestIdentityFactory
from tests.shared.fixtures.mongo import InMemoryCollection


class TestMongoRoleStoreCrud:
    """Tests for create/update/delete/find."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, role_store, roles):
        """A created role can be found by id and by normalized name."""
        role = TestIdentityFactory.admin_role()

        result = await role_store.create(role)

        assert result.succeeded is True
        assert roles.calls_named("insert_one")[0][0]["_id"] == "role-admin"

        by_id = await role_store.find_by_id("role-admin")
        by_name = await role_store.find_by_name("ADMIN")

        assert isinstance(by_id, AppRole)
        assert by_id == role
        assert by_name.name == "Admin"

    @pytest.mark.asyncio
    async def test_find_missing(self, role_store):
        assert await role_store.find_by_id("nope") is None
        assert await role_store.find_by_name("NOPE") is None

    @pytest.mark.asyncio
    async def test_create_not_acknowledged_raises(self, role_store, roles):
        roles.acknowledged = False

        with pytest.raises(PersistenceError):
            await role_store.create(TestIdentityFactory.admin_role())

    @pytest.mark.asyncio
    async def test_create_duplicate_raises(self, role_store):
        """No duplicate pre-check; the driver error surfaces as PersistenceError."""
        await role_store.create(TestIdentityFactory.admin_role())

        with pytest.raises(PersistenceError):
            await role_store.create(TestIdentityFactory.admin_role())

    @pytest.mark.asyncio
    async def test_create_without_id(self, role_store, roles):
        with pytest.raises(InvalidArgumentError):
            await role_store.create(AppRole(name="NoId"))

        assert roles.calls == []

    @pytest.mark.asyncio
    async def test_update_and_delete_without_id(self, role_store, roles):
        role = AppRole(name="NoId")

        with pytest.raises(InvalidArgumentError) as exc_info:
            await role_store.update(role)
        assert exc_info.value.argument == "role.id"

        with pytest.raises(InvalidArgumentError):
            await role_store.delete(role)

        assert roles.calls == []

    @pytest.mark.asyncio
    async def test_update_replaces_document(self, role_store, roles):
        role = TestIdentityFactory.admin_role()
        await role_store.create(role)

        role.name = "Administrators"
        result = await role_store.update(role)

        assert result == IdentityResult.success()
        assert roles.get_raw("role-admin")["name"] == "Administrators"

    @pytest.mark.asyncio
    async def test_update_not_acknowledged_fails(self, role_store, roles):
        roles.acknowledged = False

        result = await role_store.update(TestIdentityFactory.admin_role())

        assert result.succeeded is False
        assert result.errors[0].code == ErrorCode.UPDATE_ERROR.value

    @pytest.mark.asyncio
    async def test_update_driver_error_fails(self, role_store, roles):
        roles.write_error = AutoReconnect("connection lost")

        result = await role_store.update(TestIdentityFactory.admin_role())

        assert result.succeeded is False
        assert str(result) == "Failed : UpdateError"

    @pytest.mark.asyncio
    async def test_delete(self, role_store, roles):
        await role_store.create(TestIdentityFactory.admin_role())

        result = await role_store.delete(TestIdentityFactory.admin_role())

        assert result.succeeded is True
        assert roles.documents == {}

    @pytest.mark.asyncio
    async def test_delete_driver_error_fails(self, role_store, roles):
        roles.write_error = AutoReconnect("connection lost")

        result = await role_store.delete(TestIdentityFactory.admin_role())

        assert result.errors[0].code == ErrorCode.DELETE_ERROR.value


class TestMongoRoleStoreNames:
    """Tests for name getters and targeted setters."""

    @pytest.mark.asyncio
    async def test_getters(self, role_store):
        role = TestIdentityFactory.admin_role()

        assert await role_store.get_role_id(role) == "role-admin"
        assert await role_store.get_role_name(role) == "Admin"
        assert await role_store.get_normalized_role_name(role) == "ADMIN"

    @pytest.mark.asyncio
    async def test_set_name_issues_single_field_update(self, role_store, roles):
        """Only the changed field is written."""
        role = TestIdentityFactory.admin_role()
        await role_store.create(role)

        await role_store.set_role_name(role, "Root")

        assert role.name == "Root"
        assert roles.calls_named("update_one") == [
            ({"_id": "role-admin"}, {"$set": {"name": "Root"}})
        ]
        assert roles.get_raw("role-admin")["name"] == "Root"

    @pytest.mark.asyncio
    async def test_set_unchanged_name_skips_write(self, role_store, roles):
        role = TestIdentityFactory.admin_role()

        await role_store.set_role_name(role, "Admin")
        await role_store.set_normalized_role_name(role, "ADMIN")

        assert roles.calls_named("update_one") == []

    @pytest.mark.asyncio
    async def test_set_normalized_name(self, role_store, roles):
        role = TestIdentityFactory.admin_role()

        await role_store.set_normalized_role_name(role, "ROOT")

        assert roles.calls_named("update_one")[0][1] == {
            "$set": {"normalized_name": "ROOT"}
        }


class TestMongoRoleStoreClaims:
    """Tests for role claims."""

    @pytest.mark.asyncio
    async def test_add_claim_writes_claims_array(self, role_store, roles):
        role = TestIdentityFactory.admin_role()
        await role_store.create(role)

        await role_store.add_claim(role, Claim("permission", "users.read"))

        (filter, update), = roles.calls_named("update_one")
        assert filter == {"_id": "role-admin"}
        assert list(update["$set"]) == ["claims"]
        assert update["$set"]["claims"][0]["value"] == "users.read"
        assert await role_store.get_claims(role) == [Claim("permission", "users.read")]

    @pytest.mark.asyncio
    async def test_duplicate_claim_is_not_written(self, role_store, roles):
        role = TestIdentityFactory.admin_role()
        await role_store.add_claim(role, Claim("permission", "users.read"))

        await role_store.add_claim(role, Claim("permission", "users.read"))

        assert len(roles.calls_named("update_one")) == 1

    @pytest.mark.asyncio
    async def test_remove_claim(self, role_store, roles):
        role = TestIdentityFactory.admin_role()
        await role_store.create(role)
        await role_store.add_claim(role, Claim("permission", "users.read"))

        await role_store.remove_claim(role, Claim("permission", "users.read"))
        await role_store.remove_claim(role, Claim("permission", "users.read"))

        assert len(roles.calls_named("update_one")) == 2
        assert roles.get_raw("role-admin")["claims"] == []


class TestMongoRoleStoreGuards:
    """Tests for entry checks."""

    @pytest.mark.asyncio
    async def test_cancelled_token(self, role_store, roles):
        """Cancellation is checked before any database call."""
        token = CancellationToken()
        token.cancel()

        with pytest.raises(OperationCancelledError):
            await role_store.find_by_name("ADMIN", token)

        assert roles.calls == []

    @pytest.mark.asyncio
    async def test_closed_store(self, role_store):
        role_store.close()

        with pytest.raises(StoreDisposedError):
            await role_store.find_by_id("role-admin")

    @pytest.mark.asyncio
    async def test_cancellation_wins_over_disposal(self, role_store):
        token = CancellationToken()
        token.cancel()
        role_store.close()

        with pytest.raises(OperationCancelledError):
            await role_store.get_role_name(TestIdentityFactory.admin_role(), token)

    @pytest.mark.asyncio
    async def test_none_arguments(self, role_store):
        with pytest.raises(InvalidArgumentError) as exc_info:
            await role_store.create(None)
        assert exc_info.value.argument == "role"

        with pytest.raises(InvalidArgumentError):
            await role_store.add_claim(TestIdentityFactory.admin_role(), None)


class TestMongoRoleStoreAsGuid:
    """Tests for the UUID variant."""

    @pytest.mark.asyncio
    async def test_round_trip_by_text_id(self):
        roles = InMemoryCollection("IdentityRoleAsGuid")
        store = MongoRoleStoreAsGuid(roles)
        role = TestIdentityFactory.admin_role_as_guid()
        await store.create(role)

        found = await store.find_by_id(str(TestIdentityFactory.ADMIN_ROLE_GUID))

        assert found.id == TestIdentityFactory.ADMIN_ROLE_GUID
        assert await store.get_role_id(found) == str(TestIdentityFactory.ADMIN_ROLE_GUID)

    @pytest.mark.asyncio
    async def test_update_and_delete_without_id(self):
        """A missing id is rejected before it reaches the UUID codec."""
        roles = InMemoryCollection("IdentityRoleAsGuid")
        store = MongoRoleStoreAsGuid(roles)
        role = TestIdentityFactory.admin_role_as_guid()
        role.id = None

        with pytest.raises(InvalidArgumentError):
            await store.update(role)
        with pytest.raises(InvalidArgumentError):
            await store.delete(role)

        assert roles.calls == []
