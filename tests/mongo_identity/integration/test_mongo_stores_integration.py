"""Integration tests for the MongoDB stores with Testcontainers MongoDB."""

from uuid import UUID

import pytest

from mongo_identity import (
    Claim,
    IdentityRole,
    IdentityUser,
    InvalidKeyError,
    UserLoginInfo,
)
from mongo_identity.infrastructure.persistence.mongo import IdentityStoreBuilder
from tests.shared.fixtures.factories import AppRole, AppUser, TestIdentityFactory


class GuidUser(IdentityUser[UUID]):
    pass


class GuidRole(IdentityRole[UUID]):
    pass


@pytest.fixture
def string_stores(mongo_connection):
    registration = IdentityStoreBuilder(mongo_connection).add_mongo_stores(
        AppUser, AppRole
    )
    return registration.create_user_store(), registration.create_role_store()


@pytest.fixture
def guid_stores(mongo_connection):
    registration = IdentityStoreBuilder(mongo_connection).add_mongo_stores(
        GuidUser, GuidRole
    )
    return registration.create_user_store(), registration.create_role_store()


@pytest.mark.integration
class TestMongoStoresIntegration:
    """Store behaviour against a real MongoDB."""

    @pytest.mark.asyncio
    async def test_user_round_trip(self, string_stores):
        """A user with embedded collections survives a real round trip."""
        user_store, _ = string_stores
        user = TestIdentityFactory.alice(
            claims=[Claim("a", "1")],
            logins=[UserLoginInfo("github", "123", "GitHub")],
        )

        assert (await user_store.create(user)).succeeded is True
        found = await user_store.find_by_id(user.id)

        assert found.normalized_email == user.normalized_email
        assert found.claims == user.claims
        assert found.logins == user.logins

    @pytest.mark.asyncio
    async def test_targeted_update_keeps_concurrent_claim(self, string_stores):
        user_store, _ = string_stores
        user = TestIdentityFactory.alice()
        await user_store.create(user)

        other_copy = await user_store.find_by_id(user.id)
        await user_store.add_claims(other_copy, [Claim("department", "sales")])
        await user_store.set_phone_number(user, "555-0100")

        stored = await user_store.find_by_id(user.id)
        assert stored.phone_number == "555-0100"
        assert stored.claims == [Claim("department", "sales")]

    @pytest.mark.asyncio
    async def test_login_pipeline(self, string_stores):
        user_store, _ = string_stores
        alice = TestIdentityFactory.alice()
        await user_store.create(alice)
        await user_store.create(TestIdentityFactory.bob())
        await user_store.add_login(alice, UserLoginInfo("github", "123", "GitHub"))

        match = await user_store.find_user_login(None, "github", "123")
        found = await user_store.find_by_login("github", "123")

        assert match.user_id == alice.id
        assert match.provider_display_name == "GitHub"
        assert found.id == alice.id
        assert await user_store.find_user_login(
            TestIdentityFactory.BOB_ID, "github", "123"
        ) is None

    @pytest.mark.asyncio
    async def test_claim_query(self, string_stores):
        user_store, _ = string_stores
        alice = TestIdentityFactory.alice()
        bob = TestIdentityFactory.bob()
        await user_store.create(alice)
        await user_store.create(bob)
        await user_store.add_claims(alice, [Claim("department", "engineering")])
        await user_store.add_claims(bob, [Claim("department", "sales")])

        found = await user_store.get_users_for_claim(Claim("department", "engineering"))

        assert [user.id for user in found] == [alice.id]

    @pytest.mark.asyncio
    async def test_role_scenario_with_guid_keys(self, guid_stores):
        """UUID keys work end to end, including role references."""
        user_store, role_store = guid_stores
        role = GuidRole(name="Admin", id=TestIdentityFactory.ADMIN_ROLE_GUID, normalized_name="ADMIN")
        user = GuidUser(user_name="alice", id=TestIdentityFactory.ALICE_GUID)
        await role_store.create(role)
        await user_store.create(user)

        await user_store.add_to_role(user, "ADMIN")

        members = await user_store.get_users_in_role("ADMIN")
        assert [member.id for member in members] == [TestIdentityFactory.ALICE_GUID]
        assert isinstance(members[0].roles[0].id, UUID)
        assert await user_store.is_in_role(user, "ADMIN") is True
        match = await user_store.find_user_role(user.id, role.id)
        assert match.role_id == role.id

        found_role = await role_store.find_by_id(str(role.id))
        assert found_role.name == "Admin"

    @pytest.mark.asyncio
    async def test_malformed_guid(self, guid_stores):
        user_store, _ = guid_stores

        with pytest.raises(InvalidKeyError):
            await user_store.find_by_id("not-a-guid")

    @pytest.mark.asyncio
    async def test_tokens_and_recovery_codes(self, string_stores):
        user_store, _ = string_stores
        user = TestIdentityFactory.alice()
        await user_store.create(user)

        await user_store.replace_codes(user, ["aaa", "bbb"])
        assert await user_store.redeem_code(user, "aaa") is True

        stored = await user_store.find_by_id(user.id)
        assert await user_store.count_codes(stored) == 1

        await user_store.set_token(stored, "github", "access", "v1")
        await user_store.remove_token(stored, "github", "access")
        assert await user_store.get_token(
            await user_store.find_by_id(user.id), "github", "access"
        ) is None
