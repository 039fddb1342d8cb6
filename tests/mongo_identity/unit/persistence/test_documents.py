"""Unit tests for aggregate/document mapping."""

from datetime import datetime, timezone

from bson import Binary

from mongo_identity import Claim, IdentityUserAsGuid, UserLoginInfo, UserToken
from mongo_identity.infrastructure.persistence.mongo import StringKeyCodec, UuidKeyCodec
from mongo_identity.infrastructure.persistence.mongo.documents import (
    role_from_document,
    role_to_document,
    user_from_document,
    user_to_document,
)
from tests.shared.fixtures.factories import AppRole, AppUser, TestIdentityFactory


class TestUserDocument:
    """Tests for user documents."""

    def test_round_trip_preserves_fields_and_collections(self):
        """Scalars and every embedded collection survive a round trip."""
        user = TestIdentityFactory.alice(
            password_hash="hash",
            lockout_end=datetime(2030, 1, 1, tzinfo=timezone.utc),
            access_failed_count=2,
            claims=[Claim("a", "1")],
            logins=[UserLoginInfo("github", "123", "GitHub")],
            tokens=[UserToken("github", "access", "v")],
        )
        user.role_manager.try_add("role-admin", "ADMIN", "Admin")
        codec = StringKeyCodec()

        restored = user_from_document(user_to_document(user, codec), AppUser, codec)

        assert isinstance(restored, AppUser)
        assert restored.id == user.id
        assert restored.normalized_email == user.normalized_email
        assert restored.password_hash == "hash"
        assert restored.lockout_end == user.lockout_end
        assert restored.access_failed_count == 2
        assert restored.claims == user.claims
        assert restored.roles == user.roles
        assert restored.logins == user.logins
        assert restored.tokens == user.tokens

    def test_document_shape(self):
        """Ids live under _id, role references included."""
        user = TestIdentityFactory.alice()
        user.role_manager.try_add("role-admin", "ADMIN", "Admin")

        document = user_to_document(user, StringKeyCodec())

        assert document["_id"] == TestIdentityFactory.ALICE_ID
        assert document["normalized_user_name"] == "ALICE"
        assert document["roles"] == [
            {"_id": "role-admin", "name": "Admin", "normalized_name": "ADMIN"}
        ]
        assert document["claims"] == document["logins"] == document["tokens"] == []

    def test_guid_keys_are_encoded(self):
        user = TestIdentityFactory.alice_as_guid()
        user.role_manager.try_add(TestIdentityFactory.ADMIN_ROLE_GUID, "ADMIN", "Admin")
        codec = UuidKeyCodec()

        document = user_to_document(user, codec)
        restored = user_from_document(document, IdentityUserAsGuid, codec)

        assert isinstance(document["_id"], Binary)
        assert isinstance(document["roles"][0]["_id"], Binary)
        assert restored.id == TestIdentityFactory.ALICE_GUID
        assert restored.roles[0].id == TestIdentityFactory.ADMIN_ROLE_GUID

    def test_naive_lockout_end_is_read_as_utc(self):
        document = {"_id": "u1", "lockout_end": datetime(2030, 1, 1)}

        restored = user_from_document(document, AppUser, StringKeyCodec())

        assert restored.lockout_end.tzinfo is timezone.utc

    def test_missing_claim_defaults_are_filled(self):
        document = {"_id": "u1", "claims": [{"type": "a", "value": "1"}]}

        restored = user_from_document(document, AppUser, StringKeyCodec())

        assert restored.claims == [Claim("a", "1")]


class TestRoleDocument:
    """Tests for role documents."""

    def test_round_trip(self):
        role = TestIdentityFactory.admin_role()
        role.claim_manager.try_add("permission", "users.read")
        codec = StringKeyCodec()

        document = role_to_document(role, codec)
        restored = role_from_document(document, AppRole, codec)

        assert document["normalized_name"] == "ADMIN"
        assert isinstance(restored, AppRole)
        assert restored.name == "Admin"
        assert restored.concurrency_stamp == role.concurrency_stamp
        assert restored.claims == role.claims
