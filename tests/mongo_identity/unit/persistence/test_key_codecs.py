"""Unit tests for the key codecs."""

from uuid import UUID

import pytest
from bson import Binary, ObjectId
from bson.binary import UuidRepresentation

from mongo_identity import InvalidArgumentError, InvalidKeyError
from mongo_identity.infrastructure.persistence.mongo import (
    ObjectIdKeyCodec,
    StringKeyCodec,
    UuidKeyCodec,
)

GUID = UUID("12345678-1234-5678-1234-567812345678")


class TestStringKeyCodec:
    """Tests for pass-through keys."""

    def test_parse_and_format(self):
        codec = StringKeyCodec()

        assert codec.parse("abc") == "abc"
        assert codec.format("abc") == "abc"
        assert codec.format(None) is None
        assert codec.to_bson("abc") == "abc"

    def test_other_key_types(self):
        """Keys built from text, such as int, go through the string codec."""
        codec = StringKeyCodec(int)

        assert codec.parse("42") == 42
        assert codec.format(42) == "42"

    def test_unparseable_text(self):
        with pytest.raises(InvalidKeyError):
            StringKeyCodec(int).parse("not-a-number")


class TestUuidKeyCodec:
    """Tests for UUID keys."""

    def test_parse(self):
        assert UuidKeyCodec().parse(str(GUID)) == GUID

    def test_malformed_text_is_a_parse_error(self):
        """Malformed ids raise instead of looking like a missing entity."""
        with pytest.raises(InvalidKeyError) as exc_info:
            UuidKeyCodec().parse("not-a-guid")

        assert isinstance(exc_info.value, InvalidArgumentError)
        assert exc_info.value.key_type is UUID

    def test_standard_representation(self):
        """Standard UUIDs are stored as binary subtype 4."""
        stored = UuidKeyCodec().to_bson(GUID)

        assert isinstance(stored, Binary)
        assert stored.subtype == 4
        assert UuidKeyCodec().from_bson(stored) == GUID

    def test_legacy_representation(self):
        """Legacy representations are stored as binary subtype 3."""
        codec = UuidKeyCodec(UuidRepresentation.CSHARP_LEGACY)

        stored = codec.to_bson(GUID)

        assert stored.subtype == 3
        assert codec.from_bson(stored) == GUID

    def test_from_bson_accepts_decoded_uuid(self):
        assert UuidKeyCodec().from_bson(GUID) == GUID


class TestObjectIdKeyCodec:
    """Tests for ObjectId keys."""

    def test_parse(self):
        object_id = ObjectId()

        assert ObjectIdKeyCodec().parse(str(object_id)) == object_id
        assert ObjectIdKeyCodec().format(object_id) == str(object_id)

    def test_malformed_text(self):
        with pytest.raises(InvalidKeyError):
            ObjectIdKeyCodec().parse("xyz")
