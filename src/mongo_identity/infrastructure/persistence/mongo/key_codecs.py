"""Key codecs translating aggregate ids between text, Python and BSON.

Each store variant binds exactly one codec; the store body itself never
inspects the key type.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar
from uuid import UUID

from bson import Binary, ObjectId
from bson.binary import UuidRepresentation
from bson.errors import InvalidId

from mongo_identity.exceptions import InvalidKeyError

TKey = TypeVar("TKey")


class KeyCodec(ABC, Generic[TKey]):
    """Converts one key type to and from its textual and stored forms."""

    key_type: type

    @abstractmethod
    def parse(self, text: str) -> TKey:
        """Parse the textual form handed in by the host framework.

        Raises
        ------
        InvalidKeyError
            If ``text`` is not a valid key of this type
        """

    def format(self, key: TKey | None) -> str | None:
        if key is None:
            return None
        return str(key)

    def to_bson(self, key: TKey) -> Any:
        return key

    def from_bson(self, value: Any) -> TKey:
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_type={self.key_type.__name__})"


class StringKeyCodec(KeyCodec[Any]):
    """Pass-through codec for opaque string keys.

    Also used for any other key type that can be built from its text and
    is stored natively by the driver (``int`` for instance).
    """

    def __init__(self, key_type: type = str) -> None:
        self.key_type = key_type

    def parse(self, text: str) -> Any:
        if isinstance(text, self.key_type):
            return text
        try:
            return self.key_type(text)
        except (TypeError, ValueError) as e:
            raise InvalidKeyError(text, self.key_type) from e


class UuidKeyCodec(KeyCodec[UUID]):
    """UUID keys stored as BSON binary in the configured representation."""

    key_type = UUID

    def __init__(
        self, uuid_representation: int = UuidRepresentation.STANDARD
    ) -> None:
        self.uuid_representation = uuid_representation

    def parse(self, text: str) -> UUID:
        if isinstance(text, UUID):
            return text
        try:
            return UUID(str(text))
        except (TypeError, ValueError) as e:
            raise InvalidKeyError(text, UUID) from e

    def to_bson(self, key: UUID) -> Binary:
        return Binary.from_uuid(key, self.uuid_representation)

    def from_bson(self, value: Any) -> UUID:
        # The driver only decodes to UUID when the client representation matches.
        if isinstance(value, Binary):
            return value.as_uuid(self.uuid_representation)
        return value


class ObjectIdKeyCodec(KeyCodec[ObjectId]):
    """Native BSON ObjectId keys."""

    key_type = ObjectId

    def parse(self, text: str) -> ObjectId:
        if isinstance(text, ObjectId):
            return text
        try:
            return ObjectId(text)
        except (InvalidId, TypeError) as e:
            raise InvalidKeyError(text, ObjectId) from e
