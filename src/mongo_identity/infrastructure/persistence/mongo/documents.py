"""Mapping between identity aggregates and their MongoDB documents.

Document fields use the attribute names of the aggregates. The aggregate
id is stored under ``_id`` and so is the role id inside embedded role
references.
"""

from dataclasses import asdict
from typing import Any, Iterable

from mongo_identity.domain.role.aggregates import IdentityRole
from mongo_identity.domain.shared import ensure_tz_aware
from mongo_identity.domain.user.aggregates import IdentityUser
from mongo_identity.domain.value_objects import (
    Claim,
    RoleReference,
    UserLoginInfo,
    UserToken,
)
from mongo_identity.infrastructure.persistence.mongo.key_codecs import KeyCodec

USER_SCALAR_FIELDS = (
    "user_name",
    "normalized_user_name",
    "email",
    "normalized_email",
    "email_confirmed",
    "password_hash",
    "security_stamp",
    "concurrency_stamp",
    "phone_number",
    "phone_number_confirmed",
    "two_factor_enabled",
    "lockout_end",
    "lockout_enabled",
    "access_failed_count",
)

ROLE_SCALAR_FIELDS = ("name", "normalized_name", "concurrency_stamp")


def claims_to_documents(claims: Iterable[Claim]) -> list[dict[str, Any]]:
    return [asdict(claim) for claim in claims]


def logins_to_documents(logins: Iterable[UserLoginInfo]) -> list[dict[str, Any]]:
    return [asdict(login) for login in logins]


def tokens_to_documents(tokens: Iterable[UserToken]) -> list[dict[str, Any]]:
    return [asdict(token) for token in tokens]


def roles_to_documents(
    roles: Iterable[RoleReference], key_codec: KeyCodec
) -> list[dict[str, Any]]:
    return [
        {
            "_id": key_codec.to_bson(role.id),
            "name": role.name,
            "normalized_name": role.normalized_name,
        }
        for role in roles
    ]


def _claims_from_documents(documents: Iterable[dict[str, Any]]) -> list[Claim]:
    claims = []
    for document in documents:
        claim = Claim(type=document["type"], value=document["value"])
        if document.get("value_type") is not None:
            claim.value_type = document["value_type"]
        if document.get("issuer") is not None:
            claim.issuer = document["issuer"]
        claims.append(claim)
    return claims


def user_to_document(user: IdentityUser, key_codec: KeyCodec) -> dict[str, Any]:
    document: dict[str, Any] = {"_id": key_codec.to_bson(user.id)}
    for field in USER_SCALAR_FIELDS:
        document[field] = getattr(user, field)
    document["claims"] = claims_to_documents(user.claims)
    document["roles"] = roles_to_documents(user.roles, key_codec)
    document["logins"] = logins_to_documents(user.logins)
    document["tokens"] = tokens_to_documents(user.tokens)
    return document


def user_from_document(
    document: dict[str, Any],
    user_type: type[IdentityUser],
    key_codec: KeyCodec,
) -> IdentityUser:
    fields = {
        field: document[field] for field in USER_SCALAR_FIELDS if field in document
    }
    fields["lockout_end"] = ensure_tz_aware(fields.get("lockout_end"))
    fields["access_failed_count"] = fields.get("access_failed_count") or 0

    return user_type.reconstitute(
        id=key_codec.from_bson(document["_id"]),
        claims=_claims_from_documents(document.get("claims") or []),
        roles=[
            RoleReference(
                id=key_codec.from_bson(role["_id"]),
                name=role.get("name"),
                normalized_name=role.get("normalized_name"),
            )
            for role in document.get("roles") or []
        ],
        logins=[
            UserLoginInfo(
                login_provider=login["login_provider"],
                provider_key=login["provider_key"],
                provider_display_name=login.get("provider_display_name"),
            )
            for login in document.get("logins") or []
        ],
        tokens=[
            UserToken(
                login_provider=token["login_provider"],
                name=token["name"],
                value=token.get("value"),
            )
            for token in document.get("tokens") or []
        ],
        **fields,
    )


def role_to_document(role: IdentityRole, key_codec: KeyCodec) -> dict[str, Any]:
    document: dict[str, Any] = {"_id": key_codec.to_bson(role.id)}
    for field in ROLE_SCALAR_FIELDS:
        document[field] = getattr(role, field)
    document["claims"] = claims_to_documents(role.claims)
    return document


def role_from_document(
    document: dict[str, Any],
    role_type: type[IdentityRole],
    key_codec: KeyCodec,
) -> IdentityRole:
    fields = {
        field: document[field] for field in ROLE_SCALAR_FIELDS if field in document
    }
    return role_type.reconstitute(
        id=key_codec.from_bson(document["_id"]),
        claims=_claims_from_documents(document.get("claims") or []),
        **fields,
    )
