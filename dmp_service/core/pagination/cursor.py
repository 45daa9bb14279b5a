"""Cursor encoding and decoding.

Cursors are opaque strings that encode a row's position in an ordering.
The next query seeks directly past that position.

The token format is:
1. JSON object with the ordering signature and the position values
2. Base64 URL-safe encoded (unpadded)
3. A dot and a truncated HMAC-SHA256 of the encoded body

Example payload:
    {"o": "licenses/name:ASC,id:ASC", "k": ["MIT", 7]}

Values JSON cannot represent natively are tagged so they decode to the same
type: ``{"$dt": "2025-01-15T10:30:00+00:00"}``, ``{"$d": "2025-01-15"}``,
``{"$uuid": "..."}``, ``{"$dec": "1.50"}``.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import math
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any
from uuid import UUID

from dmp_service.core.pagination.exceptions import InvalidCursorError
from dmp_service.core.pagination.ordering import OrderingKey

if TYPE_CHECKING:
    from dmp_service.core.settings import PaginationSettings

_SIGNATURE_HEX_LENGTH = 32


def _tag(value: Any) -> Any:
    if value is None or isinstance(value, bool | int | str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeError(f"Cannot encode non-finite float {value!r} in a cursor")
        return value
    # datetime is a date subclass; check it first
    if isinstance(value, datetime):
        return {"$dt": value.isoformat()}
    if isinstance(value, date):
        return {"$d": value.isoformat()}
    if isinstance(value, UUID):
        return {"$uuid": str(value)}
    if isinstance(value, Decimal):
        return {"$dec": str(value)}
    raise TypeError(f"Cannot encode {type(value).__name__} in a cursor")


def _untag(value: Any) -> Any:
    if isinstance(value, dict):
        if len(value) != 1:
            raise ValueError("Malformed tagged value")
        ((tag, raw),) = value.items()
        if not isinstance(raw, str):
            raise ValueError("Malformed tagged value")
        match tag:
            case "$dt":
                return datetime.fromisoformat(raw)
            case "$d":
                return date.fromisoformat(raw)
            case "$uuid":
                return UUID(raw)
            case "$dec":
                return Decimal(raw)
        raise ValueError(f"Unknown tag {tag!r}")
    if isinstance(value, list):
        raise ValueError("Unexpected list in cursor position")
    return value


class CursorCodec:
    """Encode and decode signed pagination cursors.

    Usage:
        codec = CursorCodec("secret")
        token = codec.encode(ordering.key_for(last_row))
        position = codec.decode(token)
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: str | bytes) -> None:
        if not secret:
            raise ValueError("Cursor secret must not be empty")
        self._secret = secret.encode() if isinstance(secret, str) else secret

    @classmethod
    def from_settings(cls, settings: PaginationSettings) -> CursorCodec:
        return cls(settings.cursor_secret.get_secret_value())

    def encode(self, position: OrderingKey) -> str:
        """Encode ``position`` to an opaque token.

        Raises:
            TypeError: If a position value has no cursor representation.
        """
        payload = {
            "o": position.signature,
            "k": [_tag(position.sort_value), _tag(position.id)],
        }
        raw = json.dumps(payload, separators=(",", ":"), allow_nan=False).encode()
        body = base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")
        return f"{body}.{self._sign(body)}"

    def decode(self, token: str) -> OrderingKey:
        """Decode a token produced by ``encode``.

        Raises:
            InvalidCursorError: If the token is malformed or its signature does not match.
        """
        body, sep, signature = token.rpartition(".")
        if not sep or not body or not signature.isascii():
            raise InvalidCursorError()
        if not hmac.compare_digest(signature, self._sign(body)):
            raise InvalidCursorError()

        try:
            padded = body + "=" * (-len(body) % 4)
            payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
            signature_text = payload["o"]
            sort_value, identifier = payload["k"]
            if not isinstance(signature_text, str):
                raise ValueError("Ordering signature must be a string")
            return OrderingKey(
                signature=signature_text,
                sort_value=_untag(sort_value),
                id=_untag(identifier),
            )
        except (binascii.Error, UnicodeError, ValueError, KeyError, TypeError) as e:
            raise InvalidCursorError() from e

    def _sign(self, body: str) -> str:
        digest = hmac.new(self._secret, body.encode("ascii", "replace"), hashlib.sha256)
        return digest.hexdigest()[:_SIGNATURE_HEX_LENGTH]


__all__ = ["CursorCodec"]
