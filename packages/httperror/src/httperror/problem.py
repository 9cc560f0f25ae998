# This project was developed with assistance from AI tools.
"""ProblemError: an RFC 7807 problem details object usable as an exception.

Extension members are flattened to the top level of the JSON object::

    {"type":"...","title":"...","status":404,"detail":"...","instance":"...","balance":30}

The five reserved members are always written, even when empty or zero, so a
consumer never has to guess whether a member was omitted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pydantic_core
from pydantic import ValidationError

from .codec import Marshal, Unmarshal, default_marshal, default_unmarshal
from .config import settings
from .exceptions import DecodeError, EncodeError, MalformedPayloadError
from .schema import RESERVED_KEYS, ProblemDetails


class ProblemError(Exception):
    """Structured HTTP API error.

    Args:
        title: Short, human-readable summary of the problem type. It should
            not change between occurrences of the same problem type.
        status: HTTP status code for this occurrence, 0 when unset.
        type_uri: URI reference identifying the problem type. Empty means
            "about:blank" by convention; nothing here enforces it.

    No validation is performed on any field -- the object carries data, it
    does not police it.
    """

    def __init__(
        self,
        title: str,
        status: int,
        type_uri: str = "",
        *,
        detail: str = "",
        instance: str = "",
        extension_members: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(title, status, type_uri)
        self.type = type_uri
        self.title = title
        self.status = status
        self.detail = detail
        self.instance = instance
        self.extension_members = extension_members

    def with_detail(self, detail: str) -> ProblemError:
        """Human-readable explanation specific to this occurrence of the problem."""
        self.detail = detail
        return self

    def with_instance(self, instance: str) -> ProblemError:
        """URI reference identifying the specific occurrence of the problem."""
        self.instance = instance
        return self

    def with_extension(self, key: str, value: Any) -> ProblemError:
        """Attach a problem-type-specific member; reserved names are rejected."""
        if key in RESERVED_KEYS:
            raise ValueError(f"{key!r} is a reserved problem details member")
        if self.extension_members is None:
            self.extension_members = {}
        self.extension_members[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.title} on {self.instance} reference {self.type}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(title={self.title!r}, status={self.status!r}, "
            f"type_uri={self.type!r}, detail={self.detail!r}, instance={self.instance!r}, "
            f"extension_members={self.extension_members!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Flat mapping of reserved members followed by extension members."""
        result: dict[str, Any] = {key: getattr(self, key) for key in RESERVED_KEYS}
        result.update(self.extension_members or {})
        return result

    # -- Wire format --

    def to_json(self, marshal: Marshal | None = None) -> bytes:
        """Serialize to a flat JSON object.

        Args:
            marshal: Encoder for individual extension member values. Defaults
                to pydantic-core's JSON encoder.

        Raises:
            EncodeError: An extension member name is not a string or is
                reserved, or its value could not be marshaled. Nothing is
                returned in that case.
        """
        if marshal is None:
            marshal = default_marshal

        members = [
            _member(key, pydantic_core.to_json(getattr(self, key))) for key in RESERVED_KEYS
        ]

        extensions = self.extension_members or {}
        for key in extensions:
            if not isinstance(key, str):
                raise EncodeError(repr(key), "member names must be strings")
            if key in RESERVED_KEYS:
                raise EncodeError(key, "name collides with a reserved member")

        keys = sorted(extensions) if settings.SORT_EXTENSION_KEYS else list(extensions)
        for key in keys:
            try:
                encoded = marshal(extensions[key])
            except Exception as exc:
                raise EncodeError(key, str(exc)) from exc
            if isinstance(encoded, str):
                encoded = encoded.encode("utf-8")
            elif not isinstance(encoded, bytes):
                raise EncodeError(key, "marshal must return bytes or str")
            members.append(_member(key, encoded))

        return b"{" + b",".join(members) + b"}"

    @classmethod
    def from_json(cls, data: bytes | str, unmarshal: Unmarshal | None = None) -> ProblemError:
        """Parse a flat JSON object into a ProblemError.

        All five reserved members must be present: ``status`` as a JSON
        number (floats are truncated), the others as strings. Every other
        member becomes an extension member.

        Raises:
            DecodeError: The payload is not a JSON object.
            MalformedPayloadError: A reserved member is missing or mistyped.
        """
        if unmarshal is None:
            unmarshal = default_unmarshal

        try:
            decoded = unmarshal(data)
        except Exception as exc:
            raise DecodeError(f"cannot unmarshal problem details: {exc}") from exc
        if not isinstance(decoded, Mapping):
            raise DecodeError(
                f"cannot unmarshal problem details: expected a JSON object, "
                f"got {type(decoded).__name__}"
            )

        try:
            fixed = ProblemDetails.model_validate(dict(decoded))
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            fields = tuple(dict.fromkeys(str(err["loc"][0]) for err in errors if err["loc"]))
            reason = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in errors)
            raise MalformedPayloadError(fields, reason) from exc

        return cls(
            fixed.title,
            fixed.status,
            fixed.type,
            detail=fixed.detail,
            instance=fixed.instance,
            extension_members={k: v for k, v in decoded.items() if k not in RESERVED_KEYS},
        )


def _member(key: str, encoded: bytes) -> bytes:
    return pydantic_core.to_json(key) + b":" + encoded
