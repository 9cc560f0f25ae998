# This project was developed with assistance from AI tools.
"""Errors raised while converting problem details to and from JSON."""


class ProblemCodecError(Exception):
    """Base class for problem details serialization failures."""


class EncodeError(ProblemCodecError):
    """An extension member could not be serialized.

    The whole serialization is aborted; ``key`` names the offending member
    and the underlying failure is chained as ``__cause__``.
    """

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"cannot marshal extension member {key!r}: {reason}")
        self.key = key
        self.reason = reason


class DecodeError(ProblemCodecError):
    """The payload could not be decoded into a JSON object."""


class MalformedPayloadError(DecodeError):
    """A reserved member is missing or holds a value of the wrong type."""

    def __init__(self, fields: tuple[str, ...], reason: str) -> None:
        super().__init__(f"malformed problem details ({', '.join(fields)}): {reason}")
        self.fields = fields
        self.reason = reason
