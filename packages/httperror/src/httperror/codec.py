# This project was developed with assistance from AI tools.
"""Pluggable marshal/unmarshal functions for problem details.

``marshal`` encodes a single extension member value to JSON bytes.
``unmarshal`` decodes a whole payload into Python values. Both default to
pydantic-core's JSON implementation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pydantic_core

if TYPE_CHECKING:
    from .problem import ProblemError

Marshal = Callable[[Any], bytes | str]
Unmarshal = Callable[[bytes | str], Any]


def default_marshal(value: Any) -> bytes:
    """Encode a JSON-compatible value; raises for anything else (e.g. functions, NaN)."""
    encoded = pydantic_core.to_json(value)
    # to_json writes non-finite floats as bare NaN/Infinity constants
    try:
        pydantic_core.from_json(encoded, allow_inf_nan=False)
    except ValueError as exc:
        raise ValueError("non-finite numbers are not valid JSON") from exc
    return encoded


def default_unmarshal(data: bytes | str) -> Any:
    return pydantic_core.from_json(data, allow_inf_nan=False)


@dataclass(frozen=True)
class Codec:
    """Bundle of marshal/unmarshal functions used to encode and decode problems."""

    marshal: Marshal = default_marshal
    unmarshal: Unmarshal = default_unmarshal

    def encode(self, problem: ProblemError) -> bytes:
        return problem.to_json(self.marshal)

    def decode(self, data: bytes | str) -> ProblemError:
        from .problem import ProblemError

        return ProblemError.from_json(data, self.unmarshal)


DEFAULT_CODEC = Codec()
