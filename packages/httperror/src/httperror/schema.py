# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details wire schema."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProblemDetails(BaseModel):
    """Reserved members of an RFC 7807 Problem Details object.

    See https://datatracker.ietf.org/doc/html/rfc7807

    Field order is the order members are written on the wire. Validation is
    strict: every member must be present with the right JSON type. Members
    not declared here are extension members and are ignored by the model.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    type: str = Field(description="URI reference identifying the problem type.")
    title: str = Field(description="Short human-readable summary of the problem.")
    status: int = Field(description="HTTP status code, 0 when unset.")
    detail: str = Field(description="Human-readable explanation specific to this occurrence.")
    instance: str = Field(
        description="URI reference identifying the specific occurrence of the problem.",
    )

    @field_validator("status", mode="before")
    @classmethod
    def _truncate_status(cls, value: object) -> object:
        """JSON numbers may arrive as floats; truncate them to an integer status."""
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError("status must be a finite number")
            return int(value)
        return value


RESERVED_KEYS: tuple[str, ...] = tuple(ProblemDetails.model_fields)
