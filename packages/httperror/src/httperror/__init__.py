# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .codec import DEFAULT_CODEC, Codec, default_marshal, default_unmarshal
from .config import HttpErrorSettings, settings
from .exceptions import DecodeError, EncodeError, MalformedPayloadError, ProblemCodecError
from .problem import ProblemError
from .schema import RESERVED_KEYS, ProblemDetails

__all__ = [
    "__version__",
    "ProblemError",
    "ProblemDetails",
    "RESERVED_KEYS",
    # Codec
    "Codec",
    "DEFAULT_CODEC",
    "default_marshal",
    "default_unmarshal",
    # Errors
    "ProblemCodecError",
    "EncodeError",
    "DecodeError",
    "MalformedPayloadError",
    # Config
    "HttpErrorSettings",
    "settings",
]
