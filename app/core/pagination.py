"""Pagination helpers for list endpoints."""


import base64
import binascii
import re

from fastapi import Query

from app.core.exceptions import ValidationError

DEFAULT_TOP_COUNT = 10
DEFAULT_SKIP = 0
# Largest value a signed 32-bit LIMIT / OFFSET accepts on every supported backend
MAX_PAGE_VALUE = 2**31 - 1

_SKIP_TOKEN_PREFIX = "offset:"
_OFFSET_RE = re.compile(r"[0-9]{1,10}")


class PaginationRequest:
    """FastAPI dependency for `?topCount=10&skip=0` (offset paging over buildings)."""

    def __init__(
        self,
        top_count: int = Query(
            default=DEFAULT_TOP_COUNT, ge=1, le=MAX_PAGE_VALUE, alias="topCount", description="Number of records to return",
        ),
        skip: int = Query(
            default=DEFAULT_SKIP, ge=0, le=MAX_PAGE_VALUE, description="Number of records to skip",
        ),
    ):
        self.top_count = top_count
        self.skip = skip

    def __repr__(self) -> str:
        return f"PaginationRequest(top_count={self.top_count}, skip={self.skip})"


class PlacePageRequest:
    """FastAPI dependency for `?topCount=&skipToken=` (cursor paging over places).

    ``top_count`` stays ``None`` when the caller omits it; the service then
    applies its configured page size.
    """

    def __init__(
        self,
        top_count: int | None = Query(
            default=None, ge=1, le=MAX_PAGE_VALUE, alias="topCount", description="Number of places to return",
        ),
        skip_token: str | None = Query(
            default=None, alias="skipToken", description="Opaque cursor from a previous page",
        ),
    ):
        self.top_count = top_count
        self.skip_token = skip_token

    def __repr__(self) -> str:
        return f"PlacePageRequest(top_count={self.top_count}, skip_token={self.skip_token!r})"


def encode_skip_token(offset: int) -> str:
    raw = f"{_SKIP_TOKEN_PREFIX}{offset}".encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def decode_skip_token(token: str | None) -> int:
    """Return the offset carried by *token*; ``None`` or empty means the first page."""
    if not token:
        return 0
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode()).decode()
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise ValidationError("Invalid skipToken") from None
    if not raw.startswith(_SKIP_TOKEN_PREFIX):
        raise ValidationError("Invalid skipToken")
    value = raw[len(_SKIP_TOKEN_PREFIX):]
    if not _OFFSET_RE.fullmatch(value) or int(value) > MAX_PAGE_VALUE:
        raise ValidationError("Invalid skipToken")
    return int(value)
