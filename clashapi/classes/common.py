from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar

from msgspec import Struct

T = TypeVar("T")


class APIModel(Struct, frozen=True, omit_defaults=True):
    """
    Base of every upstream model.

    Fields are named after the upstream JSON keys and all default to None,
    so a key the API omitted stays None instead of turning into a zero.
    Subclasses inherit the frozen/omit_defaults configuration.
    """


class Role(str, Enum):
    """Rank of a player inside their clan, as spelled on the wire."""

    NOT_MEMBER = "notMember"
    MEMBER = "member"
    # shown in game as "Elder"
    ADMIN = "admin"
    CO_LEADER = "coLeader"
    LEADER = "leader"


class WarPreference(str, Enum):
    IN = "in"
    OUT = "out"


class BadgeUrls(APIModel):
    small: Optional[str] = None
    medium: Optional[str] = None
    large: Optional[str] = None


class IconUrls(APIModel):
    tiny: Optional[str] = None
    small: Optional[str] = None
    medium: Optional[str] = None


class Label(APIModel):
    """A label shown on a player or clan profile (e.g. "Clan Wars", "Active Daily")."""

    id: Optional[int] = None
    name: Optional[str] = None
    iconUrls: Optional[IconUrls] = None


class Cursors(APIModel):
    before: Optional[str] = None
    after: Optional[str] = None


class Paging(APIModel):
    cursors: Optional[Cursors] = None


class ItemList(APIModel, Generic[T]):
    """Envelope of every upstream list endpoint: ``{"items": [...], "paging": {...}}``."""

    items: Optional[Tuple[T, ...]] = None
    paging: Optional[Paging] = None


class ClientError(APIModel):
    """Body of an upstream error response."""

    reason: Optional[str] = None
    message: Optional[str] = None
    type: Optional[str] = None
    detail: Optional[dict] = None
