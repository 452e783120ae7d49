from typing import Optional, Tuple

from .common import APIModel


class VerifyTokenResponse(APIModel):
    """
    Answer of ``/players/{playerTag}/verifytoken``.

    ``status`` is "ok" when the in-game API token belongs to the player and
    "invalid" otherwise.
    """

    tag: Optional[str] = None
    token: Optional[str] = None
    status: Optional[str] = None


# developer portal (developer.clashofclans.com), used to manage API keys


class DeveloperLogin(APIModel):
    # JWT whose payload holds the IP the login was made from
    temporaryAPIToken: Optional[str] = None
    sessionExpiresInSeconds: Optional[int] = None


class DeveloperKey(APIModel):
    """An API key. ``cidrRanges`` lists the IPs allowed to use ``key``."""

    id: Optional[str] = None
    developerId: Optional[str] = None
    tier: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    scopes: Optional[Tuple[str, ...]] = None
    cidrRanges: Optional[Tuple[str, ...]] = None
    key: Optional[str] = None


class DeveloperKeyList(APIModel):
    keys: Optional[Tuple[DeveloperKey, ...]] = None


class DeveloperKeyResponse(APIModel):
    key: Optional[DeveloperKey] = None
