from typing import Optional

from .common import APIModel, IconUrls


class League(APIModel):
    """Main village trophy league (e.g. "Legend League")."""

    id: Optional[int] = None
    name: Optional[str] = None
    iconUrls: Optional[IconUrls] = None


class BuilderBaseLeague(APIModel):
    id: Optional[int] = None
    name: Optional[str] = None


class CapitalLeague(APIModel):
    id: Optional[int] = None
    name: Optional[str] = None


class WarLeague(APIModel):
    """Clan war league tier of a clan (e.g. "Crystal League I")."""

    id: Optional[int] = None
    name: Optional[str] = None


class LeagueSeason(APIModel):
    # "YYYY-MM", month in which the season ended
    id: Optional[str] = None
