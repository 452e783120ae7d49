from typing import Optional, Tuple

from .common import APIModel, BadgeUrls, Label, Role
from .league import BuilderBaseLeague, CapitalLeague, League, WarLeague
from .location import ChatLanguage, Location
from .player import PlayerHouse


class ClanMember(APIModel):
    """
    One entry of a clan member list.

    ``clanRank`` is the position by trophies inside the clan, starting at 1.
    ``donations`` and ``donationsReceived`` reset every season.
    """

    tag: Optional[str] = None
    name: Optional[str] = None
    role: Optional[Role] = None
    townHallLevel: Optional[int] = None
    expLevel: Optional[int] = None
    league: Optional[League] = None
    builderBaseLeague: Optional[BuilderBaseLeague] = None
    trophies: Optional[int] = None
    builderBaseTrophies: Optional[int] = None
    versusTrophies: Optional[int] = None
    clanRank: Optional[int] = None
    previousClanRank: Optional[int] = None
    donations: Optional[int] = None
    donationsReceived: Optional[int] = None
    playerHouse: Optional[PlayerHouse] = None


class CapitalDistrict(APIModel):
    id: Optional[int] = None
    name: Optional[str] = None
    districtHallLevel: Optional[int] = None


class ClanCapital(APIModel):
    capitalHallLevel: Optional[int] = None
    districts: Optional[Tuple[CapitalDistrict, ...]] = None


class Clan(APIModel):
    """
    A full clan profile, as returned by ``/clans/{clanTag}``.

    Attributes
    ----------
    type:
        :class:`str`: Who may join, "open", "inviteOnly" or "closed"
    members:
        :class:`int`: Member count, up to 50
    clanPoints:
        :class:`int`: Trophy based score of the main village
    clanBuilderBasePoints:
        :class:`int`: Trophy based score of the builder base
    clanVersusPoints:
        :class:`int`: Builder base score, pre-rework name
    warFrequency:
        :class:`str`: "always", "moreThanOncePerWeek", "oncePerWeek",
        "lessThanOncePerWeek", "never" or "unknown"
    warTies, warLosses:
        :class:`int`: Only sent when ``isWarLogPublic`` is true
    requiredTownhallLevel:
        :class:`int`: Lowercase "h" is the upstream spelling
    memberList:
        :class:`tuple`: :class:`ClanMember` entries, sorted by ``clanRank``
    """

    tag: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    location: Optional[Location] = None
    isFamilyFriendly: Optional[bool] = None
    badgeUrls: Optional[BadgeUrls] = None
    clanLevel: Optional[int] = None
    clanPoints: Optional[int] = None
    clanBuilderBasePoints: Optional[int] = None
    clanVersusPoints: Optional[int] = None
    clanCapitalPoints: Optional[int] = None
    capitalLeague: Optional[CapitalLeague] = None
    requiredTrophies: Optional[int] = None
    requiredBuilderBaseTrophies: Optional[int] = None
    requiredVersusTrophies: Optional[int] = None
    requiredTownhallLevel: Optional[int] = None
    warFrequency: Optional[str] = None
    warWinStreak: Optional[int] = None
    warWins: Optional[int] = None
    warTies: Optional[int] = None
    warLosses: Optional[int] = None
    isWarLogPublic: Optional[bool] = None
    warLeague: Optional[WarLeague] = None
    members: Optional[int] = None
    memberList: Optional[Tuple[ClanMember, ...]] = None
    labels: Optional[Tuple[Label, ...]] = None
    clanCapital: Optional[ClanCapital] = None
    chatLanguage: Optional[ChatLanguage] = None
