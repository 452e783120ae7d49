from typing import Optional

from .common import APIModel, BadgeUrls
from .league import BuilderBaseLeague, League
from .location import Location


class RankingClan(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    badgeUrls: Optional[BadgeUrls] = None


class PlayerRanking(APIModel):
    """
    A row of a main village player leaderboard.

    ``previousRank`` is -1 for players who were not ranked the day before.
    """

    tag: Optional[str] = None
    name: Optional[str] = None
    expLevel: Optional[int] = None
    trophies: Optional[int] = None
    attackWins: Optional[int] = None
    defenseWins: Optional[int] = None
    rank: Optional[int] = None
    previousRank: Optional[int] = None
    clan: Optional[RankingClan] = None
    league: Optional[League] = None


class PlayerBuilderBaseRanking(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    expLevel: Optional[int] = None
    builderBaseTrophies: Optional[int] = None
    rank: Optional[int] = None
    previousRank: Optional[int] = None
    clan: Optional[RankingClan] = None
    builderBaseLeague: Optional[BuilderBaseLeague] = None


class ClanRanking(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    location: Optional[Location] = None
    badgeUrls: Optional[BadgeUrls] = None
    clanLevel: Optional[int] = None
    members: Optional[int] = None
    clanPoints: Optional[int] = None
    rank: Optional[int] = None
    previousRank: Optional[int] = None


class ClanBuilderBaseRanking(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    location: Optional[Location] = None
    badgeUrls: Optional[BadgeUrls] = None
    clanLevel: Optional[int] = None
    members: Optional[int] = None
    clanBuilderBasePoints: Optional[int] = None
    rank: Optional[int] = None
    previousRank: Optional[int] = None


class ClanCapitalRanking(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    location: Optional[Location] = None
    badgeUrls: Optional[BadgeUrls] = None
    clanLevel: Optional[int] = None
    members: Optional[int] = None
    clanCapitalPoints: Optional[int] = None
    rank: Optional[int] = None
    previousRank: Optional[int] = None
