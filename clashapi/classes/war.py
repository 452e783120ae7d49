from typing import Optional, Tuple

from .common import APIModel, BadgeUrls

# Timestamps are kept as the upstream strings, e.g. "20250110T070000.000Z".


class ClanWarAttack(APIModel):
    """
    One attack of a war.

    ``order`` is the position of the attack in the whole war, starting at 1.
    ``duration`` is in seconds.
    """

    attackerTag: Optional[str] = None
    defenderTag: Optional[str] = None
    stars: Optional[int] = None
    destructionPercentage: Optional[int] = None
    order: Optional[int] = None
    duration: Optional[int] = None


class ClanWarMember(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    # lowercase "h" on this endpoint only
    townhallLevel: Optional[int] = None
    mapPosition: Optional[int] = None
    attacks: Optional[Tuple[ClanWarAttack, ...]] = None
    opponentAttacks: Optional[int] = None
    bestOpponentAttack: Optional[ClanWarAttack] = None


class WarClan(APIModel):
    """
    One side of a war.

    ``members`` is only sent for the current war, never in the war log.
    """

    tag: Optional[str] = None
    name: Optional[str] = None
    badgeUrls: Optional[BadgeUrls] = None
    clanLevel: Optional[int] = None
    attacks: Optional[int] = None
    stars: Optional[int] = None
    destructionPercentage: Optional[float] = None
    expEarned: Optional[int] = None
    members: Optional[Tuple[ClanWarMember, ...]] = None


class ClanWar(APIModel):
    """
    A regular or league war.

    ``state`` is one of "notInWar", "preparation", "inWar" or "warEnded";
    outside of "notInWar" both clans are set. ``warStartTime`` is only sent
    for clan war league wars.
    """

    state: Optional[str] = None
    teamSize: Optional[int] = None
    attacksPerMember: Optional[int] = None
    battleModifier: Optional[str] = None
    preparationStartTime: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    warStartTime: Optional[str] = None
    clan: Optional[WarClan] = None
    opponent: Optional[WarClan] = None


class ClanWarLogEntry(APIModel):
    """
    One finished war of the war log.

    ``result`` is "win", "lose" or "tie", and None for clan war league
    entries, which also lack ``opponent.tag``.
    """

    result: Optional[str] = None
    endTime: Optional[str] = None
    teamSize: Optional[int] = None
    attacksPerMember: Optional[int] = None
    battleModifier: Optional[str] = None
    clan: Optional[WarClan] = None
    opponent: Optional[WarClan] = None


class ClanWarLeagueClanMember(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    townHallLevel: Optional[int] = None


class ClanWarLeagueClan(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    clanLevel: Optional[int] = None
    badgeUrls: Optional[BadgeUrls] = None
    members: Optional[Tuple[ClanWarLeagueClanMember, ...]] = None


class ClanWarLeagueRound(APIModel):
    # "#0" stands for a war that has not been drawn yet
    warTags: Optional[Tuple[str, ...]] = None


class ClanWarLeagueGroup(APIModel):
    """
    The clan war league group of a clan for the current season.

    ``season`` is "YYYY-MM". Each round lists the war tags to fetch through
    ``/clanwarleagues/wars/{warTag}``.
    """

    state: Optional[str] = None
    season: Optional[str] = None
    clans: Optional[Tuple[ClanWarLeagueClan, ...]] = None
    rounds: Optional[Tuple[ClanWarLeagueRound, ...]] = None
