from typing import Optional, Tuple

from .common import APIModel, BadgeUrls, Label, Role, WarPreference
from .league import BuilderBaseLeague, League


class ClanModel(APIModel):
    """
    The clan a player belongs to, as embedded in a player profile.

    Only carries the summary of the clan; fetch the clan itself for the
    member list and war record.
    """

    tag: Optional[str] = None
    name: Optional[str] = None
    clanLevel: Optional[int] = None
    badgeUrls: Optional[BadgeUrls] = None


class Troop(APIModel):
    """
    A troop, hero, spell, pet or piece of hero equipment with its level.

    Attributes
    ----------
    name:
        :class:`str`: In-game name, e.g. "Barbarian King"
    level:
        :class:`int`: Current level
    maxLevel:
        :class:`int`: Highest level reachable in the game, not at the
        player's current hall level
    village:
        :class:`str`: "home" or "builderBase"
    superTroopIsActive:
        :class:`bool`: Only sent for super troops; true while boosted
    equipment:
        :class:`tuple`: Equipment currently worn by a hero, only sent for heroes
    """

    name: Optional[str] = None
    level: Optional[int] = None
    maxLevel: Optional[int] = None
    village: Optional[str] = None
    superTroopIsActive: Optional[bool] = None
    equipment: Optional[Tuple["Troop", ...]] = None


class Achievement(APIModel):
    """
    Progress of a player on one achievement.

    ``stars`` goes from 0 to 3. ``value`` is the current progress and
    ``target`` the value needed for the next star. ``completionInfo`` is
    None until the achievement has been completed at least once.
    """

    name: Optional[str] = None
    stars: Optional[int] = None
    value: Optional[int] = None
    target: Optional[int] = None
    info: Optional[str] = None
    completionInfo: Optional[str] = None
    village: Optional[str] = None


class Season(APIModel):
    """
    Result of a player in one legend league season.

    ``id`` is "YYYY-MM" and is absent for the current, unfinished season.
    """

    id: Optional[str] = None
    rank: Optional[int] = None
    trophies: Optional[int] = None


class LegendStatistics(APIModel):
    """
    Seasons played in the legend league. Only present for players who
    reached it at least once.

    The versus/builder base seasons are a separate track from the main
    village seasons.
    """

    legendTrophies: Optional[int] = None
    currentSeason: Optional[Season] = None
    previousSeason: Optional[Season] = None
    bestSeason: Optional[Season] = None
    previousVersusSeason: Optional[Season] = None
    bestVersusSeason: Optional[Season] = None
    previousBuilderBaseSeason: Optional[Season] = None
    bestBuilderBaseSeason: Optional[Season] = None


class PlayerHouseElement(APIModel):
    # "ground", "walls", "roof" or "decoration"
    type: Optional[str] = None
    id: Optional[int] = None


class PlayerHouse(APIModel):
    elements: Optional[Tuple[PlayerHouseElement, ...]] = None


class Player(APIModel):
    """
    A player profile, as returned by ``/players/{playerTag}``.

    Every field may be missing. A missing field is None and a missing list
    is None, while an empty list is ``()``.

    Attributes
    ----------
    tag:
        :class:`str`: Unique identifier of the player, in the form ``#A0B1C2``
    name:
        :class:`str`: Nickname shown in chat and on the profile
    expLevel:
        :class:`int`: Experience level
    clan:
        :class:`ClanModel`: Clan the player belongs to, None if clanless
    role:
        :class:`Role`: Rank in the clan. ``member`` when no role was given,
        ``admin`` for an elder, ``coLeader`` for a co-leader and ``leader``
        for the leader. The upstream spelling is kept as is.
    warPreference:
        :class:`WarPreference`: Whether the player opted in for clan wars
    league:
        :class:`League`: Current main village league
    builderBaseLeague:
        :class:`BuilderBaseLeague`: Current builder base league
    trophies:
        :class:`int`: Current main village trophies
    bestTrophies:
        :class:`int`: Highest main village trophy count ever reached
    attackWins:
        :class:`int`: Attacks won this season, where a won attack earned at
        least one star. Main village multiplayer attacks only, clan war
        attacks are not counted.
    defenseWins:
        :class:`int`: Defenses won this season, where the attacker earned no
        star. Main village only, clan war defenses are not counted.
    townHallLevel:
        :class:`int`: Level of the town hall
    townHallWeaponLevel:
        :class:`int`: Level of the town hall weapon. Only sent when the town
        hall is at one of the tiers that carry a weapon, otherwise None.
    warStars:
        :class:`int`: Stars earned in clan wars over the player's lifetime
    donations:
        :class:`int`: Troops donated to the clan this season
    donationsReceived:
        :class:`int`: Troops received from the clan this season
    clanCapitalContributions:
        :class:`int`: Capital gold contributed over the player's lifetime
    legendStatistics:
        :class:`LegendStatistics`: Legend league seasons, None for players
        who never reached the legend league
    builderHallLevel:
        :class:`int`: Level of the builder hall, None before the builder
        base is unlocked
    builderBaseTrophies:
        :class:`int`: Current builder base trophies
    bestBuilderBaseTrophies:
        :class:`int`: Highest builder base trophy count
    versusTrophies:
        :class:`int`: Builder base trophies, as sent by the API before the
        builder base rework
    bestVersusTrophies:
        :class:`int`: Highest builder base trophies, pre-rework name
    versusBattleWins:
        :class:`int`: Builder base attacks won, pre-rework name
    versusBattleWinCount:
        :class:`int`: Builder base battles won, pre-rework name
    troops:
        :class:`tuple`: Unlocked troops and pets, :class:`Troop` each
    heroes:
        :class:`tuple`: Unlocked heroes, :class:`Troop` each
    heroEquipment:
        :class:`tuple`: Unlocked hero equipment, :class:`Troop` each
    spells:
        :class:`tuple`: Unlocked spells, :class:`Troop` each
    achievements:
        :class:`tuple`: :class:`Achievement` progress
    labels:
        :class:`tuple`: :class:`Label` shown on the profile
    playerHouse:
        :class:`PlayerHouse`: Decorations of the player's clan capital house

    The builder base fields (``builderHallLevel``, ``builderBase*``,
    ``versus*``) are their own stat track and never count towards the main
    village ones.
    """

    tag: Optional[str] = None
    name: Optional[str] = None
    expLevel: Optional[int] = None
    clan: Optional[ClanModel] = None
    role: Optional[Role] = None
    warPreference: Optional[WarPreference] = None
    league: Optional[League] = None
    builderBaseLeague: Optional[BuilderBaseLeague] = None
    trophies: Optional[int] = None
    bestTrophies: Optional[int] = None
    attackWins: Optional[int] = None
    defenseWins: Optional[int] = None
    townHallLevel: Optional[int] = None
    townHallWeaponLevel: Optional[int] = None
    warStars: Optional[int] = None
    donations: Optional[int] = None
    donationsReceived: Optional[int] = None
    clanCapitalContributions: Optional[int] = None
    legendStatistics: Optional[LegendStatistics] = None
    builderHallLevel: Optional[int] = None
    builderBaseTrophies: Optional[int] = None
    bestBuilderBaseTrophies: Optional[int] = None
    versusTrophies: Optional[int] = None
    bestVersusTrophies: Optional[int] = None
    versusBattleWins: Optional[int] = None
    versusBattleWinCount: Optional[int] = None
    troops: Optional[Tuple[Troop, ...]] = None
    heroes: Optional[Tuple[Troop, ...]] = None
    heroEquipment: Optional[Tuple[Troop, ...]] = None
    spells: Optional[Tuple[Troop, ...]] = None
    achievements: Optional[Tuple[Achievement, ...]] = None
    labels: Optional[Tuple[Label, ...]] = None
    playerHouse: Optional[PlayerHouse] = None
