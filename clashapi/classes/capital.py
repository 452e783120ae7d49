from typing import Optional, Tuple

from .common import APIModel, BadgeUrls


class RaidMember(APIModel):
    """
    A clan member who raided during the weekend.

    ``attackLimit`` is the base number of attacks, ``bonusAttackLimit`` the
    extra one earned by completing a raid.
    """

    tag: Optional[str] = None
    name: Optional[str] = None
    attacks: Optional[int] = None
    attackLimit: Optional[int] = None
    bonusAttackLimit: Optional[int] = None
    capitalResourcesLooted: Optional[int] = None


class RaidAttacker(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None


class RaidAttack(APIModel):
    attacker: Optional[RaidAttacker] = None
    destructionPercent: Optional[int] = None
    stars: Optional[int] = None


class RaidDistrict(APIModel):
    id: Optional[int] = None
    name: Optional[str] = None
    districtHallLevel: Optional[int] = None
    destructionPercent: Optional[int] = None
    stars: Optional[int] = None
    attackCount: Optional[int] = None
    totalLooted: Optional[int] = None
    attacks: Optional[Tuple[RaidAttack, ...]] = None


class RaidClan(APIModel):
    tag: Optional[str] = None
    name: Optional[str] = None
    level: Optional[int] = None
    badgeUrls: Optional[BadgeUrls] = None


class RaidClanAttackLogEntry(APIModel):
    """A raid of this clan on another clan's capital."""

    defender: Optional[RaidClan] = None
    attackCount: Optional[int] = None
    districtCount: Optional[int] = None
    districtsDestroyed: Optional[int] = None
    districts: Optional[Tuple[RaidDistrict, ...]] = None


class RaidClanDefenseLogEntry(APIModel):
    """A raid of another clan on this clan's capital."""

    attacker: Optional[RaidClan] = None
    attackCount: Optional[int] = None
    districtCount: Optional[int] = None
    districtsDestroyed: Optional[int] = None
    districts: Optional[Tuple[RaidDistrict, ...]] = None


class ClanCapitalRaidSeason(APIModel):
    """
    One raid weekend of a clan.

    ``state`` is "ongoing" or "ended". ``offensiveReward`` and
    ``defensiveReward`` are raid medals, granted once the weekend ended.
    """

    state: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    capitalTotalLoot: Optional[int] = None
    raidsCompleted: Optional[int] = None
    totalAttacks: Optional[int] = None
    enemyDistrictsDestroyed: Optional[int] = None
    offensiveReward: Optional[int] = None
    defensiveReward: Optional[int] = None
    members: Optional[Tuple[RaidMember, ...]] = None
    attackLog: Optional[Tuple[RaidClanAttackLogEntry, ...]] = None
    defenseLog: Optional[Tuple[RaidClanDefenseLogEntry, ...]] = None
