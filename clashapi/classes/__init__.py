from .auth import DeveloperKey, DeveloperKeyList, DeveloperKeyResponse, DeveloperLogin, VerifyTokenResponse
from .capital import (
    ClanCapitalRaidSeason,
    RaidAttack,
    RaidAttacker,
    RaidClan,
    RaidClanAttackLogEntry,
    RaidClanDefenseLogEntry,
    RaidDistrict,
    RaidMember,
)
from .clan import CapitalDistrict, Clan, ClanCapital, ClanMember
from .common import APIModel, BadgeUrls, ClientError, Cursors, IconUrls, ItemList, Label, Paging, Role, WarPreference
from .goldpass import GoldPassSeason
from .league import BuilderBaseLeague, CapitalLeague, League, LeagueSeason, WarLeague
from .location import ChatLanguage, Location
from .player import Achievement, ClanModel, LegendStatistics, Player, PlayerHouse, PlayerHouseElement, Season, Troop
from .rankings import (
    ClanBuilderBaseRanking,
    ClanCapitalRanking,
    ClanRanking,
    PlayerBuilderBaseRanking,
    PlayerRanking,
    RankingClan,
)
from .war import (
    ClanWar,
    ClanWarAttack,
    ClanWarLeagueClan,
    ClanWarLeagueClanMember,
    ClanWarLeagueGroup,
    ClanWarLeagueRound,
    ClanWarLogEntry,
    ClanWarMember,
    WarClan,
)

__all__ = [
    "APIModel",
    "Achievement",
    "BadgeUrls",
    "BuilderBaseLeague",
    "CapitalDistrict",
    "CapitalLeague",
    "ChatLanguage",
    "Clan",
    "ClanBuilderBaseRanking",
    "ClanCapital",
    "ClanCapitalRaidSeason",
    "ClanCapitalRanking",
    "ClanMember",
    "ClanModel",
    "ClanRanking",
    "ClanWar",
    "ClanWarAttack",
    "ClanWarLeagueClan",
    "ClanWarLeagueClanMember",
    "ClanWarLeagueGroup",
    "ClanWarLeagueRound",
    "ClanWarLogEntry",
    "ClanWarMember",
    "ClientError",
    "Cursors",
    "DeveloperKey",
    "DeveloperKeyList",
    "DeveloperKeyResponse",
    "DeveloperLogin",
    "GoldPassSeason",
    "IconUrls",
    "ItemList",
    "Label",
    "League",
    "LeagueSeason",
    "LegendStatistics",
    "Location",
    "Paging",
    "Player",
    "PlayerBuilderBaseRanking",
    "PlayerHouse",
    "PlayerHouseElement",
    "PlayerRanking",
    "RaidAttack",
    "RaidAttacker",
    "RaidClan",
    "RaidClanAttackLogEntry",
    "RaidClanDefenseLogEntry",
    "RaidDistrict",
    "RaidMember",
    "RankingClan",
    "Role",
    "Season",
    "Troop",
    "VerifyTokenResponse",
    "WarClan",
    "WarLeague",
    "WarPreference",
]
