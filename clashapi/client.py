from typing import Iterable, Optional, Type, TypeVar

import coc

from clashapi.classes import (
    BuilderBaseLeague,
    CapitalLeague,
    Clan,
    ClanBuilderBaseRanking,
    ClanCapitalRaidSeason,
    ClanCapitalRanking,
    ClanMember,
    ClanRanking,
    ClanWar,
    ClanWarLeagueGroup,
    ClanWarLogEntry,
    GoldPassSeason,
    ItemList,
    Label,
    League,
    LeagueSeason,
    Location,
    Player,
    PlayerBuilderBaseRanking,
    PlayerRanking,
    VerifyTokenResponse,
    WarLeague,
)
from clashapi.utility.decoding import decode
from clashapi.utility.http import HTTPClient, Route
from clashapi.utility.keycreation import create_keys
from clashapi.utility.time import gen_season_date

T = TypeVar("T")

LEGEND_LEAGUE_ID = 29000022


class ClashClient:
    """
    Typed access to every endpoint of the API.

    The client only sends requests and hands the bodies to
    :func:`clashapi.decode`, so each method returns the model of its endpoint.

    Usage::

        async with ClashClient(keys=["token"]) as client:
            player = await client.get_player("#2PP")
    """

    def __init__(
        self,
        keys: Iterable[str],
        base_url: str = Route.BASE,
        throttle_limit: int = 30,
        timeout: float = 30,
    ):
        self.http = HTTPClient(keys=keys, base_url=base_url, throttle_limit=throttle_limit, timeout=timeout)

    @classmethod
    async def from_credentials(cls, email: str, password: str, key_name: str = "clashapi", key_count: int = 1, **kwargs):
        """Create keys for the current IP on the developer portal and build a client with them."""
        keys = await create_keys([email], [password], key_name=key_name, key_count=key_count, as_list=True)
        return cls(keys=keys, **kwargs)

    async def __aenter__(self):
        await self.http.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        await self.http.close()

    async def _get(self, type: Type[T], path: str, **params) -> T:
        data = await self.http.request(self.http.route("GET", path, **params))
        return decode(data, type=type)

    # players

    async def get_player(self, player_tag: str) -> Player:
        return await self._get(Player, f"/players/{coc.utils.correct_tag(player_tag)}")

    async def verify_player_token(self, player_tag: str, token: str) -> VerifyTokenResponse:
        """Check the in-game API token a player copied from their settings."""
        route = self.http.route("POST", f"/players/{coc.utils.correct_tag(player_tag)}/verifytoken")
        data = await self.http.request(route, json={"token": token})
        return decode(data, type=VerifyTokenResponse)

    # clans

    async def get_clan(self, clan_tag: str) -> Clan:
        return await self._get(Clan, f"/clans/{coc.utils.correct_tag(clan_tag)}")

    async def get_clan_members(
        self, clan_tag: str, limit: Optional[int] = None, after: Optional[str] = None, before: Optional[str] = None
    ) -> ItemList[ClanMember]:
        return await self._get(
            ItemList[ClanMember],
            f"/clans/{coc.utils.correct_tag(clan_tag)}/members",
            limit=limit,
            after=after,
            before=before,
        )

    async def search_clans(
        self,
        name: Optional[str] = None,
        war_frequency: Optional[str] = None,
        location_id: Optional[int] = None,
        min_members: Optional[int] = None,
        max_members: Optional[int] = None,
        min_clan_points: Optional[int] = None,
        min_clan_level: Optional[int] = None,
        label_ids: Optional[Iterable[int]] = None,
        limit: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ItemList[Clan]:
        """Search clans. The API wants at least one filter and a name of 3 characters or more."""
        return await self._get(
            ItemList[Clan],
            "/clans",
            name=name,
            warFrequency=war_frequency,
            locationId=location_id,
            minMembers=min_members,
            maxMembers=max_members,
            minClanPoints=min_clan_points,
            minClanLevel=min_clan_level,
            labelIds=",".join(str(i) for i in label_ids) if label_ids else None,
            limit=limit,
            after=after,
            before=before,
        )

    async def get_clan_war_log(
        self, clan_tag: str, limit: Optional[int] = None, after: Optional[str] = None, before: Optional[str] = None
    ) -> ItemList[ClanWarLogEntry]:
        """Raises ``coc.Forbidden`` when the clan's war log is private."""
        return await self._get(
            ItemList[ClanWarLogEntry],
            f"/clans/{coc.utils.correct_tag(clan_tag)}/warlog",
            limit=limit,
            after=after,
            before=before,
        )

    async def get_current_war(self, clan_tag: str) -> ClanWar:
        return await self._get(ClanWar, f"/clans/{coc.utils.correct_tag(clan_tag)}/currentwar")

    async def get_league_group(self, clan_tag: str) -> ClanWarLeagueGroup:
        return await self._get(ClanWarLeagueGroup, f"/clans/{coc.utils.correct_tag(clan_tag)}/currentwar/leaguegroup")

    async def get_league_war(self, war_tag: str) -> ClanWar:
        return await self._get(ClanWar, f"/clanwarleagues/wars/{coc.utils.correct_tag(war_tag)}")

    async def get_capital_raid_seasons(
        self, clan_tag: str, limit: Optional[int] = None, after: Optional[str] = None, before: Optional[str] = None
    ) -> ItemList[ClanCapitalRaidSeason]:
        return await self._get(
            ItemList[ClanCapitalRaidSeason],
            f"/clans/{coc.utils.correct_tag(clan_tag)}/capitalraidseasons",
            limit=limit,
            after=after,
            before=before,
        )

    # locations

    async def get_locations(self, limit: Optional[int] = None, after: Optional[str] = None, before: Optional[str] = None) -> ItemList[Location]:
        return await self._get(ItemList[Location], "/locations", limit=limit, after=after, before=before)

    async def get_location(self, location_id: int) -> Location:
        return await self._get(Location, f"/locations/{location_id}")

    async def get_location_player_rankings(self, location_id: int, limit: Optional[int] = None) -> ItemList[PlayerRanking]:
        return await self._get(ItemList[PlayerRanking], f"/locations/{location_id}/rankings/players", limit=limit)

    async def get_location_player_builder_base_rankings(
        self, location_id: int, limit: Optional[int] = None
    ) -> ItemList[PlayerBuilderBaseRanking]:
        return await self._get(
            ItemList[PlayerBuilderBaseRanking], f"/locations/{location_id}/rankings/players-builder-base", limit=limit
        )

    async def get_location_clan_rankings(self, location_id: int, limit: Optional[int] = None) -> ItemList[ClanRanking]:
        return await self._get(ItemList[ClanRanking], f"/locations/{location_id}/rankings/clans", limit=limit)

    async def get_location_clan_builder_base_rankings(
        self, location_id: int, limit: Optional[int] = None
    ) -> ItemList[ClanBuilderBaseRanking]:
        return await self._get(
            ItemList[ClanBuilderBaseRanking], f"/locations/{location_id}/rankings/clans-builder-base", limit=limit
        )

    async def get_location_capital_rankings(self, location_id: int, limit: Optional[int] = None) -> ItemList[ClanCapitalRanking]:
        return await self._get(ItemList[ClanCapitalRanking], f"/locations/{location_id}/rankings/capitals", limit=limit)

    # leagues

    async def get_leagues(self) -> ItemList[League]:
        return await self._get(ItemList[League], "/leagues")

    async def get_league(self, league_id: int) -> League:
        return await self._get(League, f"/leagues/{league_id}")

    async def get_league_seasons(self, league_id: int = LEGEND_LEAGUE_ID) -> ItemList[LeagueSeason]:
        return await self._get(ItemList[LeagueSeason], f"/leagues/{league_id}/seasons")

    async def get_league_season_rankings(
        self,
        league_id: int = LEGEND_LEAGUE_ID,
        season_id: Optional[str] = None,
        limit: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> ItemList[PlayerRanking]:
        """Final legend league rankings of a season, the last finished one by default."""
        season_id = season_id or gen_season_date(seasons_ago=1)
        return await self._get(
            ItemList[PlayerRanking],
            f"/leagues/{league_id}/seasons/{season_id}",
            limit=limit,
            after=after,
            before=before,
        )

    async def get_builder_base_leagues(self) -> ItemList[BuilderBaseLeague]:
        return await self._get(ItemList[BuilderBaseLeague], "/builderbaseleagues")

    async def get_capital_leagues(self) -> ItemList[CapitalLeague]:
        return await self._get(ItemList[CapitalLeague], "/capitalleagues")

    async def get_war_leagues(self) -> ItemList[WarLeague]:
        return await self._get(ItemList[WarLeague], "/warleagues")

    # labels

    async def get_clan_labels(self) -> ItemList[Label]:
        return await self._get(ItemList[Label], "/labels/clans")

    async def get_player_labels(self) -> ItemList[Label]:
        return await self._get(ItemList[Label], "/labels/players")

    async def get_goldpass_season(self) -> GoldPassSeason:
        return await self._get(GoldPassSeason, "/goldpass/seasons/current")
