from collections import deque
from unittest.mock import AsyncMock, MagicMock, patch

import coc
import pytest

from clashapi import (
    Clan,
    ClanCapitalRaidSeason,
    ClanWar,
    ClashClient,
    ItemList,
    Player,
    PlayerRanking,
    TypeMismatchError,
    VerifyTokenResponse,
)

BASE = "https://api.clashofclans.com/v1"


@pytest.fixture
def client():
    """A client whose HTTP layer is replaced by an AsyncMock."""
    client = ClashClient(keys=["token"])
    client.http.request = AsyncMock(return_value=b"{}")
    return client


def requested_route(client):
    return client.http.request.call_args.args[0]


@pytest.mark.asyncio
async def test_get_player(client, load_fixture):
    client.http.request.return_value = load_fixture("player")

    player = await client.get_player("#2pp0jccl")

    assert isinstance(player, Player)
    assert player.name == "Ash"
    assert requested_route(client).url == f"{BASE}/players/%232PP0JCCL"


@pytest.mark.asyncio
async def test_get_clan(client, load_fixture):
    client.http.request.return_value = load_fixture("clan")

    clan = await client.get_clan("2Q8URCU88")

    assert isinstance(clan, Clan)
    assert len(clan.memberList) == 2
    assert requested_route(client).url == f"{BASE}/clans/%232Q8URCU88"


@pytest.mark.asyncio
async def test_verify_player_token(client):
    client.http.request.return_value = b'{"tag": "#2PP", "token": "abc", "status": "ok"}'

    answer = await client.verify_player_token("#2PP", "abc")

    assert answer == VerifyTokenResponse(tag="#2PP", token="abc", status="ok")
    route = requested_route(client)
    assert route.method == "POST"
    assert route.url == f"{BASE}/players/%232PP/verifytoken"
    assert client.http.request.call_args.kwargs == {"json": {"token": "abc"}}


@pytest.mark.asyncio
async def test_search_clans(client):
    client.http.request.return_value = b'{"items": [{"tag": "#2PP", "members": 50}]}'

    clans = await client.search_clans(name="dragons", min_members=10, label_ids=[56000000, 56000001], limit=5)

    assert clans.items[0].members == 50
    assert requested_route(client).url == (
        f"{BASE}/clans?name=dragons&minMembers=10&labelIds=56000000%2C56000001&limit=5"
    )


@pytest.mark.asyncio
async def test_paginated_endpoint(client, load_fixture):
    client.http.request.return_value = load_fixture("capital_raid_seasons")

    seasons = await client.get_capital_raid_seasons("#2Q8URCU88", limit=1, after="eyJwb3MiOjF9")

    assert isinstance(seasons.items[0], ClanCapitalRaidSeason)
    assert requested_route(client).url == f"{BASE}/clans/%232Q8URCU88/capitalraidseasons?limit=1&after=eyJwb3MiOjF9"


@pytest.mark.asyncio
async def test_get_league_war(client, load_fixture):
    client.http.request.return_value = load_fixture("current_war")

    war = await client.get_league_war("#8LJJ2PQ0Y")

    assert isinstance(war, ClanWar)
    assert requested_route(client).url == f"{BASE}/clanwarleagues/wars/%238LJJ2PQ0Y"


@pytest.mark.parametrize(
    "method, args, path",
    [
        ("get_clan_members", ("#2PP",), "/clans/%232PP/members"),
        ("get_clan_war_log", ("#2PP",), "/clans/%232PP/warlog"),
        ("get_current_war", ("#2PP",), "/clans/%232PP/currentwar"),
        ("get_league_group", ("#2PP",), "/clans/%232PP/currentwar/leaguegroup"),
        ("get_locations", (), "/locations"),
        ("get_location", (32000087,), "/locations/32000087"),
        ("get_location_player_rankings", (32000087,), "/locations/32000087/rankings/players"),
        ("get_location_player_builder_base_rankings", (32000087,), "/locations/32000087/rankings/players-builder-base"),
        ("get_location_clan_rankings", (32000087,), "/locations/32000087/rankings/clans"),
        ("get_location_clan_builder_base_rankings", (32000087,), "/locations/32000087/rankings/clans-builder-base"),
        ("get_location_capital_rankings", (32000087,), "/locations/32000087/rankings/capitals"),
        ("get_leagues", (), "/leagues"),
        ("get_league", (29000022,), "/leagues/29000022"),
        ("get_league_seasons", (), "/leagues/29000022/seasons"),
        ("get_builder_base_leagues", (), "/builderbaseleagues"),
        ("get_capital_leagues", (), "/capitalleagues"),
        ("get_war_leagues", (), "/warleagues"),
        ("get_clan_labels", (), "/labels/clans"),
        ("get_player_labels", (), "/labels/players"),
        ("get_goldpass_season", (), "/goldpass/seasons/current"),
    ],
)
@pytest.mark.asyncio
async def test_endpoint_paths(client, method, args, path):
    await getattr(client, method)(*args)

    route = requested_route(client)
    assert route.method == "GET"
    assert route.url == f"{BASE}{path}"


@pytest.mark.asyncio
async def test_league_season_rankings_default_to_last_season(client, load_fixture):
    client.http.request.return_value = load_fixture("player_rankings")

    with patch("clashapi.client.gen_season_date", MagicMock(return_value="2025-04")) as mock_season:
        rankings = await client.get_league_season_rankings(limit=2)

    mock_season.assert_called_once_with(seasons_ago=1)
    assert isinstance(rankings, ItemList)
    assert isinstance(rankings.items[0], PlayerRanking)
    assert requested_route(client).url == f"{BASE}/leagues/29000022/seasons/2025-04?limit=2"


@pytest.mark.asyncio
async def test_league_season_rankings_explicit_season(client):
    await client.get_league_season_rankings(season_id="2024-11")
    assert requested_route(client).url == f"{BASE}/leagues/29000022/seasons/2024-11"


@pytest.mark.asyncio
async def test_http_errors_propagate(client):
    client.http.request.side_effect = coc.NotFound(MagicMock(status=404), {"reason": "notFound"})

    with pytest.raises(coc.NotFound):
        await client.get_player("#2PP")


@pytest.mark.asyncio
async def test_bad_payload_propagates(client):
    client.http.request.return_value = b'{"trophies": "many"}'

    with pytest.raises(TypeMismatchError) as exc_info:
        await client.get_player("#2PP")
    assert exc_info.value.field == "trophies"


@pytest.mark.asyncio
async def test_base_url_override():
    client = ClashClient(keys=["token"], base_url="http://localhost:8011/v1")
    client.http.request = AsyncMock(return_value=b"{}")

    await client.get_goldpass_season()

    assert requested_route(client).url == "http://localhost:8011/v1/goldpass/seasons/current"


@pytest.mark.asyncio
async def test_from_credentials():
    with patch("clashapi.client.create_keys", AsyncMock(return_value=["k1", "k2"])) as mock_create_keys:
        client = await ClashClient.from_credentials("me@example.com", "pw", key_count=2, throttle_limit=10)

    mock_create_keys.assert_awaited_once_with(["me@example.com"], ["pw"], key_name="clashapi", key_count=2, as_list=True)
    assert client.http.keys == deque(["k1", "k2"])


@pytest.mark.asyncio
async def test_context_manager_closes_session():
    async with ClashClient(keys=["token"]) as client:
        session = client.http.http_session
        assert session is not None

    assert session.closed
    assert client.http.http_session is None
