from clashapi import (
    ClanCapitalRaidSeason,
    ClanRanking,
    GoldPassSeason,
    ItemList,
    Location,
    PlayerRanking,
    VerifyTokenResponse,
    decode,
)


def test_raid_seasons(load_fixture):
    seasons = decode(load_fixture("capital_raid_seasons"), type=ItemList[ClanCapitalRaidSeason])
    season = seasons.items[0]

    assert seasons.paging.cursors.after == "eyJwb3MiOjF9"
    assert seasons.paging.cursors.before is None
    assert season.state == "ended"
    assert season.capitalTotalLoot == 412030
    assert season.offensiveReward == 1602

    member = season.members[0]
    assert (member.attacks, member.attackLimit, member.bonusAttackLimit) == (6, 5, 1)


def test_raid_logs(load_fixture):
    season = decode(load_fixture("capital_raid_seasons"), type=ItemList[ClanCapitalRaidSeason]).items[0]

    raid = season.attackLog[0]
    assert raid.defender.name == "Night Owls"
    assert raid.defender.level == 9
    district = raid.districts[0]
    assert district.totalLooted == 3010
    assert [a.attacker.name for a in district.attacks] == ["Ash", "Misty"]
    assert district.attacks[1].destructionPercent == 61

    defense = season.defenseLog[0]
    assert defense.attacker.tag == "#Y2RPR9J0"
    assert defense.districts == ()


def test_player_rankings(load_fixture):
    rankings = decode(load_fixture("player_rankings"), type=ItemList[PlayerRanking])
    top, solo = rankings.items

    assert top.rank == 1
    assert top.clan.name == "Dragons"
    assert top.league.name == "Legend League"
    assert solo.clan is None
    assert solo.previousRank == -1
    assert rankings.paging.cursors.after is None


def test_clan_rankings():
    body = {
        "items": [
            {
                "tag": "#2Q8URCU88",
                "name": "Dragons",
                "location": {"id": 32000087, "name": "France", "isCountry": True, "countryCode": "FR"},
                "clanLevel": 22,
                "members": 50,
                "clanPoints": 58011,
                "rank": 4,
                "previousRank": 4,
            }
        ]
    }
    clan = decode(body, type=ItemList[ClanRanking]).items[0]

    assert clan.location == Location(id=32000087, name="France", isCountry=True, countryCode="FR")
    assert clan.clanPoints == 58011
    assert clan.badgeUrls is None


def test_goldpass_and_verify_token():
    season = decode(b'{"startTime": "20250101T080000.000Z", "endTime": "20250201T080000.000Z"}', type=GoldPassSeason)
    assert season.endTime == "20250201T080000.000Z"

    answer = decode(b'{"tag": "#2PP0JCCL", "token": "abc", "status": "invalid"}', type=VerifyTokenResponse)
    assert answer.status == "invalid"
