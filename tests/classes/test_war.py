from clashapi import ClanWar, ClanWarLeagueGroup, ClanWarLogEntry, ItemList, decode


def test_decode_current_war(load_fixture):
    war = decode(load_fixture("current_war"), type=ClanWar)

    assert war.state == "inWar"
    assert war.teamSize == 2
    assert war.preparationStartTime == "20250110T070000.000Z"
    assert war.warStartTime is None
    assert war.clan.destructionPercentage == 50.0
    assert war.opponent.destructionPercentage == 43.5
    assert war.opponent.members == ()


def test_war_members_and_attacks(load_fixture):
    war = decode(load_fixture("current_war"), type=ClanWar)
    ash, misty = war.clan.members

    assert ash.townhallLevel == 16
    assert ash.mapPosition == 1
    assert len(ash.attacks) == 1
    attack = ash.attacks[0]
    assert (attack.stars, attack.destructionPercentage, attack.order, attack.duration) == (3, 100, 1, 142)
    assert ash.bestOpponentAttack is None

    # a member who did not attack has no attacks key
    assert misty.attacks is None
    assert misty.bestOpponentAttack.attackerTag == "#Y8GQ0LJ2"
    assert misty.bestOpponentAttack.stars == 2


def test_not_in_war():
    war = decode(b'{"state": "notInWar"}', type=ClanWar)

    assert war.state == "notInWar"
    assert war.clan is None
    assert war.opponent is None


def test_war_log(load_fixture):
    log = decode(load_fixture("war_log"), type=ItemList[ClanWarLogEntry])
    regular, league = log.items

    assert regular.result == "win"
    assert regular.clan.expEarned == 210
    assert regular.clan.members is None
    assert regular.opponent.tag == "#LUV2PQ0R"

    # league entries carry neither a result nor the opponent's tag
    assert league.result is None
    assert league.opponent.tag is None
    assert league.battleModifier is None
    assert league.clan.destructionPercentage == 0


def test_league_group(load_fixture):
    group = decode(load_fixture("league_group"), type=ClanWarLeagueGroup)

    assert group.season == "2025-01"
    assert [c.name for c in group.clans] == ["Dragons", "Night Owls"]
    assert group.clans[0].members[0].townHallLevel == 16
    assert group.rounds[0].warTags == ("#8LJJ2PQ0Y", "#8LJJ2PQ2C")
    assert group.rounds[1].warTags == ("#0", "#0")
