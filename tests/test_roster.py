import pytest
from fastapi import HTTPException

from hackteams.modules.teams.models import JOIN_REQUESTS_COLLECTION, TEAMS_COLLECTION
from hackteams.modules.teams.schemas import TeamResponse
from hackteams.modules.teams.service import (
    TeamRosterService, can_request_join, is_full_team, is_open_team, team_display_name
)
from tests.factories import add_pool_entry, add_team, session_for


@pytest.fixture
def service(store):
    return TeamRosterService(store)


def bucket_ids(roster):
    return [t.id for t in roster.open_teams], [t.id for t in roster.full_teams]


@pytest.mark.parametrize("size,expected", [
    (0, (False, False)),
    (1, (False, False)),
    (2, (True, False)),
    (3, (False, True)),
    (4, (False, False)),
])
def test_bucket_membership_by_member_count(size, expected):
    team = TeamResponse(id="t", hackathon_id="2024-06", member_ids=[f"u{i}" for i in range(size)])
    assert (is_open_team(team), is_full_team(team)) == expected


def test_out_of_range_teams_hidden_from_both_buckets(service, fake_db):
    add_team(fake_db, "empty", [])
    add_team(fake_db, "solo", ["u1"])
    add_team(fake_db, "pair", ["u2", "u3"])
    add_team(fake_db, "trio", ["u4", "u5", "u6"])
    add_team(fake_db, "crowd", ["u7", "u8", "u9", "u10"])

    roster = service.load_roster("2024-06", session_for())

    assert bucket_ids(roster) == (["pair"], ["trio"])
    assert [t.id for t in roster.teams] == ["empty", "solo", "pair", "trio", "crowd"]


def test_seeded_month_has_one_open_and_one_full_team(service, fake_db):
    add_team(fake_db, "full-team", ["m1", "m2", "m3"], name="Full Stack Crew")
    add_team(fake_db, "open-team", ["m4", "m5"], name="Open Slot Squad")

    roster = service.load_roster("2024-06", session_for())

    assert len(roster.open_teams) == 1
    assert len(roster.full_teams) == 1
    open_team = roster.open_teams[0]
    assert (open_team.display_name, open_team.member_count, open_team.open_slots) == ("Open Slot Squad", 2, 1)
    full_team = roster.full_teams[0]
    assert (full_team.display_name, full_team.member_count, full_team.open_slots) == ("Full Stack Crew", 3, 0)


def test_roster_only_includes_requested_hackathon(service, fake_db):
    add_team(fake_db, "june", ["a", "b"], hackathon_id="2024-06")
    add_team(fake_db, "july", ["c", "d"], hackathon_id="2024-07")

    roster = service.load_roster("2024-07", session_for())

    assert [t.id for t in roster.teams] == ["july"]


def test_display_name_falls_back_to_id_prefix():
    team = TeamResponse(id="abcdef1234567890", hackathon_id="2024-06", member_ids=["a", "b"])
    assert team_display_name(team) == "Team abcdef12"


def test_anonymous_viewer_has_no_team_and_no_pool(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])

    roster = service.load_roster("2024-06", session_for())

    assert roster.my_team_id is None
    assert roster.is_in_pool is False
    assert not any(t.can_request for t in roster.open_teams)


def test_pooled_user_without_team_can_request_every_open_team(service, fake_db):
    add_team(fake_db, "pair-a", ["u1", "u2"])
    add_team(fake_db, "pair-b", ["u3", "u4"])
    add_team(fake_db, "trio", ["u5", "u6", "u7"])
    add_pool_entry(fake_db, "seeker")

    roster = service.load_roster("2024-06", session_for("seeker"))

    assert roster.is_in_pool is True
    assert roster.my_team_id is None
    assert [t.can_request for t in roster.open_teams] == [True, True]
    assert [t.can_request for t in roster.full_teams] == [False]


def test_member_cannot_request_own_team(service, fake_db):
    add_team(fake_db, "mine", ["me", "u2"])
    add_team(fake_db, "other", ["u3", "u4"])
    add_pool_entry(fake_db, "me")

    roster = service.load_roster("2024-06", session_for("me"))

    slots = {t.id: t for t in roster.open_teams}
    assert roster.my_team_id == "mine"
    assert slots["mine"].is_my_team is True
    assert slots["mine"].can_request is False
    assert slots["other"].can_request is True


def test_user_outside_pool_cannot_request(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])

    roster = service.load_roster("2024-06", session_for("stranger"))

    assert roster.is_in_pool is False
    assert roster.open_teams[0].can_request is False


def test_pool_entry_for_other_hackathon_does_not_count(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])
    add_pool_entry(fake_db, "seeker", hackathon_id="2024-05")

    roster = service.load_roster("2024-06", session_for("seeker"))

    assert roster.is_in_pool is False


def test_first_listed_team_wins_for_double_membership(service, fake_db):
    add_team(fake_db, "first", ["dup", "u1"])
    add_team(fake_db, "second", ["dup", "u2"])

    roster = service.load_roster("2024-06", session_for("dup"))

    assert roster.my_team_id == "first"


def test_can_request_join_requires_membership_check_even_if_not_my_team():
    team = TeamResponse(id="t2", hackathon_id="2024-06", member_ids=["me", "u2"])
    assert can_request_join(team, session_for("me"), is_in_pool=True, my_team_id="t1") is False


def test_loading_session_reads_nothing(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])
    fake_db.calls.clear()

    roster = service.load_roster("2024-06", session_for("me", loading=True))

    assert roster.loading is True
    assert roster.teams == []
    assert fake_db.calls == []


def test_read_failure_degrades_to_empty_roster(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])
    fake_db.failures.add(("select", TEAMS_COLLECTION))

    roster = service.load_roster("2024-06", session_for("me"))

    assert roster.teams == []
    assert roster.open_teams == []
    assert roster.full_teams == []
    assert roster.is_in_pool is False


def test_pool_read_failure_degrades_to_empty_roster(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])
    fake_db.failing_tables.add("hackathon_pool")

    roster = service.load_roster("2024-06", session_for("me"))

    assert roster.teams == []


def test_missing_store_renders_empty_roster():
    roster = TeamRosterService(None).load_roster("2024-06", session_for("me"))
    assert roster.teams == []
    assert roster.loading is False


def test_request_join_writes_pending_request(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])
    add_pool_entry(fake_db, "seeker")

    roster = service.request_join(session_for("seeker"), "pair", "2024-06")

    requests = fake_db.rows(JOIN_REQUESTS_COLLECTION)
    assert len(requests) == 1
    assert requests[0]["from_user_id"] == "seeker"
    assert requests[0]["team_id"] == "pair"
    assert requests[0]["status"] == "pending"
    assert requests[0]["created_at"] != "now"
    assert roster.hackathon_id == "2024-06"
    assert [t.id for t in roster.open_teams] == ["pair"]


def test_request_join_twice_creates_two_requests(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])

    service.request_join(session_for("seeker"), "pair", "2024-06")
    service.request_join(session_for("seeker"), "pair", "2024-06")

    requests = fake_db.rows(JOIN_REQUESTS_COLLECTION)
    assert len(requests) == 2
    assert {r["status"] for r in requests} == {"pending"}


def test_request_join_not_gated_on_pool_membership(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])

    service.request_join(session_for("outsider"), "pair", "2024-06")

    assert len(fake_db.rows(JOIN_REQUESTS_COLLECTION)) == 1


def test_request_join_write_failure_is_generic_error(service, fake_db):
    fake_db.failures.add(("insert", JOIN_REQUESTS_COLLECTION))

    with pytest.raises(HTTPException) as excinfo:
        service.request_join(session_for("seeker"), "pair", "2024-06")

    assert excinfo.value.status_code == 502
    assert excinfo.value.detail == "Failed to send request"
    assert fake_db.rows(JOIN_REQUESTS_COLLECTION) == []


def test_request_join_without_store_is_unavailable():
    with pytest.raises(HTTPException) as excinfo:
        TeamRosterService(None).request_join(session_for("seeker"), "pair", "2024-06")
    assert excinfo.value.status_code == 503


def test_list_join_requests_for_member(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])
    service.request_join(session_for("seeker"), "pair", "2024-06")

    requests = service.list_join_requests(session_for("u1"), "pair")

    assert [(r.from_user_id, r.status.value) for r in requests] == [("seeker", "pending")]


def test_list_join_requests_rejects_non_member(service, fake_db):
    add_team(fake_db, "pair", ["u1", "u2"])

    with pytest.raises(HTTPException) as excinfo:
        service.list_join_requests(session_for("seeker"), "pair")

    assert excinfo.value.status_code == 403


def test_list_join_requests_unknown_team(service):
    with pytest.raises(HTTPException) as excinfo:
        service.list_join_requests(session_for("u1"), "missing")
    assert excinfo.value.status_code == 404


def test_full_team_never_offers_join_control():
    team = TeamResponse(id="trio", hackathon_id="2024-06", member_ids=["u1", "u2", "u3"])
    assert can_request_join(team, session_for("seeker"), is_in_pool=True, my_team_id=None) is False
