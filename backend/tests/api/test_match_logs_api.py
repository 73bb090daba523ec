"""Match Logs API — seat validation, team references and per-view projections."""

FOUR_PLAYER = {
    "mode": "four",
    "players": ["alice", "bob", "carol", "dave"],
    "scores": [35000, 28000, 22000, 15000],
    "memo": "south round comeback",
}


async def test_create_match_log_returns_summary(client):
    res = await client.post("/api/match-logs/", json=FOUR_PLAYER)
    assert res.status_code == 201
    body = res.json()
    assert set(body) == {"id", "mode", "played_at"}
    assert body["mode"] == "four"


async def test_single_read_includes_memo_list_does_not(client):
    created = (await client.post("/api/match-logs/", json=FOUR_PLAYER)).json()

    single = (await client.get(f"/api/match-logs/{created['id']}")).json()
    assert single["memo"] == "south round comeback"
    assert single["players"] == FOUR_PLAYER["players"]
    assert single["scores"] == FOUR_PLAYER["scores"]

    listing = (await client.get("/api/match-logs/")).json()
    assert len(listing) == 1
    assert "memo" not in listing[0]


async def test_three_player_match_needs_three_seats(client):
    res = await client.post(
        "/api/match-logs/",
        json={"mode": "three", "players": ["a", "b", "c", "d"], "scores": [1, 2, 3, 4]},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_unknown_mode_is_rejected(client):
    res = await client.post(
        "/api/match-logs/",
        json={"mode": "five", "players": ["a", "b", "c"], "scores": [1, 2, 3]},
    )
    assert res.status_code == 400


async def test_unknown_team_is_rejected(client):
    res = await client.post("/api/match-logs/", json={**FOUR_PLAYER, "team_id": 99})
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert details[0]["field"] == "team_id"


async def test_match_log_can_reference_team(client):
    team = (await client.post("/api/teams/", json={"name": "Red"})).json()
    created = (
        await client.post("/api/match-logs/", json={**FOUR_PLAYER, "team_id": team["id"]})
    ).json()
    got = (await client.get(f"/api/match-logs/{created['id']}")).json()
    assert got["team_id"] == team["id"]


async def test_patch_scores_only_keeps_players(client):
    created = (await client.post("/api/match-logs/", json=FOUR_PLAYER)).json()
    res = await client.patch(
        f"/api/match-logs/{created['id']}", json={"scores": [1, 2, 3, 4]},
    )
    assert res.status_code == 200
    got = (await client.get(f"/api/match-logs/{created['id']}")).json()
    assert got["scores"] == [1, 2, 3, 4]
    assert got["players"] == FOUR_PLAYER["players"]
    assert got["memo"] == FOUR_PLAYER["memo"]


async def test_patch_that_breaks_seat_count_is_rejected(client):
    created = (await client.post("/api/match-logs/", json=FOUR_PLAYER)).json()
    res = await client.patch(
        f"/api/match-logs/{created['id']}", json={"mode": "three"},
    )
    assert res.status_code == 400
    got = (await client.get(f"/api/match-logs/{created['id']}")).json()
    assert got["mode"] == "four"


async def test_unknown_match_log_returns_404_contract(client):
    res = await client.get("/api/match-logs/3")
    assert res.status_code == 404
    assert res.json() == {"error": "match log not found"}
