"""Teams API — the shared controller pattern applied to a second resource."""


async def _create_team(client, **fields):
    res = await client.post("/api/teams/", json={"name": "Red", **fields})
    assert res.status_code == 201
    return res.json()


async def test_create_team_returns_summary(client):
    body = await _create_team(client, description="weekend league")
    assert set(body) == {"id", "name"}
    assert body["name"] == "Red"


async def test_get_team_shows_description(client):
    team = await _create_team(client, description="weekend league")
    res = await client.get(f"/api/teams/{team['id']}")
    assert res.json() == {"id": team["id"], "name": "Red", "description": "weekend league"}


async def test_unknown_team_returns_404_contract(client):
    res = await client.get("/api/teams/7")
    assert res.status_code == 404
    assert res.json() == {"error": "team not found"}


async def test_patch_description_to_null_is_allowed(client):
    team = await _create_team(client, description="old")
    res = await client.patch(f"/api/teams/{team['id']}", json={"description": None})
    assert res.status_code == 200
    got = (await client.get(f"/api/teams/{team['id']}")).json()
    assert got["description"] is None
    assert got["name"] == "Red"


async def test_list_is_ordered_by_id(client):
    first = await _create_team(client)
    second = (await client.post("/api/teams/", json={"name": "Blue"})).json()
    res = await client.get("/api/teams/")
    assert [t["id"] for t in res.json()] == [first["id"], second["id"]]


async def test_blank_name_is_rejected(client):
    res = await client.post("/api/teams/", json={"name": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
