"""Brew and steep API tests."""

from uuid import uuid4


def test_brew_end_to_end(client):
    """Test the teapot, tea, brew flow with the tea's temperature as default."""
    teapot = client.post(
        "/teapots",
        json={"name": "My Kyusu", "material": "clay", "capacityMl": 350, "style": "kyusu"},
    )
    assert teapot.status_code == 201

    tea = client.post(
        "/teas",
        json={"name": "Dragon Well", "type": "green", "steepTempCelsius": 80, "steepTimeSeconds": 120},
    )
    assert tea.status_code == 201

    brew = client.post("/brews", json={"teapotId": teapot.json()["id"], "teaId": tea.json()["id"]})
    assert brew.status_code == 201
    data = brew.json()
    assert data["id"]
    assert data["teapotId"] == teapot.json()["id"]
    assert data["teaId"] == tea.json()["id"]
    assert data["waterTempCelsius"] == 80
    assert data["status"] == "preparing"
    assert data["startedAt"] == data["createdAt"] == data["updatedAt"]
    assert data["completedAt"] is None


def test_create_brew_explicit_water_temp(client, teapot, tea):
    """Test that an explicit water temperature wins over the tea's."""
    response = client.post(
        "/brews",
        json={"teapotId": teapot["id"], "teaId": tea["id"], "waterTempCelsius": 70, "notes": "Cooler"},
    )
    assert response.status_code == 201
    assert response.json()["waterTempCelsius"] == 70
    assert response.json()["notes"] == "Cooler"


def test_create_brew_water_temp_range(client, teapot, tea):
    """Test the water temperature bounds."""
    response = client.post(
        "/brews", json={"teapotId": teapot["id"], "teaId": tea["id"], "waterTempCelsius": 101}
    )
    assert response.status_code == 400
    assert "waterTempCelsius" in response.json()["details"]


def test_create_brew_unknown_teapot(client, tea):
    """Test that an unknown teapot is a validation error and nothing is created."""
    response = client.post("/brews", json={"teapotId": str(uuid4()), "teaId": tea["id"]})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert response.json()["message"] == "Teapot not found"
    assert client.get("/brews").json()["pagination"]["total"] == 0


def test_create_brew_unknown_tea(client, teapot):
    """Test that an unknown tea is a validation error and nothing is created."""
    response = client.post("/brews", json={"teapotId": teapot["id"], "teaId": str(uuid4())})
    assert response.status_code == 400
    assert response.json()["message"] == "Tea not found"
    assert client.get("/brews").json()["pagination"]["total"] == 0


def test_create_brew_malformed_ids(client):
    """Test that reference ids must be UUIDs."""
    response = client.post("/brews", json={"teapotId": "pot", "teaId": "leaf"})
    assert response.status_code == 400
    assert {"teapotId", "teaId"} <= set(response.json()["details"])


def test_brew_water_temp_not_revisited(client, tea, brew):
    """Test that later tea edits do not change an existing brew."""
    client.patch(f"/teas/{tea['id']}", json={"steepTempCelsius": 70})

    assert client.get(f"/brews/{brew['id']}").json()["waterTempCelsius"] == 80


def test_brew_survives_teapot_and_tea_deletion(client, teapot, tea, brew):
    """Test that deleting referenced entities leaves the brew in place."""
    assert client.delete(f"/teapots/{teapot['id']}").status_code == 204
    assert client.delete(f"/teas/{tea['id']}").status_code == 204

    response = client.get(f"/brews/{brew['id']}")
    assert response.status_code == 200
    assert response.json()["teapotId"] == teapot["id"]


def test_get_brew_errors(client):
    """Test not-found and malformed brew ids."""
    assert client.get(f"/brews/{uuid4()}").status_code == 404
    response = client.get("/brews/xyz")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid brew ID format"


def test_patch_brew(client, brew):
    """Test updating the status and completion time."""
    response = client.patch(
        f"/brews/{brew['id']}",
        json={"status": "served", "completedAt": "2025-01-04T12:05:00Z"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "served"
    assert data["completedAt"].startswith("2025-01-04T12:05:00")
    assert data["notes"] == brew["notes"]
    assert data["waterTempCelsius"] == brew["waterTempCelsius"]
    assert data["createdAt"] == brew["createdAt"]
    assert data["startedAt"] == brew["startedAt"]


def test_patch_brew_invalid_status(client, brew):
    """Test that the status must be a known value and cannot be null."""
    assert client.patch(f"/brews/{brew['id']}", json={"status": "boiling"}).status_code == 400
    assert client.patch(f"/brews/{brew['id']}", json={"status": None}).status_code == 400
    assert client.get(f"/brews/{brew['id']}").json()["status"] == "preparing"


def test_delete_brew(client, brew):
    """Test deleting a brew."""
    assert client.delete(f"/brews/{brew['id']}").status_code == 204
    assert client.get(f"/brews/{brew['id']}").status_code == 404
    assert client.delete(f"/brews/{brew['id']}").status_code == 404


def test_list_brews_filters(client, teapot, tea):
    """Test filtering brews by status, teapot and tea."""
    other_teapot = client.post(
        "/teapots", json={"name": "Big Pot", "material": "porcelain", "capacityMl": 1500}
    ).json()
    first = client.post("/brews", json={"teapotId": teapot["id"], "teaId": tea["id"]}).json()
    client.post("/brews", json={"teapotId": other_teapot["id"], "teaId": tea["id"]})
    client.patch(f"/brews/{first['id']}", json={"status": "ready"})

    by_teapot = client.get("/brews", params={"teapotId": teapot["id"]}).json()
    assert by_teapot["pagination"]["total"] == 1
    assert by_teapot["data"][0]["id"] == first["id"]

    by_tea = client.get("/brews", params={"teaId": tea["id"]}).json()
    assert by_tea["pagination"]["total"] == 2

    ready = client.get("/brews", params={"status": "ready"}).json()
    assert [b["id"] for b in ready["data"]] == [first["id"]]

    preparing_here = client.get(
        "/brews", params={"status": "preparing", "teapotId": teapot["id"]}
    ).json()
    assert preparing_here["pagination"]["total"] == 0


def test_list_brews_bad_filter(client):
    """Test that filter ids must be UUIDs."""
    response = client.get("/brews", params={"teapotId": "nope"})
    assert response.status_code == 400
    assert "teapotId" in response.json()["details"]


def test_list_teapot_brews(client, teapot, tea, brew):
    """Test listing the brews of one teapot."""
    other_teapot = client.post(
        "/teapots", json={"name": "Other", "material": "glass", "capacityMl": 500}
    ).json()
    client.post("/brews", json={"teapotId": other_teapot["id"], "teaId": tea["id"]})

    response = client.get(f"/teapots/{teapot['id']}/brews")
    assert response.status_code == 200
    data = response.json()
    assert [b["id"] for b in data["data"]] == [brew["id"]]
    assert data["pagination"] == {"page": 1, "limit": 20, "total": 1, "totalPages": 1}


def test_list_teapot_brews_errors(client):
    """Test the parent checks on the teapot brews listing."""
    assert client.get(f"/teapots/{uuid4()}/brews").status_code == 404
    assert client.get("/teapots/bad/brews").status_code == 400


def test_create_steeps_numbered_sequentially(client, brew):
    """Test that steeps are numbered 1, 2, 3 per brew."""
    numbers = []
    for duration in [30, 45, 60]:
        response = client.post(f"/brews/{brew['id']}/steeps", json={"durationSeconds": duration})
        assert response.status_code == 201
        numbers.append(response.json()["steepNumber"])

    assert numbers == [1, 2, 3]


def test_steep_numbers_are_per_brew(client, teapot, tea, brew):
    """Test that a second brew starts its own numbering."""
    client.post(f"/brews/{brew['id']}/steeps", json={"durationSeconds": 30})
    other = client.post("/brews", json={"teapotId": teapot["id"], "teaId": tea["id"]}).json()

    response = client.post(f"/brews/{other['id']}/steeps", json={"durationSeconds": 30})
    assert response.json()["steepNumber"] == 1


def test_create_steep(client, brew):
    """Test the fields of a created steep."""
    response = client.post(
        f"/brews/{brew['id']}/steeps",
        json={"durationSeconds": 30, "rating": 4, "notes": "Light and floral"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["brewId"] == brew["id"]
    assert data["durationSeconds"] == 30
    assert data["rating"] == 4
    assert data["notes"] == "Light and floral"
    assert data["createdAt"]


def test_create_steep_validation(client, brew):
    """Test steep constraints."""
    assert client.post(f"/brews/{brew['id']}/steeps", json={}).status_code == 400
    assert client.post(f"/brews/{brew['id']}/steeps", json={"durationSeconds": 0}).status_code == 400
    response = client.post(f"/brews/{brew['id']}/steeps", json={"durationSeconds": 30, "rating": 6})
    assert response.status_code == 400
    assert "rating" in response.json()["details"]


def test_create_steep_unknown_brew(client):
    """Test adding a steep to an unknown brew."""
    response = client.post(f"/brews/{uuid4()}/steeps", json={"durationSeconds": 30})
    assert response.status_code == 404
    assert response.json()["message"] == "Brew not found"


def test_list_steeps(client, brew):
    """Test listing a brew's steeps in steep order."""
    for duration in [30, 45, 60]:
        client.post(f"/brews/{brew['id']}/steeps", json={"durationSeconds": duration})

    response = client.get(f"/brews/{brew['id']}/steeps")
    assert response.status_code == 200
    data = response.json()
    assert [s["steepNumber"] for s in data["data"]] == [1, 2, 3]
    assert [s["durationSeconds"] for s in data["data"]] == [30, 45, 60]
    assert data["pagination"]["total"] == 3

    second_page = client.get(f"/brews/{brew['id']}/steeps", params={"page": 2, "limit": 2}).json()
    assert [s["steepNumber"] for s in second_page["data"]] == [3]
    assert second_page["pagination"]["totalPages"] == 2


def test_list_steeps_unknown_brew(client):
    """Test listing steeps of an unknown brew."""
    assert client.get(f"/brews/{uuid4()}/steeps").status_code == 404


def test_create_steep_unknown_brew_before_body(client):
    """Test that an unknown brew is reported even when the steep body is empty."""
    response = client.post(f"/brews/{uuid4()}/steeps", json={})
    assert response.status_code == 404
    assert response.json()["message"] == "Brew not found"


def test_patch_brew_not_found_before_body(client):
    """Test that an unknown brew wins over an invalid status."""
    response = client.patch(f"/brews/{uuid4()}", json={"status": "boiling"})
    assert response.status_code == 404


def test_patch_brew_null_status_details(client, brew):
    """Test that a null status is reported under the status key."""
    response = client.patch(f"/brews/{brew['id']}", json={"status": None})
    assert response.json()["details"] == {"status": "cannot be null"}
