"""The /api/ForRent paths answer exactly like their /api/properties counterparts."""

PAYLOAD = {
    "title": "Old Client Flat",
    "description": "Listed through the legacy path",
    "city": "Braga",
    "price": 70,
    "rooms": 1,
    "area": 40,
}


def test_legacy_create_and_fetch(host_client, client):
    res = host_client.post("/api/ForRent", json=PAYLOAD)
    assert res.status_code == 201
    prop = res.json()

    res = client.get(f"/api/ForRent/getById/{prop['id']}")
    assert res.status_code == 200
    assert res.json() == client.get(f"/api/properties/{prop['id']}").json()


def test_legacy_list_and_search(host_client, client, listing):
    assert client.get("/api/ForRent").json() == client.get("/api/properties").json()
    res = client.post("/api/ForRent/search", json={"city": "porto"})
    assert res.status_code == 200
    assert isinstance(res.json(), list)
    assert [p["id"] for p in res.json()] == [listing["id"]]


def test_legacy_search_returns_every_match_unpaged(host_client, client):
    for n in range(12):
        host_client.post("/api/ForRent", json={**PAYLOAD, "title": f"Old Flat {n}", "price": 60 + n})
    res = client.post("/api/ForRent/search", json={"minPrice": 65, "hasWifi": False})
    assert res.status_code == 200
    assert [p["title"] for p in res.json()] == [f"Old Flat {n}" for n in range(5, 12)]
    assert len(client.post("/api/ForRent/search", json={}).json()) == 12


def test_legacy_edit_checks_owner(host_client, guest_client, listing):
    assert guest_client.put(f"/api/ForRent/edit/{listing['id']}", json={"price": 1}).status_code == 403
    res = host_client.put(f"/api/ForRent/edit/{listing['id']}", json={"price": 111})
    assert res.status_code == 200
    assert res.json()["price"] == 111


def test_legacy_delete(host_client, guest_client, listing):
    assert guest_client.delete(f"/api/ForRent/delete/byId/{listing['id']}").status_code == 403
    assert host_client.delete(f"/api/ForRent/delete/byId/{listing['id']}").status_code == 204
    assert host_client.get(f"/api/ForRent/getById/{listing['id']}").status_code == 404
