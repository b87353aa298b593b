"""Tests for guest reviews."""


def post_review(c, property_id, rating=5, comment="Wonderful stay"):
    return c.post(f"/api/properties/{property_id}/reviews", json={"rating": rating, "comment": comment})


def test_create_and_list_reviews(guest_client, signup, client, listing):
    res = post_review(guest_client, listing["id"], rating=4)
    assert res.status_code == 201
    first = res.json()
    assert first["user_id"] == guest_client.user["id"]
    assert first["rating"] == 4

    second = post_review(signup(login="another"), listing["id"], rating=2, comment="Too noisy").json()

    res = client.get(f"/api/properties/{listing['id']}/reviews")
    assert res.status_code == 200
    # newest first
    assert [r["id"] for r in res.json()] == [second["id"], first["id"]]


def test_review_requires_login(client, listing):
    assert post_review(client, listing["id"]).status_code == 401


def test_review_missing_listing(guest_client):
    assert post_review(guest_client, 9999).status_code == 404


def test_review_validation(guest_client, listing):
    assert post_review(guest_client, listing["id"], rating=6).status_code == 400
    assert post_review(guest_client, listing["id"], rating=0).status_code == 400
    assert post_review(guest_client, listing["id"], comment="meh").status_code == 400
    assert post_review(guest_client, listing["id"], comment="x" * 501).status_code == 400


def test_one_review_per_listing(guest_client, listing):
    assert post_review(guest_client, listing["id"]).status_code == 201
    res = post_review(guest_client, listing["id"], rating=1)
    assert res.status_code == 400
    assert res.json()["detail"] == "You have already reviewed this property"


def test_edit_own_review(guest_client, client, listing):
    review = post_review(guest_client, listing["id"]).json()
    res = guest_client.put(f"/api/reviews/{review['id']}", json={"rating": 3})
    assert res.status_code == 200
    assert res.json()["rating"] == 3
    assert res.json()["comment"] == "Wonderful stay"
    assert client.get(f"/api/reviews/{review['id']}").json()["rating"] == 3


def test_only_author_edits_or_deletes(guest_client, host_client, listing):
    review = post_review(guest_client, listing["id"]).json()
    assert host_client.put(f"/api/reviews/{review['id']}", json={"rating": 1}).status_code == 403
    assert host_client.delete(f"/api/reviews/{review['id']}").status_code == 403


def test_delete_review_allows_new_one(guest_client, listing):
    review = post_review(guest_client, listing["id"]).json()
    assert guest_client.delete(f"/api/reviews/{review['id']}").status_code == 204
    assert guest_client.get(f"/api/reviews/{review['id']}").status_code == 404
    assert post_review(guest_client, listing["id"]).status_code == 201
