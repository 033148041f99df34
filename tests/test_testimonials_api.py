# tests/test_testimonials_api.py
from app.seed import SEED_TESTIMONIALS


def test_list_seeded_testimonials(client):
    body = client.get("/api/testimonials").json()

    assert [t["name"] for t in body] == [t["name"] for t in SEED_TESTIMONIALS]
    assert body[0]["image"] == SEED_TESTIMONIALS[0]["image_url"]
    assert body[0]["role"] == "Procurement Manager, Italia Foods"


def test_create_and_delete(client):
    resp = client.post(
        "/api/testimonials",
        json={
            "name": "Amir Haddad",
            "role": "Buyer, Gulf Grains",
            "content": "Consistent quality across every shipment.",
            "image": "/images/avatar.png",
        },
    )

    assert resp.status_code == 200
    created = resp.json()
    assert created["image"] == "/images/avatar.png"
    assert created["date"]

    assert client.delete(f"/api/testimonials/{created['id']}").status_code == 204
    names = [t["name"] for t in client.get("/api/testimonials").json()]
    assert "Amir Haddad" not in names


def test_missing_role_returns_400(client):
    resp = client.post(
        "/api/testimonials",
        json={"name": "Anon", "content": "Great", "image": "/a.png"},
    )

    assert resp.status_code == 400
