"""Tests for the HTTP API.

These tests exercise the routes end to end through FastAPI's TestClient,
with the database dependency pointed at an in-memory SQLite engine.
"""

import pytest


def create_shelf(client, row="A", number=1, name=None):
    resp = client.post(
        "/api/shelves",
        json={"name": name or f"Prateleira {row}{number}", "row": row, "number": number},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_material(client, shelf, position, condition=90, **extra):
    data = {
        "name": "Capacete",
        "category": "EPI",
        "entry_date": "2024-01-15",
        "condition": str(condition),
        "shelf": f"{shelf['row']}{shelf['number']}",
        "position": position,
        "shelf_id": str(shelf["id"]),
    }
    data.update(extra)
    return client.post("/api/materials", data=data)


def position_of(client, shelf_id, position_id):
    shelf = client.get(f"/api/shelves/{shelf_id}").json()
    return next(p for p in shelf["positions"] if p["position_id"] == position_id)


class TestShelvesAPI:

    def test_create_and_list(self, client):
        create_shelf(client, "B", 2)
        shelf = create_shelf(client, "a", 1)

        assert shelf["row"] == "A"
        assert shelf["color"] == "#3b82f6"
        assert len(shelf["positions"]) == 9
        assert not any(p["occupied"] for p in shelf["positions"])

        listed = client.get("/api/shelves").json()
        assert [(s["row"], s["number"]) for s in listed] == [("A", 1), ("B", 2)]

    def test_duplicate(self, client):
        create_shelf(client, "A", 1)
        resp = client.post("/api/shelves", json={"name": "Outra", "row": "A", "number": 1})
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_invalid_row(self, client):
        resp = client.post("/api/shelves", json={"name": "X", "row": "1", "number": 1})
        assert resp.status_code == 422

    def test_delete(self, client):
        shelf = create_shelf(client)
        assert client.delete(f"/api/shelves/{shelf['id']}").status_code == 200
        assert client.get(f"/api/shelves/{shelf['id']}").status_code == 404
        assert client.delete(f"/api/shelves/{shelf['id']}").status_code == 404


class TestMaterialsAPI:

    def test_create_occupies_position(self, client):
        shelf = create_shelf(client)
        resp = create_material(client, shelf, "A1-M2", condition=55)
        assert resp.status_code == 201, resp.text

        material = resp.json()
        assert material["state"] == "warning"
        assert material["shelf_detail"]["id"] == shelf["id"]

        position = position_of(client, shelf["id"], "A1-M2")
        assert position["occupied"] is True
        assert position["material_id"] == material["id"]

    def test_create_with_image(self, client):
        shelf = create_shelf(client)
        resp = client.post(
            "/api/materials",
            data={
                "name": "Luva", "category": "EPI", "entry_date": "2024-01-15",
                "condition": "80", "shelf": "A1", "position": "A1-H1",
                "shelf_id": str(shelf["id"]),
            },
            files={"image": ("luva.png", b"PNGDATA", "image/png")},
        )
        assert resp.status_code == 201, resp.text
        image = resp.json()["image"]
        assert image.startswith("/uploads/")
        assert image.endswith("-luva.png")

        served = client.get(image)
        assert served.status_code == 200
        assert served.content == b"PNGDATA"

    def test_condition_out_of_range(self, client):
        shelf = create_shelf(client)
        resp = create_material(client, shelf, "A1-H1", condition=150)
        assert resp.status_code == 422
        assert "error" in resp.json()

    def test_malformed_position(self, client):
        shelf = create_shelf(client)
        resp = create_material(client, shelf, "prateleira-1")
        assert resp.status_code == 422
        assert "position" in resp.json()["error"]

    def test_missing_required_field(self, client):
        resp = client.post("/api/materials", data={"name": "Sem resto"})
        assert resp.status_code == 422

    def test_unknown_position(self, client):
        shelf = create_shelf(client)
        resp = create_material(client, shelf, "A1-Z1")
        assert resp.status_code == 404
        assert client.get("/api/materials").json() == []

    def test_get_and_not_found(self, client):
        shelf = create_shelf(client)
        material = create_material(client, shelf, "A1-H1").json()

        assert client.get(f"/api/materials/{material['id']}").json()["name"] == "Capacete"
        resp = client.get("/api/materials/999")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Material 999 não encontrado"}

    def test_update_condition(self, client):
        shelf = create_shelf(client)
        material = create_material(client, shelf, "A1-H1", condition=30).json()
        assert material["state"] == "bad"

        resp = client.put(f"/api/materials/{material['id']}", data={"condition": "90"})
        assert resp.status_code == 200, resp.text
        updated = resp.json()
        assert updated["state"] == "good"
        assert updated["position"] == "A1-H1"
        assert updated["shelf_id"] == shelf["id"]

    def test_update_missing(self, client):
        resp = client.put("/api/materials/999", data={"condition": "90"})
        assert resp.status_code == 404

    def test_delete_frees_position(self, client):
        shelf = create_shelf(client)
        material = create_material(client, shelf, "A1-L1").json()

        assert client.delete(f"/api/materials/{material['id']}").status_code == 200
        position = position_of(client, shelf["id"], "A1-L1")
        assert position["occupied"] is False
        assert position["material_id"] is None
        assert client.delete(f"/api/materials/{material['id']}").status_code == 404

    def test_list_filters(self, client):
        shelf = create_shelf(client)
        for i, condition in enumerate([10, 40, 60, 79, 80]):
            create_material(client, shelf, f"A1-{'HML'[i // 3]}{i % 3 + 1}", condition=condition,
                            name=f"Item {condition}")

        resp = client.get("/api/materials", params={"minCondition": 40, "maxCondition": 79})
        assert sorted(m["condition"] for m in resp.json()) == [40, 60, 79]

        resp = client.get("/api/materials", params={"state": "good"})
        assert [m["condition"] for m in resp.json()] == [80]

        resp = client.get("/api/materials", params={"search": "item 1"})
        assert [m["name"] for m in resp.json()] == ["Item 10"]

        names = [m["name"] for m in client.get("/api/materials").json()]
        assert names == ["Item 80", "Item 79", "Item 60", "Item 40", "Item 10"]


class TestInspectionsAPI:

    def test_record_and_list(self, client):
        shelf = create_shelf(client)
        m1 = create_material(client, shelf, "A1-H1").json()
        m2 = create_material(client, shelf, "A1-H2").json()

        resp = client.post(
            "/api/inspections",
            json={"date": "2024-05-01T10:00:00", "materials": [m1["id"], m2["id"], 999], "inspector": "Ana"},
        )
        assert resp.status_code == 201, resp.text
        inspection = resp.json()
        assert inspection["type"] == "weekly"
        assert inspection["status"] == "planned"
        assert inspection["skipped_materials"] == [999]
        assert sorted(m["id"] for m in inspection["materials"]) == sorted([m1["id"], m2["id"]])

        for material_id in (m1["id"], m2["id"]):
            material = client.get(f"/api/materials/{material_id}").json()
            assert material["last_inspection"] == "2024-05-01T10:00:00"

        listed = client.get("/api/inspections").json()
        assert len(listed) == 1
        assert listed[0]["inspector"] == "Ana"

    def test_missing_inspector(self, client):
        resp = client.post("/api/inspections", json={"date": "2024-05-01T10:00:00", "materials": []})
        assert resp.status_code == 422


class TestStatsAPI:

    def test_empty(self, client):
        stats = client.get("/api/stats").json()
        assert stats["total_materials"] == 0
        assert stats["condition_average"] is None

    def test_one_material(self, client):
        shelf = create_shelf(client)
        create_material(client, shelf, "A1-H1", condition=50)

        stats = client.get("/api/stats").json()
        assert stats["total_materials"] == 1
        assert stats["warning_materials"] == 1
        assert stats["occupied_positions"] == 1
        assert stats["total_shelves"] == 1
        assert stats["condition_average"] == 50.0
        assert stats["category_stats"] == [{"category": "EPI", "count": 1}]


class TestUsersAPI:

    def test_register_and_login(self, client):
        resp = client.post(
            "/api/register",
            json={"username": "ana", "email": "ana@example.com", "password": "segredo123"},
        )
        assert resp.status_code == 201
        user = resp.json()["user"]
        assert user["username"] == "ana"
        assert "password" not in user and "password_hash" not in user

        resp = client.post("/api/login", json={"username": "ana", "password": "segredo123"})
        assert resp.status_code == 200

    @pytest.mark.parametrize("password", ["errada", ""])
    def test_bad_login(self, client, password):
        client.post(
            "/api/register",
            json={"username": "ana", "email": "ana@example.com", "password": "segredo123"},
        )
        resp = client.post("/api/login", json={"username": "ana", "password": password})
        assert resp.status_code == 401

    def test_duplicate(self, client):
        body = {"username": "ana", "email": "ana@example.com", "password": "segredo123"}
        client.post("/api/register", json=body)
        assert client.post("/api/register", json=body).status_code == 400


class TestDashboard:

    def test_renders(self, client):
        shelf = create_shelf(client)
        create_material(client, shelf, "A1-H1")

        resp = client.get("/")
        assert resp.status_code == 200
        assert "Inventário de Materiais" in resp.text
        assert "A1-H1" in resp.text
