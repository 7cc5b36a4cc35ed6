"""
Tests for table endpoints.
"""

from reservation_api.models import Table


class TestTableEndpoints:
    def test_create(self, client, auth_headers, seed_restaurant):
        response = client.post(
            "/api/tables",
            json={"restaurantId": seed_restaurant.id, "capacity": 6},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["tableId"] > 0
        assert data["capacity"] == 6

    def test_create_with_missing_restaurant(self, client, auth_headers):
        response = client.post(
            "/api/tables", json={"restaurantId": 3, "capacity": 6}, headers=auth_headers
        )
        assert response.status_code == 404

    def test_create_with_restaurant_id_beyond_64_bits(self, client, auth_headers):
        response = client.post(
            "/api/tables", json={"restaurantId": 2**64, "capacity": 2}, headers=auth_headers
        )
        assert response.status_code == 404

    def test_capacity_beyond_64_bits(self, client, auth_headers, seed_restaurant):
        response = client.post(
            "/api/tables",
            json={"restaurantId": seed_restaurant.id, "capacity": 2**63},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["field"] == "capacity"

    def test_capacity_must_be_positive(self, client, auth_headers, seed_restaurant):
        response = client.post(
            "/api/tables",
            json={"restaurantId": seed_restaurant.id, "capacity": 0},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_get_embeds_reservation_links(self, client, auth_headers, seed_reservation_table):
        response = client.get(
            f"/api/tables/{seed_reservation_table.table_id}", headers=auth_headers
        )
        assert response.status_code == 200
        (link,) = response.json()["reservationTables"]
        assert link["reservationId"] == seed_reservation_table.reservation_id

    def test_patch_capacity(self, client, auth_headers, seed_table, db_session):
        response = client.patch(
            f"/api/tables/{seed_table.id}",
            json=[{"op": "replace", "path": "/capacity", "value": 8}],
            headers=auth_headers,
        )
        assert response.status_code == 204

        db_session.expire_all()
        assert db_session.get(Table, seed_table.id).capacity == 8

    def test_delete_assigned_table_is_conflict(self, client, auth_headers, seed_reservation_table):
        response = client.delete(
            f"/api/tables/{seed_reservation_table.table_id}", headers=auth_headers
        )
        assert response.status_code == 409

    def test_list(self, client, auth_headers, seed_table):
        response = client.get("/api/tables", headers=auth_headers)
        assert [t["tableId"] for t in response.json()] == [seed_table.id]
