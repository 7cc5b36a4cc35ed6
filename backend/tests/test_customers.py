"""
Tests for customer endpoints.
"""

from reservation_api.models import Customer


NEW_CUSTOMER = {
    "firstName": "Lucia",
    "lastName": "Perez",
    "email": "lucia@example.com",
    "phoneNumber": "5550199",
}


class TestCustomerEndpoints:
    def test_create(self, client, auth_headers, db_session):
        response = client.post("/api/customers", json=NEW_CUSTOMER, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["customerId"] > 0
        assert data["firstName"] == "Lucia"
        assert data["phoneNumber"] == "5550199"
        assert db_session.get(Customer, data["customerId"]) is not None

    def test_create_validates_lengths(self, client, auth_headers):
        body = {**NEW_CUSTOMER, "firstName": "x" * 51, "phoneNumber": "0" * 11}
        response = client.post("/api/customers", json=body, headers=auth_headers)

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["detail"]["errors"]}
        assert fields == {"firstName", "phoneNumber"}

    def test_create_requires_fields(self, client, auth_headers):
        response = client.post("/api/customers", json={"firstName": "A"}, headers=auth_headers)
        assert response.status_code == 400

    def test_get_embeds_reservations(self, client, auth_headers, seed_reservation):
        response = client.get(
            f"/api/customers/{seed_reservation.customer_id}", headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "ana@example.com"
        assert [r["reservationId"] for r in data["reservations"]] == [seed_reservation.id]

    def test_get_missing(self, client, auth_headers):
        response = client.get("/api/customers/999", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Customer with ID 999 not found"

    def test_get_id_beyond_64_bits(self, client, auth_headers):
        response = client.get(f"/api/customers/{2**64}", headers=auth_headers)
        assert response.status_code == 404

    def test_get_non_integer_id(self, client, auth_headers):
        response = client.get("/api/customers/abc", headers=auth_headers)
        assert response.status_code == 400

    def test_delete(self, client, auth_headers, seed_customer):
        response = client.delete(f"/api/customers/{seed_customer.id}", headers=auth_headers)
        assert response.status_code == 204

        response = client.get(f"/api/customers/{seed_customer.id}", headers=auth_headers)
        assert response.status_code == 404

    def test_delete_twice(self, client, auth_headers, seed_customer):
        first = client.delete(f"/api/customers/{seed_customer.id}", headers=auth_headers)
        second = client.delete(f"/api/customers/{seed_customer.id}", headers=auth_headers)

        assert first.status_code == 204
        assert second.status_code == 404

    def test_delete_missing(self, client, auth_headers):
        response = client.delete("/api/customers/999", headers=auth_headers)
        assert response.status_code == 404

    def test_delete_referenced_is_conflict(self, client, auth_headers, seed_reservation):
        response = client.delete(
            f"/api/customers/{seed_reservation.customer_id}", headers=auth_headers
        )
        assert response.status_code == 409

        response = client.get(
            f"/api/customers/{seed_reservation.customer_id}", headers=auth_headers
        )
        assert response.status_code == 200
