"""
Tests for reservation endpoints and existence-gated creation.
"""

from datetime import datetime

from reservation_api.models import Customer, MenuItem, Order, OrderItem, Reservation


class TestCreateReservation:
    def test_existence_gated_flow(self, client, auth_headers):
        response = client.post(
            "/api/restaurants",
            json={
                "name": "Cafe A",
                "address": "1 Main St",
                "phoneNumber": "5551234567",
                "openingHours": 9,
            },
            headers=auth_headers,
        )
        assert response.status_code == 200
        restaurant_id = response.json()["restaurantId"]
        assert restaurant_id == 1

        response = client.post(
            "/api/reservations",
            json={"restaurantId": restaurant_id, "customerId": 42, "partySize": 4},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert "customerId" in response.json()["detail"]

        response = client.post(
            "/api/customers",
            json={
                "firstName": "Ana",
                "lastName": "Lopez",
                "email": "ana@example.com",
                "phoneNumber": "5550001",
            },
            headers=auth_headers,
        )
        customer_id = response.json()["customerId"]

        response = client.post(
            "/api/reservations",
            json={"restaurantId": restaurant_id, "customerId": customer_id, "partySize": 0},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["field"] == "partySize"

        response = client.post(
            "/api/reservations",
            json={"restaurantId": restaurant_id, "customerId": customer_id, "partySize": 4},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["reservationId"] > 0
        assert data["partySize"] == 4
        assert data["customerId"] == customer_id

    def test_restaurant_checked_before_customer(self, client, auth_headers):
        response = client.post(
            "/api/reservations",
            json={"restaurantId": 7, "customerId": 8, "partySize": 4},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert "restaurantId" in response.json()["detail"]

    def test_missing_reference_reported_before_party_size(
        self, client, auth_headers, seed_restaurant
    ):
        response = client.post(
            "/api/reservations",
            json={"restaurantId": seed_restaurant.id, "customerId": 99, "partySize": 0},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_customer_id_beyond_64_bits(self, client, auth_headers, seed_restaurant):
        response = client.post(
            "/api/reservations",
            json={"restaurantId": seed_restaurant.id, "customerId": 2**64, "partySize": 2},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert "customerId" in response.json()["detail"]

    def test_party_size_beyond_64_bits(
        self, client, auth_headers, seed_restaurant, seed_customer
    ):
        response = client.post(
            "/api/reservations",
            json={
                "restaurantId": seed_restaurant.id,
                "customerId": seed_customer.id,
                "partySize": 2**63,
            },
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["field"] == "partySize"

    def test_nothing_persisted_on_failure(
        self, client, auth_headers, seed_restaurant, seed_customer, db_session
    ):
        client.post(
            "/api/reservations",
            json={
                "restaurantId": seed_restaurant.id,
                "customerId": seed_customer.id,
                "partySize": -3,
            },
            headers=auth_headers,
        )
        assert db_session.query(Reservation).count() == 0

    def test_explicit_date(self, client, auth_headers, seed_restaurant, seed_customer):
        response = client.post(
            "/api/reservations",
            json={
                "restaurantId": seed_restaurant.id,
                "customerId": seed_customer.id,
                "reservationDate": "2024-06-01T20:00:00",
                "partySize": 2,
            },
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["reservationDate"] == "2024-06-01T20:00:00"


class TestReservationEndpoints:
    def test_get_embeds_tables_and_orders(
        self, client, auth_headers, seed_reservation_table, seed_order_item
    ):
        response = client.get(
            f"/api/reservations/{seed_reservation_table.reservation_id}", headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert [t["tableId"] for t in data["reservationTables"]] == [
            seed_reservation_table.table_id
        ]
        assert len(data["orders"]) == 1
        assert data["orders"][0]["orderItems"][0]["quantity"] == 2

    def test_list(self, client, auth_headers, seed_reservation):
        response = client.get("/api/reservations", headers=auth_headers)
        assert [r["reservationId"] for r in response.json()] == [seed_reservation.id]

    def test_patch_party_size(self, client, auth_headers, seed_reservation, db_session):
        response = client.patch(
            f"/api/reservations/{seed_reservation.id}",
            json=[{"op": "replace", "path": "/partySize", "value": 6}],
            headers=auth_headers,
        )
        assert response.status_code == 204

        db_session.expire_all()
        assert db_session.get(Reservation, seed_reservation.id).party_size == 6

    def test_patch_party_size_below_one(self, client, auth_headers, seed_reservation):
        response = client.patch(
            f"/api/reservations/{seed_reservation.id}",
            json=[{"op": "replace", "path": "/partySize", "value": 0}],
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_patch_cannot_move_reservation(self, client, auth_headers, seed_reservation):
        response = client.patch(
            f"/api/reservations/{seed_reservation.id}",
            json=[{"op": "replace", "path": "/restaurantId", "value": 2}],
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_delete_with_orders_is_conflict(self, client, auth_headers, seed_order):
        response = client.delete(
            f"/api/reservations/{seed_order.reservation_id}", headers=auth_headers
        )
        assert response.status_code == 409


class TestReservationQueries:
    def test_by_customer(self, client, auth_headers, seed_reservation):
        response = client.get(
            f"/api/reservations/customer/{seed_reservation.customer_id}", headers=auth_headers
        )
        assert response.status_code == 200
        assert [r["reservationId"] for r in response.json()] == [seed_reservation.id]

    def test_by_customer_without_reservations(self, client, auth_headers, seed_customer):
        response = client.get(
            f"/api/reservations/customer/{seed_customer.id}", headers=auth_headers
        )
        assert response.status_code == 404

    def test_by_customer_id_beyond_64_bits(self, client, auth_headers):
        response = client.get(f"/api/reservations/customer/{2**64}", headers=auth_headers)
        assert response.status_code == 404

    def test_with_customer_and_restaurant(self, client, auth_headers, seed_reservation):
        response = client.get(
            "/api/reservations/with-customer-and-restaurant", headers=auth_headers
        )
        assert response.status_code == 200
        (item,) = response.json()
        assert item["customer"]["email"] == "ana@example.com"
        assert item["restaurant"]["name"] == "Trattoria Roma"

    def test_customers_by_party_size(
        self, client, auth_headers, db_session, seed_reservation
    ):
        small = Customer(
            first_name="Solo", last_name="Diner", email="solo@example.com", phone_number="1"
        )
        db_session.add(small)
        db_session.flush()
        db_session.add(
            Reservation(
                restaurant_id=seed_reservation.restaurant_id,
                customer_id=small.id,
                reservation_date=datetime(2024, 5, 2, 13, 0),
                party_size=1,
            )
        )
        db_session.commit()

        response = client.get(
            "/api/reservations/customers-by-party-size/2", headers=auth_headers
        )

        assert response.status_code == 200
        assert [c["email"] for c in response.json()] == ["ana@example.com"]

    def test_customers_by_party_size_must_be_positive(self, client, auth_headers):
        response = client.get(
            "/api/reservations/customers-by-party-size/0", headers=auth_headers
        )
        assert response.status_code == 400

    def test_customers_by_party_size_beyond_64_bits(
        self, client, auth_headers, seed_reservation
    ):
        response = client.get(
            f"/api/reservations/customers-by-party-size/{2**64}", headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json() == []

    def test_orders_for_reservation(self, client, auth_headers, seed_order_item):
        response = client.get(
            f"/api/reservations/{seed_order_item.order.reservation_id}/orders",
            headers=auth_headers,
        )
        assert response.status_code == 200
        (order,) = response.json()
        assert order["orderItems"][0]["menuItem"]["name"] == "Carbonara"

    def test_orders_for_missing_reservation(self, client, auth_headers):
        response = client.get("/api/reservations/999/orders", headers=auth_headers)
        assert response.status_code == 404

    def test_menu_items_are_distinct(
        self, client, auth_headers, db_session, seed_order_item
    ):
        order = seed_order_item.order
        second = Order(
            reservation_id=order.reservation_id,
            employee_id=order.employee_id,
            order_date=datetime(2024, 5, 1, 21, 0),
            total_amount=14,
        )
        db_session.add(second)
        db_session.flush()
        db_session.add(OrderItem(order_id=second.id, menu_item_id=seed_order_item.menu_item_id))
        db_session.add(
            MenuItem(
                restaurant_id=seed_order_item.menu_item.restaurant_id,
                name="Tiramisu",
                description="Not ordered",
                price=7,
            )
        )
        db_session.commit()

        response = client.get(
            f"/api/reservations/{order.reservation_id}/menu-items", headers=auth_headers
        )

        assert [m["name"] for m in response.json()] == ["Carbonara"]
