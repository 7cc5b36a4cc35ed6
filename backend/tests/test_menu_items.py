"""
Tests for menu item endpoints.
"""

from decimal import Decimal

from reservation_api.models import MenuItem


class TestMenuItemEndpoints:
    def test_create(self, client, auth_headers, seed_restaurant):
        response = client.post(
            "/api/menu-items",
            json={
                "restaurantId": seed_restaurant.id,
                "name": "Risotto",
                "description": "Saffron",
                "price": 16.5,
            },
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["price"] == 16.5

    def test_negative_price(self, client, auth_headers, seed_restaurant):
        response = client.post(
            "/api/menu-items",
            json={
                "restaurantId": seed_restaurant.id,
                "name": "Risotto",
                "description": "Saffron",
                "price": -1,
            },
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_list_filter_and_search(self, client, auth_headers, seed_menu_item):
        response = client.get("/api/menu-items?name=Carbonara", headers=auth_headers)
        assert [m["menuItemId"] for m in response.json()] == [seed_menu_item.id]

        response = client.get("/api/menu-items?searchQuery=PECORINO", headers=auth_headers)
        assert [m["menuItemId"] for m in response.json()] == [seed_menu_item.id]

        response = client.get("/api/menu-items?name=carbonara", headers=auth_headers)
        assert response.json() == []

    def test_patch_price(self, client, auth_headers, seed_menu_item, db_session):
        response = client.patch(
            f"/api/menu-items/{seed_menu_item.id}",
            json=[{"op": "replace", "path": "/price", "value": "15.75"}],
            headers=auth_headers,
        )
        assert response.status_code == 204

        db_session.expire_all()
        assert db_session.get(MenuItem, seed_menu_item.id).price == Decimal("15.75")

    def test_patch_price_wrong_type(self, client, auth_headers, seed_menu_item):
        response = client.patch(
            f"/api/menu-items/{seed_menu_item.id}",
            json=[{"op": "replace", "path": "/price", "value": "cheap"}],
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Operation 0:")

    def test_delete_ordered_item_is_conflict(self, client, auth_headers, seed_order_item):
        response = client.delete(
            f"/api/menu-items/{seed_order_item.menu_item_id}", headers=auth_headers
        )
        assert response.status_code == 409
