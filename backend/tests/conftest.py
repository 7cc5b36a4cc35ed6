"""
Pytest configuration and fixtures for backend tests.
"""

import base64
import os

# Settings are read at import time, so the environment must be set first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = base64.b64encode(b"k" * 32).decode()
os.environ["ISSUER"] = "reservation-api-tests"
os.environ["AUDIENCE"] = "reservation-api-clients"
os.environ["ENVIRONMENT"] = "test"

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from reservation_api.main import app
from reservation_api.models import (
    Base,
    Customer,
    Employee,
    MenuItem,
    Order,
    OrderItem,
    Reservation,
    ReservationTable,
    Restaurant,
    Table,
)
from reservation_shared.infrastructure.db import enable_sqlite_foreign_keys, get_db
from reservation_shared.security.rate_limit import limiter


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_USERNAME = "host"
TEST_PASSWORD = "s3cret-pass"


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    Login rate limiting is disabled unless a test turns it back on.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    limiter.enabled = True
    limiter.reset()


@pytest.fixture
def auth_headers(client):
    """Register a user and log in through the API."""
    response = client.post(
        "/api/user/register",
        json={"username": TEST_USERNAME, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, f"Register failed: {response.json()}"

    response = client.post(
        "/api/user/login",
        json={"username": TEST_USERNAME, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, f"Login failed: {response.json()}"
    return {"Authorization": f"Bearer {response.json()}"}


def _persist(db_session, entity):
    db_session.add(entity)
    db_session.commit()
    db_session.refresh(entity)
    return entity


@pytest.fixture
def seed_restaurant(db_session):
    return _persist(
        db_session,
        Restaurant(
            name="Trattoria Roma",
            address="12 Via Appia",
            phone_number="555-0100",
            opening_hours=Decimal("12.50"),
        ),
    )


@pytest.fixture
def seed_customer(db_session):
    return _persist(
        db_session,
        Customer(
            first_name="Ana",
            last_name="Lopez",
            email="ana@example.com",
            phone_number="5550001",
        ),
    )


@pytest.fixture
def seed_employee(db_session, seed_restaurant):
    return _persist(
        db_session,
        Employee(
            restaurant_id=seed_restaurant.id,
            first_name="Marco",
            last_name="Bianchi",
            position="Manager",
        ),
    )


@pytest.fixture
def seed_table(db_session, seed_restaurant):
    return _persist(db_session, Table(restaurant_id=seed_restaurant.id, capacity=4))


@pytest.fixture
def seed_menu_item(db_session, seed_restaurant):
    return _persist(
        db_session,
        MenuItem(
            restaurant_id=seed_restaurant.id,
            name="Carbonara",
            description="Guanciale, egg, pecorino",
            price=Decimal("14.00"),
        ),
    )


@pytest.fixture
def seed_reservation(db_session, seed_restaurant, seed_customer):
    return _persist(
        db_session,
        Reservation(
            restaurant_id=seed_restaurant.id,
            customer_id=seed_customer.id,
            reservation_date=datetime(2024, 5, 1, 19, 30),
            party_size=4,
        ),
    )


@pytest.fixture
def seed_reservation_table(db_session, seed_reservation, seed_table):
    return _persist(
        db_session,
        ReservationTable(reservation_id=seed_reservation.id, table_id=seed_table.id),
    )


@pytest.fixture
def seed_order(db_session, seed_reservation, seed_employee):
    return _persist(
        db_session,
        Order(
            reservation_id=seed_reservation.id,
            employee_id=seed_employee.id,
            order_date=datetime(2024, 5, 1, 20, 0),
            total_amount=56,
        ),
    )


@pytest.fixture
def seed_order_item(db_session, seed_order, seed_menu_item):
    return _persist(
        db_session,
        OrderItem(order_id=seed_order.id, menu_item_id=seed_menu_item.id, quantity=2),
    )


@pytest.fixture
def make_customers(db_session):
    """Factory inserting count customers with predictable names."""

    def _make(count: int, **overrides) -> list[Customer]:
        customers = []
        for i in range(1, count + 1):
            fields = {
                "first_name": f"First{i:02d}",
                "last_name": f"Last{i:02d}",
                "email": f"customer{i:02d}@example.com",
                "phone_number": f"555{i:04d}",
            }
            fields.update(overrides)
            customer = Customer(**fields)
            db_session.add(customer)
            customers.append(customer)
        db_session.commit()
        return customers

    return _make
