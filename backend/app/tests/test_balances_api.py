"""
Tests for balance endpoints.
"""
from decimal import Decimal
from app.models import Trip, Member, Expense, ExpenseSplit


def seed_trip(db, with_expenses=True):
    """Create a trip with Alice, Bob and Carol and two expenses."""
    trip = Trip(name="Lisbon")
    db.add(trip)
    db.flush()

    alice = Member(trip_id=trip.id, name="Alice", is_admin=True, display_order=1)
    bob = Member(trip_id=trip.id, name="Bob", display_order=2)
    carol = Member(trip_id=trip.id, name="Carol", display_order=3)
    db.add_all([alice, bob, carol])
    db.flush()

    if with_expenses:
        dinner = Expense(trip_id=trip.id, paid_by=alice.id, description="Dinner",
                         amount=Decimal("100"), split_type="custom")
        taxi = Expense(trip_id=trip.id, paid_by=bob.id, description="Taxi",
                       amount=Decimal("60"), split_type="equal")
        db.add_all([dinner, taxi])
        db.flush()
        db.add_all([
            ExpenseSplit(expense_id=dinner.id, member_id=alice.id, amount=Decimal("40")),
            ExpenseSplit(expense_id=dinner.id, member_id=bob.id, amount=Decimal("30")),
            ExpenseSplit(expense_id=dinner.id, member_id=carol.id, amount=Decimal("30")),
            ExpenseSplit(expense_id=taxi.id, member_id=alice.id, amount=Decimal("20")),
            ExpenseSplit(expense_id=taxi.id, member_id=bob.id, amount=Decimal("20")),
            ExpenseSplit(expense_id=taxi.id, member_id=carol.id, amount=Decimal("20")),
        ])
    db.commit()
    return trip, alice, bob, carol


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_trip_balances(client, db_session):
    """Test balances and settlements for a stored trip."""
    trip, alice, bob, carol = seed_trip(db_session)

    response = client.get(f"/api/trips/{trip.id}/balances")
    assert response.status_code == 200
    data = response.json()

    assert [(b["member_name"], Decimal(b["balance"])) for b in data["balances"]] == [
        ("Alice", Decimal("40")), ("Bob", Decimal("10")), ("Carol", Decimal("-50"))
    ]
    assert [
        (s["from_member_id"], s["to_member_id"], Decimal(s["amount"]))
        for s in data["settlements"]
    ] == [
        (carol.id, alice.id, Decimal("40")),
        (carol.id, bob.id, Decimal("10")),
    ]
    assert data["settlements"][0]["from_name"] == "Carol"
    assert data["settlements"][0]["to_name"] == "Alice"


def test_trip_without_expenses(client, db_session):
    """Test every member is listed even with no expenses."""
    trip, *_ = seed_trip(db_session, with_expenses=False)

    response = client.get(f"/api/trips/{trip.id}/balances")
    assert response.status_code == 200
    data = response.json()
    assert [b["member_name"] for b in data["balances"]] == ["Alice", "Bob", "Carol"]
    assert all(Decimal(b["balance"]) == 0 for b in data["balances"])
    assert data["settlements"] == []


def test_unknown_trip(client):
    """Test unknown trip returns 404."""
    response = client.get("/api/trips/nope/balances")
    assert response.status_code == 404
    assert response.json()["detail"] == "Trip not found"


def test_calculate_equal_split(client):
    """Test stateless calculation with an equal split."""
    response = client.post(
        "/api/balances/calculate",
        json={
            "members": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}, {"id": "c", "name": "C"}],
            "expenses": [{"paid_by": "a", "amount": 90}]
        }
    )
    assert response.status_code == 200
    data = response.json()
    assert [Decimal(b["balance"]) for b in data["balances"]] == [
        Decimal("60"), Decimal("-30"), Decimal("-30")
    ]
    assert [(s["from_member_id"], s["to_member_id"], Decimal(s["amount"])) for s in data["settlements"]] == [
        ("b", "a", Decimal("30")),
        ("c", "a", Decimal("30")),
    ]


def test_calculate_percentage_split(client):
    """Test stateless calculation with a percentage split."""
    response = client.post(
        "/api/balances/calculate",
        json={
            "members": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}],
            "expenses": [{
                "paid_by": "b",
                "amount": "80",
                "split_type": "percentage",
                "splits": [{"member_id": "a", "amount": 25}, {"member_id": "b", "amount": 75}]
            }]
        }
    )
    assert response.status_code == 200
    settlements = response.json()["settlements"]
    assert len(settlements) == 1
    assert settlements[0]["from_member_id"] == "a"
    assert Decimal(settlements[0]["amount"]) == Decimal("20")


def test_calculate_custom_split_without_splits(client):
    """Test missing custom splits are a bad request."""
    response = client.post(
        "/api/balances/calculate",
        json={
            "members": [{"id": "a", "name": "A"}],
            "expenses": [{"paid_by": "a", "amount": 10, "split_type": "custom"}]
        }
    )
    assert response.status_code == 400


def test_calculate_rejects_non_finite_amount(client):
    """Test non-finite amounts fail validation."""
    response = client.post(
        "/api/balances/calculate",
        json={
            "members": [{"id": "a", "name": "A"}],
            "expenses": [{"paid_by": "a", "amount": "NaN"}]
        }
    )
    assert response.status_code == 422
