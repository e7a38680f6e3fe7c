from fastapi import status

from conftest import ALICE, BOB, CAROL, as_caller


def test_balance_endpoint(test_client):
    test_client.post(
        "/api/v1/expenses",
        json={
            "label": "dinner",
            "participants": [ALICE, BOB],
            "paid_amounts": [100, 0],
            "owed_amounts": [50, 50],
        },
    )

    alice = test_client.get(f"/api/v1/balances/{ALICE}")
    bob = test_client.get(f"/api/v1/balances/{BOB}")
    carol = test_client.get(f"/api/v1/balances/{CAROL}")

    assert alice.status_code == status.HTTP_200_OK
    assert alice.json() == {"identity": ALICE, "net_balance": 50}
    assert bob.json()["net_balance"] == -50
    assert carol.json()["net_balance"] == 0


def test_people_balances_endpoint(test_client):
    test_client.post("/api/v1/people", headers=as_caller(ALICE), json={"name": "Alice"})
    test_client.post("/api/v1/people", headers=as_caller(BOB), json={"name": "Bob"})
    test_client.post(
        "/api/v1/expenses",
        json={
            "label": "cab",
            "participants": [BOB, ALICE],
            "paid_amounts": [40, 0],
            "owed_amounts": [20, 20],
        },
    )

    response = test_client.get("/api/v1/balances")

    assert response.json() == [
        {"identity": ALICE, "net_balance": -20, "name": "Alice"},
        {"identity": BOB, "net_balance": 20, "name": "Bob"},
    ]
