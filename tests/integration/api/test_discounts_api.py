import pytest
from httpx import AsyncClient

from tests.fixtures.tokens import auth_headers

ADMIN = auth_headers(1, ["admin"])
MANAGER = auth_headers(1, ["orders_manager"])


async def _customer_and_level(client: AsyncClient):
    level = (await client.post("/api/price-levels", json={"name": "Wholesale"}, headers=ADMIN)).json()
    customer = (
        await client.post(
            "/api/customers", json={"name": "Acme", "email": "buyer@acme.example.com"}, headers=ADMIN
        )
    ).json()
    return customer, level


@pytest.mark.asyncio
async def test_approval_unlocks_price_resolution(client: AsyncClient):
    """
    Given a customer with a requested discount
    When an orders manager approves it
    Then the customer is priced at that level
    """
    customer, level = await _customer_and_level(client)
    product = (
        await client.post(
            "/api/products",
            json={
                "name": "Widget",
                "currency": "USD",
                "prices": [{"price_level_id": level["id"], "price_cents": 450}],
            },
            headers=ADMIN,
        )
    ).json()
    requested = await client.post(
        "/api/discounts",
        json={"customer_id": customer["id"], "price_level_id": level["id"]},
        headers=ADMIN,
    )
    assert requested.status_code == 201
    assignment_id = requested.json()["id"]

    before = await client.get(
        f"/api/pricing/products/{product['id']}",
        params={"customer_id": customer["id"]},
        headers=MANAGER,
    )
    assert before.status_code == 404

    by_admin = await client.post(f"/api/discounts/{assignment_id}/approve", headers=ADMIN)
    assert by_admin.status_code == 403

    approved = await client.post(f"/api/discounts/{assignment_id}/approve", headers=MANAGER)
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"

    after = await client.get(
        f"/api/pricing/products/{product['id']}",
        params={"customer_id": customer["id"]},
        headers=MANAGER,
    )
    assert after.status_code == 200
    assert after.json()["price_cents"] == 450

    levels = await client.get(
        f"/api/discounts/customers/{customer['id']}/price-levels", headers=MANAGER
    )
    assert [lvl["name"] for lvl in levels.json()] == ["Wholesale"]

    customer_view = await client.get(f"/api/customers/{customer['id']}", headers=MANAGER)
    assert customer_view.json()["price_level_id"] == level["id"]


@pytest.mark.asyncio
async def test_rejected_discount_is_final(client: AsyncClient):
    customer, level = await _customer_and_level(client)
    assignment = (
        await client.post(
            "/api/discounts",
            json={"customer_id": customer["id"], "price_level_id": level["id"]},
            headers=MANAGER,
        )
    ).json()

    rejected = await client.post(f"/api/discounts/{assignment['id']}/reject", headers=MANAGER)
    approve_after = await client.post(
        f"/api/discounts/{assignment['id']}/approve", headers=MANAGER
    )
    again = await client.post(
        "/api/discounts",
        json={"customer_id": customer["id"], "price_level_id": level["id"]},
        headers=MANAGER,
    )
    listed = await client.get("/api/discounts", params={"status": "rejected"}, headers=MANAGER)

    assert rejected.json()["status"] == "rejected"
    assert approve_after.status_code == 422
    assert again.status_code == 409
    assert [a["id"] for a in listed.json()["items"]] == [assignment["id"]]
