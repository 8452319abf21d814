"""Products/services catalog endpoints."""
from accubooks.models.models import InvoiceItem


def _create_product(client, headers, **overrides):
    payload = {"item_name": "Widget", "hsn_sac_code": "8471", "default_sale_price": "50", "default_gst_rate": "12"}
    payload.update(overrides)
    resp = client.post("/products", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_product_crud(client, auth_headers, company):
    product = _create_product(client, auth_headers)
    assert product["default_sale_price"] == "50.00"
    assert product["default_gst_rate"] == "12.00"

    _create_product(client, auth_headers, item_name="Consulting hour", hsn_sac_code="998311")
    names = [p["item_name"] for p in client.get("/products", headers=auth_headers).json()]
    assert names == ["Consulting hour", "Widget"]

    resp = client.patch(f"/products/{product['id']}", json={"default_sale_price": "55.50"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["default_sale_price"] == "55.50"

    resp = client.get("/products", params={"search": "wid"}, headers=auth_headers)
    assert [p["item_name"] for p in resp.json()] == ["Widget"]

    assert client.delete(f"/products/{product['id']}", headers=auth_headers).status_code == 204
    resp = client.get(f"/products/{product['id']}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "PRD501"


def test_gst_rate_out_of_range_rejected(client, auth_headers, company):
    resp = client.post("/products", json={"item_name": "Odd", "default_gst_rate": "30"}, headers=auth_headers)
    assert resp.status_code == 422


def test_deleting_product_detaches_invoice_items(client, auth_headers, company, db_session):
    product = _create_product(client, auth_headers)
    invoice = client.post(
        "/invoices",
        json={
            "customer_name": "Bharat Stores",
            "invoice_date": "2024-05-10",
            "place_of_supply_type": "Intra-State",
            "items": [{"product_service_id": product["id"], "quantity": "2"}],
        },
        headers=auth_headers,
    ).json()

    assert client.delete(f"/products/{product['id']}", headers=auth_headers).status_code == 204

    resp = client.get(f"/invoices/{invoice['id']}", headers=auth_headers)
    item = resp.json()["items"][0]
    assert item["product_service_id"] is None
    assert item["item_description"] == "Widget"
    assert item["rate"] == "50.00"
    assert db_session.query(InvoiceItem).filter(InvoiceItem.product_service_id.is_not(None)).count() == 0
