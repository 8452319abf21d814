"""Company profile and chart of accounts endpoints."""


def test_requires_token(client):
    resp = client.get("/company")
    assert resp.status_code == 401


def test_invalid_token_rejected(client):
    resp = client.get("/company", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


def test_company_profile_required_before_anything_else(client, auth_headers):
    resp = client.get("/company", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "CMP101"

    resp = client.get("/invoices", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "CMP101"


def test_create_profile_seeds_default_accounts(client, auth_headers, company):
    assert company["company_name"] == "Acme Traders"
    assert company["fiscal_year_start_month"] == 4

    resp = client.get("/accounts", headers=auth_headers)
    assert resp.status_code == 200
    accounts = resp.json()
    assert [(a["account_name"], a["account_type"]) for a in accounts] == [
        ("Sales", "Income"),
        ("Purchases/Direct Expenses", "Expense"),
        ("Bank Account", "Asset"),
        ("Cash in Hand", "Asset"),
        ("GST Input Credit", "Asset"),
        ("GST Payable", "Liability"),
    ]
    assert all(a["is_default"] for a in accounts)


def test_second_profile_conflicts(client, auth_headers, company):
    resp = client.post("/company", json={"company_name": "Again"}, headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "CMP102"


def test_gstin_is_validated_and_normalised(client, auth_headers):
    resp = client.post("/company", json={"company_name": "Bad", "gstin": "27AAPFU0939F1XV"}, headers=auth_headers)
    assert resp.status_code == 422

    resp = client.post("/company", json={"company_name": "Good", "gstin": "27aapfu0939f1zv"}, headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["gstin"] == "27AAPFU0939F1ZV"


def test_update_profile(client, auth_headers, company):
    resp = client.patch(
        "/company",
        json={"company_address": "12 MG Road, Pune", "fiscal_year_start_month": 1},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["company_address"] == "12 MG Road, Pune"
    assert body["fiscal_year_start_month"] == 1
    assert body["company_name"] == "Acme Traders"


def test_invalid_fiscal_month_rejected(client, auth_headers, company):
    resp = client.patch("/company", json={"fiscal_year_start_month": 13}, headers=auth_headers)
    assert resp.status_code == 422


def test_default_accounts_cannot_be_changed(client, auth_headers, accounts_by_name):
    sales = accounts_by_name["Sales"]

    resp = client.delete(f"/accounts/{sales['id']}", headers=auth_headers)
    assert resp.status_code == 403
    assert resp.json()["error"]["code"] == "ACC202"

    resp = client.patch(f"/accounts/{sales['id']}", json={"account_name": "Revenue"}, headers=auth_headers)
    assert resp.status_code == 403


def test_custom_account_lifecycle(client, auth_headers, company):
    resp = client.post("/accounts", json={"account_name": "Rent", "account_type": "Expense"}, headers=auth_headers)
    assert resp.status_code == 201
    rent = resp.json()
    assert rent["is_default"] is False

    resp = client.patch(f"/accounts/{rent['id']}", json={"account_name": "Office Rent"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["account_name"] == "Office Rent"

    resp = client.get("/accounts", params={"account_type": "Expense"}, headers=auth_headers)
    assert [a["account_name"] for a in resp.json()] == ["Office Rent", "Purchases/Direct Expenses"]

    resp = client.delete(f"/accounts/{rent['id']}", headers=auth_headers)
    assert resp.status_code == 204


def test_account_in_use_cannot_be_deleted(client, auth_headers, company):
    rent = client.post("/accounts", json={"account_name": "Rent", "account_type": "Expense"}, headers=auth_headers).json()
    expense = client.post(
        "/expenses",
        json={
            "expense_description": "March rent",
            "expense_account_id": rent["id"],
            "amount_before_gst": "15000",
            "expense_date": "2024-03-01",
        },
        headers=auth_headers,
    ).json()

    resp = client.delete(f"/accounts/{rent['id']}", headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "ACC203"

    resp = client.patch(f"/accounts/{rent['id']}", json={"account_type": "Asset"}, headers=auth_headers)
    assert resp.status_code == 409

    client.delete(f"/expenses/{expense['id']}", headers=auth_headers)
    resp = client.delete(f"/accounts/{rent['id']}", headers=auth_headers)
    assert resp.status_code == 204


def test_accounts_are_tenant_scoped(client, accounts_by_name, other_auth_headers):
    other = other_auth_headers
    client.post("/company", json={"company_name": "Other Co"}, headers=other)

    sales_id = accounts_by_name["Sales"]["id"]
    resp = client.delete(f"/accounts/{sales_id}", headers=other)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "ACC201"
    assert len(client.get("/accounts", headers=other).json()) == 6
