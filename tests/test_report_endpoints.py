"""Report endpoints over a small May 2024 ledger."""
import pytest

MAY_2024 = {"year": 2024, "month": 5}


@pytest.fixture
def may_ledger(client, auth_headers, accounts_by_name):
    sent = client.post(
        "/invoices",
        json={
            "customer_name": "Bharat Stores",
            "invoice_number": "INV-100",
            "invoice_date": "2024-05-10",
            "place_of_supply_type": "Intra-State",
            "items": [{"item_description": "Widget", "quantity": "5", "rate": "100", "gst_rate_percentage": "18"}],
        },
        headers=auth_headers,
    ).json()
    client.patch(f"/invoices/{sent['id']}/status", json={"status": "Sent"}, headers=auth_headers)

    client.post(
        "/invoices",
        json={
            "customer_name": "Draft Customer",
            "invoice_number": "INV-101",
            "invoice_date": "2024-05-12",
            "place_of_supply_type": "Inter-State",
            "items": [{"item_description": "Big order", "quantity": "1", "rate": "9999", "gst_rate_percentage": "28"}],
        },
        headers=auth_headers,
    )

    # Outside the period
    client.post(
        "/invoices",
        json={
            "customer_name": "April Customer",
            "invoice_number": "INV-099",
            "invoice_date": "2024-04-30",
            "place_of_supply_type": "Intra-State",
            "items": [{"item_description": "Old", "quantity": "1", "rate": "700", "gst_rate_percentage": "5"}],
        },
        headers=auth_headers,
    )

    resp = client.post(
        "/expenses",
        json={
            "expense_date": "2024-05-20",
            "expense_description": "Packaging",
            "expense_account_id": accounts_by_name["Purchases/Direct Expenses"]["id"],
            "amount_before_gst": "400",
            "gst_rate_applied_on_purchase": "10",
            "place_of_supply_type_for_purchase": "Intra-State",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text


def test_profit_and_loss(client, auth_headers, may_ledger):
    resp = client.get("/reports/profit-loss", params=MAY_2024, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    report = resp.json()

    assert report["total_sales"] == "500.00"
    assert report["total_expenses"] == "400.00"
    assert report["net_profit"] == "100.00"
    assert report["result"] == "profit"
    assert [(row["account_name"], row["amount"]) for row in report["expenses_by_account"]] == [
        ("Purchases/Direct Expenses", "400.00"),
    ]
    assert report["period"]["start_date"] == "2024-05-01"
    assert report["period"]["end_date"] == "2024-05-31"
    assert report["period"]["previous_period"] == {"start_date": "2024-04-01", "end_date": "2024-04-30"}
    assert report["period"]["next_period"] == {"start_date": "2024-06-01", "end_date": "2024-06-30"}


def test_gst_summary(client, auth_headers, may_ledger):
    report = client.get("/reports/gst-summary", params=MAY_2024, headers=auth_headers).json()

    assert report["sales"] == {"taxable_value": "500.00", "cgst": "45.00", "sgst": "45.00", "igst": "0.00"}
    assert report["purchases"] == {"taxable_value": "400.00", "cgst": "20.00", "sgst": "20.00", "igst": "0.00"}
    assert report["net_payable"]["cgst"] == {"amount": "25.00", "status": "payable"}
    assert report["net_payable"]["igst"] == {"amount": "0.00", "status": "nil"}
    assert report["net_payable"]["total"] == {"amount": "50.00", "status": "payable"}
    assert report["invoice_count"] == 1
    assert report["expense_count"] == 1


def test_dashboard(client, auth_headers, may_ledger):
    report = client.get("/reports/dashboard", params=MAY_2024, headers=auth_headers).json()

    assert report["total_sales"] == "590.00"
    assert report["total_expenses"] == "440.00"
    assert report["net"] == "150.00"
    assert report["invoice_count"] == 2
    assert report["invoice_status_counts"] == {"Draft": 1, "Sent": 1, "Paid": 0, "Overdue": 0}
    assert report["expense_count"] == 1


def test_reports_are_deterministic(client, auth_headers, may_ledger):
    for path in ("/reports/profit-loss", "/reports/gst-summary", "/reports/dashboard"):
        first = client.get(path, params=MAY_2024, headers=auth_headers)
        second = client.get(path, params=MAY_2024, headers=auth_headers)
        assert first.text == second.text


def test_custom_range_and_fiscal_year(client, auth_headers, may_ledger):
    resp = client.get(
        "/reports/profit-loss",
        params={"period_type": "custom", "start_date": "2024-04-01", "end_date": "2024-05-31"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    # The April invoice is still a draft
    assert resp.json()["total_sales"] == "500.00"
    assert resp.json()["period"]["previous_period"] == {"start_date": "2024-02-01", "end_date": "2024-03-31"}

    resp = client.get(
        "/reports/profit-loss",
        params={"period_type": "fiscal_year", "year": 2024},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    period = resp.json()["period"]
    assert (period["start_date"], period["end_date"]) == ("2024-04-01", "2025-03-31")
    assert period["next_period"] == {"start_date": "2025-04-01", "end_date": "2026-03-31"}


def test_invalid_periods(client, auth_headers, company):
    resp = client.get(
        "/reports/gst-summary",
        params={"period_type": "custom", "start_date": "2024-06-01", "end_date": "2024-05-01"},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "RPT601"

    resp = client.get("/reports/gst-summary", params={"period_type": "custom"}, headers=auth_headers)
    assert resp.json()["error"]["code"] == "RPT601"

    resp = client.get("/reports/gst-summary", params={"month": 5}, headers=auth_headers)
    assert resp.json()["error"]["code"] == "RPT601"

    assert client.get("/reports/gst-summary", params={"year": 2024, "month": 13}, headers=auth_headers).status_code == 422
    assert client.get("/reports/dashboard", params={"period_type": "weekly"}, headers=auth_headers).status_code == 422


def test_reports_need_a_company(client, auth_headers):
    resp = client.get("/reports/dashboard", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "CMP101"


def test_empty_period_reports_zeroes(client, auth_headers, company):
    report = client.get("/reports/profit-loss", params={"year": 2023, "month": 2}, headers=auth_headers).json()
    assert report["total_sales"] == "0.00"
    assert report["net_profit"] == "0.00"
    assert report["result"] == "break_even"
    assert all(row["amount"] == "0.00" for row in report["expenses_by_account"])
    assert report["period"]["end_date"] == "2023-02-28"


def test_reports_at_the_edges_of_the_calendar(client, auth_headers, company):
    resp = client.get("/reports/gst-summary", params={"year": 1, "month": 1}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    period = resp.json()["period"]
    assert period["previous_period"] is None
    assert period["next_period"] == {"start_date": "0001-02-01", "end_date": "0001-02-28"}

    resp = client.get(
        "/reports/profit-loss",
        params={"period_type": "fiscal_year", "year": 9998},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    period = resp.json()["period"]
    assert (period["start_date"], period["end_date"]) == ("9998-04-01", "9999-03-31")
    assert period["next_period"] is None

    resp = client.get(
        "/reports/dashboard",
        params={"period_type": "custom", "start_date": "9999-12-01", "end_date": "9999-12-31"},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["period"]["next_period"] is None
