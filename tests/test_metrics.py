from prometheus_client import REGISTRY

from accubooks import metrics


def _value(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_semantic_helpers_increment_counters():
    before = _value("expenses_recorded_total", {"operation": "create"})
    metrics.expense_recorded("create")
    assert _value("expenses_recorded_total", {"operation": "create"}) == before + 1

    before = _value("reports_generated_total", {"report": "dashboard"})
    metrics.report_generated("dashboard")
    assert _value("reports_generated_total", {"report": "dashboard"}) == before + 1


def test_invoice_amount_is_observed():
    count = _value("invoice_amount_inr_count")
    total = _value("invoice_amount_inr_sum")
    metrics.invoice_saved("create", grand_total=236)
    assert _value("invoice_amount_inr_count") == count + 1
    assert _value("invoice_amount_inr_sum") == total + 236
    metrics.invoice_saved("update")
    assert _value("invoice_amount_inr_count") == count + 1


def test_status_change_recorded_by_api(client, auth_headers, company):
    invoice = client.post(
        "/invoices",
        json={
            "customer_name": "Bharat Stores",
            "place_of_supply_type": "Intra-State",
            "items": [{"item_description": "Widget", "quantity": "1", "rate": "10", "gst_rate_percentage": "5"}],
        },
        headers=auth_headers,
    ).json()
    before = _value("invoice_status_changes_total", {"to_status": "Sent"})
    client.patch(f"/invoices/{invoice['id']}/status", json={"status": "Sent"}, headers=auth_headers)
    assert _value("invoice_status_changes_total", {"to_status": "Sent"}) == before + 1


def test_metrics_endpoint(client, auth_headers):
    assert client.get("/metrics").status_code == 401
    resp = client.get("/metrics", headers=auth_headers)
    assert resp.status_code == 200
    assert "invoices_saved_total" in resp.text
