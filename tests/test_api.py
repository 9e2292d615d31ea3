from expense_tracker.core.exceptions import StorageError


def add_income(client, headers, amount, day, source="Salary"):
    response = client.post("/api/incomes/", json={"amount": amount, "source": source, "date": day}, headers=headers)
    assert response.status_code == 201
    return response.json()


def add_expense(client, headers, amount, category, day, description="Spend"):
    response = client.post(
        "/api/expenses/",
        json={"amount": amount, "category": category, "description": description, "date": day},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Welcome to SmartExpenseTracker API"}
    health = client.get("/api/health").json()
    assert health["status"] == "healthy"
    assert health["storage"] == "memory"


def test_categories_are_listed_in_order(client):
    categories = client.get("/api/categories").json()
    assert [item["category"] for item in categories] == ["food", "travel", "shopping", "bills", "other"]
    assert categories[0]["label"] == "Food & Dining"


def test_user_id_header_is_required(client):
    response = client.get("/api/incomes/")
    assert response.status_code == 401


def test_income_lifecycle(client, auth_headers):
    income = add_income(client, auth_headers, 500, "2024-01-05")
    assert income["amount"] == 500
    assert income["user_id"] == "user-1"

    response = client.put(
        f"/api/incomes/{income['id']}",
        json={"amount": 650.5, "source": "Salary", "date": "2024-01-06"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["amount"] == 650.5

    assert client.delete(f"/api/incomes/{income['id']}", headers=auth_headers).status_code == 204
    assert client.get("/api/incomes/", headers=auth_headers).json() == []
    assert client.delete(f"/api/incomes/{income['id']}", headers=auth_headers).status_code == 404


def test_invalid_expenses_are_rejected(client, auth_headers):
    payload = {"amount": 10, "category": "gadgets", "description": "Phone", "date": "2024-01-05"}
    assert client.post("/api/expenses/", json=payload, headers=auth_headers).status_code == 422
    payload.update(category="food", amount=-3)
    assert client.post("/api/expenses/", json=payload, headers=auth_headers).status_code == 422
    payload.update(amount=3, description="")
    assert client.post("/api/expenses/", json=payload, headers=auth_headers).status_code == 422


def test_update_unknown_expense_is_not_found(client, auth_headers):
    response = client.put(
        "/api/expenses/missing",
        json={"amount": 10, "category": "food", "description": "Lunch", "date": "2024-01-05"},
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_monthly_analytics(client, auth_headers):
    add_income(client, auth_headers, 500, "2024-01-05")
    add_expense(client, auth_headers, 300, "food", "2024-01-10")
    add_expense(client, auth_headers, 100, "travel", "2024-01-20")
    add_expense(client, auth_headers, 40, "bills", "2024-02-01")

    analytics = client.get("/api/analytics/monthly/2024-01", headers=auth_headers).json()
    assert analytics == {
        "month": "January",
        "year": 2024,
        "total_income": 500,
        "total_expenses": 400,
        "savings": 100,
        "category_breakdown": {"food": 300, "travel": 100, "shopping": 0, "bills": 0, "other": 0},
    }


def test_analytics_are_per_user(client, auth_headers):
    add_income(client, auth_headers, 500, "2024-01-05")
    analytics = client.get("/api/analytics/monthly/2024-01", headers={"X-User-Id": "user-2"}).json()
    assert analytics["total_income"] == 0


def test_malformed_month_is_bad_request(client, auth_headers):
    assert client.get("/api/analytics/monthly/2024-13", headers=auth_headers).status_code == 400
    assert client.get("/api/analytics/tips?month=Jan", headers=auth_headers).status_code == 400


def test_trend_is_oldest_first(client, auth_headers):
    add_income(client, auth_headers, 100, "2023-12-15")
    add_income(client, auth_headers, 200, "2024-02-15")
    trend = client.get("/api/analytics/trend?months=3&until=2024-02", headers=auth_headers).json()
    assert [(item["month"], item["year"], item["total_income"]) for item in trend] == [
        ("December", 2023, 100),
        ("January", 2024, 0),
        ("February", 2024, 200),
    ]


def test_tips_for_month(client, auth_headers):
    add_income(client, auth_headers, 1000, "2024-03-01")
    add_expense(client, auth_headers, 1200, "food", "2024-03-02")
    tips = client.get("/api/analytics/tips?month=2024-03", headers=auth_headers).json()
    assert [tip["id"] for tip in tips] == ["overspending", "food-high", "suggested-savings"]
    assert tips[0]["kind"] == "warning"


def test_tips_for_empty_month(client, auth_headers):
    assert client.get("/api/analytics/tips?month=2024-04", headers=auth_headers).json() == []


def test_recent_transactions_newest_first(client, auth_headers):
    add_income(client, auth_headers, 500, "2024-01-05")
    add_expense(client, auth_headers, 20, "other", "2024-01-09", description="Gift")
    add_expense(client, auth_headers, 30, "food", "2024-01-01", description="Groceries")

    everything = client.get("/api/transactions/", headers=auth_headers).json()
    assert [(item["type"], item["date"]) for item in everything] == [
        ("expense", "2024-01-09"),
        ("income", "2024-01-05"),
        ("expense", "2024-01-01"),
    ]

    only_expenses = client.get("/api/transactions/?type=expense&limit=1", headers=auth_headers).json()
    assert len(only_expenses) == 1
    assert only_expenses[0]["description"] == "Gift"


def test_storage_failure_is_server_error(client, store, auth_headers, monkeypatch):
    def unavailable(user_id):
        raise StorageError("query failed")

    monkeypatch.setattr(store, "list_incomes", unavailable)
    response = client.get("/api/incomes/", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage backend unavailable"}
