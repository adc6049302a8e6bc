from tests.conftest import UnreachableModelClient


def test_ai_limit_comes_from_app_settings(make_client):
    client = make_client(UnreachableModelClient(), rate_limit_enabled=True, ai_rate_limit="1/minute")

    statuses = [
        client.post("/api/validate-goal-input", json={"userGoal": "xy"}).status_code
        for _ in range(3)
    ]

    assert statuses == [400, 429, 429]


def test_disabled_in_settings_means_no_limit(make_client):
    client = make_client(UnreachableModelClient(), rate_limit_enabled=False, ai_rate_limit="1/minute")

    statuses = [
        client.post("/api/validate-goal-input", json={"userGoal": "xy"}).status_code
        for _ in range(3)
    ]

    assert statuses == [400, 400, 400]
    assert client.app.state.limiter.enabled is False


def test_new_app_starts_with_fresh_counts(make_client):
    first = make_client(UnreachableModelClient(), rate_limit_enabled=True, ai_rate_limit="1/minute")
    first.post("/api/validate-goal-input", json={"userGoal": "xy"})

    second = make_client(UnreachableModelClient(), rate_limit_enabled=True, ai_rate_limit="1/minute")

    assert second.post("/api/validate-goal-input", json={"userGoal": "xy"}).status_code == 400
