"""Health probes — liveness always up, readiness follows the task store."""


async def test_liveness_returns_healthy(bare_client):
    res = await bare_client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_503_without_store(bare_client):
    res = await bare_client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "store_unavailable"}


async def test_readiness_asks_store_for_list(bare_client, app_state_store, monkeypatch):
    calls = []
    real_list = app_state_store.list

    def spy():
        calls.append(1)
        return real_list()

    monkeypatch.setattr(app_state_store, "list", spy)
    res = await bare_client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert calls == [1]


async def test_readiness_reports_todo_count(bare_client, app_state_store):
    app_state_store.create("Eggs")
    res = await bare_client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ready", "checks": {"store": "healthy"}, "todo_count": 2,
    }
