"""
Health probes, API info and request id propagation.
"""


class TestHealth:

    async def test_basic_health(self, async_client):
        response = await async_client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "sportclub-api"

    async def test_liveness(self, async_client):
        response = await async_client.get("/api/v1/health/live")

        assert response.status_code == 200
        assert response.text == "OK"

    async def test_readiness_reports_database_and_cache(self, async_client):
        await async_client.get("/api/v1/sports")

        response = await async_client.get("/api/v1/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["components"]["database"]["status"] == "healthy"
        assert body["components"]["sports_cache"]["sets"] == 1


class TestApiInfo:

    async def test_v1_info(self, async_client):
        body = (await async_client.get("/api/v1/")).json()

        assert body["api_version"] == "v1"
        assert body["routes"]["members"] == "/api/v1/members"

    async def test_root(self, async_client):
        body = (await async_client.get("/")).json()

        assert body["api_base"] == "/api/v1"


class TestRequestId:

    async def test_incoming_request_id_is_echoed(self, async_client):
        response = await async_client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
        assert "X-Response-Time" in response.headers

    async def test_request_id_is_generated(self, async_client):
        response = await async_client.get("/api/v1/sports")

        assert response.headers["X-Request-ID"]
