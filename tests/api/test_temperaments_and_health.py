from breedhub.services.errors import UpstreamError


def test_temperaments_seeded_on_first_request(client, breed_source):
    first = client.get("/temperaments")
    assert first.status_code == 200
    names = [item["name"] for item in first.json()]
    assert names == sorted(names)
    assert {"Aloof", "Curious", "Outgoing"} <= set(names)

    second = client.get("/temperaments")
    assert second.json() == first.json()
    assert breed_source.calls == 1


def test_temperaments_upstream_failure(client, breed_source):
    breed_source.error = UpstreamError("API request failed with status 403", status_code=403)
    response = client.get("/temperaments")
    assert response.status_code == 502
    assert response.json()["upstream_status"] == 403


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_details_reports_cache_state(client):
    before = client.get("/health/details").json()
    assert before["database_ok"] is True
    assert before["temperament_cache_populated"] is False
    assert before["dog_count"] == 0

    client.get("/temperaments")
    after = client.get("/health/details").json()
    assert after["temperament_cache_populated"] is True
    assert after["temperament_count"] > 0


def test_meta(client):
    body = client.get("/meta").json()
    assert body["service"] == "breedhub"
