from django.test import Client


def test_liveness():
    response = Client().get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "dealerdesk"}


def test_readiness_checks_database():
    response = Client().get("/readiness")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] is True


def test_startup_reports_migrations():
    response = Client().get("/startup")
    assert response.status_code == 200
    assert response.json()["checks"] == {"database": True, "migrations": True}


def test_openapi_schema_served(admin_client):
    response = admin_client.get("/api/schema/")
    assert response.status_code == 200
