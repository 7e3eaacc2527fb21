import pytest
from httpx import AsyncClient, ASGITransport

from easy_doctor.api import create_app
from easy_doctor.services import ServiceContainer

from conftest import MINUTE_MS, NOW_MS


@pytest.fixture
def container(mock_auth, mock_documents, storage, clock, settings):
    return ServiceContainer(
        auth=mock_auth,
        documents=mock_documents,
        storage=storage,
        clock=clock,
        settings=settings,
    )


@pytest.fixture
def client(container):
    transport = ASGITransport(app=create_app(container))
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
async def test_health(client):
    async with client as ac:
        resp = await ac.get("/health/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.headers["X-Frame-Options"] == "DENY"


@pytest.mark.asyncio
async def test_login_returns_navigation(client, storage):
    async with client as ac:
        resp = await ac.post("/session/login", json={"email": "a@x.com", "password": "secret"})

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "resumed",
        "message": None,
        "navigation": {
            "specialtyFilter": "Cardiology",
            "profileImage": "https://img.example/amal.png",
            "userName": "Dr. Amal",
        },
    }
    assert storage.snapshot()["doctorEmail"] == "a@x.com"


@pytest.mark.asyncio
async def test_login_validation_error(client, mock_auth):
    async with client as ac:
        resp = await ac.post("/session/login", json={"email": "a@x.com"})

    body = resp.json()
    assert body["status"] == "validation_error"
    assert body["navigation"] is None
    mock_auth.sign_in.assert_not_awaited()


@pytest.mark.asyncio
async def test_login_profile_missing(client):
    async with client as ac:
        resp = await ac.post("/session/login", json={"email": "new@x.com", "password": "secret"})
    assert resp.json()["status"] == "profile_missing"


@pytest.mark.asyncio
async def test_resume(client, storage):
    async with client as ac:
        resp = await ac.post("/session/resume")
        assert resp.json()["status"] == "no_session"

        await storage.set_many({"lastLoginTime": str(NOW_MS - 10 * MINUTE_MS), "doctorEmail": "a@x.com"})
        resp = await ac.post("/session/resume")

    assert resp.json()["status"] == "resumed"
    assert resp.json()["navigation"]["userName"] == "Dr. Amal"


@pytest.mark.asyncio
async def test_list_bookings(client):
    async with client as ac:
        resp = await ac.get("/roster", params={"email": "a@x.com"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["doctor_id"] == "D1"
    assert body["error"] is False
    assert [entry["id"] for entry in body["entries"]] == ["b1", "b2", "b3"]
    assert body["entries"][0]["morningSlot"] == "09:00-10:00"
    assert body["entries"][0]["paymentStatus"] == "paid"


@pytest.mark.asyncio
async def test_list_bookings_unknown_doctor(client):
    async with client as ac:
        resp = await ac.get("/roster", params={"email": "nobody@x.com"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_remove_booking(client):
    async with client as ac:
        first = await ac.delete("/roster/bookings/b2", params={"email": "a@x.com"})
        second = await ac.delete("/roster/bookings/b2", params={"email": "a@x.com"})
        listing = await ac.get("/roster", params={"email": "a@x.com"})

    assert first.status_code == 204
    assert second.status_code == 404
    assert [entry["id"] for entry in listing.json()["entries"]] == ["b1", "b3"]


@pytest.mark.asyncio
async def test_remove_booking_requires_known_doctor(client, mock_documents):
    async with client as ac:
        missing_email = await ac.delete("/roster/bookings/b2")
        unknown = await ac.delete("/roster/bookings/b2", params={"email": "nobody@x.com"})

    assert missing_email.status_code == 422
    assert unknown.status_code == 404
    mock_documents.delete_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_remove_booking_outside_roster(client, mock_documents):
    async with client as ac:
        resp = await ac.delete("/roster/bookings/legacy", params={"email": "a@x.com"})

    assert resp.status_code == 404
    mock_documents.delete_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_call_target(client):
    async with client as ac:
        found = await ac.get("/roster/bookings/b1/call", params={"email": "a@x.com"})
        missing = await ac.get("/roster/bookings/legacy/call", params={"email": "a@x.com"})

    assert found.status_code == 200
    assert found.json()["name"] == "Ali"
    assert found.json()["phone"] == "0590000001"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_ready_requires_firebase_config(client):
    async with client as ac:
        resp = await ac.get("/health/ready")
    assert resp.status_code == 503
    assert resp.json() == {"status": "not_configured"}
