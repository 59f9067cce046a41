"""
Route tests for the dog registry, feedings and dashboard with mocked services.

These check the HTTP contract only: status codes, response shapes and the
error envelope. Service behaviour is covered in test_services.py.
"""

import uuid
from datetime import date, datetime, timezone

from test_fixtures import client, make_dog, make_feeding
from services import DogService, FeedingService, HistoryService
from domain.schemas.dog_schemas import DogWithFeedings
from domain.schemas.feeding_schemas import FeedingHistoryResponse, HistoryDay, HistoryFeeding
from app.exceptions import NotFoundError, PersistenceError, ServiceValidationError


EXAMPLE_FLOW = """
Feeding Tracker Flow
======================================

1. REGISTER A DOG
   POST /dogs?user_id=<uuid>
   {"name": "Biscuit", "photo_url": null}
   -> 201 {"id": ..., "name": "Biscuit", "created_at": ..., "user_id": ...}

2. LOG A FEEDING (wall-clock time in the caller's timezone)
   POST /dogs/<dog_id>/feedings?user_id=<uuid>&tz=America/New_York
   {"timestamp": "2026-10-19T09:00"}
   -> 201 {"id": ..., "timestamp": "2026-10-19T13:00:00Z", ...}

3. DASHBOARD
   GET /dashboard?user_id=<uuid>&tz=America/New_York
   -> 200 [{"name": "Biscuit", "todays_feedings": 1, ...}]

4. HISTORY
   GET /dogs/<dog_id>/history?user_id=<uuid>&tz=America/New_York
   -> 200 {"days": [{"date": "2026-10-19", "feeding_count": 1, ...}]}

5. DELETE (also removes every feeding of the dog)
   DELETE /dogs/<dog_id>?user_id=<uuid>&confirm=true
   -> 204
"""


# =============================================================================
# DOG ROUTES
# =============================================================================


def test_create_dog_success(monkeypatch):
    user_id = uuid.uuid4()
    dog = make_dog(user_id=user_id, profile_type="with_photo")

    def fake_create_dog(db, uid, name, photo_url=None):
        assert uid == user_id
        assert name == "Luna"
        return dog

    monkeypatch.setattr(DogService, "create_dog", fake_create_dog)

    r = client.post(
        f"/dogs?user_id={user_id}",
        json={"name": "Luna", "photo_url": dog.photo_url},
    )

    assert r.status_code == 201
    body = r.json()
    assert body["id"] == str(dog.id)
    assert body["name"] == "Luna"
    assert body["photo_url"] == dog.photo_url
    assert body["user_id"] == str(user_id)


def test_create_dog_blank_name_returns_400(monkeypatch):
    def fake_create_dog(db, uid, name, photo_url=None):
        raise ServiceValidationError("Dog name is required", code="NAME_REQUIRED")

    monkeypatch.setattr(DogService, "create_dog", fake_create_dog)

    r = client.post(f"/dogs?user_id={uuid.uuid4()}", json={"name": "   "})

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NAME_REQUIRED"
    assert body["error"]["message"] == "Dog name is required"


def test_create_dog_missing_user_id_returns_422():
    r = client.post("/dogs", json={"name": "Biscuit"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_dog_persistence_failure_returns_503(monkeypatch):
    def fake_create_dog(db, uid, name, photo_url=None):
        raise PersistenceError("Could not save record", code="PERSISTENCE_ERROR")

    monkeypatch.setattr(DogService, "create_dog", fake_create_dog)

    r = client.post(f"/dogs?user_id={uuid.uuid4()}", json={"name": "Biscuit"})

    assert r.status_code == 503
    assert r.json()["error"]["code"] == "PERSISTENCE_ERROR"


def test_list_dogs(monkeypatch):
    user_id = uuid.uuid4()
    dogs = [make_dog(user_id=user_id), make_dog(user_id=user_id, profile_type="senior")]
    monkeypatch.setattr(DogService, "list_dogs", lambda db, uid: dogs)

    r = client.get(f"/dogs?user_id={user_id}")

    assert r.status_code == 200
    assert [d["name"] for d in r.json()] == ["Biscuit", "Captain"]


def test_get_dog_not_found(monkeypatch):
    def fake_get_dog(db, uid, dog_id):
        raise NotFoundError(f"Dog {dog_id} not found", code="DOG_NOT_FOUND")

    monkeypatch.setattr(DogService, "get_dog", fake_get_dog)

    r = client.get(f"/dogs/{uuid.uuid4()}?user_id={uuid.uuid4()}")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "DOG_NOT_FOUND"


def test_delete_dog_passes_confirmation(monkeypatch):
    calls = []

    def fake_delete_dog(db, uid, dog_id, confirmed=False):
        calls.append(confirmed)
        return 1

    monkeypatch.setattr(DogService, "delete_dog", fake_delete_dog)
    dog_id, user_id = uuid.uuid4(), uuid.uuid4()

    r = client.delete(f"/dogs/{dog_id}?user_id={user_id}&confirm=true")

    assert r.status_code == 204
    assert r.content == b""
    assert calls == [True]


# =============================================================================
# FEEDING ROUTES
# =============================================================================


def test_log_feeding_success(monkeypatch):
    user_id, dog_id = uuid.uuid4(), uuid.uuid4()
    feeding = make_feeding(
        dog_id=dog_id,
        user_id=user_id,
        timestamp=datetime(2026, 10, 19, 13, 0, tzinfo=timezone.utc),
    )
    received = {}

    def fake_log_feeding(db, uid, did, timestamp=None, tz_name=None, default_to_now=False, now=None):
        received.update(timestamp=timestamp, tz_name=tz_name, default_to_now=default_to_now)
        return feeding

    monkeypatch.setattr(FeedingService, "log_feeding", fake_log_feeding)

    r = client.post(
        f"/dogs/{dog_id}/feedings?user_id={user_id}&tz=America/New_York",
        json={"timestamp": "2026-10-19T09:00"},
    )

    assert r.status_code == 201
    assert r.json()["id"] == str(feeding.id)
    assert received["timestamp"] == datetime(2026, 10, 19, 9, 0)
    assert received["tz_name"] == "America/New_York"
    assert received["default_to_now"] is False


def test_log_feeding_missing_timestamp_returns_400(monkeypatch):
    def fake_log_feeding(db, uid, did, timestamp=None, tz_name=None, default_to_now=False, now=None):
        raise ServiceValidationError("Feeding time is required", code="TIMESTAMP_REQUIRED")

    monkeypatch.setattr(FeedingService, "log_feeding", fake_log_feeding)

    r = client.post(f"/dogs/{uuid.uuid4()}/feedings?user_id={uuid.uuid4()}", json={})

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "TIMESTAMP_REQUIRED"


def test_history_response_shape(monkeypatch):
    user_id, dog_id = uuid.uuid4(), uuid.uuid4()
    stamp = datetime(2026, 10, 19, 13, 0, tzinfo=timezone.utc)
    history = FeedingHistoryResponse(
        dog_id=dog_id,
        dog_name="Biscuit",
        dog_created_at=stamp,
        timezone="America/New_York",
        total_feedings=1,
        days=[
            HistoryDay(
                date=date(2026, 10, 19),
                feeding_count=1,
                feedings=[
                    HistoryFeeding(
                        id=uuid.uuid4(),
                        timestamp=stamp,
                        local_timestamp=stamp,
                        time_label="09:00",
                    )
                ],
            )
        ],
    )
    monkeypatch.setattr(HistoryService, "build_history", lambda db, uid, did, tz: history)

    r = client.get(f"/dogs/{dog_id}/history?user_id={user_id}&tz=America/New_York")

    assert r.status_code == 200
    body = r.json()
    assert body["total_feedings"] == 1
    assert body["days"][0]["date"] == "2026-10-19"
    assert body["days"][0]["feedings"][0]["time_label"] == "09:00"


def test_dashboard_route(monkeypatch):
    user_id = uuid.uuid4()
    dog = make_dog(user_id=user_id)

    async def fake_dashboard(session_factory, uid, now=None, tz_name=None):
        return [
            DogWithFeedings(
                id=dog.id,
                name=dog.name,
                photo_url=None,
                created_at=dog.created_at,
                user_id=uid,
                todays_feedings=2,
            )
        ]

    monkeypatch.setattr(FeedingService, "dashboard", fake_dashboard)

    r = client.get(f"/dashboard?user_id={user_id}")

    assert r.status_code == 200
    assert r.json()[0]["todays_feedings"] == 2


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
