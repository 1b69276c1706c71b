import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from reading_service.api import reading
from reading_service.core.exceptions import setup_exception_handlers
from reading_service.services.reading.service import ReadingService

HEADERS = {"X-User-Id": "user-1"}


@pytest.fixture
def reading_service(store, full_corpus, mapper) -> ReadingService:
    return ReadingService(store, full_corpus, mapper=mapper)


@pytest.fixture
def client(reading_service: ReadingService):
    app = FastAPI()
    setup_exception_handlers(app)
    app.include_router(reading.router, prefix="/api/reading")
    app.state.reading_service = reading_service
    with TestClient(app) as test_client:
        yield test_client


def test_state_requires_user_header(client: TestClient) -> None:
    response = client.get("/api/reading/state")

    assert response.status_code == 422


def test_get_state(client: TestClient) -> None:
    response = client.get("/api/reading/state", headers=HEADERS)

    assert response.status_code == 200
    body = response.json()
    assert body["userId"] == "user-1"
    assert body["position"]["verseId"] == "1:1"
    assert body["navigation"]["isFirst"] is True


def test_next_moves_forward(client: TestClient) -> None:
    response = client.post("/api/reading/next", headers=HEADERS)

    assert response.status_code == 200
    assert response.json()["committed"] is True
    assert response.json()["position"]["verseId"] == "1:2"


def test_previous_at_start_is_not_committed(client: TestClient) -> None:
    response = client.post("/api/reading/previous", headers=HEADERS)

    assert response.status_code == 200
    assert response.json()["committed"] is False


def test_jump_to_last_verse(client: TestClient) -> None:
    response = client.post("/api/reading/jump", json={"index": 6235}, headers=HEADERS)

    assert response.status_code == 200
    body = response.json()
    assert body["position"]["verseId"] == "114:6"
    assert body["position"]["partNumber"] == 30
    assert body["navigation"]["isLast"] is True


def test_jump_out_of_range_returns_400(client: TestClient) -> None:
    response = client.post("/api/reading/jump", json={"index": 6236}, headers=HEADERS)

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "reading.jump_invalid"
    assert error["user_id"] == "user-1"


def test_reset_without_confirmation_returns_400(client: TestClient) -> None:
    response = client.post("/api/reading/reset", json={}, headers=HEADERS)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "reading.reset_unconfirmed"


def test_reset_with_confirmation(client: TestClient) -> None:
    response = client.post("/api/reading/reset", json={"confirm": True}, headers=HEADERS)

    assert response.status_code == 200
    assert response.json()["position"]["globalIndex"] == 0


def test_mark_read_and_progress(client: TestClient) -> None:
    marked = client.post("/api/reading/mark_read", headers=HEADERS)
    assert marked.status_code == 200
    assert marked.json()["isRead"] is True

    progress = client.get("/api/reading/progress", headers=HEADERS)
    assert progress.status_code == 200
    body = progress.json()
    assert body["readVerses"] == 1
    assert body["totalVerses"] == 6236


def test_daily_verse_flow(client: TestClient) -> None:
    daily = client.get("/api/reading/daily", headers=HEADERS)
    assert daily.status_code == 200
    assert daily.json()["position"]["verseId"] == "1:1"
    assert daily.json()["isRead"] is False

    marked = client.post("/api/reading/daily/mark_read", headers=HEADERS)
    assert marked.status_code == 200
    assert marked.json()["isRead"] is True
    assert marked.json()["readAt"] is not None


def test_part_listing(client: TestClient) -> None:
    response = client.get("/api/reading/parts/30")

    assert response.status_code == 200
    body = response.json()
    assert body["partNumber"] == 30
    assert body["totalVerses"] == 564
    assert body["verses"][0]["verseId"] == "78:1"


def test_unknown_part_returns_404(client: TestClient) -> None:
    response = client.get("/api/reading/parts/31")

    assert response.status_code == 404
