"""HTTP tests for the /questions endpoints against an in-memory database."""
import pytest

from api.features.conversation.repositories.reply_repository import ReplyRepository
from api.shared.entities.registry import BaseEntity


async def _create_question(client, content: str) -> dict:
    r = await client.post("/questions", json={"content": content})
    assert r.status_code == 201
    return r.json()


@pytest.mark.asyncio
async def test_question_reply_scenario(client):
    r = await client.post("/questions", json={"content": "What is Rust?"})
    assert r.status_code == 201
    assert r.json() == {"id": 1, "content": "What is Rust?"}

    r = await client.post("/questions/1/reply", json={"content": "A systems language."})
    assert r.status_code == 201
    assert r.json() == {"id": 1, "content": "A systems language."}

    r = await client.get("/questions/1")
    assert r.status_code == 200
    assert r.json() == {
        "id": 1,
        "content": "What is Rust?",
        "replies": [{"id": 1, "content": "A systems language."}],
    }


@pytest.mark.asyncio
async def test_created_question_has_no_replies(client):
    created = await _create_question(client, "Tabs or spaces?")

    r = await client.get(f"/questions/{created['id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["content"] == "Tabs or spaces?"
    assert body["replies"] == []


@pytest.mark.asyncio
async def test_replies_are_returned_in_creation_order(client):
    first = await _create_question(client, "First")
    second = await _create_question(client, "Second")

    for text in ["a", "b", "c"]:
        r = await client.post(f"/questions/{first['id']}/reply", json={"content": text})
        assert r.status_code == 201
    r = await client.post(f"/questions/{second['id']}/reply", json={"content": "other"})
    assert r.status_code == 201

    r = await client.get(f"/questions/{first['id']}")
    assert [reply["content"] for reply in r.json()["replies"]] == ["a", "b", "c"]

    r = await client.get(f"/questions/{second['id']}")
    assert [reply["content"] for reply in r.json()["replies"]] == ["other"]


@pytest.mark.asyncio
async def test_list_questions_tracks_creates_only(client):
    r = await client.get("/questions")
    assert r.status_code == 200
    assert r.json() == []

    for n in range(3):
        await _create_question(client, f"question {n}")
        r = await client.get("/questions")
        assert len(r.json()) == n + 1

    await client.get("/questions/1")
    r = await client.get("/questions")
    assert r.json() == [
        {"id": 1, "content": "question 0"},
        {"id": 2, "content": "question 1"},
        {"id": 3, "content": "question 2"},
    ]


@pytest.mark.asyncio
async def test_duplicate_creates_produce_distinct_records(client):
    a = await _create_question(client, "same")
    b = await _create_question(client, "same")
    assert a["id"] != b["id"]


@pytest.mark.asyncio
async def test_get_unknown_question_is_bad_request(client):
    r = await client.get("/questions/42")
    assert r.status_code == 400
    assert r.json() == {"detail": "Record not found"}


@pytest.mark.asyncio
async def test_reply_to_unknown_question_is_bad_request(client, db_session):
    r = await client.post("/questions/7/reply", json={"content": "orphan"})
    assert r.status_code == 400
    assert r.json() == {"detail": "Record not found"}

    assert await ReplyRepository(db_session).count() == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("question_id", [2**63, -(2**63) - 1, 10**30])
async def test_get_id_beyond_column_range_is_bad_request(client, question_id):
    r = await client.get(f"/questions/{question_id}")
    assert r.status_code == 400
    assert r.json() == {"detail": "Record not found"}


@pytest.mark.asyncio
async def test_reply_to_id_beyond_column_range_is_bad_request(client, db_session):
    await _create_question(client, "in range")

    r = await client.post(f"/questions/{2**63}/reply", json={"content": "orphan"})
    assert r.status_code == 400
    assert r.json() == {"detail": "Record not found"}

    assert await ReplyRepository(db_session).count() == 0


@pytest.mark.asyncio
async def test_non_integer_id_is_rejected(client):
    r = await client.get("/questions/abc")
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_message_without_content_is_rejected(client):
    r = await client.post("/questions", json={})
    assert r.status_code == 422
    assert r.json()["error"] == "Validation Error"


@pytest.mark.asyncio
async def test_storage_fault_on_read_is_internal_error(client, database):
    await database.drop_schema(BaseEntity)

    r = await client.get("/questions")
    assert r.status_code == 500
    assert "question" not in r.text.lower()

    r = await client.get("/questions/1")
    assert r.status_code == 500


@pytest.mark.asyncio
async def test_storage_fault_on_create_is_internal_error(client, database):
    await database.drop_schema(BaseEntity)

    r = await client.post("/questions", json={"content": "lost"})
    assert r.status_code == 500
    assert r.json() == {"detail": "Failed to create record"}


@pytest.mark.asyncio
async def test_unknown_route_uses_not_found_envelope(client):
    r = await client.get("/nope")
    assert r.status_code == 404
    assert r.json()["error"] == "Not Found"


@pytest.mark.asyncio
async def test_health_and_ready(client, database):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

    r = await client.get("/ready")
    assert r.status_code == 200
    assert r.json()["dependencies"] == {"database": "ok"}

    await database.shutdown()
    r = await client.get("/ready")
    assert r.status_code == 503
    assert r.json()["status"] == "unavailable"
