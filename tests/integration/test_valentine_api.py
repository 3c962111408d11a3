"""End-to-end tests for the valentine routes against an in-memory database."""

import pytest


@pytest.mark.asyncio
async def test_create_then_fetch_valentine(client):
    response = await client.post(
        "/api/valentine", json={"trackingId": "AB12cd34", "senderName": "<b>Sam</b>"}
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "trackingId": "AB12cd34"}

    response = await client.get("/api/valentine/AB12cd34")
    assert response.status_code == 200
    data = response.json()
    assert data["senderName"] == "bSam/b"
    assert data["views"] == 0
    assert data["yesClicked"] is False
    assert data["yesClickedAt"] is None
    assert isinstance(data["createdAt"], int)
    assert set(data) == {"senderName", "createdAt", "views", "yesClicked", "yesClickedAt"}


@pytest.mark.asyncio
async def test_second_create_keeps_first_sender(client):
    await client.post("/api/valentine", json={"trackingId": "dup00001", "senderName": "First"})
    response = await client.post(
        "/api/valentine", json={"trackingId": "dup00001", "senderName": "Second"}
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "trackingId": "dup00001"}

    data = (await client.get("/api/valentine/dup00001")).json()
    assert data["senderName"] == "First"


@pytest.mark.asyncio
async def test_create_valentine_missing_fields_is_400(client):
    response = await client.post("/api/valentine", json={"trackingId": "abc"})
    assert response.status_code == 400
    assert response.json() == {"error": "trackingId and senderName are required"}


@pytest.mark.asyncio
async def test_views_and_yes_accumulate(client):
    await client.post("/api/valentine", json={"trackingId": "count001", "senderName": "Sam"})

    for i in range(4):
        response = await client.post("/api/valentine/count001/view")
        assert response.json() == {"success": True}
        if i == 1:
            await client.post("/api/valentine/count001/yes")

    data = (await client.get("/api/valentine/count001")).json()
    assert data["views"] == 4
    assert data["yesClicked"] is True
    assert isinstance(data["yesClickedAt"], int)


@pytest.mark.asyncio
async def test_repeated_yes_moves_timestamp_forward(client, monkeypatch):
    clock = iter([1_000, 5_000])
    monkeypatch.setattr(
        "valentine_api.application.services.valentine_service.now_ms", lambda: next(clock)
    )
    await client.post("/api/valentine", json={"trackingId": "yes00001", "senderName": "Sam"})

    await client.post("/api/valentine/yes00001/yes")
    await client.post("/api/valentine/yes00001/yes")

    data = (await client.get("/api/valentine/yes00001")).json()
    assert data["yesClicked"] is True
    assert data["yesClickedAt"] == 5_000


@pytest.mark.asyncio
async def test_unknown_valentine_is_404(client):
    response = await client.get("/api/valentine/doesnotexist")
    assert response.status_code == 404
    assert response.json() == {"error": "Valentine not found"}


@pytest.mark.asyncio
async def test_writes_to_unknown_valentine_report_success(client):
    for path in ("/api/valentine/ghost001/view", "/api/valentine/ghost001/yes"):
        response = await client.post(path)
        assert response.status_code == 200
        assert response.json() == {"success": True}

    assert (await client.get("/api/valentine/ghost001")).status_code == 404


@pytest.mark.asyncio
async def test_path_id_is_sanitized(client):
    await client.post("/api/valentine", json={"trackingId": "abc", "senderName": "Sam"})

    response = await client.get("/api/valentine/a'b&c")
    assert response.status_code == 200
    assert response.json()["senderName"] == "Sam"


@pytest.mark.asyncio
async def test_path_id_keeps_percent_escapes(client):
    await client.post("/api/valentine", json={"trackingId": "AB%26cd", "senderName": "Sam"})
    await client.post("/api/valentine", json={"trackingId": "ABcd", "senderName": "Alex"})

    response = await client.get("/api/valentine/AB%26cd")
    assert response.status_code == 200
    assert response.json()["senderName"] == "Sam"


@pytest.mark.asyncio
async def test_plain_text_json_body_is_accepted(client):
    response = await client.post(
        "/api/valentine",
        content=b'{"trackingId":"tp000001","senderName":"Sam"}',
        headers={"Content-Type": "text/plain;charset=UTF-8"},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "trackingId": "tp000001"}

    assert (await client.get("/api/valentine/tp000001")).status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"[]", b'"hello"', b"42", b"true"])
async def test_non_object_body_is_missing_fields(client, body):
    response = await client.post(
        "/api/valentine", content=body, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "trackingId and senderName are required"}


@pytest.mark.asyncio
async def test_head_is_not_routed(client):
    await client.post("/api/valentine", json={"trackingId": "head0001", "senderName": "Sam"})

    response = await client.head("/api/valentine/head0001")
    assert response.status_code == 404
