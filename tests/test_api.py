from fastapi.testclient import TestClient

from tests.conftest import admin_headers, anonymous_headers


def _game_payload(title: str, categories: list[str]) -> dict:
    return {
        "title": title,
        "description": f"{title} description",
        "imageUrl": "https://x/y.jpg",
        "categories": categories,
    }


def _add_tag(client: TestClient, headers: dict[str, str], name: str, group: str | None = "Genres") -> str:
    response = client.post("/tags", headers=headers, json={"name": name, "group": group})
    assert response.status_code == 200, response.text
    return response.json()["id"]


def _add_game(client: TestClient, headers: dict[str, str], title: str, categories: list[str]) -> str:
    response = client.post("/games", headers=headers, json=_game_payload(title, categories))
    assert response.status_code == 200, response.text
    return response.json()["id"]


def test_health_endpoint(app_client: TestClient):
    response = app_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_admin_status_for_anonymous_and_verified_callers(app_client: TestClient):
    assert app_client.get("/auth/admin/status").json() == {"is_admin": False}

    headers = anonymous_headers(app_client)
    assert app_client.get("/auth/admin/status", headers=headers).json() == {"is_admin": False}
    assert app_client.get("/auth/admin/name", headers=headers).json() == {"name": None}

    verify_response = app_client.post("/auth/admin/verify", headers=headers, json={"code": "beta-code"})
    assert verify_response.status_code == 200
    assert verify_response.json() == {"success": True, "name": "Beta"}

    assert app_client.get("/auth/admin/status", headers=headers).json() == {"is_admin": True}
    assert app_client.get("/auth/admin/name", headers=headers).json() == {"name": "Beta"}


def test_verify_requires_identity(app_client: TestClient):
    response = app_client.post("/auth/admin/verify", json={"code": "alpha-code"})
    assert response.status_code == 401
    assert response.json()["detail"]["error"] == "unauthenticated"


def test_verify_rejects_unknown_code_and_keeps_prior_code(app_client: TestClient):
    headers = admin_headers(app_client, "alpha-code")

    response = app_client.post("/auth/admin/verify", headers=headers, json={"code": "nope"})
    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "invalid_code"

    assert app_client.get("/auth/admin/name", headers=headers).json() == {"name": "Alpha"}


def test_invalid_token_is_rejected(app_client: TestClient):
    response = app_client.get("/auth/admin/status", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["detail"]["error"] == "invalid_token"


def test_mutations_require_admin(app_client: TestClient):
    admin = admin_headers(app_client)
    tag_id = _add_tag(app_client, admin, "Action")
    game_id = _add_game(app_client, admin, "Doom", ["Action"])

    before_games = app_client.get("/games").json()
    before_tags = app_client.get("/tags").json()

    for headers in ({}, anonymous_headers(app_client)):
        responses = [
            app_client.post("/games", headers=headers, json=_game_payload("Quake", ["Action"])),
            app_client.put(f"/games/{game_id}", headers=headers, json=_game_payload("Doom II", ["Action"])),
            app_client.delete(f"/games/{game_id}", headers=headers),
            app_client.post("/tags", headers=headers, json={"name": "Puzzle", "group": "Genres"}),
            app_client.put(f"/tags/{tag_id}", headers=headers, json={"name": "Shooter", "group": "Genres"}),
            app_client.delete(f"/tags/{tag_id}", headers=headers),
        ]
        for response in responses:
            assert response.status_code == 403, response.text
            assert response.json()["detail"]["error"] == "unauthorized"

    assert app_client.get("/games").json() == before_games
    assert app_client.get("/tags").json() == before_tags


def test_game_crud_flow(app_client: TestClient):
    headers = admin_headers(app_client)
    game_id = _add_game(app_client, headers, "Celeste", ["Platformer"])

    details = app_client.get(f"/games/{game_id}")
    assert details.status_code == 200
    game = details.json()
    assert game["title"] == "Celeste"
    assert game["additionalImages"] == []
    assert game["additionalVideos"] == []
    assert game["videoUrl"] is None
    assert game["createdByName"] == "Alpha"
    assert game["updatedAt"] is None

    update_payload = _game_payload("Celeste", ["Platformer", "Indie"])
    update_payload["videoUrl"] = "https://video/1"
    update_payload["additionalImages"] = ["https://x/2.jpg", "https://x/3.jpg"]
    update_response = app_client.put(f"/games/{game_id}", headers=headers, json=update_payload)
    assert update_response.status_code == 200
    assert update_response.json() == {"id": game_id}

    updated = app_client.get(f"/games/{game_id}").json()
    assert updated["categories"] == ["Platformer", "Indie"]
    assert updated["additionalImages"] == ["https://x/2.jpg", "https://x/3.jpg"]
    assert updated["videoUrl"] == "https://video/1"
    assert updated["updatedByName"] == "Alpha"
    assert updated["updatedAt"] is not None

    assert app_client.delete(f"/games/{game_id}", headers=headers).status_code == 200
    assert app_client.get(f"/games/{game_id}").status_code == 404
    second_delete = app_client.delete(f"/games/{game_id}", headers=headers)
    assert second_delete.status_code == 200
    assert second_delete.json() == {"id": game_id}


def test_update_missing_game_is_not_found(app_client: TestClient):
    headers = admin_headers(app_client)
    response = app_client.put("/games/missing", headers=headers, json=_game_payload("X", ["Action"]))
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "not_found"


def test_add_game_requires_a_category(app_client: TestClient):
    headers = admin_headers(app_client)
    response = app_client.post("/games", headers=headers, json=_game_payload("Empty", []))
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "validation_failed"
    assert app_client.get("/games").json() == []


def test_list_games_filters_by_any_category(app_client: TestClient):
    headers = admin_headers(app_client)
    doom = _add_game(app_client, headers, "Doom", ["Action", "Shooter"])
    myst = _add_game(app_client, headers, "Myst", ["Puzzle"])
    _add_game(app_client, headers, "Stardew Valley", ["Farming"])

    ids = [game["id"] for game in app_client.get("/games", params={"category": ["Shooter", "Puzzle"]}).json()]
    assert sorted(ids) == sorted([doom, myst])

    all_games = app_client.get("/games").json()
    assert len(all_games) == 3
    created = [game["createdAt"] for game in all_games]
    assert created == sorted(created, reverse=True)


def test_list_games_search_combined_with_categories(app_client: TestClient):
    headers = admin_headers(app_client)
    portal = _add_game(app_client, headers, "Portal", ["Puzzle"])
    portal_two = _add_game(app_client, headers, "Portal 2", ["Puzzle", "Co-op"])
    _add_game(app_client, headers, "Half-Life", ["Shooter"])

    ids = [game["id"] for game in app_client.get("/games", params={"q": "portal"}).json()]
    assert sorted(ids) == sorted([portal, portal_two])

    ids = [game["id"] for game in app_client.get("/games", params={"q": "Portal", "category": "Co-op"}).json()]
    assert ids == [portal_two]

    assert app_client.get("/games", params={"q": "zelda"}).json() == []


def test_missing_game_returns_404(app_client: TestClient):
    response = app_client.get("/games/not-a-real-id")
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "not_found"


def test_tag_uniqueness_on_add_and_rename(app_client: TestClient):
    headers = admin_headers(app_client)
    _add_tag(app_client, headers, "Action")
    puzzle_id = _add_tag(app_client, headers, "Puzzle")

    duplicate = app_client.post("/tags", headers=headers, json={"name": "Action", "group": "Genres"})
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"]["error"] == "duplicate_name"

    rename = app_client.put(f"/tags/{puzzle_id}", headers=headers, json={"name": "Action", "group": "Genres"})
    assert rename.status_code == 409
    assert rename.json()["detail"]["error"] == "duplicate_name"

    same_name = app_client.put(
        f"/tags/{puzzle_id}",
        headers=headers,
        json={"name": "Puzzle", "group": "Genres", "description": "Brain teasers"},
    )
    assert same_name.status_code == 200

    tag = next(item for item in app_client.get("/tags").json() if item["id"] == puzzle_id)
    assert tag["description"] == "Brain teasers"
    assert tag["updatedByName"] == "Alpha"


def test_tag_not_found(app_client: TestClient):
    headers = admin_headers(app_client)
    update = app_client.put("/tags/missing", headers=headers, json={"name": "X"})
    assert update.status_code == 404
    delete = app_client.delete("/tags/missing", headers=headers)
    assert delete.status_code == 404


def test_category_projections(app_client: TestClient):
    headers = admin_headers(app_client)
    _add_tag(app_client, headers, "Action", "Genres")
    _add_tag(app_client, headers, "Legacy", None)
    _add_tag(app_client, headers, "PC", "Platforms")

    assert app_client.get("/games/categories").json() == ["Action", "Legacy", "PC"]

    details = app_client.get("/games/categories/details").json()
    assert [tag["group"] for tag in details] == ["Genres", None, "Platforms"]

    grouped = app_client.get("/tags/grouped").json()
    assert [(item["group"], [tag["name"] for tag in item["tags"]]) for item in grouped] == [
        ("Genres", ["Action"]),
        (None, ["Legacy"]),
        ("Platforms", ["PC"]),
    ]


def test_end_to_end_tag_in_use(app_client: TestClient):
    headers = admin_headers(app_client)
    tag_id = _add_tag(app_client, headers, "Co-op", "Play Style")
    game_id = _add_game(app_client, headers, "Portal 2", ["Co-op"])

    games = app_client.get("/games", params={"category": "Co-op"}).json()
    assert [game["id"] for game in games] == [game_id]

    blocked = app_client.delete(f"/tags/{tag_id}", headers=headers)
    assert blocked.status_code == 409
    assert blocked.json()["detail"]["error"] == "tag_in_use"

    assert app_client.delete(f"/games/{game_id}", headers=headers).status_code == 200
    removed = app_client.delete(f"/tags/{tag_id}", headers=headers)
    assert removed.status_code == 200
    assert app_client.get("/tags").json() == []


def test_search_does_not_match_inside_words(app_client: TestClient):
    headers = admin_headers(app_client)
    portal = _add_game(app_client, headers, "Portal", ["Puzzle"])
    _add_game(app_client, headers, "Teleportal Tycoon", ["Strategy"])

    assert app_client.get("/games", params={"q": "ortal"}).json() == []
    ids = [game["id"] for game in app_client.get("/games", params={"q": "portal"}).json()]
    assert ids == [portal]


def test_token_for_unknown_user_is_rejected(app_client: TestClient):
    from app.core.security import create_access_token

    headers = {"Authorization": f"Bearer {create_access_token(subject='ghost')}"}
    response = app_client.post("/auth/admin/verify", headers=headers, json={"code": "alpha-code"})
    assert response.status_code == 401
    assert response.json()["detail"] == {"error": "invalid_token", "message": "User not found"}
