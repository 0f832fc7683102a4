import asyncio

from brand_cms.domain.access import Module, Role
from brand_cms.extensions import db
from brand_cms.models.media_asset import MediaAsset
from brand_cms.repositories.module_visibility import VisibilityStore


def _create_page(client, headers, brand_id="soil-king", name="Soil King"):
    draft = client.post(
        "/api/v1/brand-pages/templates",
        json={"brand": {"id": brand_id, "name": name}, "level": "standard"},
        headers=headers,
    )
    assert draft.status_code == 200

    created = client.post("/api/v1/brand-pages", json=draft.get_json()["page"], headers=headers)
    assert created.status_code == 201
    return created.get_json()["id"]


def _hide_module(module_id):
    asyncio.run(VisibilityStore().save_visibility_map({module_id: False}))
    db.session.commit()


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_missing_token_is_unauthenticated(client):
    response = client.get("/api/v1/brand-pages")

    assert response.status_code == 401
    assert response.get_json()["error"] == "Unauthenticated"


def test_invalid_token_is_unauthenticated(client):
    response = client.get("/api/v1/brand-pages", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "Unauthenticated"


def test_hidden_module_is_forbidden(client, auth_headers):
    _hide_module(Module.BRAND_PAGES)

    response = client.get("/api/v1/brand-pages", headers=auth_headers(Role.ADMIN))

    assert response.status_code == 403
    assert response.get_json()["error"] == "PermissionDenied"


def test_access_me(client, auth_headers):
    _hide_module(Module.CAREERS)

    response = client.get("/api/v1/access/me", headers=auth_headers(Role.ADMIN, identity="u-9"))
    body = response.get_json()

    assert response.status_code == 200
    assert body["id"] == "u-9"
    assert body["role"] == Role.ADMIN
    assert body["basePath"] == "/admin"
    assert Module.CAREERS not in body["modules"]
    assert Module.DASHBOARD in body["modules"]
    assert body["capabilities"] == {
        "canCreate": True,
        "canDelete": True,
        "canManageUsers": False,
        "canManageVisibility": False,
    }


def test_module_visibility_endpoints(client, auth_headers):
    response = client.put(
        "/api/v1/module-visibility/careers",
        json={"visible": False},
        headers=auth_headers(Role.SUPER_ADMIN),
    )
    assert response.status_code == 200
    assert response.get_json()["visibility"]["careers"] is False

    forbidden = client.put(
        "/api/v1/module-visibility/careers",
        json={"visible": True},
        headers=auth_headers(Role.ADMIN),
    )
    assert forbidden.status_code == 403

    dashboard = client.put(
        "/api/v1/module-visibility/dashboard",
        json={"visible": False},
        headers=auth_headers(Role.SUPER_ADMIN),
    )
    assert dashboard.status_code == 400

    reset = client.delete("/api/v1/module-visibility/careers", headers=auth_headers(Role.SUPER_ADMIN))
    assert "careers" not in reset.get_json()["visibility"]

    current = client.get("/api/v1/module-visibility", headers=auth_headers(Role.SUB_ADMIN))
    assert current.status_code == 200


def test_create_get_and_list(client, auth_headers):
    headers = auth_headers(Role.ADMIN)
    page_id = _create_page(client, headers)

    detail = client.get(f"/api/v1/brand-pages/{page_id}", headers=headers).get_json()
    assert detail["page"]["brandId"] == "soil-king"
    assert detail["styles"]["why"]["buttonBgColor"] == "#323790"
    assert detail["styles"]["standFor"]["backgroundColor"] == "#ffffff"

    listing = client.get("/api/v1/brand-pages", headers=headers).get_json()
    assert [item["id"] for item in listing["items"]] == [page_id]
    assert "hero" not in listing["items"][0]


def test_duplicate_create_conflicts(client, auth_headers):
    headers = auth_headers(Role.ADMIN)
    _create_page(client, headers)

    draft = client.post(
        "/api/v1/brand-pages/templates",
        json={"brand": {"id": "soil-king", "name": "Soil King"}, "level": "minimal"},
        headers=headers,
    ).get_json()["page"]
    response = client.post("/api/v1/brand-pages", json=draft, headers=headers)

    assert response.status_code == 409
    assert response.get_json()["error"] == "DuplicateBrandPage"


def test_invalid_brand_id_is_rejected(client, auth_headers):
    response = client.post(
        "/api/v1/brand-pages",
        json={"brandId": "soil king", "brandName": "Soil King"},
        headers=auth_headers(Role.ADMIN),
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "InvariantViolation"


def test_malformed_document_is_422(client, auth_headers):
    response = client.post(
        "/api/v1/brand-pages",
        json={"brandId": "b", "brandName": "B", "about": {"paragraphs": "text"}},
        headers=auth_headers(Role.ADMIN),
    )

    assert response.status_code == 422


def test_clone_endpoint_returns_unsaved_draft(client, auth_headers):
    headers = auth_headers(Role.SUB_ADMIN)
    page_id = _create_page(client, headers)

    response = client.post(
        f"/api/v1/brand-pages/{page_id}/clone",
        json={"brand": {"id": "wellness-co", "name": "Wellness Co"}},
        headers=headers,
    )
    page = response.get_json()["page"]

    assert response.status_code == 200
    assert "id" not in page
    assert page["brandId"] == "wellness-co"
    assert page["about"]["eyebrow"] == "★ About Wellness Co"

    missing = client.post(
        "/api/v1/brand-pages/nope/clone",
        json={"brand": {"id": "wellness-co", "name": "Wellness Co"}},
        headers=headers,
    )
    assert missing.status_code == 404


def test_update_existing(client, auth_headers):
    headers = auth_headers(Role.ADMIN)
    page_id = _create_page(client, headers)

    document = client.get(f"/api/v1/brand-pages/{page_id}", headers=headers).get_json()["page"]
    document["hero"]["title"] = "New Title"

    response = client.put(f"/api/v1/brand-pages/{page_id}", json=document, headers=headers)

    assert response.status_code == 200
    assert response.get_json()["page"]["hero"]["title"] == "New Title"

    missing = client.put("/api/v1/brand-pages/nope", json=document, headers=headers)
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "PageNotFound"


def test_toggle_and_public_lookup(client, auth_headers):
    headers = auth_headers(Role.ADMIN)
    page_id = _create_page(client, headers)

    public = client.get("/api/v1/public/brands/soil-king")
    assert public.status_code == 200

    toggled = client.patch(f"/api/v1/brand-pages/{page_id}/enabled", headers=headers)
    assert toggled.get_json()["enabled"] is False

    disabled = client.get("/api/v1/public/brands/soil-king")
    assert disabled.status_code == 404
    assert disabled.get_json()["error"] == "PageDisabled"

    unknown = client.get("/api/v1/public/brands/acme")
    assert unknown.get_json()["error"] == "PageNotFound"


def test_public_payload_resolves_assets_and_fills_fallbacks(client, auth_headers):
    asset = MediaAsset(filename="hero.png", url="https://cdn.example.com/hero.png")
    pending = MediaAsset(filename="second.png", url=None)
    db.session.add_all([asset, pending])
    db.session.commit()

    response = client.post(
        "/api/v1/brand-pages",
        json={
            "brandId": "wellness",
            "brandName": "Wellness",
            "hero": {"backgroundImage1": asset.id, "backgroundImage2": pending.id},
            "products": {"items": [{"id": "p1", "title": "Oats", "image": "/static/oats.png"}]},
        },
        headers=auth_headers(Role.ADMIN),
    )
    assert response.status_code == 201

    body = client.get("/api/v1/public/brands/wellness").get_json()

    assert body["assets"] == {
        "hero-bg1": "https://cdn.example.com/hero.png",
        "hero-bg2": None,
        "product-0": "/static/oats.png",
    }
    assert body["page"]["hero"]["title"] == "Brand Title"
    assert body["page"]["products"]["title"] == "Explore Wellness Products"
    assert body["page"]["products"]["items"][0]["href"] == "#"
    assert body["styles"]["hero"]["titleAlign"] == "center"
    assert body["sections"] == ["hero", "products"]


def test_delete(client, auth_headers):
    headers = auth_headers(Role.SUB_ADMIN)
    page_id = _create_page(client, headers)

    response = client.delete(f"/api/v1/brand-pages/{page_id}", headers=headers)
    assert response.status_code == 200

    again = client.delete(f"/api/v1/brand-pages/{page_id}", headers=headers)
    assert again.status_code == 404


def test_import_endpoint(client, auth_headers):
    headers = auth_headers(Role.ADMIN)

    first = client.post("/api/v1/brand-pages/import", json={"brandId": "soil-king"}, headers=headers)
    second = client.post("/api/v1/brand-pages/import", json={"brandId": "soil-king"}, headers=headers)
    unknown = client.post("/api/v1/brand-pages/import", json={"brandId": "acme"}, headers=headers)

    assert first.status_code == 201
    assert first.get_json()["success"] is True
    assert second.status_code == 200
    assert second.get_json()["success"] is False
    assert unknown.status_code == 404
    assert unknown.get_json()["error"] == "SourceNotFound"


def test_openapi_document_is_served(client):
    response = client.get("/openapi/brand-pages.yaml")

    assert response.status_code == 200
    assert b"Brand Pages API" in response.data
