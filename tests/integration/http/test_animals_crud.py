from __future__ import annotations

from sqlalchemy import select

from herdline.infrastructure.db.orm.animal import AnimalORM


async def test_animals_crud_flow(app, client):
    payload = {
        "name": "Buck Rogers",
        "species": "Rabbit",
        "gender": "Male",
        "breed": "New Zealand White",
        "health": 95,
        "fertility": 90,
        "tags": ["breeding"],
    }
    create_response = await client.post("/api/v1/animals", json=payload)
    assert create_response.status_code == 201
    created = create_response.json()
    animal_id = created["id"]
    assert created["animal_code"] == "M1"
    assert created["species"] == "rabbit"
    assert created["gender"] == "male"
    assert created["generation"] == 0
    assert created["version"] == 1

    list_response = await client.get("/api/v1/animals", params={"species": "rabbit"})
    assert list_response.status_code == 200
    body = list_response.json()
    assert body["total"] == 1
    assert body["items"][0]["id"] == animal_id

    update_payload = {"version": created["version"], "name": "Buck Prime", "status": "sold"}
    update_response = await client.put(f"/api/v1/animals/{animal_id}", json=update_payload)
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["name"] == "Buck Prime"
    assert updated["status"] == "sold"
    assert updated["version"] == 2

    stale = await client.put(
        f"/api/v1/animals/{animal_id}", json={"version": 1, "name": "Too late"}
    )
    assert stale.status_code == 409
    assert stale.json()["code"] == "conflict"

    delete_response = await client.delete(f"/api/v1/animals/{animal_id}")
    assert delete_response.status_code == 204

    missing = await client.get(f"/api/v1/animals/{animal_id}")
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"

    async with app.state.session_factory() as session:
        row = (
            await session.execute(select(AnimalORM).where(AnimalORM.id == animal_id))
        ).scalar_one()
        assert row.deleted_at is not None


async def test_create_animal_rejects_bad_payload(client):
    response = await client.post("/api/v1/animals", json={"gender": "male"})
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["details"]["errors"]

    bad_gender = await client.post("/api/v1/animals", json={"name": "X", "gender": "other"})
    assert bad_gender.status_code == 422


async def test_create_animal_with_wrong_parent_gender(client):
    doe = (await client.post("/api/v1/animals", json={"name": "Daisy", "gender": "female"})).json()
    response = await client.post(
        "/api/v1/animals",
        json={"name": "Kit", "gender": "male", "parent_male_id": doe["id"]},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "invalid_gender"


async def test_list_animals_limit_bounds(client):
    response = await client.get("/api/v1/animals", params={"limit": 101})
    assert response.status_code == 422


async def test_health(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
