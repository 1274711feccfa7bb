"""Integration tests for trainer endpoints."""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from coachportal.domains.trainers.models import TrainerClientAssignment
from tests.helpers import CLIENT_A, CLIENT_B, TRAINER_1, actor_headers

BASE = "/api/v1/trainers"


async def test_trainer_lists_managed_clients(client: AsyncClient, db_session: AsyncSession):
    db_session.add_all([
        TrainerClientAssignment(trainer_id=TRAINER_1, client_id=CLIENT_B),
        TrainerClientAssignment(trainer_id=TRAINER_1, client_id=CLIENT_A),
        TrainerClientAssignment(trainer_id=TRAINER_1, client_id="former@example.com", status="inactive"),
    ])
    await db_session.commit()

    response = await client.get(f"{BASE}/me/clients", headers=actor_headers(TRAINER_1, "trainer"))

    assert response.status_code == 200
    data = response.json()
    assert data["client_ids"] == sorted([CLIENT_A, CLIENT_B])
    assert data["total"] == 2


async def test_trainer_without_assignments(client: AsyncClient):
    response = await client.get(f"{BASE}/me/clients", headers=actor_headers(TRAINER_1, "trainer"))

    assert response.status_code == 200
    assert response.json() == {"trainer_id": TRAINER_1, "client_ids": [], "total": 0}


async def test_client_cannot_list_trainer_clients(client: AsyncClient):
    response = await client.get(f"{BASE}/me/clients", headers=actor_headers(CLIENT_A, "client"))

    assert response.status_code == 403


async def test_trainer_lists_assignments(client: AsyncClient, db_session: AsyncSession):
    db_session.add_all([
        TrainerClientAssignment(trainer_id=TRAINER_1, client_id=CLIENT_A),
        TrainerClientAssignment(trainer_id=TRAINER_1, client_id=CLIENT_B, status="inactive"),
    ])
    await db_session.commit()
    headers = actor_headers(TRAINER_1, "trainer")

    active = await client.get(f"{BASE}/me/assignments", headers=headers)
    everything = await client.get(f"{BASE}/me/assignments?active_only=false", headers=headers)

    assert [a["client_id"] for a in active.json()] == [CLIENT_A]
    assert {a["status"] for a in everything.json()} == {"active", "inactive"}


async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
