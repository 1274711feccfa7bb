"""Test configuration and fixtures for the Coach Portal API."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from coachportal.config.database import Base, get_db
from coachportal.core.store import SqlRecordStore
from coachportal.domains.trainers.models import AssignmentStatus, TrainerClientAssignment
from coachportal.domains.workouts.models import ClientAssignedWorkout, WorkoutStatus
from coachportal.main import create_app
from tests.helpers import CLIENT_A, CLIENT_B, TRAINER_1, TRAINER_2

# Test database URL - use SQLite in-memory for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
    )

    # Import all models to register them
    from coachportal.domains import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def store(db_session: AsyncSession) -> SqlRecordStore:
    """Record store over the test session."""
    return SqlRecordStore(db_session)


@pytest.fixture(scope="function")
async def client(test_engine, db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with database session override."""
    app = create_app()

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


# =============================================================================
# Shared Data Fixtures
# =============================================================================


@pytest.fixture
async def workouts(db_session: AsyncSession) -> dict[str, ClientAssignedWorkout]:
    """Four workouts across two clients and two trainers.

    w1, w2 belong to client A (programmed by trainer 1);
    w3 belongs to client B (trainer 2); w4 belongs to client B (trainer 1).
    """
    rows = [
        ClientAssignedWorkout(
            id="w1",
            client_id=CLIENT_A,
            trainer_id=TRAINER_1,
            exercise_name="Squats",
            sets=3,
            reps=10,
            status=WorkoutStatus.ACTIVE.value,
            week_number=1,
        ),
        ClientAssignedWorkout(
            id="w2",
            client_id=CLIENT_A,
            trainer_id=TRAINER_1,
            exercise_name="Bench Press",
            sets=3,
            reps=8,
            status=WorkoutStatus.COMPLETED.value,
            week_number=1,
        ),
        ClientAssignedWorkout(
            id="w3",
            client_id=CLIENT_B,
            trainer_id=TRAINER_2,
            exercise_name="Deadlifts",
            sets=3,
            reps=5,
            status=WorkoutStatus.ACTIVE.value,
            week_number=1,
        ),
        ClientAssignedWorkout(
            id="w4",
            client_id=CLIENT_B,
            trainer_id=TRAINER_1,
            exercise_name="Pull-ups",
            sets=3,
            reps=12,
            status=WorkoutStatus.PENDING.value,
            week_number=2,
        ),
    ]
    db_session.add_all(rows)
    await db_session.commit()
    return {row.id: row for row in rows}


@pytest.fixture
async def trainer_1_assigned_to_a(db_session: AsyncSession) -> TrainerClientAssignment:
    """Active assignment (trainer 1, client A)."""
    assignment = TrainerClientAssignment(
        id="assignment-1",
        trainer_id=TRAINER_1,
        client_id=CLIENT_A,
        status=AssignmentStatus.ACTIVE.value,
    )
    db_session.add(assignment)
    await db_session.commit()
    await db_session.refresh(assignment)
    return assignment
