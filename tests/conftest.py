import pytest
import os
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from staff_eval.database import Base, get_db
from staff_eval.main import app
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def company(db_session):
    """A company founded in April 2020 (fiscal periods start each April)."""
    from staff_eval.models.company import Company
    company = Company(name="Alpha Corp", establishment_date=date(2020, 4, 1))
    db_session.add(company)
    db_session.commit()
    return company

@pytest.fixture(scope="function")
def staff_user(db_session, company):
    from staff_eval.models.user import User, UserRole
    user = User(
        company_id=company.id,
        email="hanako@alphacorp.example",
        full_name="Hanako Sato",
        role=UserRole.STAFF,
        department="Sales",
        position="Associate",
    )
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture(scope="function")
def admin_user(db_session, company):
    from staff_eval.models.user import User, UserRole
    user = User(
        company_id=company.id,
        email="kenji.example",
        full_name="Kenji Tanaka",
        role=UserRole.ADMIN,
        department="Management",
    )
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture(scope="function")
def evaluation(db_session, company, staff_user):
    """A completed July 2020 evaluation for ``staff_user`` (period 1, Q2)."""
    from staff_eval.models.evaluation import Evaluation, EvaluationStatus
    evaluation = Evaluation(
        company_id=company.id,
        staff_id=staff_user.id,
        evaluation_year=2020,
        evaluation_month=7,
        status=EvaluationStatus.COMPLETED,
        performance_score=40,
        behavior_score=25,
        growth_score=18,
        total_score=83,
        rank="A",
        reward=3000,
    )
    db_session.add(evaluation)
    db_session.commit()
    return evaluation

@pytest.fixture(scope="function")
def evaluation_form():
    """Builds an evaluation form payload; defaults total 83 points (rank A)."""
    def _form(**overrides):
        items = {
            "performance": {"achievement": 20, "attendance": 5, "compliance": 3, "client": 12},
            "behavior": {"initiative": 8, "responsibility": 6, "cooperation": 8, "appearance": 3},
            "growth": {"self_improvement": 6, "response": 4, "goal_achievement": 8},
        }
        for key, value in overrides.items():
            for category in items.values():
                if key in category:
                    category[key] = value
        return items
    return _form

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
