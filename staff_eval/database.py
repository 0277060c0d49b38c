from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from staff_eval.core.config import settings

DATABASE_URL = settings.database_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")

if IS_SQLITE:
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # Tenant scoping relies on company/staff foreign keys being enforced
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """One session per request; services commit their own writes."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create the schema for every registered model. Called from the app lifespan."""
    from staff_eval.models import company, user, evaluation, goal, question, comment  # noqa: F401
    Base.metadata.create_all(bind=engine)
