from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from writecheck.core.config import settings

DATABASE_URL = settings.database_url  # DB-URL aus den App-Settings

# SQLite braucht check_same_thread=False, weil FastAPI sync-Endpoints im Threadpool laufen
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, future=True, echo=False, connect_args=_connect_args)

# Session-Factory für einzelne Requests
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# liefert eine DB-Session und räumt danach wieder auf
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
