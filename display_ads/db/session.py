from sqlalchemy import create_engine
from display_ads.config import settings

engine = None

if settings.ENABLE_DB and settings.DATABASE_URL:
    engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, echo=settings.SQL_ECHO)
