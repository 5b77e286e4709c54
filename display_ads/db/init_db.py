import logging, sys
from sqlalchemy.engine import Engine
from display_ads.db.session import engine
from display_ads.logging_conf import configure_logging
from display_ads.models.db_models import CREATE_TABLE, TABLE_NAME

logger = logging.getLogger(__name__)

def create_display_ads_table(bind: Engine) -> None:
    # CREATE TABLE IF NOT EXISTS, safe to run on every startup
    with bind.begin() as conn:
        conn.exec_driver_sql(CREATE_TABLE)
    logger.info("Table '%s' has been created (or already exists).", TABLE_NAME)

def main() -> int:
    configure_logging()
    if engine is None:
        logger.warning("Database disabled (ENABLE_DB off or DATABASE_URL unset), skipping table setup")
        return 1
    create_display_ads_table(engine)
    return 0

if __name__ == "__main__":
    sys.exit(main())
