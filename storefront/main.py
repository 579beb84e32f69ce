# storefront/main.py
import uvicorn

from storefront.api import create_app
from storefront.data.database import Base, engine
from storefront.data.seed import seed
from storefront.utils.settings import SEED_DEMO_DATA
from storefront.utils.logging import get_logger

# registers every model in Base.metadata before create_all
import storefront.data.models  # noqa: F401

logger = get_logger(__name__)

logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")

try:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
except Exception as e:
    logger.error(f"Failed to create tables: {e}")
    raise

if SEED_DEMO_DATA:
    logger.info(f"Seeded {seed()} demo products")

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
