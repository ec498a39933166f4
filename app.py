"""Product Categories catalog browser - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, DATA_DIR, LOG_LEVEL
from src.services import join_catalog, load_reference_data
from src.ui.pages.catalog import catalog_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Load reference data and build the catalog once; bad data stops startup
_users, _categories, _products = load_reference_data(DATA_DIR)
_catalog = join_catalog(_products, _categories, _users)
logger.info("Catalog ready: %d products", len(_catalog))


@ui.page("/")
def index(
    user: str | None = None,
    query: str | None = None,
    categories: str | None = None,
):
    catalog_page(
        _catalog, _users, _categories,
        user=user, query=query, category_ids=categories,
    )


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "product-categories", "products": len(_catalog)}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
