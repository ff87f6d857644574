# app/main.py
from fastapi import FastAPI
import uvicorn

from app.api import include_routers
from app.data.store import Store, build_store
from app.exceptions import register_exception_handlers
from app.utils.logging import configure_logging, get_logger
from app.utils.settings import APP_NAME, HOST, PORT, SEED_CATALOG

logger = get_logger(__name__)


def create_app(store: Store | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=APP_NAME,
        version="1.0.0",
    )

    # caly stan w jednym obiekcie, testy podaja wlasny
    app.state.store = store if store is not None else build_store(seed_catalog=SEED_CATALOG)

    register_exception_handlers(app)
    include_routers(app)

    logger.info(f"{APP_NAME} ready, catalog items: {len(app.state.store.items.list_items())}")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
