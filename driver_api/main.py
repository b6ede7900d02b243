# driver_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from driver_api.config import Settings, get_settings
from driver_api.database import Database, init_db, insert_sample_data
from driver_api.errors import register_exception_handlers
from driver_api.routes import driver_router

def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        database = Database(settings)
        await database.connect()
        await init_db(database)
        if settings.SEED_SAMPLE_DATA:
            await insert_sample_data(database)
        app.state.database = database
        app.state.driver_store = database.driver_store()
        yield
        # Shutdown
        await database.close()

    app = FastAPI(title="Driver Registry", lifespan=lifespan)
    register_exception_handlers(app)

    app.include_router(driver_router, prefix=settings.API_PREFIX, tags=["drivers"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Driver Registry API"}

    return app

settings = get_settings()
configure_logging(settings)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "driver_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
