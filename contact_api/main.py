import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_api import config, db, errors, models
from contact_api.routes import addresses, contacts, users

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    models.Base.metadata.create_all(bind=db.engine)
    logger.info("Database tables ready")
    yield


app = FastAPI(title="Contact Manager API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.register_exception_handlers(app)

app.include_router(users.router)
app.include_router(contacts.router)
app.include_router(addresses.router)


@app.get("/health")
def health():
    return {"status": "ok"}
