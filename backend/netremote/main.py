import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from netremote.config import settings
from netremote.database import async_session, init_db
from netremote.routers import remote_settings
from netremote.services.remote_control import remote_control_service

logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    remote_control_service.set_session_factory(async_session)
    await remote_control_service.notify_reload()
    yield


app = FastAPI(title="netremote-web", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(remote_settings.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
