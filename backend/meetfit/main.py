"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meetfit.api import ops, profiles
from meetfit.api.errors import install_error_handlers
from meetfit.api.middleware_request_id import RequestIdMiddleware
from meetfit.domain.profiles import sockets as profile_sockets
from meetfit.infra import postgres
from meetfit.obs import init as obs_init
from meetfit.settings import settings

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	if settings.uses_postgres():
		await postgres.init_pool()
	LOGGER.info("startup_complete", extra={"profile_store": settings.profile_store})
	try:
		yield
	finally:
		await postgres.close_pool()


app = FastAPI(title="MeetFit API", lifespan=lifespan)
install_error_handlers(app)

allow_origins = list(settings.cors_allow_origins)
if not allow_origins:
	allow_origins = ["http://localhost:9000"] if settings.is_dev() else []

# Starlette disallows wildcard '*' with allow_credentials=True. Replace '*' with explicit origins.
if "*" in allow_origins:
	allow_origins = ["http://localhost:9000", "http://127.0.0.1:9000"] if settings.is_dev() else []

app.add_middleware(
	CORSMiddleware,
	allow_origins=allow_origins,
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
	# Alert headers must be readable from the browser
	expose_headers=["X-Request-Id", "Location", f"X-{settings.alert_app_name}-alert", f"X-{settings.alert_app_name}-error", f"X-{settings.alert_app_name}-params"],
)

# Use the same allowed origins for Socket.IO as for the REST API
sio = socketio.AsyncServer(async_mode="asgi", cors_allowed_origins=allow_origins)
profile_namespace = profile_sockets.ProfileNamespace()
sio.register_namespace(profile_namespace)
profile_sockets.set_namespace(profile_namespace)
socket_app = socketio.ASGIApp(sio, other_asgi_app=app)
obs_init(app)

# Ensure every request carries an X-Request-Id and make it available on request.state
app.add_middleware(RequestIdMiddleware)

app.include_router(ops.router, tags=["ops"])
app.include_router(profiles.router, tags=["profiles"])
