# forum/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import settings
from forum.core.db import init_db, close_db
from forum.core.errors import register_exception_handlers
from forum.core.bootstrap import ensure_default_admin, ensure_default_subjects

from forum.api.routers import auth, subjects, posts, replies, admin

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS for the browser frontend (bearer tokens, no cookies)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

@app.on_event("startup")
async def on_startup():
    await init_db()
    # Reference data and first admin, both idempotent
    await ensure_default_subjects()
    await ensure_default_admin()
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api")
app.include_router(subjects.router, prefix="/api")
app.include_router(posts.router, prefix="/api")
app.include_router(replies.router, prefix="/api")
app.include_router(admin.router, prefix="/api")

@app.get("/healthz")
def healthz():
    return {"ok": True}
