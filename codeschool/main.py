"""
Course Platform API
Lesson pages, answer checking, submissions and user preferences
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codeschool import config
from codeschool.courses.course_router import router as course_router
from codeschool.db.mongo import create_indexes, manager
from codeschool.preferences.router import router as preferences_router
from codeschool.submissions.router import router as submission_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Course Platform API")


@app.on_event("startup")
async def startup_event():
    await manager.connect()
    await create_indexes(manager.db)
    logger.info("Connected to MongoDB database %s", config.MONGO_DB_NAME)


@app.on_event("shutdown")
async def shutdown_event():
    await manager.disconnect()


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==================== ROUTER REGISTRATION ====================
app.include_router(course_router, prefix="/courses")
app.include_router(submission_router)
app.include_router(preferences_router)
# ============================================================


@app.get("/health")
async def health():
    return {"status": "ok"}
