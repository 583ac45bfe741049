from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import Config
from db import Base, engine
from recommendation import models as recommendation_models  # noqa: F401  registers tables
from recommendation.errors import register_exception_handlers
from recommendation.routes import router as recommendation_router
from utils.logging_utils import configure_logging

configure_logging(Config.LOG_LEVEL)
logging.info("App starting with DATABASE_URL")

app = FastAPI(title="Career Guidance Recommendations")

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

Base.metadata.create_all(bind=engine)

app.include_router(recommendation_router)


@app.get("/")
def root():
    return {"status": "ok"}
