import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import config
from app.db import create_db_and_tables
from app.errors import ValidationError, validation_error_handler
from app.routers import pricing, products, search

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Listing Assistant API")

# Credentials are only allowed with explicit origins.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ValidationError, validation_error_handler)

# Include routers
app.include_router(pricing.router)
app.include_router(search.router)
app.include_router(products.router)

@app.on_event("startup")
async def on_startup():
    create_db_and_tables()

@app.get("/")
def root():
    return {"message": "Listing assistant backend is live"}

@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
