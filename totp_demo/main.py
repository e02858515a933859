# FastAPI application entry point that initialises
# the app and registers the account routes.

import logging

from fastapi import FastAPI
from pydantic import BaseModel
from totp_demo.core.config import settings
from totp_demo.routes import accounts

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title=settings.APP_NAME)
app.include_router(accounts.router)

class HealthResp(BaseModel):
    ok: bool
    accounts: int

@app.get("/health", response_model=HealthResp)
def health():
    # looked up at call time so tests can swap the service
    return HealthResp(ok=True, accounts=len(accounts.service.registry))
