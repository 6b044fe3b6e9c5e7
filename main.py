import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.marking import router as marking_router
from routers.problems import router as problems_router
from settings import ALLOWED_ORIGINS, LOG_LEVEL

logger = logging.getLogger("atomic-mass")
logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Atomic Mass Master – Practice API")

# Allow calls from the exercise page dev servers (override with ALLOWED_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(problems_router)  # /problems, /concept
app.include_router(marking_router)  # /check, /check-batch, /evaluate
