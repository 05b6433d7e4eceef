# backend/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import init_db
from schemas.settings import Preferences
from utils.errors import DataAccessError
from utils.preferences import PreferencesStore

# Routers
from routes.products import router as products_router
from routes.categories import router as categories_router
from routes.stats import router as stats_router
from routes.reports import router as reports_router
from routes.settings import router as settings_router
from routes.logs import router as logs_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

init_db()

app = FastAPI(title="Inventory Dashboard API", version="1.0.0")

# Preferences are injected into routes through utils.preferences.get_preferences
app.state.preferences = PreferencesStore(Preferences(theme=settings.DEFAULT_THEME))

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8080",
]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataAccessError)
async def data_access_error_handler(request: Request, exc: DataAccessError):
    return JSONResponse(status_code=500, content={"detail": exc.message, "kind": exc.kind})


# Router registration
app.include_router(products_router)
app.include_router(categories_router)
app.include_router(stats_router)
app.include_router(reports_router)
app.include_router(settings_router)
app.include_router(logs_router)

logger.info("Inventory Dashboard API ready")

@app.get("/")
def read_root():
    return {"message": "Inventory Dashboard API is running"}
