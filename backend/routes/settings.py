# backend/routes/settings.py
import logging

from fastapi import APIRouter, Depends

from schemas.settings import Preferences
from utils.preferences import PreferencesStore, get_preferences

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=Preferences)
def read_settings(store: PreferencesStore = Depends(get_preferences)):
    return store.get()


@router.put("", response_model=Preferences)
def save_settings(payload: Preferences, store: PreferencesStore = Depends(get_preferences)):
    logger.info("Settings saved (theme=%s)", payload.theme)
    return store.replace(payload)


@router.post("/theme/toggle", response_model=Preferences)
def toggle_theme(store: PreferencesStore = Depends(get_preferences)):
    return store.toggle_theme()
