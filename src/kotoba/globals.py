from pathlib import Path

from fastapi.templating import Jinja2Templates

from .config import settings
from .sessions import SessionStore
from .vocabulary import VocabularyManager

PACKAGE_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))
vocab_manager = VocabularyManager(settings.VOCAB_DIR, builtin_deck=settings.DEFAULT_DECK)
session_store = SessionStore(settings.SESSION_TIMEOUT_MINUTES, settings.DEFAULT_DECK)
