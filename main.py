"""
Run with ``python main.py`` or ``uvicorn app.main:app --reload``.
"""
import uvicorn

from app.core.config import settings
from app.main import app  # re-export FastAPI instance

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=True)
