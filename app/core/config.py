from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

ROOT_DIR = Path(__file__).resolve().parent.parent.parent

load_dotenv(Path(ROOT_DIR) / '.env')

class Settings(BaseSettings):
    APP_NAME: str = "movieCatalogApp"
    ENABLE_TRANSLATION: bool = False
    API_PREFIX: str = "/api"
    MOVIE_STORE_BACKEND: Literal["firestore", "memory"] = "memory"
    FIRESTORE_COLLECTION: str = "movies"
    FIREBASE_CREDS_PATH: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app.log"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @property
    def FIREBASE_CREDS_PATH_ABSOLUTE(self) -> Optional[Path]:
        """Returns absolute path to Firebase credentials file"""
        if not self.FIREBASE_CREDS_PATH:
            return None
        return ROOT_DIR / self.FIREBASE_CREDS_PATH

    class Config:
        env_file = ".env"
        extra = "ignore"

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
