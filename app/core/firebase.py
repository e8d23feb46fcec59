from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

from .config import Settings, settings as default_settings

_db = None

def get_db(settings: Optional[Settings] = None):
    """Return the Firestore client, initializing the Firebase app on first use."""
    global _db
    if _db is not None:
        return _db

    settings = settings or default_settings
    creds_path = settings.FIREBASE_CREDS_PATH_ABSOLUTE
    if creds_path is not None:
        cred = credentials.Certificate(str(creds_path))
    else:
        cred = credentials.ApplicationDefault()

    try:
        firebase_app = firebase_admin.get_app()
    except ValueError:
        firebase_app = firebase_admin.initialize_app(cred)

    _db = firestore.client(firebase_app)
    return _db
