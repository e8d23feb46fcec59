import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from google.api_core.exceptions import GoogleAPIError

from ..core.errors import MovieStoreError
from ..core.firebase import get_db
from .models import Movie

logger = logging.getLogger(__name__)

class MovieStore(ABC):
    """Persistence for movies, keyed by an opaque string id"""

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """Insert when the movie has no id, otherwise replace the stored document"""

    @abstractmethod
    def find_all(self) -> List[Movie]:
        ...

    @abstractmethod
    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        ...

    @abstractmethod
    def delete_by_id(self, movie_id: str) -> None:
        """Deleting an unknown id is a no-op"""

class InMemoryMovieStore(MovieStore):
    def __init__(self):
        self._movies: Dict[str, Movie] = {}
        self._lock = threading.Lock()

    def save(self, movie: Movie) -> Movie:
        movie_id = movie.id if movie.id is not None else uuid.uuid4().hex
        stored = Movie(**{**movie.dict(), "id": movie_id})
        with self._lock:
            self._movies[movie_id] = stored
        logger.info(f"Saved movie {movie_id}")
        return Movie(**stored.dict())

    def find_all(self) -> List[Movie]:
        with self._lock:
            movies = list(self._movies.values())
        return [Movie(**movie.dict()) for movie in movies]

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            movie = self._movies.get(movie_id)
        return Movie(**movie.dict()) if movie else None

    def delete_by_id(self, movie_id: str) -> None:
        with self._lock:
            removed = self._movies.pop(movie_id, None)
        if removed is not None:
            logger.info(f"Deleted movie {movie_id}")

class FirestoreMovieStore(MovieStore):
    """One Firestore document per movie; the document id is the movie id"""

    def __init__(self, collection_name: str = "movies", db=None, settings=None):
        self.collection_name = collection_name
        self.settings = settings
        self._db = db

    @property
    def db(self):
        if self._db is None:
            self._db = get_db(self.settings)
        return self._db

    @property
    def collection(self):
        return self.db.collection(self.collection_name)

    @staticmethod
    def _to_movie(doc) -> Movie:
        data = doc.to_dict() or {}
        data.pop('id', None)
        return Movie(id=doc.id, **data)

    def save(self, movie: Movie) -> Movie:
        try:
            if movie.id is None:
                movie_ref = self.collection.document()
            else:
                movie_ref = self.collection.document(movie.id)

            # Full replace, no merge
            movie_ref.set(movie.dict(exclude={'id'}))
            logger.info(f"Saved movie {movie_ref.id} to '{self.collection_name}'")
            return Movie(**{**movie.dict(), 'id': movie_ref.id})
        except (GoogleAPIError, ValueError) as e:
            # ValueError: Firestore rejects malformed document ids
            raise MovieStoreError(f"Failed to save movie {movie.id}: {str(e)}") from e

    def find_all(self) -> List[Movie]:
        try:
            return [self._to_movie(doc) for doc in self.collection.stream()]
        except GoogleAPIError as e:
            raise MovieStoreError(f"Failed to fetch movies: {str(e)}") from e

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        try:
            doc = self.collection.document(movie_id).get()
            if not doc.exists:
                return None
            return self._to_movie(doc)
        except GoogleAPIError as e:
            raise MovieStoreError(f"Failed to fetch movie {movie_id}: {str(e)}") from e

    def delete_by_id(self, movie_id: str) -> None:
        try:
            self.collection.document(movie_id).delete()
            logger.info(f"Deleted movie {movie_id} from '{self.collection_name}'")
        except GoogleAPIError as e:
            raise MovieStoreError(f"Failed to delete movie {movie_id}: {str(e)}") from e

def build_movie_store(settings) -> MovieStore:
    if settings.MOVIE_STORE_BACKEND == "firestore":
        return FirestoreMovieStore(collection_name=settings.FIRESTORE_COLLECTION, settings=settings)
    return InMemoryMovieStore()
