import logging
from typing import List, Optional, Union

from ..core.errors import InvalidArgument
from .models import Movie
from .store import MovieStore

logger = logging.getLogger(__name__)

ENTITY_NAME = "movie"

class MovieService:
    def __init__(self, store: MovieStore):
        self.store = store

    def create_movie(self, movie: Movie) -> Union[Movie, InvalidArgument]:
        """Persist a new movie; the store assigns its id"""
        if movie.id is not None:
            return InvalidArgument(
                message="A new movie cannot already have an ID",
                entity_name=ENTITY_NAME,
                error_key="idexists"
            )
        return self.store.save(movie)

    def update_movie(self, movie: Movie) -> Union[Movie, InvalidArgument]:
        """Replace a stored movie as a whole; fields are never merged"""
        # A blank id cannot name a stored movie
        if movie.id is None or not movie.id.strip():
            return InvalidArgument(message="Invalid id", entity_name=ENTITY_NAME, error_key="idnull")
        return self.store.save(movie)

    def get_all_movies(self) -> List[Movie]:
        return self.store.find_all()

    def get_movie(self, movie_id: str) -> Optional[Movie]:
        return self.store.find_by_id(movie_id)

    def delete_movie(self, movie_id: str) -> None:
        self.store.delete_by_id(movie_id)

    def search_by_director(self, name_part: str) -> Movie:
        """
        First movie, in store order, whose director contains name_part.
        Falls back to a blank Movie when nothing matches.
        """
        for movie in self.store.find_all():
            if movie.director is not None and name_part in movie.director:
                return movie
        logger.debug(f"No director matching '{name_part}'")
        return Movie()

    def filter_by_rating(self, threshold: int) -> List[Movie]:
        """Movies rated strictly above threshold, in store order"""
        return [
            movie for movie in self.store.find_all()
            if movie.rating is not None and movie.rating > threshold
        ]
