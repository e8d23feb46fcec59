import unittest
from unittest.mock import MagicMock

from app.core.errors import InvalidArgument
from app.movies.models import Movie
from app.movies.service import MovieService
from app.movies.store import InMemoryMovieStore, MovieStore


class MovieServiceTests(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryMovieStore()
        self.service = MovieService(self.store)

    def test_create_assigns_id(self):
        result = self.service.create_movie(Movie(title="Heat"))
        self.assertIsInstance(result, Movie)
        self.assertIsNotNone(result.id)

    def test_create_with_id_never_touches_store(self):
        store = MagicMock(spec=MovieStore)
        result = MovieService(store).create_movie(Movie(id="x1", title="Heat"))
        self.assertIsInstance(result, InvalidArgument)
        self.assertEqual(result.error_key, "idexists")
        self.assertEqual(result.entity_name, "movie")
        store.save.assert_not_called()

    def test_update_without_id(self):
        store = MagicMock(spec=MovieStore)
        result = MovieService(store).update_movie(Movie(title="Heat"))
        self.assertIsInstance(result, InvalidArgument)
        self.assertEqual(result.error_key, "idnull")
        store.save.assert_not_called()

    def test_update_with_blank_id(self):
        store = MagicMock(spec=MovieStore)
        result = MovieService(store).update_movie(Movie(id="  ", title="Heat"))
        self.assertIsInstance(result, InvalidArgument)
        self.assertEqual(result.error_key, "idnull")
        store.save.assert_not_called()

    def test_numeric_id_is_read_as_string(self):
        self.assertEqual(Movie(id=42).id, "42")

    def test_update_replaces_whole_movie(self):
        created = self.service.create_movie(Movie(title="Heat", director="Michael Mann", rating=8))
        updated = self.service.update_movie(Movie(id=created.id, title="Heat (1995)"))
        self.assertEqual(updated.title, "Heat (1995)")
        stored = self.service.get_movie(created.id)
        self.assertIsNone(stored.director)
        self.assertIsNone(stored.rating)

    def test_get_missing_movie(self):
        self.assertIsNone(self.service.get_movie("nope"))

    def test_delete_is_idempotent(self):
        created = self.service.create_movie(Movie(title="Heat"))
        self.service.delete_movie(created.id)
        self.service.delete_movie(created.id)
        self.assertEqual(self.service.get_all_movies(), [])

    def test_search_by_director_skips_movies_without_director(self):
        self.service.create_movie(Movie(title="Untitled"))
        nolan = self.service.create_movie(Movie(title="Memento", director="Christopher Nolan"))
        self.assertEqual(self.service.search_by_director("Nolan").id, nolan.id)

    def test_search_by_director_without_match(self):
        self.service.create_movie(Movie(title="Memento", director="Christopher Nolan"))
        self.assertEqual(self.service.search_by_director("Zzz"), Movie())

    def test_filter_by_rating_is_strict_and_stable(self):
        for rating in [9, 3, 5, 6]:
            self.service.create_movie(Movie(title=str(rating), rating=rating))
        self.service.create_movie(Movie(title="unrated"))
        result = self.service.filter_by_rating(5)
        self.assertEqual([movie.rating for movie in result], [9, 6])

    def test_filter_by_negative_threshold(self):
        self.service.create_movie(Movie(title="zero", rating=0))
        self.assertEqual([movie.title for movie in self.service.filter_by_rating(-1)], ["zero"])


if __name__ == '__main__':
    unittest.main()
