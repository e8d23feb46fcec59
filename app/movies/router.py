import logging
from typing import List

from fastapi import APIRouter, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..core.config import Settings
from ..core.errors import InvalidArgument, bad_request_response
from ..core.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from .models import Movie
from .service import ENTITY_NAME, MovieService

logger = logging.getLogger(__name__)

def build_movie_router(service: MovieService, settings: Settings) -> APIRouter:
    router = APIRouter(prefix="/movies", tags=["movies"])
    app_name = settings.APP_NAME
    translate = settings.ENABLE_TRANSLATION

    def create_movie(movie: Movie):
        """Create a new movie. 400 if the movie already has an id"""
        logger.debug(f"REST request to save Movie : {movie}")
        result = service.create_movie(movie)
        if isinstance(result, InvalidArgument):
            return bad_request_response(result, app_name)

        headers = create_entity_creation_alert(app_name, translate, ENTITY_NAME, result.id)
        headers["Location"] = f"{settings.API_PREFIX}{router.prefix}/{result.id}"
        return JSONResponse(status_code=201, content=jsonable_encoder(result), headers=headers)

    def update_movie(movie: Movie):
        """Replace an existing movie. 400 if the id is missing"""
        logger.debug(f"REST request to update Movie : {movie}")
        result = service.update_movie(movie)
        if isinstance(result, InvalidArgument):
            return bad_request_response(result, app_name)

        headers = create_entity_update_alert(app_name, translate, ENTITY_NAME, movie.id)
        return JSONResponse(status_code=200, content=jsonable_encoder(result), headers=headers)

    def get_all_movies():
        logger.debug("REST request to get all Movies")
        return service.get_all_movies()

    def get_movie(movie_id: str):
        logger.debug(f"REST request to get Movie : {movie_id}")
        movie = service.get_movie(movie_id)
        if movie is None:
            return Response(status_code=404)
        return movie

    def delete_movie(movie_id: str):
        logger.debug(f"REST request to delete Movie : {movie_id}")
        service.delete_movie(movie_id)
        headers = create_entity_deletion_alert(app_name, translate, ENTITY_NAME, movie_id)
        return Response(status_code=204, headers=headers)

    def search_director(name: str):
        """First movie whose director contains name, or a blank movie"""
        logger.debug(f"REST request to search Movie by director : {name}")
        return service.search_by_director(name)

    def filter_by_rating(rating: int):
        """Movies rated strictly above the given rating"""
        logger.debug(f"REST request to filter Movies by rating : {rating}")
        return service.filter_by_rating(rating)

    # method, path, handler, status code, response model
    routes = [
        ("POST", "", create_movie, 201, Movie),
        ("PUT", "", update_movie, 200, Movie),
        ("GET", "", get_all_movies, 200, List[Movie]),
        ("GET", "/{movie_id}", get_movie, 200, Movie),
        ("DELETE", "/{movie_id}", delete_movie, 204, None),
        ("GET", "/director/{name}", search_director, 200, Movie),
        ("GET", "/rating/{rating}", filter_by_rating, 200, List[Movie]),
    ]
    for method, path, endpoint, status_code, response_model in routes:
        router.add_api_route(
            path,
            endpoint,
            methods=[method],
            status_code=status_code,
            response_model=response_model,
            name=endpoint.__name__
        )

    return router
