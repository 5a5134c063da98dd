"""HTML page endpoints for the film catalog."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from filmshelf.api.dependencies import get_film_store, get_tmdb_client, templates
from filmshelf.services.film_store import FilmStore, InvalidFilmIdError
from filmshelf.services.tmdb_client import TMDbClient, TMDbError, TMDbNotConfiguredError

logger = logging.getLogger(__name__)
router = APIRouter()


def server_error(message: str = "Server error") -> PlainTextResponse:
    return PlainTextResponse(message, status_code=500)


@router.get("/", response_class=HTMLResponse)
async def catalog(
    request: Request,
    film_store: FilmStore = Depends(get_film_store),
) -> Response:
    """Render the catalog of every stored film."""
    try:
        films = await film_store.list_all()
    except Exception as e:
        logger.error(f"Error in / route: {e}", exc_info=True)
        return server_error()

    return templates.TemplateResponse(request, "index.html", {"films": films})


@router.get("/movieDetail/{film_id}", response_class=HTMLResponse)
async def film_detail(
    film_id: str,
    request: Request,
    film_store: FilmStore = Depends(get_film_store),
) -> Response:
    """
    Render the detail page of a stored film.

    Answers 400 for a malformed id, 404 for an unknown one and 500 when the
    store cannot be reached.
    """
    try:
        film = await film_store.get_by_id(film_id)
    except InvalidFilmIdError:
        logger.info(f"Malformed film id in /movieDetail: {film_id!r}")
        return PlainTextResponse("Invalid film id", status_code=400)
    except Exception as e:
        logger.error(f"Error in /movieDetail/{film_id}: {e}", exc_info=True)
        return server_error()

    if film is None:
        return PlainTextResponse("Film not found", status_code=404)

    return templates.TemplateResponse(
        request,
        "movieDetail.html",
        {"film": film.to_json(), "source": "catalog"},
    )


@router.get("/movieDetails/{tmdb_id}", response_class=HTMLResponse)
async def tmdb_movie_detail(
    tmdb_id: str,
    request: Request,
    tmdb_client: TMDbClient = Depends(get_tmdb_client),
) -> Response:
    """Render the detail page from TMDb metadata."""
    try:
        film = await tmdb_client.get_movie_details(tmdb_id)
    except TMDbNotConfiguredError:
        logger.error("Cannot fetch TMDb details without API key")
        return server_error("Missing API key")
    except TMDbError as e:
        logger.error(f"TMDb error in /movieDetails/{tmdb_id}: {e}")
        if e.status_code is not None:
            return server_error("Error fetching movie details")
        return server_error()
    except Exception as e:
        logger.error(f"Error in /movieDetails/{tmdb_id}: {e}", exc_info=True)
        return server_error()

    return templates.TemplateResponse(
        request,
        "movieDetail.html",
        {"film": film, "source": "tmdb"},
    )
