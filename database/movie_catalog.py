"""In-memory movie catalog loaded from a static JSON file"""
import json
import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional


logger = logging.getLogger(__name__)


def text_field(data, key):
    """String value of ``data[key]``; raises on null or non-string values"""
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Movie:
    id: int
    title: str
    director: str
    year: int
    genre: str
    description: str
    duration: int
    rating: float

    @classmethod
    def from_dict(cls, data):
        """Build a movie from a ``movies.json`` entry (raises on missing or bad fields)"""
        return cls(
            id=int(data['id']),
            title=text_field(data, 'movieName'),
            director=text_field(data, 'director'),
            year=int(data['year']),
            genre=text_field(data, 'genre'),
            description=text_field(data, 'description'),
            duration=int(data['duration']),
            rating=float(data['imdbRating'])
        )

    def to_dict(self):
        return {
            'id': self.id,
            'movieName': self.title,
            'director': self.director,
            'year': self.year,
            'genre': self.genre,
            'description': self.description,
            'duration': self.duration,
            'imdbRating': self.rating
        }


def load_movies(path) -> List[Movie]:
    """
    Read the movie dataset from a JSON array file.

    Loading never raises. A missing file yields an empty list, and so does
    a file that fails to parse or holds any malformed entry: the catalog is
    all-or-nothing, so the application always starts, possibly empty.

    Args:
        path: location of the ``movies.json`` file

    Returns:
        list: Movie records in file order
    """
    if not os.path.exists(path):
        logger.warning(f"Movie data file not found: {path}")
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw_movies = json.load(f)

        if not isinstance(raw_movies, list):
            raise ValueError('movie data must be a JSON array')

        movies = [Movie.from_dict(item) for item in raw_movies]
    except Exception as e:
        logger.error(f"Failed to load movies from JSON: {e}")
        return []

    logger.info(f"Loaded {len(movies)} movies from {path}")
    return movies


def _is_blank(text):
    return text is None or not text.strip()


class MovieCatalog:
    """Read-only movie collection with an id index; safe to share across threads."""

    def __init__(self, movies: Iterable[Movie] = ()):
        self._movies = tuple(movies)
        # Last entry wins when ids collide
        self._movies_by_id = {}
        for movie in self._movies:
            self._movies_by_id[movie.id] = movie

    @classmethod
    def from_json_file(cls, path):
        return cls(load_movies(path))

    def __len__(self):
        return len(self._movies)

    def get_all(self) -> List[Movie]:
        return list(self._movies)

    def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        if movie_id is None or movie_id <= 0:
            return None
        return self._movies_by_id.get(movie_id)

    def genres(self) -> List[str]:
        """Distinct genre labels in first-seen order"""
        seen = []
        for movie in self._movies:
            if movie.genre not in seen:
                seen.append(movie.genre)
        return seen

    def search_by_name(self, name: Optional[str]) -> List[Movie]:
        if _is_blank(name):
            logger.warning("Empty movie name provided for search, returning no results")
            return []

        term = name.strip().lower()
        logger.info(f"Searching movies with name containing: {term}")
        return [movie for movie in self._movies if term in movie.title.lower()]

    def search_by_genre(self, genre: Optional[str]) -> List[Movie]:
        if _is_blank(genre):
            logger.warning("Empty genre provided for search, returning no results")
            return []

        term = genre.strip().lower()
        logger.info(f"Searching movies in genre: {term}")
        return [movie for movie in self._movies if term in movie.genre.lower()]

    def search(self, name: Optional[str] = None, movie_id: Optional[int] = None,
               genre: Optional[str] = None) -> List[Movie]:
        """
        Combined search by name, id and genre.

        Each criterion that is present narrows the result of the previous
        one, in the order name, id, genre. Blank text and non-positive ids
        count as absent. With no criterion at all, every movie is returned,
        unlike search_by_name/search_by_genre which return nothing for a
        blank term.
        """
        logger.info(f"Starting movie search with name: '{name}', id: {movie_id}, genre: '{genre}'")

        results = list(self._movies)

        if not _is_blank(name):
            term = name.strip().lower()
            results = [movie for movie in results if term in movie.title.lower()]
            logger.debug(f"After name filter, found {len(results)} movies")

        if movie_id is not None and movie_id > 0:
            results = [movie for movie in results if movie.id == movie_id]
            logger.debug(f"After id filter, found {len(results)} movies")

        if not _is_blank(genre):
            term = genre.strip().lower()
            results = [movie for movie in results if term in movie.genre.lower()]
            logger.debug(f"After genre filter, found {len(results)} movies")

        logger.info(f"Movie search complete, found {len(results)} movies")
        return results
