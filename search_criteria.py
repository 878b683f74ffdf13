"""Parsing of the optional movie search parameters"""
import re
from dataclasses import dataclass
from typing import Optional


INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class InvalidSearchParameter(ValueError):
    pass


def _clean_text(value):
    """Trimmed text, or None when absent or blank"""
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class SearchCriteria:
    """
    Search filters taken from a request's query string.

    Text filters are trimmed and a blank value is stored as None, so
    "absent" and "blank" mean the same thing downstream. An empty ``id``
    is absent; an ``id`` that is present must be a positive integer.
    """
    name: Optional[str] = None
    movie_id: Optional[int] = None
    genre: Optional[str] = None

    @classmethod
    def from_args(cls, args):
        raw_id = _clean_text(args.get('id'))
        movie_id = None

        if raw_id is not None:
            if not INTEGER_PATTERN.fullmatch(raw_id):
                raise InvalidSearchParameter(f"id must be an integer, got '{raw_id}'")
            movie_id = int(raw_id)
            if movie_id <= 0:
                raise InvalidSearchParameter(f"id must be positive, got {movie_id}")

        return cls(
            name=_clean_text(args.get('name')),
            movie_id=movie_id,
            genre=_clean_text(args.get('genre'))
        )

    def is_empty(self):
        return self.name is None and self.movie_id is None and self.genre is None

    def form_values(self):
        """Values used to refill the search form"""
        return {
            'search_name': self.name or '',
            'search_id': str(self.movie_id) if self.movie_id is not None else '',
            'search_genre': self.genre or ''
        }
