"""Read-only movie reviews loaded from a static JSON file"""
import json
import logging
import os
from dataclasses import dataclass

from database.movie_catalog import text_field


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Review:
    movie_id: int
    user_name: str
    rating: float
    comment: str

    @classmethod
    def from_dict(cls, data):
        return cls(
            movie_id=int(data['movieId']),
            user_name=text_field(data, 'userName'),
            rating=float(data['rating']),
            comment=text_field(data, 'comment')
        )


def load_reviews(path):
    """Read reviews from a JSON array file; empty list if missing or malformed"""
    if not os.path.exists(path):
        logger.warning(f"Review data file not found: {path}")
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw_reviews = json.load(f)

        if not isinstance(raw_reviews, list):
            raise ValueError('review data must be a JSON array')

        reviews = [Review.from_dict(item) for item in raw_reviews]
    except Exception as e:
        logger.error(f"Failed to load reviews from JSON: {e}")
        return []

    logger.info(f"Loaded {len(reviews)} reviews from {path}")
    return reviews


class ReviewStore:

    def __init__(self, reviews=()):
        self._reviews_by_movie = {}
        self._count = 0
        for review in reviews:
            self._reviews_by_movie.setdefault(review.movie_id, []).append(review)
            self._count += 1

    @classmethod
    def from_json_file(cls, path):
        return cls(load_reviews(path))

    def count(self):
        return self._count

    def get_reviews_for_movie(self, movie_id):
        return list(self._reviews_by_movie.get(movie_id, []))
