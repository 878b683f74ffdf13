import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from flask import template_rendered

from app import create_app
from database.movie_catalog import Movie, MovieCatalog
from database.review_store import Review, ReviewStore


@pytest.fixture
def movies():
    return [
        Movie(1, 'The Prison Escape', 'John Director', 1994, 'Drama', 'A tale of redemption', 142, 5.0),
        Movie(2, 'The Family Boss', 'Michael Filmmaker', 1972, 'Crime/Drama', 'A crime family saga', 175, 5.0),
        Movie(3, 'Space Adventure', 'Sci-Fi Director', 2020, 'Sci-Fi', 'An epic space journey', 120, 4.5),
    ]


@pytest.fixture
def catalog(movies):
    return MovieCatalog(movies)


@pytest.fixture
def reviews():
    return ReviewStore([
        Review(1, 'MovieBuff42', 5.0, 'A timeless story about hope.'),
        Review(1, 'CinemaCaptain', 4.5, 'Slow start, great payoff.'),
        Review(3, 'StarGazer', 4.0, 'Classic space fun.'),
    ])


@pytest.fixture
def app(catalog, reviews):
    app = create_app(catalog=catalog, reviews=reviews, config={'TESTING': True})
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)
