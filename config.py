import os


BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '5000'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    APP_VERSION = '1.0.0'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Static datasets, read once at startup
    MOVIES_DATA_PATH = os.getenv('MOVIES_DATA_PATH', os.path.join(BASE_DIR, 'data', 'movies.json'))
    REVIEWS_DATA_PATH = os.getenv('REVIEWS_DATA_PATH', os.path.join(BASE_DIR, 'data', 'reviews.json'))
