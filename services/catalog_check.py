def check_catalog(catalog, reviews):
    try:
        movie_count = len(catalog)

        if movie_count == 0:
            return {
                'status': 'unhealthy',
                'service': 'catalog',
                'message': 'Movie catalog is empty'
            }

        movies = catalog.get_all()
        years = [movie.year for movie in movies]
        average_rating = round(sum(movie.rating for movie in movies) / movie_count, 2)

        return {
            'status': 'healthy',
            'service': 'catalog',
            'message': f'Movie catalog loaded with {movie_count} movies',
            'details': {
                'movies': {
                    'count': movie_count,
                    'oldest_year': min(years),
                    'newest_year': max(years),
                    'average_rating': average_rating
                },
                'genres': catalog.genres(),
                'reviews': {
                    'count': reviews.count()
                }
            }
        }

    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'catalog',
            'message': f'Unexpected error: {str(e)}'
        }
