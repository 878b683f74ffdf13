import json

from database.movie_catalog import Movie, MovieCatalog, load_movies


def titles(results):
    return [movie.title for movie in results]


def test_search_by_name(catalog):
    assert titles(catalog.search_by_name('Prison')) == ['The Prison Escape']
    assert len(catalog.search_by_name('The')) == 2
    assert titles(catalog.search_by_name('family')) == ['The Family Boss']
    assert catalog.search_by_name('Nonexistent Movie') == []


def test_search_by_name_blank_input(catalog):
    assert catalog.search_by_name(None) == []
    assert catalog.search_by_name('') == []
    assert catalog.search_by_name('   ') == []


def test_search_by_genre(catalog):
    assert len(catalog.search_by_genre('Drama')) == 2
    assert titles(catalog.search_by_genre('Crime')) == ['The Family Boss']
    assert titles(catalog.search_by_genre('sci-fi')) == ['Space Adventure']
    assert catalog.search_by_genre('Horror') == []


def test_search_by_genre_blank_input(catalog):
    assert catalog.search_by_genre(None) == []
    assert catalog.search_by_genre('') == []
    assert catalog.search_by_genre('   ') == []


def test_combined_search(catalog):
    assert titles(catalog.search('Prison', None, None)) == ['The Prison Escape']
    assert titles(catalog.search(None, 2, None)) == ['The Family Boss']
    assert titles(catalog.search(None, None, 'Sci-Fi')) == ['Space Adventure']
    assert titles(catalog.search('The', None, 'Drama')) == ['The Prison Escape', 'The Family Boss']
    assert catalog.search('Prison', None, 'Sci-Fi') == []


def test_combined_search_trims_and_ignores_case(catalog):
    assert titles(catalog.search('  space ', None, '  SCI  ')) == ['Space Adventure']


def test_combined_search_id_is_exact(catalog):
    assert catalog.search(None, 4, None) == []
    assert catalog.search('Prison', 2, None) == []


def test_combined_search_ignores_non_positive_id(catalog, movies):
    assert catalog.search(None, -1, None) == movies
    assert catalog.search(None, 0, None) == movies


def test_combined_search_without_criteria_returns_everything(catalog, movies):
    assert catalog.search() == movies
    assert catalog.search(None, None, None) == movies
    assert catalog.search('', None, '') == movies
    assert catalog.search('  ', None, '\t') == movies


def test_search_is_repeatable(catalog):
    first = catalog.search('the', None, 'drama')
    second = catalog.search('the', None, 'drama')
    assert first == second


def test_get_by_id(catalog):
    assert catalog.get_by_id(1).title == 'The Prison Escape'
    assert catalog.get_by_id(999) is None
    assert catalog.get_by_id(None) is None
    assert catalog.get_by_id(0) is None
    assert catalog.get_by_id(-1) is None


def test_get_all_preserves_order(catalog):
    assert titles(catalog.get_all()) == ['The Prison Escape', 'The Family Boss', 'Space Adventure']


def test_get_all_returns_a_copy(catalog):
    catalog.get_all().clear()
    assert len(catalog.get_all()) == 3


def test_duplicate_ids_last_entry_wins():
    first = Movie(7, 'First', 'A', 2000, 'Drama', '', 90, 3.0)
    second = Movie(7, 'Second', 'B', 2001, 'Drama', '', 95, 4.0)
    catalog = MovieCatalog([first, second])

    assert catalog.get_by_id(7) is second
    assert len(catalog.get_all()) == 2


def test_movie_dict_uses_data_file_field_names(movies):
    assert movies[0].to_dict() == {
        'id': 1,
        'movieName': 'The Prison Escape',
        'director': 'John Director',
        'year': 1994,
        'genre': 'Drama',
        'description': 'A tale of redemption',
        'duration': 142,
        'imdbRating': 5.0
    }


def test_load_movies_reads_json_file(tmp_path):
    path = tmp_path / 'movies.json'
    path.write_text(json.dumps([
        {'id': 5, 'movieName': 'Ocean Mystery', 'director': 'Sarah Storyteller', 'year': 2015,
         'genre': 'Mystery', 'description': 'A secret reef.', 'duration': 118, 'imdbRating': 3.5},
        {'id': 2, 'movieName': 'Robot Friends', 'director': 'Pete Animator', 'year': 2018,
         'genre': 'Animation', 'description': 'A lonely robot.', 'duration': 96, 'imdbRating': 4}
    ]), encoding='utf-8')

    movies = load_movies(str(path))

    assert [movie.id for movie in movies] == [5, 2]
    assert movies[1].rating == 4.0
    assert isinstance(movies[1].rating, float)


def test_load_movies_missing_file_gives_empty_catalog(tmp_path):
    catalog = MovieCatalog.from_json_file(str(tmp_path / 'missing.json'))

    assert len(catalog) == 0
    assert catalog.search() == []


def test_load_movies_invalid_json_gives_empty_catalog(tmp_path):
    path = tmp_path / 'movies.json'
    path.write_text('[{"id": 1, ', encoding='utf-8')

    assert load_movies(str(path)) == []


def test_load_movies_malformed_entry_discards_everything(tmp_path):
    path = tmp_path / 'movies.json'
    path.write_text(json.dumps([
        {'id': 1, 'movieName': 'Complete', 'director': 'A', 'year': 2000,
         'genre': 'Drama', 'description': 'ok', 'duration': 100, 'imdbRating': 4.0},
        {'id': 2, 'movieName': 'Missing fields'}
    ]), encoding='utf-8')

    assert load_movies(str(path)) == []


def test_load_movies_rejects_non_array(tmp_path):
    path = tmp_path / 'movies.json'
    path.write_text('{"movies": []}', encoding='utf-8')

    assert load_movies(str(path)) == []


def test_load_movies_non_string_text_field_discards_everything(tmp_path):
    path = tmp_path / 'movies.json'
    path.write_text(json.dumps([
        {'id': 1, 'movieName': None, 'director': None, 'year': 2000,
         'genre': 'Drama', 'description': 'ok', 'duration': 100, 'imdbRating': 4.0},
        {'id': 2, 'movieName': 42, 'director': 'B', 'year': 2001,
         'genre': 'Drama', 'description': 'ok', 'duration': 100, 'imdbRating': 4.0}
    ]), encoding='utf-8')

    assert load_movies(str(path)) == []
