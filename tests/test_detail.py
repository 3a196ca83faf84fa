import pytest
from neo4j.time import Date

from movie_graph.detail import fetch_detail
from movie_graph.errors import NotFoundError


def _goodfellas(**overrides):
    movie = {
        "tmdbId": "769",
        "title": "Goodfellas",
        "released": Date(1990, 9, 19),
        "actors": ["Robert De Niro", "Ray Liotta", "Robert De Niro", "Joe Pesci"],
        "directors": ["Martin Scorsese", "Martin Scorsese"],
        "genres": ["Crime", "Drama", "Crime"],
        "ratingCount": 2,
    }
    movie.update(overrides)
    return movie


def test_detail_aggregates_distinct_relation_names(fake_tx):
    tx = fake_tx([("MATCH (m:Movie {tmdbId: $id})", [{"movie": _goodfellas()}])])

    movie = fetch_detail(tx, "769", frozenset())

    assert movie["actors"] == ["Robert De Niro", "Ray Liotta", "Joe Pesci"]
    assert movie["directors"] == ["Martin Scorsese"]
    assert movie["genres"] == ["Crime", "Drama"]
    assert movie["ratingCount"] == 2
    assert movie["released"].year == 1990
    assert tx.calls[0][1] == {"id": "769"}


def test_detail_query_counts_incoming_ratings():
    from movie_graph.detail import DETAIL_QUERY

    assert "ratingCount: COUNT { (m)<-[:RATED]-(:User) }" in DETAIL_QUERY
    assert "(m)<-[:ACTED_IN]-(actor:Person)" in DETAIL_QUERY
    assert "(m)<-[:DIRECTED]-(director:Person)" in DETAIL_QUERY
    assert "(m)-[:IN_GENRE]->(genre:Genre)" in DETAIL_QUERY


def test_detail_rating_count_can_be_zero(fake_tx):
    row = {"movie": _goodfellas(ratingCount=0, actors=[], directors=[], genres=[])}
    tx = fake_tx([("MATCH (m:Movie", [row])])

    movie = fetch_detail(tx, "769", frozenset())

    assert movie["ratingCount"] == 0
    assert movie["actors"] == []


@pytest.mark.parametrize("favorites, expected", [(frozenset({"769"}), True), (frozenset({"680"}), False)])
def test_detail_favorite_flag(fake_tx, favorites, expected):
    tx = fake_tx([("MATCH (m:Movie", [{"movie": _goodfellas()}])])

    assert fetch_detail(tx, "769", favorites)["favorite"] is expected


def test_detail_returns_a_single_record(fake_tx):
    tx = fake_tx([("MATCH (m:Movie", [{"movie": _goodfellas()}])])

    assert isinstance(fetch_detail(tx, "769", frozenset()), dict)


def test_missing_movie_raises_not_found(fake_tx):
    tx = fake_tx([])

    with pytest.raises(NotFoundError) as exc:
        fetch_detail(tx, "does-not-exist", frozenset())

    assert exc.value.movie_id == "does-not-exist"
