from movie_graph.favorites import resolve_favorites


def test_no_user_returns_empty_set_without_a_read(fake_tx):
    tx = fake_tx([("HAS_FAVORITE", [{"id": "769"}])])

    assert resolve_favorites(tx, None) == frozenset()
    assert resolve_favorites(tx, "") == frozenset()
    assert tx.calls == []


def test_user_favorites_are_collected_into_a_set(fake_tx):
    tx = fake_tx([("HAS_FAVORITE", [{"id": "769"}, {"id": "680"}, {"id": "769"}])])

    favorites = resolve_favorites(tx, "user-1")

    assert favorites == frozenset({"769", "680"})
    assert len(tx.calls) == 1
    query, params = tx.calls[0]
    assert "(:User {userId: $userId})-[:HAS_FAVORITE]->" in query
    assert params == {"userId": "user-1"}


def test_unknown_user_yields_empty_set(fake_tx):
    tx = fake_tx([])

    assert resolve_favorites(tx, "ghost") == frozenset()


def test_null_ids_are_ignored(fake_tx):
    tx = fake_tx([("HAS_FAVORITE", [{"id": None}, {"id": "13"}])])

    assert resolve_favorites(tx, "user-1") == frozenset({"13"})
