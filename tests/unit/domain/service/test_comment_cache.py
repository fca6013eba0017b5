"""Unit tests for CommentCache."""

from margin.domain.service import CommentCache


class TestCommentCache:
    """Tests for the comment page cache."""

    def test_miss_returns_none(self):
        cache = CommentCache()

        assert cache.get("/post/1", 1) is None
        assert cache.stats()["misses"] == 1

    def test_put_then_get(self):
        # Arrange
        cache = CommentCache()
        payload = {"count": 1, "data": [{"objectId": 1}]}

        # Act
        cache.put("/post/1", 1, payload)

        # Assert
        assert cache.get("/post/1", 1) == payload
        assert cache.stats() == {"entries": 1, "hits": 1, "misses": 0}

    def test_pages_are_cached_separately(self):
        cache = CommentCache()
        cache.put("/post/1", 1, {"page": 1})

        assert cache.get("/post/1", 2) is None

    def test_returned_payload_is_a_copy(self):
        """Mutating a served page must not change the cached one."""
        cache = CommentCache()
        cache.put("/post/1", 1, {"data": [{"objectId": 1}]})

        served = cache.get("/post/1", 1)
        served["data"].append({"objectId": 2})

        assert cache.get("/post/1", 1) == {"data": [{"objectId": 1}]}

    def test_stored_payload_is_a_copy(self):
        cache = CommentCache()
        payload = {"data": []}
        cache.put("/post/1", 1, payload)

        payload["data"].append("late")

        assert cache.get("/post/1", 1) == {"data": []}

    def test_invalidate_drops_every_page_of_exact_path(self):
        # Arrange
        cache = CommentCache()
        cache.put("/post/1", 1, {})
        cache.put("/post/1", 2, {})
        cache.put("/post/10", 1, {})

        # Act
        removed = cache.invalidate("/post/1")

        # Assert
        assert removed == 2
        assert cache.get("/post/1", 1) is None
        assert cache.get("/post/10", 1) == {}

    def test_clear_empties_cache(self):
        cache = CommentCache()
        cache.put("/a", 1, {})
        cache.put("/b", 1, {})

        cache.clear()

        assert len(cache) == 0

    def test_invalidate_matching_drops_paths_contained_in_url(self):
        # Arrange
        cache = CommentCache()
        cache.put("/post/1", 1, {})
        cache.put("/post/10", 2, {})
        cache.put("/post/2", 1, {})

        # Act
        removed = cache.invalidate_matching("/post/10")

        # Assert
        assert removed == 2
        assert cache.get("/post/1", 1) is None
        assert cache.get("/post/10", 2) is None
        assert cache.get("/post/2", 1) == {}

    def test_put_with_current_generation_is_stored(self):
        cache = CommentCache()
        generation = cache.generation

        stored = cache.put("/post/1", 1, {"count": 1}, generation=generation)

        assert stored is True
        assert cache.get("/post/1", 1) == {"count": 1}

    def test_put_after_invalidation_is_discarded(self):
        """A page assembled before a write must not land after it."""
        # Arrange
        cache = CommentCache()
        generation = cache.generation

        # Act
        cache.invalidate("/post/1")
        stored = cache.put("/post/1", 1, {"count": 0}, generation=generation)

        # Assert
        assert stored is False
        assert len(cache) == 0

    def test_clear_advances_generation(self):
        cache = CommentCache()
        generation = cache.generation

        cache.clear()

        assert cache.generation == generation + 1
