"""Tests for pagination math."""

from app.services.members import paginate, total_pages


class TestTotalPages:
    def test_rounds_up(self):
        assert total_pages(53, 25) == 3

    def test_exact(self):
        assert total_pages(50, 25) == 2

    def test_empty(self):
        assert total_pages(0, 25) == 0


class TestPaginate:
    def test_last_page(self):
        p = paginate(53, 3, 25)
        assert p.total_pages == 3
        assert p.has_next is False
        assert p.has_prev is True

    def test_first_page(self):
        p = paginate(53, 1, 25)
        assert p.has_prev is False
        assert p.has_next is True

    def test_middle_page(self):
        p = paginate(53, 2, 25)
        assert p.has_prev and p.has_next

    def test_fields(self):
        p = paginate(53, 2, 25)
        assert p.to_dict() == {
            "current_page": 2,
            "total_pages": 3,
            "total_items": 53,
            "page_size": 25,
            "has_next": True,
            "has_prev": True,
        }

    def test_no_results(self):
        p = paginate(0, 1, 25)
        assert p.total_pages == 0
        assert not p.has_next and not p.has_prev
