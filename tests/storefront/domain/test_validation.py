"""Tests for shared field checks."""

import uuid

import pytest
from storefront.shared.validation import check_comment, check_id, check_rating


class TestCheckRating:
    @pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
    def test_star_values_accepted(self, rating):
        assert check_rating(rating) is True

    @pytest.mark.parametrize("rating", [0, 6, -1, 3.5, "3", None, True])
    def test_other_values_rejected(self, rating):
        assert check_rating(rating) is False


class TestCheckComment:
    def test_ten_characters_accepted(self):
        assert check_comment("a" * 10) is True

    def test_nine_characters_rejected(self):
        assert check_comment("a" * 9) is False

    def test_none_rejected(self):
        assert check_comment(None) is False


class TestCheckId:
    def test_uuid_accepted(self):
        assert check_id(str(uuid.uuid4())) is True

    def test_uuid_object_accepted(self):
        assert check_id(uuid.uuid4()) is True

    @pytest.mark.parametrize("value", ["", "not-an-id", "12345", None])
    def test_malformed_rejected(self, value):
        assert check_id(value) is False
