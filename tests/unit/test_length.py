"""Unit tests for the length guard."""

from resumegate.security.length import MAX_CHARS, check_length, estimate_pages


class TestCheckLength:
    """Tests for check_length."""

    def test_exactly_max_chars_passes(self) -> None:
        assert check_length("a" * MAX_CHARS).valid is True

    def test_one_over_max_chars_fails(self) -> None:
        result = check_length("a" * (MAX_CHARS + 1))
        assert result.valid is False
        assert result.reason is not None

    def test_reason_names_counts_and_pages(self) -> None:
        result = check_length("a" * 250_000)
        assert "250,000 characters" in result.reason
        assert "approximately 38 pages" in result.reason
        assert "200,000 characters" in result.reason

    def test_custom_limit(self) -> None:
        assert check_length("abcdef", max_chars=5).valid is False
        assert check_length("abcde", max_chars=5).valid is True

    def test_empty_text_passes(self) -> None:
        assert check_length("").valid is True


class TestEstimatePages:
    """Tests for estimate_pages."""

    def test_rounds_up(self) -> None:
        assert estimate_pages(1) == 1
        assert estimate_pages(6_700) == 1
        assert estimate_pages(6_701) == 2

    def test_default_limit_is_thirty_pages(self) -> None:
        assert estimate_pages(MAX_CHARS) == 30
