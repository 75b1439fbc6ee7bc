"""Tests for settings parsing and validation."""

from cuecards.settings import DEFAULT_COPY_RESET_SECONDS, Settings, parse_number


class TestParseNumber:

    def test_valid(self):
        assert parse_number("2.5") == 2.5
        assert parse_number("40", int) == 40

    def test_invalid_is_none(self):
        assert parse_number("two seconds") is None
        assert parse_number(None) is None
        assert parse_number("nan") is None
        assert parse_number("1.5", int) is None


class TestValidate:

    def test_defaults_are_valid(self):
        settings = Settings()
        settings.COPY_RESET_SECONDS = 2.0
        settings.MAX_OPEN_VIEWS = 500
        settings.CLIPBOARD_HISTORY = 20
        assert "COPY_RESET_SECONDS" not in settings.validate()

    def test_bad_reset_delay_reported_not_raised(self):
        settings = Settings()
        settings.COPY_RESET_SECONDS = parse_number("soon")
        assert "COPY_RESET_SECONDS" in settings.validate()
        assert settings.copy_reset_seconds == DEFAULT_COPY_RESET_SECONDS

    def test_bad_limits_reported(self):
        settings = Settings()
        settings.MAX_OPEN_VIEWS = 0
        settings.CLIPBOARD_HISTORY = None
        problems = settings.validate()
        assert "MAX_OPEN_VIEWS" in problems
        assert "CLIPBOARD_HISTORY" in problems
