"""Tests for ModelPresenter.as_datetime."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from sample_models import Article, UserPresenter

from model_presenter.config import get_config


class TestAsDatetime:
    """Date-like values become datetimes."""

    def test_formats_iso_date_string(self, presenter: UserPresenter):
        assert presenter.as_datetime("2024-01-15").strftime("%B %d, %Y") == "January 15, 2024"

    def test_string_gets_configured_timezone(self, presenter: UserPresenter):
        value = presenter.as_datetime("2024-01-15T10:30:00")

        assert value.tzinfo is not None
        assert value.utcoffset() == timedelta(0)
        assert (value.hour, value.minute) == (10, 30)

    def test_string_keeps_its_own_offset(self, presenter: UserPresenter):
        value = presenter.as_datetime("2024-01-15T10:30:00+02:00")
        assert value.utcoffset() == timedelta(hours=2)

    def test_none_means_now(self, presenter: UserPresenter):
        before = datetime.now(UTC)
        value = presenter.as_datetime()
        after = datetime.now(UTC)

        assert value.tzinfo is not None
        assert before <= value <= after

    def test_datetime_passes_through(self, presenter: UserPresenter):
        value = datetime(2024, 1, 15, 8, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert presenter.as_datetime(value) is value

    def test_naive_datetime_stays_naive(self, presenter: UserPresenter):
        value = datetime(2024, 1, 15, 8, 0)
        assert presenter.as_datetime(value).tzinfo is None

    def test_date_becomes_midnight(self, presenter: UserPresenter):
        value = presenter.as_datetime(date(2024, 1, 15))

        assert value == datetime(2024, 1, 15, tzinfo=UTC)
        assert value.utcoffset() == timedelta(0)

    def test_date_and_string_agree(self, presenter: UserPresenter):
        from_date = presenter.as_datetime(date(2024, 1, 15))
        from_string = presenter.as_datetime("2024-01-15")

        assert from_date == from_string
        assert from_date.tzinfo == from_string.tzinfo
        assert from_date < presenter.as_datetime("2024-01-16")

    def test_date_without_timezone_stays_naive(
        self, presenter: UserPresenter, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("MODEL_PRESENTER_TIMEZONE", "")
        get_config.cache_clear()

        assert presenter.as_datetime(date(2024, 1, 15)) == datetime(2024, 1, 15)

    def test_configured_timezone(self, presenter: UserPresenter, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MODEL_PRESENTER_TIMEZONE", "Europe/Berlin")
        get_config.cache_clear()

        value = presenter.as_datetime("2024-01-15T12:00:00")
        assert value.utcoffset() == timedelta(hours=1)

    def test_empty_timezone_keeps_naive(
        self, presenter: UserPresenter, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("MODEL_PRESENTER_TIMEZONE", "")
        get_config.cache_clear()

        assert presenter.as_datetime("2024-01-15").tzinfo is None
        assert presenter.as_datetime().tzinfo is None

    def test_invalid_string(self, presenter: UserPresenter):
        with pytest.raises(ValueError):
            presenter.as_datetime("not a date")


class TestPresenterHelpers:
    """View helpers built on as_datetime."""

    def test_published_on(self):
        article = Article(title="Launch", published_at=datetime(2024, 3, 1, 9, 0))
        assert article.present().published_on() == "March 01, 2024"
