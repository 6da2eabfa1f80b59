"""Tests for version lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError

import pytest

import model_presenter
from model_presenter import _version


class TestGetVersion:
    """Distribution metadata lookup."""

    def test_package_exposes_version(self):
        assert model_presenter.__version__ == _version.get_version()

    def test_reads_installed_metadata(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(_version, "version", lambda name: "9.9.9")
        assert _version.get_version() == "9.9.9"

    def test_falls_back_without_distribution(self, monkeypatch: pytest.MonkeyPatch):
        def missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(_version, "version", missing)
        assert _version.get_version() == "0.0.0"
