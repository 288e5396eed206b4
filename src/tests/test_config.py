"""Tests for API key lookup."""

import logging

from calendarific import config


class TestGetApiKey:

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('CALENDARIFIC_API_KEY', 'env-key-12345')
        assert config.get_api_key() == 'env-key-12345'

    def test_missing(self):
        assert config.get_api_key() is None

    def test_blank(self, monkeypatch):
        monkeypatch.setenv('CALENDARIFIC_API_KEY', '   ')
        assert config.get_api_key() is None

    def test_strips_whitespace(self, monkeypatch):
        monkeypatch.setenv('CALENDARIFIC_API_KEY', ' env-key-12345\n')
        assert config.get_api_key() == 'env-key-12345'

    def test_placeholder_rejected(self, monkeypatch, caplog):
        monkeypatch.setenv('CALENDARIFIC_API_KEY', 'your_api_key_here')

        with caplog.at_level(logging.WARNING):
            assert config.get_api_key() is None

        assert "placeholder" in caplog.text
        assert "your_api_key_here" not in caplog.text

    def test_custom_key_name(self, monkeypatch):
        monkeypatch.setenv('OTHER_KEY', 'other-12345')
        assert config.get_api_key('OTHER_KEY') == 'other-12345'
