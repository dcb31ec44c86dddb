"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Cinelist API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.host == "0.0.0.0"
        assert settings.backend == "supabase"
        assert settings.users_table == "users"
        assert settings.movies_table == "movies"
        assert settings.catalog_scan_batch_size == 100
        assert settings.catalog_max_scan_items == 5000
        assert settings.catalog_legacy_scan is False

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_catalog_settings_from_env(self):
        """Catalog scanning knobs should be configurable."""
        with patch.dict(os.environ, {
            "CATALOG_SCAN_BATCH_SIZE": "25",
            "CATALOG_MAX_SCAN_ITEMS": "1000",
            "CATALOG_LEGACY_SCAN": "true",
        }):
            settings = Settings()
            assert settings.catalog_scan_batch_size == 25
            assert settings.catalog_max_scan_items == 1000
            assert settings.catalog_legacy_scan is True

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_ANON_KEY": "test-anon-key",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings()
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_anon_key == "test-anon-key"
            assert settings.supabase_service_role_key == "test-service-key"

    @pytest.mark.parametrize(
        "field", ["catalog_scan_batch_size", "catalog_max_scan_items"]
    )
    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive_scan_sizes(self, field, value):
        """A scan batch or ceiling below 1 would never make progress."""
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, **{field: value})

    def test_rejects_non_positive_scan_size_from_env(self):
        with patch.dict(os.environ, {"CATALOG_SCAN_BATCH_SIZE": "0"}):
            with pytest.raises(PydanticValidationError):
                Settings()

    def test_rejects_unknown_backend(self):
        """Only supabase and memory backends exist."""
        with pytest.raises(Exception):
            Settings(backend="dynamodb")


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
