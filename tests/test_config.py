"""Tests for catalog configuration.

These tests demonstrate:
1. Default value behavior
2. Environment variable loading
3. Validation of bad values
4. The global configuration singleton
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from library_catalog.config import CatalogConfig, get_config, reset_config


class TestCatalogConfig:
    """Test catalog configuration behavior."""

    def test_default_configuration(self):
        config = CatalogConfig()

        assert config.overdue_threshold_days == 14
        assert config.reject_duplicate_ids is True
        assert config.repeated_word_min_count == 2
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.effective_log_level == "INFO"

    def test_environment_variable_loading(self):
        env_vars = {
            "LIBRARY_CATALOG_OVERDUE_THRESHOLD_DAYS": "7",
            "LIBRARY_CATALOG_REJECT_DUPLICATE_IDS": "false",
            "LIBRARY_CATALOG_REPEATED_WORD_MIN_COUNT": "3",
            "LIBRARY_CATALOG_LOG_LEVEL": "warning",
        }

        with patch.dict(os.environ, env_vars):
            config = CatalogConfig()

            assert config.overdue_threshold_days == 7
            assert config.reject_duplicate_ids is False
            assert config.repeated_word_min_count == 3
            assert config.log_level == "WARNING"

    def test_debug_overrides_log_level(self):
        config = CatalogConfig(debug=True, log_level="ERROR")
        assert config.effective_log_level == "DEBUG"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("overdue_threshold_days", -1),
            ("repeated_word_min_count", 0),
            ("log_level", "VERBOSE"),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            CatalogConfig(**{field: value})

        errors = exc_info.value.errors()
        assert any(error["loc"] == (field,) for error in errors)


class TestConfigSingleton:
    """Test the global configuration instance."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config(self):
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_reads_environment_on_first_use(self):
        with patch.dict(os.environ, {"LIBRARY_CATALOG_OVERDUE_THRESHOLD_DAYS": "30"}):
            reset_config()
            assert get_config().overdue_threshold_days == 30
