"""Tests for config validation."""

import pytest

from ats_checker.config import load_config


class TestConfigValidation:
    def test_invalid_max_file_size(self, tmp_path):
        """max_file_size_mb above 100 raises ValueError."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("input:\n  max_file_size_mb: 500\n")
        with pytest.raises(ValueError, match="max_file_size_mb"):
            load_config(yaml)

    def test_invalid_highlighted_keywords(self, tmp_path):
        """max_highlighted_keywords of 0 (below minimum of 1) raises ValueError."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("suggestions:\n  max_highlighted_keywords: 0\n")
        with pytest.raises(ValueError, match="max_highlighted_keywords"):
            load_config(yaml)

    def test_invalid_percent_per_keyword(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("suggestions:\n  percent_per_keyword: 99\n")
        with pytest.raises(ValueError, match="percent_per_keyword"):
            load_config(yaml)

    def test_invalid_log_level(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="level"):
            load_config(yaml)

    def test_unknown_key(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("input:\n  max_pages: 3\n")
        with pytest.raises(TypeError):
            load_config(yaml)
