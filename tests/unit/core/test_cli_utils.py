"""
Tests for the shared CLI helpers.
"""
import pytest
from pathlib import Path

from eipv.core.cli_utils import load_config, setup_logger, split_csv
from eipv.core.exceptions import ConfigurationError
from eipv.core.logging_manager import EipvLogger


class TestSplitCsv:
    """Tests for split_csv."""

    def test_string(self):
        assert split_csv("a, b ,c") == ["a", "b", "c"]

    def test_drops_empty_items(self):
        assert split_csv(",a,,b,") == ["a", "b"]

    def test_iterable(self):
        assert split_csv(("a,b", "c")) == ["a", "b", "c"]

    def test_none(self):
        assert split_csv(None) == []


class TestLoadConfig:
    """Tests for YAML config loading."""

    def write(self, tmp_path, content):
        path = tmp_path / "eipv.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_lists(self, tmp_path):
        path = self.write(
            tmp_path,
            "ignore:\n  - title_max_length\n  - missing_discussions_to\nskip: [eip-20.md]\n",
        )
        assert load_config(path) == {
            "ignore": ["title_max_length", "missing_discussions_to"],
            "skip": ["eip-20.md"],
        }

    def test_comma_string(self, tmp_path):
        path = self.write(tmp_path, "ignore: title_max_length, unknown_status\n")
        config = load_config(path)
        assert config["ignore"] == ["title_max_length", "unknown_status"]
        assert config["skip"] == []

    def test_empty_file(self, tmp_path):
        assert load_config(self.write(tmp_path, "")) == {"ignore": [], "skip": []}

    @pytest.mark.parametrize(
        "content",
        [
            "- just\n- a list\n",
            "ignored: [title_max_length]\n",
            "ignore: 5\n",
            "ignore: [unclosed\n",
        ],
    )
    def test_invalid(self, tmp_path, content):
        with pytest.raises(ConfigurationError):
            load_config(self.write(tmp_path, content))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "nope.yaml")


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_creates_operations_dir(self, tmp_path):
        logger = setup_logger(tmp_path, "validate")
        try:
            assert isinstance(logger, EipvLogger)
            assert (tmp_path / "operations").is_dir()
            assert logger.log_dir == tmp_path / "operations"
        finally:
            logger.close()
