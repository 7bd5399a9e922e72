"""
Configuration Unit Tests
Tests for owo/config/settings.py
"""

import pytest

from owo import constants
from owo.config import OwoConfig


class TestOwoConfig:
    """Tests for OwoConfig."""

    def test_defaults(self):
        """Defaults point at the public API."""
        config = OwoConfig()

        assert config.upload_url == "https://api.awau.moe/upload/pomf"
        assert config.shorten_url == "https://api.awau.moe/shorten/polr"
        assert config.max_files == constants.MAX_FILES == 3
        assert config.user_agent == constants.USER_AGENT

    def test_from_dict_ignores_unknown(self):
        """Unknown keys are dropped, known keys applied."""
        config = OwoConfig.from_dict({
            "api_base": "https://mirror.example/",
            "max_files": 1,
            "timeout": 30,
        })

        assert config.upload_url == "https://mirror.example/upload/pomf"
        assert config.max_files == 1

    def test_to_dict_round_trip(self):
        """to_dict output rebuilds the same config."""
        config = OwoConfig(api_base="http://localhost", user_agent="test/1.0")

        assert OwoConfig.from_dict(config.to_dict()) == config

    def test_invalid_max_files(self):
        """max_files must be positive."""
        with pytest.raises(ValueError):
            OwoConfig(max_files=0)

    def test_user_agent_format(self):
        """The user agent names the client and its version."""
        assert constants.USER_AGENT.startswith("WhatsThisClient (")
        assert constants.__version__ in constants.USER_AGENT
