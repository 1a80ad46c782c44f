"""
Tests for Client Configuration
"""

import pytest

from src.yaplab import ClientConfig
from src.yaplab.config import DEFAULT_API_URL, DEFAULT_TIMEOUT


def test_defaults_from_empty_environment():
    config = ClientConfig.from_env({})
    assert config.api_url == DEFAULT_API_URL
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.session_file.endswith("session.json")
    assert config.log_level == "WARNING"


def test_values_from_environment():
    config = ClientConfig.from_env(
        {
            "YAPLAB_API_URL": "https://chat.example.com",
            "YAPLAB_TIMEOUT": "2.5",
            "YAPLAB_SESSION_FILE": "/tmp/yaplab.json",
            "YAPLAB_LOG_FILE": "/tmp/yaplab.log",
            "YAPLAB_LOG_LEVEL": "debug",
        }
    )
    assert config.api_url == "https://chat.example.com"
    assert config.timeout == 2.5
    assert config.session_file == "/tmp/yaplab.json"
    assert config.log_file == "/tmp/yaplab.log"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_invalid_timeout(value):
    with pytest.raises(ValueError):
        ClientConfig.from_env({"YAPLAB_TIMEOUT": value})
