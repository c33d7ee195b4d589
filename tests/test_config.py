from mcwss.config import Config, default_config


def test_default_config_handler_pattern():
    assert default_config().handler_pattern == "/ws"


def test_default_config_address():
    assert default_config().address == ":8000"


def test_default_config_equals_bare_config():
    assert default_config() == Config()


def test_default_config_returns_fresh_instances():
    first = default_config()
    first.address = ":9000"
    assert default_config().address == ":8000"


def test_custom_config_keeps_values():
    config = Config(handler_pattern="/game", address="localhost:1234")
    assert (config.handler_pattern, config.address) == ("/game", "localhost:1234")
    assert config != default_config()