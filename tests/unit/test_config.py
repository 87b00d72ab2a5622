import pytest

from keyed_di.config import Settings, get_settings


def test_defaults():
    s = get_settings()
    assert s.on_duplicate == "overwrite"
    assert s.log_level == "WARNING"
    assert s.json_logs is False
    assert get_settings() is s


def test_log_level_normalised():
    assert Settings(log_level=" debug ").log_level == "DEBUG"


@pytest.mark.parametrize("kwargs", [{"log_level": "verbose"}, {"on_duplicate": "ignore"}])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)


def test_safe_dict():
    assert Settings(on_duplicate="error").safe_dict() == {
        "log_level": "WARNING",
        "json_logs": False,
        "on_duplicate": "error",
    }
