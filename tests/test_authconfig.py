import json

import orjson
import pytest

from talk2m import AuthConfig, AuthInfo, InvalidConfigError, Talk2MException

from .conftest import ACCOUNT_VALUES, DEVICE_VALUES, load_fixture

CONFIG = AuthConfig(*ACCOUNT_VALUES)
DEVICE_CONFIG = AuthConfig(*ACCOUNT_VALUES, *DEVICE_VALUES)


@pytest.mark.parametrize(
    ("fixture_name", "expected_value"),
    [
        ("authconfig.json", DEVICE_CONFIG),
        ("authconfig-no-device.json", CONFIG),
    ],
    ids=["device", "no-device"],
)
def test_deserialization(fixture_name: str, expected_value: AuthConfig):
    """Test credential config deserialization."""
    dict_val = json.loads(load_fixture(fixture_name))
    config = AuthConfig.load(dict_val)
    assert config == expected_value
    assert expected_value.to_dict() == dict_val
    assert AuthConfig.load(load_fixture(fixture_name)) == expected_value


def test_serialization():
    """Test credential config serialization."""
    config_json = DEVICE_CONFIG.to_json()
    assert orjson.loads(config_json)["device_username"] == "dusr"
    assert AuthConfig.from_json(config_json) == DEVICE_CONFIG
    assert "device_username" not in CONFIG.to_dict()
    assert CONFIG.to_dict_control_secrets() == CONFIG.to_dict()


def test_exclude_secrets():
    config_dict = DEVICE_CONFIG.to_dict_control_secrets(exclude_secrets=True)
    assert config_dict == {
        "account": "My Co",
        "username": "bob",
        "developer_id": "dev1",
        "device_username": "dusr",
    }


@pytest.mark.parametrize(
    "input_value",
    [
        {"account": "My Co"},
        "foobar",
        b"[1, 2]",
        "{}",
    ],
    ids=["missing-fields", "not-json", "not-dict", "empty"],
)
def test_load_errors(input_value):
    with pytest.raises(InvalidConfigError, match="Invalid credential configuration"):
        AuthConfig.load(input_value)


def test_invalid_config_is_library_error():
    with pytest.raises(Talk2MException):
        AuthConfig.load("foobar")


def test_from_values():
    assert AuthConfig.from_values(*ACCOUNT_VALUES) == CONFIG
    assert AuthConfig.from_values(*ACCOUNT_VALUES, *DEVICE_VALUES) == DEVICE_CONFIG
    config = AuthConfig.from_values(*ACCOUNT_VALUES, "", "")
    assert config.device_username is None
    assert config.device_password is None


def test_from_values_missing():
    with pytest.raises(InvalidConfigError, match="password, token"):
        AuthConfig.from_values("My Co", "bob", None, "dev1", "")


def test_has_device_credentials():
    assert DEVICE_CONFIG.has_device_credentials is True
    assert CONFIG.has_device_credentials is False
    assert AuthConfig(*ACCOUNT_VALUES, "dusr", " ").has_device_credentials is False


def test_to_auth_info(caplog):
    auth = DEVICE_CONFIG.to_auth_info()
    assert isinstance(auth, AuthInfo)
    assert auth == AuthInfo(*ACCOUNT_VALUES, *DEVICE_VALUES)
    assert auth.password == "p%40ss"
    assert "incomplete" not in caplog.text


def test_to_auth_info_incomplete_device(caplog):
    config = AuthConfig(*ACCOUNT_VALUES, device_username="dusr")
    auth = config.to_auth_info()
    assert auth.device_credentials is None
    assert "Device credentials for account My Co are incomplete" in caplog.text
