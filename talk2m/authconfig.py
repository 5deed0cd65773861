"""Plaintext credential configuration that can be stored and loaded.

:class:`AuthConfig` keeps the values as entered by the user so it can be
serialized, while :class:`~talk2m.credentials.AuthInfo` holds the url encoded
values used in requests:

>>> from talk2m import AuthConfig
>>> config = AuthConfig.load(
>>>     {
>>>         "account": "My Co",
>>>         "username": "bob",
>>>         "password": "p@ss",
>>>         "developer_id": "dev1",
>>>         "token": "tok1",
>>>     }
>>> )
>>> config.to_auth_info().to_device_proxy_post_string()
'account=My+Co&username=bob&password=p%40ss&devkey=dev1'

>>> print(config.to_dict_control_secrets(exclude_secrets=True))
{'account': 'My Co', 'username': 'bob', 'developer_id': 'dev1'}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from mashumaro.config import BaseConfig
from mashumaro.exceptions import InvalidFieldValue, MissingField
from mashumaro.mixins.orjson import DataClassORJSONMixin

from .credentials import AuthInfo
from .exceptions import InvalidConfigError

_LOGGER = logging.getLogger(__name__)

SECRET_FIELDS = ("password", "token", "device_password")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass
class AuthConfig(DataClassORJSONMixin):
    """Class to hold the plaintext Talk2M credentials."""

    class Config(BaseConfig):
        """Serialization config."""

        omit_none = True

    #: Talk2M account name
    account: str
    #: Talk2M account username
    username: str
    #: Talk2M account password
    password: str = field(repr=False)
    #: Talk2M developer ID
    developer_id: str
    #: Talk2M token
    token: str = field(repr=False)
    #: Username of the Ewon device to access through M2Web
    device_username: str | None = None
    #: Password of the Ewon device to access through M2Web
    device_password: str | None = field(default=None, repr=False)

    @staticmethod
    def from_values(
        account: str | None,
        username: str | None,
        password: str | None,
        developer_id: str | None,
        token: str | None,
        device_username: str | None = None,
        device_password: str | None = None,
    ) -> AuthConfig:
        """Return a config from loose values, raising if one is missing."""
        required = {
            "account": account,
            "username": username,
            "password": password,
            "developer_id": developer_id,
            "token": token,
        }
        if missing := [name for name, value in required.items() if not value]:
            raise InvalidConfigError(
                f"Missing required credential values: {', '.join(missing)}"
            )
        return AuthConfig(
            account,  # type: ignore[arg-type]
            username,  # type: ignore[arg-type]
            password,  # type: ignore[arg-type]
            developer_id,  # type: ignore[arg-type]
            token,  # type: ignore[arg-type]
            device_username or None,
            device_password or None,
        )

    @classmethod
    def load(cls, data: dict[str, Any] | str | bytes) -> AuthConfig:
        """Load a config from a dict or a json document."""
        try:
            if isinstance(data, dict):
                return cls.from_dict(data)
            return cls.from_json(data)
        except (MissingField, InvalidFieldValue, ValueError, TypeError) as ex:
            raise InvalidConfigError(
                f"Invalid credential configuration: {ex}"
            ) from ex

    @property
    def has_device_credentials(self) -> bool:
        """Return True if both device username and password are set."""
        return not (
            _is_blank(self.device_username) or _is_blank(self.device_password)
        )

    def to_dict_control_secrets(
        self, *, exclude_secrets: bool = False
    ) -> dict[str, Any]:
        """Convert the config to dict controlling whether to include secrets.

        Passwords and the token are left out if exclude_secrets is set.
        The default is the same as calling to_dict().
        """
        data = self.to_dict()
        if exclude_secrets:
            for name in SECRET_FIELDS:
                data.pop(name, None)
        return data

    def to_auth_info(self) -> AuthInfo:
        """Return the url encoded authentication information."""
        if not self.has_device_credentials and (
            self.device_username or self.device_password
        ):
            _LOGGER.warning(
                "Device credentials for account %s are incomplete, "
                "M2Web requests will not be scoped to a device",
                self.account,
            )
        return AuthInfo(
            self.account,
            self.username,
            self.password,
            self.developer_id,
            self.token,
            self.device_username,
            self.device_password,
        )
