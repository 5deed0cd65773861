"""Authentication information for the Talk2M DMWeb and M2Web APIs.

All values are url encoded when :class:`AuthInfo` is created, so the
post strings can be placed directly in the body of a request:

>>> from talk2m import AuthInfo
>>> auth = AuthInfo("My Co", "bob", "p@ss", "dev1", "tok1")
>>> auth.to_bulk_data_post_string()
'devkey=dev1&token=tok1'
>>> auth.to_device_proxy_post_string()
'account=My+Co&username=bob&password=p%40ss&devkey=dev1'

Passing the username and password of an Ewon device scopes M2Web requests
to that device:

>>> auth = AuthInfo("My Co", "bob", "p@ss", "dev1", "tok1", "dusr", "dpwd")
>>> auth.to_device_proxy_post_string()
'account=My+Co&username=bob&password=p%40ss&devkey=dev1\
&t2mdeviceusername=dusr&t2mdevicepassword=dpwd'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from urllib.parse import quote_plus, unquote_plus

from .const import (
    T2M_ACCOUNT,
    T2M_DEVICE_PASSWORD,
    T2M_DEVICE_USERNAME,
    T2M_DEVKEY,
    T2M_PASSWORD,
    T2M_TOKEN,
    T2M_USERNAME,
    Talk2MService,
)

_LOGGER = logging.getLogger(__name__)

# Kept as is in addition to letters, digits and ".-_"
_SAFE_CHARS = "*"


def url_encode_value(value: str | None) -> str | None:
    """Return the value encoded for a x-www-form-urlencoded query string.

    Spaces become ``+`` and everything except letters, digits and ``.-*_``
    is percent encoded as utf-8. If the value cannot be encoded it is
    returned unchanged.
    """
    if value is None:
        return None
    try:
        return quote_plus(value, safe=_SAFE_CHARS).replace("~", "%7E")
    except (UnicodeError, TypeError):
        _LOGGER.debug("Unable to url encode value, using it unencoded")
        return value


def is_blank(value: str | None, encoded: bool = True) -> bool:
    """Return True if the value is missing or only whitespace.

    Encoded values are decoded first, so ``+`` and ``%09`` count as blank.
    """
    if value is None:
        return True
    return not (unquote_plus(value) if encoded else value).strip()


@dataclass(frozen=True)
class DeviceCredentials:
    """Url encoded username and password of an Ewon device."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class AuthInfo:
    """Authentication information for Talk2M features and DataMailbox.

    Constructor arguments are plaintext and are stored url encoded,
    the attributes always return the encoded values.
    """

    #: Talk2M account name
    account: str
    #: Talk2M account username
    username: str
    #: Talk2M account password
    password: str = field(repr=False)
    #: Talk2M developer ID
    developer_id: str = field(repr=False)
    #: Talk2M token
    token: str = field(repr=False)
    #: Ewon device username
    device_username: str | None = None
    #: Ewon device password
    device_password: str | None = field(default=None, repr=False)
    # Fields stored raw because encoding failed
    _unencoded: frozenset[str] = field(
        init=False, repr=False, compare=False, default=frozenset()
    )

    def __post_init__(self) -> None:
        unencoded: set[str] = set()
        for fld in fields(self):
            if not fld.init:
                continue
            value = getattr(self, fld.name)
            encoded = url_encode_value(value)
            # Encoding failed or left the value as is
            if value is not None and encoded == value:
                unencoded.add(fld.name)
            object.__setattr__(self, fld.name, encoded)
        object.__setattr__(self, "_unencoded", frozenset(unencoded))

    def _is_blank(self, name: str) -> bool:
        return is_blank(getattr(self, name), encoded=name not in self._unencoded)

    @property
    def device_credentials(self) -> DeviceCredentials | None:
        """Return the device credentials if both username and password are set."""
        if self._is_blank("device_username") or self._is_blank("device_password"):
            return None
        return DeviceCredentials(
            self.device_username,  # type: ignore[arg-type]
            self.device_password,  # type: ignore[arg-type]
        )

    def to_bulk_data_post_string(self) -> str:
        """Return the authentication string for the DMWeb API."""
        return f"{T2M_DEVKEY}={self.developer_id}&{T2M_TOKEN}={self.token}"

    def to_device_proxy_post_string(self) -> str:
        """Return the authentication string for the M2Web API.

        The device username and password are only added when both are set.
        """
        ret = (
            f"{T2M_ACCOUNT}={self.account}"
            f"&{T2M_USERNAME}={self.username}"
            f"&{T2M_PASSWORD}={self.password}"
            f"&{T2M_DEVKEY}={self.developer_id}"
        )
        if (device := self.device_credentials) is not None:
            ret += (
                f"&{T2M_DEVICE_USERNAME}={device.username}"
                f"&{T2M_DEVICE_PASSWORD}={device.password}"
            )
        return ret

    def to_post_string(self, service: Talk2MService) -> str:
        """Return the authentication string for the given API family."""
        if service is Talk2MService.DmWeb:
            return self.to_bulk_data_post_string()
        return self.to_device_proxy_post_string()
