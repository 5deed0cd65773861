"""Python interface for Talk2M authentication.

:class:`AuthInfo` holds url encoded credentials and renders the
authentication strings for the DMWeb (DataMailbox) and M2Web APIs::

>>> from talk2m import AuthInfo
>>> auth = AuthInfo("My Co", "bob", "p@ss", "dev1", "tok1")
>>> print(auth.to_bulk_data_post_string())
devkey=dev1&token=tok1

Configuration errors are raised as `Talk2MException` and are expected
to be handled by the user of the library.
"""

from importlib.metadata import version

from talk2m.authconfig import AuthConfig
from talk2m.const import Talk2MService
from talk2m.credentials import AuthInfo, DeviceCredentials, url_encode_value
from talk2m.exceptions import InvalidConfigError, Talk2MException

__version__ = version("python-talk2m")


__all__ = [
    "AuthConfig",
    "AuthInfo",
    "DeviceCredentials",
    "InvalidConfigError",
    "Talk2MException",
    "Talk2MService",
    "url_encode_value",
]
