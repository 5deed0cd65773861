"""Parameter names and service identifiers of the Talk2M API."""

from __future__ import annotations

from enum import Enum
from typing import Final

T2M_ACCOUNT: Final = "account"
T2M_USERNAME: Final = "username"
T2M_PASSWORD: Final = "password"
T2M_DEVKEY: Final = "devkey"
T2M_TOKEN: Final = "token"
T2M_DEVICE_USERNAME: Final = "t2mdeviceusername"
T2M_DEVICE_PASSWORD: Final = "t2mdevicepassword"


class Talk2MService(Enum):
    """Talk2M API families."""

    #: DataMailbox, the historical data service
    DmWeb = "DMWEB"
    #: Device proxy service for live access to Ewon devices
    M2Web = "M2WEB"
