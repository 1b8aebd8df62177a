"""
Application run context.

The area code selects which permission and configuration scope the current
process runs with. It can be set once per process.
"""

import logging
from typing import Optional

LOG = logging.getLogger(__name__)

AREA_ADMINHTML = "adminhtml"


class AreaCodeAlreadySetError(Exception):
    pass


class AreaCodeNotSetError(Exception):
    pass


class AppState(object):
    def __init__(self, areaCode: Optional[str] = None):
        self._areaCode = areaCode

    def isAreaCodeSet(self) -> bool:
        return self._areaCode is not None

    def getAreaCode(self) -> str:
        if self._areaCode is None:
            raise AreaCodeNotSetError("Area code is not set")
        return self._areaCode

    def setAreaCode(self, code: str) -> None:
        if self._areaCode is not None:
            raise AreaCodeAlreadySetError(
                "Area code is already set to %r" % self._areaCode)
        LOG.debug("set area code %r", code)
        self._areaCode = code


_APP_STATE = AppState()


def appState() -> AppState:
    return _APP_STATE
