import unittest

from akeneo_connector.state import (
    AREA_ADMINHTML,
    AppState,
    AreaCodeAlreadySetError,
    AreaCodeNotSetError,
    appState,
)


class TestAppState(unittest.TestCase):
    def testUnset(self):
        state = AppState()
        self.assertFalse(state.isAreaCodeSet())
        with self.assertRaises(AreaCodeNotSetError):
            state.getAreaCode()

    def testSetOnce(self):
        state = AppState()
        state.setAreaCode(AREA_ADMINHTML)
        self.assertTrue(state.isAreaCodeSet())
        self.assertEqual("adminhtml", state.getAreaCode())
        with self.assertRaises(AreaCodeAlreadySetError):
            state.setAreaCode("frontend")
        self.assertEqual("adminhtml", state.getAreaCode())

    def testProcessInstance(self):
        self.assertIs(appState(), appState())
