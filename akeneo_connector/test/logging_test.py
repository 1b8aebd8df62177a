import logging
import os
import tempfile
import unittest

from akeneo_connector.logging import setup, stderrLevel


class TestLoggingSetup(unittest.TestCase):
    def setUp(self):
        # Reset logging configuration before each test
        logging.root.handlers = []
        logging.root.setLevel(logging.WARNING)

    def tearDown(self):
        for handler in logging.root.handlers:
            handler.close()
        logging.root.handlers = []

    def test_setup_no_debug(self):
        """Test setup with debug=False uses stderr"""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup(tmpdir, "test-debug.log", debug=False)
            self.assertTrue(
                any(
                    isinstance(h, logging.StreamHandler)
                    for h in logging.root.handlers
                )
            )
            self.assertEqual(logging.ERROR, logging.root.level)

    def test_setup_verbose(self):
        """Test each -v lowers the stderr threshold"""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup(tmpdir, "test-debug.log", debug=False, verbose=2)
            self.assertEqual(logging.INFO, logging.root.level)

    def test_stderr_level_floor(self):
        self.assertEqual(logging.ERROR, stderrLevel(None))
        self.assertEqual(logging.WARNING, stderrLevel(1))
        self.assertEqual(logging.DEBUG, stderrLevel(10))

    def test_setup_debug_true(self):
        """Test setup with debug=True uses default log file"""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup(tmpdir, "test-debug.log", debug=True)
            self.assertTrue(
                any(
                    isinstance(h, logging.FileHandler) for h in logging.root.handlers
                )
            )
            expected_file = os.path.join(tmpdir, "test-debug.log")
            self.assertTrue(os.path.exists(expected_file))
            self.assertEqual(logging.DEBUG, logging.root.level)

    def test_setup_debug_with_custom_file(self):
        """Test setup with debug=/path/to/file uses custom log file"""
        with tempfile.TemporaryDirectory() as tmpdir:
            custom_log = os.path.join(tmpdir, "custom-debug.log")
            setup(tmpdir, "default-debug.log", debug=custom_log)
            self.assertTrue(os.path.exists(custom_log))
            default_file = os.path.join(tmpdir, "default-debug.log")
            self.assertFalse(os.path.exists(default_file))
