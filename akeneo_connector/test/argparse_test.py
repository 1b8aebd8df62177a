import argparse
import unittest

from akeneo_connector.argparse import (
    addArgumentParserBaseFlags,
    debugTarget,
)


def parse(argv):
    parser = argparse.ArgumentParser()
    addArgumentParserBaseFlags(parser, "test-log")
    return parser.parse_args(argv)


class TestDebugArgument(unittest.TestCase):
    def test_debug_flag(self):
        """Test --debug logs to the default file"""
        args = parse(["--debug"])
        self.assertTrue(args.debug)
        self.assertIs(True, debugTarget(args))

    def test_debug_file(self):
        """Test --debug-file with a file path"""
        args = parse(["--debug-file", "/tmp/my-debug.log"])
        self.assertEqual("/tmp/my-debug.log", debugTarget(args))

    def test_debug_file_wins(self):
        args = parse(["--debug", "--debug-file", "/dev/stderr"])
        self.assertEqual("/dev/stderr", debugTarget(args))

    def test_no_debug_flag(self):
        """Test no debug flags defaults to False"""
        self.assertFalse(debugTarget(parse([])))

    def test_defaults(self):
        args = parse([])
        self.assertEqual("~/.config/akeneorc", args.rcFile)
        self.assertIsNone(args.verbose)

