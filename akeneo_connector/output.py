"""
Console output with semantic style markers.

Messages may contain <info>, <comment> and <error> markers. Decorated outputs
render them as ANSI colours; plain outputs strip them.
"""

import io
import logging
import re
import sys

LOG = logging.getLogger(__name__)

RESET = "\x1B[0m"
STYLES = {
    "info": "\x1B[32m",
    "comment": "\x1B[33m",
    "error": "\x1B[37;41m",
}

_STYLE_RE = re.compile(r"<(%s)>(.*?)</\1>" % "|".join(STYLES), re.DOTALL)


def styled(style, message):
    if style not in STYLES:
        raise ValueError("unknown output style %r" % style)
    return "<{style}>{message}</{style}>".format(style=style, message=message)


def formatMessage(message, decorated):
    def _replace(match):
        if decorated:
            return STYLES[match.group(1)] + match.group(2) + RESET
        return match.group(2)
    return _STYLE_RE.sub(_replace, message)


class Output(object):
    def __init__(self, decorated=False):
        self.decorated = decorated

    def _doWrite(self, text):
        raise NotImplementedError

    def write(self, message):
        text = formatMessage(str(message), self.decorated)
        try:
            self._doWrite(text)
        except IOError:
            LOG.debug("write ignore IOError", exc_info=1)

    def writeln(self, message=""):
        self.write(str(message) + "\n")


class ConsoleOutput(Output):
    def __init__(self, stream=None, decorated=None):
        self.stream = sys.stdout if stream is None else stream
        if decorated is None:
            isatty = getattr(self.stream, "isatty", None)
            decorated = bool(isatty and isatty())
        super().__init__(decorated)

    def _doWrite(self, text):
        self.stream.write(text)
        self.stream.flush()


class BufferedOutput(Output):
    def __init__(self, decorated=False):
        super().__init__(decorated)
        self._buffer = io.StringIO()

    def _doWrite(self, text):
        self._buffer.write(text)

    def fetch(self):
        text = self._buffer.getvalue()
        self._buffer = io.StringIO()
        return text
