from contextlib import contextmanager
import io
import os
import sys

from akeneo_connector.domain import ImportJob

HOME = '/home/me'
STANDARD_CODES = ["category", "family", "attribute", "option", "product"]


def resetEnv():
    os.environ['HOME'] = HOME
    os.environ['AKENEO_CONNECTOR_STATE_DIR'] = '/tmp/BADDIR'


def makeJobs(codes, target=None):
    target = target or (lambda: None)
    return [ImportJob(code=code, runner=lambda: target) for code in codes]


@contextmanager
def capturedOutput():
    ''' Used to capture stdout or stderr.
    eg.
    with capturedOutput() as (out, err):
        print("foo")

    self.assertEqual(out.getvalue(), "foo")
    '''
    newOut, newErr = io.StringIO(), io.StringIO()
    oldOut, oldErr = sys.stdout, sys.stderr
    try:
        sys.stdout, sys.stderr = newOut, newErr
        yield sys.stdout, sys.stderr
    finally:
        sys.stdout, sys.stderr = oldOut, oldErr
