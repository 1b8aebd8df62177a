import logging
import os
import sys


def getLogger(name):
    return logging.getLogger(name)


def stderrLevel(verbose):
    level = logging.ERROR - 10 * (verbose or 0)
    return max(level, logging.DEBUG)


def setup(logDir, debugLogFileName, debug=False, verbose=0):
    fmt = (
        '+%(process)-6d %(levelname)-9s '
        '%(name)-20s %(filename)20s:%(lineno)-5d '
        '[%(asctime)s] %(message)s')
    if debug:
        if debug is True:
            logFileName = os.path.join(logDir, debugLogFileName)
        else:
            logFileName = os.path.expanduser(debug)
        logging.basicConfig(
            filename=logFileName,
            level=logging.DEBUG,
            format=fmt)
    else:
        logging.basicConfig(stream=sys.stderr, level=stderrLevel(verbose),
                            format=fmt)
