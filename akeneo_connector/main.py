#!/usr/bin/env python
import argparse
import os
import sys

import akeneo_connector.logging

from .argparse import addArgumentParserBaseFlags, debugTarget
from .binutils import binDescriptionWithStandardFooter
from .command import COMMANDS, ImportCommand
from .compat import version
from .config import Config, ConfigError
from .executor import ImportJobError
from .output import ConsoleOutput, styled
from .service import service
from .service.registry import registerServices

_DEBUG_LOG_FILE_NAME = "akeneo-connector-debug.log"
_DISTRIBUTION = "akeneo-connector-cli"
LOG = akeneo_connector.logging.getLogger(__name__)

DESC = binDescriptionWithStandardFooter("""
akeneo-connector - Run Akeneo connector import jobs

Import jobs are provided by installed packages through the
`akeneo_connector.jobs` entry point group.


Examples:
    # List the available import codes
    $ akeneo-connector akeneo_connector:import

    # Import categories
    $ akeneo-connector akeneo_connector:import --code=category

    # Import families, then products
    $ akeneo-connector akeneo_connector:import --code=family,product
""")


def parseArgs(args=None):
    if args is None:
        prog = sys.argv[0]
        args = sys.argv[1:]
    else:
        prog = None

    op = argparse.ArgumentParser(
        prog=os.path.basename(prog) if prog else "akeneo-connector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=DESC)
    addArgumentParserBaseFlags(op, _DEBUG_LOG_FILE_NAME)
    op.add_argument("--version", action="store_true",
                    help="Show version and exit")

    subparsers = op.add_subparsers(dest="command", metavar="COMMAND")
    for commandClass in COMMANDS:
        commandClass.configure(subparsers)

    options = op.parse_args(args)
    if not options.version and not options.command:
        op.print_help()
        sys.exit(1)
    return options


def buildImportCommand(config: Config) -> ImportCommand:
    repository = service().connector.repository(config)
    history = service().connector.history(config.cacheDir)
    executor = service().connector.executor(repository, history)
    return ImportCommand(repository, service().app.state(), executor)


def impl_main(args=None, output=None):
    registerServices()

    options = parseArgs(args)
    if options.version:
        print("Version {}".format(version(_DISTRIBUTION)))
        return 0

    config = Config(options)
    akeneo_connector.logging.setup(
        config.logDir,
        _DEBUG_LOG_FILE_NAME,
        debug=debugTarget(options),
        verbose=config.verbose)
    LOG.debug("starting with args %s", options)
    LOG.debug("python: %s", sys.version)

    if output is None:
        output = ConsoleOutput(decorated=config.colorOutput)
    command = buildImportCommand(config)
    return command.execute(options, output)


def main(args=None):
    try:
        rc = impl_main(args=args)
    except (ConfigError, ImportJobError) as error:
        LOG.debug("exit on error", exc_info=True)
        errOutput = ConsoleOutput(sys.stderr)
        errOutput.writeln(styled("error", "Error: {}".format(error)))
        sys.exit(1)
    sys.exit(rc)


if __name__ == "__main__":
    main()
