"""
The akeneo_connector:import command.

Runs one or more import jobs by code, or prints the available codes when no
code is given. The command holds no import logic: every code is handed to
the job executor, one after the other, and the first failure stops the run.
"""

import logging
from typing import List

from akeneo_connector.domain import RunRequest
from akeneo_connector.executor import JobExecutor
from akeneo_connector.output import Output, styled
from akeneo_connector.repository import ImportRepository
from akeneo_connector.state import AREA_ADMINHTML, AppState

LOG = logging.getLogger(__name__)

IMPORT_CODE = "code"


class ImportCommand(object):
    NAME = "akeneo_connector:import"
    DESCRIPTION = "Import Akeneo data to Magento"

    def __init__(self, importRepository: ImportRepository, appState: AppState,
                 jobExecutor: JobExecutor):
        self._importRepository = importRepository
        self._appState = appState
        self._jobExecutor = jobExecutor

    @classmethod
    def configure(cls, subparsers):
        parser = subparsers.add_parser(
            cls.NAME, help=cls.DESCRIPTION, description=cls.DESCRIPTION)
        parser.add_argument(
            "--" + IMPORT_CODE,
            dest=IMPORT_CODE,
            metavar="CODE",
            help="Code of import job to run. To run multiple jobs "
            "consecutively, use comma-separated import job codes")
        return parser

    def execute(self, options, output: Output) -> int:
        if self._appState.isAreaCodeSet():
            LOG.info("area code already set to %r",
                     self._appState.getAreaCode())
            output.writeln("Area code already set")
        else:
            self._appState.setAreaCode(AREA_ADMINHTML)

        code = getattr(options, IMPORT_CODE, None)
        if not code:
            self.usage(output)
        else:
            self.checkEntities(code)
        return 0

    def checkEntities(self, code: str) -> None:
        """Run a single import, or each of several comma-separated ones."""
        request = RunRequest.fromOption(code)
        if request.isMultiple():
            self.multiImport(list(request.codes))
        else:
            self.doImport(code)

    def multiImport(self, entities: List[str]) -> None:
        for entity in entities:
            self.doImport(entity)

    def doImport(self, code: str) -> None:
        LOG.debug("import %r", code)
        self._jobExecutor.execute(code)

    def usage(self, output: Output) -> None:
        imports = self._importRepository.getList()

        self.displayComment("Options:", output)
        self.displayInfo("--" + IMPORT_CODE, output)
        output.writeln("")

        self.displayComment("Available codes:", output)
        for importJob in imports:
            self.displayInfo(importJob.code, output)
        output.writeln("")

        code = imports[0].code if imports else None
        if code:
            self.displayComment("Example:", output)
            self.displayInfo(
                "{} --{}={}".format(self.NAME, IMPORT_CODE, code), output)

    @staticmethod
    def _display(style, message, output):
        if message and message.strip():
            output.writeln(styled(style, message))

    def displayInfo(self, message: str, output: Output) -> None:
        self._display("info", message, output)

    def displayComment(self, message: str, output: Output) -> None:
        self._display("comment", message, output)

    def displayError(self, message: str, output: Output) -> None:
        self._display("error", message, output)
