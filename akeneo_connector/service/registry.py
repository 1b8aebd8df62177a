from . import service
from ..executor import JobExecutor
from ..history import RunHistory
from ..repository import EntryPointImportRepository
from ..state import appState


def registerServices(testing: bool = False) -> None:
    """
    Register the default collaborators of the import command.

    Args:
        testing: If True, clear services for testing
    """
    if testing:
        service().clear(thisIsATest=testing)

    service().register("connector.repository", EntryPointImportRepository.fromConfig)
    service().register("connector.executor", JobExecutor)
    service().register("connector.history", RunHistory)
    service().register("app.state", appState)
