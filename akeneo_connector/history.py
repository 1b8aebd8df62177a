"""Run history for import jobs, kept as a JSON file in the state directory."""

import logging
import os
from typing import List, Optional

import simplejson as json

from .domain import RunRecord, RunStatus
from .utils import dateTimeFromJson, dateTimeToJson

LOG = logging.getLogger(__name__)

HISTORY_FILE_NAME = "import-history.json"
PRUNE_NUM = 500


def _recordToJson(record: RunRecord) -> dict:
    return {
        "code": record.code,
        "status": record.status.value,
        "started": dateTimeToJson(record.started),
        "finished": dateTimeToJson(record.finished),
        "error": record.error,
    }


def _recordFromJson(data: dict) -> RunRecord:
    return RunRecord(
        code=data["code"],
        status=RunStatus(data["status"]),
        started=dateTimeFromJson(data["started"]),
        finished=dateTimeFromJson(data["finished"]),
        error=data.get("error"),
    )


class RunHistory(object):
    def __init__(self, cacheDir, limit=PRUNE_NUM):
        self._historyFile = os.path.join(cacheDir, HISTORY_FILE_NAME)
        self._limit = limit

    @property
    def fileName(self):
        return self._historyFile

    def _read(self) -> List[dict]:
        try:
            with open(self._historyFile, 'r') as historyFile:
                data = json.load(historyFile)
        except IOError:
            return []
        except json.JSONDecodeError:
            LOG.warning("ignoring unreadable history file %s",
                        self._historyFile, exc_info=True)
            return []
        if not isinstance(data, list):
            LOG.warning("ignoring malformed history file %s", self._historyFile)
            return []
        return data

    def _write(self, data: List[dict]) -> None:
        with open(self._historyFile, 'w') as historyFile:
            json.dump(data, historyFile)

    def record(self, code, status, started, finished, error=None) -> RunRecord:
        runRecord = RunRecord(code=code, status=status, started=started,
                              finished=finished, error=error)
        data = self._read()
        data.append(_recordToJson(runRecord))
        if len(data) > self._limit:
            data = data[-self._limit:]
        self._write(data)
        LOG.debug("recorded %r in %s", runRecord, self._historyFile)
        return runRecord

    def entries(self, code: Optional[str] = None) -> List[RunRecord]:
        records = [_recordFromJson(item) for item in self._read()]
        if code is None:
            return records
        return [record for record in records if record.code == code]

    def last(self, code: str) -> Optional[RunRecord]:
        records = self.entries(code)
        return records[-1] if records else None
