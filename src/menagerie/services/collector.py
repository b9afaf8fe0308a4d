"""RecordCollector and CollectService: the interactive collection loop.

Loop: PROMPT → READ → VALIDATE → STORE → CONTINUE? … → REPORT

The first iteration is unconditional; the continuation question is only
asked after a record has been stored, so a run always yields at least
one record.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

import structlog

from menagerie.config.models import CollectConfig, PromptConfig
from menagerie.domain.errors import CollectError, IOFailure, ParseFailure
from menagerie.domain.records import Record, RecordCollection, parse_age
from menagerie.domain.types import CollectorState, ParsePolicy
from menagerie.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from menagerie.infrastructure.lines import LineSink, LineSource

log = structlog.get_logger(__name__)

T = TypeVar("T")


class RecordCollector:
    """Drive the prompt/read/validate/store loop over a line source and sink.

    A collector is reusable; each :meth:`run` starts a fresh collection.
    """

    def __init__(
        self,
        collect: CollectConfig | None = None,
        prompts: PromptConfig | None = None,
    ) -> None:
        self._collect = collect or CollectConfig()
        self._prompts = prompts or PromptConfig()
        self._state = CollectorState.COLLECTING
        self._notices: list[str] = []

    @property
    def state(self) -> CollectorState:
        return self._state

    @property
    def notices(self) -> list[str]:
        """Retry notices written during the last run, in order."""
        return list(self._notices)

    def run(self, source: LineSource, sink: LineSink) -> RecordCollection:
        """Collect records until the sentinel, then write the report.

        Raises:
            IOFailure: input ended or a read/write failed.
            ParseFailure: a field was invalid under the ``abort`` policy.
        """
        records = RecordCollection()
        self._state = CollectorState.COLLECTING
        self._notices = []

        while self._state is CollectorState.COLLECTING:
            with structlog.contextvars.bound_contextvars(record=len(records) + 1):
                record = self._read_record(source, sink)
                records.append(record)
                log.debug("record_added", total=len(records))

                answer = self._ask(source, sink, "continue", self._prompts.again)
                if self.is_sentinel(answer):
                    self._state = CollectorState.DONE

        log.debug("collection_done", total=len(records), retries=len(self._notices))
        for line in records.report_lines():
            try:
                sink.write_line(line)
            except IOFailure as exc:
                raise IOFailure(f"failed writing report: {exc}", field="report") from exc
        return records

    def is_sentinel(self, answer: str) -> bool:
        """True when *answer* ends the loop (case-insensitive, trimmed)."""
        return answer.strip().casefold() == self._collect.sentinel.casefold()

    # ------------------------------------------------------------------
    # Field acquisition
    # ------------------------------------------------------------------

    def _read_record(self, source: LineSource, sink: LineSink) -> Record:
        name = self._read_field(source, sink, "name", self._prompts.name, self._text("name"))
        species = self._read_field(
            source, sink, "species", self._prompts.species, self._text("species")
        )
        age = self._read_field(source, sink, "age", self._prompts.age, parse_age)
        return Record(name=name, species=species, age=age)

    def _text(self, field: str) -> Callable[[str], str]:
        def _parse(raw: str) -> str:
            value = raw.strip()
            if self._collect.require_text and not value:
                raise ParseFailure("must not be empty", field=field, value=value)
            return value

        return _parse

    def _read_field(
        self,
        source: LineSource,
        sink: LineSink,
        field: str,
        prompt: str,
        parse: Callable[[str], T],
    ) -> T:
        """Prompt for one field until it parses, or raise under ``abort``."""
        with structlog.contextvars.bound_contextvars(field=field):
            while True:
                raw = self._ask(source, sink, field, prompt)
                try:
                    return parse(raw)
                except ParseFailure as exc:
                    if self._collect.parse_policy is ParsePolicy.ABORT:
                        log.debug("field_rejected", value=exc.value, reason=str(exc))
                        raise
                    log.debug("field_retry", value=exc.value, reason=str(exc))
                    self._notify(sink, field, f"Invalid {field} '{exc.value}': {exc}")

    def _ask(self, source: LineSource, sink: LineSink, field: str, prompt: str) -> str:
        try:
            sink.prompt(prompt)
            return source.read_line()
        except IOFailure as exc:
            raise IOFailure(f"failed reading {field}: {exc}", field=field) from exc

    def _notify(self, sink: LineSink, field: str, message: str) -> None:
        self._notices.append(message)
        try:
            sink.write_line(message)
        except IOFailure as exc:
            raise IOFailure(f"failed reporting invalid {field}: {exc}", field=field) from exc


class CollectService:
    """Run a :class:`RecordCollector` and wrap the outcome in a ServiceResult."""

    def __init__(
        self,
        collect: CollectConfig | None = None,
        prompts: PromptConfig | None = None,
    ) -> None:
        self._collector = RecordCollector(collect, prompts)

    def collect(self, source: LineSource, sink: LineSink) -> ServiceResult:
        """Collect records from *source*, reporting through *sink*."""
        op = "collect_records"
        start = time.perf_counter()
        try:
            records = self._collector.run(source, sink)
        except ParseFailure as exc:
            return ServiceResult(
                ok=False,
                op=op,
                warnings=self._collector.notices,
                error=ServiceError(
                    code=exc.code,
                    message=f"Invalid {exc.field} '{exc.value}': {exc}",
                    detail={"field": exc.field, "value": exc.value},
                ),
            )
        except CollectError as exc:
            log.debug("collection_aborted", field=exc.field, exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                warnings=self._collector.notices,
                error=ServiceError(
                    code=exc.code,
                    message=str(exc),
                    detail={"field": exc.field},
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(records),
                "records": records.to_list(),
                "report": records.report_lines(),
            },
            warnings=self._collector.notices,
            meta={"duration_ms": round((time.perf_counter() - start) * 1000, 2)},
        )
