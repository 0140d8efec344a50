from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .config import ConfigError, SuiteConfig, load_config
from .errors import classify_error
from .logging import configure_logging
from .models import Bug, BugState, TimeRange
from .parser import ParseError, parse_bug
from .store import BugStore


@dataclass
class LoadError:
    """A source line that could not be parsed into a bug."""

    line: int
    text: str
    message: str


class BugSuite:
    def __init__(self, cfg: SuiteConfig):
        self.cfg = cfg
        self._store: BugStore | None = None
        self.load_errors: list[LoadError] = []
        self._logger = configure_logging(
            json_logging=cfg.logging_json_enabled, level=cfg.logging_level
        )

    @classmethod
    def from_config_path(cls, path: str | Path) -> BugSuite:
        return cls(load_config(path))

    @property
    def store(self) -> BugStore:
        if self._store is None:
            self._store = self.load()
        return self._store

    def parse(self, text: str) -> Bug:
        try:
            bug = parse_bug(text)
        except ParseError as exc:
            info = classify_error(exc)
            self._logger.log_error("record parse failed", error=info.message, category=info.category)
            raise
        self._logger.log_record("parsed", bug.comment, state=bug.state.value)
        return bug

    def load(self) -> BugStore:
        """Read the configured source file, one record per line.

        Blank lines and ``#`` comments are skipped. Lines that fail to parse
        are reported and collected in ``load_errors``; loading carries on.
        """
        path = self.cfg.source_file
        if not path.exists():
            raise ConfigError(f"Source file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Source file is not valid UTF-8: {path}: {exc}") from exc
        self.load_errors = []
        bugs: list[Bug] = []
        with self._logger.timed_operation("load", source=str(path)):
            for number, raw in enumerate(text.splitlines(), start=1):
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                try:
                    bugs.append(self.parse(line))
                except ParseError as exc:
                    self.load_errors.append(LoadError(line=number, text=line, message=str(exc)))
            self._logger.log_operation(
                "load_summary", bug_count=len(bugs), error_count=len(self.load_errors)
            )
        self._store = BugStore(bugs)
        return self._store

    def find(
        self,
        state: BugState,
        time_range: TimeRange | None = None,
        *,
        now: datetime | None = None,
    ) -> list[Bug]:
        window = time_range or self.cfg.default_time_range
        with self._logger.timed_operation("find", state=state.value, time_range=window.value):
            found = self.store.find_bugs(state, window, now=now)
            self._logger.log_operation("find_result", match_count=len(found))
        return found


__all__ = ["BugSuite", "LoadError"]
