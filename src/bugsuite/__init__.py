"""BugSuite - small in-memory bug tracking model.

High-level public API:

from bugsuite import Bug, BugState, BugStore, TimeRange, parse_bug

bug = parse_bug('{"state": "open","timestamp": 1493393946,"comment": "Bug via JSON"}')
store = BugStore([bug])
recent = store.find_bugs(BugState.OPEN, TimeRange.PAST_WEEK)

Records can also be loaded from a file named in a YAML config:

suite = BugSuite.from_config_path('bugsuite.config.yaml')
closed = suite.find(BugState.CLOSED, TimeRange.PAST_MONTH)
"""

from __future__ import annotations

from .config import ConfigError, SuiteConfig, load_config
from .core import BugSuite
from .models import Bug, BugState, TimeRange
from .parser import ParseError, parse_bug
from .store import BugStore, elapsed_days

__version__ = "0.1.0"

__all__ = [
    "Bug",
    "BugState",
    "BugStore",
    "BugSuite",
    "ConfigError",
    "ParseError",
    "SuiteConfig",
    "TimeRange",
    "elapsed_days",
    "load_config",
    "parse_bug",
    "__version__",
]
