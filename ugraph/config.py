"""Configuration for uGraph components."""

import logging
import os
from dataclasses import dataclass

# Name of the package root logger; every module logger is a child of it.
ROOT_LOGGER_NAME = "ugraph"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Environment variable read once, when the root logger is first configured.
LOG_LEVEL_ENV = "UGRAPH_LOG_LEVEL"


def env_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``UGRAPH_LOG_LEVEL``, or ``default``.

    Unknown names fall back to ``default`` rather than failing import.
    """
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


@dataclass
class GraphConfig:
    """Behavioural switches for a `Graph` instance."""

    # Bound vertex enumeration by the vertex count at iteration start.
    # When False, vertices added while iterating are also yielded.
    snapshot_iteration: bool = True

    # Emit DEBUG records when a depth-first traversal starts and finishes.
    log_traversals: bool = True


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
