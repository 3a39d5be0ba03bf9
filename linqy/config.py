import logging
from dataclasses import dataclass, asdict, fields, replace

from .errors import ArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """configuration for the query engine"""
    pass_key_to_callbacks: bool = True  # index-aware callbacks may receive (value, key, origin)
    use_numpy: bool = True  # numeric fast path for stats.sum


_config = EngineConfig()


def get_config() -> EngineConfig:
    """the configuration currently in effect"""
    return _config


def configure(**changes) -> EngineConfig:
    """
    replace selected options of the process-wide configuration.
    operators read the configuration when they are built, not when they run.
    """
    global _config
    known = {f.name for f in fields(EngineConfig)}
    unknown = set(changes) - known
    if unknown:
        raise ArgumentError(f"unknown configuration option(s): {', '.join(sorted(unknown))}")
    _config = replace(_config, **changes)
    logger.debug(f"config: {asdict(_config)}")
    return _config


def reset_config() -> EngineConfig:
    """restore the default configuration"""
    global _config
    _config = EngineConfig()
    return _config
