import logging
import os

from .spec import TargetLevel


logger = logging.getLogger(__name__)


def environment_target_level() -> TargetLevel:
    """
    Determine the default target level from the ``OKCONTRAST_TARGET_LEVEL``
    environment variable. Its value is ``AA`` or ``AAA``, ignoring case. If the
    variable is missing or has any other value, the level is AA.

    The contrast functions never consult the environment themselves. Callers
    pass the level on every call.
    """
    level = os.environ.get('OKCONTRAST_TARGET_LEVEL')
    if level is not None:
        try:
            return TargetLevel.of(level)
        except ValueError:
            logger.warning(
                'ignoring invalid OKCONTRAST_TARGET_LEVEL=%r', level
            )
    return TargetLevel.AA


def environment_log_level() -> int:
    """
    Determine the log level from the ``OKCONTRAST_LOG_LEVEL`` environment
    variable, which names a standard level such as ``DEBUG``. The default is
    ``WARNING``.
    """
    name = os.environ.get('OKCONTRAST_LOG_LEVEL', '').strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING
