"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Logging for the tinyecc package. Every logger is a child of the "tinyecc"
logger, which stays silent until an application calls prepareLogging.
"""

import logging
from logging import Handler, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Dict, List, Optional, Union


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("tinyecc")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[Handler] = []


LogSettings.root.setLevel(logging.NOTSET)
LogSettings.root.addHandler(logging.NullHandler())


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Route tinyecc logs to stdout and, if filepath is provided, to a rotating
    log file. Handlers installed by a previous call are replaced. Loggers
    already created, and those created later with getLogger, have their
    levels set according to logLvl and lvlMap.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The level for all loggers without an entry in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.root.setLevel(logLvl)
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, logLvl))

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)
    if filepath:
        LogSettings.handlers.append(
            RotatingFileHandler(
                filepath, mode="a", maxBytes=5 * 1024 * 1024, backupCount=2
            )
        )
    if not sys.executable.endswith("pythonw.exe"):
        # pythonw on windows has no stdout.
        LogSettings.handlers.append(logging.StreamHandler())
    for handler in LogSettings.handlers:
        handler.setFormatter(formatter)
        LogSettings.root.addHandler(handler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger under the tinyecc root. If the name has a log level
    registered with prepareLogging, that level will be used, otherwise the
    default is used.

    Args:
        name: The logger name.
    """
    logger = LogSettings.root.getChild(name)
    logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = logger
    return logger
