"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import logging

from tinyecc.util import helpers


def test_prepareLogging(tmp_path):
    path = tmp_path / "test.log"
    helpers.prepareLogging(filepath=path)
    logger = helpers.getLogger("1")
    logger1 = logger
    assert logger.getEffectiveLevel() == logging.INFO
    assert logger.name == "tinyecc.1"

    logger.info("something")
    assert path.is_file()
    assert "something" in path.read_text()

    helpers.prepareLogging(filepath=path, logLvl=logging.DEBUG)
    logger = helpers.getLogger("2")
    assert logger.getEffectiveLevel() == logging.DEBUG
    # Handlers from the first call were replaced.
    assert len(helpers.LogSettings.handlers) == 2

    helpers.prepareLogging(
        filepath=path,
        logLvl=logging.INFO,
        lvlMap={"1": logging.NOTSET, "3": logging.WARNING},
    )
    logger = helpers.getLogger("3")
    assert logger.getEffectiveLevel() == logging.WARNING
    assert logger1.level == logging.NOTSET
    # NOTSET loggers inherit the level of the package root.
    assert logger1.getEffectiveLevel() == logging.INFO
    assert helpers.LogSettings.root.level == logging.INFO

    helpers.prepareLogging()
    assert len(helpers.LogSettings.handlers) == 1
