# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"
INSTALLED_CONFIG_DIR = os.path.join("etc", "fbn")

logging_initialized = False

def default_config_file():
    config_file = os.environ.get("FBN_LOGCONF")
    if config_file:
        return config_file

    # Source tree or editable install first, then the installed data file.
    config_file = os.path.join(os.path.dirname(os.path.abspath(__file__)),\
        "logging.ini")
    if os.path.exists(config_file):
        return config_file

    return os.path.join(sys.prefix, INSTALLED_CONFIG_DIR, "logging.ini")

def init(config_file=None, force=False):
    global logging_initialized

    if logging_initialized and not force:
        return

    if not config_file:
        config_file = default_config_file()

    if os.path.exists(config_file):
        # Module level loggers already exist by the time -l is processed.
        logging.config.fileConfig(\
            config_file, disable_existing_loggers=False)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    logger = logging.getLogger(__name__)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Logging initialized from [{}].".format(config_file))
    logging_initialized = True

if not logging_initialized:
    init()
