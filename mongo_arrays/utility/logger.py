"""Setting up logging for the module"""

import logging

logger = logging.getLogger("mongo_arrays")
# handlers are configured by the command line entry point, library use only
# emits records
