import logging

import coloredlogs

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATEF = '%H-%M-%S'

LEVEL_STYLES = dict(
	debug=dict(color='magenta'),
	info=dict(color='green'),
	verbose=dict(),
	warning=dict(color='blue'),
	error=dict(color='yellow'),
	critical=dict(color='red', bold=True))

_installed = False


def get_logger(module_name):
	return logging.getLogger(module_name)


def setup_logging(level='INFO'):
	"""
	Install coloured console output on the ``isinconv`` logger.

	Only the first call installs a handler; later calls change the level of
	the logger and of its handlers. Level names are case-insensitive.
	"""
	global _installed
	level = coloredlogs.level_to_number(level)
	logger = logging.getLogger('isinconv')
	if not _installed:
		coloredlogs.install(level=level, logger=logger, fmt=FORMAT, datefmt=DATEF,
		                    level_styles=LEVEL_STYLES)
		_installed = True
	else:
		logger.setLevel(level)
		for handler in logger.handlers:
			handler.setLevel(level)
	return logger
