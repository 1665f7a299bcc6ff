import os
from pathlib import Path as FilePath

import toml

DEFAULT_CONFIG_FILE = 'isinconv.toml'
CONFIG_ENV = 'ISINCONV_CONFIG'
OUTPUT_FORMATS = ('plain', 'table')


class ConfigError(Exception):
	pass


class Config:
	log_level: str
	output: str
	
	def __init__(self, log_level='INFO', output='plain'):
		self.log_level = log_level
		self.output = output
	
	def from_dict(self, d):
		section = d.get('isinconv', {})
		if 'log_level' in section:
			self.log_level = str(section['log_level']).upper()
		if 'output' in section:
			self.output = section['output']
		if self.output not in OUTPUT_FORMATS:
			raise ConfigError('output must be one of %s, not %r' % (', '.join(OUTPUT_FORMATS), self.output))
		return self
	
	def to_dict(self):
		return {'isinconv': {'log_level': self.log_level, 'output': self.output}}


def load_config(path=None):
	"""
	Read the ``[isinconv]`` table of a TOML file.

	Without an explicit path, ``$ISINCONV_CONFIG`` or ``./isinconv.toml`` is
	tried and defaults are used if it does not exist.
	"""
	explicit = path is not None
	if path is None:
		path = os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_FILE)
	path = FilePath(path)
	if not path.exists():
		if explicit:
			raise FileNotFoundError(str(path))
		return Config()
	try:
		d = toml.load(str(path))
	except toml.TomlDecodeError as e:
		raise ConfigError('%s: %s' % (path, e)) from e
	return Config().from_dict(d)
