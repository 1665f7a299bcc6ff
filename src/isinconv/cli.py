import argparse
import re
import sys

from .codec import encode, decode, IsinError
from .config import load_config, ConfigError, OUTPUT_FORMATS
from .log import get_logger, setup_logging

logger = get_logger(__name__)


_INTEGER_RE = re.compile(r'-?[0-9]+')


def _parse_value(text):
	if not _INTEGER_RE.fullmatch(text):
		raise IsinError('not an integer: %r' % text)
	return int(text)


def build_parser():
	parser = argparse.ArgumentParser(prog='isin-convert',
	                                 description='Convert ISIN identifiers to integers and back.')
	parser.add_argument('--config', help='TOML configuration file')
	parser.add_argument('--log-level', help='override the configured log level')
	parser.add_argument('--output', choices=OUTPUT_FORMATS, help='output format')
	sub = parser.add_subparsers(dest='command', required=True)
	enc = sub.add_parser('encode', help='identifier to integer')
	enc.add_argument('items', nargs='+', metavar='ISIN')
	dec = sub.add_parser('decode', help='integer to identifier')
	dec.add_argument('items', nargs='+', metavar='VALUE')
	return parser


def main(argv=None):
	args = build_parser().parse_args(argv)
	try:
		config = load_config(args.config)
	except FileNotFoundError as e:
		print('isin-convert: config file not found: %s' % e, file=sys.stderr)
		return 1
	except ConfigError as e:
		print('isin-convert: %s' % e, file=sys.stderr)
		return 1
	setup_logging(args.log_level or config.log_level)
	output = args.output or config.output
	
	for each in args.items:
		try:
			if args.command == 'encode':
				result = encode(each)
			else:
				result = decode(_parse_value(each))
		except IsinError as e:
			logger.debug('%s failed for %r', args.command, each)
			print('isin-convert: %s' % e, file=sys.stderr)
			return 1
		if output == 'table':
			print('%s\t%s' % (each, result))
		else:
			print(result)
	return 0


if __name__ == '__main__':
	sys.exit(main())
