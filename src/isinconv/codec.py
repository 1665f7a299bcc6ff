"""
Conversion between 12-character ISIN-shaped identifiers and integers.

The identifier is read as a base-36 numeral, most significant character
first, so every string over ``[0-9A-Z]{12}`` maps to exactly one integer in
``[0, 36**12 - 1]`` and back. The check digit is not validated.
"""
import re

from .base36 import base36encode, base36decode
from .log import get_logger

ISIN_LENGTH = 12
MAX_ISIN_VALUE = 36 ** ISIN_LENGTH - 1

_ISIN_RE = re.compile(r'[A-Z0-9]{%d}' % ISIN_LENGTH)

logger = get_logger(__name__)


class IsinError(ValueError):
	pass


class InvalidFormat(IsinError):
	pass


class OutOfRange(IsinError):
	pass


def encode(isin: str) -> int:
	"""
	Convert an identifier into its integer value.

	:param isin: 12 characters from ``[0-9A-Za-z]``
	:raises InvalidFormat: if the uppercased input is not 12 base-36 digits
	"""
	if not isinstance(isin, str):
		logger.debug('rejecting non-string identifier %r', isin)
		raise InvalidFormat('Invalid ISIN format: %r' % (isin,))
	isin = isin.upper()
	if not _ISIN_RE.fullmatch(isin):
		logger.debug('rejecting identifier %r', isin)
		raise InvalidFormat('Invalid ISIN format: %r' % isin)
	return base36decode(isin)


def decode(value: int) -> str:
	"""
	Convert an integer back into a 12-character uppercase identifier.

	:raises OutOfRange: if value is outside ``[0, MAX_ISIN_VALUE]``
	"""
	if not isinstance(value, int) or isinstance(value, bool):
		raise TypeError('value must be an integer')
	if value < 0 or value > MAX_ISIN_VALUE:
		logger.debug('rejecting value %d', value)
		raise OutOfRange('Invalid value to decode as ISIN: %d' % value)
	return base36encode(value, width=ISIN_LENGTH)
