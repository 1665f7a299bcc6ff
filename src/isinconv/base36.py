# Base-36 helpers, uppercase alphabet, digits before letters.

ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'
_VALUES = {c: i for i, c in enumerate(ALPHABET)}


def base36encode(number: int, width: int = 0):
	if not isinstance(number, int) or isinstance(number, bool):
		raise TypeError('number must be an integer')
	if number < 0:
		raise ValueError('number must be positive')
	
	digits = []
	while number:
		number, i = divmod(number, 36)
		digits.append(ALPHABET[i])
	
	base36 = ''.join(reversed(digits)) or ALPHABET[0]
	return base36.rjust(width, ALPHABET[0])


def base36decode(number: str):
	if not number:
		raise ValueError('empty base36 string')
	result = 0
	for ch in number.upper():
		try:
			result = result * 36 + _VALUES[ch]
		except KeyError:
			raise ValueError('invalid base36 digit %r' % ch) from None
	return result
