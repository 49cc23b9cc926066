import smartrle

BASE62_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
"""Digits of base-62, each character's index is its value."""

# keyed by both the character and its ascii value so str and bytes digits share a lookup
_BASE62_VALUES = {
	**{c: i for i, c in enumerate(BASE62_ALPHABET)},
	**{ord(c): i for i, c in enumerate(BASE62_ALPHABET)},
}


def to_base62(value: int) -> str:
	"""Convert a positive integer to base-62, most significant digit first."""
	if not isinstance(value, int) or value < 1:
		raise ValueError(f'only positive integers can be converted to base-62, got {value!r}')

	digits = []
	while value:
		value, digit = divmod(value, 62)
		digits.append(BASE62_ALPHABET[digit])
	return ''.join(reversed(digits))


def from_base62(digits: str | bytes) -> int:
	"""
	Convert base-62 digits, given as text or ascii bytes, back to an integer.

	Raises MalformedInputError if any digit is outside of the alphabet. An empty
	input is not rejected here and gives 0.
	"""
	value = 0
	for digit in digits:
		try:
			value = value * 62 + _BASE62_VALUES[digit]
		except KeyError:
			shown = chr(digit) if isinstance(digit, int) else digit
			raise smartrle.MalformedInputError(f'invalid base-62 digit {shown!r}') from None
	return value
