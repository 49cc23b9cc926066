class SmartRLEException(Exception):
	"""Base class of every error raised by the codec."""


class DelimiterFoundError(SmartRLEException):
	"""The delimiter byte was found in the data to encode."""


class MalformedInputError(SmartRLEException):
	"""The data to decode does not follow the escape sequence format."""


class RunLengthLimitError(MalformedInputError):
	"""A decoded run length, or the total decoded size, is over the allowed limit."""


class InvalidBaseError(SmartRLEException):
	"""A numeral base outside of 2-62 was requested."""


class RLEIOException(SmartRLEException):
	pass
