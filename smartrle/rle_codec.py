import smartrle

# Smart RLE format:
# runs of identical bytes are replaced by <delim><base-62 length><delim><byte>,
# but only when that is shorter than writing the run out, so the encoded data is
# never longer than its input. The delimiter byte can't appear in the input.
#
#   asdf    > asdf
#   asdddf  > asdddf
#   asddddf > as.4.df

MAX_RUN_LENGTH = 0x7fff_ffff
"""Largest run length decode will expand, anything above is refused instead of allocated."""
_MAX_RUN_LENGTH_DIGITS = len(smartrle.to_base62(MAX_RUN_LENGTH))


def _as_delimiter(delim: int | bytes | bytearray) -> int:
	if isinstance(delim, (bytes, bytearray)):
		if len(delim) != 1:
			raise ValueError(f'the delimiter must be a single byte, got {len(delim)} bytes.')
		return delim[0]
	if isinstance(delim, int) and 0 <= delim <= 0xff:
		return delim
	raise ValueError(f'the delimiter must be a byte value, got {delim!r}')


def encode(data: bytes | bytearray | memoryview, delim: int | bytes) -> bytes:
	delim = _as_delimiter(delim)
	data = bytes(data)
	if delim in data:
		raise smartrle.DelimiterFoundError(f'delimiter 0x{delim:02x} found in the input @ 0x{data.index(delim):x}')

	with smartrle.RLEIO() as writer:
		for value, length in smartrle.find_runs(data):
			digits = smartrle.to_base62(length)
			# the trailing value byte isn't counted here, changing this changes the output
			if len(digits) + 2 < length:
				writer.write(bytes((delim,)) + digits.encode('ascii') + bytes((delim, value)))
			else:
				writer.write_run(value, length)
		return writer.getvalue()


def _read_run_length(reader: 'smartrle.RLEIO', delim: int) -> tuple[int, int]:
	start = reader.tell()
	if reader.remaining() < 3 or reader.peek() != delim:
		raise smartrle.MalformedInputError(f'expected a run length @ 0x{start:x}')
	reader.read(1)

	digits = reader.read_until(delim)
	if digits is None:
		raise smartrle.MalformedInputError(f'run length starting @ 0x{start:x} has no closing delimiter')
	if len(digits) == 0:
		raise smartrle.MalformedInputError(f'run length @ 0x{start:x} is empty')
	if len(digits) > _MAX_RUN_LENGTH_DIGITS:
		raise smartrle.RunLengthLimitError(f'run length @ 0x{start:x} has too many digits ({len(digits)})')
	# skip the closing delimiter
	reader.read(1)

	run_length = smartrle.from_base62(digits)
	if run_length > MAX_RUN_LENGTH:
		raise smartrle.RunLengthLimitError(f'run length @ 0x{start:x} is too large ({run_length})')
	return run_length, reader.tell() - start


def read_run_length(data: bytes | bytearray | memoryview, delim: int | bytes) -> tuple[int, int]:
	"""
	Read the run length of the escape sequence at the start of data.

	Returns the run length and the number of bytes it took, both delimiters
	included. The byte being repeated comes right after and isn't counted.
	"""
	with smartrle.RLEIO(bytes(data), is_readonly=True) as reader:
		return _read_run_length(reader, _as_delimiter(delim))


def decode(data: bytes | bytearray | memoryview, delim: int | bytes, max_length: int | None = None) -> bytes:
	"""
	Decode smart RLE data back to plain bytes using the delimiter it was encoded with.

	max_length optionally caps the size of the decoded output, RunLengthLimitError
	is raised when going over it.
	"""
	delim = _as_delimiter(delim)

	with smartrle.RLEIO(bytes(data), is_readonly=True) as reader, smartrle.RLEIO() as writer:
		def check_length(extra: int):
			if max_length is not None and len(writer) + extra > max_length:
				raise smartrle.RunLengthLimitError(f'decoded data would be longer than {max_length} bytes')

		while reader.can_read():
			literal = reader.read_until(delim)
			if literal is None:
				# no escapes left, the rest is passed through
				literal = reader.read()
			if literal:
				check_length(len(literal))
				writer.write(literal)
			if not reader.can_read():
				break

			run_length, _ = _read_run_length(reader, delim)

			# the run length can't be the last thing in the data
			if not reader.can_read():
				raise smartrle.MalformedInputError(f'run length ending @ 0x{reader.tell():x} is missing the byte to repeat')
			value = reader.read(1)[0]

			check_length(run_length)
			writer.write_run(value, run_length)

		return writer.getvalue()
