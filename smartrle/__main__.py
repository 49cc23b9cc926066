import os
import sys
import logging
import argparse
import smartrle
from pathlib import Path


def parse_delimiter(value: str) -> int:
	# a single character is used as is, anything longer is read as a number (0x2e, 46)
	if len(value) == 1:
		if ord(value) > 0xff:
			raise argparse.ArgumentTypeError(f'delimiter must be a single byte: {value!r}')
		return ord(value)
	try:
		delim = int(value, 0)
	except ValueError:
		raise argparse.ArgumentTypeError(f'invalid delimiter: {value!r}')
	if not 0 <= delim <= 0xff:
		raise argparse.ArgumentTypeError(f'delimiter must be between 0x00 and 0xff: {value!r}')
	return delim


def read_input(input_file: str | None) -> bytes:
	if input_file is None or input_file == '-':
		return sys.stdin.buffer.read()
	if not Path(input_file).is_file():
		raise IOError(f'file not found: {input_file}')
	with open(input_file, 'rb') as f:
		return f.read()


def write_output(output_file: str | None, data: bytes):
	if output_file is None or output_file == '-':
		sys.stdout.buffer.write(data)
		sys.stdout.buffer.flush()
		return
	with open(output_file, 'wb') as f:
		f.write(data)


def main(argv: list[str] | None = None) -> int:
	parser = argparse.ArgumentParser(
		prog='smartrle',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		description= os.linesep.join((
			"runs of repeated bytes are written as <delim><base-62 length><delim><byte>",
			"when that is shorter, the output is never larger than the input.",
			"",
			"usage Examples:",
			"",
			"\tencode a file using '.' as the delimiter:",
			"\tencode input.bin output.rle -d .",
			"",
			"\tdecode from stdin to stdout, delimiter 0xff:",
			"\tdecode -d 0xff < input.rle > output.bin"
		))
	)

	parser.add_argument('action', choices=('encode', 'decode'), help='What to do with the input.')
	parser.add_argument('input_file', nargs='?', default=None, help='The input file to use, stdin when missing or "-".')
	parser.add_argument('output_file', nargs='?', default=None, help='Where to write the output, stdout when missing or "-".')
	parser.add_argument('-d', '--delimiter', default=0x00, type=parse_delimiter, help='The delimiter byte, a single character or a number like 0x2e. (default: 0x00)')
	parser.add_argument('--max-length', default=None, type=int, help='Refuse to decode more than this many bytes.')
	parser.add_argument('-v', '--verbose', action='store_true', help='Log sizes and compression ratio.')
	args = vars(parser.parse_args(argv))

	logging.basicConfig(level=logging.INFO if args['verbose'] else logging.WARNING, format='[smartrle] %(message)s')

	action = args['action']
	delim = args['delimiter']
	data = read_input(args['input_file'])

	try:
		match action:
			case 'encode':
				result = smartrle.encode(data, delim)
			case 'decode':
				result = smartrle.decode(data, delim, max_length=args['max_length'])
			case _:
				raise ValueError('unknown action')
	except smartrle.SmartRLEException as e:
		logging.critical(f'failed to {action}: {e}')
		return 1

	ratio = len(result) / len(data) if data else 1.0
	logging.info(f'{action}d {len(data)} bytes into {len(result)} bytes (ratio {ratio:.3f}) with delimiter 0x{delim:02x}')

	write_output(args['output_file'], result)
	return 0


if __name__ == '__main__':
	sys.exit(main())
