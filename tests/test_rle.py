import random
import unittest
from smartrle import encode, decode, read_run_length, MAX_RUN_LENGTH
from smartrle import DelimiterFoundError, MalformedInputError, RunLengthLimitError, SmartRLEException

class TestRLE(unittest.TestCase):


	def test_decode_literal(self):
		decoded = decode(b'as3df', b'.')
		self.assertEqual(b'as3df', decoded)

	def test_decode_empty(self):
		self.assertEqual(b'', decode(b'', b'.'))

	def test_decode_run(self):
		decoded = decode(b'as.3.df', b'.')
		self.assertEqual(b'asdddf', decoded)

	def test_decode_two_digit_run(self):
		# "12" in base-62 is 64
		decoded = decode(b'as.12.df', b'.')
		self.assertEqual(b'as' + b'd' * 64 + b'f', decoded)

	def test_decode_consecutive_runs(self):
		self.assertEqual(b'asdddffff', decode(b'as.3.d.4.f', b'.'))
		self.assertEqual(b'aaaabbbb', decode(b'.4.a.4.b', b'.'))

	def test_decode_mixed(self):
		decoded = decode(b'.1Q.aewfffiohwef.C.b', b'.')
		self.assertEqual(b'a' * 114 + b'ewfffiohwef' + b'b' * 38, decoded)

	def test_decode_int_delimiter(self):
		self.assertEqual(b'\x01' * 10, decode(b'\xffa\xff\x01', 0xff))

	def test_decode_unterminated(self):
		with self.assertRaises(MalformedInputError):
			decode(b'as.3df', b'.')

	def test_decode_invalid_digit(self):
		with self.assertRaises(MalformedInputError):
			decode(b'as.3?.df', b'.')

	def test_decode_missing_value(self):
		with self.assertRaises(MalformedInputError):
			decode(b'asdf.4.', b'.')

	def test_decode_empty_length(self):
		with self.assertRaises(MalformedInputError):
			decode(b'as..d', b'.')

	def test_decode_trailing_delimiter(self):
		with self.assertRaises(MalformedInputError):
			decode(b'asdf.', b'.')
		with self.assertRaises(MalformedInputError):
			decode(b'asdf.4', b'.')

	def test_decode_run_too_large(self):
		with self.assertRaises(RunLengthLimitError):
			decode(b'.zzzzzzzz.a', b'.')
		with self.assertRaises(RunLengthLimitError):
			decode(b'.' + b'1' * 40 + b'.a', b'.')

	def test_decode_max_length(self):
		self.assertEqual(b'a' * 64, decode(b'.12.a', b'.', max_length=64))
		with self.assertRaises(RunLengthLimitError):
			decode(b'.12.a', b'.', max_length=63)
		with self.assertRaises(RunLengthLimitError):
			decode(b'abcdef', b'.', max_length=5)

	def test_run_length_limit_is_malformed(self):
		# callers catching malformed input also catch oversized runs
		with self.assertRaises(MalformedInputError):
			decode(b'.zzzzzzzz.a', b'.')



	def test_read_run_length(self):
		self.assertEqual((3, 3), read_run_length(b'.3.df', b'.'))
		self.assertEqual((94, 4), read_run_length(b'.1w.x', b'.'))
		self.assertEqual((MAX_RUN_LENGTH, 8), read_run_length(b'.2lkCB1.', b'.'))

	def test_read_run_length_errors(self):
		for encoded in (b'.3', b'x3.d', b'.3df', b'..d', b'.3?.d'):
			with self.subTest(encoded=encoded):
				with self.assertRaises(MalformedInputError):
					read_run_length(encoded, b'.')



	def test_encode_empty(self):
		self.assertEqual(b'', encode(b'', b'.'))

	def test_encode_literal(self):
		self.assertEqual(b'asdf', encode(b'asdf', b'.'))
		self.assertEqual(b'asddf', encode(b'asddf', b'.'))
		# 3 bytes are the same size as ".3.d" minus the value byte, literal wins ties
		self.assertEqual(b'asdddf', encode(b'asdddf', b'.'))

	def test_encode_run(self):
		self.assertEqual(b'as.4.df', encode(b'asddddf', b'.'))
		self.assertEqual(b'.4.a.4.b', encode(b'aaaabbbb', b'.'))

	def test_encode_mixed(self):
		encoded = encode(b'a' * 114 + b'ewfffiohwef' + b'b' * 38, b'.')
		self.assertEqual(b'.1Q.aewfffiohwef.C.b', encoded)

	def test_encode_two_digit_threshold(self):
		# 61 is "Z", 62 is "10"
		self.assertEqual(b'.Z.x', encode(b'x' * 61, b'.'))
		self.assertEqual(b'.10.x', encode(b'x' * 62, b'.'))

	def test_encode_bytearray(self):
		self.assertEqual(b'\x00.5.\x01', encode(bytearray(b'\x00\x01\x01\x01\x01\x01'), b'.'))
		self.assertEqual(b'.5.a', encode(memoryview(b'aaaaa'), ord('.')))

	def test_encode_delimiter_found(self):
		with self.assertRaises(DelimiterFoundError):
			encode(b'asdf.dfd', b'.')
		with self.assertRaises(SmartRLEException):
			encode(b'\x00', 0)

	def test_bad_delimiter_argument(self):
		for delim in (b'', b'..', 256, -1, '.', None):
			with self.subTest(delim=delim):
				with self.assertRaises(ValueError):
					encode(b'asdf', delim)



	def test_round_trip_random(self):
		rng = random.Random(0x5eed)
		for _ in range(200):
			# few symbols so that runs show up
			plain = bytes(rng.choice(b'abc\x00\xfe') for _ in range(rng.randint(0, 300)))
			encoded = encode(plain, b'.')
			self.assertLessEqual(len(encoded), len(plain))
			self.assertEqual(plain, decode(encoded, b'.'))

	def test_worst_case_bound(self):
		rng = random.Random(1337)
		plain = bytes(rng.randrange(1, 256) for _ in range(4096))
		encoded = encode(plain, 0)
		self.assertLessEqual(len(encoded), len(plain))
		self.assertEqual(plain, decode(encoded, 0))

	def test_every_run_length(self):
		for length in range(1, 300):
			with self.subTest(length=length):
				plain = b'q' + b'z' * length + b'q'
				self.assertEqual(plain, decode(encode(plain, b'.'), b'.'))
