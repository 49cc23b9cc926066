from .rle_exceptions import SmartRLEException, DelimiterFoundError, MalformedInputError, RunLengthLimitError, InvalidBaseError, RLEIOException
from .rle_io import RLEIO
from .rle_base62 import BASE62_ALPHABET, to_base62, from_base62
from .rle_runs import find_runs
from .rle_codec import MAX_RUN_LENGTH, encode, decode, read_run_length

__version__ = '1.0.0'
