import typing
import numpy as np


def find_runs(data: bytes | bytearray | memoryview) -> typing.Iterator[tuple[int, int]]:
	"""Yield (value, length) for every maximal run of identical bytes, in order."""
	if len(data) == 0:
		return
	values = np.frombuffer(data, dtype=np.uint8)

	# a run starts at 0 and wherever a byte differs from the one before it
	starts = np.concatenate(([0], np.flatnonzero(values[1:] != values[:-1]) + 1))
	lengths = np.diff(np.append(starts, values.size))

	yield from zip(values[starts].tolist(), lengths.tolist())
