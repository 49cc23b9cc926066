import smartrle
from io import BytesIO
import io

class RLEIO:
	__readonly: bool
	__length: int
	__buffer: BytesIO
	__snapshot: bytes | None

	def __init__(self, initial_bytes:bytes|bytearray|memoryview|None = None, is_readonly:bool = False):
		self.__length = len(initial_bytes) if initial_bytes else 0
		self.__readonly = is_readonly
		self.__buffer = BytesIO(initial_bytes)
		self.__buffer.seek(0)
		self.__snapshot = None

	def __enter__(self) -> 'RLEIO':
		if (self.__buffer.closed):
			raise BufferError('buffer was already closed')
		return self

	def __exit__(self, exec_type, exec_value, traceback):
		self.close()

	def __len__(self) -> int:
		return self.__length

	def tell(self) -> int:
		return self.__buffer.tell()

	def seek(self, offset, whence: int = io.SEEK_SET) -> int:
		return self.__buffer.seek(offset, whence)

	def close(self):
		if not self.__buffer.closed:
			self.__buffer.close()

	def getvalue(self) -> bytes:
		return self.__buffer.getvalue()

	def read(self, size: int | None = None) -> bytes:
		# default arg to -1
		size = -1 if not isinstance(size, int) or size < 0 else size

		# a 0 len read means the caller lost track of its position
		if size == 0:
			raise smartrle.RLEIOException('We should never be doing a 0 len read.')

		if not self.can_read(size):
			raise smartrle.RLEIOException('Tried to read past end of buffer.')

		data = self.__buffer.read(size)
		if len(data) == 0:
			raise smartrle.RLEIOException('Unexpected EOF')

		if size != -1 and len(data) != size:
			raise smartrle.RLEIOException("read data wasn't of expected length.")

		return data

	def peek(self) -> int:
		value = self.read(1)[0]
		self.__buffer.seek(-1, io.SEEK_CUR)
		return value

	def read_until(self, value: int) -> bytes | None:
		# returns the bytes before value, the position ends up on value itself
		start = self.__buffer.tell()
		found = self.__contents().find(value, start, self.__length)
		if found == -1:
			return None
		return self.__buffer.read(found - start)

	def __contents(self) -> bytes:
		# searching needs a bytes object, only rebuilt after a write
		if self.__snapshot is None:
			self.__snapshot = self.__buffer.getvalue()
		return self.__snapshot

	def can_read(self, size: int | None = None) -> bool:
		# default arg to 1 and set a min value of 1 since 0 len reads should never happen
		size = 1 if (not isinstance(size, int)) or size < 1 else size
		return (self.__buffer.tell() + size) <= self.__length

	def remaining(self) -> int:
		return max(0, self.__length - self.__buffer.tell())

	def write(self, buffer: bytes|bytearray|memoryview) -> int:
		# check args
		if not isinstance(buffer, (bytes, bytearray, memoryview)):
			raise smartrle.RLEIOException('attempted to write something other than bytes.')

		# check write lock
		if self.__readonly:
			raise smartrle.RLEIOException('buffer is non writable.')

		written = self.__buffer.write(buffer)
		self.__snapshot = None

		# update length
		new_pos = self.__buffer.tell()
		if self.__length < new_pos:
			self.__length = new_pos

		return written

	def write_run(self, value: int, length: int) -> int:
		return self.write(bytes((value,)) * length)
