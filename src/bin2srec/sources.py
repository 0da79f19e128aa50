# Copyright (c) 2013-2025, Andrea Zoppi
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

r"""Byte sources.

A *byte source* is a finite and seekable sequence of bytes, read by the
encoder chunk by chunk.
The encoder only needs to :meth:`BaseSource.seek` to an offset,
:meth:`BaseSource.read` some bytes, and know the :meth:`BaseSource.size`.
"""

import abc
import io
from typing import IO
from typing import Any
from typing import Optional

from bytesparse import Memory
from bytesparse.base import ImmutableMemory

from .base import AnyBytes
from .errors import SourceReadError
from .errors import SourceUnavailableError


class BaseSource(abc.ABC):
    r"""Byte source.

    The source keeps a read cursor, advanced by each :meth:`read`.
    """

    @abc.abstractmethod
    def read(self, size: int) -> bytes:
        r"""Reads up to `size` bytes at the cursor.

        Fewer bytes are returned only at the end of the data.

        Args:
            size (int):
                Number of bytes to read.

        Returns:
            bytes: Bytes read.

        Raises:
            :class:`SourceReadError`: read failure.
        """
        ...

    @abc.abstractmethod
    def seek(self, offset: int) -> int:
        r"""Moves the cursor to an absolute offset.

        Args:
            offset (int):
                Absolute offset from the start of the source.

        Returns:
            int: The new cursor offset.

        Raises:
            :class:`SourceUnavailableError`: the source cannot be positioned.
        """
        ...

    @abc.abstractmethod
    def size(self) -> int:
        r"""Total size of the source, in bytes.

        Raises:
            :class:`SourceUnavailableError`: the source cannot be sized.
        """
        ...


class StreamSource(BaseSource):
    r"""Seekable binary stream source.

    Args:
        stream (bytes IO):
            Seekable binary stream, like an open file or :class:`io.BytesIO`.

    Examples:
        >>> import io
        >>> from bin2srec.sources import StreamSource
        >>> source = StreamSource(io.BytesIO(b'abcdef'))
        >>> source.size()
        6
        >>> source.seek(4)
        4
        >>> source.read(8)
        b'ef'
    """

    def __init__(self, stream: IO):

        self.stream: IO = stream

    def read(self, size: int) -> bytes:

        try:
            chunk = self.stream.read(size)
        except OSError as exc:
            raise SourceReadError(f'cannot read source: {exc}') from exc
        if chunk is None:  # non-blocking stream without data
            raise SourceReadError('source not ready')
        return bytes(chunk)

    def seek(self, offset: int) -> int:

        try:
            return self.stream.seek(offset, io.SEEK_SET)
        except (OSError, ValueError) as exc:
            raise SourceUnavailableError(f'cannot seek source: {exc}') from exc

    def size(self) -> int:

        stream = self.stream
        try:
            position = stream.tell()
            size = stream.seek(0, io.SEEK_END)
            stream.seek(position, io.SEEK_SET)
        except (OSError, ValueError) as exc:
            raise SourceUnavailableError(f'cannot size source: {exc}') from exc
        return size


class MemorySource(BaseSource):
    r"""Memory image source.

    The memory addresses are the source offsets, so that the source size is
    the exclusive end address of the memory.
    Memory holes within a read range are reported as a corrupted source.

    Args:
        memory (:class:`bytesparse.Memory`):
            Memory image.

    Examples:
        >>> from bytesparse import Memory
        >>> from bin2srec.sources import MemorySource
        >>> source = MemorySource(Memory.from_bytes(b'abcdef'))
        >>> source.size()
        6
        >>> source.seek(4)
        4
        >>> source.read(8)
        b'ef'
    """

    def __init__(self, memory: Optional[ImmutableMemory] = None):

        if memory is None:
            memory = Memory()
        self.memory: ImmutableMemory = memory
        self.position: int = 0

    @classmethod
    def from_bytes(cls, data: AnyBytes, offset: int = 0) -> 'MemorySource':
        r"""Creates a source from a byte string.

        Args:
            data (bytes):
                Source data.

            offset (int):
                Offset of the first byte of `data`.

        Returns:
            :class:`MemorySource`: Memory source object.
        """

        memory = Memory.from_bytes(data, offset=offset)
        return cls(memory)

    def read(self, size: int) -> bytes:

        memory = self.memory
        start = self.position
        endex = min(start + size, memory.endex)
        if start >= endex:
            return b''

        try:
            with memory.view(start=start, endex=endex) as view:
                chunk = bytes(view)
        except ValueError as exc:
            raise SourceReadError(f'memory hole within 0x{start:X}..0x{endex:X}') from exc

        self.position = endex
        return chunk

    def seek(self, offset: int) -> int:

        if offset < 0:
            raise SourceUnavailableError(f'negative offset: {offset}')
        self.position = offset
        return offset

    def size(self) -> int:

        return self.memory.endex


def open_source(source: Any) -> BaseSource:
    r"""Coerces an object into a byte source.

    Args:
        source:
            Either a :class:`BaseSource` (returned as-is), a
            :class:`bytesparse.Memory`, a bytes-like object, or a seekable
            binary stream.

    Returns:
        :class:`BaseSource`: Byte source.

    Examples:
        >>> from bin2srec.sources import open_source
        >>> type(open_source(b'abc')).__name__
        'MemorySource'
        >>> import io
        >>> type(open_source(io.BytesIO(b'abc'))).__name__
        'StreamSource'
    """

    if isinstance(source, BaseSource):
        return source

    if isinstance(source, ImmutableMemory):
        return MemorySource(source)

    if isinstance(source, (bytes, bytearray, memoryview)):
        return MemorySource.from_bytes(source)

    if hasattr(source, 'read') and hasattr(source, 'seek'):
        return StreamSource(source)

    raise TypeError(f'unsupported source type: {type(source)!r}')
