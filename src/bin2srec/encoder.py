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

r"""Binary range to S-record encoder.

The encoder splits a byte range of a source into chunks of fixed length, one
*data* record per chunk, optionally wrapped between the *header* record and the
*footer* records (*record count* and *start address*).

Examples:
    >>> from bin2srec.encoder import EncodingConfig, encode
    >>> config = EncodingConfig(begin=0, end=9, line_length=8)
    >>> lines, count = encode(b'0123456789', config)
    >>> for line in lines:
    ...     print(line)
    S00600004844521B
    S10B0000303132333435363758
    S1050008383981
    S5030002FA
    S9030000FC
    >>> count
    2
"""

import logging
from typing import IO
from typing import Any
from typing import Iterator
from typing import List
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import Tuple

from .base import AnyBytes
from .errors import ConfigError
from .errors import InvalidRangeError
from .errors import SourceReadError
from .records import SrecRecord
from .records import SrecTag
from .sources import BaseSource
from .sources import open_source

logger = logging.getLogger(__name__)

ADDRESS_SIZE_MIN: int = 2
ADDRESS_SIZE_MAX: int = 4
ADDRESS_SIZE_DEFAULT: int = 2

LINE_LENGTH_MIN: int = 8
LINE_LENGTH_MAX: int = 32
LINE_LENGTH_DEFAULT: int = 32

ADDRESS_MAX: int = 0xFFFFFFFF
r"""Maximum representable address."""


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def resolve_address_size(requested: int, address_max: int) -> int:
    r"""Resolves the effective address size.

    The requested size is promoted to the minimum size able to represent
    `address_max`, i.e. at least 3 bytes beyond ``0xFFFF`` and 4 bytes beyond
    ``0xFFFFFF``.
    It is never lowered below the requested size.

    Args:
        requested (int):
            Requested address size, in bytes.

        address_max (int):
            Maximum address to represent.

    Returns:
        int: Effective address size.

    Raises:
        ValueError: `requested` is not 2, 3, or 4, or `address_max` does not
        fit 32 bits.

    Examples:
        >>> from bin2srec.encoder import resolve_address_size
        >>> resolve_address_size(2, 0xFFFF)
        2
        >>> resolve_address_size(2, 0x10000)
        3
        >>> resolve_address_size(3, 0x1000000)
        4
        >>> resolve_address_size(4, 0)
        4
        >>> resolve_address_size(5, 0)
        Traceback (most recent call last):
            ...
        ValueError: invalid address size
    """

    if requested not in (2, 3, 4):
        raise ValueError('invalid address size')

    tag = SrecTag.fit_data_tag(address_max)
    return max(requested, tag.get_address_size())


class EncodingConfig:
    r"""Encoding configuration.

    Immutable value describing one encoding request.

    Args:
        begin (int):
            Inclusive begin offset within the source.

        end (int):
            Inclusive end offset within the source.

        offset (int):
            Generated address of the byte at `begin`.
            If ``None``, it is `begin` itself.

        address_size (int):
            Requested address size, in bytes; from 2 to 4.
            The encoder may promote it if the generated addresses need more.

        line_length (int):
            Number of data bytes per record; from 8 to 32.

        headers (bool):
            Generates the *header* and *footer* records.

    Raises:
        :class:`ConfigError`: invalid value.
        :class:`InvalidRangeError`: invalid address range.

    Examples:
        >>> from bin2srec.encoder import EncodingConfig
        >>> config = EncodingConfig(begin=0x100, end=0x1FF)
        >>> config.offset
        256
        >>> hex(config.address_max)
        '0x1ff'
        >>> config.record_count
        8
    """

    META_KEYS: Sequence[str] = [
        'begin',
        'end',
        'offset',
        'address_size',
        'line_length',
        'headers',
    ]
    r"""Meta keys."""

    __slots__ = ('_begin', '_end', '_offset', '_address_size', '_line_length', '_headers')

    def __init__(
        self,
        begin: int = 0,
        end: int = 0,
        offset: Optional[int] = None,
        address_size: int = ADDRESS_SIZE_DEFAULT,
        line_length: int = LINE_LENGTH_DEFAULT,
        headers: bool = True,
    ):

        begin = begin.__index__()
        end = end.__index__()
        offset = begin if offset is None else offset.__index__()

        if begin < 0 or end < 0 or offset < 0:
            raise ConfigError('negative address')

        if end < begin:
            raise InvalidRangeError(f'end address {end:X}h is less than begin address {begin:X}h')

        if not ADDRESS_SIZE_MIN <= address_size <= ADDRESS_SIZE_MAX:
            raise ConfigError(f'invalid address size: {address_size!r}')

        if not LINE_LENGTH_MIN <= line_length <= LINE_LENGTH_MAX:
            raise ConfigError(f'invalid line length: {line_length!r}')

        object.__setattr__(self, '_begin', begin)
        object.__setattr__(self, '_end', end)
        object.__setattr__(self, '_offset', offset)
        object.__setattr__(self, '_address_size', int(address_size))
        object.__setattr__(self, '_line_length', int(line_length))
        object.__setattr__(self, '_headers', bool(headers))

        if self.address_max > ADDRESS_MAX:
            raise InvalidRangeError(f'address overflow: maximum address {self.address_max:X}h')

        if self._headers:
            try:
                SrecTag.fit_count_tag(self.record_count)
            except ValueError:
                raise InvalidRangeError(f'record count overflow: {self.record_count}') from None

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, EncodingConfig):
            return NotImplemented
        return self.get_meta() == other.get_meta()

    def __hash__(self) -> int:

        return hash(tuple(self.get_meta().values()))

    def __repr__(self) -> str:

        meta = self.get_meta()
        text = f'{self.__class__.__name__}('
        text += ', '.join(f'{key!s}={value!r}' for key, value in meta.items())
        text += ')'
        return text

    def __setattr__(self, key: str, value: Any) -> None:

        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @property
    def address_max(self) -> int:
        r"""int: Generated address of the byte at :attr:`end`."""

        return self._offset + (self._end - self._begin)

    @property
    def address_size(self) -> int:
        r"""int: Requested address size, in bytes."""

        return self._address_size

    @property
    def begin(self) -> int:
        r"""int: Inclusive begin offset within the source."""

        return self._begin

    @property
    def end(self) -> int:
        r"""int: Inclusive end offset within the source."""

        return self._end

    @classmethod
    def from_options(
        cls,
        size: int,
        begin: Optional[int] = None,
        end: Optional[int] = None,
        offset: Optional[int] = None,
        address_size: Optional[int] = None,
        line_length: Optional[int] = None,
        headers: Optional[bool] = None,
    ) -> 'EncodingConfig':
        r"""Builds a configuration from user options.

        Missing options take their defaults, given the source `size`:

        * `begin` is 0;
        * `end` is the last source offset; larger values are clamped to it;
        * `offset` is `begin`;
        * `address_size` is 2; other values are clamped within 2 and 4;
        * `line_length` is 32; other values are clamped within 8 and 32;
        * `headers` is true.

        Args:
            size (int):
                Source size, in bytes.

            begin (int):
                See :attr:`begin`.

            end (int):
                See :attr:`end`.

            offset (int):
                See :attr:`offset`.

            address_size (int):
                See :attr:`address_size`.

            line_length (int):
                See :attr:`line_length`.

            headers (bool):
                See :attr:`headers`.

        Returns:
            :class:`EncodingConfig`: Configuration object.

        Raises:
            :class:`InvalidRangeError`: `begin` beyond the source, or `end`
            less than `begin`.

        Examples:
            >>> from bin2srec.encoder import EncodingConfig
            >>> EncodingConfig.from_options(0x4400, line_length=64)  # doctest:+NORMALIZE_WHITESPACE
            EncodingConfig(begin=0, end=17407, offset=0, address_size=2,
                           line_length=32, headers=True)
        """

        last = size - 1

        if begin is None:
            begin = 0

        if begin > last:
            raise InvalidRangeError(f'begin address {begin:X}h is greater than source size {max(last, 0):X}h')

        if end is None:
            end = last
        else:
            end = min(last, end)

        if offset is None:
            offset = begin

        if address_size is None:
            address_size = ADDRESS_SIZE_DEFAULT
        else:
            address_size = _clamp(address_size, ADDRESS_SIZE_MIN, ADDRESS_SIZE_MAX)

        if line_length is None:
            line_length = LINE_LENGTH_DEFAULT
        else:
            line_length = _clamp(line_length, LINE_LENGTH_MIN, LINE_LENGTH_MAX)

        if headers is None:
            headers = True

        return cls(begin=begin, end=end, offset=offset, address_size=address_size,
                   line_length=line_length, headers=headers)

    def get_meta(self) -> Mapping[str, Any]:
        r"""Gets the configuration values, keyed by :attr:`META_KEYS`."""

        return {key: getattr(self, key) for key in self.META_KEYS}

    @property
    def headers(self) -> bool:
        r"""bool: Generates the *header* and *footer* records."""

        return self._headers

    @property
    def line_length(self) -> int:
        r"""int: Number of data bytes per record."""

        return self._line_length

    @property
    def offset(self) -> int:
        r"""int: Generated address of the byte at :attr:`begin`."""

        return self._offset

    @property
    def record_count(self) -> int:
        r"""int: Number of *data* records covering the range."""

        span = self._end - self._begin + 1
        return -(-span // self._line_length)

    def replace(self, **meta: Any) -> 'EncodingConfig':
        r"""Copies the configuration, replacing some values.

        Args:
            meta:
                Values to replace, keyed by :attr:`META_KEYS`.

        Returns:
            :class:`EncodingConfig`: New configuration object.

        Examples:
            >>> from bin2srec.encoder import EncodingConfig
            >>> config = EncodingConfig(begin=0, end=0xFFFF)
            >>> config.replace(begin=0x10000, end=0x1FFFF).offset
            65536
        """

        values = dict(self.get_meta())
        if 'begin' in meta and 'offset' not in meta:
            values['offset'] = None
        values.update(meta)
        return type(self)(**values)


class RangeEncoder:
    r"""Byte range encoder.

    Upon construction, it resolves the effective address size of the
    configured range.
    Each encoding call then goes through the same phases:

    #. the range is checked against the source, before any output;
    #. the source is positioned at :attr:`EncodingConfig.begin`;
    #. a *data* record is emitted for each chunk, at increasing addresses,
       preceded by the *header* record and followed by the *footer* records
       if :attr:`EncodingConfig.headers`.

    Calls are independent from each other; the only side effect is the
    advancement of the source read cursor.

    Args:
        config (:class:`EncodingConfig`):
            Encoding configuration.

    Examples:
        >>> from bin2srec.encoder import EncodingConfig, RangeEncoder
        >>> config = EncodingConfig(begin=0, end=3, offset=0x12345, headers=False)
        >>> encoder = RangeEncoder(config)
        >>> encoder.address_size
        3
        >>> encoder.encode(b'\x00\x01\x02\x03')
        (['S2080123450001020388'], 1)
    """

    def __init__(self, config: EncodingConfig):

        address_max = config.address_max
        address_size = resolve_address_size(config.address_size, address_max)

        if address_size != config.address_size:
            logger.debug(f'Address size promoted from {config.address_size} '
                         f'to {address_size} for maximum address 0x{address_max:X}')

        self.config: EncodingConfig = config
        self.address_max: int = address_max
        self.address_size: int = address_size
        self.data_tag: SrecTag = SrecTag.from_address_size(address_size)

    def _emit(self, source: BaseSource) -> Iterator[SrecRecord]:

        config = self.config
        address_max = self.address_max
        line_length = config.line_length
        data_tag = self.data_tag

        if config.headers:
            yield SrecRecord.create_header()

        address = config.offset
        record_count = 0

        while True:
            size = min(line_length, (address_max - address) + 1)
            # tested before advancing, to allow finishing at ADDRESS_MAX
            last = (address - 1 + line_length) >= address_max

            chunk = source.read(size)
            if len(chunk) != size:
                if not last or not chunk:
                    raise SourceReadError(f'short read at address {address:X}h: '
                                          f'{len(chunk)} of {size} bytes')

            yield SrecRecord.create_data(address, chunk, tag=data_tag)
            record_count += 1

            if last:
                break
            address += line_length

        if config.headers:
            yield SrecRecord.create_count(record_count)
            yield SrecRecord.create_start(config.offset, tag=data_tag.get_tag_match())

        logger.debug(f'Encoded {record_count} data records, '
                     f'0x{config.offset:X}..0x{address_max:X}')

    def encode(self, source: Any) -> Tuple[List[str], int]:
        r"""Encodes the range into record lines.

        Args:
            source:
                Byte source; see :func:`open_source`.

        Returns:
            (list of str, int): Record lines (without line termination) and the
            number of *data* records.

        Raises:
            :class:`InvalidRangeError`: the range begins beyond the source.
            :class:`SourceReadError`: truncated source.
        """

        lines = []
        record_count = 0

        for record in self.iter_records(source):
            lines.append(record.to_bytestr(end=b'').decode())
            if record.tag.is_data():
                record_count += 1

        return lines, record_count

    def iter_records(self, source: Any) -> Iterator[SrecRecord]:
        r"""Iterates over the records of the range.

        The range is checked against the source, and the source is positioned
        at the begin offset, before returning the iterator.

        Args:
            source:
                Byte source; see :func:`open_source`.

        Returns:
            iterator of :class:`SrecRecord`: Records, in output order.

        Raises:
            :class:`InvalidRangeError`: the range begins beyond the source.
            :class:`SourceUnavailableError`: the source cannot be positioned.
        """

        source = open_source(source)
        begin = self.config.begin
        size = source.size()

        if begin >= size:
            raise InvalidRangeError(f'begin address {begin:X}h is greater than source size {max(size - 1, 0):X}h')

        source.seek(begin)
        return self._emit(source)

    def write(
        self,
        source: Any,
        stream: IO,
        end: AnyBytes = b'\n',
        color: bool = False,
    ) -> int:
        r"""Writes the records of the range onto a byte stream.

        Each record is written as soon as it is complete.

        Args:
            source:
                Byte source; see :func:`open_source`.

            stream (bytes IO):
                Output byte stream.

            end (bytes):
                Line termination.

            color (bool):
                Colorizes the record fields with ANSI codes.

        Returns:
            int: Number of *data* records.

        Raises:
            :class:`InvalidRangeError`: the range begins beyond the source.
            :class:`SourceReadError`: truncated source.
        """

        record_count = 0

        for record in self.iter_records(source):
            record.print(stream=stream, color=color, end=end)
            if record.tag.is_data():
                record_count += 1

        return record_count


def encode(source: Any, config: EncodingConfig) -> Tuple[List[str], int]:
    r"""Encodes a byte range into record lines.

    Args:
        source:
            Byte source; see :func:`open_source`.

        config (:class:`EncodingConfig`):
            Encoding configuration.

    Returns:
        (list of str, int): Record lines (without line termination) and the
        number of *data* records.

    See Also:
        :meth:`RangeEncoder.encode`
    """

    encoder = RangeEncoder(config)
    return encoder.encode(source)
