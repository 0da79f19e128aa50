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

r"""Motorola S-record records.

Only the records written by a binary to S-record conversion are supported:
the *header* (``S0``), the *data* records (``S1``, ``S2``, ``S3``), the
*record count* (``S5``, ``S6``) and the *start address* records (``S9``,
``S8``, ``S7``).

See Also:
    `<https://en.wikipedia.org/wiki/SREC_(file_format)>`_
"""

import enum
import sys
from typing import IO
from typing import Any
from typing import Mapping
from typing import MutableMapping
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Type
from typing import TypeVar
from typing import Union

from .base import AnyBytes
from .base import EllipsisType
from .base import TypeAlias
from .base import colorize_tokens
from .utils import hexlify

try:
    from typing import Self
except ImportError:  # pragma: no cover
    Self: TypeAlias = Any  # Python < 3.11
__TYPING_HAS_SELF = Self is not Any


if not __TYPING_HAS_SELF:  # pragma: no cover
    del Self
    Self = TypeVar('Self', bound='SrecTag')


class SrecTag(enum.IntEnum):
    r"""Motorola S-record tag."""

    HEADER = 0
    r"""Header string. Optional."""

    DATA_16 = 1
    r"""16-bit address data record."""

    DATA_24 = 2
    r"""24-bit address data record."""

    DATA_32 = 3
    r"""32-bit address data record."""

    RESERVED = 4
    r"""Reserved tag."""

    COUNT_16 = 5
    r"""16-bit record count. Optional."""

    COUNT_24 = 6
    r"""24-bit record count. Optional."""

    START_32 = 7
    r"""32-bit start address. Terminates :attr:`DATA_32`."""

    START_24 = 8
    r"""24-bit start address. Terminates :attr:`DATA_24`."""

    START_16 = 9
    r"""16-bit start address. Terminates :attr:`DATA_16`."""

    @classmethod
    def fit_count_tag(cls, count: int) -> Self:
        r"""Fits count record tag.

        Given the record sequence count, it fits the most compact *count* tag.

        Args:
            count (int):
                Record sequence *count*.

        Returns:
            :class:`SrecTag`: *Count* record tag.

        Raises:
            ValueError: invalid `count`.

        Examples:
            >>> from bin2srec.records import SrecTag
            >>> SrecTag.fit_count_tag(0xFFFF)
            <SrecTag.COUNT_16: 5>
            >>> SrecTag.fit_count_tag(0xFFFFFF)
            <SrecTag.COUNT_24: 6>
            >>> SrecTag.fit_count_tag(0x1000000)
            Traceback (most recent call last):
                ...
            ValueError: count overflow
        """

        if count < 0:
            raise ValueError('count overflow')
        if count <= 0xFFFF:
            return cls.COUNT_16
        if count <= 0xFFFFFF:
            return cls.COUNT_24
        raise ValueError('count overflow')

    @classmethod
    def fit_data_tag(cls, address_max: int) -> Self:
        r"""Fits data record tag.

        Given the maximum *address* of the involved *data* records, it fits the
        most compact *data* tag.

        Args:
            address_max (int):
                Maximum *address* of the involved *data* records.

        Returns:
            :class:`SrecTag`: *Data* record tag.

        Raises:
            ValueError: invalid `address_max`.

        Examples:
            >>> from bin2srec.records import SrecTag
            >>> SrecTag.fit_data_tag(0xFFFF)
            <SrecTag.DATA_16: 1>
            >>> SrecTag.fit_data_tag(0xFFFFFF)
            <SrecTag.DATA_24: 2>
            >>> SrecTag.fit_data_tag(0xFFFFFFFF)
            <SrecTag.DATA_32: 3>
            >>> SrecTag.fit_data_tag(0x100000000)
            Traceback (most recent call last):
                ...
            ValueError: address overflow
        """

        if address_max < 0:
            raise ValueError('address overflow')
        if address_max <= 0xFFFF:
            return cls.DATA_16
        if address_max <= 0xFFFFFF:
            return cls.DATA_24
        if address_max <= 0xFFFFFFFF:
            return cls.DATA_32
        raise ValueError('address overflow')

    @classmethod
    def from_address_size(cls, address_size: int) -> Self:
        r"""Data tag for an address size.

        The *data* record type digit is the address size minus one.

        Raises:
            ValueError: `address_size` is not 2, 3, or 4.

        Examples:
            >>> from bin2srec.records import SrecTag
            >>> SrecTag.from_address_size(2)
            <SrecTag.DATA_16: 1>
            >>> SrecTag.from_address_size(4)
            <SrecTag.DATA_32: 3>
            >>> SrecTag.from_address_size(5)
            Traceback (most recent call last):
                ...
            ValueError: invalid address size
        """

        if address_size not in (2, 3, 4):
            raise ValueError('invalid address size')
        return cls(address_size - 1)

    def get_address_max(self) -> int:
        r"""Largest value of the *address* field; zero if not supported.

        Examples:
            >>> from bin2srec.records import SrecTag
            >>> hex(SrecTag.DATA_32.get_address_max())
            '0xffffffff'
            >>> hex(SrecTag.COUNT_24.get_address_max())
            '0xffffff'
            >>> SrecTag.RESERVED.get_address_max()
            0
        """

        return (1 << (self.get_address_size() * 8)) - 1

    def get_address_size(self) -> int:
        r"""Address field size, in bytes; zero if not supported.

        Examples:
            >>> from bin2srec.records import SrecTag
            >>> SrecTag.DATA_24.get_address_size()
            3
            >>> SrecTag.START_32.get_address_size()
            4
        """

        return _ADDRESS_SIZES[self]

    def get_data_max(self) -> int:
        r"""Largest *data* field size.

        The single byte *count* also covers the *address* and *checksum*
        fields, so that wider addresses leave less room for data.
        Only the *header* and *data* records carry data.

        Examples:
            >>> from bin2srec.records import SrecTag
            >>> SrecTag.DATA_16.get_data_max()
            252
            >>> SrecTag.DATA_32.get_data_max()
            250
            >>> SrecTag.START_32.get_data_max()
            0
        """

        if self > SrecTag.DATA_32:
            return 0
        return 0xFE - self.get_address_size()

    def get_tag_match(self) -> Optional['SrecTag']:
        r"""Pairs *data* and *start address* tags of the same address size.

        A *data* tag ``n`` matches the *start address* tag ``10 - n``, and
        vice versa; other tags have no match.

        Examples:
            >>> from bin2srec.records import SrecTag
            >>> SrecTag.DATA_16.get_tag_match()
            <SrecTag.START_16: 9>
            >>> SrecTag.START_32.get_tag_match()
            <SrecTag.DATA_32: 3>
            >>> SrecTag.HEADER.get_tag_match() is None
            True
        """

        if self.is_data() or SrecTag.START_32 <= self <= SrecTag.START_16:
            return type(self)(10 - self)
        return None

    def is_data(self) -> bool:
        r"""Tells whether this is a data record tag."""

        return SrecTag.DATA_16 <= self <= SrecTag.DATA_32


_ADDRESS_SIZES: Sequence[int] = (2, 2, 3, 4, 0, 2, 3, 4, 3, 2)


SIZE_TO_ADDRESS_FORMAT: Mapping[int, bytes] = {
    2: b'%04X',
    3: b'%06X',
    4: b'%08X',
}
r"""Format byte string for each supported address size."""

HEADER_DATA: bytes = b'HDR'
r"""Data of the standard header record."""


if not __TYPING_HAS_SELF:  # pragma: no cover
    del Self
    Self = TypeVar('Self', bound='SrecRecord')


class SrecRecord:
    r"""Motorola S-record record object.

    A *record* is a line of text carrying a *tag* (the record type digit), a
    *count* of the following bytes, an *address*, some *data* and a
    *checksum*.

    The *constructor* (:meth:`__init__`) allows direct assignment of attribute
    values, as well as skipping *validation*; the factory methods
    (:meth:`create_header`, :meth:`create_data`, :meth:`create_count`,
    :meth:`create_start`) should be preferred.

    Attributes:
        tag (:class:`SrecTag`):
            The mandatory *tag*, indicating the *nature* of the record.

        address (int):
            The *address* of the *data*, or the *record count*, or the
            *start address*, depending on :attr:`tag`.

        data (bytes):
            Record byte data.

        count (int):
            Number of bytes following the *count* field itself.

        checksum (int):
            One's complement of the least significant byte of the sum of the
            *count*, *address* and *data* bytes.

    Args:
        tag (:class:`SrecTag`):
            See :attr:`tag` attribute.

        address (int):
            See :attr:`address` attribute.

        data (bytes):
            See :attr:`data` attribute.

        count (int):
            See :attr:`count` attribute.
            ``Ellipsis`` initializes :attr:`count` via :meth:`compute_count`.
            ``None`` assigns ``None``, skipping further validation.

        checksum (int):
            See :attr:`checksum` attribute.
            ``Ellipsis`` initializes :attr:`checksum` via
            :meth:`compute_checksum`.
            ``None`` assigns ``None``, skipping further validation.

        validate (bool):
            If true, :meth:`validate` is called upon initialization.
    """

    META_KEYS: Sequence[str] = [
        'address',
        'checksum',
        'count',
        'data',
        'tag',
    ]
    r"""Meta keys, as listed by :meth:`get_meta`."""

    Tag: Type[SrecTag] = SrecTag
    r"""Tag object type."""

    def __init__(
        self,
        tag: SrecTag,
        address: int = 0,
        data: AnyBytes = b'',
        count: Optional[Union[int, EllipsisType]] = Ellipsis,
        checksum: Optional[Union[int, EllipsisType]] = Ellipsis,
        validate: bool = True,
    ):

        self.address: int = address.__index__()
        self.checksum: Optional[int] = None
        self.count: Optional[int] = None
        self.data: AnyBytes = data
        self.tag: SrecTag = tag

        if count is Ellipsis:
            self.update_count()
        elif count is not None:
            self.count = count.__index__()

        if checksum is Ellipsis:
            self.update_checksum()
        elif checksum is not None:
            self.checksum = checksum.__index__()

        if validate:
            _count = count is not None
            _checksum = checksum is not None and _count
            self.validate(checksum=_checksum, count=_count)

    def __repr__(self) -> str:

        meta = self.get_meta()
        text = f'<{self.__class__!s} @0x{id(self):08X} '
        text += ' '.join(f'{key!s}:={value!r}' for key, value in meta.items())
        text += '>'
        return text

    def __str__(self) -> str:

        return self.to_bytestr().decode()

    def compute_checksum(self) -> int:
        r"""Computes the checksum field value.

        The checksum is the one's complement of the least significant byte of
        the sum of the *count* byte, the *address* bytes and the *data* bytes.

        Returns:
            int: Computed checksum value.

        Examples:
            >>> from bin2srec.records import SrecRecord
            >>> SrecRecord.create_data(0x1234, b'abc').compute_checksum()
            141
            >>> SrecRecord.create_header(b'HDR').compute_checksum()
            27
        """

        checksum = (self.count or 0) & 0xFF
        address = self.address & 0xFFFFFFFF
        while address > 0:
            checksum += address & 0xFF
            address >>= 8
        checksum += sum(iter(self.data))
        checksum = (checksum & 0xFF) ^ 0xFF
        return checksum

    def compute_count(self) -> int:
        r"""Computes the count field value.

        The *count* covers the *address*, *data* and *checksum* fields.

        Returns:
            int: Computed count value.

        Examples:
            >>> from bin2srec.records import SrecRecord
            >>> SrecRecord.create_data(0x1234, b'abc').compute_count()
            6
        """

        count = self.tag.get_address_size() + len(self.data) + 1
        return count

    @classmethod
    def create_count(
        cls,
        count: int,
        tag: Optional[SrecTag] = None,
    ) -> Self:
        r"""Creates a record count record.

        Instantiates a *record count* record; `tag` forces the count size.

        Args:
            count (int):
                Number of preceding *data* records.

            tag (:class:`SrecTag`):
                Chosen *record count* tag.
                If ``None``, it uses the one returned by
                :meth:`SrecTag.fit_count_tag`.

        Returns:
            :class:`SrecRecord`: Record count record object.

        Raises:
            ValueError: invalid `count` or `tag`.

        Examples:
            >>> from bin2srec.records import SrecRecord, SrecTag
            >>> str(SrecRecord.create_count(0x1234))
            'S5031234B6\n'
            >>> str(SrecRecord.create_count(0x1234, tag=SrecTag.COUNT_24))
            'S604001234B5\n'
        """

        Tag = cls.Tag
        if tag is None:
            tag = Tag.fit_count_tag(count)
        else:
            if not Tag.COUNT_16 <= tag <= Tag.COUNT_24:
                raise ValueError('invalid count tag')

        if not 0 <= count <= tag.get_address_max():
            raise ValueError('count overflow')

        record = cls(tag, address=count)
        return record

    @classmethod
    def create_data(
        cls,
        address: int,
        data: AnyBytes,
        tag: Optional[SrecTag] = None,
    ) -> Self:
        r"""Creates a data record.

        Instantiates a *data* record; `tag` forces the address size.

        Args:
            address (int):
                Record address.

            data (bytes):
                Record byte data.

            tag (:class:`SrecTag`):
                Chosen *data* tag.
                If ``None``, it uses the one returned by
                :meth:`SrecTag.fit_data_tag`.

        Returns:
            :class:`SrecRecord`: Data record object.

        Raises:
            ValueError: invalid `address`, `data` or `tag`.

        Examples:
            >>> from bin2srec.records import SrecRecord, SrecTag
            >>> str(SrecRecord.create_data(0x1234, b'abc'))
            'S10612346162638D\n'
            >>> str(SrecRecord.create_data(0x1234, b'abc', tag=SrecTag.DATA_32))
            'S308000012346162638B\n'
        """

        Tag = cls.Tag
        if tag is None:
            tag = Tag.fit_data_tag(address)
        else:
            if not Tag.DATA_16 <= tag <= Tag.DATA_32:
                raise ValueError('invalid data tag')

        if not 0 <= address <= tag.get_address_max():
            raise ValueError('address overflow')

        if len(data) > tag.get_data_max():
            raise ValueError('data size overflow')

        record = cls(tag, address=address, data=data)
        return record

    @classmethod
    def create_header(cls, data: AnyBytes = HEADER_DATA) -> Self:
        r"""Creates a header record.

        Args:
            data (bytes):
                Header byte data; ``HDR`` by default.

        Returns:
            :class:`SrecRecord`: Header record.

        Raises:
            ValueError: data size overflow.

        Examples:
            >>> from bin2srec.records import SrecRecord
            >>> str(SrecRecord.create_header())
            'S00600004844521B\n'
            >>> str(SrecRecord.create_header(b''))
            'S0030000FC\n'
        """

        if len(data) > 0xFC:
            raise ValueError('data size overflow')

        Tag = cls.Tag
        record = cls(Tag.HEADER, data=data)
        return record

    @classmethod
    def create_start(
        cls,
        address: int = 0,
        tag: Optional[SrecTag] = None,
    ) -> Self:
        r"""Creates a start address record.

        Instantiates a *start address* record; `tag` forces the address
        size.

        Args:
            address (int):
                Start address.

            tag (:class:`SrecTag`):
                Chosen *start* tag.
                If ``None``, it is the *start* tag matching the one returned
                by :meth:`SrecTag.fit_data_tag`.

        Returns:
            :class:`SrecRecord`: Start address record object.

        Raises:
            ValueError: invalid `address` or `tag`.

        Examples:
            >>> from bin2srec.records import SrecRecord, SrecTag
            >>> str(SrecRecord.create_start(0x1234))
            'S9031234B6\n'
            >>> str(SrecRecord.create_start(0x1234, tag=SrecTag.START_32))
            'S70500001234B4\n'
        """

        Tag = cls.Tag
        if tag is None:
            tag = Tag.fit_data_tag(address).get_tag_match()
        else:
            if not Tag.START_32 <= tag <= Tag.START_16:
                raise ValueError('invalid start tag')

        if not 0 <= address <= tag.get_address_max():
            raise ValueError('address overflow')

        record = cls(tag, address=address)
        return record

    def get_meta(self) -> MutableMapping[str, Any]:

        meta = {key: getattr(self, key) for key in self.META_KEYS}
        return meta

    def print(
        self,
        *args,
        stream: Optional[IO] = None,
        color: bool = False,
        **kwargs,
    ) -> Self:
        r"""Prints a record.

        The record is converted into tokens (eventually colorized) then joined
        and written onto a byte stream (*stdout* by default).

        Args:
            args:
                Forwarded to the underlying call to :meth:`to_tokens`.

            stream (bytes IO):
                The byte stream where the record tokens are printed.
                If ``None``, *stdout* is selected.

            color (bool):
                Tokens are colorized before printing.

            kwargs:
                Forwarded to the underlying call to :meth:`to_tokens`.

        Returns:
            :class:`SrecRecord`: *self*.

        Examples:
            >>> import io
            >>> from bin2srec.records import SrecRecord
            >>> record = SrecRecord.create_data(0x1234, b'abc')
            >>> stream = io.BytesIO()
            >>> _ = record.print(stream=stream, color=True)
            >>> stream.getvalue()
            b'\x1b[0m\x1b[33mS\x1b[32m1\x1b[34m06\x1b[31m1234\x1b[36m61\x1b[96m62\x1b[36m63\x1b[35m8D\x1b[0m\n\x1b[0m'
        """

        if stream is None:
            stream = sys.stdout.buffer
        tokens = self.to_tokens(*args, **kwargs)
        if color:
            tokens = colorize_tokens(tokens)
        stream.writelines(tokens.values())
        return self

    def to_bytestr(self, end: AnyBytes = b'\n') -> bytes:
        r"""Converts into a byte string.

        Args:
            end (bytes):
                Line termination.

        Returns:
            bytes: Byte string representation.

        Examples:
            >>> from bin2srec.records import SrecRecord
            >>> SrecRecord.create_start(0x1234).to_bytestr(end=b'\r\n')
            b'S9031234B6\r\n'
        """

        self.validate(checksum=False, count=False)
        addrfmt = SIZE_TO_ADDRESS_FORMAT[self.tag.get_address_size()]

        bytestr = b'S%X%02X%s%s%02X%s' % (
            self.tag & 0xF,
            (self.count or 0) & 0xFF,
            addrfmt % (self.address & 0xFFFFFFFF),
            hexlify(self.data),
            (self.checksum or 0) & 0xFF,
            end,
        )
        return bytestr

    def to_tokens(self, end: AnyBytes = b'\n') -> Mapping[str, bytes]:
        r"""Converts into byte string tokens.

        Args:
            end (bytes):
                Line termination.

        Returns:
            dict: Mapping of token keys to token byte strings.

        Examples:
            >>> from bin2srec.records import SrecRecord
            >>> SrecRecord.create_data(0x1234, b'abc').to_tokens()  # doctest:+NORMALIZE_WHITESPACE
            {'begin': b'S', 'tag': b'1', 'count': b'06', 'address': b'1234',
             'data': b'616263', 'checksum': b'8D', 'end': b'\n'}
        """

        self.validate(checksum=False, count=False)
        addrfmt = SIZE_TO_ADDRESS_FORMAT[self.tag.get_address_size()]

        return {
            'begin': b'S',
            'tag': b'%X' % (self.tag & 0xF),
            'count': b'%02X' % ((self.count or 0) & 0xFF),
            'address': addrfmt % (self.address & 0xFFFFFFFF),
            'data': hexlify(self.data),
            'checksum': b'%02X' % ((self.checksum or 0) & 0xFF),
            'end': end,
        }

    def update_checksum(self) -> Self:

        self.checksum = self.compute_checksum()
        return self

    def update_count(self) -> Self:

        self.count = self.compute_count()
        return self

    def validate(
        self,
        checksum: bool = True,
        count: bool = True,
    ) -> Self:
        r"""Validates consistency of attribute values.

        Args:
            checksum (bool):
                Check the consistency of the :attr:`checksum` attribute.

            count (bool):
                Check the consistency of the :attr:`count` attribute.

        Returns:
            :class:`SrecRecord`: *self*.

        Raises:
            ValueError: Some targeted attributes are inconsistent.

        Examples:
            >>> from bin2srec.records import SrecRecord
            >>> record = SrecRecord.create_start(0x1234)
            >>> record.checksum = 0
            >>> _ = record.validate()
            Traceback (most recent call last):
                ...
            ValueError: wrong checksum
        """

        Tag = self.Tag
        tag = Tag(self.tag)
        address = self.address

        if address < 0:
            raise ValueError('address overflow')

        if self.checksum is not None:
            if not 0 <= self.checksum <= 0xFF:
                raise ValueError('checksum overflow')

            if checksum:
                if self.checksum != self.compute_checksum():
                    raise ValueError('wrong checksum')

        if self.count is not None:
            if not 3 <= self.count <= 0xFF:
                raise ValueError('count overflow')

            if count:
                if self.count != self.compute_count():
                    raise ValueError('wrong count')

        if tag == Tag.RESERVED:
            raise ValueError('reserved tag')

        data_size = len(self.data)

        if not Tag.HEADER <= tag <= Tag.DATA_32:
            if data_size:
                raise ValueError('unexpected data')

        if data_size > tag.get_data_max():
            raise ValueError('data size overflow')

        if not 0 <= address <= tag.get_address_max():
            raise ValueError('address overflow')

        return self


def format_data_record(
    address: int,
    address_size: int,
    data: AnyBytes,
) -> str:
    r"""Formats a data record.

    The *address* is truncated to `address_size` bytes.

    The caller guarantees that ``address_size + len(data) + 1`` fits the single
    byte *count* field; line lengths up to 32 bytes always do.

    Args:
        address (int):
            Record address.

        address_size (int):
            Address field size, in bytes; either 2, 3, or 4.

        data (bytes):
            Record byte data.

    Returns:
        str: Record text, without line termination.

    Examples:
        >>> from bin2srec.records import format_data_record
        >>> format_data_record(0x1234, 2, b'abc')
        'S10612346162638D'
        >>> format_data_record(0x1234, 3, b'abc')
        'S2070012346162638C'
    """

    tag = SrecTag.from_address_size(address_size)
    address &= tag.get_address_max()
    record = SrecRecord.create_data(address, data, tag=tag)
    return record.to_bytestr(end=b'').decode()


def format_header_record() -> str:
    r"""Formats the standard header record.

    Returns:
        str: Header record text, without line termination.

    Examples:
        >>> from bin2srec.records import format_header_record
        >>> format_header_record()
        'S00600004844521B'
    """

    record = SrecRecord.create_header()
    return record.to_bytestr(end=b'').decode()


def format_footer(
    record_count: int,
    address: int,
    address_size: int,
) -> Tuple[str, str]:
    r"""Formats the footer records.

    The footer is made of the *record count* record (``S5`` up to ``0xFFFF``
    data records, ``S6`` beyond), followed by the *start address* record
    matching the *data* records (``S9``, ``S8``, ``S7`` for 2, 3, 4 address
    bytes respectively).

    Args:
        record_count (int):
            Number of *data* records.

        address (int):
            Start address; truncated to `address_size` bytes.

        address_size (int):
            Address size of the *data* records.

    Returns:
        (str, str): Record count and start address record texts, without line
        termination.

    Raises:
        ValueError: `record_count` overflows 24 bits.

    Examples:
        >>> from bin2srec.records import format_footer
        >>> format_footer(1, 0, 2)
        ('S5030001FB', 'S9030000FC')
        >>> format_footer(0x10000, 0x87654321, 4)
        ('S604010000FA', 'S70587654321AA')
    """

    count_record = SrecRecord.create_count(record_count)
    start_tag = SrecTag.from_address_size(address_size).get_tag_match()
    address &= start_tag.get_address_max()
    start_record = SrecRecord.create_start(address, tag=start_tag)
    return (count_record.to_bytestr(end=b'').decode(),
            start_record.to_bytestr(end=b'').decode())
