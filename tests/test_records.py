import io

import pytest

from bin2srec.records import HEADER_DATA
from bin2srec.records import SrecRecord
from bin2srec.records import SrecTag
from bin2srec.records import format_data_record
from bin2srec.records import format_footer
from bin2srec.records import format_header_record


def checksum_of(line):
    body = bytes.fromhex(line[2:-2])
    return 255 - (sum(body) % 256)


class TestSrecTag:

    def test_enum(self):
        assert SrecTag.HEADER == 0
        assert SrecTag.DATA_16 == 1
        assert SrecTag.DATA_24 == 2
        assert SrecTag.DATA_32 == 3
        assert SrecTag.RESERVED == 4
        assert SrecTag.COUNT_16 == 5
        assert SrecTag.COUNT_24 == 6
        assert SrecTag.START_32 == 7
        assert SrecTag.START_24 == 8
        assert SrecTag.START_16 == 9

    def test_fit_count_tag(self):
        assert SrecTag.fit_count_tag(0x000000) == SrecTag.COUNT_16
        assert SrecTag.fit_count_tag(0x00FFFF) == SrecTag.COUNT_16
        assert SrecTag.fit_count_tag(0x010000) == SrecTag.COUNT_24
        assert SrecTag.fit_count_tag(0xFFFFFF) == SrecTag.COUNT_24

    def test_fit_count_tag_raises(self):
        with pytest.raises(ValueError, match='count overflow'):
            SrecTag.fit_count_tag(-1)

        with pytest.raises(ValueError, match='count overflow'):
            SrecTag.fit_count_tag(0x1000000)

    def test_fit_data_tag(self):
        assert SrecTag.fit_data_tag(0x00000000) == SrecTag.DATA_16
        assert SrecTag.fit_data_tag(0x0000FFFF) == SrecTag.DATA_16
        assert SrecTag.fit_data_tag(0x00010000) == SrecTag.DATA_24
        assert SrecTag.fit_data_tag(0x00FFFFFF) == SrecTag.DATA_24
        assert SrecTag.fit_data_tag(0x01000000) == SrecTag.DATA_32
        assert SrecTag.fit_data_tag(0xFFFFFFFF) == SrecTag.DATA_32

    def test_fit_data_tag_raises(self):
        with pytest.raises(ValueError, match='address overflow'):
            SrecTag.fit_data_tag(-1)

        with pytest.raises(ValueError, match='address overflow'):
            SrecTag.fit_data_tag(0x100000000)

    def test_from_address_size(self):
        assert SrecTag.from_address_size(2) == SrecTag.DATA_16
        assert SrecTag.from_address_size(3) == SrecTag.DATA_24
        assert SrecTag.from_address_size(4) == SrecTag.DATA_32

    def test_from_address_size_raises(self):
        for size in (-1, 0, 1, 5, 8):
            with pytest.raises(ValueError, match='invalid address size'):
                SrecTag.from_address_size(size)

    def test_get_address_max(self):
        assert SrecTag.HEADER.get_address_max() == 0x0000FFFF
        assert SrecTag.DATA_16.get_address_max() == 0x0000FFFF
        assert SrecTag.DATA_24.get_address_max() == 0x00FFFFFF
        assert SrecTag.DATA_32.get_address_max() == 0xFFFFFFFF
        assert SrecTag.RESERVED.get_address_max() == 0
        assert SrecTag.COUNT_16.get_address_max() == 0x0000FFFF
        assert SrecTag.COUNT_24.get_address_max() == 0x00FFFFFF
        assert SrecTag.START_32.get_address_max() == 0xFFFFFFFF
        assert SrecTag.START_24.get_address_max() == 0x00FFFFFF
        assert SrecTag.START_16.get_address_max() == 0x0000FFFF

    def test_get_address_size(self):
        sizes = [2, 2, 3, 4, 0, 2, 3, 4, 3, 2]
        for tag, size in zip(SrecTag, sizes):
            assert tag.get_address_size() == size

    def test_get_data_max(self):
        assert SrecTag.HEADER.get_data_max() == 0xFC
        assert SrecTag.DATA_16.get_data_max() == 0xFC
        assert SrecTag.DATA_24.get_data_max() == 0xFB
        assert SrecTag.DATA_32.get_data_max() == 0xFA
        for tag in SrecTag:
            if tag > SrecTag.DATA_32:
                assert tag.get_data_max() == 0

    def test_get_tag_match(self):
        assert SrecTag.HEADER.get_tag_match() is None
        assert SrecTag.DATA_16.get_tag_match() == SrecTag.START_16
        assert SrecTag.DATA_24.get_tag_match() == SrecTag.START_24
        assert SrecTag.DATA_32.get_tag_match() == SrecTag.START_32
        assert SrecTag.RESERVED.get_tag_match() is None
        assert SrecTag.COUNT_16.get_tag_match() is None
        assert SrecTag.COUNT_24.get_tag_match() is None
        assert SrecTag.START_32.get_tag_match() == SrecTag.DATA_32
        assert SrecTag.START_24.get_tag_match() == SrecTag.DATA_24
        assert SrecTag.START_16.get_tag_match() == SrecTag.DATA_16

    def test_tag_match_is_eleven_complement(self):
        for size in (2, 3, 4):
            tag = SrecTag.from_address_size(size)
            assert tag.get_tag_match() == 11 - size

    def test_is_data(self):
        for tag in SrecTag:
            assert tag.is_data() == (1 <= tag <= 3)


class TestSrecRecord:

    def test___init___basic(self):
        record = SrecRecord(SrecTag.DATA_16, address=0x1234, data=b'xyz',
                            count=3, checksum=0xA5, validate=False)
        assert record.tag == SrecTag.DATA_16
        assert record.address == 0x1234
        assert record.data == b'xyz'
        assert record.count == 3
        assert record.checksum == 0xA5

    def test___init___ellipsis(self):
        record = SrecRecord(SrecTag.DATA_16, address=0x1234, data=b'xyz')
        assert record.count == record.compute_count()
        assert record.checksum == record.compute_checksum()

    def test___init___none(self):
        record = SrecRecord(SrecTag.DATA_16, address=0x1234, data=b'xyz',
                            count=None, checksum=None)
        assert record.count is None
        assert record.checksum is None

    def test___repr__(self):
        record = SrecRecord.create_start(0x1234)
        text = repr(record)
        assert 'address:=4660' in text
        assert 'tag:=<SrecTag.START_16: 9>' in text

    def test___str__(self):
        record = SrecRecord.create_data(0x1234, b'abc')
        assert str(record) == 'S10612346162638D\n'

    def test_compute_checksum(self):
        vector = [
            (0xFC, SrecRecord.create_header(b'')),
            (0xD3, SrecRecord.create_header(b'abc')),
            (0x1B, SrecRecord.create_header()),
            (0xFC, SrecRecord.create_data(0x00000000, b'')),
            (0xB6, SrecRecord.create_data(0x00001234, b'')),
            (0x5F, SrecRecord.create_data(0x00123456, b'')),
            (0xE6, SrecRecord.create_data(0x12345678, b'')),
            (0xD3, SrecRecord.create_data(0x00000000, b'abc')),
            (0x8D, SrecRecord.create_data(0x00001234, b'abc')),
            (0x36, SrecRecord.create_data(0x00123456, b'abc')),
            (0xBD, SrecRecord.create_data(0x12345678, b'abc')),
        ]
        for expected, record in vector:
            record.validate()
            actual = record.compute_checksum()
            assert actual == expected

    # https://en.wikipedia.org/wiki/SREC_(file_format)#Checksum_calculation
    def test_compute_checksum_wikipedia(self):
        data = bytes.fromhex('0A0A0D') + bytes(13)
        record = SrecRecord.create_data(0x7AF0, data, tag=SrecTag.DATA_16)
        assert record.count == 0x13
        assert record.compute_checksum() == 0x61
        assert str(record) == 'S1137AF00A0A0D' + ('00' * 13) + '61\n'

    def test_compute_count(self):
        vector = [
            (3, SrecRecord.create_header(b'')),
            (6, SrecRecord.create_header(b'abc')),
            (3, SrecRecord.create_data(0x00000000, b'')),
            (6, SrecRecord.create_data(0x00000000, b'abc')),
            (4, SrecRecord.create_data(0x00123456, b'')),
            (7, SrecRecord.create_data(0x00123456, b'abc')),
            (5, SrecRecord.create_data(0x12345678, b'')),
            (8, SrecRecord.create_data(0x12345678, b'abc')),
        ]
        for expected, record in vector:
            record.validate()
            actual = record.compute_count()
            assert actual == expected

    def test_create_count(self):
        vector = [
            (0x000000, SrecTag.COUNT_16, None),
            (0x00FFFF, SrecTag.COUNT_16, None),
            (0x000000, SrecTag.COUNT_24, SrecTag.COUNT_24),
            (0x010000, SrecTag.COUNT_24, None),
            (0xFFFFFF, SrecTag.COUNT_24, None),
        ]
        for count, tag_out, tag_in in vector:
            record = SrecRecord.create_count(count, tag=tag_in)
            record.validate()
            assert record.tag == tag_out
            assert record.address == count
            assert record.count == tag_out.get_address_size() + 1
            assert record.data == b''

    def test_create_count_raises(self):
        with pytest.raises(ValueError, match='count overflow'):
            SrecRecord.create_count(0x10000, tag=SrecTag.COUNT_16)

        with pytest.raises(ValueError, match='count overflow'):
            SrecRecord.create_count(0x1000000)

        with pytest.raises(ValueError, match='invalid count tag'):
            SrecRecord.create_count(0, tag=SrecTag.DATA_16)

    def test_create_data(self):
        vector = [
            (0x00000000, SrecTag.DATA_16, None),
            (0x0000FFFF, SrecTag.DATA_16, None),
            (0x0000FFFF, SrecTag.DATA_32, SrecTag.DATA_32),
            (0x00010000, SrecTag.DATA_24, None),
            (0x01000000, SrecTag.DATA_32, None),
            (0xFFFFFFFF, SrecTag.DATA_32, None),
        ]
        for data in (b'', b'abc', b'a' * 0xFA):
            for address, tag_out, tag_in in vector:
                record = SrecRecord.create_data(address, data, tag=tag_in)
                record.validate()
                assert record.tag == tag_out
                assert record.address == address
                assert record.count == tag_out.get_address_size() + len(data) + 1
                assert record.data == data

    def test_create_data_raises(self):
        with pytest.raises(ValueError, match='address overflow'):
            SrecRecord.create_data(0x10000, b'', tag=SrecTag.DATA_16)

        with pytest.raises(ValueError, match='data size overflow'):
            SrecRecord.create_data(0, b'a' * 0xFB, tag=SrecTag.DATA_32)

        with pytest.raises(ValueError, match='invalid data tag'):
            SrecRecord.create_data(0, b'', tag=SrecTag.START_16)

    def test_create_header(self):
        record = SrecRecord.create_header()
        assert record.tag == SrecTag.HEADER
        assert record.address == 0
        assert record.data == HEADER_DATA
        assert str(record) == 'S00600004844521B\n'

    def test_create_header_raises(self):
        with pytest.raises(ValueError, match='data size overflow'):
            SrecRecord.create_header(b'a' * 0xFD)

    def test_create_start(self):
        vector = [
            (0x00000000, SrecTag.START_16, None),
            (0x0000FFFF, SrecTag.START_16, None),
            (0x00010000, SrecTag.START_24, None),
            (0x00000000, SrecTag.START_32, SrecTag.START_32),
            (0xFFFFFFFF, SrecTag.START_32, None),
        ]
        for address, tag_out, tag_in in vector:
            record = SrecRecord.create_start(address, tag=tag_in)
            record.validate()
            assert record.tag == tag_out
            assert record.address == address
            assert record.count == tag_out.get_address_size() + 1

    def test_create_start_raises(self):
        with pytest.raises(ValueError, match='address overflow'):
            SrecRecord.create_start(0x100000000)

        with pytest.raises(ValueError, match='address overflow'):
            SrecRecord.create_start(0x10000, tag=SrecTag.START_16)

        with pytest.raises(ValueError, match='invalid start tag'):
            SrecRecord.create_start(0, tag=SrecTag.COUNT_16)

    def test_print(self):
        record = SrecRecord.create_data(0x1234, b'abc')
        stream = io.BytesIO()
        record.print(stream=stream)
        assert stream.getvalue() == b'S10612346162638D\n'

    def test_print_color(self):
        record = SrecRecord.create_data(0x1234, b'abc')
        stream = io.BytesIO()
        record.print(stream=stream, color=True, end=b'\r\n')
        expected = (b'\x1b[0m\x1b[33mS\x1b[32m1\x1b[34m06\x1b[31m1234'
                    b'\x1b[36m61\x1b[96m62\x1b[36m63\x1b[35m8D\x1b[0m\r\n\x1b[0m')
        assert stream.getvalue() == expected

    def test_to_bytestr(self):
        vector = [
            (b'S0030000FC\n', SrecRecord.create_header(b'')),
            (b'S10612346162638D\n', SrecRecord.create_data(0x1234, b'abc')),
            (b'S5031234B6\n', SrecRecord.create_count(0x1234)),
            (b'S604001234B5\n', SrecRecord.create_count(0x1234, tag=SrecTag.COUNT_24)),
            (b'S9031234B6\n', SrecRecord.create_start(0x1234)),
            (b'S70500001234B4\n', SrecRecord.create_start(0x1234, tag=SrecTag.START_32)),
        ]
        for expected, record in vector:
            assert record.to_bytestr() == expected

    def test_to_tokens(self):
        record = SrecRecord.create_data(0x00123456, b'abc')
        tokens = record.to_tokens(end=b'')
        assert tokens == {
            'begin': b'S',
            'tag': b'2',
            'count': b'07',
            'address': b'123456',
            'data': b'616263',
            'checksum': b'36',
            'end': b'',
        }

    def test_validate_raises(self):
        matches = [
            ('wrong checksum', dict(checksum=0)),
            ('checksum overflow', dict(checksum=0x100)),
            ('wrong count', dict(count=3, checksum=None)),
            ('count overflow', dict(count=0x100, checksum=None)),
        ]
        for match, changes in matches:
            record = SrecRecord.create_data(0x1234, b'abc')
            for key, value in changes.items():
                setattr(record, key, value)
            with pytest.raises(ValueError, match=match):
                record.validate()

        record = SrecRecord(SrecTag.RESERVED, count=None, checksum=None,
                            validate=False)
        with pytest.raises(ValueError, match='reserved tag'):
            record.validate(checksum=False, count=False)

        record = SrecRecord(SrecTag.START_16, data=b'abc', validate=False)
        with pytest.raises(ValueError, match='unexpected data'):
            record.validate()

        record = SrecRecord(SrecTag.DATA_16, address=0x10000, validate=False)
        with pytest.raises(ValueError, match='address overflow'):
            record.validate()


def test_format_data_record():
    line = format_data_record(0x1234, 2, b'abc')
    assert line == 'S10612346162638D'

    line = format_data_record(0x1234, 3, b'abc')
    assert line == 'S2070012346162638C'

    line = format_data_record(0x1234, 4, b'abc')
    assert line == 'S308000012346162638B'


def test_format_data_record_checksum_formula():
    for size in (2, 3, 4):
        for length in (0, 1, 8, 31, 32):
            data = bytes(range(0xE0, 0xE0 + length))
            line = format_data_record(0x00ABCDEF & ((1 << (size * 8)) - 1), size, data)
            assert line.startswith(f'S{size - 1:d}{size + length + 1:02X}')
            assert len(line) == 4 + (size + length + 1) * 2
            assert int(line[-2:], 16) == checksum_of(line)
            assert line == line.upper()


def test_format_data_record_truncates_address():
    assert format_data_record(0x12345, 2, b'') == format_data_record(0x2345, 2, b'')


def test_format_data_record_raises():
    with pytest.raises(ValueError, match='invalid address size'):
        format_data_record(0, 5, b'')


def test_format_header_record():
    line = format_header_record()
    assert line == 'S00600004844521B'
    assert int(line[-2:], 16) == checksum_of(line)


def test_format_footer_count_16():
    for count in (0, 1, 0x1234, 0xFFFF):
        count_line, start_line = format_footer(count, 0, 2)
        assert count_line.startswith(f'S503{count:04X}')
        checksum = 255 - ((3 + (count & 0xFF) + (count >> 8)) % 256)
        assert int(count_line[-2:], 16) == checksum
        assert start_line == 'S9030000FC'


def test_format_footer_count_24():
    for count in (0x10000, 0x123456, 0xFFFFFF):
        count_line, _ = format_footer(count, 0, 2)
        assert count_line.startswith(f'S604{count:06X}')
        checksum = 255 - ((4 + (count & 0xFF) + ((count >> 8) & 0xFF) + (count >> 16)) % 256)
        assert int(count_line[-2:], 16) == checksum


def test_format_footer_start():
    vector = [
        (2, 0x1234, 'S9031234B6'),
        (3, 0x1234, 'S804001234B5'),
        (4, 0x1234, 'S70500001234B4'),
        (4, 0x87654321, 'S70587654321AA'),
    ]
    for size, address, expected in vector:
        _, start_line = format_footer(1, address, size)
        assert start_line == expected
        assert int(start_line[1]) == 11 - size
        assert int(start_line[2:4], 16) == size + 1


def test_format_footer_raises():
    with pytest.raises(ValueError, match='count overflow'):
        format_footer(0x1000000, 0, 2)
