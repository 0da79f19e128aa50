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

"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -m bin2srec` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``bin2srec.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``bin2srec.__main__`` in ``sys.modules``.

  Also see (1) from https://click.palletsprojects.com/en/stable/setuptools/#setuptools-integration
"""

from typing import IO
from typing import Optional

import click

from .__init__ import __version__
from .encoder import EncodingConfig
from .encoder import RangeEncoder
from .errors import SourceUnavailableError
from .sources import BaseSource
from .sources import MemorySource
from .sources import StreamSource
from .utils import parse_int

BANNER = f'bin2srec {__version__} - Convert binary to Motorola S-Record file.'


class HexIntParamType(click.ParamType):
    name = 'address'

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_int(value, base=16)
        except ValueError:
            self.fail(f'invalid address: {value!r}', param, ctx)


HEX_INT = HexIntParamType()

FILE_PATH_IN = click.Path(dir_okay=False, allow_dash=True, readable=True, exists=True)
FILE_PATH_OUT = click.Path(dir_okay=False, allow_dash=True, writable=True)


# ----------------------------------------------------------------------------

def print_version(ctx, _, value):

    if not value or ctx.resilient_parsing:
        return

    click.echo(str(__version__))
    ctx.exit()


def echo_settings(
    input_path: str,
    output_path: str,
    config: EncodingConfig,
    encoder: RangeEncoder,
) -> None:

    click.echo(BANNER, err=True)
    click.echo(f'Input binary file:    {input_path}', err=True)
    click.echo(f'Output S-record file: {output_path}', err=True)
    click.echo(f'Begin address     = {config.begin:X}h', err=True)
    click.echo(f'End address       = {config.end:X}h', err=True)
    click.echo(f'Address offset    = {config.offset:X}h', err=True)
    click.echo(f'Maximum address   = {encoder.address_max:X}h', err=True)
    click.echo(f'Address bytes     = {encoder.address_size:d}', err=True)


# ----------------------------------------------------------------------------

class InputSourceCtxMgr:

    def __init__(self, input_path: str):

        if input_path == '-':
            input_path = None

        self.input_path: Optional[str] = input_path
        self.stream: Optional[IO] = None
        self.source: Optional[BaseSource] = None

    def __enter__(self) -> 'InputSourceCtxMgr':

        if self.input_path is None:
            # standard input is not seekable
            data = click.get_binary_stream('stdin').read()
            self.source = MemorySource.from_bytes(data)
        else:
            try:
                self.stream = open(self.input_path, 'rb')
            except OSError as exc:
                raise SourceUnavailableError(f'cannot open input file {self.input_path}: {exc}') from exc
            self.source = StreamSource(self.stream)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:

        if self.stream is not None:
            self.stream.close()
            self.stream = None


# ============================================================================

@click.command()
@click.option('-b', '--begin', type=HEX_INT, help="""
    Address to begin at in the binary file (hex).
    By default it is the start of the file.
""")
@click.option('-e', '--end', type=HEX_INT, help="""
    Inclusive address to end at in the binary file (hex).
    By default it is the end of the file; clamped to it.
""")
@click.option('-o', '--offset', type=HEX_INT, help="""
    Generated address offset (hex).
    By default it is the begin address.
""")
@click.option('-a', '--address-size', 'address_size', type=int, help="""
    Number of bytes used for the address field, from 2 to 4.
    By default it is the minimum needed for the maximum address.
""")
@click.option('-l', '--line-length', 'line_length', type=int, help="""
    Number of data bytes per line, from 8 to 32.
    Defaults to 32.
""")
@click.option('-s', '--suppress', is_flag=True, help="""
    Suppresses the header and footer records.
""")
@click.option('-q', '--quiet', is_flag=True, help="""
    Quiet mode: no output except the S-records.
""")
@click.option('-c', '--color', is_flag=True, help="""
    Colorizes the record fields with ANSI codes.
""")
@click.option('--version', is_flag=True, is_eager=True,
              expose_value=False, callback=print_version, help="""
    Print version and exit.
""")
@click.argument('infile', type=FILE_PATH_IN)
@click.argument('outfile', type=FILE_PATH_OUT, default='-', required=False)
def main(
    begin: Optional[int],
    end: Optional[int],
    offset: Optional[int],
    address_size: Optional[int],
    line_length: Optional[int],
    suppress: bool,
    quiet: bool,
    color: bool,
    infile: str,
    outfile: str,
) -> None:
    r"""Converts a binary file to a Motorola S-record file.

    ``INFILE`` is the path of the input binary file.
    Set to ``-`` to read from standard input.

    ``OUTFILE`` is the path of the output S-record file.
    Set to ``-`` (default) to write to standard output.

    Addresses are hexadecimal, optionally prefixed with ``0x`` or suffixed
    with ``h``; ``0B00`` is hexadecimal too.
    """

    with InputSourceCtxMgr(infile) as ctx:
        source = ctx.source
        config = EncodingConfig.from_options(source.size(),
                                             begin=begin,
                                             end=end,
                                             offset=offset,
                                             address_size=address_size,
                                             line_length=line_length,
                                             headers=not suppress)
        encoder = RangeEncoder(config)

        if not quiet:
            echo_settings(infile, outfile, config, encoder)

        with click.open_file(outfile, 'wb') as stream:
            encoder.write(source, stream, color=color)

    if not quiet:
        click.echo('Processing complete', err=True)
