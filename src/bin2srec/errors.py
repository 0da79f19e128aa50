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

r"""Exception hierarchy.

All the exceptions raised on purpose by the encoder inherit from
:class:`Bin2SrecError`, so that callers can catch them with a single clause.

Hierarchy::

    Bin2SrecError
    ├── ConfigError (ValueError)
    │   └── InvalidRangeError
    └── SourceError (OSError)
        ├── SourceReadError
        └── SourceUnavailableError

Configuration errors are always raised before any record is produced.
"""


class Bin2SrecError(Exception):
    r"""Base exception of the package."""


class ConfigError(Bin2SrecError, ValueError):
    r"""Invalid encoding configuration value."""


class InvalidRangeError(ConfigError):
    r"""Invalid address range.

    Raised when the begin address lies beyond the source, the end address is
    less than the begin address, or the generated addresses (or the record
    count) cannot be represented.
    """


class SourceError(Bin2SrecError, OSError):
    r"""Byte source failure."""


class SourceReadError(SourceError):
    r"""Unexpected short or failed read.

    A short read is expected only for the very last chunk of a range; anywhere
    else it means the source is truncated or corrupted.
    """


class SourceUnavailableError(SourceError):
    r"""The byte source cannot be opened, positioned or sized."""
