# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/address.py
# DESCRIPTION:    Endpoint address specifications
# CREATED:        18.10.2026
#
# The contents of this file are subject to the MIT License
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Copyright (c) 2026 The Aperture Project Contributors
# All Rights Reserved.
#
# Contributor(s): ______________________________________.

"""Aperture endpoint address specifications.

Address could be specified either as ZeroMQ endpoint string (like 'tcp://127.0.0.1:5555')
that is used as is, or as `(scheme, location)` pair (like `('tcp', '127.0.0.1:5555')`)
from which the endpoint string is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final, TypeAlias

from .types import ProtocolError, Scheme

#: Address specification
TAddressSpec: TypeAlias = str | tuple[Scheme | str, Any]

#: Scheme keywords
SCHEMES: Final[Mapping[str, Scheme]] = MappingProxyType({
    'inproc': Scheme.INPROC,
    'in-process': Scheme.INPROC,
    'ipc': Scheme.IPC,
    'tcp': Scheme.TCP,
    'pgm': Scheme.PGM,
    'epgm': Scheme.EPGM,
    'epgm-multicast': Scheme.EPGM,
    })

def get_scheme(value: Scheme | str) -> Scheme:
    """Returns `.Scheme` for scheme keyword.

    Arguments:
        value: Scheme keyword (case insensitive) or `.Scheme` member.

    Raises:
        ProtocolError: When `value` is not a known scheme.
    """
    if isinstance(value, Scheme):
        return value
    if isinstance(value, str) and (scheme := SCHEMES.get(value.strip().lower())) is not None:
        return scheme
    raise ProtocolError(f"Unknown ZeroMQ protocol '{value}'", spec=value)

def parse_address(spec: TAddressSpec) -> str:
    """Returns ZeroMQ endpoint string for address specification.

    Arguments:
        spec: Endpoint string, or `(scheme, location)` pair.

    Raises:
        ProtocolError: When `spec` is neither string nor pair, or uses unknown scheme.

    Important:
        Endpoint strings are returned unchanged, without any validation.
    """
    if isinstance(spec, str):
        return spec
    if isinstance(spec, (tuple, list)) and len(spec) == 2:
        scheme, location = spec
        try:
            return get_scheme(scheme).prefix + str(location)
        except ProtocolError as exc:
            raise ProtocolError(f"Unknown ZeroMQ protocol in {spec!r}", spec=spec) from exc
    raise ProtocolError(f"Unknown ZeroMQ protocol {spec!r}", spec=spec)
