# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/registry.py
# DESCRIPTION:    Registry of symbolic pattern, device and flag names
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

"""Aperture registry of symbolic names for ZeroMQ patterns, devices and flags.

Portals are described by role names (like 'push' or 'no-block') instead of ZeroMQ
constants. The `.PatternRegistry` translates such names to ZeroMQ codes. Each kind of
name lives in its own `.Namespace`, so 'none' means "no flags" in `Namespace.FLAG` while
it's not a valid pattern in `Namespace.PATTERN`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Final

from .types import (ConfigurationError, Device, NamedToken, Namespace, RawCode, SendFlag,
                    SocketPattern, as_token)

#: Socket patterns
PATTERNS: Final[Mapping[str, int]] = MappingProxyType({
    'pair': SocketPattern.PAIR,
    'push': SocketPattern.PUSH,
    'pull': SocketPattern.PULL,
    'pub': SocketPattern.PUB,
    'sub': SocketPattern.SUB,
    'req': SocketPattern.REQ,
    'rep': SocketPattern.REP,
    'xreq': SocketPattern.XREQ,
    'xrep': SocketPattern.XREP,
    'extended-req': SocketPattern.XREQ,
    'extended-rep': SocketPattern.XREP,
    'dealer': SocketPattern.DEALER,
    'router': SocketPattern.ROUTER,
    })
#: Devices
DEVICES: Final[Mapping[str, int]] = MappingProxyType({
    'none': Device.NONE,
    'streamer': Device.STREAMER,
    'forwarder': Device.FORWARDER,
    'queue': Device.QUEUE,
    })
#: Send/receive flags
FLAGS: Final[Mapping[str, int]] = MappingProxyType({
    'none': SendFlag.NONE,
    'send-more': SendFlag.SEND_MORE,
    'no-block': SendFlag.NO_BLOCK,
    'dont-wait': SendFlag.DONT_WAIT,
    })

def _normalize(name: str) -> str:
    return name.strip().lower().replace('_', '-')

class PatternRegistry:
    """Registry of symbolic names for ZeroMQ codes, partitioned into namespaces.

    Arguments:
        tables: Name to code mapping for each namespace. Default tables are used for
                namespaces that are not present.
    """
    def __init__(self, tables: Mapping[Namespace, Mapping[str, int]] | None=None):
        self._tables: dict[Namespace, Mapping[str, int]] = {Namespace.PATTERN: PATTERNS,
                                                            Namespace.DEVICE: DEVICES,
                                                            Namespace.FLAG: FLAGS}
        if tables:
            self._tables.update((ns, MappingProxyType(dict(table))) for ns, table
                                in tables.items())
    def __contains__(self, item: tuple[Namespace, str]) -> bool:
        namespace, name = item
        return isinstance(name, str) and _normalize(name) in self._tables[namespace]
    def names(self, namespace: Namespace) -> list[str]:
        """Returns list of symbolic names known in namespace.

        Arguments:
            namespace: Namespace of names.
        """
        return list(self._tables[namespace])
    def resolve(self, namespace: Namespace, token: Any) -> int:
        """Returns ZeroMQ code for `token`.

        Numeric codes are returned unchanged (no validation is performed), symbolic names
        are looked up in table for `namespace`. Names are case insensitive, and underscore
        could be used instead dash. `None` is a synonym for 'none'.

        Arguments:
            namespace: Namespace where symbolic names are looked up.
            token: Symbolic name, ZeroMQ code, `.NamedToken` or `.RawCode`.

        Raises:
            ConfigurationError: When `token` is not a known symbolic name in `namespace`.
        """
        match as_token(token):
            case RawCode(code):
                return code
            case NamedToken(None):
                name = 'none'
            case NamedToken(str() as value):
                name = _normalize(value)
            case _:
                name = None
        table = self._tables[namespace]
        if name not in table:
            raise ConfigurationError(f"Unknown {namespace.value} '{token}'",
                                     namespace=namespace, token=token)
        return table[name]

#: Default registry
pattern_registry: PatternRegistry = PatternRegistry()

def resolve_pattern(pattern: Any) -> int:
    """Returns ZeroMQ socket type for `pattern` (name or code).

    Raises:
        ConfigurationError: For unknown pattern name.
    """
    return pattern_registry.resolve(Namespace.PATTERN, pattern)

def resolve_device(device: Any) -> int:
    """Returns ZeroMQ device code for `device` (name, code or `None`).

    Raises:
        ConfigurationError: For unknown device name.
    """
    return pattern_registry.resolve(Namespace.DEVICE, device)

def resolve_flags(flags: Any) -> int:
    """Returns ZeroMQ send/receive flags for `flags`.

    Arguments:
        flags: Flag name, ZeroMQ code, `None`, or iterable of these that are combined
               together.

    Raises:
        ConfigurationError: For unknown flag name.
    """
    if isinstance(flags, Iterable) and not isinstance(flags, (str, bytes)):
        result = 0
        for flag in flags:
            result |= pattern_registry.resolve(Namespace.FLAG, flag)
        return result
    return pattern_registry.resolve(Namespace.FLAG, flags)
