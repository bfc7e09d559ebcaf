# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/types.py
# DESCRIPTION:    Aperture type definitions and constants
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

"""Aperture common type definitions and constants

This module contains:

1. Type aliases and tagged token types.
2. Exceptions.
3. Sentinels.
4. Enums.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag, auto
from typing import Any, Final, TypeAlias

import zmq

from firebird.base.types import Error, Sentinel

#  Exceptions
class ConfigurationError(Error):
    "Unknown symbolic name of pattern, device or flag, or invalid portal specification"

class ProtocolError(Error):
    "Address specification uses unknown transport protocol"

class InvalidMessageError(Error):
    "A formal error was detected in a message"

#: Failure of bind, connect, send, recv or close reported by ZeroMQ. Raised unmodified.
ResourceError: Final[type[zmq.ZMQError]] = zmq.ZMQError

#Sentinels
#: Sentinel returned by receive when there is no message pending on non-blocking socket
NO_RESULT: Final[Sentinel] = Sentinel('NO_RESULT')

# Enums
class Namespace(Enum):
    """Namespaces of symbolic names known to `.PatternRegistry`."""
    PATTERN = 'pattern'
    DEVICE = 'device'
    FLAG = 'flag'

class SocketMode(IntEnum):
    """ZeroMQ socket mode."""
    UNKNOWN = auto()
    BIND = auto()
    CONNECT = auto()

class SocketPattern(IntEnum):
    """ZeroMQ messaging pattern (socket type)."""
    PAIR = zmq.PAIR
    PUSH = zmq.PUSH
    PULL = zmq.PULL
    PUB = zmq.PUB
    SUB = zmq.SUB
    REQ = zmq.REQ
    REP = zmq.REP
    XREQ = zmq.DEALER
    XREP = zmq.ROUTER
    # Aliases
    DEALER = XREQ
    ROUTER = XREP

class Device(IntEnum):
    """ZeroMQ device (message forwarding topology)."""
    NONE = 0
    STREAMER = zmq.STREAMER
    FORWARDER = zmq.FORWARDER
    QUEUE = zmq.QUEUE

class SendFlag(IntFlag):
    """Flags for send and receive operations."""
    NONE = 0
    SEND_MORE = zmq.SNDMORE
    NO_BLOCK = zmq.NOBLOCK
    # Aliases
    DONT_WAIT = NO_BLOCK

class Scheme(Enum):
    """ZeroMQ transport protocol."""
    INPROC = 'inproc'
    IPC = 'ipc'
    TCP = 'tcp'
    PGM = 'pgm'
    EPGM = 'epgm'
    @property
    def prefix(self) -> str:
        "Endpoint address prefix for this protocol."
        return f'{self.value}://'

# Tokens
@dataclass(frozen=True)
class NamedToken:
    """Symbolic name of pattern, device or flag.

    Arguments:
        name: Symbolic name. `None` stands for "no device" or "no flags".
    """
    name: Any

@dataclass(frozen=True)
class RawCode:
    """Raw ZeroMQ integer code that is used as is.

    Arguments:
        code: ZeroMQ constant.
    """
    code: int

Token: TypeAlias = NamedToken | RawCode
"""Pattern, device or flag either by name or by ZeroMQ code"""

def as_token(value: Any) -> Token:
    """Returns `Token` for `value`.

    Integers (including `IntEnum` and `IntFlag` members) become `RawCode`, tokens are
    returned unchanged and everything else becomes `NamedToken`.
    """
    if isinstance(value, (NamedToken, RawCode)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return RawCode(int(value))
    return NamedToken(value)
