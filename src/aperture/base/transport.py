# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/transport.py
# DESCRIPTION:    Portals - ZeroMQ sockets described by role names
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

"""Aperture portals - ZeroMQ sockets described by role names.

This module provides:

1. Socket factory (`create_socket`) that creates ZeroMQ sockets for symbolic patterns.
2. `Portal`, a ZeroMQ socket that sends and receives whole objects using a `Serializer`.
3. `open_portals`, a context manager that creates a group of bound/connected portals
   and releases all of them when the block is left.

Example::

    with open_portals([('bind', 'inbox', 'pull', ('tcp', '*:5555')),
                       ('connect', 'outbox', 'push', 'tcp://collector:5556',
                        {'close_timeout': 1000})]) as portals:
        while (item := portals['inbox'].recv()) is not None:
            portals['outbox'].send(transform(item))
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Final, TypeAlias

import zmq

from firebird.base.logging import FStrMessage as _m
from firebird.base.logging import get_logger
from firebird.base.trace import TracedMixin

from . import envelope
from .address import TAddressSpec, parse_address
from .config import aperture_config
from .context import TransportContext, default_context
from .registry import resolve_pattern
from .serializer import Serializer, default_serializer
from .types import ConfigurationError, ResourceError, SocketMode, SocketPattern

# Types
TSocketOptions: TypeAlias = dict[str, Any]
"Socket options"

#: Option names for close timeout (socket LINGER)
CLOSE_TIMEOUT_OPTIONS: Final[tuple[str, ...]] = ('close_timeout', 'closeTimeout')

def _apply_options(socket: zmq.Socket, socket_type: int, options: TSocketOptions) -> None:
    linger = aperture_config.close_timeout.value
    applied: set[str] = set()
    for name, value in options.items():
        if not isinstance(name, str):
            raise ConfigurationError(f"Socket option name must be a string, not {name!r}",
                                     option=name)
        if name in CLOSE_TIMEOUT_OPTIONS:
            linger = value
        elif name.upper() in zmq.SocketOption.__members__:
            setattr(socket, name.lower(), value)
            applied.add(name.lower())
        else:
            get_logger('aperture').warning(_m("Unknown socket option '{name}' ignored", name=name))
    # Explicit LINGER option wins over close timeout
    if linger is not None and 'linger' not in applied:
        socket.linger = linger
    if socket_type == zmq.SUB and 'subscribe' not in applied:
        # Envelopes have no topic, so subscribers receive everything
        socket.subscribe = b''

def create_socket(pattern: Any='pair', options: TSocketOptions | None=None, *,
                  context: TransportContext | None=None) -> zmq.Socket:
    """Returns new ZeroMQ socket that is neither bound nor connected.

    Arguments:
        pattern: Pattern name (see `.PATTERNS`) or ZeroMQ socket type.
        options: Socket options with string names. `close_timeout` sets the socket LINGER
                 in milliseconds (`ApertureConfig.close_timeout` is used when neither
                 `close_timeout` nor `linger` is specified), names of ZeroMQ socket
                 options (like `sndhwm`, case insensitive) are set on socket as they are,
                 other options are ignored.
        context: Transport context. Default context is used when `None`.

    Raises:
        ConfigurationError: For unknown pattern name, or option name that is not a string.
        ResourceError: When ZeroMQ socket could not be created or configured.

    Important:
        Caller is responsible for closing the socket.
    """
    socket_type = resolve_pattern(pattern)
    socket = (context or default_context()).get().socket(socket_type)
    try:
        _apply_options(socket, socket_type, options or {})
    except Exception:
        socket.close(0)
        raise
    return socket

class Portal(TracedMixin):
    """ZeroMQ socket that transmits whole objects, one object per message.

    Arguments:
        socket: ZeroMQ socket. Portal takes ownership of the socket.
        label: Portal label.
        serializer: Serializer for transmitted objects. `default_serializer` is used
                    when `None`.
    """
    def __init__(self, socket: zmq.Socket, *, label: str | None=None,
                 serializer: Serializer | None=None):
        #: ZeroMQ socket
        self.socket: zmq.Socket = socket
        #: Serializer for transmitted objects
        self.serializer: Serializer = serializer or default_serializer
        #: List of bound/connected endpoints
        self.endpoints: list[str] = []
        self._label: str | None = label
        self._pattern: int = socket.getsockopt(zmq.TYPE)
        self._mode: SocketMode = SocketMode.UNKNOWN
        self._closed: bool = False
    def __repr__(self):
        pattern = SocketPattern(self._pattern).name if self._pattern in SocketPattern._value2member_map_ \
            else self._pattern
        return f"Portal[{self._label or '?'}:{pattern}]"
    def __enter__(self) -> Portal:
        return self
    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._closed:
            self.close()
    def _check_open(self) -> None:
        if self._closed:
            raise ResourceError(zmq.ENOTSOCK, f"Portal '{self._label}' is closed")
    def bind(self, address: TAddressSpec) -> str:
        """Bind the portal to an address.

        Arguments:
            address: Endpoint address specification.

        Returns:
            The endpoint address. It MAY differ from specified address when wildcard
            specification is used.

        Raises:
            ProtocolError: For unknown address scheme.
            ResourceError: When portal is closed, or bind fails.
        """
        self._check_open()
        self.socket.bind(parse_address(address))
        endpoint = str(self.socket.last_endpoint, 'utf8')
        self._mode = SocketMode.BIND
        self.endpoints.append(endpoint)
        get_logger(self).debug(_m("Portal '{label}' bound to {endpoint}", label=self._label,
                                  endpoint=endpoint))
        return endpoint
    def connect(self, address: TAddressSpec) -> str:
        """Connect the portal to an address.

        Arguments:
            address: Endpoint address specification.

        Returns:
            The endpoint address.

        Raises:
            ProtocolError: For unknown address scheme.
            ResourceError: When portal is closed, or connect fails.
        """
        self._check_open()
        endpoint = parse_address(address)
        self.socket.connect(endpoint)
        self._mode = SocketMode.CONNECT
        self.endpoints.append(endpoint)
        get_logger(self).debug(_m("Portal '{label}' connected to {endpoint}", label=self._label,
                                  endpoint=endpoint))
        return endpoint
    def close(self, linger: int | None=None) -> None:
        """Close the portal. Closed portal could not be used any more.

        Arguments:
            linger: Close timeout in milliseconds that overrides the socket LINGER.

        Raises:
            ResourceError: When portal is already closed.

        Note:
            Pending blocking operations on the socket are interrupted. Unsent messages are
            kept up to the LINGER period.
        """
        self._check_open()
        self._closed = True
        self.socket.close(linger)
        get_logger(self).debug(_m("Portal '{label}' closed", label=self._label))
    def send(self, obj: Any, flags: Any=None) -> bool:
        """Send object through the portal.

        Arguments:
            obj: Object to be sent.
            flags: Flag name(s) or ZeroMQ code.

        Returns:
            False when non-blocking send was requested and the message could not be queued,
            otherwise True.

        Raises:
            ConfigurationError: For unknown flag name.
            ResourceError: When portal is closed, or send fails.
        """
        self._check_open()
        return envelope.send(self.socket, obj, flags, serializer=self.serializer)
    def recv(self, flags: Any=None) -> Any:
        """Receive object from the portal.

        Arguments:
            flags: Flag name(s) or ZeroMQ code.

        Returns:
            Received object, or `NO_RESULT` when non-blocking receive was requested and
            there is no message pending.

        Raises:
            ConfigurationError: For unknown flag name.
            ResourceError: When portal is closed, or receive fails.
        """
        self._check_open()
        return envelope.recv(self.socket, flags, serializer=self.serializer)
    def can_send(self, timeout: int=0) -> bool:
        """Returns True if the portal is ready to accept at least one outgoing message
        without blocking (or dropping it).

        Arguments:
            timeout: Timeout in milliseconds passed to socket poll() call.
        """
        self._check_open()
        return self.socket.poll(timeout, zmq.POLLOUT) == zmq.POLLOUT
    def message_available(self, timeout: int=0) -> bool:
        """Returns True if at least one message could be received without blocking.

        Arguments:
            timeout: Timeout in milliseconds passed to socket poll() call.
        """
        self._check_open()
        return self.socket.poll(timeout, zmq.POLLIN) == zmq.POLLIN
    @property
    def label(self) -> str | None:
        "Portal label."
        return self._label
    @property
    def pattern(self) -> int:
        "ZeroMQ socket type."
        return self._pattern
    @property
    def mode(self) -> SocketMode:
        "Socket mode of the last bind or connect."
        return self._mode
    @property
    def linger(self) -> int:
        "Close timeout (LINGER) in milliseconds."
        self._check_open()
        return self.socket.linger
    @property
    def closed(self) -> bool:
        "True if portal is closed."
        return self._closed

def create_portal(pattern: Any='pair', options: TSocketOptions | None=None, *,
                  label: str | None=None, context: TransportContext | None=None,
                  serializer: Serializer | None=None) -> Portal:
    """Returns new `Portal` that is neither bound nor connected.

    Arguments:
        pattern: Pattern name or ZeroMQ socket type.
        options: Socket options, see `create_socket`.
        label: Portal label.
        context: Transport context. Default context is used when `None`.
        serializer: Serializer for transmitted objects.

    Raises:
        ConfigurationError: For unknown pattern name.
        ResourceError: When ZeroMQ socket could not be created or configured.
    """
    return Portal(create_socket(pattern, options, context=context), label=label,
                  serializer=serializer)

def bind(portal: Portal, address: TAddressSpec) -> str:
    "Binds the portal to an address. See `Portal.bind`."
    return portal.bind(address)

def connect(portal: Portal, address: TAddressSpec) -> str:
    "Connects the portal to an address. See `Portal.connect`."
    return portal.connect(address)

def close(portal: Portal) -> None:
    "Closes the portal. See `Portal.close`."
    portal.close()

@dataclass(eq=True, frozen=True)
class PortalSpec:
    """Specification of portal created by `open_portals`.

    Arguments:
        mode: 'bind' or 'connect' (or `SocketMode` member).
        label: Portal label.
        pattern: Pattern name or ZeroMQ socket type.
        address: Endpoint address specification.
        options: Socket options, see `create_socket`.
    """
    mode: SocketMode | str
    label: str
    pattern: Any
    address: TAddressSpec
    options: TSocketOptions = field(default_factory=dict)
    def get_mode(self) -> SocketMode:
        """Returns `SocketMode` for `mode`.

        Raises:
            ConfigurationError: When mode is neither bind nor connect.
        """
        if self.mode in (SocketMode.BIND, SocketMode.CONNECT):
            return SocketMode(self.mode)
        if isinstance(self.mode, str) and self.mode.strip().lower() in ('bind', 'connect'):
            return SocketMode[self.mode.strip().upper()]
        raise ConfigurationError(f"Portal mode must be 'bind' or 'connect', not {self.mode!r}",
                                 mode=self.mode)

@contextmanager
def open_portals(specs: Iterable[PortalSpec | Sequence], *,
                 context: TransportContext | None=None,
                 serializer: Serializer | None=None) -> Iterator[dict[str, Portal]]:
    """Context manager that creates and binds/connects a group of portals.

    Portals are created in order of specifications, and every created portal is closed
    when the block is left (including when it's left due to exception), in reverse order
    of creation. Portals are closed also when creation, bind or connect of any portal
    fails, and the original exception is propagated.

    Arguments:
        specs: Portal specifications. Sequences are converted to `PortalSpec` as
               positional arguments, i.e. `(mode, label, pattern, address[, options])`.
        context: Transport context. Default context is used when `None`.
        serializer: Serializer for all portals.

    Returns:
        Dictionary with portals, key is portal label.

    Raises:
        ConfigurationError: On invalid mode, duplicate label or unknown pattern.
        ProtocolError: On unknown address scheme.
        ResourceError: When socket operation fails.

    Note:
        Portals closed inside the block are skipped on release.
    """
    portals: dict[str, Portal] = {}
    with ExitStack() as stack:
        for item in specs:
            spec = item if isinstance(item, PortalSpec) else PortalSpec(*item)
            mode = spec.get_mode()
            if spec.label in portals:
                raise ConfigurationError(f"Duplicate portal label '{spec.label}'", label=spec.label)
            portal = create_portal(spec.pattern, spec.options, label=spec.label,
                                   context=context, serializer=serializer)
            stack.push(portal)
            portals[spec.label] = portal
            if mode is SocketMode.BIND:
                portal.bind(spec.address)
            else:
                portal.connect(spec.address)
        yield portals
