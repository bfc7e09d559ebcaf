# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/envelope.py
# DESCRIPTION:    Envelope codec
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

"""Aperture envelope codec.

Envelope is a single ZeroMQ message that contains exactly one serialized application
object. There is no header, so publish/subscribe sockets work as unfiltered broadcast
channels, and multipart messages are not reassembled.
"""

from __future__ import annotations

from typing import Any

import zmq

from .registry import resolve_flags
from .serializer import Serializer, default_serializer
from .types import NO_RESULT, SendFlag

def send(socket: zmq.Socket, obj: Any, flags: Any=None, *,
         serializer: Serializer | None=None) -> bool:
    """Serializes object and sends it through ZeroMQ socket.

    Arguments:
        socket: ZeroMQ socket.
        obj: Object to be sent.
        flags: Flag name(s) or ZeroMQ code, see `.resolve_flags`. 'send-more' marks the
               envelope as part of multipart message, 'no-block' requests non-blocking send.
        serializer: Serializer. `default_serializer` is used when `None`.

    Returns:
        True when message was queued for delivery. False when non-blocking send was
        requested and the message could not be queued without blocking.

    Raises:
        ConfigurationError: For unknown flag name.
        ResourceError: When send fails.
    """
    data = (serializer or default_serializer).serialize(obj)
    code = resolve_flags(flags)
    try:
        socket.send(data, code)
    except zmq.Again:
        if code & SendFlag.NO_BLOCK:
            return False
        raise
    return True

def recv(socket: zmq.Socket, flags: Any=None, *, serializer: Serializer | None=None) -> Any:
    """Receives message from ZeroMQ socket and returns deserialized object.

    Arguments:
        socket: ZeroMQ socket.
        flags: Flag name(s) or ZeroMQ code, see `.resolve_flags`.
        serializer: Serializer. `default_serializer` is used when `None`.

    Returns:
        Received object, or `NO_RESULT` sentinel when non-blocking receive was requested
        and there is no message pending.

    Raises:
        ConfigurationError: For unknown flag name.
        ResourceError: When receive fails.
    """
    code = resolve_flags(flags)
    try:
        data = socket.recv(code)
    except zmq.Again:
        if code & SendFlag.NO_BLOCK:
            return NO_RESULT
        raise
    return (serializer or default_serializer).deserialize(data)
