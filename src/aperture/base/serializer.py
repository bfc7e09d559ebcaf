# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/serializer.py
# DESCRIPTION:    Serializers for envelope payloads
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

"""Aperture serializers for envelope payloads.

Serializer converts one application object to bytes transmitted as one ZeroMQ message
(envelope) and back. Serializers are passed explicitly to `~aperture.base.envelope.send`
and `~aperture.base.envelope.recv`, or attached to `~aperture.base.transport.Portal`.
"""

from __future__ import annotations

import pickle
from typing import Any, Protocol, runtime_checkable

from google.protobuf import any_pb2
from google.protobuf.message import DecodeError
from google.protobuf.message import Message as ProtoMessage

from firebird.base.protobuf import PROTO_ANY, create_message, is_msg_registered, load_registered
from firebird.base.types import DEFAULT

from .config import aperture_config
from .types import InvalidMessageError

@runtime_checkable
class Serializer(Protocol):
    """Serializer protocol.
    """
    def serialize(self, obj: Any) -> bytes:
        """Returns `obj` serialized to bytes.
        """
    def deserialize(self, data: bytes) -> Any:
        """Returns object reconstructed from `data`.
        """

class PickleSerializer:
    """Serializer for arbitrary Python objects that uses `pickle`.

    Arguments:
        protocol: Pickle protocol. `DEFAULT` value is taken from
                  `ApertureConfig.pickle_protocol`.

    Important:
        Never receive pickled payloads from untrusted peers.
    """
    def __init__(self, protocol: int | DEFAULT=DEFAULT):
        #: Pickle protocol
        self.protocol: int = \
            aperture_config.pickle_protocol.value if protocol is DEFAULT else protocol
    def __repr__(self):
        return f"{self.__class__.__qualname__}(protocol={self.protocol})"
    def serialize(self, obj: Any) -> bytes:
        return pickle.dumps(obj, self.protocol)
    def deserialize(self, data: bytes) -> Any:
        return pickle.loads(data)

class ProtobufSerializer:
    """Serializer for protobuf messages.

    Messages are packed into `google.protobuf.Any`, so the receiver does not need to know
    the message type in advance. Received message types must be registered in
    `firebird.base.protobuf` registry.
    """
    def serialize(self, obj: ProtoMessage) -> bytes:
        envelope = any_pb2.Any()
        envelope.Pack(obj)
        return envelope.SerializeToString()
    def deserialize(self, data: bytes) -> ProtoMessage:
        """Returns protobuf message reconstructed from `data`.

        Raises:
            InvalidMessageError: When `data` is not a serialized `google.protobuf.Any`, or
                it contains unregistered message type.
        """
        envelope: any_pb2.Any = create_message(PROTO_ANY)
        try:
            envelope.ParseFromString(data)
        except DecodeError as exc:
            raise InvalidMessageError("Invalid protobuf envelope") from exc
        type_name = envelope.TypeName()
        if not is_msg_registered(type_name):
            raise InvalidMessageError(f"Unregistered protobuf message '{type_name}'",
                                      type_name=type_name)
        result = create_message(type_name)
        envelope.Unpack(result)
        return result

#: Serializer used when none is specified
default_serializer: Serializer = PickleSerializer()

load_registered('firebird.base.protobuf')
del load_registered
