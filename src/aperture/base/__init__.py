# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/__init__.py
# DESCRIPTION:    Aperture base package
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

"Aperture (ZeroMQ portals for pipeline stages) base package"

from firebird.base.types import DEFAULT, Error

from .address import SCHEMES, TAddressSpec, get_scheme, parse_address
from .config import APERTURE_CFG, SECTION_APERTURE, ApertureConfig, aperture_config, directory_scheme
from .context import (TransportContext, default_context, get_context, install_shutdown_hook,
                      shutdown)
from .envelope import recv, send
from .registry import (DEVICES, FLAGS, PATTERNS, PatternRegistry, pattern_registry, resolve_device,
                       resolve_flags, resolve_pattern)
from .serializer import PickleSerializer, ProtobufSerializer, Serializer, default_serializer
from .transport import (
    CLOSE_TIMEOUT_OPTIONS,
    Portal,
    PortalSpec,
    TSocketOptions,
    bind,
    close,
    connect,
    create_portal,
    create_socket,
    open_portals,
)
from .types import (
    NO_RESULT,
    ConfigurationError,
    Device,
    InvalidMessageError,
    NamedToken,
    Namespace,
    ProtocolError,
    RawCode,
    ResourceError,
    Scheme,
    SendFlag,
    SocketMode,
    SocketPattern,
    Token,
    as_token,
)

#: Aperture version
VERSION = '0.1.0'
