# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/context.py
# DESCRIPTION:    ZeroMQ transport context
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

"""Aperture ZeroMQ transport context.

All portals are created in a `.TransportContext` that owns a ZeroMQ context. Applications
should create one at their composition root, pass it to functions that create portals,
and call `.TransportContext.terminate()` on their exit path. When no context is passed, the
process-wide default context is used. The default context is created on first use and
terminated either by an explicit `shutdown()` call, or by the process-exit hook (see
`install_shutdown_hook()` and `ApertureConfig.auto_shutdown`).
"""

from __future__ import annotations

import atexit
import threading

import zmq

from firebird.base.logging import FStrMessage as _m
from firebird.base.logging import get_logger
from firebird.base.trace import TracedMixin
from firebird.base.types import DEFAULT

from .config import aperture_config
from .types import ResourceError

class TransportContext(TracedMixin):
    """Owner of ZeroMQ context.

    The ZeroMQ context is created on first `get()` call, and terminated at most once.

    Arguments:
        io_threads: Number of ZeroMQ I/O threads. `DEFAULT` value is taken from
                    `ApertureConfig.io_threads`.
    """
    def __init__(self, io_threads: int | DEFAULT=DEFAULT):
        #: Number of ZeroMQ I/O threads
        self.io_threads: int = \
            aperture_config.io_threads.value if io_threads is DEFAULT else io_threads
        self._lock: threading.Lock = threading.Lock()
        self._ctx: zmq.Context | None = None
        self._terminated: bool = False
    def __repr__(self):
        state = 'terminated' if self._terminated else 'active' if self._ctx else 'pending'
        return f"{self.__class__.__qualname__}[{state}]"
    def _check_active(self) -> None:
        if self._terminated:
            raise ResourceError(zmq.ETERM, "Transport context was terminated")
    def get(self) -> zmq.Context:
        """Returns ZeroMQ context, creating it on first call. Safe for concurrent use.

        Raises:
            ResourceError: When context was already terminated.
        """
        self._check_active()
        if self._ctx is None:
            with self._lock:
                self._check_active()
                if self._ctx is None:
                    self._ctx = zmq.Context(self.io_threads)
                    get_logger(self).debug(_m("ZeroMQ context created with {io_threads} I/O threads",
                                              io_threads=self.io_threads))
        return self._ctx
    def terminate(self, *, forced: bool=False) -> bool:
        """Terminates ZeroMQ context. Only the first call has any effect.

        Arguments:
            forced: When True, all sockets still open in context are closed with zero
                    LINGER. Otherwise termination blocks until all sockets are closed and
                    their pending messages delivered or discarded (see socket LINGER).

        Returns:
            True if this call terminated the context, False if it was terminated before.
        """
        with self._lock:
            if self._terminated:
                return False
            self._terminated = True
            ctx = self._ctx
        if ctx is not None:
            get_logger(self).debug(_m("Terminating ZeroMQ context (forced={forced})", forced=forced))
            if forced:
                ctx.destroy(linger=0)
            else:
                ctx.term()
        return True
    @property
    def terminated(self) -> bool:
        "True if context was terminated."
        return self._terminated

# Module state is taken over on module reload, so the exit hook is never registered twice.
_default_lock: threading.Lock = globals().get('_default_lock') or threading.Lock()
_hook_lock: threading.Lock = globals().get('_hook_lock') or threading.Lock()
_default: TransportContext | None = globals().get('_default')
_hook: TransportContext | None = globals().get('_hook')

def _get_default(*, install_hook: bool) -> TransportContext:
    global _default # noqa: PLW0603
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = TransportContext()
                if install_hook:
                    install_shutdown_hook(_default)
    return _default

def default_context() -> TransportContext:
    """Returns process-wide default `.TransportContext`, creating it on first call.

    Process-exit hook that terminates the new context is installed when
    `ApertureConfig.auto_shutdown` is True.
    """
    return _get_default(install_hook=aperture_config.auto_shutdown.value)

def get_context() -> zmq.Context:
    """Returns ZeroMQ context of default `.TransportContext`.
    """
    return default_context().get()

def install_shutdown_hook(transport: TransportContext | None=None) -> bool:
    """Registers process-exit hook that terminates transport context.

    Only one hook is registered during process lifetime. The first caller claims the hook
    slot, all other calls (including concurrent ones) have no effect.

    Arguments:
        transport: Context to be terminated. Default context is used when `None`.

    Returns:
        True if hook was registered by this call.
    """
    global _hook # noqa: PLW0603
    if transport is None:
        transport = _get_default(install_hook=False)
    with _hook_lock:
        if _hook is not None:
            return False
        _hook = transport
    atexit.register(transport.terminate)
    get_logger('aperture').debug(_m("Process-exit hook installed for {transport!r}",
                                    transport=transport))
    return True

def shutdown(*, forced: bool=False) -> bool:
    """Terminates the default transport context.

    Intended for exit path of the hosting application. The context could not be used
    after shutdown.

    Arguments:
        forced: Close sockets that are still open with zero LINGER.

    Returns:
        True if default context was terminated by this call.
    """
    if _default is None:
        return False
    return _default.terminate(forced=forced)
