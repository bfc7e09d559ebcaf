# SPDX-FileCopyrightText: 2026-present The Aperture Project Contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: aperture
# FILE:           aperture/base/config.py
# DESCRIPTION:    Aperture configuration
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

"""Aperture configuration.

Configuration is read when package is imported from `aperture.conf` files located in
site and user configuration directories (see `firebird.base.config.DirectoryScheme`), in
that order. Only the `[aperture]` section is used. Example::

    [aperture]
    io_threads = 2
    close_timeout = 1000
    auto_shutdown = yes
"""

from __future__ import annotations

import pickle
from configparser import ConfigParser
from pathlib import Path
from typing import Final

from firebird.base.config import (BoolOption, Config, DirectoryScheme, EnvExtendedInterpolation,
                                  IntOption, get_directory_scheme)
from firebird.base.types import Error

#: filename for Aperture configuration file
APERTURE_CFG: Final[str] = 'aperture.conf'
#: Name of configuration section (and configuration)
SECTION_APERTURE: Final[str] = 'aperture'

class ApertureConfig(Config):
    """Aperture configuration.
    """
    def __init__(self):
        super().__init__(SECTION_APERTURE)
        #: Number of ZeroMQ I/O threads for transport context
        self.io_threads: IntOption = \
            IntOption('io_threads', "Number of ZeroMQ I/O threads", required=True, default=1)
        #: Register process-exit hook that terminates default transport context
        self.auto_shutdown: BoolOption = \
            BoolOption('auto_shutdown',
                       "Terminate default transport context at process exit",
                       required=True, default=True)
        #: Default LINGER for new sockets
        self.close_timeout: IntOption = \
            IntOption('close_timeout',
                      "Default close timeout (LINGER) for new sockets in milliseconds, "
                      "-1 means infinite", signed=True)
        #: Pickle protocol used by default serializer
        self.pickle_protocol: IntOption = \
            IntOption('pickle_protocol', "Pickle protocol used by default serializer",
                      required=True, default=pickle.DEFAULT_PROTOCOL)
    def validate(self) -> None:
        """Extended validation.

        - `io_threads` must be positive.
        - `pickle_protocol` must be supported by `pickle`.
        """
        super().validate()
        if self.io_threads.value < 1:
            raise Error("'io_threads' must be greater than zero")
        if self.pickle_protocol.value > pickle.HIGHEST_PROTOCOL:
            raise Error(f"'pickle_protocol' must not be greater than {pickle.HIGHEST_PROTOCOL}")

def config_files(scheme: DirectoryScheme) -> list[Path]:
    """Returns list of configuration files in order they are read.

    Arguments:
        scheme: Directory scheme.
    """
    return [scheme.config / APERTURE_CFG, scheme.user_config / APERTURE_CFG]

def load_config(config: ApertureConfig, files: list[Path]) -> None:
    """Loads configuration from files. Files that do not exist are skipped.

    Arguments:
        config: Configuration to be updated.
        files: Configuration files.
    """
    parser: ConfigParser = ConfigParser(interpolation=EnvExtendedInterpolation())
    parser.read(files)
    if parser.has_section(SECTION_APERTURE):
        config.load_config(parser)
        config.validate()

#: Active Aperture directory scheme
directory_scheme: DirectoryScheme = get_directory_scheme('aperture')

#: Aperture configuration object
aperture_config: ApertureConfig = ApertureConfig()

load_config(aperture_config, config_files(directory_scheme))
