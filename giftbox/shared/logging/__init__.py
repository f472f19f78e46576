# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from .logger import logger, setup_logging

__all__ = [
    "logger",
    "setup_logging",
]
