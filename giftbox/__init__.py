# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""In-memory editor for the contents of a sweets gift box."""

__version__ = "0.1.0"
