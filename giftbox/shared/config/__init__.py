# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import AppConfig, EditorConfig, load_config

__all__ = ["AppConfig", "EditorConfig", "load_config"]
