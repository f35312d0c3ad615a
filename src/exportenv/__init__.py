# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""exportenv -- turn .env files into shell export/unset statements or a command's environment."""

from exportenv.sdk import dotenv_values, load_dotenv

__all__ = ["__version__", "load_dotenv", "dotenv_values"]
__version__ = "0.1.0"
