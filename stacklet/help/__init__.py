# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from importlib.metadata import version


__version__ = version("stacklet.help")
