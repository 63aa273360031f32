# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from importlib import resources
from pathlib import Path
from typing import cast


def get_package_file(path: str) -> Path:
    """Return a file under the stacklet/help package."""
    # the Traversable is always a path in practice
    return cast(Path, resources.files("stacklet.help") / path)


def get_file_text(path: str) -> str:
    """Return the text of a file under the stacklet/help package."""
    return get_package_file(path).read_text()
