"""Static package metadata surfaced to the CLI and configuration layers.

``version`` is kept in sync with ``pyproject.toml``; the ``LAYEREDCONF_*``
identifiers decide where lib_layered_config looks for configuration files.
"""

from __future__ import annotations

name = "portmanteau"
title = "Blend two words into a portmanteau"
version = "1.0.0"
author = "portmanteau contributors"
shell_command = "portmanteau"

#: Vendor, app, and slug used to build platform configuration paths.
LAYEREDCONF_VENDOR = "portmanteau"
LAYEREDCONF_APP = "portmanteau"
LAYEREDCONF_SLUG = "portmanteau"


def print_info() -> None:
    """Print the summarised metadata block for ``portmanteau info``.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for portmanteau:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
