"""Static package metadata surfaced to logging, configuration and tooling.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

name = "mandrill_provider"
title = "Mandrill transactional-email provider adapter"
version = "1.0.0"
author = "bitranox"

# Identifiers used by lib_layered_config to locate configuration files.
LAYEREDCONF_VENDOR = "bitranox"
LAYEREDCONF_APP = "Mandrill Provider"
LAYEREDCONF_SLUG = "mandrill_provider"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for mandrill_provider:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "title",
    "version",
]
