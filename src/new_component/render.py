"""Placeholder substitution and code formatting.

Rendering is a literal, global replacement of the ``COMPONENT_NAME``
token followed by a pass through an async formatter. The default
formatter pipes text through the prettier CLI.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from new_component.errors import FormatterError
from new_component.naming import to_pascal_case

PLACEHOLDER = "COMPONENT_NAME"

Formatter = Callable[[str], Awaitable[str]]

PRETTIER_OPTIONS: dict[str, Any] = {
    "semi": True,
    "singleQuote": False,
    "trailingComma": "es5",
    "parser": "babel",
}


def substitute(template_text: str, component_name: str) -> str:
    """Replace every placeholder with the PascalCased component name."""
    return template_text.replace(PLACEHOLDER, to_pascal_case(component_name))


def build_index_source(component_name: str) -> str:
    """Return the unformatted barrel file re-exporting the component module."""
    return (
        f"export * from './{component_name}';\n"
        f"export {{ default }} from './{component_name}';\n"
    )


def prettier_args(options: dict[str, Any]) -> list[str]:
    """Translate prettier API options into CLI flags."""
    args: list[str] = []
    if not options.get("semi", True):
        args.append("--no-semi")
    if options.get("singleQuote", False):
        args.append("--single-quote")
    if "trailingComma" in options:
        args.extend(["--trailing-comma", str(options["trailingComma"])])
    if "parser" in options:
        args.extend(["--parser", str(options["parser"])])
    return args


def build_prettifier(
    executable: str = "prettier",
    options: dict[str, Any] | None = None,
) -> Formatter:
    """Build a formatter bound to a fixed set of prettier options.

    Args:
        executable: Name or path of the prettier binary.
        options: Prettier options; defaults to PRETTIER_OPTIONS.

    Returns:
        Async callable that formats a source string. It raises
        FormatterError when prettier exits non-zero, and lets
        FileNotFoundError through when the binary is not installed.
    """
    if options is None:
        options = PRETTIER_OPTIONS
    cmd = [executable, *prettier_args(options)]

    async def prettify(text: str) -> str:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout_bytes, stderr_bytes = await process.communicate(text.encode("utf-8"))
        if process.returncode != 0:
            stderr = stderr_bytes.decode("utf-8", errors="replace").strip()
            raise FormatterError(
                stderr or f"{executable} exited with code {process.returncode}",
                returncode=process.returncode,
            )
        return stdout_bytes.decode("utf-8")

    return prettify


async def render(template_text: str, component_name: str, prettify: Formatter) -> str:
    """Substitute the component name into a template and format the result.

    Convenience wrapper for one-shot rendering. ScaffoldPipeline runs the
    two halves as separate states so a failure is attributed to the right
    one.
    """
    return await prettify(substitute(template_text, component_name))
