"""Session template loading and placeholder rendering."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping

from .config import DEFAULT_TEMPLATE_NAME
from .fileio import atomic_write


TOKENS = (
    "{{DATE}}",
    "{{TIME_COLON}}",
    "{{TIME_DASH}}",
    "{{TIME_DASH_MS}}",
    "{{WORKSPACE_ROOT}}",
    "{{PROJECT_NAME}}",
    "{{OS}}",
    "{{MODEL}}",
    "{{TRANSCRIPT}}",
)

DEFAULT_TEMPLATE = (
    "# Copilot chat session {{DATE}} {{TIME_COLON}}\n"
    "\n"
    "## Conversation\n"
    "\n"
    "{{TRANSCRIPT}}\n"
)


def load_template(log_root: Path, template_name: str = DEFAULT_TEMPLATE_NAME) -> str:
    """Return the workspace template, creating the default one if missing.

    An existing template is returned verbatim. Otherwise DEFAULT_TEMPLATE is
    written to ``log_root / template_name`` first. I/O errors propagate.
    """
    template_path = log_root / template_name
    if template_path.exists():
        with open(template_path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    with atomic_write(template_path) as f:
        f.write(DEFAULT_TEMPLATE)
    return DEFAULT_TEMPLATE


def render_template(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every known token in ``template`` with its value.

    Substitution is a single left-to-right pass over the template text, so
    a replacement value containing ``{{...}}`` is never expanded. Tokens
    without a value in ``replacements`` are left as they are.
    """
    keys = [token for token in TOKENS if token in replacements]
    if not keys:
        return template

    pattern = re.compile("|".join(re.escape(token) for token in keys))
    return pattern.sub(lambda m: replacements[m.group(0)], template)
