"""
Template rendering for Adl.

The help text, ADR template and index template ship inside the package
under ``adl/templates`` and are rendered with Jinja2.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, PackageLoader

HELP_TEMPLATE = "help.txt"
ADR_TEMPLATE = "adr.md.j2"
INDEX_TEMPLATE = "readme.md.j2"


def get_template_env() -> Environment:
    """Get Jinja2 environment with template loaders."""
    # Try package loader first, fall back to file loader
    try:
        return Environment(
            loader=PackageLoader("adl", "templates"),
            autoescape=False,
            keep_trailing_newline=True,
        )
    except ValueError:
        # Package resources could not locate the templates directory
        template_dir = Path(__file__).parent / "templates"
        return Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
        )


def render_template(template_name: str, **context: Any) -> str:
    """Render one of the embedded templates with the given context."""
    env = get_template_env()
    return env.get_template(template_name).render(**context)


def help_text() -> str:
    """Return the embedded help text verbatim, without its trailing newline."""
    env = get_template_env()
    source, _, _ = env.loader.get_source(env, HELP_TEMPLATE)
    return source.rstrip("\n")
