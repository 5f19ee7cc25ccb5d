"""Runs one command through a freshly assembled application."""

from __future__ import annotations

import asyncio
from typing import Any

import click

from soms.domain.exceptions import DomainException, ValidationError
from soms.infrastructure.bootstrap import build_application


async def _dispatch(command: Any) -> Any:
    app = build_application()
    try:
        return await app.dispatcher.dispatch(command)
    finally:
        await app.aclose()


def run_command(command: Any) -> Any:
    """Dispatch *command*, turning domain errors into click errors."""
    try:
        return asyncio.run(_dispatch(command))
    except ValidationError as exc:
        if exc.violations:
            lines = "\n".join(f"  - {v}" for v in exc.violations)
            raise click.ClickException(f"Validation failed:\n{lines}")
        raise click.ClickException(str(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))
