"""Command: interactively collect name/species/age records from stdin."""

from __future__ import annotations

import sys
from io import StringIO
from typing import TYPE_CHECKING, Any

import click
from pydantic import ValidationError

from menagerie.commands._examples import examples_option
from menagerie.config.models import CollectConfig
from menagerie.domain.types import ParsePolicy
from menagerie.infrastructure.lines import StreamLineSink, StreamLineSource
from menagerie.services.collector import CollectService

if TYPE_CHECKING:
    from menagerie.commands._context import AppContext


def _effective_config(
    base: CollectConfig,
    *,
    parse_policy: str | None,
    require_text: bool | None,
    sentinel: str | None,
) -> CollectConfig:
    """Layer command-line overrides on top of the configured [collect] section."""
    overrides: dict[str, Any] = {
        "parse_policy": parse_policy,
        "require_text": require_text,
        "sentinel": sentinel,
    }
    merged = base.model_dump()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return CollectConfig.model_validate(merged)
    except ValidationError as exc:
        msg = "; ".join(err["msg"] for err in exc.errors())
        raise click.UsageError(msg) from exc


def _build_sink(app: AppContext) -> StreamLineSink:
    """Pick where prompts and the report go for the current output mode."""
    if app.settings.json_output:
        # The JSON payload carries the report; keep stdout parseable.
        return StreamLineSink(StringIO(), show_prompts=False)
    return StreamLineSink(sys.stdout, show_prompts=not app.settings.quiet)


@click.command()
@examples_option(
    """\
  menagerie collect
  menagerie collect --parse-policy abort
  menagerie -q collect < animals.txt
  menagerie --json collect --sentinel stop < animals.txt"""
)
@click.option(
    "--parse-policy",
    type=click.Choice([p.value for p in ParsePolicy]),
    default=None,
    help=(
        "On an invalid age, or empty text under --require-text: "
        "re-prompt that field (retry) or stop the run (abort)."
    ),
)
@click.option(
    "--require-text/--allow-empty",
    default=None,
    help="Reject empty name or species values.",
)
@click.option("--sentinel", default=None, help="Answer that ends collection (default: no).")
@click.pass_obj
def collect(
    app: AppContext,
    parse_policy: str | None,
    require_text: bool | None,
    sentinel: str | None,
) -> None:
    """Collect records interactively, then print them back."""
    config = _effective_config(
        app.settings.collect,
        parse_policy=parse_policy,
        require_text=require_text,
        sentinel=sentinel,
    )
    svc = CollectService(config, app.settings.prompts)
    result = svc.collect(StreamLineSource(sys.stdin), _build_sink(app))
    app.emit(result)
