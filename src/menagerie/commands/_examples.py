"""``--examples`` flag: usage lines plus a worked sample session.

The sample session is produced by running the collector over a fixed
script of answers, so it always shows what the current prompts, retry
notice, and report format actually print.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from io import StringIO
from typing import Any, TypeVar

import click

from menagerie.config.models import PromptConfig
from menagerie.domain.errors import IOFailure
from menagerie.infrastructure.lines import StreamLineSink
from menagerie.services.collector import RecordCollector

F = TypeVar("F", bound=Callable[..., Any])

SAMPLE_ANSWERS = ("Rex", "Dog", "3", "yes", "Milo", "Cat", "seven", "1", "no")


class _ScriptedSource:
    """Answer prompts from a script, echoing each answer into the transcript."""

    def __init__(self, answers: Iterable[str], transcript: StringIO) -> None:
        self._answers = iter(answers)
        self._transcript = transcript

    def read_line(self) -> str:
        try:
            answer = next(self._answers)
        except StopIteration:
            raise IOFailure("sample script exhausted") from None
        self._transcript.write(f"{answer}\n")
        return answer


def sample_session(
    answers: Iterable[str] = SAMPLE_ANSWERS,
    prompts: PromptConfig | None = None,
) -> str:
    """Run the default collector over *answers* and return the transcript."""
    transcript = StringIO()
    RecordCollector(prompts=prompts).run(
        _ScriptedSource(answers, transcript), StreamLineSink(transcript)
    )
    return transcript.getvalue()


def examples_option(usage: str) -> Callable[[F], F]:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(usage)
        click.echo("\nSample session:\n")
        click.echo(sample_session(), nl=False)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples and a sample session.",
    )
