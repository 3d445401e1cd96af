"""
Interactive prompt primitives built on click.

The session talks to a Prompter rather than to click directly, so tests
can swap in a scripted one.
"""

from typing import List, Optional, Sequence

import click


def _parse_selection(raw: str, count: int) -> List[int]:
    """Turn '1, 3' into [0, 2]. Blank input selects nothing."""
    indexes = []
    for token in raw.replace(" ", "").split(","):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise click.BadParameter(f"'{token}' is not a number between 1 and {count}")
        index = int(token) - 1
        if index not in indexes:
            indexes.append(index)
    return indexes


class Prompter:
    """Terminal prompts: yes/no, free text, single and multiple choice."""

    def confirm(self, message: str, default: bool = True) -> bool:
        return click.confirm(message, default=default)

    def text(self, message: str, default: Optional[str] = None, show_default: bool = True) -> str:
        """Free text. With default="" a blank answer is accepted."""
        return click.prompt(message, default=default, show_default=show_default, type=str)

    def choose(self, message: str, choices: Sequence[str]) -> str:
        """Numbered menu, one answer."""
        for number, choice in enumerate(choices, start=1):
            click.echo(f"  {number}) {choice}")
        number = click.prompt(
            message,
            type=click.IntRange(1, len(choices)),
            default=1
        )
        return choices[number - 1]

    def choose_many(self, message: str, choices: Sequence[str]) -> List[str]:
        """
        Numbered menu, any number of answers.

        Answers come back in menu order regardless of typing order.
        """
        for number, choice in enumerate(choices, start=1):
            click.echo(f"  {number}) {choice}")
        indexes = click.prompt(
            f"{message} (comma-separated numbers, blank for none)",
            default="",
            show_default=False,
            value_proc=lambda raw: _parse_selection(raw, len(choices))
        )
        return [choices[i] for i in sorted(indexes)]
