from typing import Optional, Protocol, Sequence, Tuple

import click

from .errors import UserCancelled

# (value, label) pairs shown by choice questions
Choices = Sequence[Tuple[str, str]]


class Prompter(Protocol):
    """The ask-capability used by the collectors.

    Every method may raise UserCancelled when the respondent aborts.
    """

    def text(self, message:str, default:str = "") -> str: ...

    def confirm(self, message:str, default:bool = False) -> bool: ...

    def choice(self, message:str, choices:Choices, default:Optional[str] = None) -> str: ...

    def reject(self, reason:str) -> None: ...


class ClickPrompter:
    def text(self, message:str, default:str = "") -> str:
        try:
            return click.prompt(message, default=default, show_default=bool(default), type=str)
        except click.Abort as e:
            raise UserCancelled() from e

    def confirm(self, message:str, default:bool = False) -> bool:
        try:
            return click.confirm(message, default=default)
        except click.Abort as e:
            raise UserCancelled() from e

    def choice(self, message:str, choices:Choices, default:Optional[str] = None) -> str:
        for value, label in choices:
            click.echo(f"  {value:<10} {label}")
        values = [value for value, _ in choices]
        try:
            return click.prompt(
                message,
                type=click.Choice(values, case_sensitive=False),
                show_choices=False,
                default=default if default is not None else values[0],
            )
        except click.Abort as e:
            raise UserCancelled() from e

    def reject(self, reason:str) -> None:
        click.secho(f"Error: {reason}", fg="red", err=True)
