"""Real console implementation using click prompts."""

import click

from gun.gateway.console.abc import Console


class RealConsole(Console):
    """Production implementation prompting on stderr via click."""

    def ask_confirmation(self, prompt: str, *, default: bool) -> bool:
        return click.confirm(prompt, default=default, err=True)

    def ask_text(self, prompt: str, *, default: str | None, required: bool) -> str:
        # click re-asks on empty input only when there is no default
        click_default = default if default is not None else (None if required else "")
        while True:
            answer = str(
                click.prompt(
                    prompt, default=click_default, show_default=bool(default), err=True
                )
            ).strip()
            if answer or not required:
                return answer
            click.echo("A value is required.", err=True)
