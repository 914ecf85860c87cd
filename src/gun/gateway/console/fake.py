"""Fake Console implementation for testing."""

from __future__ import annotations

from gun.gateway.console.abc import Console


class FakeConsole(Console):
    """In-memory console that answers from scripted response queues.

    This class has NO public setup methods. All state is provided via constructor.

    When a queue is exhausted the prompt's default is returned, which keeps
    tests short when they only care about the first few answers. Every prompt
    asked is recorded so tests can assert on ordering.
    """

    def __init__(
        self,
        *,
        confirm_responses: list[bool] | None = None,
        text_responses: list[str] | None = None,
    ) -> None:
        """Create FakeConsole with scripted answers.

        Args:
            confirm_responses: Answers returned by ask_confirmation, in order
            text_responses: Answers returned by ask_text, in order. An empty
                string means "pressed enter": the default is used, and for a
                required prompt without default the next answer is consumed.
        """
        self._confirm_responses = list(confirm_responses) if confirm_responses is not None else []
        self._text_responses = list(text_responses) if text_responses is not None else []
        self._prompts: list[str] = []

    def ask_confirmation(self, prompt: str, *, default: bool) -> bool:
        self._prompts.append(prompt)
        if self._confirm_responses:
            return self._confirm_responses.pop(0)
        return default

    def ask_text(self, prompt: str, *, default: str | None, required: bool) -> str:
        self._prompts.append(prompt)
        while self._text_responses:
            answer = self._text_responses.pop(0).strip()
            if answer:
                return answer
            if default is not None:
                return default
            if not required:
                return ""
        if default is not None:
            return default
        if required:
            raise AssertionError(f"No scripted answer for required prompt {prompt!r}")
        return ""

    @property
    def prompts(self) -> list[str]:
        """Prompts asked so far, in order. For test assertions only."""
        return self._prompts.copy()
