"""Interactive console abstraction.

The workflow asks the operator yes/no questions and free-text questions.
Production code prompts through click; tests inject FakeConsole with
scripted answers.
"""

from abc import ABC, abstractmethod


class Console(ABC):
    """Abstract operator interaction for dependency injection."""

    @abstractmethod
    def ask_confirmation(self, prompt: str, *, default: bool) -> bool:
        """Ask a yes/no question.

        Blocks until answered. An interrupt propagates as click.Abort.

        Args:
            prompt: Question shown to the operator
            default: Answer used when the operator just presses enter

        Returns:
            The operator's answer
        """
        ...

    @abstractmethod
    def ask_text(self, prompt: str, *, default: str | None, required: bool) -> str:
        """Ask for a line of text.

        Args:
            prompt: Question shown to the operator
            default: Suggested value used when the operator just presses enter
            required: When True, empty answers are rejected and re-asked

        Returns:
            The answer with surrounding whitespace removed
        """
        ...
