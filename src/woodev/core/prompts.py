"""Preparation context handed to operation preparation steps."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import typer

logger = logging.getLogger(__name__)

Prompter = Callable[..., Any]


def prompt_text(message: str, default: Optional[str] = None) -> str:
    """Ask the user for a text value, blocking until answered."""
    if default is None:
        return typer.prompt(message)
    return typer.prompt(message, default=default)


@dataclass
class PrepareContext:
    """Inputs available while operations gather their configuration.

    Attributes:
        options: Named value flags supplied on the command line
        prompter: Callable used to ask the user for missing values
        answers: Values already prompted for in this run, keyed by name
    """

    options: Dict[str, Any] = field(default_factory=dict)
    prompter: Prompter = prompt_text
    answers: Dict[str, Any] = field(default_factory=dict)

    def option(self, key: str, default: Any = None) -> Any:
        """Return a command-line value for ``key`` without prompting."""
        value = self.options.get(key)
        if value is None:
            return default
        return value

    def value(self, key: str, message: str, default: Optional[str] = None) -> Any:
        """Return a value for ``key``, prompting only when it is not known yet.

        Command-line values win over earlier answers, which win over a new
        prompt. A prompted answer is remembered so two operations needing the
        same key ask once.

        Args:
            key: Configuration key being resolved
            message: Prompt shown to the user
            default: Initial value offered by the prompt

        Returns:
            The resolved value
        """
        supplied = self.options.get(key)
        if supplied is not None:
            logger.debug("Using command-line value for %s", key)
            return supplied
        if key in self.answers:
            return self.answers[key]
        answer = self.prompter(message, default)
        self.answers[key] = answer
        return answer
