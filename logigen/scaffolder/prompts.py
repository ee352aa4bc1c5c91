"""Interactive question collection.

The generator describes what it wants to know as ``Question`` objects and
hands them to an answer provider.  Questions whose condition is false are
skipped and their key is left out of the returned answers.  The interactive
provider uses Rich prompts; the other two exist for non-interactive runs
(``--yes``) and for scripting.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from logigen.errors import InputAborted


class QuestionKind(str, Enum):
    TEXT = "text"
    CONFIRM = "confirm"


def _always(_known: Mapping[str, Any]) -> bool:
    return True


@dataclass(frozen=True)
class Question:
    """A single question for the answer provider.

    Attributes:
        id: Key the answer is stored under.
        kind: Free text or yes/no confirmation.
        prompt: Text shown to the user.
        condition: Predicate over the already-known request fields; the
            question is skipped when it returns ``False``.
        default: Value used when the user just presses enter.
    """

    id: str
    kind: QuestionKind
    prompt: str
    condition: Callable[[Mapping[str, Any]], bool] = field(default=_always)
    default: Any = None

    def applies(self, known: Mapping[str, Any]) -> bool:
        return bool(self.condition(known))


class AnswerProvider(Protocol):
    async def ask(
        self, questions: list[Question], known: Mapping[str, Any]
    ) -> dict[str, Any]: ...


class RichPromptProvider:
    """Asks questions on the terminal with ``rich.prompt``.

    End of input or Ctrl-C at a prompt raises ``InputAborted``; piped and CI
    runs should pass ``--yes`` instead.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console

    def _ask_one(self, question: Question) -> Any:
        if question.kind is QuestionKind.CONFIRM:
            return Confirm.ask(
                question.prompt,
                default=bool(question.default),
                console=self.console,
            )
        return Prompt.ask(
            question.prompt,
            default=question.default if question.default is not None else "",
            console=self.console,
        )

    async def ask(
        self, questions: list[Question], known: Mapping[str, Any]
    ) -> dict[str, Any]:
        answers: dict[str, Any] = {}
        for question in questions:
            if not question.applies(known):
                continue
            # Prompts block on stdin; keep them off the event loop.
            try:
                answers[question.id] = await asyncio.to_thread(self._ask_one, question)
            except (EOFError, KeyboardInterrupt) as exc:
                raise InputAborted(question.id) from exc
        return answers


class DefaultsProvider:
    """Answers every applicable question with its default."""

    async def ask(
        self, questions: list[Question], known: Mapping[str, Any]
    ) -> dict[str, Any]:
        return {q.id: q.default for q in questions if q.applies(known)}


class StaticAnswerProvider:
    """Answers from a fixed mapping, falling back to question defaults."""

    def __init__(self, answers: Mapping[str, Any]) -> None:
        self.answers = dict(answers)
        self.asked: list[str] = []

    async def ask(
        self, questions: list[Question], known: Mapping[str, Any]
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for question in questions:
            if not question.applies(known):
                continue
            self.asked.append(question.id)
            result[question.id] = self.answers.get(question.id, question.default)
        return result
