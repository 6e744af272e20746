"""
Interactive prompt I/O.

Review and browsing read all user input through a PromptIO so the same
menus run against the terminal or against a scripted list of answers.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from .exceptions import InputValidationError

INPUT_ARROW = "==> "


class PromptIO(Protocol):
    def print(self, text: str = "") -> None: ...

    def input(self, prompt: str = "") -> str: ...


class ConsolePromptIO:
    def print(self, text: str = "") -> None:
        print(text)

    def input(self, prompt: str = "") -> str:
        return input(prompt)


@dataclass
class BufferPromptIO:
    inputs: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)
    prompts: List[str] = field(default_factory=list)

    def print(self, text: str = "") -> None:
        self.outputs.append(text)

    def input(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise AssertionError("BufferPromptIO has no more inputs")
        return self.inputs.pop(0)


def parse_int(raw: str, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    """
    Parse a whole number typed by the user and check it against a range.

    Raises:
        InputValidationError: if the text is not an integer or out of range
    """
    text = (raw or "").strip()
    try:
        value = int(text)
    except ValueError:
        raise InputValidationError(f"Not a number: {text!r}")
    if minimum is not None and value < minimum:
        raise InputValidationError(f"{value} is below {minimum}")
    if maximum is not None and value > maximum:
        raise InputValidationError(f"{value} is above {maximum}")
    return value


def prompt_int(io: PromptIO, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    """Ask until the user enters an integer within [minimum, maximum]."""
    while True:
        try:
            return parse_int(io.input(INPUT_ARROW), minimum, maximum)
        except InputValidationError:
            continue


def prompt_text(io: PromptIO, label: Optional[str] = None) -> str:
    if label:
        io.print(label)
    return io.input(INPUT_ARROW).strip()
