"""
Interactive prompts for devtoken.
"""

import readline  # noqa: F401  line editing lifts the tty line length limit
from typing import Any, Callable, List, Sequence, Tuple


class PromptCancelled(Exception):
    """Raised when the user aborts a prompt (Ctrl-C or end of input)."""
    pass


def _ask(message: str, input_func: Callable[[str], str]) -> str:
    try:
        return input_func(message)
    except (KeyboardInterrupt, EOFError):
        raise PromptCancelled()


def prompt_token(input_func: Callable[[str], str] = input) -> str:
    """Ask for a JWT token until a non-empty one is entered."""
    while True:
        token = _ask("Paste JWT token: ", input_func).strip()
        if token:
            return token
        print("Token cannot be empty")


def select_option(
    message: str,
    choices: Sequence[Tuple[str, Any]],
    input_func: Callable[[str], str] = input
) -> Any:
    """Show a numbered menu of (label, value) choices and return the chosen value."""
    if not choices:
        raise ValueError("No choices to select from")

    print(message)
    for i, (label, _) in enumerate(choices, 1):
        print(f"  {i}. {label}")

    while True:
        choice = _ask("Select (number): ", input_func).strip()
        try:
            index = int(choice) - 1
        except ValueError:
            index = -1

        if 0 <= index < len(choices):
            return choices[index][1]
        print("Invalid selection")


def environment_choices(environments: Sequence[str]) -> List[Tuple[str, str]]:
    return [(env, env) for env in environments]
