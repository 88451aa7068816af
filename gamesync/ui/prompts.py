"""
Interactive prompts behind an injectable input port.

Every flow takes an `ask` callable (question -> answer), which is `input`
in the terminal and a canned list of answers in tests.
"""

from typing import Callable, Iterable, List, Optional, Sequence

from .reporter import Reporter

Ask = Callable[[str], str]

ACTION_KEEP = "keep"
ACTION_SELECT = "select"
ACTION_CREATE = "create"


class CancelInput(Exception):
    """Raised when the input stream ends before a valid answer."""
    pass


def terminal_ask(question: str) -> str:
    """Default input port."""
    try:
        return input(question)
    except EOFError:
        raise CancelInput()


def scripted_ask(answers: Iterable[str]) -> Ask:
    """
    Input port that replays answers in order.

    Raises CancelInput once they run out.
    """
    remaining = iter(answers)

    def ask(question: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise CancelInput()

    return ask


def choose_startup_action(current_game: Optional[str], ask: Ask, reporter: Optional[Reporter] = None) -> str:
    """
    Ask what to do before launching.

    With a current game: 1 keep (default), 2 select another, 3 create.
    Without one: 1 select (default), 2 create.
    """
    reporter = reporter or Reporter()

    if current_game:
        reporter.info(f"Current default game: {current_game}")
        reporter.step("Choose an action:")
        reporter.info("  1. Keep using the current game")
        reporter.info("  2. Select another game")
        reporter.info("  3. Create a new game project")
        choice = ask("Choice (1-3, default 1): ").strip()
        if choice == "2":
            return ACTION_SELECT
        if choice == "3":
            return ACTION_CREATE
        return ACTION_KEEP

    reporter.step("Choose an action:")
    reporter.info("  1. Select an existing game project")
    reporter.info("  2. Create a new game project")
    choice = ask("Choice (1-2): ").strip()
    if choice == "2":
        return ACTION_CREATE
    return ACTION_SELECT


def choose_from_list(options: Sequence[str], ask: Ask, reporter: Optional[Reporter] = None, prompt: str = "Select") -> str:
    """Show a numbered list and ask until a valid number is entered."""
    reporter = reporter or Reporter()
    if not options:
        raise ValueError("Nothing to choose from")

    for line in format_choices(options):
        reporter.info(line)

    while True:
        answer = ask(f"{prompt} (1-{len(options)}): ").strip()
        try:
            num = int(answer)
        except ValueError:
            num = 0
        if 1 <= num <= len(options):
            return options[num - 1]
        reporter.error(f"Invalid choice, enter a number between 1 and {len(options)}.")


def ask_until_valid(
    question: str,
    validator: Callable[[str], bool],
    ask: Ask,
    reporter: Optional[Reporter] = None,
    error: str = "Invalid value.",
    default: Optional[str] = None,
) -> str:
    """
    Ask until validator accepts the stripped answer.

    An empty answer returns default when one is given.
    """
    reporter = reporter or Reporter()
    while True:
        answer = ask(question).strip()
        if not answer and default is not None:
            return default
        if validator(answer):
            return answer
        reporter.error(error)


def confirm(question: str, ask: Ask, default: bool = True) -> bool:
    """Yes/no question. Anything but an explicit opposite answer means default."""
    answer = ask(question).strip().lower()
    if default:
        return answer != "n"
    return answer == "y"


def format_choices(options: Iterable[str]) -> List[str]:
    return [f"  {i}. {option}" for i, option in enumerate(options, 1)]
