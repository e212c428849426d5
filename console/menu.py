import sys
from dataclasses import dataclass
from typing import Callable, Dict, Optional, TextIO
import logging

logger = logging.getLogger()

EXIT_CHOICE = 9


@dataclass
class Option:
    label: str
    handler: Callable[['Menu'], None]


class Menu:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.options: Dict[int, Option] = {}

    def option(self, choice: int, label: str):
        """Decorator for registering menu handlers"""
        if choice == EXIT_CHOICE:
            raise ValueError(f"Choice {EXIT_CHOICE} is reserved for exit")

        def decorator(handler):
            self.options[choice] = Option(label=label, handler=handler)
            return handler
        return decorator

    def write(self, line: str = '') -> None:
        self.stdout.write(line + '\n')

    def prompt(self, message: str) -> Optional[str]:
        """Show a prompt and read one line, None at end of input"""
        self.stdout.write(message)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def prompt_float(self, message: str) -> Optional[float]:
        """Prompt until a number is entered, None at end of input"""
        while True:
            text = self.prompt(message)
            if text is None:
                return None
            try:
                return float(text)
            except ValueError:
                self.stdout.write("Invalid number, please re-enter. ")

    def show(self) -> None:
        self.write("Menu:")
        for choice in sorted(self.options):
            self.write(f"  {choice}. {self.options[choice].label}")
        self.write(f"  {EXIT_CHOICE}. Exit")

    def read_choice(self) -> Optional[int]:
        """Read a choice, re-prompting until an integer is entered"""
        text = self.prompt("Enter choice: ")
        while text is not None:
            try:
                return int(text)
            except ValueError:
                text = self.prompt("Invalid input, please re-enter a valid choice: ")
        return None

    def dispatch(self, choice: int) -> None:
        """Run the handler registered for a choice"""
        option = self.options.get(choice)
        if option is None:
            self.write(f"Unknown choice {choice}.")
            return

        logger.debug(f"--> {choice} {option.label}")
        option.handler(self)

    def run(self) -> None:
        """Show the menu and dispatch choices until exit or end of input"""
        while True:
            self.show()
            choice = self.read_choice()
            if choice is None or choice == EXIT_CHOICE:
                break
            self.dispatch(choice)

        self.write("Good bye.")
