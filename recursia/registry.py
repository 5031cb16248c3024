"""Demo registration, menu ordering, test barriers and the console main loop."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Optional

from recursia.console_utils import get_yes_or_no, make_selection_from

TESTS_MENU_FILE = "TestingGUI.cpp"

_RUNNING_MESSAGE = "Running tests in {}..."
_FAILED_MESSAGE = (
    'Tests failed in {}. Select the "Run Tests" option to see which tests failed.'
)

# Reports which of the given test files hold failing tests.
FailingTests = Callable[[frozenset], Iterable[str]]


def _conjunction_join(items: Iterable[str], conjunction: str) -> str:
    """Join items as 'a', 'a and b' or 'a, b, and c'."""
    words = sorted(items)
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} {conjunction} {words[1]}"
    return ", ".join(words[:-1]) + f", {conjunction} {words[-1]}"


@dataclass(frozen=True)
class DemoConfig:
    """Which demos appear in the menu, in what order, and what guards them."""

    window_title: str = ""
    menu_order: tuple = ()
    test_order: tuple = ()
    test_barriers: Mapping = field(default_factory=dict)
    initial_handler: str = ""
    run_tests_menu_option: bool = False

    def __post_init__(self):
        object.__setattr__(self, "menu_order", tuple(self.menu_order))
        object.__setattr__(self, "test_order", tuple(self.test_order))
        object.__setattr__(
            self,
            "test_barriers",
            {demo: frozenset(files) for demo, files in self.test_barriers.items()},
        )

    @property
    def demo_file_order(self) -> tuple:
        """Files whose demos are shown, in menu order."""
        prefix = (TESTS_MENU_FILE,) if self.run_tests_menu_option else ()
        return prefix + self.menu_order


DEFAULT_CONFIG = DemoConfig(
    window_title="A Visit to Recursia",
    menu_order=("FlagGUI.cpp", "MountainGUI.cpp", "WordGUI.cpp", "TempleGUI.cpp", "CompositeGUI.cpp"),
    test_barriers={
        "WordGUI.cpp": {"SpeakingRecursian.cpp"},
        "CompositeGUI.cpp": {"MountainsOfRecursia.cpp", "TempleOfRecursia.cpp"},
    },
    run_tests_menu_option=True,
)


@dataclass(frozen=True)
class MenuOption:
    """A named entry of the main menu."""

    name: str
    callback: Callable[[], None]


@dataclass(frozen=True)
class _Handler:
    filename: str
    line: int
    name: str
    callback: Callable[[], None]
    is_public: bool


class DemoRegistry:
    """Collects console demos and builds the menu from them."""

    def __init__(self, config=None, failing_tests: Optional[FailingTests] = None):
        self._config = DEFAULT_CONFIG if config is None else config
        self._failing_tests = failing_tests
        self._handlers: list[_Handler] = []

    @property
    def config(self) -> DemoConfig:
        return self._config

    def register(self, filename, line, name, callback):
        """Record a demo defined at the given file and line."""
        tail = os.path.basename(filename)
        self._handlers.append(
            _Handler(tail, int(line), name, callback, tail in self._config.demo_file_order)
        )
        return callback

    def handler(self, name, filename=None, line=None):
        """Decorator that registers a function as a demo called name.

        The file and line default to where the decorated function is defined.
        """

        def decorate(func):
            code = getattr(func, "__code__", None)
            where = filename if filename is not None else (code.co_filename if code else "")
            at = line if line is not None else (code.co_firstlineno if code else 0)
            self.register(where, at, name, func)
            return func

        return decorate

    def _sorted_handlers(self) -> list[_Handler]:
        order = self._config.demo_file_order

        def key(handler):
            index = order.index(handler.filename) if handler.filename in order else len(order)
            return (index, handler.filename, handler.line)

        return sorted(self._handlers, key=key)

    def _failing_in(self, filenames: frozenset) -> set:
        if self._failing_tests is None:
            return set()
        return {name for name in self._failing_tests(filenames) if name in filenames}

    def _if_passed_then(self, filenames: frozenset, callback):
        def guarded():
            print(_RUNNING_MESSAGE.format(_conjunction_join(filenames, "and")), file=sys.stdout)
            fails = self._failing_in(filenames)
            if not fails:
                return callback()
            print(_FAILED_MESSAGE.format(_conjunction_join(fails, "and")), file=sys.stderr)
            print("Press ENTER to continue.", file=sys.stderr)
            sys.stdin.readline()
            return None

        return guarded

    def program_title(self) -> str:
        return self._config.window_title

    def menu_options(self) -> list[MenuOption]:
        """Public demos in menu order, guarded by their test barriers."""
        options = []
        for entry in self._sorted_handlers():
            if not entry.is_public:
                continue
            barrier = self._config.test_barriers.get(entry.filename)
            callback = entry.callback if barrier is None else self._if_passed_then(barrier, entry.callback)
            options.append(MenuOption(entry.name, callback))
        return options

    def test_order(self) -> list[str]:
        return list(self._config.test_order)

    def initial_demo(self):
        """The first demo from the configured initial file, or None."""
        for entry in self._sorted_handlers():
            if entry.filename == self._config.initial_handler:
                return entry.callback
        return None


def console_main(registry, initial_demo=None, stdin=None, stdout=None):
    """Run the console menu loop until the user quits."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    stdout.write("You have switched to the console window. Press ENTER to continue.\n")
    stdout.flush()
    stdin.readline()

    demo = initial_demo
    while True:
        if demo is not None:
            demo()
            demo = None
            if not registry.menu_options():
                break
        else:
            options = registry.menu_options()
            stdout.write(f"{registry.program_title()}\n")
            names = [option.name for option in options] + ["Quit"]
            selection = make_selection_from("Please make a selection:", names, stdin, stdout)
            if selection == len(options):
                break
            options[selection].callback()

        stdout.write("\n")
        if not get_yes_or_no(
            "You are back at the main menu. Would you like to pick again?", stdin, stdout
        ):
            break

    stdout.write("\nExiting...\n")
    stdout.flush()