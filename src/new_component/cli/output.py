"""Rich terminal output for component scaffolding.

Prints the intro banner, per-step checkmarks, the closing message, and
error reports using a fixed RGB palette.
"""

from __future__ import annotations

import random

from rich.console import Console
from rich.markup import escape

from new_component.affirmations import AFFIRMATIONS

# Palette name -> Rich color
COLORS: dict[str, str] = {
    "red": "rgb(216,16,16)",
    "green": "rgb(142,215,0)",
    "blue": "rgb(0,186,255)",
    "gold": "rgb(255,204,0)",
    "medium_gray": "rgb(128,128,128)",
    "dark_gray": "rgb(90,90,90)",
}


def _style(text: str, color: str, bold: bool = False) -> str:
    """Wrap *text* in Rich markup for a palette color."""
    style = f"bold {COLORS[color]}" if bold else COLORS[color]
    return f"[{style}]{escape(text)}[/{style}]"


class ScaffoldReporter:
    """Progress and result reporting for one scaffold run.

    Args:
        console: Console for progress output. Defaults to stdout.
        error_console: Console for error reports. Defaults to stderr.
        rng: Random source used to pick the closing affirmation.
    """

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.rng = rng or random.Random()

    def log_intro(self, name: str, directory: str, template: str) -> None:
        self.console.print()
        self.console.print(
            f"\u2728  Creating the {_style(name, 'gold', bold=True)} component \u2728"
        )
        self.console.print()
        self.console.print(f"Directory:  {_style(directory, 'blue', bold=True)}")
        self.console.print(f"Template:   {_style(template, 'green')}")
        self.console.print(_style("=" * 41, "dark_gray"))
        self.console.print()

    def log_item_completion(self, success_text: str) -> None:
        checkmark = _style("\u2713", "green")
        self.console.print(f"{checkmark} {escape(success_text)}")

    def log_conclusion(self) -> str:
        """Print the success banner and return the affirmation used."""
        affirmation = self.rng.choice(AFFIRMATIONS)
        self.console.print()
        self.console.print(_style("Component created!", "green", bold=True))
        self.console.print(_style(affirmation, "medium_gray"))
        self.console.print()
        return affirmation

    def log_error(self, error: BaseException | str) -> None:
        self.error_console.print()
        self.error_console.print(_style("Error creating component.", "red", bold=True))
        self.error_console.print(_style(str(error), "red"))
        self.error_console.print()
