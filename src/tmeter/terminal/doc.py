# SPDX-License-Identifier: MIT

from rich.console import Console

from tmeter.view.help import EDIT_KEY_BINDINGS, KEY_BINDINGS


def print_doc(text: str) -> None:
    """Print documentation in Unix man-page style without markdown rendering."""
    console = Console()

    for line in text.strip().split("\n"):
        line = line.replace("`", "")

        if line.startswith("# "):
            console.print(f"\n{line[2:].strip().upper()}", style="bold")
        elif line.startswith("## "):
            console.print(f"\n{line[3:].strip()}", style="bold")
        elif line.startswith("- "):
            console.print(f"  • {line[2:].strip()}")
        elif line.strip() == "":
            console.print()
        else:
            console.print(f"  {line.strip()}")


def _bindings(bindings: tuple[tuple[str, str], ...]) -> str:
    return "\n".join(f"- `{key}`  {action}" for key, action in bindings)


OVERVIEW_DOC = f"""
# t-meter

A live view of how much of the day has passed. The bar spans the terminal,
the pointer and floating clock follow the current time, and ticks below the
bar mark your wake-up time, noon, your bed time and any custom markers.

## Keys

{_bindings(KEY_BINDINGS)}

## Editing a time

Press `w` or `b`, type the new time on the 24-hour clock and press Enter.
An invalid time (format, hour above 23, minute above 59) is reported inline
and nothing is saved until the time is valid.

{_bindings(EDIT_KEY_BINDINGS)}

## Configuration

Settings live in a YAML file; run `t-meter config path` to find it and
`t-meter config view` to see the current values. Theme, mode and bar style
changes made with the keys are saved right away.
"""


def doc() -> None:
    """Show the key bindings and usage notes."""
    print_doc(OVERVIEW_DOC)
