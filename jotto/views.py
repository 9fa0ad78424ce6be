"""
HTML rendering (no HTTP, no storage).
- render_guessed_words: the guessed words table, or instructions when empty
- render_congrats: the success message, or an empty block
- render_board: both of the above in one page

Templates live in jotto/templates and are rendered with Jinja2 (autoescaped).
"""

from pathlib import Path
from typing import Iterable, List, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .schemas import GuessedWordEntry
from .types import GuessedWordRow

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _as_entries(guessed_words: Iterable[Union[GuessedWordEntry, GuessedWordRow]]) -> List[GuessedWordEntry]:
    # Accept plain dicts too (ex. straight from a JSON payload)
    entries = []
    for row in guessed_words or ():
        if isinstance(row, GuessedWordEntry):
            entries.append(row)
        else:
            entries.append(GuessedWordEntry.model_validate(row))
    return entries


def render_guessed_words(guessed_words: Iterable[Union[GuessedWordEntry, GuessedWordRow]] = ()) -> str:
    template = env.get_template("guessed_words.html")
    return template.render(guessed_words=_as_entries(guessed_words))


def render_congrats(success: bool = False) -> str:
    template = env.get_template("congrats.html")
    return template.render(success=success)


def render_board(guessed_words: Iterable[Union[GuessedWordEntry, GuessedWordRow]] = (), success: bool = False) -> str:
    template = env.get_template("board.html")
    return template.render(guessed_words=_as_entries(guessed_words), success=success)
