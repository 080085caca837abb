"""Menus for choosing a cipher and an encryption scenario."""

from __future__ import annotations

from enum import Enum

TITLE_FIELD_BYTES = 54


class Cipher(Enum):
    """Entries of the main menu, valued by the number the user types."""

    EXIT = 0
    XOR = 1
    BEAUFORT = 2
    TWOFISH = 3

    @property
    def title(self) -> str:
        """Name shown in the scenario menu heading."""
        return self.name


class Scenario(Enum):
    """Entries of the scenario menu, valued by the number the user types."""

    EXIT = 0
    ALL_PROCESS_FILE = 1
    ENCRYPT_FILE_ONLY = 2
    DECRYPT_FILE_ONLY = 3
    ALL_PROCESS_TEXT = 4
    ENCRYPT_TEXT_ONLY = 5
    DECRYPT_TEXT_ONLY = 6


def _as_number(choice: int | str) -> int:
    if isinstance(choice, int):
        return choice
    try:
        return int(str(choice).strip())
    except ValueError:
        raise ValueError("Вы ввели не число") from None


def cipher_from_choice(choice: int | str) -> Cipher:
    """Return the cipher menu entry for ``choice``.

    Raises ValueError when the choice is not a number or is out of range.
    """
    number = _as_number(choice)
    try:
        return Cipher(number)
    except ValueError:
        raise ValueError("Ожидается число от 0 до 3") from None


def scenario_from_choice(choice: int | str) -> Scenario:
    """Return the scenario menu entry for ``choice``.

    Raises ValueError when the choice is not a number or is out of range.
    """
    number = _as_number(choice)
    try:
        return Scenario(number)
    except ValueError:
        raise ValueError("Ожидается число от 0 до 6") from None


_MAIN_MENU = (
    "\n┌──────────────────────────────┐\n"
    "│     АЛГОРИТМЫ ШИФРОВАНИЯ     │\n"
    "├──────────────────────────────┤\n"
    "│ 1. XOR                       │\n"
    "│ 2. Бофор                     │\n"
    "│ 3. TWOFISH [CFB]             │\n"
    "│                              │\n"
    "│ 0. Выход                     │\n"
    "└──────────────────────────────┘\n"
    "Выберите алгоритм (0-3): "
)

_SCENARIO_BODY = (
    "├────────────────────────────┬───────────────────────────┤\n"
    "│         Для файлов         │        Для консоли        │\n"
    "├────────────────────────────┼───────────────────────────┤\n"
    "│ 1. Шифрование + дешифр.    │ 4. Шифрование + дешифр.   │\n"
    "│ 2. Только шифрование       │ 5. Только шифрование      │\n"
    "│ 3. Только дешифрование     │ 6. Только дешифрование    │\n"
    "│ 0. Выход                   │                           │\n"
    "└────────────────────────────┴───────────────────────────┘\n"
    "Выберите сценарий (0-6): "
)


def render_main_menu() -> str:
    """Return the text of the cipher selection menu, ending with its prompt."""
    return _MAIN_MENU


def _fit_title(title: str) -> str:
    """Cut or pad ``title`` to a field of TITLE_FIELD_BYTES UTF-8 bytes."""
    encoded = title.encode("utf-8")[:TITLE_FIELD_BYTES]
    fitted = encoded.decode("utf-8", errors="ignore")
    padding = TITLE_FIELD_BYTES - len(fitted.encode("utf-8"))
    return fitted + " " * padding


def render_scenario_menu(name: str) -> str:
    """Return the text of the scenario menu for cipher ``name``, ending with its prompt."""
    title = _fit_title(f"СЦЕНАРИИ ШИФРОВАНИЯ {name}")
    return (
        "\n┌────────────────────────────────────────────────────────┐\n"
        f"│              {title}      │\n"
        + _SCENARIO_BODY
    )