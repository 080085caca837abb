"""Interactive reading and writing of data and key files.

Files are looked up either inside a data directory or at a path the user
types. Output files always go into the data directory, which is created
when it is missing.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

DEFAULT_DATA_DIR = "data"
KEY_EXTENSION = ".txt"

Ask = Callable[[str], str]


class FileDialogError(Exception):
    """Raised when a file requested through the dialog cannot be read."""


def _report(*lines: str) -> None:
    for line in lines:
        print(line, file=sys.stderr)


class FileDialog:
    """Prompts for file names and reads or writes the files they name.

    ``ask`` is called with a prompt and returns the user's answer, as
    :func:`input` does. ``data_dir`` is the directory that relative names
    given for the data directory are resolved against and that output files
    are written to.
    """

    def __init__(self, ask: Ask = input, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        self.ask = ask
        self.data_dir = Path(data_dir)

    def _ask_in_data_dir(self, prompt: str) -> bool:
        """Ask a yes/no question until the first character is 'y' or 'n'."""
        while True:
            answer = self.ask(prompt).strip()
            choice = answer[:1].lower()
            if choice in ("y", "n"):
                return choice == "y"
            _report("Ошибка: введите 'y' или 'n'!")

    def _locate(self, question: str, path_prompt: str, name_prompt: str) -> Path:
        """Ask where a file is and return its full path.

        Raises FileDialogError when the name given is empty.
        """
        while True:
            in_data_dir = self._ask_in_data_dir(question)
            if not in_data_dir:
                filename = self.ask(path_prompt)
                break
            if not self.data_dir.exists():
                _report(f"Ошибка: каталог '{self.data_dir}' не существует!")
                continue
            filename = self.ask(name_prompt)
            break
        if not filename:
            raise FileDialogError("Имя файла не может быть пустым!")
        return self.data_dir / filename if in_data_dir else Path(filename)

    def _ensure_data_dir(self, announcement: str) -> None:
        if self.data_dir.exists():
            return
        try:
            self.data_dir.mkdir()
        except OSError as exc:
            raise FileDialogError(
                f"Не удалось создать директорию '{self.data_dir}'"
            ) from exc
        print(announcement)

    def read_file(self) -> bytes:
        """Ask for a file and return its whole contents.

        Raises FileDialogError when the name is empty, the file cannot be
        opened or read, or the file is empty.
        """
        path = self._locate(
            f"Файл находится в директории {self.data_dir}/? (y/n): ",
            "Введите путь к файлу: ",
            f"Введите название файла (из каталога {self.data_dir}): ",
        )
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileDialogError(f"Не удалось открыть файл '{path}'") from exc
        if not content:
            raise FileDialogError("Файл пуст или произошла ошибка определения размера")
        print(f"Файл '{path}' успешно прочитан, размер: {len(content)} байт")
        return content

    def write_bytes(self, data: bytes) -> Path:
        """Ask for a name and write ``data`` to it in the data directory.

        Asks again until the write succeeds; returns the path written.
        """
        data = bytes(data)
        while True:
            try:
                filename = self.ask("Введите имя файла для записи: ")
                if not filename:
                    raise FileDialogError("Имя файла не может быть пустым!")
                self._ensure_data_dir(f"Директория '{self.data_dir}' создана")
                path = self.data_dir / filename
                try:
                    path.write_bytes(data)
                except OSError as exc:
                    raise FileDialogError(f"Не удалось создать файл '{path}'") from exc
            except FileDialogError as exc:
                _report(f"Ошибка: {exc}", "Пожалуйста, попробуйте снова.")
                continue
            print(f"Успешно записано {len(data)} байт в файл '{path}'")
            return path

    def save_key(self, hex_key: str) -> Path:
        """Ask for a name and save ``hex_key`` as a text file in the data directory.

        The extension is added to the name given. Asks again until the write
        succeeds; returns the path written. Raises FileDialogError when the
        data directory cannot be created.
        """
        self._ensure_data_dir(f"Создана директория '{self.data_dir}'")
        while True:
            filename = self.ask("Введите имя файла для записи ключа без расширения: ")
            if not filename:
                _report("Ошибка: Имя файла не может быть пустым!")
                continue
            path = self.data_dir / f"{filename}{KEY_EXTENSION}"
            try:
                with path.open("w", encoding="utf-8", newline="") as handle:
                    handle.write(hex_key)
            except OSError:
                _report(f"Ошибка: Не удалось создать файл '{path}'")
                continue
            print(f"Ключ успешно записан в файл '{path}'")
            return path

    def read_hex_key(self) -> str:
        """Ask for a key file and return its first line.

        Asks again until a file with a non-empty first line is read.
        """
        while True:
            try:
                path = self._locate(
                    f"Файл с ключом находится в директории {self.data_dir}/? (y/n): ",
                    "Введите путь к файлу с ключом: ",
                    f"Введите название файла с ключом (из каталога {self.data_dir}): ",
                )
                try:
                    with path.open("r", encoding="utf-8", newline="") as handle:
                        first_line = handle.readline()
                except (OSError, UnicodeDecodeError) as exc:
                    raise FileDialogError(f"Не удалось открыть файл '{path}'") from exc
                hex_key = first_line.removesuffix("\n")
                if not hex_key:
                    raise FileDialogError("Файл с ключом пуст")
            except FileDialogError as exc:
                _report(f"Ошибка: {exc}", "Пожалуйста, попробуйте снова.")
                continue
            print(f"Hex-ключ успешно прочитан из файла '{path}'")
            return hex_key