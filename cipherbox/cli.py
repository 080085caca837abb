"""Interactive console front end for the ciphers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

from cipherbox import beaufort, twofish, xor
from cipherbox.fileio import DEFAULT_DATA_DIR, FileDialog, FileDialogError
from cipherbox.menu import (
    Cipher,
    Scenario,
    cipher_from_choice,
    render_main_menu,
    render_scenario_menu,
    scenario_from_choice,
)
from cipherbox.support import bytes_to_hex, generate_key, hex_to_bytes

Ask = Callable[[str], str]
Transform = Callable[[bytes, bytes, bytes], bytes]

_DONE = "Сценарий завершён"
_CHECK_OK = "Проверка: дешифровка прошла успешно!"
_CHECK_FAILED = "Ошибка: дешифрованный текст не совпадает с исходным!"
_TEXT_PROMPT = "Введите текст, который нужно зашифровать: "


@dataclass(frozen=True)
class _Engine:
    """A cipher's transforms; ciphers without an IV ignore the third argument."""

    encrypt: Transform
    decrypt: Transform
    uses_iv: bool = False


_ENGINES: dict[Cipher, _Engine] = {
    Cipher.XOR: _Engine(
        lambda data, key, _iv: xor.encrypt(data, key),
        lambda data, key, _iv: xor.decrypt(data, key),
    ),
    Cipher.BEAUFORT: _Engine(
        lambda data, key, _iv: beaufort.encrypt(data, key),
        lambda data, key, _iv: beaufort.decrypt(data, key),
    ),
    Cipher.TWOFISH: _Engine(twofish.encrypt, twofish.decrypt, uses_iv=True),
}


def _show(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class _Session:
    """Runs the scenarios of one cipher."""

    def __init__(self, engine: _Engine, ask: Ask, dialog: FileDialog) -> None:
        self.engine = engine
        self.ask = ask
        self.dialog = dialog

    def handler(self, scenario: Scenario) -> Callable[[], None]:
        return {
            Scenario.ALL_PROCESS_FILE: lambda: self.encrypt_file(then_decrypt=True),
            Scenario.ENCRYPT_FILE_ONLY: lambda: self.encrypt_file(then_decrypt=False),
            Scenario.DECRYPT_FILE_ONLY: self.decrypt_file,
            Scenario.ALL_PROCESS_TEXT: lambda: self.encrypt_text(then_decrypt=True),
            Scenario.ENCRYPT_TEXT_ONLY: lambda: self.encrypt_text(then_decrypt=False),
            Scenario.DECRYPT_TEXT_ONLY: self.decrypt_text,
        }[scenario]

    def _new_iv(self) -> bytes:
        return generate_key() if self.engine.uses_iv else b""

    def _read_input_file(self) -> bytes | None:
        try:
            return self.dialog.read_file()
        except FileDialogError as exc:
            print(f"Ошибка: {exc}", file=sys.stderr)
            return None

    def _split(self, stored: bytes) -> tuple[bytes, bytes]:
        if self.engine.uses_iv:
            return stored[: twofish.BLOCK_SIZE], stored[twofish.BLOCK_SIZE :]
        return b"", stored

    def encrypt_file(self, then_decrypt: bool) -> None:
        plain = self._read_input_file()
        if plain is None:
            return
        key = generate_key()
        iv = self._new_iv()
        print("Шифруем... ")
        stored = iv + self.engine.encrypt(plain, key, iv)
        print("Файл успешно зашифрован, записываем зашифрованный файл...")
        self.dialog.write_bytes(stored)
        print("Теперь запишем ключ...")
        self.dialog.save_key(bytes_to_hex(key))
        if then_decrypt:
            print("Теперь дешифруем файл...")
            if self.engine.uses_iv and len(stored) < twofish.BLOCK_SIZE:
                print("Ошибка: Зашифрованный файл слишком мал")
                return
            stored_iv, ciphertext = self._split(stored)
            decrypted = self.engine.decrypt(ciphertext, key, stored_iv)
            print("Файл успешно дешифрован, записываем дешифрованный файл...")
            self.dialog.write_bytes(decrypted)
            if self.engine.uses_iv:
                print(_CHECK_OK if decrypted == plain else _CHECK_FAILED)
        print(_DONE)

    def decrypt_file(self) -> None:
        stored = self._read_input_file()
        if stored is None or (self.engine.uses_iv and len(stored) < twofish.BLOCK_SIZE):
            if self.engine.uses_iv:
                print("Ошибка: Файл пустой или слишком мал")
            return
        iv, ciphertext = self._split(stored)
        key = hex_to_bytes(self.dialog.read_hex_key())
        print("Дешифруем...")
        decrypted = self.engine.decrypt(ciphertext, key, iv)
        print("Файл успешно дешифрован, записываем дешифрованный файл...")
        self.dialog.write_bytes(decrypted)
        print(_DONE)

    def encrypt_text(self, then_decrypt: bool) -> None:
        text = self.ask(_TEXT_PROMPT).encode("utf-8")
        key = generate_key()
        iv = self._new_iv()
        print("Шифровка...")
        encrypted = self.engine.encrypt(text, key, iv)
        print(f"Зашифрованный текст: {_show(encrypted)}")
        print(f"Зашифрованный текст в hex: {bytes_to_hex(encrypted)}")
        hex_key = bytes_to_hex(key)
        hex_iv = bytes_to_hex(iv)
        if then_decrypt:
            if self.engine.uses_iv:
                print(
                    f'Применяем ключ "{hex_key}" и IV "{hex_iv}" '
                    f'для дешифровки текста "{_show(encrypted)}"'
                )
            else:
                print(f'Применяем ключ "{hex_key}" для дешифровки текста "{_show(encrypted)}"')
            print("Дешифровка...")
            decrypted = self.engine.decrypt(encrypted, key, iv)
            print(f"Дешифрованный текст: {_show(decrypted)}")
            print(_CHECK_OK if decrypted == text else _CHECK_FAILED)
        elif self.engine.uses_iv:
            print(f"Ключ, который использовался при шифровании текста в hex: {hex_key}")
            print(f"IV, который использовался при шифровании текста в hex: {hex_iv}")
        else:
            print(f"Ключ, который использовался при шифровки текста в hex: {hex_key}")
        print(_DONE)

    def decrypt_text(self) -> None:
        try:
            hex_text = self.ask("Введите зашифрованный текст, который нужно дешифровать (в hex): ")
            if not hex_text:
                raise ValueError("Hex-текст не может быть пустым")
            ciphertext = hex_to_bytes(hex_text)
            hex_key = self.ask("Введите ключ для дешифровки в hex: ")
            if not hex_key:
                raise ValueError("Hex-ключ не может быть пустым")
            hex_iv = ""
            if self.engine.uses_iv:
                hex_iv = self.ask("Введите IV для дешифровки в hex: ")
                if not hex_iv:
                    raise ValueError("Hex-IV не может быть пустым")
            key = hex_to_bytes(hex_key)
            iv = hex_to_bytes(hex_iv)
            print("Дешифровка...")
            decrypted = self.engine.decrypt(ciphertext, key, iv)
            print(f"Дешифрованный текст: {_show(decrypted)}")
            print(_DONE)
        except ValueError as exc:
            print(f"Ошибка входных данных: {exc}")


def run_cipher(cipher: Cipher, ask: Ask, dialog: FileDialog) -> None:
    """Offer the scenario menu for ``cipher`` until the user chooses to leave it."""
    if cipher not in _ENGINES:
        raise ValueError(f"not a cipher: {cipher}")
    session = _Session(_ENGINES[cipher], ask, dialog)
    while True:
        try:
            scenario = scenario_from_choice(ask(render_scenario_menu(cipher.title)))
        except ValueError as exc:
            print(f"Ошибка: {exc}")
            continue
        if scenario is Scenario.EXIT:
            return
        try:
            session.handler(scenario)()
        except (ValueError, FileDialogError) as exc:
            print(f"Ошибка: {exc}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive cipher menu; returns the exit status."""
    parser = argparse.ArgumentParser(prog="cipherbox", description="Encrypt and decrypt files and text.")
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIR,
        help="directory for input and output files (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    ask: Ask = input
    dialog = FileDialog(ask=ask, data_dir=args.data_dir)
    try:
        while True:
            try:
                cipher = cipher_from_choice(ask(render_main_menu()))
            except ValueError as exc:
                print(f"Ошибка: {exc}")
                continue
            if cipher is Cipher.EXIT:
                return 0
            run_cipher(cipher, ask, dialog)
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())