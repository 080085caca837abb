from pathlib import Path

import pytest

from cipherbox.fileio import FileDialog, FileDialogError


def scripted(*answers):
    """Return an ask callable that replays answers and records prompts."""
    remaining = list(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    ask.prompts = prompts
    ask.remaining = remaining
    return ask


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


def test_read_file_from_data_dir(data_dir):
    (data_dir / "plain.bin").write_bytes(b"\x00\x01hello\xff")
    dialog = FileDialog(scripted("y", "plain.bin"), data_dir)
    assert dialog.read_file() == b"\x00\x01hello\xff"


def test_read_file_by_path(tmp_path):
    target = tmp_path / "elsewhere.bin"
    target.write_bytes(b"payload")
    dialog = FileDialog(scripted("N", str(target)), tmp_path / "missing")
    assert dialog.read_file() == b"payload"


def test_read_file_repeats_yes_no_question(data_dir, capsys):
    (data_dir / "a.bin").write_bytes(b"abc")
    ask = scripted("maybe", "", "yes", "a.bin")
    dialog = FileDialog(ask, data_dir)
    assert dialog.read_file() == b"abc"
    assert capsys.readouterr().err.count("'y' или 'n'") == 2


def test_read_file_missing_data_dir_asks_again(tmp_path, capsys):
    target = tmp_path / "f.bin"
    target.write_bytes(b"xyz")
    ask = scripted("y", "n", str(target))
    dialog = FileDialog(ask, tmp_path / "absent")
    assert dialog.read_file() == b"xyz"
    assert "не существует" in capsys.readouterr().err


def test_read_file_empty_name_raises(data_dir):
    dialog = FileDialog(scripted("y", ""), data_dir)
    with pytest.raises(FileDialogError, match="пустым"):
        dialog.read_file()


def test_read_file_missing_file_raises(data_dir):
    dialog = FileDialog(scripted("y", "nothing.bin"), data_dir)
    with pytest.raises(FileDialogError, match="nothing.bin"):
        dialog.read_file()


def test_read_file_empty_file_raises(data_dir):
    (data_dir / "empty.bin").write_bytes(b"")
    dialog = FileDialog(scripted("y", "empty.bin"), data_dir)
    with pytest.raises(FileDialogError, match="пуст"):
        dialog.read_file()


def test_write_bytes_creates_data_dir(tmp_path):
    target_dir = tmp_path / "out"
    dialog = FileDialog(scripted("cipher.bin"), target_dir)
    path = dialog.write_bytes(b"\x10\x20\x30")
    assert path == target_dir / "cipher.bin"
    assert path.read_bytes() == b"\x10\x20\x30"


def test_write_bytes_retries_on_empty_name(data_dir, capsys):
    ask = scripted("", "second.bin")
    dialog = FileDialog(ask, data_dir)
    path = dialog.write_bytes(b"data")
    assert path.read_bytes() == b"data"
    assert ask.remaining == []
    assert "попробуйте снова" in capsys.readouterr().err


def test_write_then_read_round_trip(data_dir):
    content = bytes(range(256))
    FileDialog(scripted("round.bin"), data_dir).write_bytes(content)
    assert FileDialog(scripted("y", "round.bin"), data_dir).read_file() == content


def test_save_key_adds_extension(tmp_path):
    target_dir = tmp_path / "keys"
    dialog = FileDialog(scripted("mykey"), target_dir)
    path = dialog.save_key("00AABBCCDDEEFF00")
    assert path == target_dir / "mykey.txt"
    assert path.read_text(encoding="utf-8") == "00AABBCCDDEEFF00"


def test_save_key_retries_on_empty_name(data_dir):
    ask = scripted("", "k")
    path = FileDialog(ask, data_dir).save_key("ABCD")
    assert path.name == "k.txt"
    assert ask.remaining == []


def test_save_and_read_hex_key_round_trip(data_dir):
    FileDialog(scripted("key"), data_dir).save_key("0123456789ABCDEF")
    dialog = FileDialog(scripted("y", "key.txt"), data_dir)
    assert dialog.read_hex_key() == "0123456789ABCDEF"


def test_read_hex_key_takes_first_line(data_dir):
    (data_dir / "k.txt").write_text("FFEE\nsecond line\n", encoding="utf-8")
    dialog = FileDialog(scripted("y", "k.txt"), data_dir)
    assert dialog.read_hex_key() == "FFEE"


def test_read_hex_key_retries_after_empty_file(data_dir, capsys):
    (data_dir / "empty.txt").write_text("", encoding="utf-8")
    (data_dir / "good.txt").write_text("AB12", encoding="utf-8")
    ask = scripted("y", "empty.txt", "y", "good.txt")
    assert FileDialog(ask, data_dir).read_hex_key() == "AB12"
    assert "Файл с ключом пуст" in capsys.readouterr().err


def test_read_hex_key_retries_after_missing_file(data_dir):
    (data_dir / "good.txt").write_text("CD34", encoding="utf-8")
    ask = scripted("y", "absent.txt", "y", "", "y", "good.txt")
    assert FileDialog(ask, data_dir).read_hex_key() == "CD34"
    assert ask.remaining == []


def test_read_hex_key_stops_when_input_ends(data_dir):
    dialog = FileDialog(scripted("y", "absent.txt"), data_dir)
    with pytest.raises(EOFError):
        dialog.read_hex_key()


def test_default_data_dir_is_relative_data():
    dialog = FileDialog(scripted())
    assert dialog.data_dir == Path("data")