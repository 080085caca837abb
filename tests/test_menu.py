import pytest

from cipherbox.menu import (
    TITLE_FIELD_BYTES,
    Cipher,
    Scenario,
    cipher_from_choice,
    render_main_menu,
    render_scenario_menu,
    scenario_from_choice,
)


@pytest.mark.parametrize(
    "choice, expected",
    [(0, Cipher.EXIT), (1, Cipher.XOR), (2, Cipher.BEAUFORT), (3, Cipher.TWOFISH)],
)
def test_cipher_from_choice(choice, expected):
    assert cipher_from_choice(choice) is expected


def test_cipher_from_choice_accepts_text():
    assert cipher_from_choice(" 2 ") is Cipher.BEAUFORT


@pytest.mark.parametrize("choice", [-1, 4, 99])
def test_cipher_from_choice_out_of_range(choice):
    with pytest.raises(ValueError, match="Ожидается число от 0 до 3"):
        cipher_from_choice(choice)


def test_cipher_from_choice_not_a_number():
    with pytest.raises(ValueError, match="Вы ввели не число"):
        cipher_from_choice("abc")


@pytest.mark.parametrize(
    "choice, expected",
    [
        (0, Scenario.EXIT),
        (1, Scenario.ALL_PROCESS_FILE),
        (2, Scenario.ENCRYPT_FILE_ONLY),
        (3, Scenario.DECRYPT_FILE_ONLY),
        (4, Scenario.ALL_PROCESS_TEXT),
        (5, Scenario.ENCRYPT_TEXT_ONLY),
        (6, Scenario.DECRYPT_TEXT_ONLY),
    ],
)
def test_scenario_from_choice(choice, expected):
    assert scenario_from_choice(choice) is expected


@pytest.mark.parametrize("choice", [-1, 7])
def test_scenario_from_choice_out_of_range(choice):
    with pytest.raises(ValueError):
        scenario_from_choice(choice)


def test_scenario_from_choice_not_a_number():
    with pytest.raises(ValueError, match="Вы ввели не число"):
        scenario_from_choice("x")


def test_cipher_titles():
    assert [cipher_from_choice(choice).title for choice in (1, 2, 3)] == [
        "XOR",
        "BEAUFORT",
        "TWOFISH",
    ]


def test_main_menu_lists_every_cipher():
    text = render_main_menu()
    assert "│ 1. XOR" in text
    assert "│ 2. Бофор" in text
    assert "│ 3. TWOFISH [CFB]" in text
    assert "│ 0. Выход" in text
    assert "(недоступно)" not in text
    assert text.endswith("Выберите алгоритм (0-3): ")


def test_main_menu_box_lines_have_equal_width():
    lines = [line for line in render_main_menu().splitlines() if line.startswith(("│", "┌", "└", "├"))]
    assert len({len(line) for line in lines}) == 1


def test_scenario_menu_contains_name_and_prompt():
    text = render_scenario_menu("XOR")
    assert "СЦЕНАРИИ ШИФРОВАНИЯ XOR" in text
    assert "│ 6. Только дешифрование    │" in text
    assert text.endswith("Выберите сценарий (0-6): ")


def _title_line(text):
    return next(line for line in text.splitlines() if "СЦЕНАРИИ" in line)


@pytest.mark.parametrize("name", ["XOR", "TWOFISH", "BEAUFORT", "Z" * 100])
def test_scenario_title_field_has_fixed_byte_width(name):
    line = _title_line(render_scenario_menu(name))
    inner = line[len("│              ") : -len("      │")]
    assert len(inner.encode("utf-8")) == TITLE_FIELD_BYTES


def test_scenario_title_truncated_for_long_names():
    line = _title_line(render_scenario_menu("Z" * 100))
    assert "Z" * 100 not in line
    assert line.endswith("Z      │")
    assert _title_line(render_scenario_menu("XOR")).encode("utf-8").__len__() == len(
        line.encode("utf-8")
    )