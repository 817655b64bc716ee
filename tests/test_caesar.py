import pytest

from codebits.caesar import decrypt, encrypt, main


def _feed(monkeypatch, answers):
    stream = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(stream))


def test_encrypt_simple_shift():
    assert encrypt("abc", 1) == "bcd"


def test_encrypt_wraps_round_the_alphabet():
    assert encrypt("xyz", 3) == "abc"


def test_non_letters_unchanged():
    assert encrypt("-1! ", 5) == "-1! "
    assert decrypt("-1! ", 5) == "-1! "


def test_case_is_kept():
    result = encrypt("HeLLo", 4)
    assert [c.isupper() for c in result] == [c.isupper() for c in "HeLLo"]


@pytest.mark.parametrize("key", [0, 1, 13, 25, 26])
def test_round_trip(key):
    text = "The Quick Brown Fox, jumps over 2 lazy dogs!"
    assert decrypt(encrypt(text, key), key) == text


def test_key_of_26_is_identity():
    assert encrypt("Zebra", 26) == "Zebra"


def test_main_encrypts(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "hello", "3"])
    assert main([]) == 0
    assert "Encrypted message: khoor" in capsys.readouterr().out


def test_main_decrypts(monkeypatch, capsys):
    _feed(monkeypatch, ["2", encrypt("world", 7), "7"])
    assert main([]) == 0
    assert "Decrypted message: world" in capsys.readouterr().out


def test_main_exit(monkeypatch, capsys):
    _feed(monkeypatch, ["3"])
    assert main([]) == 0
    assert "Thank you for using it:)" in capsys.readouterr().out


def test_main_wrong_choice(monkeypatch, capsys):
    _feed(monkeypatch, ["9"])
    assert main([]) == 1
    assert "wrong Input" in capsys.readouterr().out