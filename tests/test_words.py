import io

import pytest

from arraykit.words import abbreviate, main


def test_short_words_unchanged():
    for word in ["word", "a", "abcdefghij"]:
        assert abbreviate(word) == word


def test_long_word_examples():
    assert abbreviate("localization") == "l10n"
    assert abbreviate("internationalization") == "i18n"


def test_abbreviation_keeps_ends():
    word = "pneumonoultramicroscopicsilicovolcanoconiosis"
    result = abbreviate(word)
    assert result[0] == word[0] and result[-1] == word[-1]
    assert int(result[1:-1]) == len(word) - 2


def test_main_processes_words(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nword\nlocalization\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("word")
    assert lines[1] == abbreviate("localization")


def test_main_respects_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 alpha beta"))
    main([])
    out = capsys.readouterr().out
    assert "alpha" in out
    assert "beta" not in out


def test_main_rejects_bad_count(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("many words"))
    with pytest.raises(ValueError):
        main([])


def test_main_rejects_empty_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(ValueError):
        main([])