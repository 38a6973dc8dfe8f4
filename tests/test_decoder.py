import pytest

from tidbits import caesar
from tidbits.decoder import (
    english_frequencies,
    guess_shift,
    main,
    print_stats_analysis,
    stats_analysis,
    decrypt,
)

MESSAGE = "Off to the bunker. Every person for themselves"
CIPHERTEXT = "Ypp dy dro lexuob. Ofobi zobcyx pyb drowcovfoc"


def test_english_frequencies_pinned_values():
    table = english_frequencies()
    assert len(table) == 10
    assert table["e"] == 12.7
    assert table["d"] == 4.3


def test_stats_counts_cover_text():
    text = "Hello there, general"
    stats = stats_analysis(text)
    assert sum(s.count for s in stats) == len(text)
    assert sum(s.frequency for s in stats) == pytest.approx(100.0)
    assert len({s.letter for s in stats}) == len(stats)


def test_stats_reference_lookup_is_case_insensitive():
    stats = {s.letter: s for s in stats_analysis("Ee")}
    assert stats["E"].english_frequency == 12.7
    assert stats["e"].english_frequency == 12.7
    assert stats["E"].english_difference == pytest.approx(abs(50.0 - 12.7))


def test_stats_unknown_letter_has_no_reference():
    (stat,) = stats_analysis("zz")
    assert stat.english_frequency is None
    assert stat.english_difference == 0.0
    assert stat.count == 2


def test_stats_empty_text():
    assert stats_analysis("") == []


def test_print_stats_format(capsys):
    print_stats_analysis("x")
    assert capsys.readouterr().out.strip() == "x: 1 (100%), English Freq: 0 (0%)"


def test_decrypt_matches_forward_shift():
    assert decrypt(CIPHERTEXT, 16) == MESSAGE
    assert decrypt(MESSAGE, 10) == caesar.encrypt(MESSAGE, 10)


def test_guess_shift_worked_example(capsys):
    guess = guess_shift(CIPHERTEXT, 26)
    assert guess.depth == 26
    assert guess.shift == 16
    assert guess.decrypted == MESSAGE
    assert guess.score > 40
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 26
    assert lines[0].startswith("Shift: 0, Score: ")


def test_guess_shift_no_english_letters_keeps_defaults(capsys):
    guess = guess_shift("123 !!", 5)
    assert (guess.shift, guess.decrypted, guess.score) == (0, "", 0.0)
    assert len(capsys.readouterr().out.splitlines()) == 5


def test_guess_shift_recovers_plaintext_for_other_shifts(capsys):
    shifted = caesar.encrypt(MESSAGE, 4)
    guess = guess_shift(shifted, 26)
    assert guess.decrypted == MESSAGE


def test_main_guess(capsys):
    assert main(["--message", CIPHERTEXT, "--guess"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2].startswith("Best shift: 16 (out of 26), score: ")
    assert lines[-1] == f"Decrypted message: {MESSAGE}"


def test_main_stats(capsys):
    main(["-m", "aab", "-s"])
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["a", "b"]


def test_main_requires_message():
    with pytest.raises(SystemExit):
        main(["--guess"])