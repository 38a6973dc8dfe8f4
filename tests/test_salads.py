import random
from collections import Counter

import pytest

from tidbits import salads


def test_format_salad_joins_with_comma_space():
    assert salads.format_salad(["Fig", "Cherry", "Pear"]) == "Fig, Cherry, Pear"


def test_format_salad_single_item_has_no_separator():
    assert salads.format_salad(["Fig"]) == "Fig"


def test_vector_salad_is_permutation():
    salad = salads.vector_salad(random.Random(1))
    assert sorted(salad) == sorted(salads.VECTOR_FRUITS)


def test_vector_salad_reproducible_with_seed():
    first = salads.vector_salad(random.Random(7))
    second = salads.vector_salad(random.Random(7))
    assert sorted(first) == sorted(salads.VECTOR_FRUITS)
    assert second == first


def test_framed_salad_ends_fixed():
    salad = salads.framed_salad(random.Random(3))
    assert salad[0] == "Pomegranate"
    assert salad[-2:] == ["Fig", "Cherry"]
    assert sorted(salad[1:-2]) == sorted(salads.FRAMED_BASE)
    assert len(salad) == 6


def test_mutable_demo_appends_figs(capsys):
    original, modified = salads.mutable_demo()
    assert original == list(salads.MUTABLE_BASE)
    assert modified == [*salads.MUTABLE_BASE, "figs"]
    out = capsys.readouterr().out
    assert 'Modified fruit salad: ["apple", "banana", "cherry", "dates", "elderberries", "figs"]' in out


def test_create_fruit_salad_keeps_items_and_input():
    fruits = ["a", "b", "c", "d", "b"]
    salad = salads.create_fruit_salad(fruits, random.Random(5))
    assert Counter(salad) == Counter(fruits)
    assert fruits == ["a", "b", "c", "d", "b"]


def test_pick_salad_length_and_distinct():
    salad = salads.pick_salad(4, random.Random(2))
    assert len(salad) == 4
    assert len(set(salad)) == 4
    assert set(salad) <= set(salads.MEDITERRANEAN_FRUITS)


def test_pick_salad_caps_at_available():
    salad = salads.pick_salad(50, random.Random(2))
    assert sorted(salad) == sorted(salads.MEDITERRANEAN_FRUITS)


def test_pick_salad_rejects_negative():
    with pytest.raises(ValueError):
        salads.pick_salad(-1)


def test_csv_to_list_trims():
    assert salads.csv_to_list(" apple, pear ,fig") == ["apple", "pear", "fig"]


def test_csv_to_list_empty_gives_one_empty_item():
    assert salads.csv_to_list("") == [""]


def test_read_fruits_from_file(tmp_path):
    path = tmp_path / "fruits.csv"
    path.write_text("apple, pear\nfig,kiwi\n", encoding="utf-8")
    assert salads.read_fruits_from_file(path) == ["apple", "pear", "fig", "kiwi"]


def test_read_fruits_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        salads.read_fruits_from_file(tmp_path / "missing.csv")


def test_main_customize_with_fruits(capsys):
    assert salads.main_customize(["--fruits", "apple, pear"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Your fruit salad contains:"
    assert sorted(lines[1:]) == ["apple", "pear"]


def test_main_customize_with_file(tmp_path, capsys):
    path = tmp_path / "fruits.csv"
    path.write_text("kiwi, fig", encoding="utf-8")
    assert salads.main_customize([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines[1:]) == ["fig", "kiwi"]


def test_main_lowmem_runs_count_times(tmp_path, capsys):
    path = tmp_path / "fruits.csv"
    path.write_text("apple,pear\n", encoding="utf-8")
    assert salads.main_lowmem(["--path", str(path), "--count", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("Created Fruit salad with 2 fruits: [") for line in lines)


def test_main_lowmem_missing_file(tmp_path):
    assert salads.main_lowmem(["--path", str(tmp_path / "none.csv"), "--count", "1"]) == 1


def test_main_cli_salad_output(capsys):
    assert salads.main_cli_salad(["--number", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Created Fruit salad with 3 fruits: [")


def test_main_vector_output(capsys):
    assert salads.main_vector([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Fruit Salad:"
    assert sorted(lines[1].split(", ")) == sorted(salads.VECTOR_FRUITS)


def test_main_framed_output(capsys):
    assert salads.main_framed([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("Pomegranate, ")
    assert lines[1].endswith(", Fig, Cherry")