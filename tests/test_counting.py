from tidbits.counting import (
    SAMPLE_NUMBERS,
    add,
    collections_overview,
    count_frequencies,
    main_add,
    main_count,
    main_overview,
)


def test_add():
    assert add() == 6


def test_count_frequencies_of_sample():
    result = dict(count_frequencies(SAMPLE_NUMBERS))
    assert result[1] == 2
    assert result[3] == 2
    assert all(result[n] == 1 for n in (2, 4, 5, 6, 7, 8, 9))


def test_count_frequencies_totals_match_input():
    numbers = [5, 5, 5, -1, 0, 0]
    result = count_frequencies(numbers)
    assert sum(freq for _, freq in result) == len(numbers)
    assert [value for value, _ in result] == [5, -1, 0]


def test_count_frequencies_empty():
    assert count_frequencies([]) == []


def test_overview_has_every_kind():
    kinds = [kind for kind, _ in collections_overview()]
    assert kinds == ["Sequences", "Maps", "Sets", "Misc"]
    assert all(names for _, names in collections_overview())


def test_main_count_output(capsys):
    assert main_count([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("The frequency of each number in the vector is: [(1, 2), (2, 1), (3, 2)")


def test_main_add_output(capsys):
    assert main_add([]) == 0
    assert capsys.readouterr().out == "The sum of the elements in the vector is: 6\n"


def test_main_overview_output(capsys):
    assert main_overview([]) == 0
    out = capsys.readouterr().out
    assert "\n\tSequences:\n\t\tlist\n" in out
    assert "\n\tSets:\n\t\tset\n" in out