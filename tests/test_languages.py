import pytest

from tidbits.languages import calculate_weights, init_languages, main


def test_newest_and_oldest_get_the_extreme_weights():
    weights = calculate_weights(init_languages())
    assert weights["TypeScript"] == 1
    assert weights["C"] == 100


def test_weights_stay_within_bounds():
    weights = calculate_weights(init_languages())
    assert all(1 <= weight <= 100 for weight in weights.values())


def test_result_is_sorted_by_name():
    weights = calculate_weights(init_languages())
    assert list(weights) == sorted(init_languages())


def test_older_languages_never_weigh_less():
    languages = init_languages()
    weights = calculate_weights(languages)
    by_age = sorted(languages, key=languages.__getitem__, reverse=True)
    ordered = [weights[name] for name in by_age]
    assert ordered == sorted(ordered)


def test_same_year_gives_same_weight():
    weights = calculate_weights(init_languages())
    assert weights["JavaScript"] == weights["Java"] == weights["PHP"]


@pytest.mark.parametrize("year", [2000, 2030, 2100])
def test_weights_do_not_depend_on_current_year(year):
    languages = init_languages()
    assert calculate_weights(languages, year) == calculate_weights(languages)


def test_input_is_left_untouched():
    languages = init_languages()
    calculate_weights(languages)
    assert languages == init_languages()


def test_empty_input_gives_empty_weights():
    assert calculate_weights({}) == {}


def test_equal_ages_all_weigh_the_minimum():
    weights = calculate_weights({"X": 2000, "Y": 2000})
    assert weights["X"] == weights["Y"] == 1


def test_main_prints_every_language(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Language weighing from 1-100")
    assert "TypeScript: 1" in out
    assert "C: 100" in out
    assert len(out) == len(init_languages()) + 1