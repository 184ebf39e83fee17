import pytest

from phrasebreak.evaluate import breaks_from_segmented, compare_breaks


def test_breaks_from_segmented_line():
    text, offsets = breaks_from_segmented("私は 東京に 行きます")

    assert text == "私は東京に行きます"
    assert offsets == [2, 5]


def test_breaks_from_segmented_ignores_repeated_separators():
    assert breaks_from_segmented("a  bc ") == ("abc", [1])


def test_compare_breaks_scores_and_disagreements():
    report = compare_breaks([2, 4], [2, 5], "私は東京に行きます")

    scores = report["scores"]
    assert (scores["tp"], scores["fp"], scores["fn"]) == (1, 1, 1)
    assert scores["precision"] == pytest.approx(0.5)
    assert scores["recall"] == pytest.approx(0.5)
    assert scores["f1"] == pytest.approx(0.5)
    assert [d["offset"] for d in report["disagreements"]] == [4, 5]
    assert report["disagreements"][0] == {
        "offset": 4,
        "context": "は東京|に行き",
        "generated": True,
        "reference": False,
    }


def test_compare_breaks_with_nothing_to_find():
    scores = compare_breaks([], [])["scores"]

    assert scores["precision"] == 1.0
    assert scores["recall"] == 1.0
    assert scores["f1"] == 1.0
