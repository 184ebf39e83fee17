from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from phrasebreak.config import Config, load_config
from phrasebreak.engine import MlBreakEngine
from phrasebreak.errors import EngineUnusableError, InputError, ModelLoadError
from phrasebreak.model_store import ModelStore
from phrasebreak.types import DEFAULT_CLOSE_PUNCT, DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET


def make_engine(store, **config) -> MlBreakEngine:
    return MlBreakEngine(
        DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET,
        DEFAULT_CLOSE_PUNCT,
        store,
        config=Config(**config),
    )


@pytest.fixture
def always_break() -> ModelStore:
    return ModelStore.from_resource({"weights": {"unused": 1}, "bias": 1})


def test_fixture_breaks_only_after_a(tiny_store):
    engine = make_engine(tiny_store)
    found = []

    count = engine.divide_up_range("ABX", 0, 3, found, "ABX")

    assert count == 1
    assert found == [1]


def test_repeated_calls_are_identical(tiny_store):
    engine = make_engine(tiny_store)
    runs = []
    for _ in range(3):
        found = []
        engine.divide_up_range("ABXABABX", 0, 8, found, "ABXABABX")
        runs.append(found)

    assert runs[0] == runs[1] == runs[2] == [1, 4, 6]


@pytest.mark.parametrize("text", ["", "A"])
def test_degenerate_ranges_have_no_breaks(always_break, text):
    engine = make_engine(always_break)
    found = []

    assert engine.divide_up_range(text, 0, len(text), found, text) == 0
    assert found == []


def test_breaks_are_increasing_and_interior(always_break):
    engine = make_engine(always_break)
    text = "xx日本語のテキストxx"
    found = []

    engine.divide_up_range(text, 2, len(text) - 2, found, text[2:-2])

    assert found == list(range(3, len(text) - 2))
    assert all(a < b for a, b in zip(found, found[1:]))
    assert all(2 < b < len(text) - 2 for b in found)


def test_identity_map_matches_absent_map(tiny_store):
    engine = make_engine(tiny_store)
    text = "ABXAB"
    without_map, with_map = [], []

    engine.divide_up_range(text, 0, 5, without_map, text)
    engine.divide_up_range(text, 0, 5, with_map, text, list(range(6)))

    assert without_map == with_map == [1, 4]


def test_offsets_are_shifted_by_range_start(tiny_store):
    engine = make_engine(tiny_store)
    found = []

    engine.divide_up_range("zzABXzz", 2, 5, found, "ABX")

    assert found == [3]


def test_index_map_translates_to_native_offsets(tiny_store):
    engine = make_engine(tiny_store)
    text = "." * 20
    found = []

    engine.divide_up_range(text, 10, 15, found, "ABX", [10, 12, 13, 15])

    assert found == [12]


def test_expanded_characters_yield_one_native_break(always_break):
    engine = make_engine(always_break)
    found = []

    count = engine.divide_up_range("ABC", 0, 3, found, "ABC", [0, 1, 1, 3])

    assert count == 1
    assert found == [1]


def test_boundary_mapped_onto_range_end_is_dropped(always_break):
    engine = make_engine(always_break)
    found = []

    engine.divide_up_range("ABC", 0, 3, found, "ABC", [0, 1, 3, 3])

    assert found == [1]


def test_existing_breaks_are_kept(tiny_store):
    engine = make_engine(tiny_store)
    found = [0]

    engine.divide_up_range("ABX", 0, 3, found, "ABX")

    assert found == [0, 1]


def test_surrogate_pairs_are_one_character(always_break):
    engine = make_engine(always_break)
    text = "A\ud83d\ude00B"
    found = []

    engine.divide_up_range(text, 0, len(text), found, text)

    assert found == [1, 3]


@pytest.mark.parametrize(
    "start, end, normalized, index_map",
    [
        (2, 1, "", None),
        (0, 10, "ABX", None),
        (-1, 2, "ABX", None),
        (0, 3, "AB", None),
        (0, 3, "ABX", [0, 1, 2]),
        (0, 3, "ABX", [0, 2, 1, 3]),
        (0, 3, "ABX", [0, 1, 2, 4]),
        (1, 3, "ABX", [0, 1, 2, 3]),
        (0, 3, "ABX", [0, 1.5, 2, 3]),
        (0, 3, "AB", [0, 1, 2]),
        (0, 3, "ABX", [1, 1, 2, 3]),
    ],
)
def test_invalid_calls_raise_input_error(tiny_store, start, end, normalized, index_map):
    engine = make_engine(tiny_store)
    found = []

    with pytest.raises(InputError):
        engine.divide_up_range("ABX", start, end, found, normalized, index_map)
    assert found == []


def test_index_map_must_cover_the_whole_range(always_break):
    engine = make_engine(always_break)
    found = []

    with pytest.raises(InputError, match="must start at 0 and end at 4"):
        engine.divide_up_range("ABCD", 0, 4, found, "ABC", [0, 1, 2, 2])
    assert found == []


def test_malformed_normalized_text_raises(tiny_store):
    engine = make_engine(tiny_store)
    found = [7]
    text = "AB\udc00X"

    with pytest.raises(InputError):
        engine.divide_up_range(text, 0, len(text), found, text)
    assert found == [7]


def test_corrupt_model_fails_construction(tmp_path: Path):
    empty = tmp_path / "model.json"
    empty.write_text("", encoding="utf-8")

    with pytest.raises(ModelLoadError):
        MlBreakEngine(DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET, DEFAULT_CLOSE_PUNCT, empty)


def test_unusable_engine_refuses_to_scan(tmp_path: Path, monkeypatch):
    bad = tmp_path / "model.json"
    bad.write_text('{"modelKeys": ["a"], "modelValues": []}', encoding="utf-8")

    engine = MlBreakEngine(
        DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET, DEFAULT_CLOSE_PUNCT, bad, strict=False
    )

    def fail_scan(*args, **kwargs):
        raise AssertionError("scan must not run")

    monkeypatch.setattr(engine, "_scan", fail_scan)
    found = []

    assert not engine.usable
    assert isinstance(engine.load_error, ModelLoadError)
    with pytest.raises(EngineUnusableError) as excinfo:
        engine.divide_up_range("ABX", 0, 3, found, "ABX")
    assert excinfo.value.__cause__ is engine.load_error
    with pytest.raises(EngineUnusableError):
        engine.segment("ABX")
    assert found == []


def test_missing_model_configuration():
    with pytest.raises(ModelLoadError, match="paths.model"):
        MlBreakEngine(DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET, DEFAULT_CLOSE_PUNCT)


def test_character_sets_may_be_plain_iterables(tiny_store):
    engine = MlBreakEngine("0123456789(", ")", tiny_store, config=Config(edge_breaks=True))
    found = []

    engine.divide_up_range(")ABX1", 1, 4, found, "ABX")

    assert found == [1, 2, 4]


def test_edge_breaks_follow_neighbouring_characters(tiny_store):
    text = "」あいう１"
    strict, edges = [], []

    make_engine(tiny_store).divide_up_range(text, 1, 4, strict, "あいう")
    count = make_engine(tiny_store, edge_breaks=True).divide_up_range(text, 1, 4, edges, "あいう")

    assert strict == []
    assert edges == [1, 4]
    assert count == 2


def test_edge_breaks_need_matching_neighbours(tiny_store):
    text = "かあいうか"
    found = []

    make_engine(tiny_store, edge_breaks=True).divide_up_range(text, 1, 4, found, "あいう")

    assert found == []


def test_key_scheme_override_on_store(tiny_store):
    engine = make_engine(tiny_store, key_scheme="budoux-v1")

    assert engine.store.model.scheme == "budoux-v1"
    assert engine.segment("ABX") == []


def test_segment_maps_normalized_kana_back(always_break):
    engine = make_engine(always_break)
    text = "ｶﾞｲﾄﾞ"

    assert engine.segment(text) == [2, 3]
    assert engine.split(text) == ["ｶﾞ", "ｲ", "ﾄﾞ"]


def test_segment_without_normalization(always_break):
    engine = make_engine(always_break, normalization="none")

    assert engine.segment("ｶﾞｲ") == [1, 2]


def test_demo_model_from_config(project_root: Path):
    cfg = load_config(str(project_root / "config.yaml"))
    engine = MlBreakEngine.from_config(cfg)

    assert engine.split("私は東京に行きます") == ["私は", "東京に", "行きます"]


def test_engine_is_safe_to_share_between_threads(project_root: Path):
    cfg = load_config(str(project_root / "config.yaml"))
    engine = MlBreakEngine.from_config(cfg)
    texts = ["私は東京に行きます", "本を読む", "ねこがいる"] * 20
    expected = [engine.segment(t) for t in texts]

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(engine.segment, texts))

    assert results == expected
