import pandas as pd

from engine.normalize import normalize_collection, normalize_table


def _table():
    return pd.DataFrame(
        {
            "species": ["NA", "Plantago NA major", "NANA", None],
            "value": [1.5, "NA", 2.25, 3.0],
            "count": [1, 2, 3, 4],
        },
        index=[10, 11, 12, 13],
    )


def test_sentinel_cells_become_missing():
    out = normalize_table(_table())

    assert pd.isna(out.loc[0, "species"])
    assert pd.isna(out.loc[1, "value"])
    assert out["value"].isna().sum() == 1


def test_substrings_are_not_touched():
    out = normalize_table(_table())
    assert out.loc[1, "species"] == "Plantago NA major"
    assert out.loc[2, "species"] == "NANA"


def test_numeric_column_is_numeric_after_normalizing():
    out = normalize_table(_table())
    assert pd.api.types.is_float_dtype(out["value"].dtype)
    assert out["value"].dropna().tolist() == [1.5, 2.25, 3.0]


def test_normalize_is_idempotent():
    once = normalize_table(_table())
    twice = normalize_table(once)
    pd.testing.assert_frame_equal(once, twice)


def test_result_is_plain_frame_with_fresh_index():
    class CuratedFrame(pd.DataFrame):
        @property
        def _constructor(self):
            return CuratedFrame

    out = normalize_table(CuratedFrame(_table()))
    assert type(out) is pd.DataFrame
    assert list(out.index) == [0, 1, 2, 3]


def test_custom_sentinel():
    df = pd.DataFrame({"x": ["-", "NA"]})
    out = normalize_table(df, sentinel="-")
    assert pd.isna(out.loc[0, "x"])
    assert out.loc[1, "x"] == "NA"


def test_input_is_not_mutated():
    df = _table()
    normalize_table(df)
    assert df.loc[10, "species"] == "NA"


def test_normalize_collection_keeps_order():
    out = normalize_collection({"b": _table(), "a": _table()})
    assert list(out) == ["b", "a"]
