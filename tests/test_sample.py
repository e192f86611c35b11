"""Tests for the sample record model and cultivar labels."""

import math

import pytest

from wine_tlbx.data import CultivarClass, WineCol, WineSample

from conftest import make_sample


class TestCultivarClass:
    """Test label parsing into the closed cultivar set."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (1.0, CultivarClass.CLASS_1),
            (2, CultivarClass.CLASS_2),
            ("3", CultivarClass.CLASS_3),
        ],
    )
    def test_known_labels(self, raw: object, expected: CultivarClass) -> None:
        """Labels 1, 2 and 3 map onto the enum regardless of representation."""
        assert CultivarClass.from_label(raw) is expected

    @pytest.mark.parametrize("raw", [0.0, 4.0, 1.5, -1.0, math.nan, math.inf, "x", None])
    def test_unknown_labels(self, raw: object) -> None:
        """Anything else is an explicit unrecognized outcome, not an exception."""
        assert CultivarClass.from_label(raw) is None

    def test_display_name(self) -> None:
        assert CultivarClass.CLASS_2.display_name == "Class 2"


class TestWineSample:
    """Test WineSample value semantics."""

    def test_from_values_in_file_order(self) -> None:
        """Values are assigned label first, then features in declaration order."""
        values = [2.0, *range(13)]
        sample = WineSample.from_values(values)
        assert sample.cultivar == 2.0
        assert sample.alcohol == 0.0
        assert sample.proline == 12.0
        assert sample.as_tuple() == tuple(float(v) for v in values)

    def test_from_values_wrong_length(self) -> None:
        """A record that does not match the schema is rejected."""
        with pytest.raises(ValueError, match="Expected 14 values"):
            WineSample.from_values([1.0] * 13)

    def test_value_accessor(self) -> None:
        """A feature column selects its attribute by name."""
        sample = make_sample(1, alcohol=13.2, hue=1.04)
        assert sample.value(WineCol.ALCOHOL) == 13.2
        assert sample.value("hue") == 1.04

    def test_value_unknown_column(self) -> None:
        with pytest.raises(ValueError):
            make_sample(1).value("acidity")

    def test_cultivar_class(self) -> None:
        assert make_sample(3).cultivar_class is CultivarClass.CLASS_3
        assert make_sample(4).cultivar_class is None

    def test_sample_is_frozen(self) -> None:
        """Samples are never mutated after loading."""
        sample = make_sample(1)
        with pytest.raises(AttributeError):
            sample.alcohol = 1.0  # type: ignore[misc]

    def test_value_equality(self) -> None:
        """Samples have no identity beyond their values."""
        assert make_sample(1, alcohol=12.0) == make_sample(1, alcohol=12.0)
        assert len({make_sample(1), make_sample(1), make_sample(2)}) == 2

    def test_as_dict_keys(self) -> None:
        sample = make_sample(1)
        assert list(sample.as_dict()) == [col.value for col in WineCol.csv_columns()]
