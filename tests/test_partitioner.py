"""Tests for the cultivar group partitioner."""

import logging

import pytest

from wine_tlbx.analysis.partitioner import ClassGroups, ExcludedSample, GroupPartitioner, partition_by_cultivar
from wine_tlbx.data import CultivarClass, WineDataset

from conftest import make_sample


@pytest.fixture
def mixed_dataset() -> WineDataset:
    """Interleaved classes plus two unknown labels."""
    labels = [2, 1, 3, 4, 1, 2, 0.5, 3, 1]
    return WineDataset.from_samples([make_sample(label, alcohol=float(i)) for i, label in enumerate(labels)])


class TestPartition:
    """Test partition_by_cultivar."""

    def test_one_group_per_cultivar(self, wine_dataset: WineDataset) -> None:
        groups = partition_by_cultivar(wine_dataset.view())
        assert isinstance(groups, ClassGroups)
        assert list(groups.groups) == list(CultivarClass)
        assert groups.sizes == {c: 3 for c in CultivarClass}
        assert groups.excluded == ()

    def test_groups_keep_original_order(self, mixed_dataset: WineDataset) -> None:
        """Rows stay in dataset order within each group."""
        groups = partition_by_cultivar(mixed_dataset.view())
        assert groups[CultivarClass.CLASS_1]["alcohol"].tolist() == [1.0, 4.0, 8.0]
        assert groups[CultivarClass.CLASS_2]["alcohol"].tolist() == [0.0, 5.0]
        assert groups[CultivarClass.CLASS_3]["alcohol"].tolist() == [2.0, 7.0]

    def test_groups_are_disjoint_and_cover_recognized_samples(self, mixed_dataset: WineDataset) -> None:
        groups = partition_by_cultivar(mixed_dataset.view())
        indices = [set(g.index) for g in groups.groups.values()]
        assert all(not (a & b) for i, a in enumerate(indices) for b in indices[i + 1 :])
        assert groups.total + len(groups.excluded) == len(mixed_dataset)
        assert groups.n_samples == len(mixed_dataset)

    def test_unknown_labels_are_reported(self, mixed_dataset: WineDataset, caplog: pytest.LogCaptureFixture) -> None:
        """Each unknown label is excluded, returned as a diagnostic, and logged."""
        with caplog.at_level(logging.WARNING, logger="wine_tlbx.analysis.partitioner"):
            groups = partition_by_cultivar(mixed_dataset.view())

        assert groups.excluded == (ExcludedSample(row=3, label=4.0), ExcludedSample(row=6, label=0.5))
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 2
        assert "4.0" in warnings[0].getMessage()
        assert "0.5" in warnings[1].getMessage()

    def test_missing_class_yields_empty_group(self) -> None:
        """All three groups exist even if a cultivar has no samples."""
        ds = WineDataset.from_samples([make_sample(1), make_sample(1)])
        groups = partition_by_cultivar(ds.view())
        assert groups.sizes == {CultivarClass.CLASS_1: 2, CultivarClass.CLASS_2: 0, CultivarClass.CLASS_3: 0}

    def test_feature_metadata_carried_over(self, wine_dataset: WineDataset) -> None:
        view = wine_dataset.view(columns=["hue", "ash"])
        groups = partition_by_cultivar(view)
        assert groups.feature_cols == ["hue", "ash"]
        assert groups.pretty_by_col["hue"] == "Hue"


class TestGroupPartitioner:
    """Test the analyzer wrapper."""

    def test_fit_result(self, wine_dataset: WineDataset) -> None:
        groups = GroupPartitioner(wine_dataset.view()).fit().result()
        assert groups.total == 9

    def test_result_before_fit(self, wine_dataset: WineDataset) -> None:
        with pytest.raises(ValueError, match="fit"):
            GroupPartitioner(wine_dataset.view()).result()
