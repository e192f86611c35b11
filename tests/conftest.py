"""Test configuration for the wine toolbox."""

from pathlib import Path
import sys

import matplotlib
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from wine_tlbx.data import WineCol, WineDataset, WineSample  # noqa: E402


# Within-class offsets: mean 0, sample standard deviation 0.5 (alcohol) / 1.0 (others)
_ALCOHOL_OFFSETS = (-0.5, 0.0, 0.5)
_OTHER_OFFSETS = (-1.0, 0.0, 1.0)


def make_sample(label: float, alcohol: float = 13.0, **overrides: float) -> WineSample:
    """Build a sample with plausible defaults; keyword arguments override single features."""
    values = {str(col): 10.0 * (i + 1) for i, col in enumerate(WineCol.feature_columns())}
    values |= {str(WineCol.CULTIVAR): label, str(WineCol.ALCOHOL): alcohol, **overrides}
    return WineSample(**values)


def synthetic_samples() -> list[WineSample]:
    """Nine samples, three per class, with alcohol class means 12/13/14 and stddev 0.5.

    Every other feature has class means ``base + class`` and stddev 1.0, so its score is 2.0.
    """
    samples = []
    for cultivar, alcohol_mean in ((1, 12.0), (2, 13.0), (3, 14.0)):
        for a_off, o_off in zip(_ALCOHOL_OFFSETS, _OTHER_OFFSETS, strict=True):
            others = {
                str(col): 10.0 * (i + 1) + cultivar + o_off
                for i, col in enumerate(WineCol.feature_columns())
                if col is not WineCol.ALCOHOL
            }
            samples.append(make_sample(cultivar, alcohol=alcohol_mean + a_off, **others))
    return samples


def write_csv(path: Path, samples: list[WineSample]) -> Path:
    """Write samples as a headerless CSV, the way the raw dataset is stored."""
    path.write_text("".join(",".join(repr(v) for v in s.as_tuple()) + "\n" for s in samples))
    return path


@pytest.fixture
def samples() -> list[WineSample]:
    return synthetic_samples()


@pytest.fixture
def wine_dataset(samples: list[WineSample]) -> WineDataset:
    """Synthetic dataset with known statistics."""
    return WineDataset.from_samples(samples)


@pytest.fixture
def wine_csv(tmp_path: Path, samples: list[WineSample]) -> Path:
    """Synthetic dataset written to a headerless CSV file."""
    return write_csv(tmp_path / "wine.csv", samples)
