"""Column definitions for the UCI Wine recognition dataset."""

from .base_columns import BaseColumn, ColumnMetadata


class WineColumn(BaseColumn):
    """Column names for the [UCI Wine dataset](https://archive.ics.uci.edu/dataset/109/wine).

    The raw file is headerless; columns appear in exactly this order.

    Columns:
    - ``cultivar``: float - Cultivar class label (1, 2 or 3)
    - ``alcohol``: float - Alcohol content (% vol)
    - ``malic_acid``: float - Malic acid (g/l)
    - ``ash``: float - Ash (g/l)
    - ``alcalinity_of_ash``: float - Alcalinity of ash
    - ``magnesium``: float - Magnesium (mg/l)
    - ``total_phenols``: float - Total phenols
    - ``flavanoids``: float - Flavanoid phenols
    - ``nonflavanoid_phenols``: float - Non-flavanoid phenols
    - ``proanthocyanins``: float - Proanthocyanins
    - ``color_intensity``: float - Colour intensity
    - ``hue``: float - Hue
    - ``od280_od315_of_diluted_wines``: float - OD280/OD315 of diluted wines
    - ``proline``: float - Proline (mg/l)
    """

    # Class label
    CULTIVAR = "cultivar"
    """Cultivar class label (1, 2 or 3)."""
    TARGET = CULTIVAR

    # Chemical measurements, file order
    ALCOHOL = "alcohol"
    MALIC_ACID = "malic_acid"
    ASH = "ash"
    ALCALINITY_OF_ASH = "alcalinity_of_ash"
    MAGNESIUM = "magnesium"
    TOTAL_PHENOLS = "total_phenols"
    FLAVANOIDS = "flavanoids"
    NONFLAVANOID_PHENOLS = "nonflavanoid_phenols"
    PROANTHOCYANINS = "proanthocyanins"
    COLOR_INTENSITY = "color_intensity"
    HUE = "hue"
    OD280_OD315 = "od280_od315_of_diluted_wines"
    """Optical density ratio OD280/OD315 of diluted wines."""
    PROLINE = "proline"

    def metadata(self) -> ColumnMetadata:
        """Return metadata for this column."""
        return _COLUMN_METADATA_WINE[self]

    @classmethod
    def feature_columns(cls) -> list["WineColumn"]:
        """Return the thirteen feature columns in file order."""
        return [col for col in cls if col is not cls.CULTIVAR]


_COLUMN_METADATA_WINE: dict[WineColumn, ColumnMetadata] = {
    WineColumn.CULTIVAR: ColumnMetadata(
        original_name="Class",
        cleaned_name="cultivar",
        dtype="float64",
        pretty_name="Cultivar",
    ),
    WineColumn.ALCOHOL: ColumnMetadata(
        original_name="Alcohol",
        cleaned_name="alcohol",
        dtype="float64",
        pretty_name="Alcohol (%)",
    ),
    WineColumn.MALIC_ACID: ColumnMetadata(
        original_name="Malicacid",
        cleaned_name="malic_acid",
        dtype="float64",
        pretty_name="Malic Acid",
    ),
    WineColumn.ASH: ColumnMetadata(
        original_name="Ash",
        cleaned_name="ash",
        dtype="float64",
        pretty_name="Ash",
    ),
    WineColumn.ALCALINITY_OF_ASH: ColumnMetadata(
        original_name="Alcalinity_of_ash",
        cleaned_name="alcalinity_of_ash",
        dtype="float64",
        pretty_name="Alcalinity of Ash",
    ),
    WineColumn.MAGNESIUM: ColumnMetadata(
        original_name="Magnesium",
        cleaned_name="magnesium",
        dtype="float64",
        pretty_name="Magnesium",
    ),
    WineColumn.TOTAL_PHENOLS: ColumnMetadata(
        original_name="Total_phenols",
        cleaned_name="total_phenols",
        dtype="float64",
        pretty_name="Total Phenols",
    ),
    WineColumn.FLAVANOIDS: ColumnMetadata(
        original_name="Flavanoids",
        cleaned_name="flavanoids",
        dtype="float64",
        pretty_name="Flavanoids",
    ),
    WineColumn.NONFLAVANOID_PHENOLS: ColumnMetadata(
        original_name="Nonflavanoid_phenols",
        cleaned_name="nonflavanoid_phenols",
        dtype="float64",
        pretty_name="Non-flavanoid Phenols",
    ),
    WineColumn.PROANTHOCYANINS: ColumnMetadata(
        original_name="Proanthocyanins",
        cleaned_name="proanthocyanins",
        dtype="float64",
        pretty_name="Proanthocyanins",
    ),
    WineColumn.COLOR_INTENSITY: ColumnMetadata(
        original_name="Color_intensity",
        cleaned_name="color_intensity",
        dtype="float64",
        pretty_name="Color Intensity",
    ),
    WineColumn.HUE: ColumnMetadata(
        original_name="Hue",
        cleaned_name="hue",
        dtype="float64",
        pretty_name="Hue",
    ),
    WineColumn.OD280_OD315: ColumnMetadata(
        original_name="0D280_0D315_of_diluted_wines",
        cleaned_name="od280_od315_of_diluted_wines",
        dtype="float64",
        pretty_name="OD280/OD315 of Diluted Wines",
    ),
    WineColumn.PROLINE: ColumnMetadata(
        original_name="Proline",
        cleaned_name="proline",
        dtype="float64",
        pretty_name="Proline",
    ),
}
