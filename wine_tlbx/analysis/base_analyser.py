"""Base analyzer class for all analysis components in the toolbox."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for data analysis components.

    All analyzers must:
    1. Accept their (immutable) input in the constructor
    2. Implement fit() to perform the analysis and return self for chaining
    3. Implement result() to return a frozen dataclass with results

    ---

    ### Adding a New Analyzer

    ```python
    from dataclasses import dataclass

    from wine_tlbx.analysis.partitioner import ClassGroups

    @dataclass(frozen=True)
    class MyAnalysisResult:
        '''Results package for MyAnalyzer.'''
        summary: pd.DataFrame

    class MyAnalyzer(BaseAnalyser):
        '''Pure computation analyzer (no plotting, no printing!).'''

        def __init__(self, groups: ClassGroups):
            self._groups = groups
            self._summary: pd.DataFrame | None = None

        def fit(self) -> "MyAnalyzer":
            self._summary = ...
            return self

        def result(self) -> MyAnalysisResult:
            if self._summary is None:
                raise ValueError("Must call fit() before result()")
            return MyAnalysisResult(summary=self._summary)
    ```

    Console output belongs in :mod:`wine_tlbx.analysis.reporter`, figures in
    :mod:`wine_tlbx.plotting`. Plot functions accept ``*Result`` dataclasses
    (or the ordered score list) and return a ``Figure``.
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Fit the analyzer to the data.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return analysis results as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
