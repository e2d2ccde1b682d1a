"""Result containers returned by list-shaped endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class ResultsEnvelope(BaseModel):
    """Pagination metadata carried alongside any list response.

    Missing fields default to zero; present ones are kept verbatim.
    """

    page: int = 0
    total_pages: int = 0
    total_results: int = 0


class ResultsList(BaseModel, Generic[T]):
    """A page of typed items plus pagination metadata."""

    model_config = ConfigDict(frozen=True)

    results: list[T] = Field(default_factory=list)
    page: int = 0
    total_pages: int = 0
    total_results: int = 0

    @classmethod
    def from_envelope(cls, results: list[T], envelope: ResultsEnvelope) -> "ResultsList[T]":
        """Build a ResultsList copying pagination metadata from the envelope."""
        return cls(
            results=results,
            page=envelope.page,
            total_pages=envelope.total_pages,
            total_results=envelope.total_results,
        )

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):  # type: ignore[override]
        return iter(self.results)

    def __getitem__(self, index: int) -> T:
        return self.results[index]


class ResultsMap(BaseModel, Generic[K, V]):
    """A keyed result, e.g. change-log entries grouped by changed field."""

    model_config = ConfigDict(frozen=True)

    results: dict[K, V] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, key: K) -> V:
        return self.results[key]

    def keys(self):
        return self.results.keys()
