"""Outcome of a single forecast fetch."""

from dataclasses import dataclass
from enum import StrEnum

from apimsample.models.common import ApiSource
from apimsample.models.forecast import ForecastRecord


class FetchErrorKind(StrEnum):
    TRANSPORT = "transport"
    STATUS = "status"
    DESERIALIZATION = "deserialization"


@dataclass(frozen=True)
class FetchResult:
    """Either a list of forecasts or an error message, never both.

    Use ``FetchResult.ok`` and ``FetchResult.failed`` rather than the
    constructor.
    """

    api_source: ApiSource
    success: bool
    forecasts: tuple[ForecastRecord, ...] = ()
    error_message: str = ""
    error_kind: FetchErrorKind | None = None
    status_code: int | None = None

    @classmethod
    def ok(cls, source: ApiSource, forecasts: list[ForecastRecord]) -> "FetchResult":
        return cls(api_source=source, success=True, forecasts=tuple(forecasts))

    @classmethod
    def failed(
        cls,
        source: ApiSource,
        kind: FetchErrorKind,
        message: str,
        status_code: int | None = None,
    ) -> "FetchResult":
        return cls(
            api_source=source,
            success=False,
            error_message=message,
            error_kind=kind,
            status_code=status_code,
        )

    def to_dict(self) -> dict:
        return {
            "apiSource": str(self.api_source),
            "success": self.success,
            "forecasts": [f.to_dict() for f in self.forecasts],
            "errorMessage": self.error_message,
        }
