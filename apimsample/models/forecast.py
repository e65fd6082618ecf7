"""Weather forecast record and its wire-format parsing."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

SUMMARIES = (
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
)


class ForecastParseError(ValueError):
    """Response body does not match the forecast record shape."""


@dataclass(frozen=True)
class ForecastRecord:
    date: date
    temperature_c: int
    temperature_f: int
    summary: str | None

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "temperatureC": self.temperature_c,
            "temperatureF": self.temperature_f,
            "summary": self.summary,
        }


def celsius_to_fahrenheit(temperature_c: int) -> int:
    return 32 + int(temperature_c / 0.5556)


def parse_forecasts(payload: Any) -> list[ForecastRecord]:
    """Build records from a decoded JSON array.

    Keys are matched case-insensitively, so "Date" and "date" both bind.
    A null payload is treated as an empty array.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ForecastParseError(
            f"Expected a JSON array of forecasts, got {type(payload).__name__}"
        )
    return [_parse_record(item, i) for i, item in enumerate(payload)]


def _parse_record(item: Any, index: int) -> ForecastRecord:
    if not isinstance(item, dict):
        raise ForecastParseError(f"Forecast {index} is not an object")
    fields = {str(k).lower(): v for k, v in item.items()}

    try:
        raw_date = fields["date"]
        temperature_c = _as_int(fields["temperaturec"], "temperatureC", index)
    except KeyError as e:
        raise ForecastParseError(f"Forecast {index} is missing {e.args[0]!r}") from e

    raw_f = fields.get("temperaturef")
    if raw_f is None:
        temperature_f = celsius_to_fahrenheit(temperature_c)
    else:
        temperature_f = _as_int(raw_f, "temperatureF", index)

    summary = fields.get("summary")
    if summary is not None and not isinstance(summary, str):
        raise ForecastParseError(f"Forecast {index} has a non-string summary")

    return ForecastRecord(
        date=_parse_date(raw_date, index),
        temperature_c=temperature_c,
        temperature_f=temperature_f,
        summary=summary,
    )


def _as_int(value: Any, name: str, index: int) -> int:
    # bool is an int subclass; JSON true/false is not a temperature
    if isinstance(value, bool) or not isinstance(value, int):
        raise ForecastParseError(f"Forecast {index} has a non-integer {name}: {value!r}")
    return value


def _parse_date(value: Any, index: int) -> date:
    """Accept "2024-01-01" as well as full ISO timestamps."""
    if not isinstance(value, str):
        raise ForecastParseError(f"Forecast {index} has a non-string date: {value!r}")
    try:
        if "T" in value:
            return datetime.fromisoformat(value).date()
        return date.fromisoformat(value)
    except ValueError as e:
        raise ForecastParseError(f"Forecast {index} has an invalid date: {value!r}") from e
