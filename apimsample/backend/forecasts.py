"""Sample forecast generator served by the backend."""

import random
from datetime import date, timedelta

from apimsample.models.forecast import SUMMARIES, ForecastRecord, celsius_to_fahrenheit

FORECAST_DAYS = 5


def generate_forecasts(
    rng: random.Random | None = None,
    today: date | None = None,
    days: int = FORECAST_DAYS,
) -> list[ForecastRecord]:
    """Random forecasts for the ``days`` days after ``today``."""
    rng = rng or random.Random()
    today = today or date.today()
    records = []
    for offset in range(1, days + 1):
        temperature_c = rng.randrange(-20, 55)
        records.append(
            ForecastRecord(
                date=today + timedelta(days=offset),
                temperature_c=temperature_c,
                temperature_f=celsius_to_fahrenheit(temperature_c),
                summary=rng.choice(SUMMARIES),
            )
        )
    return records
