"""meteocli: MeteoSwiss weather data for Swiss postal codes."""

__version__ = "0.1.0"
