"""Read-only label tables for MeteoSwiss icon and warning codes."""

from types import MappingProxyType

WARN_TYPES = MappingProxyType({
    0: "Wind",
    1: "Thunderstorm",
    2: "Rain",
    3: "Snow",
    4: "Slippery roads",
    5: "Frost",
    6: "Heat",
    7: "Avalanche",
    8: "Fire danger",
    9: "Flooding",
    10: "UV",
})

WARN_LEVELS = MappingProxyType({
    1: "Minor",
    2: "Moderate",
    3: "Considerable",
    4: "High",
    5: "Very high",
})

# icon code -> (description, emoji); codes 1-42
WEATHER_ICONS = MappingProxyType({
    1: ("Sunny", "☀️"),
    2: ("Mostly sunny", "🌤️"),
    3: ("Partly cloudy", "⛅"),
    4: ("Mostly cloudy", "🌥️"),
    5: ("Overcast", "☁️"),
    6: ("Fog", "🌫️"),
    7: ("Light rain showers", "🌦️"),
    8: ("Rain showers", "🌧️"),
    9: ("Heavy rain showers", "🌧️"),
    10: ("Thunderstorm", "⛈️"),
    11: ("Light snowfall", "🌨️"),
    12: ("Snowfall", "❄️"),
    13: ("Heavy snowfall", "❄️"),
    14: ("Sleet", "🌨️"),
    15: ("Freezing rain", "🌧️"),
    16: ("Clear night", "🌙"),
    17: ("Mostly clear night", "🌙"),
    18: ("Partly cloudy night", "🌙"),
    19: ("Mostly cloudy night", "☁️"),
    20: ("Fog night", "🌫️"),
    21: ("Light rain showers night", "🌧️"),
    22: ("Rain showers night", "🌧️"),
    23: ("Heavy rain showers night", "🌧️"),
    24: ("Thunderstorm night", "⛈️"),
    25: ("Light snowfall night", "🌨️"),
    26: ("Snowfall night", "❄️"),
    27: ("Heavy snowfall night", "❄️"),
    28: ("Sleet night", "🌨️"),
    29: ("Freezing rain night", "🌧️"),
    30: ("Sunny intervals", "🌤️"),
    31: ("Mostly sunny intervals", "🌤️"),
    32: ("Light drizzle", "🌦️"),
    33: ("Drizzle", "🌧️"),
    34: ("Light rain", "🌦️"),
    35: ("Rain", "🌧️"),
    36: ("Heavy rain", "🌧️"),
    37: ("Hail", "⛈️"),
    38: ("Light snow", "🌨️"),
    39: ("Snow", "❄️"),
    40: ("Heavy snow", "❄️"),
    41: ("Thunderstorm with hail", "⛈️"),
    42: ("Blowing snow", "❄️"),
})


def icon_description(code: int) -> str:
    entry = WEATHER_ICONS.get(code)
    return entry[0] if entry else "Unknown"


def icon_emoji(code: int) -> str:
    entry = WEATHER_ICONS.get(code)
    return entry[1] if entry else "?"


def warn_type_label(code: int) -> str:
    return WARN_TYPES.get(code, f"Type {code}")


def warn_level_label(level: int) -> str:
    return WARN_LEVELS.get(level, f"Level {level}")
