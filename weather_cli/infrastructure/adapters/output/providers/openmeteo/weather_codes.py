"""
Tabela WMO weather_code → (condição canônica, descrição)
Usada apenas quando o mapeamento de códigos está habilitado
"""

WMO_WEATHER_CODES = {
    0: ("Clear", "Clear sky"),
    1: ("Clear", "Mainly clear"),
    2: ("Clouds", "Partly cloudy"),
    3: ("Clouds", "Overcast"),
    45: ("Fog", "Fog"),
    48: ("Fog", "Depositing rime fog"),
    51: ("Drizzle", "Light drizzle"),
    53: ("Drizzle", "Moderate drizzle"),
    55: ("Drizzle", "Dense drizzle"),
    56: ("Drizzle", "Light freezing drizzle"),
    57: ("Drizzle", "Dense freezing drizzle"),
    61: ("Rain", "Slight rain"),
    63: ("Rain", "Moderate rain"),
    65: ("Rain", "Heavy rain"),
    66: ("Rain", "Light freezing rain"),
    67: ("Rain", "Heavy freezing rain"),
    71: ("Snow", "Slight snowfall"),
    73: ("Snow", "Moderate snowfall"),
    75: ("Snow", "Heavy snowfall"),
    77: ("Snow", "Snow grains"),
    80: ("Rain", "Slight rain showers"),
    81: ("Rain", "Moderate rain showers"),
    82: ("Rain", "Violent rain showers"),
    85: ("Snow", "Slight snow showers"),
    86: ("Snow", "Heavy snow showers"),
    95: ("Thunderstorm", "Thunderstorm"),
    96: ("Thunderstorm", "Thunderstorm with slight hail"),
    99: ("Thunderstorm", "Thunderstorm with heavy hail"),
}


def describe_weather_code(code) -> tuple:
    """Códigos desconhecidos viram Clear, como no restante do mapeamento"""
    try:
        return WMO_WEATHER_CODES.get(int(code), ("Clear", f"Code {code}"))
    except (TypeError, ValueError):
        return ("Clear", "Unknown")
