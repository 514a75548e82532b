"""
Formatadores de texto para a saída do CLI
"""
from typing import Any, Dict, List

from weather_cli.application.dtos.responses import (
    CountryWeatherResponseDTO,
    FavoriteResponseDTO,
    FavoriteWeatherDTO,
    WeatherResponseDTO,
)
from weather_cli.domain.entities.search_history import SearchHistoryEntry

SEPARATOR = '-' * 40


def format_weather(weather: WeatherResponseDTO, verbose: bool = False) -> str:
    lines = [
        f"{weather.display}, {weather.country}",
        SEPARATOR,
        f"Temperatura:      {weather.temperature} (sensación {weather.feels_like})",
        f"Mín / Máx:        {weather.temp_min} / {weather.temp_max}",
        f"Condición:        {weather.condition} - {weather.description}",
        f"Humedad:          {weather.humidity}",
        f"Viento:           {weather.wind}",
    ]
    if weather.is_cold:
        lines.append("Aviso:            hace frío")
    elif weather.is_hot:
        lines.append("Aviso:            hace calor")

    if verbose:
        lines.extend([
            f"Presión:          {weather.pressure}",
            f"Visibilidad:      {weather.visibility}",
            f"Coordenadas:      {weather.latitude}, {weather.longitude}",
            f"Observado:        {weather.observed_at}",
            f"Consultado:       {weather.queried_at}",
        ])
    return "\n".join(lines)


def format_country(result: CountryWeatherResponseDTO) -> str:
    header = f"Clima en {result.country_name} ({result.country_code}): {result.total_cities} ciudades"
    if not result.cities:
        return f"{header}\nNo se pudo obtener el clima de ninguna ciudad."

    rows = [header, SEPARATOR]
    for city in result.cities:
        rows.append(f"{city.city:<20} {city.temperature:>9}  {city.condition} ({city.description})")
    return "\n".join(rows)


def format_favorites(favorites: List[FavoriteResponseDTO]) -> str:
    if not favorites:
        return "No hay favoritos guardados."
    return "\n".join(f"- {f.city}, {f.country}" for f in favorites)


def format_favorites_weather(results: List[FavoriteWeatherDTO]) -> str:
    if not results:
        return "No hay favoritos guardados."

    rows = []
    for item in results:
        label = f"{item.favorite.city}, {item.favorite.country}"
        if item.ok:
            rows.append(f"{label:<25} {item.weather.temperature:>9}  {item.weather.description}")
        else:
            rows.append(f"{label:<25} error: {item.error}")
    return "\n".join(rows)


def format_history(entries: List[SearchHistoryEntry]) -> str:
    if not entries:
        return "El historial está vacío."
    return "\n".join(
        f"{e.searched_at:%Y-%m-%d %H:%M}  {e.city_name}, {e.country_code}  "
        f"{e.temperature:.1f}°C  {e.description}  [{e.search_type.value}]"
        for e in entries
    )


def format_history_stats(stats: Dict[str, Any]) -> str:
    if not stats.get('total'):
        return "El historial está vacío."

    lines = [f"Búsquedas totales: {stats['total']}"]
    if stats.get('averageTemperature') is not None:
        lines.append(f"Temperatura media: {stats['averageTemperature']:.1f}°C")
    lines.append("Ciudades más consultadas:")
    lines.extend(f"  {city}: {count}" for city, count in stats['topCities'])
    lines.append("Por tipo: " + ", ".join(f"{k}={v}" for k, v in sorted(stats['byType'].items())))
    return "\n".join(lines)


def format_config(config: Dict[str, Any]) -> str:
    width = max(len(key) for key in config)
    return "\n".join(f"{key:<{width}}  {value}" for key, value in config.items())
