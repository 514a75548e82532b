"""
Input Adapter: CLI (argparse)
Presentation Layer: interpreta argumentos e delega para os use cases
"""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from weather_cli import __version__
from weather_cli.application.dtos.requests import (
    FavoriteRequest,
    GetWeatherByCityRequest,
    GetWeatherByCoordinatesRequest,
    GetWeatherByCountryRequest,
)
from weather_cli.infrastructure.adapters.input.cli import formatters
from weather_cli.infrastructure.adapters.input.cli.container import Container, build_container
from weather_cli.infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from weather_cli.shared.config.logger_config import get_logger, set_log_level
from weather_cli.shared.config.settings import (
    DEFAULT_COUNTRY_LIMIT,
    Settings,
    load_env_file,
    load_settings,
)
from weather_cli.shared.tracing import clear_trace_id, get_trace_id

logger = get_logger(child=True)

UNIT_CHOICES = ('celsius', 'fahrenheit', 'kelvin')


def parse_location(value: str) -> Tuple[str, Optional[str]]:
    """'Madrid, ES' -> ('Madrid', 'ES'); sem vírgula o país fica None"""
    if ',' not in value:
        return value.strip(), None
    city, country = value.rsplit(',', 1)
    return city.strip(), country.strip() or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='weather-cli',
        description='Consulta el clima actual por ciudad, coordenadas o país'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='salida detallada y logs de depuración')
    subparsers = parser.add_subparsers(dest='command', required=True)

    get = subparsers.add_parser('get', help='clima de una ciudad ("Ciudad[, CC]")')
    get.add_argument('location')
    get.add_argument('-u', '--units', choices=UNIT_CHOICES)
    get.add_argument('--no-save', action='store_true', help='no guardar en el historial')
    get.add_argument('-v', '--verbose', action='store_true', dest='verbose_output')

    coords = subparsers.add_parser('coords', help='clima por coordenadas')
    coords.add_argument('latitude', type=float)
    coords.add_argument('longitude', type=float)
    coords.add_argument('-u', '--units', choices=UNIT_CHOICES)
    coords.add_argument('--no-save', action='store_true')

    country = subparsers.add_parser('country', help='clima de las principales ciudades de un país')
    country.add_argument('country')
    country.add_argument('-l', '--limit', type=int, default=DEFAULT_COUNTRY_LIMIT)
    country.add_argument('-u', '--units', choices=UNIT_CHOICES)

    favorites = subparsers.add_parser('favorites', help='gestionar favoritos')
    favorite_actions = favorites.add_subparsers(dest='action', required=True)
    for action in ('add', 'remove'):
        sub = favorite_actions.add_parser(action)
        sub.add_argument('city')
        sub.add_argument('country')
    favorite_actions.add_parser('list')
    favorites_weather = favorite_actions.add_parser('weather')
    favorites_weather.add_argument('-u', '--units', choices=UNIT_CHOICES)

    history = subparsers.add_parser('history', help='historial de búsquedas')
    history.add_argument('--city')
    history.add_argument('--clear', action='store_true')
    history.add_argument('--stats', action='store_true')
    history.add_argument('-n', '--limit', type=int, default=None)

    subparsers.add_parser('config', help='mostrar la configuración efectiva')
    return parser


async def run_command(args: argparse.Namespace, container: Container) -> str:
    """Executa o subcomando e devolve o texto a imprimir"""
    units = getattr(args, 'units', None) or container.settings.default_units.value

    if args.command == 'get':
        city, country = parse_location(args.location)
        result = await container.get_weather_by_city.execute(
            GetWeatherByCityRequest(city=city, country=country, units=units, save_history=not args.no_save)
        )
        return formatters.format_weather(result, verbose=args.verbose or args.verbose_output)

    if args.command == 'coords':
        result = await container.get_weather_by_coordinates.execute(
            GetWeatherByCoordinatesRequest(
                latitude=args.latitude,
                longitude=args.longitude,
                units=units,
                save_history=not args.no_save
            )
        )
        return formatters.format_weather(result, verbose=args.verbose)

    if args.command == 'country':
        result = await container.get_weather_by_country.execute(
            GetWeatherByCountryRequest(country=args.country, limit=args.limit, units=units)
        )
        return formatters.format_country(result)

    if args.command == 'favorites':
        return await _run_favorites(args, container, units)

    if args.command == 'history':
        return await _run_history(args, container)

    raise ValueError(f"Comando desconocido: {args.command}")


async def _run_favorites(args: argparse.Namespace, container: Container, units: str) -> str:
    if args.action == 'add':
        favorite = await container.add_favorite.execute(FavoriteRequest(args.city, args.country))
        return f"Añadido a favoritos: {favorite.city}, {favorite.country}"
    if args.action == 'remove':
        await container.remove_favorite.execute(FavoriteRequest(args.city, args.country))
        return f"Eliminado de favoritos: {args.city}, {args.country.upper()}"
    if args.action == 'list':
        return formatters.format_favorites(await container.list_favorites.execute())
    return formatters.format_favorites_weather(await container.get_weather_for_favorites.execute(units))


async def _run_history(args: argparse.Namespace, container: Container) -> str:
    service = container.history_service
    if not service.is_available():
        return "El historial no está disponible."
    if args.clear:
        removed = await service.clear_all()
        return f"Historial borrado ({removed} entradas)."
    if args.stats:
        return formatters.format_history_stats(await service.get_stats())
    if args.city:
        return formatters.format_history(await service.find_by_city(args.city))
    return formatters.format_history(await service.get_all(args.limit))


async def _run(args: argparse.Namespace, settings: Settings) -> str:
    container = build_container(settings)
    try:
        return await run_command(args, container)
    finally:
        await container.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    exception_service = ExceptionHandlerService()
    get_trace_id()

    try:
        load_env_file(Path.cwd() / '.env')
        settings = load_settings()
        set_log_level('DEBUG' if args.verbose or getattr(args, 'verbose_output', False) else settings.log_level)

        if args.command == 'config':
            print(formatters.format_config(settings.masked()))
            return 0

        output = asyncio.run(_run(args, settings))
        print(output)
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        response = exception_service.handle(e)
        print(response.render(), file=sys.stderr)
        return response.exit_code
    finally:
        clear_trace_id()


if __name__ == '__main__':
    sys.exit(main())
