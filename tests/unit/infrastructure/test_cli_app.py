"""
Testes para o adapter de entrada CLI
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_cli.application.dtos.responses import WeatherResponseDTO
from weather_cli.domain.exceptions import NotFoundError
from weather_cli.infrastructure.adapters.input.cli import app
from weather_cli.infrastructure.adapters.input.exception_handler_service import EXIT_NOT_FOUND
from weather_cli.shared.config.settings import Settings


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ('WEATHER_PROVIDER', 'OPENWEATHER_API_KEY', 'WEATHER_CLI_DEFAULT_UNITS'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('WEATHER_CLI_HISTORY_FILE', str(tmp_path / 'history.json'))
    monkeypatch.setenv('WEATHER_CLI_FAVORITES_FILE', str(tmp_path / 'favorites.json'))
    return tmp_path


@pytest.fixture
def container(make_query_result):
    fake = MagicMock()
    fake.settings = Settings()
    fake.close = AsyncMock()
    fake.get_weather_by_city.execute = AsyncMock(
        return_value=WeatherResponseDTO.from_result(make_query_result(), Settings().default_units)
    )
    return fake


class TestParseLocation:

    @pytest.mark.parametrize("value,expected", [
        ("Madrid", ("Madrid", None)),
        ("Madrid, ES", ("Madrid", "ES")),
        ("Washington, D.C., US", ("Washington, D.C.", "US")),
        ("Madrid,", ("Madrid", None)),
    ])
    def test_parse_location(self, value, expected):
        assert app.parse_location(value) == expected


class TestMain:

    def test_get_prints_weather(self, isolated_env, container, monkeypatch, capsys):
        monkeypatch.setattr(app, 'build_container', lambda settings: container)

        exit_code = app.main(['get', 'Madrid, ES', '--no-save'])

        assert exit_code == 0
        request = container.get_weather_by_city.execute.call_args.args[0]
        assert (request.city, request.country, request.save_history) == ('Madrid', 'ES', False)
        assert "20.0°C" in capsys.readouterr().out
        container.close.assert_awaited_once()

    def test_domain_error_sets_exit_code(self, isolated_env, container, monkeypatch, capsys):
        container.get_weather_by_city.execute.side_effect = NotFoundError('Ciudad', 'Atlantis, ES')
        monkeypatch.setattr(app, 'build_container', lambda settings: container)

        exit_code = app.main(['get', 'Atlantis'])

        assert exit_code == EXIT_NOT_FOUND
        assert "Atlantis" in capsys.readouterr().err
        container.close.assert_awaited_once()

    def test_config_masks_api_key(self, isolated_env, monkeypatch, capsys):
        monkeypatch.setenv('WEATHER_PROVIDER', 'openweather')
        monkeypatch.setenv('OPENWEATHER_API_KEY', 'abcdef1234567890')

        assert app.main(['config']) == 0

        out = capsys.readouterr().out
        assert "***7890" in out
        assert "abcdef1234567890" not in out

    def test_invalid_config_exits_before_any_request(self, isolated_env, monkeypatch, capsys):
        monkeypatch.setenv('WEATHER_PROVIDER', 'openweather')
        build = MagicMock()
        monkeypatch.setattr(app, 'build_container', build)

        exit_code = app.main(['get', 'Madrid'])

        assert exit_code != 0
        build.assert_not_called()
        assert "OPENWEATHER_API_KEY" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_favorites_flow_with_real_container(self, isolated_env):
        from weather_cli.infrastructure.adapters.input.cli.container import build_container
        from weather_cli.shared.config.settings import load_settings

        real = build_container(load_settings())
        try:
            args = app.build_parser().parse_args(['favorites', 'add', 'Madrid', 'es'])
            assert await app.run_command(args, real) == "Añadido a favoritos: Madrid, ES"

            args = app.build_parser().parse_args(['favorites', 'list'])
            assert await app.run_command(args, real) == "- Madrid, ES"
        finally:
            await real.close()


class TestBuildHistoryRepository:

    def test_file_storage_by_default(self, tmp_path):
        from weather_cli.infrastructure.adapters.input.cli.container import build_history_repository
        from weather_cli.infrastructure.adapters.output.persistence.json_history_repository import (
            JsonHistoryRepository,
        )

        repository = build_history_repository(Settings(history_file=str(tmp_path / 'h.json')))

        assert isinstance(repository, JsonHistoryRepository)

    def test_dynamodb_storage_keeps_history_cap(self):
        from weather_cli.infrastructure.adapters.input.cli.container import build_history_repository
        from weather_cli.infrastructure.adapters.output.persistence.dynamodb_history_repository import (
            DynamoDBHistoryRepository,
        )

        repository = build_history_repository(
            Settings(storage='dynamodb', history_table_name='history-table', aws_region='us-east-1')
        )

        assert isinstance(repository, DynamoDBHistoryRepository)
        assert repository.table_name == 'history-table'
        assert repository.client_manager.region_name == 'us-east-1'
        assert repository.max_entries == 100
