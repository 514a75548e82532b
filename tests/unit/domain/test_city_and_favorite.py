"""
Testes para as entidades City e Favorite
"""
from datetime import datetime, timezone

import pytest

from weather_cli.domain.entities.city import City
from weather_cli.domain.entities.favorite import Favorite
from weather_cli.domain.exceptions import InvalidCoordinateError, ValidationError


class TestCity:

    def test_valid_city_with_coordinates(self):
        city = City(name='Madrid', country='ES', latitude=40.4, longitude=-3.7)
        assert city.has_coordinates
        assert str(city) == "Madrid, ES"

    def test_rejects_digits_in_name(self):
        with pytest.raises(ValidationError):
            City(name='Madrid2', country='ES')

    def test_rejects_short_name(self):
        with pytest.raises(ValidationError):
            City(name='M', country='ES')

    def test_rejects_partial_coordinates(self):
        with pytest.raises(ValidationError):
            City(name='Madrid', country='ES', latitude=40.4)

    def test_rejects_invalid_coordinates(self):
        with pytest.raises(InvalidCoordinateError):
            City(name='Madrid', country='ES', latitude=120, longitude=0)

    def test_without_coordinates(self):
        city = City(name="L'Hospitalet", country='ES')
        assert city.coordinates is None


class TestFavorite:

    def test_country_is_uppercased(self):
        assert Favorite(city='Madrid', country='es').country == 'ES'

    def test_rejects_three_letter_country(self):
        with pytest.raises(ValidationError):
            Favorite(city='Madrid', country='ESP')

    def test_matches_is_case_insensitive_on_city(self):
        favorite = Favorite(city='Madrid', country='ES')
        assert favorite.matches('madrid', 'es')
        assert not favorite.matches('Madrid', 'MX')

    def test_dict_round_trip_preserves_created_at(self):
        created = datetime(2024, 5, 1, 10, 30, tzinfo=timezone.utc)
        favorite = Favorite(city='Sevilla', country='ES', created_at=created)
        restored = Favorite.from_dict(favorite.to_dict())
        assert restored == favorite
