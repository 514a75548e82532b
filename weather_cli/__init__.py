"""Weather CLI - clima atual via OpenWeatherMap ou Open-Meteo"""

__version__ = "1.0.0"
