"""Helpers de normalização de texto (nomes de cidades)"""
import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(value: str) -> str:
    """Remove espaços nas pontas e colapsa espaços internos"""
    return _WHITESPACE.sub(" ", value or "").strip()


def strip_diacritics(value: str) -> str:
    """
    Remove acentos via decomposição NFD

    Example:
        >>> strip_diacritics("Málaga")
        'Malaga'
    """
    decomposed = unicodedata.normalize("NFD", value or "")
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalize_city_name(value: str) -> str:
    """Nome sem acentos e com espaços normalizados"""
    return collapse_whitespace(strip_diacritics(value))
