"""
Tests de la extracción heurística del nombre del negocio.

Verifica que:
1) Se toma siempre el match más a la izquierda
2) El match respeta la clase de caracteres y el largo máximo
3) Sin candidato se devuelve el nombre por defecto, sin lanzar
"""

import pytest

from blueprint_core.domain_models import DEFAULT_BUSINESS_NAME
from blueprint_core.naming import RegexNameExtractor, extract_name


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Acme Repairs does on-site fixes", "Acme Repairs does on"),
        ("Mobile Welding services are great", "Mobile Welding services are great"),
        ("we are Johnson & Sons, since 1990", "Johnson & Sons"),
        ("hello World & Co", "World & Co"),
        ("x Foo-Bar Baz Industries", "Foo"),
        ("Route 66 Diner.", "Route 66 Diner"),
        ("I am OK", "I am OK"),
        ("ABC", "ABC"),
    ],
)
def test_leftmost_match(text, expected):
    assert extract_name(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "all lowercase words", "12345 !!!", "Hi", "AB", "Ok-go", "éclair shop"],
)
def test_no_match_returns_default(text):
    assert extract_name(text) == DEFAULT_BUSINESS_NAME


def test_length_bound_is_forty_after_capital():
    text = "A" + "b" * 45
    name = extract_name(text)
    assert name == "A" + "b" * 40
    assert len(name) == 41


def test_exactly_forty_after_capital_is_kept_whole():
    text = "Z" + "y" * 40
    assert extract_name(text) == text


def test_trailing_spaces_are_trimmed():
    # El match incluye los espacios finales permitidos; se recortan
    assert extract_name("Acme Corp   , ltd") == "Acme Corp"


def test_non_ascii_capital_does_not_start_a_match():
    assert extract_name("Éclair Shop") == "Shop"


def test_custom_default_name():
    extractor = RegexNameExtractor(default_name="Sin nombre")
    assert extractor.extract_name("nothing here") == "Sin nombre"
    assert extractor.extract_name("Acme") == "Acme"
