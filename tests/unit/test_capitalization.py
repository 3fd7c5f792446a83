import pytest

from spellfix.algo.capitalization import Casing, TurkicCasing, Type


@pytest.mark.parametrize(
    ['word', 'captype'],
    [
        ('foo', Type.NO),
        ('42', Type.NO),
        ('Foo', Type.INIT),
        ('F', Type.ALL),
        ('FOO', Type.ALL),
        ('FooBar', Type.HUHINIT),
        ('fooBar', Type.HUH),
    ]
)
def test_guess(word, captype):
    assert Casing().guess(word) == captype


@pytest.mark.parametrize(
    ['word', 'captype', 'coerced'],
    [
        ('world', Type.NO, 'world'),
        ('world', Type.INIT, 'World'),
        ('world', Type.HUHINIT, 'World'),
        ('world', Type.ALL, 'WORLD'),
        ('world', Type.HUH, 'world'),
        ('', Type.ALL, ''),
    ]
)
def test_coerce(word, captype, coerced):
    assert Casing().coerce(word, captype) == coerced


def test_lower():
    assert Casing().lower('Hello') == 'hello'


def test_turkic():
    turkic = TurkicCasing()

    assert turkic.lower('Izmir') == 'ızmir'
    assert turkic.upper('Izmir') == 'IZMİR'
    assert turkic.coerce('istanbul', Type.INIT) == 'İstanbul'
