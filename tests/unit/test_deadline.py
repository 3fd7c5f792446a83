import dataclasses

import pytest

from spellfix.algo.deadline import Deadline


def test_after():
    deadline = Deadline.after(500, clock=lambda: 10.0)

    assert deadline.at == 10.5
    assert not deadline.expired()


def test_negative_timeout():
    assert Deadline.after(-100, clock=lambda: 10.0).at == 10.0


def test_zero_timeout():
    # expired right away
    assert Deadline.after(0, clock=lambda: 10.0).expired()


def test_expired():
    now = [0.0]
    deadline = Deadline(at=1.0, clock=lambda: now[0])

    assert not deadline.expired()
    now[0] = 1.0
    assert deadline.expired()
    now[0] = 2.0
    assert deadline.expired()


def test_immutable():
    deadline = Deadline.after(500)

    with pytest.raises(dataclasses.FrozenInstanceError):
        deadline.at = 0


def test_equality_ignores_clock():
    assert Deadline(1.0, clock=lambda: 0.0) == Deadline(1.0, clock=lambda: 5.0)
