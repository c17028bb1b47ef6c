from sampo.timestep import Timestep


def test_default_is_zero():
    assert float(Timestep()) == 0.0


def test_float_conversion_returns_seconds():
    step = Timestep(0.25)
    assert float(step) == 0.25
    assert step.seconds == 0.25


def test_milliseconds():
    assert Timestep(2.5).milliseconds == 2500.0


def test_ordering():
    assert Timestep(0.1) < Timestep(0.2)
    assert Timestep(0.3) == Timestep(0.3)