import pytest

from rotor_and_reflector import Reflector, Rotor
from utilities import ALPHABET, REFLECTOR, ROTORS


@pytest.fixture
def rotor():
    return Rotor.from_spec(ROTORS[0])


def test_initial_state(rotor):
    assert rotor.wiring == ROTORS[0].wiring
    assert rotor.notch == "Q"
    assert rotor.ring_setting == 0
    assert rotor.position == 0


def test_custom_parameters():
    r = Rotor(ALPHABET, "M", ring_setting=5, position=10)
    assert r.ring_setting == 5
    assert r.position == 10
    assert r.notch == "M"


def test_step_wraps(rotor):
    rotor.step()
    assert rotor.position == 1
    rotor.position = 25
    rotor.step()
    assert rotor.position == 0


def test_at_notch(rotor):
    rotor.position = 16  # Q
    assert rotor.at_notch()
    rotor.position = 15
    assert not rotor.at_notch()
    rotor.position = 17
    assert not rotor.at_notch()


def test_forward_at_rest(rotor):
    assert rotor.forward("A") == "E"
    assert rotor.forward("B") == "K"
    assert rotor.position == 0


def test_ring_setting_changes_output():
    ringed = Rotor.from_spec(ROTORS[0], ring_setting=1)
    plain = Rotor.from_spec(ROTORS[0])
    assert ringed.forward("A") == "K"
    assert ringed.forward("A") != plain.forward("A")


def test_position_changes_output(rotor):
    before = rotor.forward("A")
    rotor.position = 1
    assert rotor.forward("A") == "J"
    assert rotor.forward("A") != before


@pytest.mark.parametrize("spec", ROTORS, ids=lambda s: s.name)
@pytest.mark.parametrize("position, ring", [(0, 0), (7, 0), (0, 11), (25, 25), (13, 4)])
def test_backward_inverts_forward(spec, position, ring):
    r = Rotor.from_spec(spec, ring, position)
    for letter in ALPHABET:
        assert r.backward(r.forward(letter)) == letter


def test_rotor_rejects_bad_wiring():
    with pytest.raises(ValueError):
        Rotor("ABC", "A")
    with pytest.raises(ValueError):
        Rotor("A" * 26, "A")


def test_rotor_rejects_bad_notch():
    with pytest.raises(ValueError):
        Rotor(ALPHABET, "1")
    with pytest.raises(ValueError):
        Rotor(ALPHABET, "AB")


def test_reflector_maps_by_index():
    refl = Reflector(REFLECTOR)
    assert refl.reflect("A") == "Y"
    assert refl.reflect("Y") == "A"
    for letter in ALPHABET:
        assert refl.reflect(refl.reflect(letter)) == letter
        assert refl.reflect(letter) != letter


def test_reflector_rejects_fixed_point():
    with pytest.raises(ValueError):
        Reflector(ALPHABET)


def test_reflector_rejects_non_involution():
    with pytest.raises(ValueError):
        Reflector(ROTORS[0].wiring)


def test_reflector_rejects_short_wiring():
    with pytest.raises(ValueError):
        Reflector("YR")


def test_out_of_range_settings_are_normalised():
    r = Rotor.from_spec(ROTORS[0], ring_setting=27, position=16 + 26)
    assert r.position == 16
    assert r.ring_setting == 1
    assert r.at_notch()
    assert Rotor.from_spec(ROTORS[0], position=-1).position == 25
