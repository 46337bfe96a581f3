import random
import string

import pytest

from enigma_machine import EnigmaMachine
from errors import InvalidCharacter, InvalidConfiguration, OutOfRange

PLUGS = "SZ GT DV KU FO MY EW JN IX LQ"


def make(rotors="I II III", reflector="B", plugs=PLUGS, dials="A B C"):
    return EnigmaMachine(rotors, reflector, plugs, dials)


@pytest.mark.parametrize(
    "rotors,expected",
    [("I II III", "PSGHM"), ("I II IV", "TJGXN")],
)
def test_hello_golden_values(rotors, expected):
    machine = make(rotors)
    assert machine.encrypt("HELLO") == expected

    machine.set_dials("A B C")
    assert machine.decrypt(expected) == "HELLO"


def test_no_plugs_from_aaa():
    machine = EnigmaMachine()
    assert machine.encrypt("AAAAA") == "EVRDW"
    assert machine.dials == (5, 0, 0)


def test_output_has_same_length():
    text = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG" * 3
    assert len(make().encrypt(text)) == len(text)


@pytest.mark.parametrize("seed", range(5))
def test_round_trip_random_configurations(seed):
    rng = random.Random(seed)
    rotors = [rng.randrange(5) for _ in range(3)]       # duplicates allowed
    reflector = rng.choice("BC")
    letters = rng.sample(string.ascii_uppercase, 2 * rng.randint(0, 10))
    plugs = [a + b for a, b in zip(letters[::2], letters[1::2])]
    dials = [rng.randrange(26) for _ in range(3)]
    text = "".join(rng.choices(string.ascii_uppercase, k=800))

    cipher = EnigmaMachine(rotors, reflector, plugs, dials).encrypt(text)
    assert cipher != text
    assert EnigmaMachine(rotors, reflector, plugs, dials).decrypt(cipher) == text


def test_reset_restores_start_position():
    machine = make()
    cipher = machine.encrypt("ATTACKATDAWN")
    assert machine.dials != (0, 1, 2)
    machine.reset()
    assert machine.dials == (0, 1, 2)
    assert machine.decrypt(cipher) == "ATTACKATDAWN"


def test_no_automatic_reset():
    machine = make()
    first = machine.encrypt("HELLO")
    assert machine.encrypt("HELLO") != first


@pytest.mark.parametrize("dials", [(0, 1, 2), (15, 3, 0), (25, 25, 25)])
def test_single_step_is_reciprocal(dials):
    for letter in string.ascii_uppercase:
        out = make(dials=dials).process_char(letter)
        assert out != letter
        assert make(dials=dials).process_char(out) == letter


def test_fast_rotor_steps_every_character():
    machine = EnigmaMachine(dials=(0, 0, 0))
    machine.process_char("A")
    assert machine.dials == (1, 0, 0)
    machine.process_char("A")
    assert machine.dials == (2, 0, 0)


def test_middle_rotor_steps_once_per_26_characters():
    machine = EnigmaMachine(dials=(0, 0, 0))
    machine.encrypt("A" * 26)
    assert machine.dials == (0, 1, 0)
    machine.encrypt("A" * 26)
    assert machine.dials == (0, 2, 0)


def test_middle_rotor_steps_when_fast_rotor_reaches_notch():
    machine = EnigmaMachine(dials="O A A")              # I turns over on Q
    machine.process_char("A")
    assert machine.window == "P A A"
    machine.process_char("A")
    assert machine.window == "Q B A"


def test_slow_rotor_steps_only_on_middle_notch():
    machine = EnigmaMachine(dials="P D A")              # II turns over on E
    machine.process_char("A")
    assert machine.window == "Q E B"

    machine = EnigmaMachine(dials="P C A")
    machine.process_char("A")
    assert machine.window == "Q D A"


def test_no_double_step():
    # the middle wheel sits on its notch but only moves when carried into
    machine = EnigmaMachine(dials="A E A")
    machine.process_char("A")
    assert machine.window == "B E A"


def test_selectors_by_label_or_ordinal():
    by_label = EnigmaMachine("III I V", "C", PLUGS, "XYZ")
    by_ordinal = EnigmaMachine((2, 0, 4), 1, PLUGS, (23, 24, 25))
    text = "ENIGMAMACHINE"
    assert by_label.encrypt(text) == by_ordinal.encrypt(text)


def test_eleven_plug_pairs_rejected():
    with pytest.raises(InvalidConfiguration):
        make(plugs=PLUGS + " PR")


def test_rotor_selector_five_rejected():
    with pytest.raises(OutOfRange):
        make(rotors=(0, 1, 5))


def test_two_dials_rejected():
    with pytest.raises(InvalidConfiguration):
        make(dials="A B")


def test_wrong_rotor_count_rejected():
    with pytest.raises(InvalidConfiguration):
        make(rotors="I II")


def test_unknown_reflector_rejected():
    with pytest.raises(OutOfRange):
        make(reflector="A")


def test_failed_configure_keeps_previous_state():
    machine = make()
    before = machine.settings
    with pytest.raises(OutOfRange):
        machine.configure("I II VI", "C", "", "ZZZ")
    with pytest.raises(InvalidConfiguration):
        machine.configure("IV V I", "C", "AB AC", "ZZZ")
    assert machine.settings == before
    assert machine.encrypt("HELLO") == "PSGHM"


def test_setters_rebuild_components():
    machine = make()
    machine.set_reflector("C")
    machine.set_plugboard("")
    machine.set_rotors("V IV III")
    assert machine.settings == {
        "rotors": ["V", "IV", "III"],
        "reflector": "C",
        "plugs": [],
        "dials": ["A", "B", "C"],
    }


def test_set_rotors_reapplies_start_dials():
    machine = make()
    machine.encrypt("HELLO")
    machine.set_rotors("I II III")
    assert machine.dials == (0, 1, 2)
    assert machine.encrypt("HELLO") == "PSGHM"


def test_invalid_character_does_not_step():
    machine = make()
    with pytest.raises(InvalidCharacter):
        machine.process_char("a")
    assert machine.dials == (0, 1, 2)


def test_settings_export():
    assert make().settings == {
        "rotors": ["I", "II", "III"],
        "reflector": "B",
        "plugs": ["DV", "EW", "FO", "GT", "IX", "JN", "KU", "LQ", "MY", "SZ"],
        "dials": ["A", "B", "C"],
    }


@pytest.mark.parametrize("dials", [(0.5, 1, 2), (None, 1, 2)])
def test_non_integer_dials_rejected_at_configuration(dials):
    with pytest.raises(InvalidConfiguration):
        make(dials=dials)


def test_non_integer_rotor_selector_rejected_at_configuration():
    machine = make()
    with pytest.raises(InvalidConfiguration):
        machine.configure((0, 1.5, 2), "B", "", "AAA")
    assert machine.encrypt("HELLO") == "PSGHM"


def test_rejected_text_leaves_dials_unchanged():
    machine = make()
    with pytest.raises(InvalidCharacter):
        machine.encrypt("AB1")
    assert machine.dials == (0, 1, 2)
    assert machine.encrypt("HELLO") == "PSGHM"
