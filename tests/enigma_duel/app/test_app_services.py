import pytest

from enigma_duel.app.services import Services


class Dummy:
    pass


def test_services_len_is_number_of_fields():
    s = Services(game_room=Dummy(), treasury=Dummy())
    assert len(s) == 2


def test_services_stores_attributes():
    game_room = Dummy()
    treasury = Dummy()

    s = Services(game_room=game_room, treasury=treasury)

    assert s.game_room is game_room
    assert s.treasury is treasury


def test_services_is_slots_dataclass_no_dict_and_no_new_attrs():
    s = Services(game_room=Dummy(), treasury=Dummy())

    # slots => pas de __dict__
    assert not hasattr(s, "__dict__")

    with pytest.raises(AttributeError):
        s.new_attr = 123  # type: ignore[attr-defined]
