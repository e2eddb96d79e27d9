import pytest

from spycity import character_factory as cf


@pytest.fixture(autouse=True)
def _fresh_ids():
    cf.reset_ids()


def test_new_citizen_attributes():
    citizen = cf.new_citizen(2, 3)
    assert citizen.id == 1
    assert (citizen.row, citizen.column) == (2, 3)
    assert (citizen.home_row, citizen.home_column) == (2, 3)
    assert (citizen.work_row, citizen.work_column) == (-1, -1)
    assert citizen.health == 10


def test_ids_are_sequential_across_kinds():
    ids = [
        cf.new_citizen(0, 0).id,
        cf.new_spy_with_licence(1, 1).character.id,
        cf.new_spy_without_licence(1, 1).character.id,
        cf.new_case_officer(2, 2).character.id,
        cf.new_counter_intelligence_officer(3, 3, 2).character.id,
    ]
    assert ids == list(range(1, len(ids) + 1))


def test_reset_ids_restarts_numbering():
    first = cf.new_citizen(0, 0).id
    cf.new_citizen(0, 0)
    cf.reset_ids()
    assert cf.new_citizen(0, 0).id == first


def test_spy_with_licence():
    spy = cf.new_spy_with_licence(4, 5)
    assert spy.has_licence_to_kill
    assert spy.nb_of_stolen_companies == 0
    assert not spy.is_attacked
    assert spy.targeted_companies_count == 0
    assert spy.stolen_message == cf.EMPTY
    assert (spy.character.home_row, spy.character.home_column) == (4, 5)


def test_spy_without_licence():
    spy = cf.new_spy_without_licence(4, 5)
    assert not spy.has_licence_to_kill
    assert spy.stolen_message == cf.EMPTY
    assert (spy.character.row, spy.character.column) == (4, 5)


def test_case_officer():
    officer = cf.new_case_officer(6, 1)
    assert not officer.is_attacked
    assert not officer.have_messages
    assert (officer.character.home_row, officer.character.home_column) == (6, 1)


def test_counter_intelligence_officer_keeps_target():
    officer = cf.new_counter_intelligence_officer(3, 3, 2)
    assert officer.targeted_character_id == 2
    assert (officer.character.row, officer.character.column) == (3, 3)
    assert officer.character.health == 10


def test_characters_are_independent():
    first = cf.new_citizen(1, 1)
    second = cf.new_citizen(1, 1)
    first.row = 5
    assert second.row == 1
    assert first.id != second.id