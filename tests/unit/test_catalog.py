from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from tariffcalc.catalog import (
    COMMON_SKILLS,
    find_skill_name,
    get_common_skill,
    list_common_skills,
    with_catalog_name,
)
from tariffcalc.constants import GENERIC_SKILL_NAME, PIKE, STRADDLE, STRAIGHT, TUCK
from tariffcalc.phases import phase_count
from tariffcalc.skill import Skill


def test_catalog_entries_are_normalized() -> None:
    for skill in COMMON_SKILLS.values():
        assert len(skill.twist_distribution) == phase_count(skill.rotation)


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        COMMON_SKILLS["newSkill"] = Skill()  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        COMMON_SKILLS["barani"].rotation = 8  # type: ignore[misc]


def test_get_common_skill() -> None:
    barani = get_common_skill("barani")
    assert barani is not None
    assert barani.name == "Barani"
    assert get_common_skill("quintuple") is None


def test_catalog_skills_name_themselves() -> None:
    for key, skill in COMMON_SKILLS.items():
        if key == "shapeJump":
            continue
        assert find_skill_name(skill) == skill.name, key


def test_basic_jumps_are_named_after_shape() -> None:
    assert find_skill_name(Skill(rotation=0, twist_distribution=(0,), shape=TUCK)) == "Tuck Jump"
    assert find_skill_name(Skill(rotation=0, twist_distribution=(0,), shape=STRADDLE)) == "Straddle Jump"
    assert find_skill_name(Skill(rotation=0, twist_distribution=(0,), shape=STRAIGHT)) == "Straight Jump"


def test_shape_variant_gets_shape_suffix() -> None:
    back_pike = Skill(rotation=4, twist_distribution=(0,), shape=PIKE, backward=True)
    assert find_skill_name(back_pike) == "Back Pike"


def test_shape_is_ignored_where_it_does_not_matter() -> None:
    tucked_rudi = Skill(rotation=4, twist_distribution=(3,), shape=TUCK)
    assert find_skill_name(tucked_rudi) == "Rudi"


def test_unknown_skill_is_custom() -> None:
    skill = Skill(rotation=8, twist_distribution=(1, 3), shape=STRAIGHT, backward=True)
    assert find_skill_name(skill) == GENERIC_SKILL_NAME


def test_with_catalog_name_returns_named_copy() -> None:
    skill = Skill(rotation=8, twist_distribution=(0,), shape=TUCK, backward=True)
    named = with_catalog_name(skill)
    assert named.name == "Double Back"
    assert named.twist_distribution == (0, 0)
    assert skill.name == GENERIC_SKILL_NAME


def test_list_common_skills_default_sort_is_tariff_desc() -> None:
    entries = list_common_skills()
    assert len(entries) == len(COMMON_SKILLS)
    assert entries[0].key == "miller"
    assert entries[0].tariff == 2.1
    tariffs = [entry.tariff for entry in entries]
    assert tariffs == sorted(tariffs, reverse=True)


def test_list_common_skills_tariff_asc_breaks_ties_by_name() -> None:
    entries = list_common_skills("tariff-asc")
    assert entries[0].name == "Back Drop"
    assert entries[0].tariff == 0.1


def test_list_common_skills_alphabetical() -> None:
    ascending = [entry.name for entry in list_common_skills("alpha-asc")]
    descending = [entry.name for entry in list_common_skills("alpha-desc")]
    assert ascending[0] == "Back"
    assert descending[0] == "Triple Back"
    assert ascending == sorted(ascending)
    assert descending == sorted(descending, reverse=True)


def test_unknown_sort_order_falls_back_to_default() -> None:
    assert [entry.key for entry in list_common_skills("bogus")] == [entry.key for entry in list_common_skills()]


def test_entries_carry_notation() -> None:
    entries = {entry.key: entry for entry in list_common_skills()}
    assert entries["halfOut"].fig_notation == "(8 - 1 o)"
    assert entries["seatDrop"].fig_notation == ""


@pytest.mark.parametrize(
    ("order", "in_order"),
    [
        ("tariff-desc", lambda a, b: (-a.tariff, a.name) <= (-b.tariff, b.name)),
        ("tariff-asc", lambda a, b: (a.tariff, a.name) <= (b.tariff, b.name)),
        ("alpha-asc", lambda a, b: (a.name, -a.tariff) <= (b.name, -b.tariff)),
        ("alpha-desc", lambda a, b: a.name > b.name or (a.name == b.name and a.tariff >= b.tariff)),
    ],
)
def test_every_sort_order_applies_its_tie_break(order, in_order) -> None:
    entries = list_common_skills(order)
    assert sorted(entry.key for entry in entries) == sorted(COMMON_SKILLS)
    assert all(in_order(a, b) for a, b in zip(entries, entries[1:]))
