from __future__ import annotations

import pytest

from redlistbot.domain.assessment import Assessment
from redlistbot.domain.fact_box import FactBoxView
from redlistbot.domain.outdated import is_outdated
from redlistbot.domain.status import StatusCode


def test_matching_synonym_without_years_is_current() -> None:
    view = FactBoxView({"status": "KWETSBAAR", "rl-id": "1"})

    assert not is_outdated(view, Assessment(subject_id=1, status=StatusCode.VU))


def test_year_mismatch_is_outdated() -> None:
    view = FactBoxView({"status": "Data Deficient", "rl-id": 1, "statusbron": "2019"})

    assert is_outdated(view, Assessment(subject_id=1, status=StatusCode.DD, year_assessed=2022))


def test_textual_and_integer_values_compare_equal() -> None:
    assessment = Assessment(subject_id=420, status=StatusCode.LC, year_assessed=2022)

    assert not is_outdated(
        FactBoxView({"rl-id": "420", "status": "LC", "statusbron": "2022"}), assessment
    )
    assert not is_outdated(
        FactBoxView({"rl-id": 420, "status": "LC", "statusbron": 2022}), assessment
    )


def test_empty_year_equals_absent_year() -> None:
    assessment = Assessment(subject_id=420, status=StatusCode.LC)

    assert not is_outdated(FactBoxView({"rl-id": "420", "status": "LC"}), assessment)
    assert not is_outdated(
        FactBoxView({"rl-id": "420", "status": "LC", "statusbron": ""}), assessment
    )


def test_one_sided_year_is_outdated() -> None:
    view = FactBoxView({"rl-id": "420", "status": "LC"})

    assert is_outdated(
        view, Assessment(subject_id=420, status=StatusCode.LC, year_assessed=2022)
    )
    assert is_outdated(
        FactBoxView({"rl-id": "420", "status": "LC", "statusbron": "2022"}),
        Assessment(subject_id=420, status=StatusCode.LC),
    )


@pytest.mark.parametrize(
    "fields",
    [
        {"status": "LC"},
        {"rl-id": "421", "status": "LC"},
        {"rl-id": "invalid", "status": "LC"},
        {"rl-id": "420"},
        {"rl-id": "420", "status": "VU"},
        {"rl-id": "420", "status": "niet geëvalueerd"},
    ],
)
def test_mismatches_are_outdated(fields: dict[str, str]) -> None:
    assert is_outdated(FactBoxView(fields), Assessment(subject_id=420, status=StatusCode.LC))


@pytest.mark.parametrize("status", ["fossil", "FOSSIEL", "EX", "Uitgestorven"])
def test_extinct_fact_boxes_are_never_outdated(status: str) -> None:
    view = FactBoxView({"status": status})

    for code in StatusCode:
        assert not is_outdated(view, Assessment(subject_id=1, status=code, year_assessed=2020))


def test_extinct_in_the_wild_is_not_protected() -> None:
    view = FactBoxView({"rl-id": "1", "status": "EW"})

    assert is_outdated(view, Assessment(subject_id=1, status=StatusCode.CR))


def test_unrelated_fields_do_not_matter() -> None:
    base = {"rl-id": "420", "status": "LC", "statusbron": "2022"}
    assessment = Assessment(subject_id=420, status=StatusCode.LC, year_assessed=2022)
    stale = Assessment(subject_id=420, status=StatusCode.VU, year_assessed=2022)

    for extra in ({"soort": "dier"}, {1: "vogel"}, {"w-naam": "Dodo"}):
        fields = {**base, **extra}
        assert is_outdated(FactBoxView(fields), assessment) == is_outdated(
            FactBoxView(base), assessment
        )
        assert is_outdated(FactBoxView(fields), stale) == is_outdated(FactBoxView(base), stale)
