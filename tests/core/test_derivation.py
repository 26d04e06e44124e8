from __future__ import annotations

from datetime import date

import pendulum
import pytest

from panelscreen.core import DerivationConfig, TemporalDeriver, derive_temporal_values
from panelscreen.errors import ValidationError
from panelscreen.schemas import (
    ApplicantProfile,
    EducationRecord,
    ExperienceRecord,
    QualificationLevel,
)


def build_profile(
    *,
    date_of_birth: str = "1980-05-10",
    education: list[dict] | None = None,
    experiences: list[dict] | None = None,
) -> ApplicantProfile:
    return ApplicantProfile(
        applicant_id="A-100",
        date_of_birth=date_of_birth,
        education=[EducationRecord(**item) for item in education or []],
        experiences=[ExperienceRecord(**item) for item in experiences or []],
    )


def test_total_experience_sums_non_overlapping_spans():
    profile = build_profile(
        experiences=[
            {"organization": "Alpha", "start_date": "2010-01-01", "end_date": "2015-01-01"},
            {"organization": "Beta", "start_date": "2016-01-01", "end_date": "2018-01-01"},
        ]
    )

    derived = derive_temporal_values(profile, "2024-01-01")

    spans = [
        (date(2015, 1, 1) - date(2010, 1, 1)).days,
        (date(2018, 1, 1) - date(2016, 1, 1)).days,
    ]
    assert derived.total_experience_years == pytest.approx(round(sum(spans) / 365.25, 1))
    assert derived.total_experience_years == pytest.approx(7.0)


def test_overlapping_records_are_double_counted():
    profile = build_profile(
        experiences=[
            {"organization": "Alpha", "start_date": "2020-01-01", "end_date": "2022-01-01"},
            {"organization": "Alpha Consulting", "start_date": "2020-01-01", "end_date": "2022-01-01"},
        ]
    )

    derived = derive_temporal_values(profile, "2024-01-01")

    assert derived.total_experience_years == pytest.approx(4.0)


def test_ongoing_record_runs_to_reference_date():
    profile = build_profile(
        experiences=[{"organization": "Alpha", "start_date": "2020-01-01"}],
    )

    derived = derive_temporal_values(profile, date(2023, 1, 1))

    assert derived.total_experience_years == pytest.approx(3.0)
    assert derived.reference_date == date(2023, 1, 1)


def test_service_years_are_restricted_to_flagged_records():
    profile = build_profile(
        experiences=[
            {
                "organization": "Ministry",
                "start_date": "2000-01-01",
                "end_date": "2010-01-01",
                "is_senior_grade_service": True,
            },
            {
                "organization": "Ministry",
                "start_date": "2010-01-01",
                "end_date": "2015-01-01",
                "is_senior_grade_service": True,
                "is_advanced_pay_level": True,
                "pay_level": "Level-12",
            },
            {"organization": "Private Co", "start_date": "2015-01-01", "end_date": "2017-01-01"},
        ]
    )

    derived = derive_temporal_values(profile, "2024-01-01")

    assert derived.total_experience_years == pytest.approx(17.0)
    assert derived.senior_grade_service_years == pytest.approx(15.0)
    assert derived.advanced_pay_level_years == pytest.approx(5.0)


def test_age_counts_completed_years_only():
    profile = build_profile(date_of_birth="1990-06-15")

    assert derive_temporal_values(profile, "2024-06-14").age == 33
    assert derive_temporal_values(profile, "2024-06-15").age == 34


@pytest.mark.parametrize(
    ("date_of_birth", "reference_date", "expected"),
    [
        ("1960-03-01", "2024-02-29", 63),
        ("1960-03-01", "2024-03-01", 64),
        ("1975-12-31", "2024-12-30", 48),
        ("1988-01-01", "2023-12-31", 35),
        ("1988-01-01", "2024-01-01", 36),
        ("1999-07-20", "2024-07-19", 24),
        ("1992-02-29", "2024-02-28", 31),
        ("1992-02-29", "2024-02-29", 32),
        ("1992-02-29", "2023-02-28", 30),
        ("1992-02-29", "2023-03-01", 31),
    ],
)
def test_age_before_and_on_birthday(date_of_birth: str, reference_date: str, expected: int):
    profile = build_profile(date_of_birth=date_of_birth)

    assert derive_temporal_values(profile, reference_date).age == expected


def test_reference_date_defaults_to_today_provider():
    profile = build_profile(
        date_of_birth="1990-01-01",
        experiences=[{"organization": "Alpha", "start_date": "2020-01-01"}],
    )
    deriver = TemporalDeriver(today_provider=lambda: pendulum.datetime(2025, 1, 1))

    derived = deriver.derive(profile)

    assert derived.age == 35
    assert derived.total_experience_years == pytest.approx(5.0)


def test_end_before_start_names_the_record():
    profile = build_profile(
        experiences=[
            {"organization": "Alpha", "start_date": "2010-01-01", "end_date": "2012-01-01"},
            {"organization": "Beta", "start_date": "2015-01-01", "end_date": "2014-01-01"},
        ]
    )

    with pytest.raises(ValidationError) as exc:
        derive_temporal_values(profile, "2024-01-01")

    assert exc.value.record == "experiences[1] (Beta)"
    assert exc.value.field == "end_date"
    assert "experiences[1] (Beta)" in str(exc.value)


def test_start_after_reference_date_is_rejected():
    profile = build_profile(
        experiences=[{"organization": "Future Co", "start_date": "2030-01-01"}],
    )

    with pytest.raises(ValidationError, match="Future Co"):
        derive_temporal_values(profile, "2024-01-01")


def test_birth_after_reference_date_is_rejected():
    profile = build_profile(date_of_birth="2030-01-01")

    with pytest.raises(ValidationError) as exc:
        derive_temporal_values(profile, "2024-01-01")

    assert exc.value.field == "date_of_birth"


def test_unparseable_reference_date_is_rejected():
    with pytest.raises(ValidationError):
        derive_temporal_values(build_profile(), "not-a-date")


def test_education_flags_are_any_of_records():
    profile = build_profile(
        education=[
            {"degree": "B.Sc", "institution": "City College", "is_premier_institution": False},
            {
                "degree": "M.Sc",
                "institution": "Indian Statistical Institute",
                "is_premier_institution": True,
                "is_postgraduate": True,
            },
        ]
    )

    derived = derive_temporal_values(profile, "2024-01-01")

    assert derived.has_postgraduate is True
    assert derived.has_premier_degree is True
    assert derived.has_doctorate is False
    assert derived.highest_qualification is QualificationLevel.POST_GRADUATE


def test_undeclared_premier_flag_matches_configured_institutions():
    deriver = TemporalDeriver()

    matched = build_profile(education=[{"degree": "B.Tech", "institution": "Indian Institue of Technology"}])
    acronym = build_profile(education=[{"degree": "B.Tech", "institution": "IIT"}])
    unmatched = build_profile(education=[{"degree": "B.A.", "institution": "Generic College of Arts"}])
    declared = build_profile(
        education=[{"degree": "B.Tech", "institution": "IIT Bombay", "is_premier_institution": False}]
    )

    assert deriver.derive(matched, "2024-01-01").has_premier_degree is True
    assert deriver.derive(acronym, "2024-01-01").has_premier_degree is True
    assert deriver.derive(unmatched, "2024-01-01").has_premier_degree is False
    assert deriver.derive(declared, "2024-01-01").has_premier_degree is False


@pytest.mark.parametrize(
    "institution",
    [
        "National Institute of Fashion Technology",
        "IIT Coaching Academy",
        "Indian Institute of Technology Management Studies Pvt",
        "Indian Institute",
    ],
)
def test_institutions_containing_a_listed_name_are_not_premier(institution: str):
    profile = build_profile(education=[{"degree": "B.A.", "institution": institution}])

    assert derive_temporal_values(profile, "2024-01-01").has_premier_degree is False


def test_premier_list_is_configurable():
    config = DerivationConfig(premier_institutions=("Example Institute of Policy",))
    profile = build_profile(education=[{"degree": "MPP", "institution": "IIT Delhi"}])

    derived = TemporalDeriver(config=config).derive(profile, "2024-01-01")

    assert derived.has_premier_degree is False


@pytest.mark.parametrize(
    ("degree", "expected"),
    [
        ("B.Tech", QualificationLevel.PROFESSIONAL),
        ("MBBS", QualificationLevel.PROFESSIONAL),
        ("LLB", QualificationLevel.LAW),
        ("Bachelor of Arts", QualificationLevel.GRADUATE),
        ("B.Com", QualificationLevel.GRADUATE),
        ("Diploma in Civil Engineering", QualificationLevel.DIPLOMA),
        ("ITI Electrician", QualificationLevel.ITI),
        ("Higher Secondary", QualificationLevel.CLASS_XII),
        ("MBA", QualificationLevel.POST_GRADUATE),
        ("Ph.D", QualificationLevel.DOCTORATE),
        ("B.Pharm", QualificationLevel.GRADUATE),
        ("B.Ed", QualificationLevel.GRADUATE),
        ("BFA", QualificationLevel.GRADUATE),
        ("B. Voc", QualificationLevel.GRADUATE),
        ("M.Ed", QualificationLevel.POST_GRADUATE),
        ("M.E.", QualificationLevel.POST_GRADUATE),
    ],
)
def test_highest_qualification_from_degree_name(degree: str, expected: QualificationLevel):
    profile = build_profile(education=[{"degree": degree, "is_premier_institution": False}])

    assert derive_temporal_values(profile, "2024-01-01").highest_qualification is expected


def test_declared_level_and_flags_take_the_highest_rank():
    profile = build_profile(
        education=[
            {"degree": "Higher Secondary", "level": "ITI", "is_premier_institution": False},
            {"degree": "Research", "is_doctorate": True, "is_premier_institution": False},
        ]
    )

    derived = derive_temporal_values(profile, "2024-01-01")

    assert derived.highest_qualification is QualificationLevel.DOCTORATE
    assert derived.has_doctorate is True


def test_empty_profile_yields_zero_values():
    derived = derive_temporal_values(build_profile(), "2024-01-01")

    assert derived.total_experience_years == 0.0
    assert derived.senior_grade_service_years == 0.0
    assert derived.advanced_pay_level_years == 0.0
    assert derived.highest_qualification is QualificationLevel.CLASS_XII
