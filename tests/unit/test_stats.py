"""Tests for statistics: buckets, gender heuristic and the composite report."""

from collections import Counter

import pytest

from app.models.stats import NO_FACTION, UNKNOWN, age_bucket
from app.repositories.stats import STATS_QUERIES, StatsRepository
from app.services.stats import StatsService, infer_gender


class TestAgeBucket:
    @pytest.mark.parametrize(
        ("age", "label"),
        [
            (None, "unknown"),
            (0, "under 30"),
            (29, "under 30"),
            (30, "30-40"),
            (40, "30-40"),
            (41, "41-50"),
            (50, "41-50"),
            (51, "51-60"),
            (60, "51-60"),
            (61, "over 60"),
            (90, "over 60"),
        ],
    )
    def test_thresholds(self, age, label):
        assert age_bucket(age) == label


class TestGender:
    def test_female_honorific(self):
        assert infer_gender("Hj. Nurul Arifin") == "female"

    def test_male_honorific(self):
        assert infer_gender("H. Bambang") == "male"

    def test_female_tokens(self):
        assert infer_gender("Dewi Lestari") == "female"
        assert infer_gender("SRI Mulyani") == "female"

    def test_male_tokens(self):
        assert infer_gender("Abdul Kadir Karding") == "male"
        assert infer_gender("Said Abdullah") == "male"

    def test_female_checked_first(self):
        assert infer_gender("Muhammad Ani") == "female"

    def test_substring_not_word(self):
        # heuristic matches inside words too
        assert infer_gender("Daniel Johan") == "female"

    def test_unknown(self):
        assert infer_gender("Budi Santoso") == "unknown"
        assert infer_gender("") == "unknown"
        assert infer_gender(None) == "unknown"


class TestStatsReport:
    def test_total(self, stats_service):
        assert stats_service.get_stats().total == 8

    def test_factions_collapse_placeholders(self, stats_service):
        by_faction = stats_service.get_stats().by_faction
        assert by_faction[0].label == NO_FACTION
        assert by_faction[0].count == 3
        assert sum(f.count for f in by_faction) == 8
        assert [f.label for f in by_faction].count(NO_FACTION) == 1

    def test_provinces(self, stats_service):
        by_province = stats_service.get_stats().by_province
        assert [(p.label, p.count) for p in by_province[:2]] == [("Jawa Barat", 2), ("Jawa Tengah", 2)]
        assert len(by_province) == 5

    def test_positions_exclude_empty(self, stats_service):
        by_position = stats_service.get_stats().by_position
        assert by_position[0].label == "Anggota"
        assert by_position[0].count == 5
        assert "" not in [p.label for p in by_position]

    def test_age_buckets(self, stats_service):
        buckets = {b.label: b for b in stats_service.get_stats().by_age}
        assert buckets["30-40"].count == 2
        assert buckets["30-40"].avg_age == pytest.approx(37.5)
        assert buckets["41-50"].avg_age == pytest.approx(44.0)
        assert buckets[UNKNOWN].count == 1
        assert buckets[UNKNOWN].avg_age is None
        assert sum(b.count for b in buckets.values()) == 8

    def test_sql_buckets_match_pure_function(self, make_members):
        db = make_members(80)
        ages = [r[0] for r in db.execute("SELECT age FROM member").fetchall()]
        report = StatsService(StatsRepository(db)).get_stats()
        assert {b.label: b.count for b in report.by_age} == dict(Counter(age_bucket(a) for a in ages))

    def test_gender(self, stats_service):
        by_gender = {g.label: g.count for g in stats_service.get_stats().by_gender}
        assert by_gender == {"female": 2, "male": 1, "unknown": 5}

    def test_leadership(self, stats_service):
        leadership = [(item.label, item.count) for item in stats_service.get_stats().leadership]
        assert leadership == [("chair", 1), ("vice_chair", 1), ("member", 6)]

    def test_leadership_hundred_members(self, make_members):
        service = StatsService(StatsRepository(make_members(100, chairs=2, vice_chairs=3)))
        report = service.get_stats()
        counts = {item.label: item.count for item in report.leadership}
        assert counts == {"chair": 2, "vice_chair": 3, "member": 95}
        assert sum(counts.values()) == report.total

    def test_age_summary(self, stats_service):
        age = stats_service.get_stats().age
        assert age.min_age == 29
        assert age.max_age == 61
        assert age.avg_age == pytest.approx(307 / 7)

    def test_recent(self, stats_service):
        recent = stats_service.get_stats().recent
        assert [r.name for r in recent] == [
            "Bambang Wuryanto",
            "Kartono",
            "Dewi Lestari",
            'Yohanes "Joe" Tan',
            "Rizky Pratama",
        ]
        assert recent[0].faction == "Fraksi Ahmad Dahlan"

    def test_empty_table(self, db):
        report = StatsService(StatsRepository(db)).get_stats()
        assert report.total == 0
        assert report.by_faction == []
        assert report.age.avg_age is None
        assert [(i.label, i.count) for i in report.leadership] == [("chair", 0), ("vice_chair", 0), ("member", 0)]


class TestPartialFailure:
    def test_province_failure_keeps_other_sections(self, stats_repo, stats_service):
        healthy = stats_service.get_stats()
        stats_repo.queries = {**STATS_QUERIES, "by_province": "SELECT province FROM missing_table"}

        report = stats_service.get_stats()
        assert report.by_province == []
        assert healthy.by_province != []

        for section in ("total", "by_faction", "by_position", "by_age", "by_gender", "leadership", "age", "recent"):
            assert getattr(report, section) == getattr(healthy, section)

    def test_scalar_sections_degrade_to_none(self, stats_repo, stats_service):
        stats_repo.queries = {
            **STATS_QUERIES,
            "total": "SELECT COUNT(*) FROM missing_table",
            "age": "SELECT broken syntax FROM",
        }
        report = stats_service.get_stats()
        assert report.total is None
        assert report.age is None
        assert report.by_faction != []

    def test_every_section_settles(self, stats_repo):
        stats_repo.queries = {key: "SELECT * FROM missing_table" for key in STATS_QUERIES}
        sections = stats_repo.get_sections()
        assert set(sections) == set(STATS_QUERIES)
        assert all(rows == [] for rows in sections.values())
