"""Tests for weekly session distribution across domains and days."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable

import pytest

from periodization_engine.identity import CounterIdentitySource
from periodization_engine.models.config import DomainConfig, MesocycleConfig
from periodization_engine.models.enums import DomainPriority, TrainingDomain, WeekDay
from periodization_engine.scheduling.weekly_distribution import (
    SESSION_LABELS,
    distribute_sessions,
    generate_week_template,
)

MON_WED_FRI = (WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY)

STANDARD_DOMAINS = (
    DomainConfig(TrainingDomain.STRENGTH, DomainPriority.PRIMARY),
    DomainConfig(TrainingDomain.RUCKING, DomainPriority.SECONDARY),
    DomainConfig(TrainingDomain.CARDIO, DomainPriority.MAINTENANCE),
)


def _distribute(days, per_day, domains=STANDARD_DOMAINS):
    return distribute_sessions(domains, days, per_day, 60, CounterIdentitySource())


class TestThreeDaysTwoPerDay:
    """Seven sessions requested, six slots available."""

    def test_layout(self) -> None:
        sessions = _distribute(MON_WED_FRI, 2)
        assert [(s.day, s.session_type, s.order) for s in sessions] == [
            (WeekDay.MONDAY, "Upper Push", 1),
            (WeekDay.MONDAY, "Full Body", 2),
            (WeekDay.WEDNESDAY, "Lower", 1),
            (WeekDay.WEDNESDAY, "Endurance Ruck", 2),
            (WeekDay.FRIDAY, "Upper Pull", 1),
            (WeekDay.FRIDAY, "Heavy Ruck", 2),
        ]

    def test_day_cap_respected(self) -> None:
        counts = Counter(s.day for s in _distribute(MON_WED_FRI, 2))
        assert max(counts.values()) <= 2

    def test_lowest_priority_dropped_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            sessions = _distribute(MON_WED_FRI, 2)
        domains = Counter(s.domain for s in sessions)
        assert domains[TrainingDomain.STRENGTH] == 4
        assert domains[TrainingDomain.RUCKING] == 2
        assert domains[TrainingDomain.CARDIO] == 0
        assert "Dropped 1 of 1 CARDIO sessions" in caplog.text

    def test_ids_in_placement_order(self) -> None:
        sessions = _distribute(MON_WED_FRI, 2)
        by_type = {s.session_type: s.id for s in sessions}
        assert by_type["Upper Push"] == "session_1"
        assert by_type["Full Body"] == "session_4"
        assert by_type["Heavy Ruck"] == "session_6"


class TestSpacing:
    def test_primary_spread_across_week(self) -> None:
        days = (WeekDay.MONDAY, WeekDay.TUESDAY, WeekDay.THURSDAY,
                WeekDay.FRIDAY, WeekDay.SATURDAY)
        domains = (DomainConfig(TrainingDomain.STRENGTH, DomainPriority.SECONDARY),)
        sessions = _distribute(days, 1, domains)
        assert [s.day for s in sessions] == [WeekDay.MONDAY, WeekDay.THURSDAY]

    def test_labels_cycle(self) -> None:
        days = tuple(WeekDay)
        domains = (DomainConfig(TrainingDomain.CARDIO, DomainPriority.PRIMARY),)
        sessions = _distribute(days, 1, domains)
        labels = [label for label, _ in SESSION_LABELS[TrainingDomain.CARDIO]]
        assert sorted(s.session_type for s in sessions) == sorted(labels)

    def test_priority_not_declaration_order(self) -> None:
        domains = (
            DomainConfig(TrainingDomain.CARDIO, DomainPriority.MAINTENANCE),
            DomainConfig(TrainingDomain.RUCKING, DomainPriority.PRIMARY),
        )
        sessions = distribute_sessions(domains, MON_WED_FRI, 1, 45, CounterIdentitySource())
        rucking = [s for s in sessions if s.domain == TrainingDomain.RUCKING]
        cardio = [s for s in sessions if s.domain == TrainingDomain.CARDIO]
        assert len(rucking) == 3
        assert cardio == []
        assert all(s.estimated_duration_min == 45 for s in sessions)

    def test_duplicate_days_ignored(self) -> None:
        days = (WeekDay.MONDAY, WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY)
        assert len(_distribute(days, 1)) == 3


class TestInvariants:
    @pytest.mark.parametrize("per_day", [1, 2, 3])
    @pytest.mark.parametrize(
        "days",
        [
            MON_WED_FRI,
            (WeekDay.MONDAY, WeekDay.TUESDAY, WeekDay.THURSDAY, WeekDay.SATURDAY),
            tuple(WeekDay),
        ],
    )
    def test_cap_and_completeness(self, days: tuple, per_day: int) -> None:
        sessions = _distribute(days, per_day)
        counts = Counter(s.day for s in sessions)
        assert max(counts.values()) <= per_day
        assert set(counts) <= set(days)
        requested = sum(d.sessions_per_week for d in STANDARD_DOMAINS)
        if requested <= len(days) * per_day:
            assert len(sessions) == requested
            assert len({s.id for s in sessions}) == requested

    @pytest.mark.parametrize("days", [MON_WED_FRI, tuple(WeekDay)])
    def test_sorted_by_day_then_order(self, days: tuple) -> None:
        sessions = _distribute(days, 3)
        keys = [(s.day, s.order) for s in sessions]
        assert keys == sorted(keys)

    def test_orders_are_dense_per_day(self) -> None:
        sessions = _distribute(MON_WED_FRI, 3)
        for day in MON_WED_FRI:
            orders = [s.order for s in sessions if s.day == day]
            assert orders == list(range(1, len(orders) + 1))

    def test_no_days(self) -> None:
        assert _distribute((), 2) == []


class TestWeekTemplate:
    def test_from_config(
        self,
        make_config: Callable[..., MesocycleConfig],
        id_source: CounterIdentitySource,
    ) -> None:
        config = make_config(available_days=MON_WED_FRI, max_sessions_per_day=3,
                             preferred_session_duration_min=45.0)
        template = generate_week_template(config, id_source)
        assert template.total_sessions == 7
        assert template.total_hours == pytest.approx(5.25)
        assert template.domain_breakdown == {
            TrainingDomain.STRENGTH: 4,
            TrainingDomain.RUCKING: 2,
            TrainingDomain.CARDIO: 1,
        }
        assert len(template.sessions_for_day(WeekDay.MONDAY)) >= 1
        assert template.sessions_for_day(WeekDay.SUNDAY) == ()

    def test_breakdown_lists_unscheduled_domains(
        self,
        make_config: Callable[..., MesocycleConfig],
        id_source: CounterIdentitySource,
    ) -> None:
        config = make_config(available_days=MON_WED_FRI, max_sessions_per_day=2)
        breakdown = generate_week_template(config, id_source).domain_breakdown
        assert breakdown[TrainingDomain.CARDIO] == 0
