from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from shared_time import (
    AvailabilityRules,
    CalendarEvent,
    InvalidHorizonError,
    SlotClassification,
    compute_availability,
)
from shared_time.api.models import AvailabilityPayload
from shared_time.engine import is_party_busy

from .helpers import MONDAY, SATURDAY, TUESDAY, at, event


def test_weekend_evening_is_a_potential_date():
    result = compute_availability(at(SATURDAY, 19), [], [], horizon_days=1)

    first = result.slots[0]
    assert (first.start, first.end) == (at(SATURDAY, 19), at(SATURDAY, 20))
    assert first.classification is SlotClassification.POTENTIAL_DATE
    assert first.confidence == 0.7
    assert list(result.suggested_times) == [at(SATURDAY, 19), at(SATURDAY, 20), at(SATURDAY, 21)]
    # Saturday 19-21 plus Sunday 18:00 are potential dates; the rest of the day is free.
    assert result.overlap_free_hours == 20


def test_one_party_busy_marks_slot_busy():
    party_a = [event(at(MONDAY, 9), at(MONDAY, 10))]
    result = compute_availability(at(MONDAY, 8), party_a, [], horizon_days=1)

    by_start = {scored.start: scored for scored in result.slots}
    assert by_start[at(MONDAY, 9)].classification is SlotClassification.BUSY
    assert by_start[at(MONDAY, 9)].confidence == 0.8
    assert by_start[at(MONDAY, 8)].classification is SlotClassification.FREE
    assert by_start[at(MONDAY, 10)].classification is SlotClassification.FREE


def test_both_parties_busy_is_overlap_and_never_suggested():
    shared = [event(at(TUESDAY, 14), at(TUESDAY, 15))]
    result = compute_availability(at(TUESDAY, 0), shared, list(shared), horizon_days=1)

    by_start = {scored.start: scored for scored in result.slots}
    assert by_start[at(TUESDAY, 14)].classification is SlotClassification.OVERLAP
    assert by_start[at(TUESDAY, 14)].confidence == 0.95
    assert at(TUESDAY, 14) not in result.suggested_times
    assert list(result.suggested_times) == [at(TUESDAY, 15), at(TUESDAY, 16)]


def test_zero_horizon_yields_empty_result():
    now = at(MONDAY, 12)
    result = compute_availability(now, [event(at(MONDAY, 13), at(MONDAY, 14))], [], horizon_days=0)

    assert result.slots == ()
    assert result.suggested_times == ()
    assert result.overlap_free_hours == 0
    assert result.computed_at == now


def test_malformed_event_is_same_as_omitted():
    now = at(MONDAY, 8)
    valid = [event(at(MONDAY, 15), at(MONDAY, 17))]
    malformed = CalendarEvent(start=at(MONDAY, 14), end=at(MONDAY, 14))

    with_bad = compute_availability(now, valid + [malformed], [], horizon_days=2)
    without = compute_availability(now, valid, [], horizon_days=2)

    assert with_bad == without


def test_one_bad_event_does_not_deny_all_availability():
    inverted = CalendarEvent(start=at(MONDAY, 23), end=at(MONDAY, 1))
    result = compute_availability(at(MONDAY, 0), [inverted], [], horizon_days=1)
    assert all(scored.classification is not SlotClassification.BUSY for scored in result.slots)


def test_invalid_horizon_fails_before_any_work():
    with pytest.raises(InvalidHorizonError):
        compute_availability(at(MONDAY, 0), [], [], horizon_days=-1)


def test_refresh_hint_and_timestamps():
    now = at(MONDAY, 10, 42)
    result = compute_availability(now, [], [], horizon_days=1)

    assert result.computed_at == now
    assert result.next_refresh_at == now + timedelta(minutes=5)
    assert result.slots[0].start == at(MONDAY, 10)


def test_free_count_counts_free_slots_only():
    # Monday 00:00 for one day: 3 afternoon potential dates, 1 busy hour.
    party_a = [event(at(MONDAY, 2), at(MONDAY, 3))]
    result = compute_availability(at(MONDAY, 0), party_a, [], horizon_days=1)

    assert len(result.slots_by(SlotClassification.POTENTIAL_DATE)) == 3
    assert len(result.slots_by(SlotClassification.BUSY)) == 1
    assert result.overlap_free_hours == 20


def test_rules_are_injectable():
    rules = AvailabilityRules(potential_date_confidence=0.5, refresh_interval=timedelta(minutes=1))
    now = at(SATURDAY, 19)
    result = compute_availability(now, [], [], horizon_days=1, rules=rules)

    assert result.suggested_times == ()
    assert result.slots[0].confidence == 0.5
    assert result.next_refresh_at == now + timedelta(minutes=1)


def test_identical_inputs_give_identical_results():
    now = at(MONDAY, 7, 30)
    party_a = [event(at(MONDAY, 9), at(MONDAY, 12)), event(at(TUESDAY, 14), at(TUESDAY, 18))]
    party_b = [event(at(MONDAY, 11), at(MONDAY, 15))]

    first = compute_availability(now, party_a, party_b)
    second = compute_availability(now, list(party_a), list(party_b))

    assert first == second
    assert AvailabilityPayload.from_domain(first) == AvailabilityPayload.from_domain(second)


def _random_events(rng: random.Random, count: int):
    events = []
    for _ in range(count):
        start = at(MONDAY, 0) + timedelta(minutes=rng.randrange(0, 7 * 24 * 60))
        events.append(CalendarEvent(start=start, end=start + timedelta(minutes=rng.randrange(0, 300))))
    return events


@pytest.mark.parametrize("seed", range(5))
def test_classification_matches_busy_state(seed):
    rng = random.Random(seed)
    party_a = _random_events(rng, 12)
    party_b = _random_events(rng, 12)
    result = compute_availability(at(MONDAY, 0), party_a, party_b)

    valid_a = [item for item in party_a if item.is_well_formed]
    valid_b = [item for item in party_b if item.is_well_formed]
    for scored in result.slots:
        a_busy = is_party_busy(scored.slot, valid_a)
        b_busy = is_party_busy(scored.slot, valid_b)
        if scored.classification is SlotClassification.OVERLAP:
            assert a_busy and b_busy
        elif scored.classification is SlotClassification.BUSY:
            assert a_busy != b_busy
        else:
            assert not a_busy and not b_busy

    assert len(result.suggested_times) <= 3
    eligible = {
        scored.start
        for scored in result.slots
        if scored.classification is SlotClassification.POTENTIAL_DATE and scored.confidence > 0.6
    }
    assert set(result.suggested_times) <= eligible


def test_payload_uses_wire_keys():
    result = compute_availability(at(SATURDAY, 19), [], [], horizon_days=1)
    record = AvailabilityPayload.from_domain(result).model_dump(by_alias=True)

    assert set(record) == {"overlapFreeHours", "suggestedTimes", "slots", "computedAt", "nextRefreshAt"}
    assert record["slots"][0] == {
        "start": "2026-10-17T19:00:00",
        "end": "2026-10-17T20:00:00",
        "classification": "potential_date",
        "confidence": 0.7,
    }
    assert record["suggestedTimes"][0] == "2026-10-17T19:00:00"


def test_mixed_awareness_event_does_not_abort_computation():
    now = datetime(2026, 10, 19, 8, tzinfo=timezone.utc)
    mixed = CalendarEvent(start=datetime(2026, 10, 19, 9, tzinfo=timezone.utc), end=at(MONDAY, 10))
    busy = CalendarEvent(
        start=datetime(2026, 10, 19, 12, tzinfo=timezone.utc),
        end=datetime(2026, 10, 19, 13, tzinfo=timezone.utc),
    )

    result = compute_availability(now, [mixed, busy], [], horizon_days=1)

    assert result == compute_availability(now, [busy], [], horizon_days=1)
    assert len(result.slots_by(SlotClassification.BUSY)) == 1


def test_suggestions_never_exceed_three_over_a_week():
    result = compute_availability(at(MONDAY, 0), [], [])
    assert len(result.suggested_times) == 3
