"""
Tests for the service details models.

Tests cover:
- Lateness classification
- Immutability
- JSON serialization of a parsed service
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from models import Lateness, LatenessStatus, Location, ServiceTime, TimeRecord
from service_documents import service_document
from service_parser import parse_service_details

BST = timezone(timedelta(hours=1))
SCHEDULED = datetime(2024, 6, 7, 17, 30, tzinfo=BST)


def record(offset: timedelta) -> TimeRecord:
    return TimeRecord(scheduled=SCHEDULED, effective=SCHEDULED + offset)


class TestLateness:
    """Tests for TimeRecord.lateness."""

    def test_no_effective_time(self):
        assert TimeRecord(scheduled=SCHEDULED).lateness() is None

    def test_exactly_on_time(self):
        lateness = record(timedelta(0)).lateness()
        assert lateness == Lateness(status=LatenessStatus.ON_TIME, delta=timedelta(0))

    @pytest.mark.parametrize('offset', [timedelta(minutes=1), timedelta(minutes=-1), timedelta(seconds=30)])
    def test_within_a_minute_is_on_time(self, offset):
        lateness = record(offset).lateness()
        assert lateness.status is LatenessStatus.ON_TIME
        assert lateness.delta == offset

    def test_late(self):
        lateness = record(timedelta(minutes=5)).lateness()
        assert lateness.status is LatenessStatus.LATE
        assert lateness.delta == timedelta(minutes=5)

    def test_early(self):
        lateness = record(timedelta(minutes=-3)).lateness()
        assert lateness.status is LatenessStatus.EARLY
        assert lateness.delta == timedelta(minutes=-3)

    def test_across_offsets(self):
        effective = datetime(2024, 6, 7, 16, 40, tzinfo=timezone.utc)
        lateness = TimeRecord(scheduled=SCHEDULED, effective=effective).lateness()
        assert lateness.status is LatenessStatus.LATE
        assert lateness.delta == timedelta(minutes=10)


class TestServiceTime:
    """Tests for ServiceTime accessors."""

    def test_empty(self):
        time = ServiceTime()
        assert time.scheduled_arrival is None
        assert time.scheduled_departure is None
        assert time.arrival_time is None
        assert time.departure_time is None

    def test_accessors(self):
        time = ServiceTime(departure=record(timedelta(minutes=2)))
        assert time.scheduled_departure == SCHEDULED
        assert time.departure_time == SCHEDULED + timedelta(minutes=2)
        assert time.arrival_time is None


class TestImmutability:
    """Tests that parsed models are read-only."""

    def test_location_is_frozen(self):
        location = Location(name='Perth', crs='PTH')
        with pytest.raises(ValidationError):
            location.name = 'Dundee'

    def test_service_is_frozen(self):
        details = parse_service_details(service_document())
        with pytest.raises(ValidationError):
            details.rid = 'other'
        assert isinstance(details.locations, tuple)


class TestSerialization:
    """Tests for JSON output of a parsed service."""

    def test_dump_json(self):
        details = parse_service_details(service_document())
        data = json.loads(details.model_dump_json())
        assert data['rid'] == '202406078712345'
        assert data['sdd'] == '2024-06-07'
        assert data['locations'][0]['activities'] == ['TB']
        assert data['locations'][0]['associations'][0]['category'] == 'divide'
        assert data['locations'][1]['time']['arrival']['forecast_type'] == 'Forecast'
