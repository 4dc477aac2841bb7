"""
tests/clock/test_hour_of_day.py

Covers:
  - Factories: of(), of_am_pm(), from_temporal()
  - Derived views (AM/PM, hour of AM/PM, clock hours)
  - Field access through the TemporalAccessor protocol
  - Adjusting time, datetime and datetime64 values
  - Ordering, equality, hashing, text form and pickling
"""

import pickle
from datetime import date, datetime, time, timedelta

import numpy as np
import pytest

from timeextra import MissingArgumentError, RangeError, UnsupportedFieldError
from timeextra.clock import AmPm, HourOfDay
from timeextra.temporal import ChronoField, TemporalAccessor, TemporalAdjuster

HOURS = range(24)


# ── Helpers ───────────────────────────────────────────────────────────────────

class _Accessor:
    """Minimal TemporalAccessor exposing a single field."""

    def __init__(self, field, value):
        self._field = field
        self._value = value

    def is_supported(self, field):
        return field is self._field

    def get(self, field):
        return self._value


# ── Factories ─────────────────────────────────────────────────────────────────

class TestFactories:

    def test_of_every_hour(self):
        for i in HOURS:
            test = HourOfDay.of(i)
            assert test.value == i
            assert HourOfDay.of(i) == test

    def test_of_is_cached(self):
        assert HourOfDay.of(5) is HourOfDay.of(5)

    def test_of_accepts_numpy_int(self):
        assert HourOfDay.of(np.int64(7)).value == 7

    @pytest.mark.parametrize("hour", [-1, 24, 100])
    def test_of_out_of_range_raises(self, hour):
        with pytest.raises(RangeError, match="HourOfDay"):
            HourOfDay.of(hour)

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            HourOfDay.of(24)

    def test_of_none_raises(self):
        with pytest.raises(MissingArgumentError):
            HourOfDay.of(None)

    def test_of_float_raises(self):
        with pytest.raises(TypeError):
            HourOfDay.of(3.0)

    def test_of_am_pm_every_hour(self):
        for i in HOURS:
            test = HourOfDay.of_am_pm(AmPm.AM if i < 12 else AmPm.PM, i % 12)
            assert test.value == i
            assert test == HourOfDay.of(i)

    @pytest.mark.parametrize("hour", [-1, 12])
    def test_of_am_pm_out_of_range_raises(self, hour):
        with pytest.raises(RangeError):
            HourOfDay.of_am_pm(AmPm.AM, hour)

    def test_of_am_pm_none_raises(self):
        with pytest.raises(MissingArgumentError):
            HourOfDay.of_am_pm(None, 1)

    def test_from_time(self):
        t = time(0, 20)
        for i in HOURS:
            assert HourOfDay.from_temporal(t).value == i
            t = (datetime.combine(date.min, t) + timedelta(hours=1)).time()

    def test_from_datetime(self):
        assert HourOfDay.from_temporal(datetime(2012, 3, 2, 18, 5)) == HourOfDay.of(18)

    def test_from_hour_of_day(self):
        h = HourOfDay.of(9)
        assert HourOfDay.from_temporal(h) is h

    def test_from_accessor(self):
        source = _Accessor(ChronoField.HOUR_OF_DAY, 13)
        assert HourOfDay.from_temporal(source) == HourOfDay.of(13)

    def test_from_accessor_without_hour_raises(self):
        source = _Accessor(ChronoField.DAY_OF_WEEK, 3)
        with pytest.raises(UnsupportedFieldError):
            HourOfDay.from_temporal(source)

    def test_from_datetime64(self):
        assert HourOfDay.from_temporal(np.datetime64("2012-03-02T21:15:30")).value == 21

    def test_from_datetime64_before_epoch(self):
        assert HourOfDay.from_temporal(np.datetime64("1969-12-31T23:30")).value == 23

    def test_from_date_raises(self):
        with pytest.raises(UnsupportedFieldError):
            HourOfDay.from_temporal(date(2012, 3, 2))

    def test_from_day_resolution_datetime64_raises(self):
        with pytest.raises(UnsupportedFieldError):
            HourOfDay.from_temporal(np.datetime64("2012-03-02"))

    def test_from_datetime64_array_raises(self):
        stamps = np.array(["2012-03-02T01:00"], dtype="datetime64[m]")
        with pytest.raises(UnsupportedFieldError):
            HourOfDay.from_temporal(stamps)

    def test_from_none_raises(self):
        with pytest.raises(MissingArgumentError):
            HourOfDay.from_temporal(None)


# ── Views ─────────────────────────────────────────────────────────────────────

class TestViews:

    def test_field(self):
        assert HourOfDay.of(1).field is ChronoField.HOUR_OF_DAY

    def test_am_pm(self):
        for i in HOURS:
            assert HourOfDay.of(i).am_pm is (AmPm.AM if i < 12 else AmPm.PM)

    def test_hour_of_am_pm(self):
        for i in HOURS:
            assert HourOfDay.of(i).hour_of_am_pm == i % 12

    def test_clock_hour_of_am_pm(self):
        for i in HOURS:
            assert HourOfDay.of(i).clock_hour_of_am_pm == (12 if i % 12 == 0 else i % 12)

    def test_clock_hour_of_day(self):
        for i in HOURS:
            assert HourOfDay.of(i).clock_hour_of_day == (24 if i == 0 else i)

    def test_is_temporal_accessor(self):
        assert isinstance(HourOfDay.of(1), TemporalAccessor)

    def test_get_matches_views(self):
        for i in HOURS:
            h = HourOfDay.of(i)
            assert h.get(ChronoField.HOUR_OF_DAY) == h.value
            assert h.get(ChronoField.HOUR_OF_AMPM) == h.hour_of_am_pm
            assert h.get(ChronoField.CLOCK_HOUR_OF_AMPM) == h.clock_hour_of_am_pm
            assert h.get(ChronoField.CLOCK_HOUR_OF_DAY) == h.clock_hour_of_day
            assert h.get(ChronoField.AMPM_OF_DAY) == h.am_pm.value

    def test_day_of_week_unsupported(self):
        h = HourOfDay.of(1)
        assert not h.is_supported(ChronoField.DAY_OF_WEEK)
        with pytest.raises(UnsupportedFieldError):
            h.get(ChronoField.DAY_OF_WEEK)


# ── Adjustment ────────────────────────────────────────────────────────────────

class TestAdjustment:

    def test_adjust_time(self):
        base = time(0, 20)
        for i in HOURS:
            assert HourOfDay.of(i).do_with_adjustment(base) == time(i, 20)

    def test_adjust_keeps_seconds_and_micros(self):
        base = time(4, 59, 58, 123456)
        assert HourOfDay.of(22).adjust_into(base) == time(22, 59, 58, 123456)

    def test_adjust_datetime_keeps_date(self):
        base = datetime(2012, 3, 2, 8, 15)
        assert HourOfDay.of(19).adjust_into(base) == datetime(2012, 3, 2, 19, 15)

    def test_adjust_datetime64_array(self):
        stamps = np.array(
            ["2012-03-02T08:15:07", "1969-12-31T23:59:59"], dtype="datetime64[s]"
        )
        result = HourOfDay.of(3).adjust_into(stamps)
        expected = np.array(
            ["2012-03-02T03:15:07", "1969-12-31T03:59:59"], dtype="datetime64[s]"
        )
        np.testing.assert_array_equal(result, expected)

    def test_is_temporal_adjuster(self):
        assert isinstance(HourOfDay.of(1), TemporalAdjuster)

    def test_adjust_none_raises(self):
        with pytest.raises(MissingArgumentError):
            HourOfDay.of(1).do_with_adjustment(None)

    def test_adjust_date_raises(self):
        with pytest.raises(UnsupportedFieldError):
            HourOfDay.of(1).do_with_adjustment(date(2012, 3, 2))

    def test_adjust_day_resolution_datetime64_raises(self):
        with pytest.raises(UnsupportedFieldError):
            HourOfDay.of(1).do_with_adjustment(np.datetime64("2012-03-02"))


# ── Comparison / equality ─────────────────────────────────────────────────────

class TestComparison:

    def test_compare_to(self):
        for i in HOURS:
            a = HourOfDay.of(i)
            for j in HOURS:
                b = HourOfDay.of(j)
                if i < j:
                    assert a.compare_to(b) == -1
                    assert b.compare_to(a) == 1
                    assert a < b and b > a
                elif i > j:
                    assert a.compare_to(b) == 1
                    assert b.compare_to(a) == -1
                    assert a > b and b < a
                else:
                    assert a.compare_to(b) == 0
                    assert b.compare_to(a) == 0
                    assert a <= b and a >= b

    def test_sorting(self):
        hours = [HourOfDay.of(i) for i in (17, 3, 23, 0, 12)]
        assert [h.value for h in sorted(hours)] == [0, 3, 12, 17, 23]

    def test_compare_to_none_raises(self):
        with pytest.raises(MissingArgumentError):
            HourOfDay.of(1).compare_to(None)

    def test_less_than_none_raises(self):
        with pytest.raises(MissingArgumentError):
            HourOfDay.of(1) < None

    def test_compare_to_other_type_raises(self):
        with pytest.raises(TypeError):
            HourOfDay.of(1).compare_to(1)

    def test_equals_and_hash(self):
        for i in HOURS:
            a = HourOfDay.of(i)
            for j in HOURS:
                b = HourOfDay.of(j)
                assert (a == b) == (i == j)
                assert (hash(a) == hash(b)) == (i == j)

    def test_equals_direct_instance(self):
        assert HourOfDay(4) == HourOfDay.of(4)

    def test_not_equal_to_none(self):
        assert HourOfDay.of(1) != None  # noqa: E711

    def test_not_equal_to_other_type(self):
        assert HourOfDay.of(1) != "Incorrect type"
        assert HourOfDay.of(1) != 1


# ── Text and persistence ──────────────────────────────────────────────────────

class TestTextAndPickle:

    def test_str(self):
        for i in HOURS:
            assert str(HourOfDay.of(i)) == f"HourOfDay={i}"

    def test_repr(self):
        assert repr(HourOfDay.of(7)) == "HourOfDay(7)"

    def test_pickle_round_trip(self):
        for i in HOURS:
            original = HourOfDay.of(i)
            restored = pickle.loads(pickle.dumps(original))
            assert restored == original

    def test_pickle_uncached_instance(self):
        original = HourOfDay(11)
        assert pickle.loads(pickle.dumps(original)) == original

    def test_immutable(self):
        h = HourOfDay.of(1)
        with pytest.raises(AttributeError):
            h.value = 2
        with pytest.raises(AttributeError):
            h.other = 2
