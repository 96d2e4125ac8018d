"""Unit tests for the sleep service"""
from datetime import timedelta

from dreamtrack.core.models.data_models import AppState, SleepForm, SleepRecord
from dreamtrack.core.models.output_models import QualityBand
from dreamtrack.core.services.sleep_service import SleepService, format_timestamp


class TestBuildRecord:
    """Test conversion of a form into the stored record"""

    def test_record_fields(self, service, sample_form, fixed_now):
        record = service.build_record(sample_form, fixed_now)

        assert record.bedtime == "23:00"
        assert record.wake_time == "07:00"
        assert record.restlessness == 2
        assert record.sleep_hours == 8.0
        assert record.quality == 80
        assert record.timestamp == "2026-10-19T08:00:00.000Z"

    def test_record_quality_is_not_the_score(self, service, fixed_now):
        """Test the stored quality depends on restlessness only"""
        form = SleepForm(bedtime="02:00", wake_time="06:00", restlessness=1)
        record = service.build_record(form, fixed_now)
        analysis = service.evaluate(record.sleep_hours, record.restlessness)

        assert record.quality == 90
        assert analysis.score == 45

    def test_format_timestamp(self, fixed_now):
        assert format_timestamp(fixed_now + timedelta(milliseconds=250)) == "2026-10-19T08:00:00.250Z"


class TestLogSleepEntry:
    """Test logging an entry against the application state"""

    def test_first_entry(self, service, sample_form, fixed_now):
        state = service.new_state()
        record, new_state = service.log_sleep_entry(sample_form, state, fixed_now)

        assert new_state.recent_records == [record]
        assert new_state.sleep_score == 80
        assert new_state.last_night_sleep == 8.0
        assert new_state.analysis.quality == QualityBand.GOOD
        assert new_state.analysis.insights == []

    def test_input_state_untouched(self, service, sample_form, fixed_now):
        state = service.new_state()
        service.log_sleep_entry(sample_form, state, fixed_now)

        assert state.recent_records == []
        assert state.sleep_score == 85
        assert state.last_night_sleep == 7.5
        assert state.analysis is None

    def test_default_state(self, service, sample_form, fixed_now):
        _, new_state = service.log_sleep_entry(sample_form, now=fixed_now)
        assert len(new_state.recent_records) == 1

    def test_history_excludes_new_entry(self, service, fixed_now):
        """Test the new night is compared with previous nights only"""
        previous = SleepRecord(
            bedtime="22:00", wake_time="07:00", restlessness=1,
            timestamp="2026-10-18T08:00:00.000Z", sleep_hours=9.0, quality=90
        )
        state = AppState(recent_records=[previous])
        form = SleepForm(bedtime="01:00", wake_time="07:00", restlessness=3)

        _, new_state = service.log_sleep_entry(form, state, fixed_now)

        assert new_state.analysis.insights == [
            "Your sleep duration is below your average",
            "You were more restless than usual",
        ]
        assert new_state.recent_records[1] == previous

    def test_history_window(self, service, sample_form, fixed_now):
        """Test only the seven newest records are kept, newest first"""
        state = service.new_state()
        for day in range(9):
            _, state = service.log_sleep_entry(sample_form, state, fixed_now + timedelta(days=day))

        assert len(state.recent_records) == 7
        assert state.recent_records[0].timestamp == "2026-10-27T08:00:00.000Z"
        assert state.recent_records[-1].timestamp == "2026-10-21T08:00:00.000Z"

    def test_configured_window(self, sample_form, fixed_now):
        service = SleepService({'history': {'window': 3}})
        state = service.new_state()
        for day in range(5):
            _, state = service.log_sleep_entry(sample_form, state, fixed_now + timedelta(days=day))

        assert len(state.recent_records) == 3

    def test_history_limited_to_window(self, service, fixed_now):
        """Test nights beyond the window do not count toward the averages"""
        def night(hours, days_ago):
            return SleepRecord(
                bedtime="23:00", wake_time="07:00", restlessness=2,
                timestamp=format_timestamp(fixed_now - timedelta(days=days_ago)),
                sleep_hours=hours, quality=80
            )

        records = [night(7.0, day) for day in range(1, 8)] + [night(12.0, day) for day in range(8, 13)]
        form = SleepForm(bedtime="00:30", wake_time="07:00", restlessness=2)

        _, new_state = service.log_sleep_entry(form, AppState(recent_records=records), fixed_now)

        # 6.5h is within 90% of the 7h weekly average
        assert new_state.analysis.insights == []
        assert len(new_state.recent_records) == 7

    def test_window_below_one_keeps_newest(self, sample_form, fixed_now):
        service = SleepService({'history': {'window': 0}})
        state = service.new_state()
        for day in range(3):
            _, state = service.log_sleep_entry(sample_form, state, fixed_now + timedelta(days=day))

        assert service.history_window == 1
        assert len(state.recent_records) == 1
        assert state.recent_records[0].timestamp == "2026-10-21T08:00:00.000Z"


class TestServiceHelpers:
    """Test tips and dashboard access through the service"""

    def test_tips(self, service):
        assert service.get_tips(85)[0].title == "Maintain Your Success"

    def test_dashboard(self, service, sample_records):
        summary = service.dashboard(AppState(recent_records=sample_records))
        assert summary.days_recorded == 3

    def test_configured_initial_state(self):
        service = SleepService({'app': {'initial_sleep_score': 70, 'initial_last_night_sleep': 6.0}})
        state = service.new_state()
        assert state.sleep_score == 70
        assert state.last_night_sleep == 6.0
