"""
Integration tests for the section engine.

Tests the complete scheduling pipeline from snapshot to adjusted schedule.
"""

import pytest
from src.section_engine import (
    AdvisoryAction,
    EngineConfig,
    InvalidInputError,
    ScheduleEntry,
    Section,
    Train,
    __engine_version__,
    build_schedule,
    compute_metrics,
    predict_congestion,
)


@pytest.fixture
def network():
    """A small mixed-traffic snapshot."""
    sections = [
        Section(id="SEC-01", name="Kalyan - Karjat", max_capacity=2, speed_limit=110,
                length=42000, throughput=12, average_delay=180,
                current_trains=["T-1", "T-2"]),
        Section(id="SEC-02", name="Karjat - Lonavala", max_capacity=3, speed_limit=60,
                length=28000, throughput=6, average_delay=420,
                current_trains=["T-3"]),
        Section(id="SEC-03", name="Lonavala - Pune", speed_limit=130, length=64000,
                throughput=15, current_trains=[]),
    ]
    trains = [
        Train(id="T-1", name="Mumbai Rajdhani", current_section="SEC-01",
              max_speed=130, delay=240, priority=3, passengers=1100),
        Train(id="T-2", name="Deccan Queen", current_section="SEC-01",
              max_speed=110, delay=600, priority=4, passengers=1400),
        Train(id="T-3", name="Goods 441", current_section="SEC-02",
              max_speed=75, delay=900, priority=1),
        Train(id="T-4", name="Pune Local", current_section="SEC-01",
              max_speed=100, delay=0, priority=2),
        Train(id="T-5", name="Vande Bharat", current_section="SEC-03",
              max_speed=160, delay=30, priority=5),
        Train(id="T-6", name="Light Engine", max_speed=90),
    ]
    return trains, sections


class TestBuildSchedule:
    """End-to-end schedule tests."""

    def test_engine_version(self):
        assert __engine_version__.startswith("SECT-CAP")

    def test_returns_entries(self, network):
        trains, sections = network
        schedule = build_schedule(trains, sections)
        assert all(isinstance(e, ScheduleEntry) for e in schedule)

    def test_allocation(self, network):
        """Capacity-2 section takes the two highest-scoring trains."""
        trains, sections = network
        schedule = build_schedule(trains, sections)
        # T-5 (7), T-1 (5), T-2 (4), T-3 (1); T-4 loses the race, T-6 has no section
        assert [e.train_id for e in schedule] == ["T-5", "T-1", "T-2", "T-3"]

    def test_speeds_bounded(self, network):
        trains, sections = network
        for entry in build_schedule(trains, sections):
            assert 20 <= entry.recommended_speed <= 150

    def test_confidence_set(self, network):
        trains, sections = network
        for entry in build_schedule(trains, sections):
            assert entry.confidence is not None
            assert 0 <= entry.confidence <= 0.95

    def test_inputs_unchanged(self, network):
        trains, sections = network
        before = ([t.model_dump() for t in trains], [s.model_dump() for s in sections])
        build_schedule(trains, sections)
        assert ([t.model_dump() for t in trains], [s.model_dump() for s in sections]) == before

    def test_empty_trains(self, network):
        _, sections = network
        assert build_schedule([], sections) == []

    def test_no_sections(self, network):
        trains, _ = network
        assert build_schedule(trains, []) == []

    def test_accepts_mappings(self):
        """Plain dicts are validated into models."""
        schedule = build_schedule(
            trains=[{"id": "T1", "name": "Express", "current_section": "A"}],
            sections=[{"id": "A", "name": "Main line", "max_capacity": 2}],
        )
        assert schedule[0].train_id == "T1"
        assert schedule[0].action == AdvisoryAction.PROCEED

    def test_premium_designations_configurable(self):
        """Without designations, premium names get no boost."""
        sections = [Section(id="A", max_capacity=1)]
        trains = [
            Train(id="P", name="Rajdhani", priority=3, current_section="A"),
            Train(id="Q", name="Intercity", priority=4, current_section="A"),
        ]
        assert build_schedule(trains, sections)[0].train_id == "P"
        config = EngineConfig(premium_designations=())
        assert build_schedule(trains, sections, config)[0].train_id == "Q"


class TestScenarios:
    """Documented behaviour scenarios."""

    def test_capacity_one_race(self):
        """Three trains race for a capacity-1 section; only priority 5 wins."""
        sections = [Section(id="A", max_capacity=1), Section(id="B", max_capacity=1)]
        trains = [
            Train(id=f"P{p}", priority=p, current_section="A")
            for p in (5, 3, 1)
        ]
        schedule = build_schedule(trains, sections)
        assert len(schedule) == 1
        assert schedule[0].train_id == "P5"
        assert schedule[0].section_id == "A"

    def test_full_section_slows_down(self):
        """Section at capacity: slow_down, speed * 0.8 clamped to limit."""
        sections = [Section(id="A", max_capacity=3, speed_limit=90,
                            current_trains=["T1", "X", "Y"])]
        trains = [Train(id="T1", max_speed=140, current_section="A")]
        entry = build_schedule(trains, sections)[0]
        assert entry.action == AdvisoryAction.SLOW_DOWN
        # 140 * 0.8 = 112 -> limit 90; system congestion 1.0 -> * 0.9
        assert entry.recommended_speed == pytest.approx(81)

    def test_delayed_train_speeds_up(self):
        """Delay 400 s on a 0.2-congested section: speed_up."""
        sections = [Section(id="A", max_capacity=5, current_trains=["T1"])]
        trains = [Train(id="T1", max_speed=100, delay=400, current_section="A")]
        entry = build_schedule(trains, sections)[0]
        assert entry.action == AdvisoryAction.SPEED_UP
        assert entry.recommended_speed == pytest.approx(110)

    def test_delay_then_congestion_adjustment(self):
        """Average delay 350 and congestion > 0.7: +15% then -10%."""
        sections = [Section(id="A", max_capacity=2, current_trains=["T1", "T2"])]
        trains = [
            Train(id="T1", max_speed=100, delay=350, priority=4, current_section="A"),
            Train(id="T2", max_speed=100, delay=350, priority=1, current_section="A"),
        ]
        schedule = build_schedule(trains, sections)
        by_id = {e.train_id: e for e in schedule}
        # section congestion 1.0 -> 80 km/h before the global pass
        assert by_id["T1"].recommended_speed == pytest.approx(80 * 1.15 * 0.9)
        assert by_id["T2"].recommended_speed == pytest.approx(80 * 0.9)
        assert by_id["T1"].confidence == pytest.approx(0.75)
        assert by_id["T2"].confidence == pytest.approx(0.70)


class TestInvalidInput:
    """Malformed snapshots fail fast."""

    def test_priority_out_of_range(self):
        with pytest.raises(InvalidInputError) as exc_info:
            build_schedule([{"id": "T1", "priority": 7}], [])
        assert "index 0" in exc_info.value.message
        assert exc_info.value.errors[0]["loc"] == ("priority",)

    def test_non_numeric_delay(self):
        with pytest.raises(InvalidInputError):
            build_schedule([{"id": "T1", "delay": "late"}], [])

    def test_nan_rejected(self):
        with pytest.raises(InvalidInputError):
            compute_metrics([{"id": "T1", "max_speed": float("nan")}], [])

    def test_negative_delay(self):
        with pytest.raises(InvalidInputError):
            compute_metrics([{"id": "T1", "delay": -5}], [])

    def test_non_numeric_capacity(self):
        with pytest.raises(InvalidInputError):
            predict_congestion([{"id": "A", "max_capacity": "many"}])

    def test_snapshot_must_be_list(self):
        with pytest.raises(InvalidInputError):
            build_schedule({"id": "T1"}, [])

    def test_is_value_error(self):
        """InvalidInputError can be handled as ValueError."""
        with pytest.raises(ValueError):
            build_schedule([{"id": ""}], [])

    def test_mutated_train_revalidated(self):
        """A model instance changed after construction is checked again."""
        train = Train(id="T1", current_section="A")
        train.delay = float("nan")
        with pytest.raises(InvalidInputError):
            build_schedule([train], [Section(id="A")])
        with pytest.raises(InvalidInputError):
            compute_metrics([train], [])

    def test_mutated_section_revalidated(self):
        section = Section(id="A")
        section.speed_limit = float("inf")
        with pytest.raises(InvalidInputError):
            predict_congestion([section])

    @pytest.mark.parametrize("field", ["delay", "priority", "max_speed", "passengers"])
    def test_boolean_train_field_rejected(self, field):
        """Booleans are not accepted as numbers."""
        with pytest.raises(InvalidInputError):
            compute_metrics([{"id": "T1", field: True}], [])

    @pytest.mark.parametrize("field", ["max_capacity", "speed_limit", "length",
                                       "throughput", "average_delay"])
    def test_boolean_section_field_rejected(self, field):
        with pytest.raises(InvalidInputError):
            compute_metrics([], [{"id": "A", field: True}])

    def test_numeric_strings_rejected(self):
        """Numbers must be sent as numbers."""
        with pytest.raises(InvalidInputError):
            compute_metrics([{"id": "T1", "delay": "120"}], [])

    def test_integer_speeds_accepted(self):
        """Whole numbers are fine for float fields."""
        metrics = compute_metrics([{"id": "T1", "delay": 120, "max_speed": 100}], [])
        assert metrics.average_delay == 120
