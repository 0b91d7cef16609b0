import unittest

from dashboard.normalize import sort_blood_tests, sort_checkins
from dashboard.summary import build_kpi_snapshot, compose_summary, delta, format_delta
from healthdata.models import Baseline, BloodTest, DailyCheckin, HealthDocument


class TestDelta(unittest.TestCase):
    def test_defined_only_for_numbers(self):
        self.assertEqual(delta(78, 80), -2)
        self.assertEqual(delta("81.5", 80), 1.5)
        self.assertIsNone(delta(None, 80))
        self.assertIsNone(delta(78, "abc"))
        self.assertIsNone(delta("", 80))

    def test_format_delta(self):
        self.assertEqual(format_delta(0), "0")
        self.assertEqual(format_delta(0.0), "0")
        self.assertEqual(format_delta(-0.001), "0")
        self.assertEqual(format_delta(2), "+2")
        self.assertEqual(format_delta(-3), "-3")
        self.assertEqual(format_delta(-1.2), "-1.2")
        self.assertEqual(format_delta(1.005), "+1.01")
        self.assertEqual(format_delta(0.1 + 0.2), "+0.3")
        self.assertEqual(format_delta(20.0), "+20")
        self.assertEqual(format_delta(None), "—")


class TestKpiSnapshot(unittest.TestCase):
    def test_latest_entry_wins(self):
        checkins = sort_checkins(
            [
                DailyCheckin(date="2024-02-01", weight_kg=78.0, steps=9500.0),
                DailyCheckin(date="2024-01-01", weight_kg=80.0, body_fat_pct=20.0, resting_hr=60.0),
            ]
        )
        kpis = build_kpi_snapshot(checkins)
        self.assertEqual(kpis.weight, "78")
        self.assertEqual(kpis.body_fat, "--")
        self.assertEqual(kpis.resting_hr, "--")
        self.assertEqual(kpis.steps, "9500")

    def test_empty_sequence_is_all_placeholders(self):
        kpis = build_kpi_snapshot(())
        self.assertEqual((kpis.weight, kpis.body_fat, kpis.resting_hr, kpis.steps), ("--",) * 4)


class TestComposeSummary(unittest.TestCase):
    def test_full_narrative(self):
        checkins = sort_checkins(
            [
                DailyCheckin(date="2024-01-01", weight_kg=80.0, body_fat_pct=22.5, resting_hr=64.0),
                DailyCheckin(
                    date="2024-02-01",
                    weight_kg=78.0,
                    body_fat_pct=21.3,
                    resting_hr=64.0,
                    notes="Felt good",
                ),
            ]
        )
        blood = sort_blood_tests(
            [BloodTest(date="2024-02-01", name="LDL", value=160.0, unit="mg/dL", range_high=130.0)]
        )
        document = HealthDocument(
            daily_checkins=checkins, blood_tests=blood, baseline=Baseline(date="2023-12-15")
        )
        text = compose_summary(document, checkins, blood)
        self.assertEqual(
            text,
            "Baseline date: 2023-12-15. Latest check-in: 2024-02-01. "
            "Weight: 78 kg (-2 since first entry). "
            "Body fat: 21.3% (-1.2 since first entry). "
            "Resting HR: 64 (0 since first entry). "
            "Notes: Felt good "
            "Lab flags: LDL: 160 mg/dL (High)",
        )

    def test_empty_document(self):
        text = compose_summary(HealthDocument(), (), ())
        self.assertIn("Baseline date: —.", text)
        self.assertIn("Latest check-in: —.", text)
        self.assertIn("Weight: -- kg (— since first entry).", text)
        self.assertIn("Notes: —", text)
        self.assertIn("Lab flags: No out-of-range labs recorded in the latest entries.", text)

    def test_baseline_falls_back_to_first_checkin(self):
        checkins = (DailyCheckin(date="2024-01-01"), DailyCheckin(date="2024-03-01"))
        text = compose_summary(HealthDocument(daily_checkins=checkins), checkins, ())
        self.assertTrue(text.startswith("Baseline date: 2024-01-01. Latest check-in: 2024-03-01."))


if __name__ == "__main__":
    unittest.main()
