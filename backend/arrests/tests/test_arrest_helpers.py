"""
Unit tests for the arrest registration helpers: ID generation, date
normalisation and the background lookup-index build.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from unittest import mock

from django.db import DatabaseError, connection
from django.test import SimpleTestCase, TransactionTestCase, override_settings

from arrests import services
from arrests.services import (
    LOOKUP_INDEXES,
    ensure_lookup_indexes,
    generate_id,
    normalize_arrest_date,
    schedule_lookup_index_build,
)
from core.domain.exceptions import DomainError


class TestGenerateId(SimpleTestCase):

    def test_first_id(self):
        self.assertEqual(generate_id("ARR", set()), "ARR-001")

    def test_lowest_gap_is_reused(self):
        self.assertEqual(generate_id("ARR", {"ARR-001", "ARR-003"}), "ARR-002")

    def test_next_after_contiguous_run(self):
        self.assertEqual(generate_id("CHG", {"CHG-001", "CHG-002"}), "CHG-003")

    def test_padding_grows_past_three_digits(self):
        existing = {f"ARR-{n:03d}" for n in range(1, 1000)}
        self.assertEqual(generate_id("ARR", existing), "ARR-1000")

    def test_other_prefixes_are_ignored(self):
        self.assertEqual(generate_id("ARR", {"CHG-001"}), "ARR-001")


class TestNormalizeArrestDate(SimpleTestCase):

    def test_plain_date_string_is_unchanged(self):
        self.assertEqual(normalize_arrest_date("2024-03-10"), "2024-03-10")

    def test_iso_datetime_string(self):
        self.assertEqual(normalize_arrest_date("2024-03-10T23:59:59.000Z"), "2024-03-10")

    def test_date_object(self):
        self.assertEqual(normalize_arrest_date(date(2024, 3, 10)), "2024-03-10")

    def test_aware_datetime_is_converted_to_utc(self):
        tehran = timezone(timedelta(hours=3, minutes=30))
        value = datetime(2024, 3, 11, 1, 0, tzinfo=tehran)
        self.assertEqual(normalize_arrest_date(value), "2024-03-10")

    def test_epoch_milliseconds(self):
        self.assertEqual(normalize_arrest_date(1710028800000), "2024-03-10")

    def test_space_separated_datetime_string(self):
        self.assertEqual(normalize_arrest_date("2024-03-10 14:00"), "2024-03-10")

    def test_other_strings_are_kept(self):
        cases = [
            ("soon", "soon"),
            ("2024-13-40", "2024-13-40"),
            ("  March 10 2024", "March"),
            ("", ""),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(normalize_arrest_date(value), expected)

    def test_unsupported_types_are_rejected(self):
        for value in (True, None, ["2024-03-10"], {"date": "2024-03-10"}):
            with self.subTest(value=value):
                with self.assertRaises(DomainError):
                    normalize_arrest_date(value)


class TestConvictionFlag(SimpleTestCase):

    def test_false_like_strings(self):
        for value in ("", "0", "false", "No", " OFF "):
            with self.subTest(value=value):
                self.assertIs(services._as_bool(value), False)

    def test_everything_else_uses_truthiness(self):
        for value, expected in (("true", True), ("yes", True), (1, True), (True, True), (0, False), (None, False)):
            with self.subTest(value=value):
                self.assertIs(services._as_bool(value), expected)


class TestScheduleLookupIndexBuild(SimpleTestCase):

    def setUp(self):
        services._indexes_ready.clear()

    def tearDown(self):
        services._indexes_ready.clear()

    @override_settings(ARREST_REGISTRATION={"BUILD_LOOKUP_INDEXES": False})
    def test_disabled_by_setting(self):
        with mock.patch.object(services.threading, "Thread") as thread_cls:
            self.assertIsNone(schedule_lookup_index_build())
        thread_cls.assert_not_called()

    @override_settings(ARREST_REGISTRATION={"BUILD_LOOKUP_INDEXES": True})
    def test_starts_daemon_thread(self):
        with mock.patch.object(services.threading, "Thread") as thread_cls:
            thread = schedule_lookup_index_build()

        thread_cls.assert_called_once_with(
            target=services._build_lookup_indexes,
            name="arrest-lookup-indexes",
            daemon=True,
        )
        thread.start.assert_called_once_with()

    @override_settings(ARREST_REGISTRATION={"BUILD_LOOKUP_INDEXES": True})
    def test_skipped_once_indexes_exist(self):
        services._indexes_ready.set()
        with mock.patch.object(services.threading, "Thread") as thread_cls:
            self.assertIsNone(schedule_lookup_index_build())
        thread_cls.assert_not_called()

    def test_build_failure_is_logged_not_raised(self):
        with mock.patch.object(services, "ensure_lookup_indexes", side_effect=DatabaseError("locked")), \
                mock.patch.object(services, "connections") as connections:
            with self.assertLogs("arrests.services", level="WARNING") as logs:
                services._build_lookup_indexes()

        self.assertIn("Background lookup index build failed", logs.output[0])
        self.assertFalse(services._indexes_ready.is_set())
        connections.close_all.assert_called_once_with()

    def test_successful_build_marks_ready(self):
        with mock.patch.object(services, "ensure_lookup_indexes", return_value=["arrests_case_id_lkp"]), \
                mock.patch.object(services, "connections"):
            with self.assertLogs("arrests.services", level="INFO"):
                services._build_lookup_indexes()

        self.assertTrue(services._indexes_ready.is_set())


class TestEnsureLookupIndexes(TransactionTestCase):

    def _indexed_columns(self, table: str) -> set[str]:
        with connection.cursor() as cursor:
            constraints = connection.introspection.get_constraints(cursor, table)
        return {
            info["columns"][0]
            for info in constraints.values()
            if info["index"] and len(info["columns"]) == 1
        }

    def test_creates_missing_indexes_once(self):
        ensure_lookup_indexes()

        for model, field_name in LOOKUP_INDEXES:
            column = model._meta.get_field(field_name).column
            self.assertIn(column, self._indexed_columns(model._meta.db_table))

        self.assertEqual(ensure_lookup_indexes(), [])
