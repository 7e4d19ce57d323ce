"""
Unit tests for ``core.domain``: the exception hierarchy, the DRF
exception handler and the transaction helpers.
"""

from __future__ import annotations

from unittest import mock

from django.db import IntegrityError, OperationalError
from django.test import SimpleTestCase, TestCase
from rest_framework.exceptions import ValidationError

from core.domain.exception_handler import domain_exception_handler
from core.domain.exceptions import DomainError, MissingFields, NotFound, TransactionFailed
from core.domain.transactions import apply_transaction_timeout, lock_first, run_with_retry
from records.models import Person


class TestDomainExceptions(SimpleTestCase):

    def test_missing_fields_message(self):
        exc = MissingFields(["caseID", "statuteCode"])
        self.assertEqual(exc.fields, ["caseID", "statuteCode"])
        self.assertEqual(str(exc), "Missing required fields: caseID, statuteCode")

    def test_not_found_code(self):
        exc = NotFound("Person not found", code="person")
        self.assertEqual(exc.code, "person")
        self.assertIsInstance(exc, DomainError)

    def test_transaction_failed_is_not_a_domain_error(self):
        exc = TransactionFailed(details="deadlock detected")
        self.assertNotIsInstance(exc, DomainError)
        self.assertEqual(exc.message, "Transaction failed, no data saved")
        self.assertEqual(exc.details, "deadlock detected")


class TestDomainExceptionHandler(SimpleTestCase):

    def _handle(self, exc):
        return domain_exception_handler(exc, {"view": "TestView"})

    def test_status_mapping(self):
        cases = [
            (DomainError("bad"), 400),
            (MissingFields(["personID"]), 400),
            (NotFound("gone"), 404),
        ]
        for exc, expected in cases:
            with self.subTest(exc=type(exc).__name__):
                with self.assertLogs("core.domain.exception_handler", level="WARNING"):
                    response = self._handle(exc)
                self.assertEqual(response.status_code, expected)
                self.assertEqual(response.data, {"detail": str(exc)})

    def test_transaction_failed(self):
        with self.assertLogs("core.domain.exception_handler", level="ERROR"):
            response = self._handle(TransactionFailed(details="lock timeout"))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.data,
            {"detail": "Transaction failed, no data saved", "details": "lock timeout"},
        )

    def test_drf_exceptions_pass_through(self):
        response = self._handle(ValidationError({"name": ["required"]}))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data, {"name": ["required"]})

    def test_unknown_exceptions_are_not_handled(self):
        self.assertIsNone(self._handle(RuntimeError("boom")))


class TestRunWithRetry(TestCase):

    def test_returns_first_success(self):
        fn = mock.Mock(return_value="ok")
        self.assertEqual(run_with_retry(fn, attempts=3), "ok")
        fn.assert_called_once_with()

    def test_retries_conflicts(self):
        fn = mock.Mock(side_effect=[IntegrityError("dup"), OperationalError("deadlock"), "ok"])
        with self.assertLogs("core.domain.transactions", level="WARNING") as logs:
            result = run_with_retry(fn, attempts=3, label="arrest registration")
        self.assertEqual(result, "ok")
        self.assertEqual(fn.call_count, 3)
        self.assertEqual(len(logs.output), 2)
        self.assertIn("arrest registration conflicted on attempt 1/3", logs.output[0])

    def test_raises_after_last_attempt(self):
        fn = mock.Mock(side_effect=IntegrityError("dup"))
        with self.assertLogs("core.domain.transactions", level="WARNING"):
            with self.assertRaises(IntegrityError):
                run_with_retry(fn, attempts=2)
        self.assertEqual(fn.call_count, 2)

    def test_other_errors_are_not_retried(self):
        fn = mock.Mock(side_effect=NotFound("missing"))
        with self.assertRaises(NotFound):
            run_with_retry(fn, attempts=5)
        fn.assert_called_once_with()

    def test_failed_attempt_is_rolled_back(self):
        calls = []

        def work():
            calls.append(1)
            Person.objects.create(person_id=f"PER-{len(calls):03d}", first_name="A", last_name="B")
            if len(calls) == 1:
                raise IntegrityError("conflict")
            return Person.objects.count()

        with self.assertLogs("core.domain.transactions", level="WARNING"):
            count = run_with_retry(work, attempts=2)

        self.assertEqual(count, 1)
        self.assertEqual(list(Person.objects.values_list("person_id", flat=True)), ["PER-002"])

    def test_lock_first(self):
        Person.objects.create(person_id="PER-001", first_name="A", last_name="B")
        found = run_with_retry(lambda: lock_first(Person.objects.filter(person_id="PER-001")))
        missing = run_with_retry(lambda: lock_first(Person.objects.filter(person_id="PER-404")))
        self.assertEqual(found.person_id, "PER-001")
        self.assertIsNone(missing)


class TestApplyTransactionTimeout(SimpleTestCase):

    def test_non_postgres_backend_is_untouched(self):
        fake = mock.MagicMock(vendor="sqlite")
        with mock.patch("core.domain.transactions.connections") as connections:
            connections.__getitem__.return_value = fake
            apply_transaction_timeout(5000)
        fake.cursor.assert_not_called()

    def test_postgres_sets_local_timeouts(self):
        fake = mock.MagicMock(vendor="postgresql")
        cursor = fake.cursor.return_value.__enter__.return_value
        with mock.patch("core.domain.transactions.connections") as connections:
            connections.__getitem__.return_value = fake
            apply_transaction_timeout(2500)
        cursor.execute.assert_has_calls([
            mock.call("SET LOCAL statement_timeout = 2500"),
            mock.call("SET LOCAL lock_timeout = 2500"),
        ])

    def test_no_timeout_is_a_no_op(self):
        with mock.patch("core.domain.transactions.connections") as connections:
            apply_transaction_timeout(None)
        connections.__getitem__.assert_not_called()
