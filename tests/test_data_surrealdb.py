"""
Tests for SurrealDB database adapter.

This module tests the SurrealDbAdapter class that runs organisation traversals
against SurrealDB.
"""
import unittest
from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("surrealdb")

from orgapi.data.surrealdb import SurrealDbAdapter  # noqa: E402
from orgapi.errors import QueryExecutionError  # noqa: E402

# Test constants
TEST_ENDPOINT = "ws://localhost:8000/rpc"
TEST_USERNAME = "root"
TEST_PASSWORD = "root"
TEST_NAMESPACE = "test_namespace"
TEST_DATABASE = "test_database"


def _adapter():
    return SurrealDbAdapter(
        endpoint=TEST_ENDPOINT,
        username=TEST_USERNAME,
        password=TEST_PASSWORD,
        namespace=TEST_NAMESPACE,
        db_name=TEST_DATABASE
    )


class TestSurrealDbAdapterInit(unittest.TestCase):
    """Test SurrealDbAdapter initialization."""

    def test_init_stores_parameters(self):
        """
        Test that SurrealDbAdapter initializes with connection parameters.

        Verifies:
        - Connection parameters are stored
        - db is None initially
        """
        adapter = _adapter()

        self.assertEqual(adapter._endpoint, TEST_ENDPOINT)
        self.assertEqual(adapter._namespace, TEST_NAMESPACE)
        self.assertEqual(adapter._db_name, TEST_DATABASE)
        self.assertIsNone(adapter._db)


class TestSurrealDbAdapterContextManager(unittest.TestCase):
    """Test SurrealDbAdapter context manager protocol."""

    @patch('orgapi.data.surrealdb.Surreal')
    def test_enter_creates_connection(self, mock_surreal_class):
        """
        Test __enter__ creates DB connection.

        Verifies:
        - Signs in with the configured credentials
        - Selects namespace and database
        - Returns self
        """
        mock_db = MagicMock()
        mock_surreal_class.return_value = mock_db
        adapter = _adapter()

        result = adapter.__enter__()

        mock_surreal_class.assert_called_once_with(TEST_ENDPOINT)
        mock_db.signin.assert_called_once_with({"username": TEST_USERNAME, "password": TEST_PASSWORD})
        mock_db.use.assert_called_once_with(TEST_NAMESPACE, TEST_DATABASE)
        self.assertIs(result, adapter)
        self.assertIs(adapter._db, mock_db)

    @patch('orgapi.data.surrealdb.Surreal')
    def test_exit_closes_connection(self, mock_surreal_class):
        mock_db = MagicMock()
        mock_surreal_class.return_value = mock_db
        adapter = _adapter()

        with adapter:
            pass

        mock_db.close.assert_called_once_with()
        self.assertIsNone(adapter._db)

    @patch('orgapi.data.surrealdb.Surreal')
    def test_nested_contexts_share_connection(self, mock_surreal_class):
        """
        Test that entering an open adapter again reuses its connection.

        Verifies:
        - Only one connection is opened
        - The connection survives the inner exit and closes on the outer one
        """
        mock_db = MagicMock()
        mock_surreal_class.return_value = mock_db
        adapter = _adapter()

        with adapter:
            with adapter:
                self.assertIs(adapter._db, mock_db)
            mock_db.close.assert_not_called()
            self.assertIs(adapter._db, mock_db)

        mock_surreal_class.assert_called_once_with(TEST_ENDPOINT)
        mock_db.close.assert_called_once_with()
        self.assertIsNone(adapter._db)

    @patch('orgapi.data.surrealdb.Surreal')
    def test_enter_without_credentials_skips_signin(self, mock_surreal_class):
        mock_db = MagicMock()
        mock_surreal_class.return_value = mock_db
        adapter = SurrealDbAdapter(
            endpoint="mem://", username=None, password=None, namespace=TEST_NAMESPACE, db_name=TEST_DATABASE
        )

        with adapter:
            pass

        mock_db.signin.assert_not_called()
        mock_db.use.assert_called_once_with(TEST_NAMESPACE, TEST_DATABASE)

    @patch('orgapi.data.surrealdb.Surreal')
    def test_enter_failure_is_wrapped(self, mock_surreal_class):
        cause = ConnectionRefusedError("connection refused")
        mock_surreal_class.return_value.signin.side_effect = cause

        with self.assertRaises(QueryExecutionError) as context:
            _adapter().__enter__()

        self.assertIs(context.exception.__cause__, cause)


class TestSurrealDbAdapterExecuteQuery(unittest.TestCase):
    """Test SurrealDbAdapter.execute_query."""

    @patch('orgapi.data.surrealdb.Surreal')
    def test_execute_query_passes_vars(self, mock_surreal_class):
        mock_db = MagicMock()
        mock_db.query.return_value = [{"o": {"id": "abc"}}]
        mock_surreal_class.return_value = mock_db
        adapter = _adapter()

        with adapter:
            result = adapter.execute_query("SELECT * FROM organisation WHERE uuid = $uuid", {"uuid": "abc"})

        mock_db.query.assert_called_once_with("SELECT * FROM organisation WHERE uuid = $uuid", {"uuid": "abc"})
        self.assertEqual(result, [{"o": {"id": "abc"}}])

    def test_execute_query_without_connection(self):
        """
        Test that a query outside the context fails.

        Verifies the missing connection is reported as a query failure.
        """
        with self.assertRaises(QueryExecutionError) as context:
            _adapter().execute_query("SELECT 1")

        self.assertIsInstance(context.exception.__cause__, ConnectionError)

    @patch('orgapi.data.surrealdb.Surreal')
    def test_execute_query_error_is_wrapped(self, mock_surreal_class):
        mock_surreal_class.return_value.query.side_effect = RuntimeError("Parse error")
        adapter = _adapter()

        with adapter:
            with self.assertRaises(QueryExecutionError) as context:
                adapter.execute_query("SELEC")

        self.assertIn("Parse error", str(context.exception))


class TestSurrealDbAdapterParseResponse(unittest.TestCase):
    """Test SurrealDbAdapter.parse_db_response."""

    def setUp(self):
        self.adapter = _adapter()

    def test_parse_list_of_records(self):
        self.assertEqual(self.adapter.parse_db_response([{"a": 1}, {"a": 2}]), [{"a": 1}, {"a": 2}])

    def test_parse_single_record(self):
        self.assertEqual(self.adapter.parse_db_response({"a": 1}), [{"a": 1}])

    def test_parse_statement_envelope(self):
        response = [{"result": [{"a": 1}], "status": "OK", "time": "1ms"}]

        self.assertEqual(self.adapter.parse_db_response(response), [{"a": 1}])

    def test_parse_envelope_with_single_result(self):
        self.assertEqual(self.adapter.parse_db_response([{"result": {"a": 1}, "status": "OK"}]), [{"a": 1}])

    def test_parse_empty_values(self):
        self.assertEqual(self.adapter.parse_db_response(None), [])
        self.assertEqual(self.adapter.parse_db_response([]), [])
        self.assertEqual(self.adapter.parse_db_response("OK"), [])
        self.assertEqual(self.adapter.parse_db_response([{"result": None, "status": "OK"}]), [])


class TestSurrealDbAdapterConnectivity(unittest.TestCase):
    """Test SurrealDbAdapter.check_connectivity."""

    @patch('orgapi.data.surrealdb.Surreal')
    def test_check_connectivity_ok(self, mock_surreal_class):
        mock_surreal_class.return_value.query.return_value = [{"id": "organisation:abc"}]
        adapter = _adapter()

        with adapter:
            adapter.check_connectivity()

        mock_surreal_class.return_value.query.assert_called_once_with(SurrealDbAdapter.CONNECTIVITY_STATEMENT, {})

    @patch('orgapi.data.surrealdb.Surreal')
    def test_check_connectivity_empty(self, mock_surreal_class):
        mock_surreal_class.return_value.query.return_value = []
        adapter = _adapter()

        with adapter:
            with self.assertRaises(QueryExecutionError):
                adapter.check_connectivity()


if __name__ == '__main__':
    unittest.main()
