import unittest
from collections.abc import Sequence
from typing import Any

from PySubstudy.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that records the name of each test and the values behind each assertion in the test log
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(description if input_value is None else input_value, expected, actual)
        self.assertEqual(expected, actual, description)

    def assertLoggedAlmostEqual(self, description : str, expected : float, actual : float|None, places : int = 6) -> None:
        log_input_expected_result(description, expected, actual)
        self.assertIsNotNone(actual, description)
        self.assertAlmostEqual(expected, actual, places=places, msg=description) # type: ignore[arg-type]

    def assertLoggedSequenceEqual(self, description : str, expected : Sequence[Any], actual : Sequence[Any], input_value : Any = None) -> None:
        log_input_expected_result(description if input_value is None else input_value, expected, actual)
        self.assertSequenceEqual(expected, actual, description)

    def assertLoggedIsInstance(self, description : str, obj : Any, expected_type : type) -> None:
        log_input_expected_result(description, expected_type.__name__, type(obj).__name__)
        self.assertIsInstance(obj, expected_type, description)

    def assertLoggedIsNone(self, description : str, actual : Any) -> None:
        log_input_expected_result(description, None, actual)
        self.assertIsNone(actual, description)

    def assertLoggedIsNotNone(self, description : str, actual : Any) -> None:
        log_input_expected_result(description, "not None", actual)
        self.assertIsNotNone(actual, description)

    def assertLoggedTrue(self, description : str, actual : Any) -> None:
        log_input_expected_result(description, True, actual)
        self.assertTrue(actual, description)

    def assertLoggedRaises(self, description : str, expected_error : type[Exception], function, *args, **kwargs) -> BaseException:
        with self.assertRaises(expected_error) as context:
            function(*args, **kwargs)
        log_input_expected_error(description, expected_error, context.exception)
        return context.exception
