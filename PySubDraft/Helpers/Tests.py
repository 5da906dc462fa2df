import logging
import sys

separator = "".center(60, "-")

def log_test_name(test_name : str) -> None:
    logging.info(separator)
    logging.info(test_name)
    logging.info(separator)

def log_input_expected_result(input, expected, result) -> None:
    logging.info(f"{str(input)}:  expected: {str(expected)} | result: {str(result)}")

def log_input_expected_error(input, expected_error : type[Exception], error : Exception) -> None:
    logging.info(f"{str(input)}:  expected: {expected_error.__name__} | result: {type(error).__name__} ({str(error)})")

def skip_if_debugger_attached(test_name : str) -> bool:
    """
    Tests that deliberately raise exceptions are noisy under a debugger, so skip them there
    """
    if sys.gettrace() is not None:
        logging.info(f"Skipping {test_name} because a debugger is attached")
        return True
    return False
