import os
import logging
import sys
import argparse
from datetime import datetime
import unittest

# Add the parent directory to the sys path so that modules can be found
base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(base_path)

from PyLocaleSync.Helpers.Tests import create_logfile, end_logfile, separator

logging.getLogger().setLevel(logging.DEBUG)
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.WARNING)
console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

def run_unit_tests(results_path : str, test_name : str|None = None) -> bool:
    """
    Run the unit tests in PyLocaleSync.UnitTests, logging details to unit_tests.log
    """
    log_file = create_logfile(results_path, "unit_tests.log")

    logging.info(separator)
    logging.info("Running unit tests at " + datetime.now().strftime("%Y-%m-%d at %H:%M"))
    logging.info(separator)

    tests_directory = os.path.join(base_path, 'PyLocaleSync', 'UnitTests')
    pattern = f"{test_name}.py" if test_name else "test_*.py"
    suite = unittest.TestLoader().discover(tests_directory, pattern=pattern, top_level_dir=base_path)
    result = unittest.runner.TextTestRunner(verbosity=2).run(suite)

    logging.info(separator)
    logging.info("Completed unit tests at " + datetime.now().strftime("%Y-%m-%d at %H:%M"))
    logging.info(separator)

    end_logfile(log_file)
    return result.wasSuccessful()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run Python tests")
    parser.add_argument('test', nargs='?', help="Specify the name of a test file to run (without .py)", default=None)
    args = parser.parse_args()

    results_directory = os.path.join(base_path, 'test_results')

    if not os.path.exists(results_directory):
        os.makedirs(results_directory)

    success = run_unit_tests(results_directory, test_name=args.test)
    sys.exit(0 if success else 1)
