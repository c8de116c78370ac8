"""
Unit tests for logging, configuration and error handling components.

Tests the exception classes, the logging setup and the OmegaConf-backed
configuration to ensure they work as expected.
"""

import logging
import os
import shutil
import tempfile
import unittest

from satcommon.config import SATCommonConfig
from satcommon.dimacs import parse_dimacs
from satcommon.exceptions import DimacsParseError, SATBaseException
from satcommon.utils.logging_utils import (
    PACKAGE_LOGGER,
    configure_logging,
    configure_logging_from_config,
)


class TestExceptions(unittest.TestCase):
    """Test cases for custom exception classes."""

    def test_dimacs_parse_error(self):
        error = DimacsParseError()
        self.assertEqual(str(error), "Malformed numeric token")
        self.assertIsInstance(error, SATBaseException)
        self.assertIsInstance(error, ValueError)

        error = DimacsParseError(
            "Literal out of range", line_number=3, line="1 99999999999 0", token="99999999999"
        )
        self.assertEqual(error.line_number, 3)
        self.assertEqual(error.line, "1 99999999999 0")
        self.assertEqual(error.token, "99999999999")

        error_str = str(error)
        self.assertIn("Literal out of range", error_str)
        self.assertIn("token='99999999999'", error_str)
        self.assertIn("line=3", error_str)


class TestLogging(unittest.TestCase):
    """Test cases for the logging setup."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in package_logger.handlers[:]:
            handler.close()
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
        shutil.rmtree(self.test_dir)

    def test_configure_logging_replaces_handlers(self):
        configure_logging("INFO")
        package_logger = configure_logging(logging.DEBUG)
        self.assertEqual(package_logger.name, PACKAGE_LOGGER)
        self.assertEqual(package_logger.level, logging.DEBUG)
        self.assertEqual(len(package_logger.handlers), 1)

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            configure_logging("LOUD")

    def test_parser_logs_to_file(self):
        log_file = os.path.join(self.test_dir, "logs", "parse.log")
        configure_logging("DEBUG", log_file=log_file)

        parse_dimacs("p cnf 1 1\np bogus\n1 0\n")

        with open(log_file) as f:
            content = f.read()
        self.assertIn("satcommon.dimacs", content)
        self.assertIn("Ignoring unrecognized problem line 2", content)
        self.assertIn("Read all 1 declared clauses", content)

    def test_configure_from_config(self):
        config = SATCommonConfig()
        config.set("logging.level", "INFO")
        config.set("logging.file", os.path.join(self.test_dir, "from_config.log"))

        package_logger = configure_logging_from_config(config)
        self.assertEqual(package_logger.level, logging.INFO)
        self.assertEqual(len(package_logger.handlers), 2)


class TestConfig(unittest.TestCase):
    """Test cases for SATCommonConfig."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_defaults(self):
        config = SATCommonConfig()
        self.assertEqual(config.get("dimacs.encoding"), "utf-8")
        self.assertEqual(config["logging.level"], "WARNING")
        self.assertIsNone(config.get("logging.file"))
        self.assertEqual(config.get("missing.key", "fallback"), "fallback")
        self.assertIn("dimacs.encoding", config)
        self.assertNotIn("logging.file", config)

    def test_update_and_set(self):
        config = SATCommonConfig()
        config.update({"dimacs": {"encoding": "latin-1"}})
        self.assertEqual(config.get("dimacs.encoding"), "latin-1")
        config["logging.level"] = "DEBUG"
        self.assertEqual(config.to_dict()["logging"]["level"], "DEBUG")

    def test_save_and_load(self):
        path = os.path.join(self.test_dir, "conf", "satcommon.yaml")
        config = SATCommonConfig()
        config.set("dimacs.encoding", "ascii")
        config.save(path)

        loaded = SATCommonConfig(path)
        self.assertEqual(loaded.get("dimacs.encoding"), "ascii")
        self.assertEqual(loaded.get("logging.level"), "WARNING")

    def test_partial_file_merges_with_defaults(self):
        path = os.path.join(self.test_dir, "partial.yaml")
        with open(path, "w") as f:
            f.write("logging:\n  level: ERROR\n")

        config = SATCommonConfig(path)
        self.assertEqual(config.get("logging.level"), "ERROR")
        self.assertEqual(config.get("dimacs.encoding"), "utf-8")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            SATCommonConfig(os.path.join(self.test_dir, "missing.yaml"))


if __name__ == "__main__":
    unittest.main()
