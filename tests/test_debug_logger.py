import logging
import unittest

from uk_covid19.debug_logger import PACKAGE_LOGGER, configure_debug_logging


def _debug_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_uk_covid19_debug_handler", False)]


class TestConfigureDebugLogging(unittest.TestCase):
    def tearDown(self):
        configure_debug_logging(False)

    def test_enable_installs_single_handler(self):
        configure_debug_logging(True)
        logger = configure_debug_logging(True)

        self.assertEqual(logger.name, PACKAGE_LOGGER)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)
        self.assertEqual(len(_debug_handlers(logger)), 1)

    def test_disable_removes_handler(self):
        configure_debug_logging(True)
        logger = configure_debug_logging(False)

        self.assertEqual(_debug_handlers(logger), [])
        self.assertTrue(logger.propagate)


if __name__ == "__main__":
    unittest.main()
