import logging
import os
import tempfile
import unittest

from app.core.config import Settings
from app.core.logging_config import setup_logging


class SetupLoggingTests(unittest.TestCase):
    def tearDown(self):
        setup_logging(Settings(LOG_LEVEL="INFO", LOG_FILE=""))

    def test_later_calls_replace_configuration(self):
        """Each call applies its own level and handlers"""
        setup_logging(Settings(LOG_LEVEL="INFO", LOG_FILE=""))
        setup_logging(Settings(LOG_LEVEL="DEBUG", LOG_FILE=""))
        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)

    def test_log_file_handler(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_path = os.path.join(tmpdir, "movies.log")
            setup_logging(Settings(LOG_LEVEL="WARNING", LOG_FILE=log_path))
            root = logging.getLogger()
            file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
            self.assertEqual([h.baseFilename for h in file_handlers], [log_path])
            self.assertEqual(root.level, logging.WARNING)
            setup_logging(Settings(LOG_LEVEL="INFO", LOG_FILE=""))


if __name__ == '__main__':
    unittest.main()
