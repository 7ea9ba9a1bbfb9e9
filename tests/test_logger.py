import io
import logging
from unittest import TestCase

from flatkeys.errors import ConfigurationError
from flatkeys.logger import get_logger, resolve_level


class LoggerTests(TestCase):

    def tearDown(self) -> None:
        for name in ('flatkeys.test.console', 'flatkeys.test.null'):
            logger = logging.getLogger(name)
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)

    def test_console_handler_added_once(self):
        stream = io.StringIO()
        logger = get_logger('flatkeys.test.console', 'info', stream)
        self.assertEqual(logger.level, logging.INFO)
        logger.info('flattened')
        logger.debug('hidden')
        self.assertEqual(stream.getvalue(), 'flatkeys.test.console: INFO: flattened\n')
        self.assertIs(get_logger('flatkeys.test.console', logging.DEBUG), logger)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_null_handler(self):
        logger = get_logger('flatkeys.test.null', None)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)

    def test_resolve_level(self):
        self.assertEqual(resolve_level('debug'), logging.DEBUG)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        self.assertIsNone(resolve_level(None))
        with self.assertRaises(ConfigurationError):
            resolve_level('loud')
