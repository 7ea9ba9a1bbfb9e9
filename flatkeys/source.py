""" Input document sources """
from abc import ABC, abstractmethod
import json
import logging
import sys
import typing

from flatkeys.errors import SourceError

MODULE_LOGGER = logging.getLogger(__name__)


class Source(ABC):
    """ Abstract Source """
    def __init__(self, uri: str):
        """ Source constructor """
        self._uri = uri
        self._data = None
        self.reload()

    @property
    def data(self) -> typing.Any:
        """ Get loaded document """
        return self._data

    @abstractmethod
    def reload(self) -> None:  # pragma: no cover
        """ Reload document """

    def set_data(self, data: typing.Any):
        """ Set loaded document """
        self._data = data
        MODULE_LOGGER.debug('Document loaded from %s: %s', self._uri, type(data).__name__)

    @staticmethod
    def parse(text: str, uri: str) -> typing.Any:
        """ Parse json text """
        try:
            return json.loads(text)
        except json.decoder.JSONDecodeError as error:
            raise SourceError(f'invalid json in {uri}: {error}') from error


class SourceStream(Source):
    """ SourceStream reads document from stdin """

    def __init__(self, uri: str = '-'):
        MODULE_LOGGER.debug('Creating SourceStream')
        super().__init__(uri)

    def reload(self):
        """ Read stdin until end """
        self.set_data(self.parse(sys.stdin.read(), 'stdin'))
