""" Source for json file """
import logging

from flatkeys.errors import SourceError
from flatkeys.source import Source

MODULE_LOGGER = logging.getLogger(__name__)


class SourceFile(Source):
    """ SourceFile interface """

    def __init__(self, uri: str):
        """
        SourceFile constructor
        :param uri: file path
        """
        MODULE_LOGGER.debug('Creating SourceFile using %s', uri)
        super().__init__(uri)

    def reload(self):
        """ Load json file """
        MODULE_LOGGER.debug('Read file: %s', self._uri)
        try:
            with open(self._uri, encoding="utf-8") as json_file:
                text = json_file.read()
        except OSError as error:
            raise SourceError(f'cannot read {self._uri}: {error}') from error
        self.set_data(self.parse(text, self._uri))
