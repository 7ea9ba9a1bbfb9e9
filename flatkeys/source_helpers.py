""" Source helpers """
from flatkeys.source import Source, SourceStream
from flatkeys.source_file import SourceFile


def create(uri: str) -> Source:
    """
    Create source instance from uri
    :param uri: "-" for stdin or file path
    :return: Source object
    """
    if uri == '-':
        return SourceStream()
    if isinstance(uri, str):
        return SourceFile(uri)
    raise AssertionError('uri should be string')


def load(uri: str):
    """ Load json document from uri """
    return create(uri).data
