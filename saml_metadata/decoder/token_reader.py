# pylint: disable=c-extension-no-member, protected-access
from io import BytesIO
from typing import BinaryIO, Iterator, Optional, Tuple, Union

from lxml import etree

from saml_metadata.exceptions.metadata_exceptions import MalformedXMLError

START = "start"
END = "end"

Token = Tuple[str, etree._Element]


class TokenReader:
    """
    Single pass reader over the start and end tokens of a document.

    The underlying lxml tree is only built as far as the reader has advanced, so
    an element is complete (text and children) once its end token has been read.
    """

    def __init__(
        self,
        source: Union[bytes, bytearray, BinaryIO],
        huge_tree: bool = False,
        resolve_entities: bool = False,
    ) -> None:
        if isinstance(source, (bytes, bytearray)):
            source = BytesIO(source)
        self._events = etree.iterparse(
            source,
            events=(START, END),
            huge_tree=huge_tree,
            resolve_entities=resolve_entities,
            no_network=True,
        )

    def next_token(self) -> Optional[Token]:
        """
        Return the next token, or None when the document is exhausted.
        """
        try:
            return next(self._events)
        except StopIteration:
            return None
        except (etree.ParseError, OSError) as read_error:
            raise MalformedXMLError(error_description=str(read_error)) from read_error

    def tokens(self) -> Iterator[Token]:
        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()

    def next_start(self) -> Optional[etree._Element]:
        for event, element in self.tokens():
            if event == START:
                return element
        return None

    def read_subtree(self, element: etree._Element) -> etree._Element:
        """
        Consume tokens up to and including the end token of element.
        """
        for event, current in self.tokens():
            if event == END and current is element:
                break
        return element

    def skip(self, element: etree._Element) -> None:
        self.read_subtree(element)
        self.release(element)

    @staticmethod
    def release(element: etree._Element) -> None:
        # drop content that has already been decoded, keeps memory bounded
        element.clear(keep_tail=True)
        parent = element.getparent()
        if parent is not None:
            while element.getprevious() is not None:
                del parent[0]
