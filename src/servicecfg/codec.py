"""
Codecs that move a config tree to and from a text stream.
"""

from abc import ABC, abstractmethod
from typing import TextIO

import json5

from servicecfg.exceptions import CodecError
from servicecfg.tree import ConfigTree


class Codec(ABC):
    """Abstract serializer/deserializer for config trees."""

    @abstractmethod
    def serialize(self, tree: ConfigTree, stream: TextIO) -> None:
        """
        Write the tree to the stream.

        Args:
            tree: Tree to read settings from
            stream: Writable text stream

        Raises:
            CodecError: If the tree cannot be encoded
        """
        pass

    @abstractmethod
    def deserialize(self, tree: ConfigTree, stream: TextIO) -> None:
        """
        Read settings from the stream into the tree, in place.

        Args:
            tree: Tree to update
            stream: Readable text stream

        Raises:
            CodecError: If the content is malformed or rejected by the tree
        """
        pass


class Json5Codec(Codec):
    """JSON5 codec. Comments and trailing commas are accepted on read."""

    def __init__(self, indent: int = 2, quote_keys: bool = False, trailing_commas: bool = True) -> None:
        self.indent = indent
        self.quote_keys = quote_keys
        self.trailing_commas = trailing_commas

    def serialize(self, tree: ConfigTree, stream: TextIO) -> None:
        try:
            text = json5.dumps(
                tree.to_data(),
                indent=self.indent,
                quote_keys=self.quote_keys,
                trailing_commas=self.trailing_commas,
            )
        except (TypeError, ValueError) as e:
            raise CodecError("codec.encode_failed", detail=str(e)) from e
        stream.write(text)
        stream.write("\n")

    def deserialize(self, tree: ConfigTree, stream: TextIO) -> None:
        source = getattr(stream, "name", "<stream>")
        try:
            data = json5.loads(stream.read())
        except ValueError as e:
            raise CodecError("codec.decode_failed", source=source, detail=str(e)) from e

        if not isinstance(data, dict):
            raise CodecError("codec.not_an_object", type_name=type(data).__name__)

        tree.apply_data(data)
