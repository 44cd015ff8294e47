"""Binders: the ways a term can name its variables and lambda parameters.

Each binder knows how to write itself as a variable occurrence and as a
lambda parameter in the flat format, and how to read itself back.
"""

from __future__ import annotations

from dataclasses import dataclass

from plutusflat.decoder import Decoder
from plutusflat.encoder import Encoder


@dataclass(frozen=True)
class DeBruijn:
    """A variable identified only by its de Bruijn index."""

    index: int = 0

    def var_encode(self, encoder: Encoder) -> None:
        """Write the index as a word."""
        encoder.word(self.index)

    @classmethod
    def var_decode(cls, decoder: Decoder) -> DeBruijn:
        """Read a variable occurrence."""
        return cls(decoder.word())

    def parameter_encode(self, encoder: Encoder) -> None:
        """Parameters carry no information under de Bruijn indices."""

    @classmethod
    def parameter_decode(cls, decoder: Decoder) -> DeBruijn:
        """Parameters are not stored, so every one decodes to index zero."""
        return cls(0)


@dataclass(frozen=True)
class Name:
    """A variable named by text and a number that makes it unique."""

    text: str
    unique: int

    def var_encode(self, encoder: Encoder) -> None:
        """Write the text followed by the unique number."""
        encoder.utf8(self.text)
        encoder.word(self.unique)

    @classmethod
    def var_decode(cls, decoder: Decoder) -> Name:
        """Read a name written by :meth:`var_encode`."""
        text = decoder.utf8()
        unique = decoder.word()
        return cls(text, unique)

    def parameter_encode(self, encoder: Encoder) -> None:
        """Parameters are written exactly like variables."""
        self.var_encode(encoder)

    @classmethod
    def parameter_decode(cls, decoder: Decoder) -> Name:
        """Read a parameter written by :meth:`parameter_encode`."""
        return cls.var_decode(decoder)


@dataclass(frozen=True)
class NamedDeBruijn:
    """A variable that keeps its text name alongside its de Bruijn index."""

    text: str
    index: int

    def var_encode(self, encoder: Encoder) -> None:
        """Write the text followed by the index."""
        encoder.utf8(self.text)
        encoder.word(self.index)

    @classmethod
    def var_decode(cls, decoder: Decoder) -> NamedDeBruijn:
        """Read a variable written by :meth:`var_encode`."""
        text = decoder.utf8()
        index = decoder.word()
        return cls(text, index)

    def parameter_encode(self, encoder: Encoder) -> None:
        """Parameters are written exactly like variables."""
        self.var_encode(encoder)

    @classmethod
    def parameter_decode(cls, decoder: Decoder) -> NamedDeBruijn:
        """Read a parameter written by :meth:`parameter_encode`."""
        return cls.var_decode(decoder)