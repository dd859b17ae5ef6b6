"""Template-literal boundaries over a flat token stream.

An interpolated template literal such as `` `a${b}c` `` arrives as several
physical tokens (`` `a${ ``, `b`, `` }c` ``). The locator collects the
template pieces and the coordinator pairs every opening piece with its
closing piece, last opened first closed, so nested literals inside an
interpolation close before their enclosing literal does.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from parenspace.lexer import Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TemplatePiece:
    index: int
    token: Token


@dataclass(frozen=True, slots=True)
class TemplatePair:
    """One logical template literal: its first piece and, if split, its last."""

    start_piece: TemplatePiece
    end_piece: TemplatePiece | None = None
    middle_pieces: tuple[TemplatePiece, ...] = ()

    @property
    def is_single_piece(self) -> bool:
        return self.end_piece is None

    @property
    def start_index(self) -> int:
        return self.start_piece.index

    @property
    def end_index(self) -> int:
        if self.end_piece is None:
            return self.start_piece.index
        return self.end_piece.index

    @property
    def start_token(self) -> Token:
        return self.start_piece.token

    @property
    def end_token(self) -> Token:
        if self.end_piece is None:
            return self.start_piece.token
        return self.end_piece.token

    def piece_indices(self) -> tuple[int, ...]:
        indices = [self.start_piece.index, *(piece.index for piece in self.middle_pieces)]
        if self.end_piece is not None:
            indices.append(self.end_piece.index)
        return tuple(indices)


def locate_template_pieces(tokens: Sequence[Token]) -> list[TemplatePiece]:
    return [TemplatePiece(index, token) for index, token in enumerate(tokens) if token.is_template]


@dataclass(slots=True)
class _OpenPair:
    start_piece: TemplatePiece
    middle_pieces: list[TemplatePiece]


def coordinate_template_pieces(pieces: Sequence[TemplatePiece]) -> list[TemplatePair]:
    """Group template pieces into logical literals.

    Returned pairs are ordered by their start piece. Opening pieces still open
    at the end and closing pieces with nothing open are dropped.
    """
    pairs: dict[int, TemplatePair] = {}
    stack: list[_OpenPair] = []

    for piece in pieces:
        match piece.token.kind:
            case TokenKind.TEMPLATE_COMPLETE:
                pairs[piece.index] = TemplatePair(start_piece=piece)
            case TokenKind.TEMPLATE_OPEN:
                stack.append(_OpenPair(start_piece=piece, middle_pieces=[]))
            case TokenKind.TEMPLATE_MIDDLE:
                if stack:
                    stack[-1].middle_pieces.append(piece)
                else:
                    logger.debug("ignoring template middle piece at token %d with nothing open", piece.index)
            case TokenKind.TEMPLATE_CLOSE:
                if not stack:
                    logger.debug("ignoring template closing piece at token %d with nothing open", piece.index)
                    continue
                opened = stack.pop()
                pairs[opened.start_piece.index] = TemplatePair(
                    start_piece=opened.start_piece,
                    end_piece=piece,
                    middle_pieces=tuple(opened.middle_pieces),
                )
            case _:
                logger.debug("ignoring non-template token at %d", piece.index)

    if stack:
        logger.debug("%d template literal(s) left unmatched", len(stack))
    return [pairs[index] for index in sorted(pairs)]


class TemplateIndex:
    """Token index -> logical template literal lookup for one token stream."""

    def __init__(self, pairs: Sequence[TemplatePair]) -> None:
        self._pairs = tuple(pairs)
        self._by_index: dict[int, TemplatePair] = {}
        for pair in self._pairs:
            for index in pair.piece_indices():
                self._by_index[index] = pair

    @staticmethod
    def build(tokens: Sequence[Token]) -> "TemplateIndex":
        return TemplateIndex(coordinate_template_pieces(locate_template_pieces(tokens)))

    @property
    def pairs(self) -> tuple[TemplatePair, ...]:
        return self._pairs

    def pair_at(self, index: int) -> TemplatePair | None:
        return self._by_index.get(index)

    def pair_starting_at(self, index: int) -> TemplatePair | None:
        pair = self._by_index.get(index)
        if pair is None or pair.start_index != index:
            return None
        return pair

    def pair_ending_at(self, index: int) -> TemplatePair | None:
        pair = self._by_index.get(index)
        if pair is None or pair.end_index != index:
            return None
        return pair
