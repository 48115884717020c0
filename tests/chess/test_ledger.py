"""Unit tests for /src/chess/ledger.py"""

from src.chess.ledger import CaptureLedger
from src.chess.pieces import Color, Piece


def test_new_ledger_is_empty() -> None:
    ledger = CaptureLedger()
    assert ledger.captured_by(Color.WHITE) == []
    assert ledger.captured_by(Color.BLACK) == []


def test_captures_keep_chronological_order() -> None:
    ledger = CaptureLedger()
    ledger.record(Color.WHITE, Piece.from_fen("p"))
    ledger.record(Color.WHITE, Piece.from_fen("q"))
    ledger.record(Color.BLACK, Piece.from_fen("N"))
    ledger.record(Color.WHITE, Piece.from_fen("b"))

    assert ledger.captured_by(Color.WHITE) == [
        Piece.from_fen("p"),
        Piece.from_fen("q"),
        Piece.from_fen("b"),
    ]
    assert ledger.captured_by(Color.BLACK) == [Piece.from_fen("N")]
    assert ledger.count(Color.WHITE) == 3
    assert ledger.points(Color.WHITE) == 13
    assert ledger.points(Color.BLACK) == 3


def test_captured_by_returns_a_copy() -> None:
    """Append-only: callers cannot remove captures through the returned list"""
    ledger = CaptureLedger()
    ledger.record(Color.BLACK, Piece.from_fen("R"))
    ledger.captured_by(Color.BLACK).clear()
    assert ledger.count(Color.BLACK) == 1


def test_copy_is_independent() -> None:
    ledger = CaptureLedger()
    ledger.record(Color.WHITE, Piece.from_fen("p"))
    copied = ledger.copy()
    copied.record(Color.WHITE, Piece.from_fen("n"))
    assert ledger.count(Color.WHITE) == 1
    assert copied.count(Color.WHITE) == 2


def test_fen_encoding() -> None:
    ledger = CaptureLedger()
    ledger.record(Color.WHITE, Piece.from_fen("p"))
    ledger.record(Color.WHITE, Piece.from_fen("n"))
    ledger.record(Color.BLACK, Piece.from_fen("Q"))
    encoded = ledger.to_fen()
    assert encoded == {"white": "pn", "black": "Q"}
    assert CaptureLedger.from_fen(encoded) == ledger
