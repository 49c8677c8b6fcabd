"""BoardScene — QGraphicsScene that draws the holes and marbles."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import CellState
from marble_solitaire.core.types import Position
from marble_solitaire.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders playable cells, marbles and the selection highlight.

    The scene holds no game logic: it mirrors whatever board it is given
    and reports clicks as board positions.

    Signals:
        cell_clicked(Position): Emitted for a left click on any grid cell.
    """

    cell_clicked = pyqtSignal(object)

    TILE = 80  # px per cell
    CELL_SCALE = 0.9  # hole size relative to the tile
    MARBLE_SCALE = 0.85  # marble size relative to the hole

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._selection: Position | None = None
        self._interactive = True

        # Visual layers
        self._cell_items: dict[Position, QGraphicsRectItem] = {}
        self._marble_items: dict[Position, QGraphicsEllipseItem] = {}

        self.setBackgroundBrush(QBrush(self._theme.background))

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Update the displayed board; cells are redrawn only on a layout change."""
        new_layout = self._board is None or not self._board.same_layout(board)
        self._board = board.copy()
        if new_layout:
            self.setSceneRect(0, 0, board.size * self.TILE, board.size * self.TILE)
            self._draw_cells()
        self._sync_marbles()

    def set_selection(self, selection: Position | None) -> None:
        """Highlight *selection* (or nothing)."""
        self._selection = selection
        self._refresh_cell_colors()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click reporting."""
        self._interactive = interactive
        self._refresh_cell_colors()

    def is_interactive(self) -> bool:
        return self._interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self.setBackgroundBrush(QBrush(theme.background))
        if self._board is not None:
            self._draw_cells()
            self._sync_marbles()

    # ── Drawing ──────────────────────────────────────────────────────────

    def _draw_cells(self) -> None:
        """Draw or redraw one square per playable cell."""
        for item in self._cell_items.values():
            self.removeItem(item)
        self._cell_items.clear()

        if self._board is None:
            return

        t = self.TILE
        side = t * self.CELL_SCALE
        inset = (t - side) / 2
        for pos in self._board.positions():
            if self._board[pos] == CellState.INVALID:
                continue
            rect = QGraphicsRectItem(pos.col * t + inset, pos.row * t + inset, side, side)
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._cell_items[pos] = rect
        self._refresh_cell_colors()

    def _refresh_cell_colors(self) -> None:
        for pos, rect in self._cell_items.items():
            highlighted = pos == self._selection and self._interactive
            color = self._theme.cell_selected if highlighted else self._theme.cell
            rect.setBrush(QBrush(color))

    def _sync_marbles(self) -> None:
        """Re-create all marble items from the current board."""
        for item in self._marble_items.values():
            self.removeItem(item)
        self._marble_items.clear()

        if self._board is None:
            return

        t = self.TILE
        diameter = t * self.CELL_SCALE * self.MARBLE_SCALE
        inset = (t - diameter) / 2
        for pos in self._board.marbles():
            item = QGraphicsEllipseItem(
                pos.col * t + inset, pos.row * t + inset, diameter, diameter
            )
            item.setBrush(QBrush(self._theme.marble))
            item.setPen(QPen(self._theme.marble_outline, 2))
            item.setZValue(1)
            self.addItem(item)
            self._marble_items[pos] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            not self._interactive
            or self._board is None
            or event is None
            or event.button() != Qt.MouseButton.LeftButton
        ):
            return super().mousePressEvent(event)

        pos = self._pos_to_cell(event.scenePos())
        if pos is not None:
            self.cell_clicked.emit(pos)
            return
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_cell(self, point: QPointF) -> Position | None:
        """Scene position → board cell."""
        if self._board is None:
            return None
        t = self.TILE
        col = int(point.x() // t)
        row = int(point.y() // t)
        pos = Position(row, col)
        if not pos.is_within(self._board.size):
            return None
        return pos
