import logging
from typing import List, Optional, Set


logger = logging.getLogger(__name__)

MAX_OPACITY = 1.0
MIN_COLUMN_OPACITY = 0.2


def mirrored_index(index: int, column_count: int) -> int:
    """Index of the same category in the other series of a two-sided chart.

    Columns are laid out series-major, so the counterpart is half the column
    list away.
    """
    half = column_count // 2
    return index + half if index < half else index - half


class SelectionState:
    """Highlight state: ``Unselected`` or ``Selected(index)``.

    Driven by two events, a bar click and a background click. The state
    survives layout updates; only a background click (or ``clear``) resets it.

    Examples:
        state = SelectionState()
        state.bar_clicked(1)
        state.opacities(column_count=4, two_sided=True)   # [0.2, 1.0, 0.2, 1.0]
        state.background_clicked()
        state.is_selected                                   # False
    """

    def __init__(self, min_opacity: float = MIN_COLUMN_OPACITY):
        self.min_opacity = min_opacity
        self.index: Optional[int] = None

    @property
    def is_selected(self) -> bool:
        return self.index is not None

    def bar_clicked(self, index: int) -> None:
        if index < 0:
            raise ValueError(f"Column index must be non-negative, got {index}")
        logger.debug("Column %d selected", index)
        self.index = index

    def background_clicked(self) -> None:
        if self.index is not None:
            logger.debug("Selection cleared")
        self.index = None

    clear = background_clicked

    def highlighted(self, column_count: int, two_sided: bool) -> Set[int]:
        """Indices drawn at full opacity while a column is selected.

        Returns an empty set when nothing is selected or the stored index does
        not exist in the current layout.
        """
        if self.index is None or self.index >= column_count:
            return set()

        indices = {self.index}
        if two_sided:
            indices.add(mirrored_index(self.index, column_count))
        return indices

    def opacities(self, column_count: int, two_sided: bool) -> List[float]:
        highlighted = self.highlighted(column_count, two_sided)
        if not highlighted:
            return [MAX_OPACITY] * column_count

        return [
            MAX_OPACITY if index in highlighted else self.min_opacity
            for index in range(column_count)
        ]
