"""
Selection Cursor - Keyboard/pointer selection over the rendered suggestions.

A new cursor is created for every delivered list; index identity is never
carried over between lists.
"""


class SelectionCursor:
    """Clamped selection index over a list of `size` rows (-1 = nothing)."""

    def __init__(self, size: int = 0):
        self.size = size
        self.selected_index = -1
        self.reset()

    def reset(self) -> None:
        """Pre-select the first row so Enter always has a target."""
        self.selected_index = 0 if self.size > 0 else -1

    def move_down(self) -> None:
        if self.size == 0:
            return
        self.selected_index = min(self.selected_index + 1, self.size - 1)

    def move_up(self) -> None:
        if self.size == 0:
            return
        self.selected_index = max(self.selected_index - 1, 0)

    def activate(self, index: int) -> bool:
        """Select `index` (pointer hover). Out-of-range indexes are ignored."""
        if 0 <= index < self.size:
            self.selected_index = index
            return True
        return False
