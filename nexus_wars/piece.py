from dataclasses import dataclass

from .types import PieceType, PlayerId


@dataclass(slots=True)
class Piece:
    """Lightweight piece model. Holds state only.

    Legality, bumping and captures are handled by the engine; occupancy
    bookkeeping is handled by the Board.
    """

    piece_id: str  # e.g. "AI_WARRIOR_3"
    piece_type: PieceType
    owner: PlayerId
    position: int  # 1..20
    traveled: int = 0

    @property
    def is_champion(self) -> bool:
        return self.piece_type is PieceType.CHAMPION

    def move_to(self, new_position: int, steps: int) -> None:
        self.position = new_position
        self.traveled += steps

    def send_home(self, home_base: int) -> None:
        self.position = home_base
        self.traveled = 0
