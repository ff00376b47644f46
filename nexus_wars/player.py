from __future__ import annotations

from dataclasses import dataclass, field

from .config import config
from .piece import Piece
from .types import PieceType, PlayerId

PLAYER_NAMES = {PlayerId.PLAYER: "Player", PlayerId.AI: "AI Opponent"}


@dataclass(slots=True)
class Player:
    player_id: PlayerId
    home_base: int
    opponent_home_base: int
    name: str = ""
    pieces: list[Piece] = field(init=False)
    controlled_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = PLAYER_NAMES[self.player_id]
        pid = self.player_id.value
        self.pieces = [
            Piece(
                piece_id=f"{pid}_CHAMPION",
                piece_type=PieceType.CHAMPION,
                owner=self.player_id,
                position=self.home_base,
            )
        ]
        self.pieces.extend(
            Piece(
                piece_id=f"{pid}_WARRIOR_{i}",
                piece_type=PieceType.WARRIOR,
                owner=self.player_id,
                position=self.home_base,
            )
            for i in range(config.WARRIORS_PER_PLAYER)
        )

    @property
    def champion(self) -> Piece:
        return self.pieces[0]

    @property
    def warriors(self) -> list[Piece]:
        return self.pieces[1:]

    def piece(self, piece_id: str) -> Piece | None:
        for pc in self.pieces:
            if pc.piece_id == piece_id:
                return pc
        return None

    def positions(self) -> list[int]:
        return [p.position for p in self.pieces]

    def champion_arrived(self) -> bool:
        return self.champion.position == self.opponent_home_base


def create_players() -> dict[PlayerId, Player]:
    return {
        PlayerId.PLAYER: Player(
            player_id=PlayerId.PLAYER,
            home_base=config.PLAYER_HOME_BASE,
            opponent_home_base=config.AI_HOME_BASE,
        ),
        PlayerId.AI: Player(
            player_id=PlayerId.AI,
            home_base=config.AI_HOME_BASE,
            opponent_home_base=config.PLAYER_HOME_BASE,
        ),
    }
