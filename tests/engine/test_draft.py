import unittest

from nexus_wars import engine
from nexus_wars.ai import Opponent
from nexus_wars.errors import IndexOutOfRange, InvalidPhase, WrongTurn
from nexus_wars.types import Difficulty, Phase, PlayerId


def pool_size(game):
    return len(game.draft.available) + sum(len(d) for d in game.draft.drafted.values())


def control(game, index, player_id):
    game.board.space(index).controller = player_id
    game.recompute_control()


class TestDraft(unittest.TestCase):
    def setUp(self):
        self.game = engine.create_game(seed=5)

    def draft_all(self, index=0):
        while self.game.phase is Phase.DRAFT:
            engine.draft(self.game, self.game.draft.drafter, index)

    def test_draft_moves_die_to_player(self):
        first = self.game.draft.available[2]
        value = engine.draft(self.game, PlayerId.PLAYER, 2)
        self.assertEqual(value, first)
        self.assertEqual(self.game.draft.drafted[PlayerId.PLAYER], [first])
        self.assertEqual(len(self.game.draft.available), 4)
        self.assertEqual(self.game.draft.drafter, PlayerId.AI)

    def test_pool_partition_holds_every_step(self):
        rolled = len(self.game.draft.rolled)
        while self.game.phase is Phase.DRAFT:
            self.assertEqual(pool_size(self.game), rolled)
            engine.draft(self.game, self.game.draft.drafter, len(self.game.draft.available) - 1)
        self.assertEqual(pool_size(self.game), rolled)
        drafted = sorted(
            self.game.draft.drafted[PlayerId.PLAYER]
            + self.game.draft.drafted[PlayerId.AI]
            + self.game.draft.available
        )
        self.assertEqual(drafted, sorted(self.game.draft.rolled))

    def test_draft_ends_three_two(self):
        order = []
        while self.game.phase is Phase.DRAFT:
            order.append(self.game.draft.drafter)
            engine.draft(self.game, self.game.draft.drafter, 0)
        self.assertEqual(
            order,
            [PlayerId.PLAYER, PlayerId.AI, PlayerId.PLAYER, PlayerId.AI, PlayerId.PLAYER],
        )
        self.assertEqual(len(self.game.draft.drafted[PlayerId.PLAYER]), 3)
        self.assertEqual(len(self.game.draft.drafted[PlayerId.AI]), 2)
        self.assertTrue(self.game.draft.complete)
        self.assertEqual(self.game.phase, Phase.MOVEMENT)
        self.assertEqual(self.game.movement.mover, PlayerId.PLAYER)

    def test_sixth_draft_fails_invalid_phase(self):
        self.draft_all()
        with self.assertRaises(InvalidPhase):
            engine.draft(self.game, PlayerId.PLAYER, 0)

    def test_wrong_turn_leaves_state_untouched(self):
        before = list(self.game.draft.available)
        with self.assertRaises(WrongTurn):
            engine.draft(self.game, PlayerId.AI, 0)
        self.assertEqual(self.game.draft.available, before)
        self.assertEqual(self.game.draft.drafted[PlayerId.AI], [])

    def test_index_out_of_range(self):
        with self.assertRaises(IndexOutOfRange):
            engine.draft(self.game, PlayerId.PLAYER, 5)
        with self.assertRaises(IndexOutOfRange):
            engine.draft(self.game, PlayerId.PLAYER, -1)
        self.assertEqual(len(self.game.draft.available), 5)
        self.assertEqual(self.game.draft.drafter, PlayerId.PLAYER)

    def test_drafted_order_is_insertion_order(self):
        values = []
        while self.game.phase is Phase.DRAFT:
            pid = self.game.draft.drafter
            v = engine.draft(self.game, pid, 0)
            if pid is PlayerId.PLAYER:
                values.append(v)
        self.assertEqual(self.game.draft.drafted[PlayerId.PLAYER], values)

    def test_player_with_ai_auto_draft(self):
        opponent = Opponent(Difficulty.MEDIUM)
        while self.game.phase is Phase.DRAFT:
            if self.game.draft.drafter is PlayerId.PLAYER:
                engine.draft(self.game, PlayerId.PLAYER, 0)
            else:
                engine.draft(self.game, PlayerId.AI, opponent.decide_draft(self.game))
        self.assertEqual(len(self.game.draft.drafted[PlayerId.PLAYER]), 3)
        self.assertEqual(len(self.game.draft.drafted[PlayerId.AI]), 2)
        self.assertEqual(engine.current_phase(self.game), Phase.MOVEMENT)
        with self.assertRaises(InvalidPhase):
            engine.draft(self.game, PlayerId.PLAYER, 0)


class TestSpeedPower(unittest.TestCase):
    def setUp(self):
        self.game = engine.create_game(seed=9)

    def test_first_mover_with_speed_rolls_six(self):
        control(self.game, 3, PlayerId.PLAYER)
        engine.start_round(self.game)
        self.assertEqual(len(self.game.draft.rolled), 6)
        self.assertTrue(
            any("Nexus of Speed" in m for m in engine.log_messages(self.game))
        )

    def test_speed_draft_still_three_two(self):
        control(self.game, 3, PlayerId.PLAYER)
        engine.start_round(self.game)
        while self.game.phase is Phase.DRAFT:
            engine.draft(self.game, self.game.draft.drafter, 0)
        self.assertEqual(len(self.game.draft.drafted[PlayerId.PLAYER]), 3)
        self.assertEqual(len(self.game.draft.drafted[PlayerId.AI]), 2)
        self.assertEqual(len(self.game.draft.available), 1)
        self.assertEqual(pool_size(self.game), 6)

    def test_second_mover_speed_has_no_effect(self):
        control(self.game, 3, PlayerId.AI)
        engine.start_round(self.game)
        self.assertEqual(len(self.game.draft.rolled), 5)


if __name__ == "__main__":
    unittest.main()
