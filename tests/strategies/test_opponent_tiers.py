import unittest

from nexus_wars import engine
from nexus_wars.ai import (
    GreedyStrategy,
    Opponent,
    PositionalStrategy,
    RandomStrategy,
    available,
    create,
    decide_draft,
    decide_move,
)
from nexus_wars.types import Difficulty, Phase, PlayerId

P = PlayerId.PLAYER
A = PlayerId.AI


def enter_movement(game, mover, player_dice, ai_dice):
    game.draft.rolled = tuple(player_dice) + tuple(ai_dice)
    game.draft.available = []
    game.draft.drafted = {P: list(player_dice), A: list(ai_dice)}
    game.draft.drafter = None
    game.draft.complete = True
    game.movement.reset()
    game.movement.mover = mover
    game.phase = Phase.MOVEMENT


def place(game, piece_id, position):
    owner = A if piece_id.startswith("AI_") else P
    piece = game.player(owner).piece(piece_id)
    game.board.relocate(piece, position)
    return piece


def control(game, index, player_id):
    game.board.space(index).controller = player_id
    game.recompute_control()


def offer(game, values):
    """Put the game in a DRAFT turn for the AI with ``values`` on offer."""
    game.draft.available = list(values)
    game.draft.drafter = A


def snapshot(game):
    return (
        [(p.piece_id, p.position, p.traveled) for p in game.all_pieces()],
        list(game.draft.available),
        {pid: list(v) for pid, v in game.draft.drafted.items()},
        game.movement.selected_slot,
        list(game.log_messages()),
    )


class TestEasyStrategy(unittest.TestCase):
    def setUp(self):
        self.game = engine.create_game(seed=21)

    def test_draft_index_in_range(self):
        strategy = RandomStrategy(rng_seed=1)
        for _ in range(50):
            index = strategy.decide_draft(self.game)
            self.assertTrue(0 <= index < len(self.game.draft.available))

    def test_seeded_choices_repeat(self):
        a = RandomStrategy(rng_seed=5)
        b = RandomStrategy(rng_seed=5)
        self.assertEqual(
            [a.decide_draft(self.game) for _ in range(10)],
            [b.decide_draft(self.game) for _ in range(10)],
        )

    def test_move_is_legal(self):
        enter_movement(self.game, A, [2, 3], [4, 5])
        legal = engine.all_legal_moves(self.game, A)
        decision = RandomStrategy(rng_seed=2).decide_move(self.game)
        self.assertIn(decision, legal)


class TestMediumStrategy(unittest.TestCase):
    def setUp(self):
        self.game = engine.create_game(seed=22)
        self.strategy = GreedyStrategy()

    def test_drafts_exact_champion_finish(self):
        place(self.game, "AI_CHAMPION", 17)
        offer(self.game, [6, 4, 2])
        self.assertEqual(self.strategy.decide_draft(self.game), 1)

    def test_drafts_first_highest_otherwise(self):
        place(self.game, "AI_CHAMPION", 17)
        offer(self.game, [3, 6, 6])
        self.assertEqual(self.strategy.decide_draft(self.game), 1)

    def test_champion_too_far_takes_highest(self):
        offer(self.game, [2, 5, 1])
        self.assertEqual(self.strategy.decide_draft(self.game), 1)

    def test_takes_instant_win(self):
        for pid in [f"PLAYER_WARRIOR_{i}" for i in range(6)] + ["PLAYER_CHAMPION"]:
            place(self.game, pid, 2)
        place(self.game, "AI_CHAMPION", 17)
        enter_movement(self.game, A, [1], [6, 4])
        decision = self.strategy.decide_move(self.game)
        self.assertEqual(decision.piece_id, "AI_CHAMPION")
        self.assertEqual(decision.target, 1)
        self.assertEqual(decision.die_value, 4)

    def test_prefers_capture(self):
        enter_movement(self.game, A, [2], [1])
        decision = self.strategy.decide_move(self.game)
        self.assertEqual(decision.piece_id, "AI_WARRIOR_0")
        self.assertEqual(decision.target, 12)

    def test_prefers_bump_over_plain_step(self):
        control(self.game, 12, A)
        place(self.game, "PLAYER_WARRIOR_0", 13)
        place(self.game, "AI_WARRIOR_0", 12)
        enter_movement(self.game, A, [3], [1])
        decision = self.strategy.decide_move(self.game)
        self.assertEqual(decision.piece_id, "AI_WARRIOR_0")
        self.assertEqual(decision.target, 13)

    def test_ignores_bump_blocked_by_strength(self):
        control(self.game, 12, A)
        control(self.game, 9, P)
        place(self.game, "PLAYER_WARRIOR_0", 13)
        place(self.game, "AI_WARRIOR_0", 12)
        enter_movement(self.game, A, [3], [1])
        decision = self.strategy.decide_move(self.game)
        self.assertNotEqual(decision.piece_id, "AI_WARRIOR_0")


class TestHardStrategy(unittest.TestCase):
    def setUp(self):
        self.game = engine.create_game(seed=23)
        self.strategy = PositionalStrategy()

    def test_drafts_for_captures(self):
        offer(self.game, [6, 4])
        self.assertEqual(self.strategy.decide_draft(self.game), 1)
        self.assertEqual(GreedyStrategy().decide_draft(self.game), 0)

    def test_keeps_champion_away_from_enemies(self):
        place(self.game, "PLAYER_WARRIOR_0", 15)
        enter_movement(self.game, A, [2], [3])
        hard = self.strategy.decide_move(self.game)
        medium = GreedyStrategy().decide_move(self.game)
        self.assertEqual(medium.piece_id, "AI_CHAMPION")
        self.assertNotEqual(hard.piece_id, "AI_CHAMPION")
        self.assertEqual(hard.target, 14)

    def test_advances_champion_when_safe(self):
        enter_movement(self.game, A, [2], [3])
        decision = self.strategy.decide_move(self.game)
        self.assertEqual(decision.piece_id, "AI_CHAMPION")

    def test_power_value_breaks_capture_ties(self):
        # Speed (15) outranks Barriers (7) when both captures are one step away
        place(self.game, "AI_WARRIOR_0", 16)
        place(self.game, "AI_WARRIOR_1", 1)
        for pid in [f"AI_WARRIOR_{i}" for i in range(2, 6)] + ["AI_CHAMPION"]:
            place(self.game, pid, 5)
        for pid in [f"PLAYER_WARRIOR_{i}" for i in range(6)] + ["PLAYER_CHAMPION"]:
            place(self.game, pid, 19)
        enter_movement(self.game, A, [1], [2])
        decision = self.strategy.decide_move(self.game)
        self.assertEqual(decision.piece_id, "AI_WARRIOR_1")
        self.assertEqual(decision.target, 3)
        self.assertEqual(GreedyStrategy().decide_move(self.game).piece_id, "AI_WARRIOR_0")


class TestStrategyContract(unittest.TestCase):
    def setUp(self):
        self.game = engine.create_game(seed=24)

    def test_empty_pool_returns_none(self):
        self.game.draft.available = []
        for name in available():
            self.assertIsNone(create(name).decide_draft(self.game))

    def test_no_legal_move_returns_none(self):
        enter_movement(self.game, P, [1], [])
        for name in available():
            self.assertIsNone(create(name).decide_move(self.game))

    def test_decisions_do_not_mutate(self):
        before = snapshot(self.game)
        for difficulty in Difficulty:
            decide_draft(self.game, difficulty, P)
        self.assertEqual(snapshot(self.game), before)

        enter_movement(self.game, A, [2, 3], [4, 5])
        before = snapshot(self.game)
        for difficulty in Difficulty:
            decide_move(self.game, difficulty)
        self.assertEqual(snapshot(self.game), before)

    def test_decisions_are_accepted_by_engine(self):
        for difficulty in Difficulty:
            game = engine.create_game(seed=25)
            seat = Opponent(difficulty, P, rng_seed=3)
            engine.draft(game, P, seat.decide_draft(game))
            self.assertEqual(game.draft.drafter, A)


class TestRegistry(unittest.TestCase):
    def test_lookup_by_name_or_enum(self):
        self.assertIsInstance(create("easy"), RandomStrategy)
        self.assertIsInstance(create(Difficulty.MEDIUM), GreedyStrategy)
        self.assertIsInstance(create("HARD"), PositionalStrategy)

    def test_unknown_difficulty(self):
        with self.assertRaises(KeyError):
            create("impossible")

    def test_available_lists_tiers(self):
        self.assertEqual(set(available()), {"easy", "medium", "hard"})

    def test_opponent_accepts_strings(self):
        opponent = Opponent("Hard")
        self.assertIs(opponent.difficulty, Difficulty.HARD)
        self.assertIsInstance(opponent.strategy, PositionalStrategy)
        self.assertIs(opponent.player_id, A)

    def test_easy_opponent_is_seeded(self):
        game = engine.create_game(seed=26)
        a = Opponent(Difficulty.EASY, rng_seed=9)
        b = Opponent(Difficulty.EASY, rng_seed=9)
        game.draft.drafter = A
        self.assertEqual(
            [a.decide_draft(game) for _ in range(8)],
            [b.decide_draft(game) for _ in range(8)],
        )


if __name__ == "__main__":
    unittest.main()
