"""Tests for scoring and progress."""

from whitehouse.engine.mechanics.context import GameContext


def test_award_once_is_idempotent(ctx: GameContext):
    assert ctx.scoring.award_once("treasure_found", 10)
    assert not ctx.scoring.award_once("treasure_found", 10)
    assert ctx.state.score == 10


def test_zero_point_events_are_not_marked(ctx: GameContext):
    assert not ctx.scoring.award_once("nothing", 0)
    assert not ctx.flags.has_flag("nothing_scored")


def test_penalties(ctx: GameContext):
    ctx.scoring.add_score(5)
    ctx.scoring.add_score(-2)
    assert ctx.state.score == 3


def test_summary(ctx: GameContext):
    ctx.scoring.add_score(4)
    ctx.progress.increment_turns()
    assert ctx.scoring.summary() == "Your score is 4 out of a possible 20, in 1 turns."


def test_victory_when_all_treasures_in_trophy_container(ctx: GameContext):
    assert not ctx.scoring.check_victory()
    ctx.state.object_data["box"]["contents"].append("coin")
    assert ctx.scoring.check_victory()
    assert ctx.state.game_won
