"""
Sample Game - A minimal game state and cost rules over the sample cards.

This is not a rules engine. It holds just enough state (hands, tableaus,
chips, goods) to answer the console's queries and to drive the demo.

Setup:
- Player 1 starts with the start world, the others with the next unused world
- Everyone also starts with a world that can hold goods, while any are left
- Every player is dealt a hand from the shuffled remaining cards
- A seed makes the deal deterministic
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random

from ...interfaces.cards import CardFlag, CardType, GoodType, VpBonus, VpCondition
from ...interfaces.engine import (
    FORCED_REGULAR,
    CostEngine,
    GameView,
    MilitaryBreakdown,
    VpBreakdown,
)
from .cards import CardTable


@dataclass
class SamplePlayer:
    """State of one player."""
    name: str
    hand: list[int] = field(default_factory=list)
    tableau: list[int] = field(default_factory=list)
    chips: int = 0
    goals: int = 0
    prestige: int = 0
    temp_military: int = 0


class SampleGame(GameView):
    """Read-only game view over SamplePlayer records."""

    def __init__(self, cards: CardTable, players: list[SamplePlayer]):
        self.cards = cards
        self.players = players

    @property
    def num_players(self) -> int:
        return len(self.players)

    def player_name(self, who: int) -> str:
        return self.players[who].name

    def hand(self, who: int) -> list[int]:
        return list(self.players[who].hand)

    def tableau(self, who: int) -> list[int]:
        return list(self.players[who].tableau)

    def vp_breakdown(self, who: int) -> VpBreakdown:
        player = self.players[who]
        breakdown = VpBreakdown(
            player_name=player.name,
            chips=player.chips,
            goals=player.goals,
            prestige=player.prestige,
        )
        for card_id in player.tableau:
            design = self.cards.design(card_id)
            if design.card_type == CardType.WORLD:
                breakdown.worlds += design.vp
            else:
                breakdown.developments += design.vp
            if design.vp_bonuses:
                points = sum(
                    self._bonus_points(bonus, player, card_id)
                    for bonus in design.vp_bonuses
                )
                breakdown.bonuses.append((design.name, points))
        return breakdown

    def military_breakdown(self, who: int) -> MilitaryBreakdown:
        player = self.players[who]
        base = sum(self.cards.record(card_id).military for card_id in player.tableau)
        return MilitaryBreakdown(
            player_name=player.name,
            base=base,
            temporary=player.temp_military,
        )

    def discount(self, who: int) -> int:
        return sum(
            self.cards.record(card_id).discount for card_id in self.players[who].tableau
        )

    def _bonus_points(self, bonus: VpBonus, player: SamplePlayer, source: int) -> int:
        """Points for one bonus clause; conditions the sample cards never use score 0."""
        designs = [self.cards.design(card_id) for card_id in player.tableau]
        worlds = [d for d in designs if d.is_world]
        devels = [d for d in designs if not d.is_world]

        if bonus.condition == VpCondition.WORLD:
            count = len(worlds)
        elif bonus.condition == VpCondition.DEVEL:
            count = len(devels)
        elif bonus.condition == VpCondition.SIX_DEVEL:
            count = sum(
                1 for card_id in player.tableau
                if card_id != source
                and not self.cards.design(card_id).is_world
                and self.cards.design(card_id).cost == 6
            )
        elif bonus.condition == VpCondition.MILITARY:
            count = sum(1 for d in worlds if d.is_military)
        elif bonus.condition == VpCondition.NONMILITARY_WORLD:
            count = sum(1 for d in worlds if not d.is_military)
        elif bonus.condition == VpCondition.IMPERIUM_FLAG:
            count = sum(1 for d in designs if d.flags & CardFlag.IMPERIUM)
        elif bonus.condition == VpCondition.REBEL_FLAG:
            count = sum(1 for d in designs if d.flags & CardFlag.REBEL)
        elif bonus.condition in PRODUCTION_GOODS:
            good, windfall = PRODUCTION_GOODS[bonus.condition]
            count = sum(
                1 for d in worlds
                if d.good_type == good and bool(d.flags & CardFlag.WINDFALL) == windfall
            )
        else:
            count = 0
        return bonus.points * count


# Production/windfall conditions: (good type, is windfall)
PRODUCTION_GOODS = {
    VpCondition.NOVELTY_PRODUCTION: (GoodType.NOVELTY, False),
    VpCondition.RARE_PRODUCTION: (GoodType.RARE, False),
    VpCondition.GENE_PRODUCTION: (GoodType.GENE, False),
    VpCondition.ALIEN_PRODUCTION: (GoodType.ALIEN, False),
    VpCondition.NOVELTY_WINDFALL: (GoodType.NOVELTY, True),
    VpCondition.RARE_WINDFALL: (GoodType.RARE, True),
    VpCondition.GENE_WINDFALL: (GoodType.GENE, True),
    VpCondition.ALIEN_WINDFALL: (GoodType.ALIEN, True),
}


class SampleCostEngine(CostEngine):
    """
    Simplified cost rules.

    - Developments and peaceful worlds cost their printed cost minus the
      tableau discount
    - Paying for a military world costs one less than that, minus mil_bonus
    - The payment is forced when there are no special cards and the hand
      holds exactly the cost
    """

    def __init__(self, game: SampleGame):
        self.game = game

    def development_cost(self, who: int, card_id: int) -> int:
        return max(0, self.game.cards.design(card_id).cost - self.discount(who, card_id))

    def discount(self, who: int, card_id: int) -> int:
        return self.game.discount(who)

    def military_world_payment(
        self, who: int, card_id: int, mil_only: bool, mil_bonus: int
    ) -> int:
        cost = self.game.cards.design(card_id).cost - self.discount(who, card_id)
        return max(0, cost - 1 - mil_bonus)

    def peaceful_world_payment(self, who: int, card_id: int, mil_only: bool) -> int:
        return max(0, self.game.cards.design(card_id).cost - self.discount(who, card_id))

    def compute_forced_choice(
        self,
        who: int,
        card_id: int,
        num_regular: int,
        num_special: int,
        mil_only: bool,
        mil_bonus: int,
    ) -> int:
        design = self.game.cards.design(card_id)
        if design.card_type == CardType.DEVELOPMENT:
            cost = self.development_cost(who, card_id)
        elif design.is_military or mil_only:
            cost = self.military_world_payment(who, card_id, mil_only, mil_bonus)
        else:
            cost = self.peaceful_world_payment(who, card_id, mil_only)

        if cost > 0 and num_special == 0 and num_regular == cost:
            return FORCED_REGULAR
        return 0


def setup_sample_game(
    cards: CardTable,
    player_names: list[str],
    hand_size: int = 6,
    random_seed: int | None = None,
) -> SampleGame:
    """
    Deal a sample game.

    Args:
        cards: Card table to deal from
        player_names: One name per player (2-6)
        hand_size: Cards dealt to each player
        random_seed: Seed for a deterministic deal
    """
    if not 2 <= len(player_names) <= 6:
        raise ValueError("Sample game supports 2-6 players")

    rng = random.Random(random_seed)
    starts = [cid for cid in range(len(cards)) if cards.design(cid).flags & CardFlag.START]
    worlds = [cid for cid in range(len(cards)) if cards.design(cid).is_world and cid not in starts]
    producers = [cid for cid in worlds if cards.design(cid).good_type is not None]

    players: list[SamplePlayer] = []
    used: set[int] = set()
    for i, name in enumerate(player_names):
        candidates = starts if i == 0 and starts else worlds
        tableau = []
        start = next((cid for cid in candidates if cid not in used), None)
        if start is not None:
            used.add(start)
            tableau.append(start)

        # Second world that holds goods, while any are left
        producer = next((cid for cid in producers if cid not in used), None)
        if producer is not None:
            used.add(producer)
            tableau.append(producer)

        players.append(SamplePlayer(name=name, tableau=tableau))

    deck = [cid for cid in range(len(cards)) if cid not in used]
    rng.shuffle(deck)
    for player in players:
        player.hand = deck[:hand_size]
        deck = deck[hand_size:]

    return SampleGame(cards, players)
