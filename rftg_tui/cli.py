"""
rftg-tui CLI - Command-line interface for the console front end.

Usage:
    rftg-tui card <name>           Show the detail view of a card
    rftg-tui demo                  Play a few decisions against the sample game
    rftg-tui menu                  Run the new game menu

Quitting ('q') from any prompt exits cleanly with status 0.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import load_settings
from .console import ChoicePrompt, CommandRouter, Console
from .display import card_detail_lines
from .errors import ControlSignal, UserQuit
from .games.sample import (
    SampleCostEngine,
    load_card_table,
    sample_card_table,
    setup_sample_game,
)
from .interfaces import Action, CardType
from .session import ConsoleInterface, NewGameMenu

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="rftg-tui - Console choices for a tableau card game",
        prog="rftg-tui",
    )
    parser.add_argument("--settings", help="Path to a JSON settings file")
    parser.add_argument("--log-level", help="Logging level (default from settings)")
    parser.add_argument("--max-line-length", type=int, help="Longest accepted input line")
    parser.add_argument("--cards", help="Path to a JSON card file (default: sample cards)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Card command
    card_parser = subparsers.add_parser("card", help="Show the detail view of a card")
    card_parser.add_argument("name", help="Card name")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Play decisions against the sample game")
    demo_parser.add_argument("--players", type=int, default=2, help="Number of players")
    demo_parser.add_argument("--seed", type=int, default=None, help="Seed for the deal")

    # Menu command
    subparsers.add_parser("menu", help="Run the new game menu")

    args = parser.parse_args(argv)

    console = Console()
    try:
        settings = load_settings(args.settings).with_overrides(
            log_level=args.log_level,
            max_line_length=args.max_line_length,
        )
    except FileNotFoundError:
        console.write(f"Error: File not found: {args.settings}")
        sys.exit(1)
    except ValidationError as e:
        console.write(f"Error: Invalid settings: {e}")
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "card":
            cmd_card(args, console)
        elif args.command == "demo":
            cmd_demo(args, console, settings)
        elif args.command == "menu":
            cmd_menu(console, settings)
        else:
            parser.print_help()
            sys.exit(1)
    except UserQuit:
        console.write("Quitting...")
        sys.exit(0)
    except ControlSignal as e:
        console.write(f"'{e.outcome.value}' is not available here.")
        sys.exit(0)


def _card_table(args, console):
    if not args.cards:
        return sample_card_table()
    try:
        return load_card_table(args.cards)
    except FileNotFoundError:
        console.write(f"Error: File not found: {args.cards}")
        sys.exit(1)
    except ValidationError as e:
        console.write(f"Error: Invalid card file {args.cards}: {e}")
        sys.exit(1)


def cmd_card(args, console):
    """Show one card's detail view."""
    cards = _card_table(args, console)
    try:
        card_id = cards.find(args.name)
    except KeyError as e:
        console.write(f"Error: {e.args[0]}")
        sys.exit(1)
    console.write_lines(card_detail_lines(cards, card_id))


def cmd_demo(args, console, settings):
    """Play a short sequence of decisions for player 1."""
    cards = _card_table(args, console)
    names = ["You"] + [f"Opponent {i}" for i in range(1, args.players)]
    game = setup_sample_game(cards, names, random_seed=args.seed)
    costs = SampleCostEngine(game)
    ui = ConsoleInterface(console, cards, costs, game=game, settings=settings)
    me = game.players[0]

    actions = [Action.EXPLORE_5_0, Action.EXPLORE_1_1, Action.DEVELOP, Action.SETTLE,
               Action.CONSUME_TRADE, Action.CONSUME_X2, Action.PRODUCE]
    chosen = ui.choose_action(0, actions, 1)
    console.write(f"You selected {chosen[0].value}.")

    discarded = ui.choose_discard(0, me.hand, 2)
    me.hand = [cid for cid in me.hand if cid not in discarded.chosen]
    console.write(f"Discarded {len(discarded.chosen)} cards, {len(me.hand)} left in hand.")

    # Only developments the rest of the hand can pay for
    developments = [
        cid for cid in me.hand
        if cards.design(cid).card_type == CardType.DEVELOPMENT
        and costs.development_cost(0, cid) <= len(me.hand) - 1
    ]
    if developments:
        placed = ui.choose_place(0, developments, Action.DEVELOP)
        if placed is not None:
            me.hand.remove(placed)
            payment = ui.choose_pay(0, placed, me.hand, [])
            me.hand = [cid for cid in me.hand if cid not in payment.regular]
            me.tableau.append(placed)
            console.write(f"Placed {cards.name(placed)} paying {payment.paid} cards.")

    # One good on every world that can hold one, two on the first
    worlds = [cid for cid in me.tableau if cards.design(cid).good_type is not None]
    for cid in worlds:
        cards.goods[cid] = 1
    if worlds:
        cards.goods[worlds[0]] = 2
        result = ui.choose_good(
            0, "Consume: 1 good for 1 VP", worlds, 1, 2,
            is_multi=lambda cid: cards.held_goods(cid) > 1,
        )
        me.chips += result.count
        console.write(f"Consumed {result.count} goods for {result.count} VP.")

    logger.info("Demo finished")


def cmd_menu(console, settings):
    """Run the new game menu and print the chosen options."""
    prompt = ChoicePrompt(console, CommandRouter(console), settings)
    options = NewGameMenu(console, prompt).run()
    console.write(f"Players: {options.num_players}")
    console.write(f"Expansion: {options.expansion}")
    console.write(f"Advanced: {'yes' if options.advanced else 'no'}")
    console.write(f"Goals disabled: {'yes' if options.disable_goals else 'no'}")
    console.write(f"Takeovers disabled: {'yes' if options.disable_takeovers else 'no'}")


if __name__ == "__main__":
    main()
