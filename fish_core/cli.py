"""
Russian Fish CLI - Terminal-based game interface
"""

import argparse
import os
import random
import sys
from typing import Optional, Tuple

from colorama import init, Fore, Style

from .card import Card, Suit
from .game import RussianFishGame, GamePhase
from .logging_utils import LOG_LEVEL, setup_logging
from .player import Seat, PLAY_ORDER

HUMAN_SEAT = Seat.SOUTH

SUIT_COLORS = {
    Suit.HEARTS: Fore.RED,
    Suit.DIAMONDS: Fore.RED,
    Suit.CLUBS: Fore.GREEN,
    Suit.SPADES: Fore.GREEN,
}


def format_card(card: Card) -> str:
    """Format a card for display"""
    return f"{card.rank}{SUIT_COLORS[card.suit]}{card.suit.symbol}{Style.RESET_ALL}"


def parse_move(text: str, hand_size: int) -> Tuple[str, Optional[int]]:
    """
    Parse a move typed by the player.

    Returns ("draw", None), ("play", index), ("quit", None) or ("invalid", None).
    """
    text = text.strip().lower()
    if text in ("d", "draw"):
        return "draw", None
    if text in ("q", "quit"):
        return "quit", None
    try:
        idx = int(text)
    except ValueError:
        return "invalid", None
    if 0 <= idx < hand_size:
        return "play", idx
    return "invalid", None


class RussianFishCLI:
    def __init__(self, seed: Optional[int] = None, auto: bool = False, pause: bool = True):
        human_seats = () if auto else (HUMAN_SEAT,)
        self.game = RussianFishGame("cli-game-001", human_seats=human_seats, rng=random.Random(seed))
        self.auto = auto
        self.pause = pause and not auto

    def clear_screen(self):
        if self.pause:
            os.system('clear' if os.name != 'nt' else 'cls')

    def print_banner(self):
        print(f"{Fore.CYAN}{'='*60}{Style.RESET_ALL}")
        print(f"{Fore.YELLOW}                    🐟 RUSSIAN FISH 🐟{Style.RESET_ALL}")
        print(f"{Fore.CYAN}{'='*60}{Style.RESET_ALL}\n")

    def display_table(self):
        """Display the table from the human seat"""
        state = self.game.state

        self.clear_screen()
        self.print_banner()

        for seat in PLAY_ORDER:
            player = state.players[seat]
            marker = f"{Fore.GREEN}▶{Style.RESET_ALL}" if seat == state.current_turn else " "
            print(f" {marker} {player.name:<10} {len(player.hand):2d} cards")
        print()

        top = state.top_card
        top_display = format_card(top) if top else "-"
        print(f"{Fore.MAGENTA}Deck: {len(state.deck)}   Top: {top_display}   "
              f"Suit: {state.active_suit.symbol} {state.active_suit}{Style.RESET_ALL}")
        if state.attack_stack > 0:
            print(f"{Fore.RED}Attack! +{state.attack_stack} owed{Style.RESET_ALL}")
        if state.announcement:
            print(f"{Fore.YELLOW}{state.announcement}{Style.RESET_ALL}")
        print()

        for line in state.log[-5:]:
            print(f"  {line}")
        print()

        if not self.auto:
            hand = state.players[HUMAN_SEAT].hand
            playable = {c.id for c in self.game.get_valid_moves(HUMAN_SEAT)}
            hand_str = "  ".join(
                f"[{i}] {format_card(card)}{'*' if card.id in playable else ''}"
                for i, card in enumerate(hand)
            )
            print(f"{Fore.CYAN}Your Hand:{Style.RESET_ALL}")
            print(f"  {hand_str}\n")

    def handle_human_move(self) -> bool:
        """Prompt until the player makes an accepted move. False means quit."""
        hand = self.game.state.players[HUMAN_SEAT].hand
        while True:
            owed = self.game.state.attack_stack or 1
            choice = input(f"Card number, [d]raw {owed}, or [q]uit: ")
            action, idx = parse_move(choice, len(hand))

            if action == "quit":
                return False
            if action == "draw":
                self.game.draw(HUMAN_SEAT)
                return True
            if action == "play":
                card = hand[idx]
                if self.game.play_card(HUMAN_SEAT, card.id) is not None:
                    return True
                print(f"{Fore.RED}You can't play {format_card(card)} now.{Style.RESET_ALL}")
                continue
            print(f"{Fore.RED}Invalid input.{Style.RESET_ALL}")

    def handle_suit_choice(self):
        """Handle choosing a suit after playing a Jack"""
        print(f"\n{Fore.YELLOW}Choose a suit:{Style.RESET_ALL}")
        for suit in Suit:
            print(f"  [{suit.value[0].upper()}] {SUIT_COLORS[suit]}{suit.symbol}{Style.RESET_ALL} {suit}")

        while True:
            choice = input("\nYour choice: ")
            try:
                suit = Suit.from_string(choice)
            except ValueError:
                print(f"{Fore.RED}Invalid suit.{Style.RESET_ALL}")
                continue
            self.game.choose_suit(HUMAN_SEAT, suit)
            return

    def run(self):
        """Main game loop"""
        self.game.start_new_game()

        while self.game.state.phase != GamePhase.GAME_OVER:
            self.display_table()
            phase = self.game.state.phase

            if phase == GamePhase.AWAITING_SUIT_CHOICE:
                self.handle_suit_choice()
            elif phase == GamePhase.AWAITING_HUMAN_MOVE:
                if not self.handle_human_move():
                    print(f"\n{Fore.YELLOW}Thanks for playing!{Style.RESET_ALL}")
                    return
            else:
                if self.pause:
                    input(f"{self.game.state.get_current_player().name} is thinking... (Press Enter)")
                self.game.step_ai()

        self.display_table()
        winner = self.game.state.players[self.game.state.winner]
        print(f"\n{Fore.MAGENTA}GAME OVER!{Style.RESET_ALL}")
        print(f"{Fore.GREEN}{winner.name} won the game!{Style.RESET_ALL}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Russian Fish in the terminal")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the shuffle")
    parser.add_argument("--auto", action="store_true", help="Let four AI players play a game")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    init(autoreset=True)
    setup_logging(args.log_level)

    cli = RussianFishCLI(seed=args.seed, auto=args.auto)
    try:
        cli.run()
    except (KeyboardInterrupt, EOFError):
        print(f"\n\n{Fore.YELLOW}Game interrupted. Thanks for playing!{Style.RESET_ALL}")
        sys.exit(0)


if __name__ == "__main__":
    main()
