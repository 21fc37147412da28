"""
Terminal front end for a Spy Word game on one shared screen.
"""

import argparse
import asyncio
import logging
import os
import random
import threading
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from spyword.core import GameSession, GamePhase, AsyncioClock, InsufficientPlayersError, Outcome
from spyword.config import GameConfig, load_config
from spyword.content import CategorySource, MessageCatalog, MessageId, load_categories_from_yaml, load_messages_from_yaml
from spyword.events import EventEmitter, Celebration

logger = logging.getLogger(__name__)

SCREEN_BREAK = "\n" * 40  # Push the previous player's role off screen


class SpyWordGame:
    """Main game controller."""

    def __init__(self, config: Optional[GameConfig] = None,
                 content: Optional[CategorySource] = None,
                 messages: Optional[MessageCatalog] = None):
        self.config = config or load_config()

        # Generate seed if not provided
        if self.config.random_seed is None:
            self.config.random_seed = random.randint(0, 2**31 - 1)
        logger.info("Random seed: %s", self.config.random_seed)

        if content is None:
            content = (load_categories_from_yaml(self.config.categories_file)
                       if self.config.categories_file else CategorySource())
        if messages is None:
            messages = (load_messages_from_yaml(self.config.messages_file)
                        if self.config.messages_file else MessageCatalog())
        self.messages = messages

        self.event_emitter = EventEmitter([self._on_event])
        self.clock = AsyncioClock()
        self.session = GameSession(
            config=self.config,
            content=content,
            event_emitter=self.event_emitter,
            clock=self.clock,
        )

    def t(self, message_id: MessageId) -> str:
        """Get the display text for a message id."""
        return self.messages.get(message_id)

    def _on_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Print a banner for celebration events."""
        if event_type == Celebration.ROUND_STARTED.value:
            print(f"\n*** {data['category']}: go! ***")
        elif event_type == Celebration.SPY_CAUGHT.value:
            print(f"\n*** {data['name']} was caught! ***")
        elif event_type == Celebration.GAME_ENDED.value:
            print("\n*** Game over ***")

    async def ask(self, prompt: str) -> str:
        """
        Read a line without blocking the event loop, so the countdown keeps ticking.

        The read happens on a daemon thread: an interrupted game must not wait
        for a pending ``input()`` before the process can exit.
        """
        loop = asyncio.get_running_loop()
        answer = loop.create_future()

        def deliver(line: str) -> None:
            if not answer.done():
                answer.set_result(line)

        def read() -> None:
            try:
                line = input(prompt)
            except EOFError:
                line = "quit"
            try:
                loop.call_soon_threadsafe(deliver, line)
            except RuntimeError:
                # Loop already closed after an interrupt; nobody is waiting
                logger.debug("Dropped input read after the game loop closed")

        threading.Thread(target=read, name="spyword-input", daemon=True).start()
        line = await answer
        return line.strip()

    async def run(self) -> None:
        """Run screens until the players quit."""
        handlers = {
            GamePhase.SETUP: self.setup_screen,
            GamePhase.REVEAL: self.reveal_screen,
            GamePhase.PLAYING: self.playing_screen,
            GamePhase.VOTING: self.voting_screen,
            GamePhase.ELIMINATION_RESULT: self.elimination_screen,
            GamePhase.SUMMARY: self.summary_screen,
        }
        try:
            while True:
                keep_going = await handlers[self.session.phase]()
                if not keep_going:
                    break
        finally:
            self.clock.cancel()

    async def setup_screen(self) -> bool:
        session = self.session
        print("\n" + "=" * 60)
        print(f"{self.t(MessageId.PLAYERS)}:")
        for number, player in enumerate(session.roster, 1):
            print(f"  {number}. {player.name}")
        print(f"{self.t(MessageId.SPY_COUNT)}: {session.spy_count}")
        print("Type a name to add it, '-N' to remove player N, 'spies N', 'start' or 'quit'.")

        command = await self.ask(f"{self.t(MessageId.PLAYER_NAME_PLACEHOLDER)}> ")
        if command == "quit":
            return False
        if command == "start":
            try:
                session.start_round()
            except InsufficientPlayersError:
                print(self.t(MessageId.MIN_PLAYERS))
        elif command.startswith("spies "):
            count = command.split(maxsplit=1)[1]
            if not (count.isdigit() and session.set_spy_count(int(count))):
                print(f"Spy count must be between 1 and {self.config.max_spy_count}")
        elif command.startswith("-") and command[1:].isdigit():
            index = int(command[1:]) - 1
            roster = session.roster
            if 0 <= index < len(roster):
                session.remove_player(roster[index].id)
        else:
            session.add_player(command)
        return True

    async def reveal_screen(self) -> bool:
        session = self.session
        print(SCREEN_BREAK)
        player = session.current_player
        await self.ask(f"{self.t(MessageId.REVEAL_ROLE)} {player.name} [Enter] ")
        session.reveal_role()

        card = session.get_role_card()
        if card["is_spy"]:
            print(self.t(MessageId.YOU_ARE_SPY))
            print(self.t(MessageId.SPY_GOAL))
        else:
            print(f"{self.t(MessageId.YOUR_WORD)}: {card['word']}")
        await self.ask(f"{self.t(MessageId.NEXT_PLAYER)} [Enter] ")
        session.advance_to_next_player()
        print(SCREEN_BREAK)
        return True

    async def playing_screen(self) -> bool:
        session = self.session
        print("\n" + "=" * 60)
        print(f"{self.t(MessageId.CATEGORY)}: {session.category}")
        state = "" if session.timer_active else " (paused)"
        print(f"{self.t(MessageId.TIMER)}: {session.formatted_time}{state}")
        print(f"{self.t(MessageId.PLAYERS)}: " + ", ".join(
            p.name + (" (x)" if p.is_eliminated else "") for p in session.roster))
        command = await self.ask("[Enter] refresh, [t] timer, [v] vote, [e] end game> ")
        if command == "quit":
            return False
        if command == "t":
            session.toggle_timer()
        elif command == "v":
            session.start_voting()
        elif command == "e":
            session.end_game()
        return True

    async def voting_screen(self) -> bool:
        session = self.session
        print("\n" + self.t(MessageId.VOTE_TITLE))
        candidates = session.alive_players
        for number, player in enumerate(candidates, 1):
            print(f"  {number}. {player.name}")
        command = await self.ask(f"Number, or [b] {self.t(MessageId.BACK)}> ")
        if command == "quit":
            return False
        if command == "b":
            session.cancel_voting()
        elif command.isdigit() and 1 <= int(command) <= len(candidates):
            session.cast_vote(candidates[int(command) - 1].id)
        return True

    async def elimination_screen(self) -> bool:
        session = self.session
        voted = session.voted_player
        verdict = self.t(MessageId.WAS_SPY) if voted.is_spy else self.t(MessageId.WAS_NOT_SPY)
        print(f"\n{self.t(MessageId.ELIMINATED)}: {voted.name} {verdict}")
        await self.ask(f"{self.t(MessageId.CONTINUE_GAME)} [Enter] ")
        session.continue_after_elimination()
        return True

    async def summary_screen(self) -> bool:
        session = self.session
        print("\n" + "=" * 60)
        if session.outcome == Outcome.PLAYERS_WIN:
            print(self.t(MessageId.VICTORY_PLAYERS))
        elif session.outcome == Outcome.SPIES_WIN:
            print(self.t(MessageId.VICTORY_SPIES))

        spies = session.spy_players
        label = self.t(MessageId.SPIES_WERE) if len(spies) > 1 else self.t(MessageId.SPY_WAS)
        print(f"{label}: {', '.join(p.name for p in spies)}")
        print(f"{self.t(MessageId.YOUR_WORD)}: {session.word}")
        print(f"{self.t(MessageId.CATEGORY)}: {session.category}")
        print(f"Random Seed: {self.config.random_seed}")

        command = await self.ask(f"[r] {self.t(MessageId.RESET_GAME)}, [q] quit> ")
        if command in ("q", "quit"):
            return False
        if command == "r":
            session.reset_game()
        return True


def main():
    """Entry point for playing a game in the terminal."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play Spy Word on one shared terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                  # Use default config
  python main.py --config configs/default.yaml    # Use a YAML config
  python main.py --spies 2 --round-seconds 180    # Two spies, three minute rounds
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=os.getenv("SPYWORD_CONFIG"),
        help="Path to YAML configuration file (default: $SPYWORD_CONFIG, else built-in defaults)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible word and spy selection"
    )
    parser.add_argument(
        "--spies",
        type=int,
        default=None,
        help="Number of spies (1 or 2). Overrides config file setting."
    )
    parser.add_argument(
        "--round-seconds",
        type=int,
        default=None,
        help="Length of the discussion countdown in seconds. Overrides config file setting."
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        if args.seed is not None:
            config.random_seed = args.seed
        if args.spies is not None:
            config.spy_count = args.spies
        if args.round_seconds is not None:
            config.round_seconds = args.round_seconds
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    game = SpyWordGame(config=config)
    print(game.t(MessageId.TITLE))
    print(game.t(MessageId.SUBTITLE))
    print("=" * 60)
    if args.config:
        print(f"Using config: {args.config}")

    try:
        asyncio.run(game.run())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
