"""
Game session: the exploration and combat state machine.

The session owns the hero and at most one enemy. Each call to step() reads a
single command and resolves one turn of the current state:

- EXPLORING: advance (maybe meeting an enemy), rest, or quit.
- COMBAT: attack, defend or flee; the enemy answers unless it died, the hero
  escaped, or the command was not understood.
- GAME_OVER: terminal.
"""

from __future__ import annotations

from catchery import log_debug
from pydantic import BaseModel

from knights_quest.core.config import GameConfig
from knights_quest.core.constants import (
    CombatCommand,
    ExploreCommand,
    GameState,
    parse_command,
)
from knights_quest.core.rng import DiceRoller, RandomSource, roll_percent
from knights_quest.entities.enemy import Enemy, EnemyCatalog, load_catalog
from knights_quest.entities.player import Player
from knights_quest.ui.io import CommandReader, LineWriter

from .events import EncounterEvent, StateChangeEvent, TurnContext, TurnLog

EXPLORE_PROMPT = "What do you want to do? (W: Advance, Q: Rest, S: Quit)"
COMBAT_PROMPT = "What will you do? (E: Attack, Q: Defend, W: Flee)"
INVALID_COMMAND = "Invalid command. Try again."


class SessionSnapshot(BaseModel):
    """Observable state of a session at a point in time."""

    state: GameState
    turn: int
    player_health: int
    player_defending: bool
    enemy_name: str | None = None
    enemy_health: int | None = None


class GameSession:
    """Manages the main loop of the adventure.

    The random source, the command reader and the line writer are injected,
    so a session can run headlessly and deterministically.
    """

    def __init__(
        self,
        player: Player,
        reader: CommandReader,
        writer: LineWriter,
        rng: RandomSource | None = None,
        catalog: EnemyCatalog | None = None,
        config: GameConfig | None = None,
    ) -> None:
        """Initialize the session in the exploring state.

        Args:
            player (Player): The hero, owned by the session.
            reader (CommandReader): Where commands come from.
            writer (LineWriter): Where the story goes.
            rng (RandomSource | None): Dice; seeded from entropy if omitted.
            catalog (EnemyCatalog | None): Enemies to meet; the shipped catalog if omitted.
            config (GameConfig | None): Random-event table; defaults if omitted.

        """
        self.player: Player = player
        self.reader: CommandReader = reader
        self.rng: RandomSource = rng if rng is not None else DiceRoller()
        self.catalog: EnemyCatalog = catalog if catalog is not None else load_catalog()
        self.config: GameConfig = config if config is not None else GameConfig()
        self.log: TurnLog = TurnLog(writer)
        self.ctx: TurnContext = TurnContext(rng=self.rng, log=self.log, config=self.config)
        self._state: GameState = GameState.EXPLORING
        self._current_enemy: Enemy | None = None

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_enemy(self) -> Enemy | None:
        return self._current_enemy

    def is_over(self) -> bool:
        return self._state == GameState.GAME_OVER

    def snapshot(self) -> SessionSnapshot:
        enemy = self._current_enemy
        return SessionSnapshot(
            state=self._state,
            turn=self.log.turn,
            player_health=self.player.health,
            player_defending=self.player.is_defending,
            enemy_name=enemy.name if enemy else None,
            enemy_health=enemy.health if enemy else None,
        )

    # ========================================================================
    # MAIN LOOP
    # ========================================================================

    def start(self, max_turns: int | None = None) -> GameState:
        """Runs the adventure until the game is over.

        Args:
            max_turns (int | None): Stop after this many turns, even if the
                game is not over. None means no limit.

        Returns:
            GameState: The state the session stopped in.

        """
        say = self.log.say
        say(f"Welcome, Knight {self.player.name}, to your adventure!", style="bold blue")
        say("Use 'w' to advance and explore.")
        say("In combat, use 'e' to attack, 'q' to defend, or 'w' to try to flee.")
        say()
        say("Press Enter to begin...")
        self.reader.read_command("")

        turns = 0
        while not self.is_over():
            if max_turns is not None and turns >= max_turns:
                log_debug(f"Turn limit reached ({max_turns}), stopping the session")
                return self._state
            self.step()
            turns += 1

        say()
        say("Game over. Thanks for playing!", style="bold")
        return self._state

    def step(self) -> GameState:
        """Resolves one turn of the current state and returns the new state."""
        self.log.next_turn()
        if self._state == GameState.EXPLORING:
            self.explore()
        elif self._state == GameState.COMBAT:
            self.combat_turn()
        return self._state

    # ========================================================================
    # EXPLORING
    # ========================================================================

    def explore(self) -> None:
        """Handles one exploration turn."""
        say = self.log.say
        say()
        say("--- Exploring ---", style=GameState.EXPLORING.color)
        self.player.display_stats(self.ctx)
        say(EXPLORE_PROMPT)
        command = parse_command(ExploreCommand, self.reader.read_command("> "))

        if command == ExploreCommand.ADVANCE:
            say("You advance along unknown paths...")
            roll = roll_percent(self.rng)
            log_debug(f"Encounter roll {roll} (needs < {self.config.encounter_chance})")
            if roll < self.config.encounter_chance:
                self._encounter_enemy()
            else:
                say("Nothing interesting for now. You keep walking.")
                if not self.player.is_full_health():
                    self.player.heal(self._roll_range(self.config.wander_heal), self.ctx)
        elif command == ExploreCommand.REST:
            say("You find a safe place to rest and recover.")
            if not self.player.is_full_health():
                self.player.heal(self._roll_range(self.config.rest_heal), self.ctx)
            else:
                say("Your health is already full. You wait patiently.")
        elif command == ExploreCommand.QUIT:
            say("You decide to end your adventure here. Farewell, Knight.")
            self._transition(GameState.GAME_OVER)
        else:
            say(INVALID_COMMAND, style="yellow")

    def _encounter_enemy(self) -> None:
        template = self.catalog.draw(self.rng)
        self._current_enemy = template.spawn()
        self.log.say()
        self.log.say("--- ENCOUNTER! ---", style=GameState.COMBAT.color)
        self.log.record(
            EncounterEvent(
                enemy=template.name,
                message=f"You found a {template.name}! ({template.description})",
            )
        )
        self._transition(GameState.COMBAT)

    # ========================================================================
    # COMBAT
    # ========================================================================

    def combat_turn(self) -> None:
        """Handles one combat round: the hero acts, then the enemy answers."""
        say = self.log.say
        enemy = self._current_enemy
        if enemy is None or not enemy.is_alive():
            say("There is no enemy to fight. The combat is over.")
            self._end_encounter()
            return

        say()
        say("--- COMBAT! ---", style=GameState.COMBAT.color)
        self.player.display_stats(self.ctx)
        enemy.display_stats(self.ctx)
        say(COMBAT_PROMPT)
        command = parse_command(CombatCommand, self.reader.read_command("> "))

        # Hero's turn.
        if command == CombatCommand.ATTACK:
            self.player.attack(enemy, self.ctx)
        elif command == CombatCommand.DEFEND:
            self.player.defend(self.ctx)
        elif command == CombatCommand.FLEE:
            say("You try to flee...")
            roll = roll_percent(self.rng)
            log_debug(f"Flee roll {roll} (needs < {self.config.flee_chance})")
            if roll < self.config.flee_chance:
                say(f"You escaped from the {enemy.name}!", style="bold green")
                self._end_encounter()
                return
            say(f"You failed to flee and the {enemy.name} catches up with you!")
        else:
            # The whole round is skipped, the enemy does not act either.
            say(INVALID_COMMAND, style="yellow")
            return

        if not enemy.is_alive():
            self._win_encounter(enemy)
            return

        # Enemy's turn.
        enemy.attack(self.player, self.ctx)

        if not self.player.is_alive():
            say()
            say(f"{self.player.name} was defeated in combat!", style="bold red")
            self._current_enemy = None
            self._transition(GameState.GAME_OVER)

    def _win_encounter(self, enemy: Enemy) -> None:
        say = self.log.say
        say()
        say(f"You defeated the {enemy.name}!", style="bold green")
        say("You recovered a little health for your victory!")
        self.player.heal(self._roll_victory_heal(), self.ctx)
        self._end_encounter()

    def _end_encounter(self) -> None:
        self._current_enemy = None
        self._transition(GameState.EXPLORING)

    # ========================================================================
    # HELPERS
    # ========================================================================

    def _roll_range(self, bounds: tuple[int, int]) -> int:
        return self.rng.next_in_range(*bounds)

    def _roll_victory_heal(self) -> int:
        cap = self.player.attack_power // self.config.victory_heal_divisor
        bonus = self.rng.next_in_range(0, cap - 1) if cap > 0 else 0
        return bonus + self.config.victory_heal_base

    def _transition(self, new_state: GameState) -> None:
        if new_state == self._state:
            return
        log_debug(
            f"State change: {self._state} -> {new_state}",
            {"turn": self.log.turn, "player_health": self.player.health},
        )
        self.log.record(StateChangeEvent(previous=self._state, current=new_state))
        self._state = new_state
