# main.py
import argparse
import random

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG
from .audio import AudioPlayer
from .controls import map_key
from .facts import FactLoader
from .highscore import HighScoreStore
from .machine import Effect, FactLoaded, Tick, CountdownStep, Machine, new_machine, transition
from .render import draw_frame
from .scheduler import Scheduler, TICK, COUNTDOWN, sync_timers

TIMER_EVENTS = {
    TICK: Tick,
    COUNTDOWN: CountdownStep,
}


def apply(machine: Machine, event, now_ms: int, scheduler: Scheduler, audio: AudioPlayer,
          store: HighScoreStore, rng: random.Random) -> Machine:
    """Run one event through the machine, then its effects, then re-sync timers."""
    before = machine.state
    machine, effects = transition(machine, event, rng)

    for effect in effects:
        if effect is Effect.EAT_SOUND:
            audio.play_eat()
        elif effect is Effect.GAME_OVER_SOUND:
            audio.play_game_over()
        elif effect is Effect.SAVE_HIGH_SCORE:
            store.save(machine.high_score)

    if machine.state is not before:
        print(f"[GAME] {before.name} -> {machine.state.name} (score={machine.round.score})")
    sync_timers(scheduler, machine, now_ms)
    return machine


def run_timers(machine: Machine, now_ms: int, scheduler: Scheduler, audio: AudioPlayer,
               store: HighScoreStore, rng: random.Random) -> Machine:
    while True:
        name = scheduler.pop_due(now_ms)
        if name is None:
            return machine
        machine = apply(machine, TIMER_EVENTS[name](), now_ms, scheduler, audio, store, rng)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid snake.")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (default: random)")
    parser.add_argument("--highscore-file", type=str, default=CFG.highscore_path,
                        help="file holding the high score")
    parser.add_argument("--fact-url", type=str, default=CFG.fact_url,
                        help="fun-fact endpoint; without one a built-in fact is shown")
    parser.add_argument("--no-sound", action="store_true", help="disable sound effects")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    CFG.seed = args.seed
    CFG.highscore_path = args.highscore_file
    CFG.fact_url = args.fact_url
    CFG.sound = not args.no_sound

    rng = random.Random(CFG.seed)
    store = HighScoreStore(CFG.highscore_path)
    audio = AudioPlayer(enabled=CFG.sound)
    scheduler = Scheduler()

    facts = FactLoader(CFG.fact_prompt, CFG.fact_url, CFG.fact_timeout_s)
    facts.start()

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Grid Snake")
    clock = pygame.time.Clock()

    machine = new_machine(store.load())
    print(f"[GAME] High score: {machine.high_score}")
    running = True

    while running:
        now = pygame.time.get_ticks()

        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                mapped = map_key(event.key, machine.state)
                if mapped is not None:
                    machine = apply(machine, mapped, now, scheduler, audio, store, rng)
        if not running:
            break

        text = facts.poll()
        if text is not None:
            machine = apply(machine, FactLoaded(text), now, scheduler, audio, store, rng)

        # 2) update
        machine = run_timers(machine, now, scheduler, audio, store, rng)

        # 3) render
        draw_frame(screen, font, machine)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the scheduler

    audio.close()
    pygame.quit()

if __name__ == "__main__":
    main()
