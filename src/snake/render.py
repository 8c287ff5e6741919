# render.py
from typing import List, Tuple
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, GRID_SIZE, HUD_HEIGHT,
    BG, BOARD, GREEN, HEAD, RED, GOLD, TEXT,
)
from .machine import GameState, Machine

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, HUD_HEIGHT + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect.inflate(-2, -2), border_radius=4)

def wrap_text(font: pygame.font.Font, text: str, max_width: int) -> List[str]:
    lines, line = [], ""
    for word in text.split():
        cand = f"{line} {word}".strip()
        if line and font.size(cand)[0] > max_width:
            lines.append(line)
            line = word
        else:
            line = cand
    if line:
        lines.append(line)
    return lines

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines: List[str]) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT - HUD_HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 170))  # RGBA
    screen.blit(overlay, (0, HUD_HEIGHT))

    cy = HUD_HEIGHT + (HEIGHT - HUD_HEIGHT) // 2 - 14 * len(lines)
    for i, text in enumerate(lines):
        surf = font.render(text, True, TEXT)
        screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + i * 28)))

# ---------- Screens ----------
def draw_board(screen: pygame.Surface, font: pygame.font.Font, machine: Machine) -> None:
    rnd = machine.round
    screen.fill(BG)
    pygame.draw.rect(screen, BOARD, pygame.Rect(0, HUD_HEIGHT, GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE))
    # food
    draw_cell(screen, rnd.food[0], rnd.food[1], RED)
    # snake
    for x, y in rnd.snake[1:]:
        draw_cell(screen, x, y, GREEN)
    draw_cell(screen, rnd.head[0], rnd.head[1], HEAD)
    # score
    txt = font.render(f"Score: {rnd.score}", True, TEXT)
    screen.blit(txt, (8, 10))
    hs = font.render(f"High Score: {machine.high_score}", True, GOLD)
    screen.blit(hs, (WIDTH - hs.get_width() - 8, 10))

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, machine: Machine) -> None:
    draw_board(screen, font, machine)

    state = machine.state
    if state is GameState.HOME:
        lines = ["GRID SNAKE", ""]
        if machine.fact_ready:
            lines += wrap_text(font, machine.fact, WIDTH - 60)
            lines += ["", "Press ENTER to play"]
        else:
            lines.append("Loading a fun fact...")
        draw_overlay(screen, font, lines)
    elif state is GameState.IDLE:
        draw_overlay(screen, font, ["Choose difficulty", "", "1  Easy", "2  Medium", "3  Hard"])
    elif state is GameState.COUNTDOWN:
        draw_overlay(screen, font, [machine.countdown_label or ""])
    elif state is GameState.PAUSED:
        draw_overlay(screen, font, ["Paused", "Press SPACE to resume"])
    elif state is GameState.GAME_OVER:
        draw_overlay(screen, font, [
            "GAME OVER",
            f"Your Score: {machine.round.score}",
            "Press R to play again",
        ])
