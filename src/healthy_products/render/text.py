from __future__ import annotations

from typing import List

from .views import MenuView, PauseOverlayView, PlayView, RenderState

GLYPHS = {
    "wall": '#',
    "floor": '.',
    "gate": 'G',
    "healthy": '+',
    "unhealthy": '-',
    "player": '@',
}


def hud_line(view: PlayView) -> str:
    return f"Score: {view.score} | Level: {view.level} | Items left: {len(view.items)}"


def render_play(view: PlayView) -> List[str]:
    walls = set(view.walls)
    rows = [
        [GLYPHS["wall"] if (x, y) in walls else GLYPHS["floor"] for x in range(view.width)]
        for y in range(view.height)
    ]
    gx, gy = view.gate
    rows[gy][gx] = GLYPHS["gate"]
    for item in view.items:
        rows[item.y][item.x] = GLYPHS["healthy"] if item.is_healthy else GLYPHS["unhealthy"]
    px, py = view.player
    rows[py][px] = GLYPHS["player"]
    return [hud_line(view)] + [''.join(r) for r in rows]


def render_lines(state: RenderState) -> List[str]:
    """Render a RenderState as plain text lines."""
    if isinstance(state, MenuView):
        return [state.title, ""] + [f"Press {n} for Level {n}" for n in state.levels]
    if isinstance(state, PauseOverlayView):
        return render_play(state.previous) + ["", "Game Paused", "Press R to Resume", "Press M for Main Menu"]
    return render_play(state)
