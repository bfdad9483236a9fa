"""Keyboard -> session command mapping"""
import pygame

KEYDOWN_COMMANDS = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_UP: "rotate",
    pygame.K_DOWN: "soft_drop_start",
    pygame.K_SPACE: "hard_drop",
    pygame.K_p: "toggle_pause",
    pygame.K_r: "reset",
}
KEYUP_COMMANDS = {
    pygame.K_DOWN: "soft_drop_stop",
}


def command_for(event, game_over=False):
    """Name of the Session method an input event maps to, or None."""
    if event.type == pygame.KEYDOWN:
        name = KEYDOWN_COMMANDS.get(event.key)
        # Once the game is over only a restart is accepted
        if game_over and name != "reset": return None
        return name
    if event.type == pygame.KEYUP:
        # Releases always pass so the held fast-drop state stays accurate
        return KEYUP_COMMANDS.get(event.key)
    return None


def handle_event(session, event) -> bool:
    name = command_for(event, session.state.is_game_over)
    if name is None: return False
    getattr(session, name)()
    return True
