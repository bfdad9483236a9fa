import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_input import handle_event
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import UniformRandom
from tetris_session import Session
from tetris_timer import PygameTimer


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(message)s")
    pygame.init()

    timer = PygameTimer()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, timer.event_type])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    session = Session(timer=timer, rng=UniformRandom(CONFIG["SEED"]), width=dims.cols, height=dims.rows)
    logging.info(f"[Main] Started {dims.cols}x{dims.rows} board, seed={CONFIG['SEED']}")

    while True:
        clock.tick(CONFIG["TARGET_FPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                timer.disarm()
                pygame.quit(); sys.exit()
            if e.type == timer.event_type:
                timer.dispatch(e)
            else:
                handle_event(session, e)

        render.draw(screen, session.snapshot(), session.ghost_position())
        pygame.display.flip()


if __name__ == '__main__':
    main()
