import logging
import sys

import pygame

from tetris_config import CONFIG, load_config
from tetris_game import Game
from tetris_input import Command, InputTimer
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import SevenBag
from tetris_storage import HighScoreStore

log = logging.getLogger("tetris")

KEYMAP = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_x: Command.ROTATE_CW,
    pygame.K_z: Command.ROTATE_CCW,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_c: Command.HOLD,
    pygame.K_LSHIFT: Command.HOLD,
    pygame.K_RSHIFT: Command.HOLD,
    pygame.K_p: Command.PAUSE,
    pygame.K_ESCAPE: Command.PAUSE,
}


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def new_game(store):
    """A restart builds a fresh game and input timer instead of reusing them."""
    game = Game(bag=SevenBag(CONFIG["BAG_SEED"]), store=store)
    return game, InputTimer(game)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    if argv:
        load_config(argv[0])
        log.info("loaded config overrides from %s", argv[0])

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris — 7-bag, DAS, Hold")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)
    render = RenderAssets(dims, font, big_font, CONFIG["BOARD_WIDTH"], CONFIG["BOARD_HEIGHT"])
    clock = pygame.time.Clock()

    store = HighScoreStore()
    game, timer = new_game(store)

    while True:
        dt = clock.tick(60)
        now = pygame.time.get_ticks()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if game.current_piece is None:
                    # Any key starts the first game
                    game.init(); game.start(now)
                    continue
                if game.game_over:
                    if e.key == pygame.K_r:
                        game, timer = new_game(store)
                        game.init(); game.start(now)
                    continue
                if e.key == pygame.K_r:
                    game, timer = new_game(store)
                    game.init(); game.start(now)
                    continue
                cmd = KEYMAP.get(e.key)
                if cmd is not None:
                    timer.press(cmd)
            if e.type == pygame.KEYUP:
                cmd = KEYMAP.get(e.key)
                if cmd is not None:
                    timer.release(cmd)

        timer.update(dt)
        game.update(now)

        render.draw(screen, game.get_state(), game.get_ghost_piece())
        pygame.display.flip()


if __name__ == '__main__':
    main()
