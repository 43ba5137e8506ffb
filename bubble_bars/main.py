import argparse
import logging
import random

import pygame

from bubble_bars.animator import Phase, SortAnimator
from bubble_bars.config import DEFAULT_CONFIG, VisualizerConfig
from bubble_bars.errors import ConfigError
from bubble_bars.model import BarModel
from bubble_bars.renderer import render
from bubble_bars.sound import SAMPLE_RATE, SoundEngine
from bubble_bars.strategies import get_strategy

logger = logging.getLogger(__name__)


# ============================================================================
# Main Application
# ============================================================================
class SortVisualizer:
    def __init__(self, config: VisualizerConfig = DEFAULT_CONFIG, values=None, strategy="bubble"):
        self.config = config.validate()

        if config.sound:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
        pygame.init()
        self.screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
        pygame.display.set_caption("Bubble Sort Visualization")
        self.clock = pygame.time.Clock()
        self.running = True

        # Data and animator
        if values is None:
            self.model = BarModel.random(config.bar_count, config.min_value, config.max_value,
                                         random.Random(config.seed))
        else:
            self.model = BarModel(values)
        self.animator = SortAnimator(self.model, config, get_strategy(strategy))
        self.frames = self.animator.frames()
        self.snapshot = self.animator.snapshot()
        self.bars = []

        # Audio
        self.sound = SoundEngine(config)
        self.comparisons_heard = 0
        self.fanfare_played = False

        logger.info("sorting %d bars: %s", len(self.model), list(self.model.values))

    def handle_events(self):
        """Process window events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                # reopen at the new size, bars are laid out against it on the next draw
                self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def update(self):
        """Advance the animation by one suspension point"""
        self.snapshot = next(self.frames, None) or self.animator.snapshot()
        self.play_audio()

    def play_audio(self):
        if self.animator.comparisons != self.comparisons_heard and self.snapshot.compare_a is not None:
            self.comparisons_heard = self.animator.comparisons
            a, b = self.snapshot.compare_a, self.snapshot.compare_b
            self.sound.play_compare(max(self.snapshot.values[a], self.snapshot.values[b]))
        if self.snapshot.phase is Phase.DONE and not self.fanfare_played:
            self.fanfare_played = True
            self.sound.play_fanfare()

    def draw(self):
        self.bars = render(self.screen, self.snapshot, self.config)
        pygame.display.flip()

    def run(self):
        """Main loop"""
        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.update()
            self.draw()
            self.clock.tick(self.config.fps)

        # a swap still in flight is dropped, not committed
        self.frames.close()
        pygame.quit()


# ============================================================================
# Entry Point
# ============================================================================
def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Bubble Sort Visualization")
    parser.add_argument('--bars', type=int, help='Number of bars')
    parser.add_argument('--values', nargs='+', type=int, help='Provide list of integers to sort')
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument('--delay', type=int, help='Pause after every step in ms')
    parser.add_argument('--swap-time', type=int, help='Swap animation duration in ms')
    parser.add_argument('--fps', type=int, help='Frame rate cap')
    parser.add_argument('--width', type=int, help='Initial window width')
    parser.add_argument('--height', type=int, help='Initial window height')
    parser.add_argument('--mute', action='store_true', help='Disable sound')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every swap')
    return parser, parser.parse_args(argv)


def build_config(args) -> VisualizerConfig:
    return DEFAULT_CONFIG.with_overrides(
        bar_count=len(args.values) if args.values else args.bars,
        seed=args.seed,
        step_delay=args.delay / 1000 if args.delay is not None else None,
        swap_duration=args.swap_time / 1000 if args.swap_time is not None else None,
        fps=args.fps,
        width=args.width,
        height=args.height,
        sound=False if args.mute else None,
    )


def main(argv=None):
    parser, args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
        if args.values and min(args.values) < 1:
            raise ConfigError("values must be positive integers")
    except ConfigError as e:
        parser.error(str(e))

    app = SortVisualizer(config, values=args.values)
    app.run()
    return 0


if __name__ == "__main__":
    main()
