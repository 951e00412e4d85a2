# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional

from core.vector import Vector3
from geometry.scenes import SCENES
from renderer.config import QUALITY_PRESETS, CameraConfig, ConfigError, RenderConfig
from renderer.export import save_image
from renderer.parallel import RenderError, active_shares, render
from renderer.progress import TerminalProgress
from renderer.tone_mapping import TONE_MAP_METHODS

logger = logging.getLogger("lensray")

# Default viewpoint for each demo scene
SCENE_CAMERAS = {
    "random": CameraConfig(),
    "standard": CameraConfig(look_from=Vector3(-2, 2, 1), look_at=Vector3(0, 0, -1),
                             vfov=50.0, aperture=0.0),
    "camera-test": CameraConfig(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1),
                                vfov=90.0, aperture=0.0),
    "metals": CameraConfig(look_from=Vector3(0, 3, 9), look_at=Vector3(0, 0.5, 1.5),
                           vfov=40.0, aperture=0.1),
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lensray",
        description="Create a ray-traced image of a scene of spheres.",
    )
    parser.add_argument("output", nargs="?", default="image.ppm",
                        help="Output image path, .ppm, .png or .tga (default: image.ppm)")
    parser.add_argument("-W", "--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("-H", "--height", type=int, default=200, help="Image height in pixels (default: 200)")
    parser.add_argument("--samples", type=int, default=16, help="Samples per pixel (default: 16)")
    parser.add_argument("--threads", type=int, default=3, help="Number of render workers (default: 3)")
    parser.add_argument("--depth", type=int, default=None, help="Maximum bounce depth (default: 50)")
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS),
                        help="Quality preset, overrides --samples and --depth")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random", help="Scene to render (default: random)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible render")
    parser.add_argument("--processes", action="store_true",
                        help="Render in worker processes instead of threads")
    parser.add_argument("--tone-map", choices=TONE_MAP_METHODS, default="none",
                        help="Tone mapping applied before writing (default: none)")
    parser.add_argument("--no-progress", action="store_true", help="Do not draw progress bars")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RenderConfig:
    options = dict(seed=args.seed, use_processes=args.processes)
    if args.quality:
        return RenderConfig.from_preset(args.quality, args.width, args.height, args.threads, **options)
    config = RenderConfig(args.width, args.height, samples_per_pixel=args.samples,
                          workers=args.threads, **options)
    if args.depth is not None:
        config.max_depth = args.depth
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] [%(threadName)s] %(message)s",
    )

    try:
        config = build_config(args).validate()
        camera = SCENE_CAMERAS[args.scene].build(config.aspect_ratio)
        scene = SCENES[args.scene](random.Random(args.seed))
        workers = len(active_shares(config))

        logger.info("Creating %dx%d with %d samples and %d workers to %s",
                    config.width, config.height, config.samples_per_pixel, workers, args.output)
        with TerminalProgress(workers, disable=args.no_progress) as progress:
            image = render(scene, camera, config, on_progress=progress)
        save_image(image, args.output, tone_map=args.tone_map)
    except (ConfigError, RenderError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
