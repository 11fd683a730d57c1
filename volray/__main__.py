"""
Точка входа: python -m volray render|view
"""

import argparse
import sys

from volray.utils import logger, Config


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="volray",
        description="Ray tracing with volumetric light",
    )
    parser.add_argument("--config", default="config.json",
                        help="path to the JSON config (created if missing)")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="render a still image to a file")
    render.add_argument("-o", "--output", default="frame.png")
    render.add_argument("--width", type=_positive_int)
    render.add_argument("--height", type=_positive_int)
    render.add_argument("--samples", type=_positive_int)
    render.add_argument("--backend", choices=("python", "numba"))

    sub.add_parser("view", help="open the interactive viewer")
    return parser


def render_still(cfg: Config, args) -> int:
    from volray.math.vec3 import Vec3
    from volray.renderer import create_renderer
    from volray.scene import Camera, default_scene
    from volray.utils import save_image

    win_cfg = cfg.section("window")
    render_cfg = cfg.section("render")
    width = args.width if args.width is not None else win_cfg["width"]
    height = args.height if args.height is not None else win_cfg["height"]
    samples = args.samples if args.samples is not None else render_cfg["final_samples"]

    scene = default_scene()
    camera = Camera(Vec3(*cfg.section("camera")["position"]), width, height)
    renderer = create_renderer(args.backend or render_cfg["backend"],
                               width, height, render_cfg["max_distance"])
    image = renderer.render(scene, camera, samples)
    save_image(image, args.output)
    return 0


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = Config(args.config)

    if args.command == "render":
        return render_still(cfg, args)

    from volray.app import Application
    try:
        Application(config=cfg).run()
    except RuntimeError as exc:
        logger.error(f"[App] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
