# raytracer/app.py
# -*- coding: utf-8 -*-
"""
Хост‑приложение трассировщика.

* Читает конфиг (JSON), собирает демонстрационную сцену.
* Раз в «кадр» вызывает Tracer.update(); без окна – пока кадр не готов.
* capture() сохраняет текущий буфер в PNG.
"""
import argparse
import math
import sys

from raytracer.core.color import Color
from raytracer.core.extent import ImageExtent2D
from raytracer.core.timer import Timer
from raytracer.math.vec3 import Vec3
from raytracer.scene.camera import Camera
from raytracer.scene.light import Light
from raytracer.tracer import ChunkStrategy, Ray, Sphere, TracerBuilder
from raytracer.utils import Config, init_logger, logger, save_image


def background_color(ray: Ray) -> Color:
    """Небо: градиент по направлению луча."""
    dot_x = ray.direction.dot(Vec3.X)
    dot_y = ray.direction.dot(Vec3.Y)

    return Color(0.2 * dot_x, 0.5 + 0.5 * dot_y, 1.0, 1.0)


def demo_scene(builder: TracerBuilder) -> TracerBuilder:
    """Земля + три шара, один белый свет."""
    return (
        builder
        .light(Light(Vec3(0.0, 2.0, -2.0), Color.WHITE))
        .model(Sphere("ground", Vec3(0.0, -5000.2, 0.0), 5000.0, Color.GREY, 0.1))
        .model(Sphere("black", Vec3(0.0, 0.5, 1.2), 0.3, Color.BLACK, 0.8))
        .model(Sphere("green", Vec3(-0.5, 0.2, 0.7), 0.3, Color.GREEN, 0.4))
        .model(Sphere("red", Vec3(0.5, 0.2, 0.7), 0.3, Color.RED, 0.25))
        .background(background_color)
    )


def build_tracer(cfg: Config, extent: ImageExtent2D):
    """Трассировщик по секции "tracer" конфига."""
    tcfg = cfg["tracer"]

    camera = Camera.perspective(
        Vec3(0.0, 0.2, 0.0),
        extent.aspect(),
        math.radians(45.0),
        0.1,
        100.0,
        math.radians(-90.0),
        0.0,
        Vec3(0.0, 1.0, 0.0),
    )

    builder = (
        TracerBuilder(extent)
        .camera(camera)
        .rays(int(tcfg.get("rays", 10)))
        .reflects(int(tcfg.get("reflects", 10)))
        .threads(int(tcfg.get("threads", 1)))
        .strategy(ChunkStrategy.from_name(tcfg.get("strategy", "box")))
    )

    return demo_scene(builder).build()


class Application:
    """Без окна: update() в цикле + сохранение картинки."""

    def __init__(self, cfg: Config):
        self.cfg = cfg
        win_cfg = self.cfg["window"]
        self.extent = ImageExtent2D(int(win_cfg.get("width", 320)),
                                    int(win_cfg.get("height", 180)))
        self.title = win_cfg.get("title", "Raytracer")
        self.tracer = build_tracer(self.cfg, self.extent)
        self.timer = Timer()
        self.frames = 0

    # -----------------------------------------------------------------
    def frame(self) -> bool:
        """Один кадр хоста. True – буфер изменился, текстуру надо обновить."""
        self.timer.tick()
        self.frames += 1
        return self.tracer.update()

    def run(self, max_frames: int = 0) -> int:
        """Крутить кадры, пока трассировщику есть что считать."""
        logger.info(f"[App] Rendering {self.extent.width}x{self.extent.height}")
        while self.frame():
            if max_frames and self.frames >= max_frames:
                break
        logger.info(f"[App] Stopped after {self.frames} frames")
        return self.frames

    def capture(self, path=None):
        """Снимок текущего буфера (как клавиша P в окне)."""
        target = path or self.cfg.get("output", "raytracer.png")
        return save_image(self.tracer.bytes(), self.tracer.extent(), target)


# -----------------------------------------------------------------
def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Progressive chunked ray tracer")
    parser.add_argument("--config", default="config.json", help="Path to the JSON config (default: config.json)")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--rays", type=int, help="Rays per pixel")
    parser.add_argument("--reflects", type=int, help="Maximum number of bounces")
    parser.add_argument("--threads", type=int, help="Chunks computed in parallel per frame")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ChunkStrategy],
        help="How the image is split into chunks",
    )
    parser.add_argument("--output", help="Where to save the rendered image")
    parser.add_argument("--window", action="store_true", help="Show progress in a glfw window")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def apply_arguments(cfg: Config, args: argparse.Namespace) -> None:
    """Параметры командной строки перекрывают конфиг (без записи на диск)."""
    for key in ("width", "height"):
        value = getattr(args, key)
        if value is not None:
            cfg["window"][key] = value
    for key in ("rays", "reflects", "threads", "strategy"):
        value = getattr(args, key)
        if value is not None:
            cfg["tracer"][key] = value
    if args.output:
        cfg.data["output"] = args.output


def main(argv=None) -> int:
    args = parse_arguments(argv)
    init_logger("DEBUG" if args.verbose else "INFO")

    cfg = Config(args.config)
    apply_arguments(cfg, args)

    try:
        app = Application(cfg)
    except ValueError as exc:
        logger.error(f"[App] Invalid configuration: {exc}")
        return 2

    if args.window:
        from raytracer.window import Viewer
        Viewer(app).run()
    else:
        app.run()

    try:
        app.capture()
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
