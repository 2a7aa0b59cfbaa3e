import raytracer as rt
from raytracer.utils import logger, init_logger, save_image
from raytracer.tracer import ChunkStrategy


def build_scene(extent):
    """Две сферы над «землёй», свет сверху справа."""
    return (
        rt.TracerBuilder(extent)
        .rays(4)
        .reflects(4)
        .threads(4)
        .strategy(ChunkStrategy.RANDOM)
        .light(rt.Light(rt.Vec3(2.0, 3.0, -1.0)))
        .model(rt.Sphere("ground", rt.Vec3(0.0, -5000.2, 0.0), 5000.0, rt.Color.GREY, 0.1))
        .model(rt.Sphere("mirror", rt.Vec3(0.0, 0.2, 1.0), 0.3, rt.Color.WHITE, 0.9))
        .model(rt.Sphere("blue", rt.Vec3(0.6, 0.1, 0.9), 0.2, rt.Color.BLUE, 0.2))
        .background(lambda ray: rt.Color(0.1, 0.1, 0.3 + 0.3 * ray.direction.y, 1.0))
        .build()
    )


if __name__ == "__main__":
    init_logger()
    logger.info("Starting minimal example...")

    extent = rt.ImageExtent2D(200, 100)
    tracer = build_scene(extent)

    # Хост‑цикл: update() раз в «кадр», пока есть работа
    frames = 0
    while tracer.update():
        frames += 1
    logger.info(f"Done in {frames} frames")

    save_image(tracer.bytes(), tracer.extent(), "minimal_example.png")
