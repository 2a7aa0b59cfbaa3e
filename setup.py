# setup.py
from setuptools import setup, find_packages

setup(
    name="raytracer",
    version="0.1.0",
    description="Progressive chunked multithreaded ray tracer",
    packages=find_packages(include=["raytracer", "raytracer.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "glfw>=2.5.0",
        "PyOpenGL>=3.1.5",
        "Pillow>=9.0.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "raytracer=raytracer.app:main",
        ],
    },
)
