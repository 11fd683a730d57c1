# setup.py
from setuptools import setup, find_packages

setup(
    name="volray",
    version="1.0.0",
    description="Ray tracing with volumetric light",
    packages=find_packages(include=["volray", "volray.*"]),
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
        "console_scripts": ["volray=volray.__main__:main"],
    },
)
