from setuptools import setup, find_packages

setup(
    name="glitcher",
    version="0.1.0",
    description="Seeded glitch effects for still images and animated GIFs",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "Pillow>=9.1",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "glitcher=glitcher.cli:main",
        ],
    },
)
