from setuptools import setup, find_packages

setup(
    name="russian_fish_core",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "russian-fish=fish_core.cli:main",
        ],
    },
    author="Russian Fish Team",
    description="Russian Fish card game rule engine and terminal client",
    python_requires=">=3.10",
)
