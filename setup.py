from setuptools import setup, find_packages

setup(
    name="sweeper_engine",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "sweeper": ["levels.yaml"]
    },
    install_requires=[
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "sweeper-stats=evaluation.board_stats:main"
        ]
    },
)
