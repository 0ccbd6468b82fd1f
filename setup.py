from setuptools import setup, find_packages

setup(
    name="cragsync",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas",
        "Unidecode",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cragsync=cragsync.cli:main",
        ],
    },
    description="A tool for comparing a theCrag ascent export to a manual climbing logbook",
    python_requires=">=3.7",
)
