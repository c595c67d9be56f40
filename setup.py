from os import path
from setuptools import find_packages, setup

this_directory = path.abspath(path.dirname(__file__))

exec(open(path.join(this_directory, "beancounter", "version.py")).read())

with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="beancounter",
    version=__version__,
    description="Bean counter (Galton box) step simulation",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.8",
    install_requires=[
        "matplotlib",
        "numpy",
        "tqdm",
    ],
    extras_require={
        "dev": [
            "autoflake",
            "black",
            "flake8",
            "isort",
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": ["beancounter=beancounter.main:main"],
    },
    dependency_links=[],
)
