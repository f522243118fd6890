import pathlib
from setuptools import setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

# This call to setup() does all the work
setup(
    name='hanabi_knowledge',
    version='0.1.0',
    description='Card knowledge tracking for the game of hanabi.',
    long_description_content_type="text/markdown",
    long_description=README,
    packages=['hanabi_knowledge'],
    license="MIT",
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["hanabi-knowledge=hanabi_knowledge.main:main"],
    },
)
