from setuptools import setup

with open("talk2m/version.py") as f:
    exec(f.read())

setup(
    name="python-talk2m",
    version=__version__,  # type: ignore # noqa: F821
    description="Python API for Talk2M DMWeb and M2Web authentication",
    url="https://github.com/python-talk2m/python-talk2m",
    author="",
    author_email="",
    license="GPLv3",
    packages=["talk2m"],
    install_requires=["asyncclick", "mashumaro", "orjson"],
    extras_require={
        "rich": ["rich"],
        "test": ["pytest", "pytest-asyncio", "pytest-mock"],
    },
    python_requires=">=3.11",
    entry_points={"console_scripts": ["talk2m=talk2m.cli:cli"]},
    zip_safe=False,
)
