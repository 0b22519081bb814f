import logging
import re
import subprocess
from pathlib import Path
from typing import List

from setuptools import setup, find_packages

logger = logging.getLogger(__name__)
console_handler = logging.StreamHandler()

logger.addHandler(console_handler)
logger.setLevel(logging.DEBUG)


def read_requirements():
    """Read install requirements, installing VCS/option lines directly."""
    with open("./requirements.txt") as f:
        install_requires = f.read().splitlines()

    return check_requirements(install_requires)


def check_requirements(install_requires: List[str]):
    direct_installs = []
    for idx, package in enumerate(install_requires):
        if "git" in package or "--" in package:
            result = subprocess.run(
                f"pip install {package}", shell=True, capture_output=True, text=True
            )
            logger.info(f"{result.stdout}")
            if result.stderr != "":
                logger.error(f"{result.stderr}")
            direct_installs.append(idx)
    for idx in direct_installs:
        install_requires[idx] = ""
    return [x.strip() for x in install_requires if x.strip() and not x.startswith("#")]


def get_version():
    file = Path("./weekly_schedule_bot/__init__.py")
    return re.search(
        r'^__version__ *= *[\'"]([^\'"]*)[\'"]', file.read_text(encoding="utf-8"), re.M
    )[1]


setup(
    name="weekly_schedule_bot",
    version=get_version(),
    description="Telegram bot telling odd and even university weeks on the Jalali calendar",
    zip_safe=False,
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    install_requires=read_requirements(),
    extras_require={
        "tests": ["pytest>=7.4", "httpx>=0.25"],
    },
    entry_points={
        "console_scripts": [
            "weekly-schedule-bot=weekly_schedule_bot.__main__:main",
        ],
    },
)
