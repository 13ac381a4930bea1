# setup.py
from setuptools import setup, find_packages

setup(
    name="ueval",
    version="0.1.0",
    description="Embeddable atom-tree expression evaluator for reactive condition/action rules",
    packages=find_packages(include=["ueval", "ueval.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["ueval=ueval.__main__:main"],
    },
    zip_safe=False,
)
