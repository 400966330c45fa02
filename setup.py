import os

from setuptools import find_packages, setup

setup(
    name="unravel",
    version="0.1.0",
    packages=find_packages(include=["unravel", "unravel.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Unravel Contributors",
    description="Composable decoders that validate untyped data into typed values "
    "with location-aware error reports",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
