import os

from setuptools import find_packages, setup

setup(
    name="with-validations",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    author="with_validations Contributors",
    description="Declare option schemas once and resolve validated options per call",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
