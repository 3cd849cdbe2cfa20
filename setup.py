"""
Setup script for resume-layout project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="resume-layout",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["version"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "playwright>=1.40",
        "python-dotenv>=1.0",
        "requests>=2.31",
        "tenacity>=8.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.25",
        ],
    },
)
