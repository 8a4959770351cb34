"""Setup script for gym-crm package."""
from setuptools import setup, find_packages

setup(
    name="gym-crm",
    version="1.0.0",
    description="In-memory gym management storage with Clean Architecture",
    author="Craftsman Developer",
    packages=find_packages(include=["gym_crm", "gym_crm.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=6.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "isort>=5.12.0",
        ],
    },
)
