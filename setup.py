from setuptools import setup, find_packages

setup(
    name="saucedemo-e2e",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "playwright>=1.45.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "structlog>=24.1.0"
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0"
        ]
    },
    python_requires=">=3.9",
)
