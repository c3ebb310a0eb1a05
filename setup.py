from setuptools import setup, find_namespace_packages

setup(
    name="massacremap",
    version="0.1.0",
    description="Data backend for a dashboard mapping historical massacres: CSV parsing, filtering, search and statistics",
    packages=find_namespace_packages(include=["massacremap", "massacremap.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=2.0.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "pydantic>=2.0.0",
        "requests>=2.31.0",
        "geopy>=2.4.0",
        "python-dateutil>=2.8.0",
        "click>=8.1.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "massacremap=massacremap.cli:main",
        ],
    },
)
