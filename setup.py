# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- STATE & CONFIG ---
    "pydantic>=2.0.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",

    # --- PRESENTATION ---
    "rich>=13.0.0",
]

setup(
    name="BlogSpace",
    version="0.3.0",
    description="BlogSpace client-side blog state layer",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        # --- TESTS---
        "test": [
            "pytest-asyncio>=0.23",
            "pytest",
        ],
    },
    python_requires=">=3.11",
)
