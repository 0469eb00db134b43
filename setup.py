"""Setup configuration for VM Inventory Browser package."""

from setuptools import setup, find_packages

setup(
    name="vm-inventory-browser",
    version="1.0.0",
    description="Faceted VM inventory browser for migration assessment reports",
    author="Alex",
    author_email="",
    packages=find_packages(include=["src", "src.*", "config", "config.*", "app", "app.*"]),
    package_data={"config": ["*.yaml"]},
    python_requires=">=3.11",
    install_requires=[
        "pandas>=2.1.0",
        "streamlit>=1.40.0",
        "plotly>=5.18.0",
        "httpx>=0.26.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0",
        "tenacity>=8.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
)
