"""
Setup configuration for the Black-Scholes Pricing Pipeline.

References:
    Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate
    Liabilities. Journal of Political Economy, 81(3), 637-654.
    Haug, E. G. (2007). The Complete Guide to Option Pricing Formulas,
    2nd ed. McGraw-Hill.
"""
from setuptools import setup, find_packages

setup(
    name="black-scholes-pipeline",
    version="1.0.0",
    author="Jose Orlando Bobadilla Fuentes",
    description="Black-Scholes price, delta and gamma behind a Source-Transform-Sink pipeline",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=["numpy>=1.24.0", "scipy>=1.10.0", "pandas>=2.0.0"],
    extras_require={
        "dev": ["pytest>=7.4.0", "black", "flake8"],
    },
)
