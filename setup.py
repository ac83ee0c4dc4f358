from setuptools import setup, find_packages

setup(
    name="SampSize",
    version="0.1.0",
    packages=find_packages(include=["sampsize", "sampsize.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
    ],
    extras_require={
        "test": [
            "pytest",
            "scipy",
        ],
    },
    python_requires=">=3.8",
    author="SampSize Developers",
    description="Sample size estimation for two-arm studies with dropout and cluster adjustments",
)
