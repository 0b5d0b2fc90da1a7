from pathlib import Path
from setuptools import setup, find_packages

README = (Path(__file__).parent / "README.md").read_text(encoding="utf-8")


setup(
    name="Imbalance-Aug",
    version="1.0.0",
    description="Ratio-driven oversampling (random oversampling, ROSE, SMOTE) for imbalanced tabular classification",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Scientific/Engineering :: Information Analysis",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.22",
        "pandas>=1.4",
        "scipy>=1.8",
        "scikit-learn>=1.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
