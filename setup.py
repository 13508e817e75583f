from setuptools import setup, find_packages

setup(
    name="pyrcctakeoff",
    version="0.1.0",
    description="RCC quantity takeoff, bar bending schedule costing and multi-standard compliance checks",
    author="HST.AI Engineering",
    author_email="ha.nguyen@hydrostructai.com",
    packages=find_packages(include=["src", "src.*"]),
    package_data={
        "src": [
            "data/standards/*.yaml",
            "data/standards/codes/*.yaml",
        ],
    },
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
