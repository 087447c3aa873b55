from setuptools import find_packages, setup


setup(
    name="decomment",
    version="1.2.0",
    description="Strip comments from JS/TS and other source trees without touching strings or regex literals",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "pathspec>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["decomment=decomment.cli:main"],
    },
)
