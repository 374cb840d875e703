# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fswalker",
    version="1.0.0",
    description="Depth-first filesystem traversal, name search, tree building and path-structure checks",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fswalker", "fswalker.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fswalker=fswalker.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
