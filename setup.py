# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirlevels",
    version="0.1.0",
    description="Recursive directory walker that prints a level-ordered listing of a directory tree",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirlevels", "dirlevels.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'dirlevels=dirlevels.main:main',  # Level-ordered listing via CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
    ],
)
